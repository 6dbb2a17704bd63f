"""Collection name to type name conversion."""

from json_server_swagger.errors import InvalidCollectionNameError


def capitalize(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def derive_type_name(collection_name: str) -> str:
    """Turn a collection name into a singular, capitalized type name.

    One trailing 's' is dropped and the first character is upper-cased:
    'posts' -> 'Post', 'data' -> 'Data'. Irregular plurals are not handled,
    so 'news' becomes 'New'. Names that leave nothing behind ('' or 's')
    are rejected.
    """
    if not isinstance(collection_name, str):
        raise InvalidCollectionNameError(
            f"Collection name must be a string, got {type(collection_name).__name__}"
        )
    name = collection_name[:-1] if collection_name.endswith("s") else collection_name
    if not name:
        raise InvalidCollectionNameError(
            f"Collection name {collection_name!r} gives an empty type name",
            suggestion="Give every top-level key in the dataset a name other than '' or 's'.",
        )
    return capitalize(name)


def nested_type_name(parent_type_name: str, property_name: str) -> str:
    """Name for the definition of an object-valued property: Post + author -> PostAuthor."""
    return parent_type_name + capitalize(property_name)
