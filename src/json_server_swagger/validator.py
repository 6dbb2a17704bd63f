"""Reference checks for Swagger documents."""

from collections.abc import Iterator

from json_server_swagger.models import SwaggerDocument

DEFINITIONS_PREFIX = "#/definitions/"


def collect_refs(node) -> Iterator[str]:
    """Yield every `$ref` value found anywhere under `node`."""
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                yield value
            else:
                yield from collect_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from collect_refs(item)


def find_dangling_refs(document: SwaggerDocument | dict) -> list[str]:
    """Return the `$ref`s in paths and definitions that point to no definition.

    Each dangling ref is listed once, in order of first appearance.
    """
    if isinstance(document, SwaggerDocument):
        document = document.to_dict()
    definitions = document.get("definitions") or {}

    dangling: list[str] = []
    for section in ("paths", "definitions"):
        for ref in collect_refs(document.get(section) or {}):
            name = ref[len(DEFINITIONS_PREFIX):] if ref.startswith(DEFINITIONS_PREFIX) else None
            if name not in definitions and ref not in dangling:
                dangling.append(ref)
    return dangling
