"""Type definitions inferred from example records.

Each property of the exemplar maps to a Swagger property schema. Nested
objects get their own named definition (parent type name + capitalized
property name) and are referenced with `$ref`. Values that have no mapping
(booleans, arrays, null) are left out of the schema.
"""

import logging

from json_server_swagger.errors import ExemplarTooDeepError
from json_server_swagger.generator.naming import nested_type_name

logger = logging.getLogger(__name__)

MAX_NESTING_DEPTH = 32

INTEGER_SCHEMA = {"type": "integer", "format": "int64"}
NUMBER_SCHEMA = {"type": "number", "format": "double"}
STRING_SCHEMA = {"type": "string"}


def definition_ref(type_name: str) -> dict:
    return {"$ref": f"#/definitions/{type_name}"}


def synthesize_schema(
    definitions: dict[str, dict],
    type_name: str,
    exemplar: dict | None,
    _depth: int = 0,
) -> dict:
    """Register a definition for `type_name` inferred from `exemplar` and return it.

    An existing definition with the same name is replaced. A missing exemplar
    yields an object schema without properties.
    """
    if _depth > MAX_NESTING_DEPTH:
        raise ExemplarTooDeepError(
            f"Exemplar for {type_name} is nested more than {MAX_NESTING_DEPTH} objects deep",
            suggestion="Flatten the sample data or check it for self-references.",
        )

    properties: dict[str, dict] = {}
    for name, value in (exemplar or {}).items():
        prop = _property_schema(definitions, type_name, name, value, _depth)
        if prop is None:
            logger.warning("Unhandled type for %s.%s: %s", type_name, name, type(value).__name__)
            continue
        logger.debug("%s.%s ---> %r: %s", type_name, name, value, prop)
        properties[name] = prop

    type_def = {"type": "object", "properties": properties}
    definitions[type_name] = type_def
    return type_def


def _property_schema(
    definitions: dict[str, dict], type_name: str, name: str, value, depth: int
) -> dict | None:
    if isinstance(value, dict):
        nested = nested_type_name(type_name, name)
        synthesize_schema(definitions, nested, value, depth + 1)
        return definition_ref(nested)
    # bool is an int subclass but has no numeric schema here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return dict(INTEGER_SCHEMA)
    if isinstance(value, float):
        return dict(INTEGER_SCHEMA) if value.is_integer() else dict(NUMBER_SCHEMA)
    if isinstance(value, str):
        return dict(STRING_SCHEMA)
    return None
