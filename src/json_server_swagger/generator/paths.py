"""Path operations for a json-server collection.

Every collection gets `/<collection>` with `get` and `post`. List collections
also get `/<collection>/{id}` with `get`, `patch` and `put`. No `delete`
operation is described.
"""

from json_server_swagger.generator.schema import definition_ref

ERROR_RESPONSE = "ErrorResponse"

ID_PARAMETER = {
    "name": "id",
    "in": "path",
    "required": True,
    "type": "integer",
    "format": "int64",
}


def synthesize_paths(
    paths: dict[str, dict], type_name: str, collection_name: str, is_list: bool
) -> None:
    """Add the path entries for one collection to `paths`."""
    root = f"/{collection_name}"
    paths[root] = {
        "get": _root_get_spec(type_name, is_list),
        "post": _root_post_spec(type_name),
    }
    if is_list:
        paths[f"{root}/{{id}}"] = {
            "parameters": [dict(ID_PARAMETER)],
            "get": _individual_get_spec(type_name),
            "patch": _individual_update_spec(type_name, "patch"),
            "put": _individual_update_spec(type_name, "put"),
        }


def _root_get_spec(type_name: str, is_list: bool) -> dict:
    if is_list:
        return {
            "summary": f"Get all {type_name}s",
            "description": f"Get the instances of {type_name} that match the search conditions",
            "operationId": f"getall{type_name}",
            "responses": {
                "200": {
                    "description": f"A list of {type_name}",
                    "schema": {"type": "array", "items": definition_ref(type_name)},
                }
            },
        }
    return {
        "summary": f"Get the {type_name}",
        "description": f"Get the one {type_name}",
        "operationId": f"get{type_name}",
        "responses": {
            "200": {"description": f"A {type_name}", "schema": definition_ref(type_name)}
        },
    }


def _body_parameter(type_name: str, description: str) -> dict:
    return {
        "in": "body",
        "name": f"bodyAdd{type_name}",
        "description": description,
        "required": True,
        "schema": definition_ref(type_name),
    }


def _root_post_spec(type_name: str) -> dict:
    return {
        "summary": f"Post a new {type_name}",
        "description": f"Add a new {type_name}",
        "operationId": f"post{type_name}",
        "parameters": [_body_parameter(type_name, f"{type_name} object to be added")],
        "responses": {
            "200": {"description": f"The added {type_name}", "schema": definition_ref(type_name)}
        },
    }


def _individual_responses(type_name: str) -> dict:
    return {
        "200": {"description": f"A {type_name}", "schema": definition_ref(type_name)},
        "404": {"description": f"No {type_name} with the given id", "schema": definition_ref(ERROR_RESPONSE)},
    }


def _individual_get_spec(type_name: str) -> dict:
    return {
        "summary": f"Get one {type_name}",
        "description": f"Get the {type_name} with the given id",
        "operationId": f"get{type_name}Individual",
        "responses": _individual_responses(type_name),
    }


def _individual_update_spec(type_name: str, method: str) -> dict:
    """patch and put differ only in their display text and operationId prefix."""
    verb = method.capitalize()
    return {
        "summary": f"{verb} a {type_name}",
        "description": f"{verb} the {type_name} with the given id",
        "operationId": f"{method}{type_name}Individual",
        "parameters": [_body_parameter(type_name, f"{type_name} fields to {method}")],
        "responses": _individual_responses(type_name),
    }
