"""Loading of sample datasets and existing Swagger documents."""

import json
from pathlib import Path

import yaml

from json_server_swagger.errors import MalformedInputError


def load_dataset(file_path: Path) -> dict:
    """Read a JSON (or YAML) file whose top level is an object.

    Raises MalformedInputError when the file is missing, is not UTF-8,
    cannot be parsed, does not hold an object, or has non-string keys.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise MalformedInputError(
            f"Cannot read {file_path}: {e.strerror or e}",
            suggestion="Check the --input path.",
        ) from e
    except UnicodeDecodeError as e:
        raise MalformedInputError(
            f"{file_path} is not valid UTF-8: {e.reason} at byte {e.start}",
            suggestion="Save the dataset as UTF-8.",
        ) from e

    data = _parse(file_path, text)
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"{file_path} must contain a JSON object, got {type(data).__name__}",
            suggestion='Use a top-level object such as {"posts": [...]}.',
        )
    _check_keys(file_path, data)
    return data


def _parse(file_path: Path, text: str):
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError) as e:
        json_error = e

    if file_path.suffix.lower() in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedInputError(f"Invalid YAML in {file_path}: {e}") from e

    raise MalformedInputError(
        f"Invalid JSON in {file_path}: {json_error}",
        suggestion="Make sure the file is valid JSON, as served by json-server.",
    ) from json_error


def _check_keys(file_path: Path, node, location: str = "") -> None:
    """YAML allows keys like `yes:` or `1:` that load as bool/int; JSON does not."""
    if isinstance(node, dict):
        for key, value in node.items():
            if not isinstance(key, str):
                raise MalformedInputError(
                    f"{file_path} has a non-string key {key!r} at '{location or '/'}'",
                    suggestion="Quote the key so it loads as a string.",
                )
            _check_keys(file_path, value, f"{location}/{key}")
    elif isinstance(node, list):
        for index, item in enumerate(node):
            _check_keys(file_path, item, f"{location}/{index}")
