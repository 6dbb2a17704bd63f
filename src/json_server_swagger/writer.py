"""Serialization of finished documents."""

import json
from pathlib import Path

import yaml

from json_server_swagger.models import SwaggerDocument


def render_document(document: SwaggerDocument, fmt: str = "json", indent: int = 2) -> str:
    """Render the document as indented JSON or block-style YAML."""
    data = document.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, indent=indent)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def write_document(
    document: SwaggerDocument, output: Path, fmt: str = "json", indent: int = 2
) -> Path:
    """Render first, then write, so a failed render leaves no partial file."""
    content = render_document(document, fmt=fmt, indent=indent)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    return output
