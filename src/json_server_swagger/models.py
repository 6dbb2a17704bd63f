"""Data models for the generated Swagger document and generator settings."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_HOST = "localhost:3000"


class Info(BaseModel):
    """The document's `info` block."""

    title: str = "json-server api"
    version: str = "1.0.0"


class SwaggerDocument(BaseModel):
    """Root of a Swagger 2.0 document.

    `paths` and `definitions` are plain dicts filled in place while the
    dataset is processed. Field order is the serialization order.
    """

    swagger: str = "2.0"
    info: Info = Field(default_factory=Info)
    consumes: list[str] = Field(default_factory=lambda: ["application/json"])
    produces: list[str] = Field(default_factory=lambda: ["application/json"])
    host: str = DEFAULT_HOST
    schemes: list[str] = Field(default_factory=lambda: ["http"])
    paths: dict[str, dict] = Field(default_factory=dict)
    definitions: dict[str, dict] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class GeneratorConfig(BaseModel):
    """Settings for one generate run."""

    host: str = DEFAULT_HOST
    input_path: Path = Path("db.json")
    output_path: Path = Path("swagger.json")
    output_format: Literal["json", "yaml"] = "json"
    indent: int = 2

    @classmethod
    def for_output(cls, output_path: Path, fmt: str = "auto", **kwargs) -> "GeneratorConfig":
        """Build a config, inferring the format from the output suffix when fmt is 'auto'."""
        if fmt == "auto":
            fmt = "yaml" if output_path.suffix.lower() in (".yaml", ".yml") else "json"
        return cls(output_path=output_path, output_format=fmt, **kwargs)
