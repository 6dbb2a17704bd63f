"""Infer a Swagger 2.0 document from a json-server sample dataset."""

from json_server_swagger.generator.builder import SwaggerBuilder, build_document

__all__ = ["SwaggerBuilder", "build_document"]
