"""Builds a Swagger document collection by collection."""

import logging

from json_server_swagger.errors import MalformedInputError
from json_server_swagger.generator.document import init_document
from json_server_swagger.generator.naming import derive_type_name
from json_server_swagger.generator.paths import ERROR_RESPONSE, synthesize_paths
from json_server_swagger.generator.schema import STRING_SCHEMA, synthesize_schema
from json_server_swagger.models import DEFAULT_HOST, SwaggerDocument

logger = logging.getLogger(__name__)


class SwaggerBuilder:
    """Accumulates paths and definitions for the collections of one dataset."""

    def __init__(self, host: str = DEFAULT_HOST, document: SwaggerDocument | None = None):
        self.document = document or init_document(host)

    def build(self, collection_name: str, data) -> None:
        """Add definitions and paths for one top-level collection."""
        logger.info("Adding: %s", collection_name)
        type_name = derive_type_name(collection_name)
        is_list = isinstance(data, list)
        exemplar = self._exemplar(collection_name, data, is_list)
        logger.info("%s is list? %s", type_name, is_list)

        if is_list:
            self._ensure_error_response()
        synthesize_schema(self.document.definitions, type_name, exemplar)
        synthesize_paths(self.document.paths, type_name, collection_name, is_list)

    def build_all(self, dataset: dict) -> SwaggerDocument:
        for collection_name, data in dataset.items():
            self.build(collection_name, data)
        return self.document

    def _ensure_error_response(self) -> None:
        if ERROR_RESPONSE not in self.document.definitions:
            self.document.definitions[ERROR_RESPONSE] = {
                "type": "object",
                "properties": {"message": dict(STRING_SCHEMA)},
            }

    @staticmethod
    def _exemplar(collection_name: str, data, is_list: bool) -> dict:
        exemplar = (data[0] if data else {}) if is_list else data
        if not isinstance(exemplar, dict):
            logger.warning(
                "Collection %s has no object to use as exemplar (%s), using an empty record",
                collection_name,
                type(exemplar).__name__,
            )
            return {}
        return exemplar


def build_document(dataset, host: str = DEFAULT_HOST) -> SwaggerDocument:
    """Build a complete document for `dataset`, a mapping of collection name to records.

    Raises MalformedInputError when the dataset is not a mapping. Nothing is
    returned unless every collection was processed.
    """
    if not isinstance(dataset, dict):
        raise MalformedInputError(
            f"Expected a JSON object of collections, got {type(dataset).__name__}",
            suggestion='Use a top-level object such as {"posts": [...]}.',
        )
    return SwaggerBuilder(host).build_all(dataset)
