"""Document skeleton."""

from json_server_swagger.models import DEFAULT_HOST, SwaggerDocument


def init_document(host: str = DEFAULT_HOST) -> SwaggerDocument:
    """Create an empty Swagger document served from `host`."""
    return SwaggerDocument(host=host)
