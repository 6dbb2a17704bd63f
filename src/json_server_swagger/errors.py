"""Error types raised while turning a sample dataset into a Swagger document."""


class SwaggerGenError(Exception):
    """Base error with an optional fix suggestion."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.suggestion = suggestion
        super().__init__(message)

    def to_message(self) -> str:
        """Format the error with suggestion."""
        parts = [str(self)]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return " | ".join(parts)


class MalformedInputError(SwaggerGenError):
    """The dataset could not be read or is not a JSON object of collections."""


class InvalidCollectionNameError(SwaggerGenError, ValueError):
    """A collection name cannot be turned into a type name."""


class ExemplarTooDeepError(SwaggerGenError):
    """Nested objects in an exemplar go deeper than the synthesizer allows."""
