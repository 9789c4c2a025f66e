"""
Structured error types for generate-x-mcp.

Provides actionable errors with fix suggestions.
"""

from pydantic import ValidationError


class GeneratorError(Exception):
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


class DocumentError(GeneratorError):
    """The OpenAPI document cannot be read or has an unexpected shape."""


class ConfigurationError(GeneratorError):
    """Invalid options supplied on the command line or through the environment."""


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic validation error into a single line.

    Args:
        error: The validation error raised by a model.

    Returns:
        ``field: message`` pairs joined with ``; ``.
    """
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "value"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


__all__ = ["GeneratorError", "DocumentError", "ConfigurationError", "format_validation_error"]
