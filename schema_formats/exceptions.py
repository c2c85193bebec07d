"""Exception types and user-facing error formatting.

Format mismatches are never raised: validators report them as failed
ValidationResult objects. The exceptions here cover misuse of the registry.
"""


class SchemaFormatsError(Exception):
    """Base class for schema-formats errors."""


class UnknownFormatError(SchemaFormatsError, ValueError):
    """Raised when no validator is registered under the requested format name."""

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(f"unsupported format: {format_name}")


ERROR_TYPES = {
    UnknownFormatError: lambda e: (
        f"Unknown format '{e.format_name}'.\n"
        "Register a validator for it or use one of the built-in formats."
    ),
    TypeError: lambda e: f"Invalid validator: {e!s}",
    ValueError: lambda e: str(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
