"""schema-formats: format validators for JSON-schema style ``format`` checks."""

from schema_formats.exceptions import SchemaFormatsError, UnknownFormatError
from schema_formats.validation import (
    EmailFormatValidator,
    FormatRegistry,
    FormatValidator,
    HostnameFormatValidator,
    IPv4FormatValidator,
    IPv6FormatValidator,
    ValidationResult,
    for_format,
)

__all__ = [
    "EmailFormatValidator",
    "FormatRegistry",
    "FormatValidator",
    "HostnameFormatValidator",
    "IPv4FormatValidator",
    "IPv6FormatValidator",
    "SchemaFormatsError",
    "UnknownFormatError",
    "ValidationResult",
    "for_format",
]
