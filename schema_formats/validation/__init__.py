"""Format validators for the schema ``format`` keyword.

Each validator is a named, stateless predicate that checks a string against a
textual format and reports the outcome as a ValidationResult. Validators are
looked up by name through a FormatRegistry.
"""

from schema_formats.validation.base import FormatValidator
from schema_formats.validation.email import EmailFormatValidator
from schema_formats.validation.hostname import HostnameFormatValidator
from schema_formats.validation.ip import IPv4FormatValidator, IPv6FormatValidator
from schema_formats.validation.registry import (
    FormatRegistry,
    builtin_validators,
    for_format,
    get_registry,
)
from schema_formats.validation.results import ValidationResult

__all__ = [
    "EmailFormatValidator",
    "FormatRegistry",
    "FormatValidator",
    "HostnameFormatValidator",
    "IPv4FormatValidator",
    "IPv6FormatValidator",
    "ValidationResult",
    "builtin_validators",
    "for_format",
    "get_registry",
]
