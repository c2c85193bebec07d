"""Registry mapping format names to validator instances.

The surrounding schema validator looks validators up by the value of its
``format`` keyword. The registry also offers helpers to run several formats
against one subject and aggregate the failures into a report.
"""

from collections.abc import Iterable

from schema_formats.exceptions import UnknownFormatError
from schema_formats.utils.logging import get_logger
from schema_formats.validation.base import FormatValidator
from schema_formats.validation.email import EmailFormatValidator
from schema_formats.validation.hostname import HostnameFormatValidator
from schema_formats.validation.ip import IPv4FormatValidator, IPv6FormatValidator
from schema_formats.validation.results import ValidationResult

logger = get_logger(__name__)


def builtin_validators() -> list[FormatValidator]:
    """Return fresh instances of every built-in format validator."""
    return [
        EmailFormatValidator(),
        HostnameFormatValidator(),
        IPv4FormatValidator(),
        IPv6FormatValidator(),
    ]


class FormatRegistry:
    """Looks up format validators by name and aggregates their results."""

    def __init__(self, validators: Iterable[FormatValidator] | None = None):
        """Initialize the registry.

        Args:
            validators: Validator instances to register. When None, the
                built-in validators are installed.
        """
        self._validators: dict[str, FormatValidator] = {}
        if validators is None:
            validators = builtin_validators()
        for validator in validators:
            self.register(validator)

    def register(self, validator: FormatValidator) -> None:
        """Register ``validator`` under its name, replacing any previous one."""
        if not callable(getattr(validator, "validate", None)):
            raise TypeError(f"{validator!r} has no validate() method")
        if validator.name in self._validators:
            logger.debug("Replacing format validator", format_name=validator.name)
        else:
            logger.debug("Registered format validator", format_name=validator.name)
        self._validators[validator.name] = validator

    def get(self, format_name: str) -> FormatValidator:
        """Return the validator registered for ``format_name``.

        Raises:
            UnknownFormatError: if no validator is registered under that name
        """
        try:
            return self._validators[format_name]
        except KeyError:
            logger.warning("Unsupported format requested", format_name=format_name)
            raise UnknownFormatError(format_name) from None

    def __contains__(self, format_name: object) -> bool:
        return format_name in self._validators

    def names(self) -> list[str]:
        """Return the registered format names in sorted order."""
        return sorted(self._validators)

    def validate(self, format_name: str, subject: str | None) -> ValidationResult:
        """Validate ``subject`` with the validator registered for ``format_name``."""
        return self.get(format_name).validate(subject)

    def validate_all(
        self, subject: str | None, format_names: Iterable[str] | None = None
    ) -> dict[str, ValidationResult]:
        """Run several validators against one subject.

        Args:
            subject: The string to check
            format_names: Formats to check; all registered formats when None

        Returns:
            Dictionary mapping format name to ValidationResult
        """
        if format_names is None:
            format_names = self.names()
        return {name: self.validate(name, subject) for name in format_names}

    def has_errors(self, results: dict[str, ValidationResult]) -> bool:
        """Check if any validation failed."""
        return any(r.failed for r in results.values())

    def format_error_report(self, results: dict[str, ValidationResult]) -> str:
        """Format the failed results into a single report.

        Returns:
            Formatted error report string, empty when nothing failed
        """
        return "\n\n".join(r.format_error() for r in results.values() if r.failed)


_default_registry: FormatRegistry | None = None


def get_registry() -> FormatRegistry:
    """Get or create the shared registry holding the built-in validators."""
    global _default_registry
    if _default_registry is None:
        _default_registry = FormatRegistry()
    return _default_registry


def for_format(format_name: str) -> FormatValidator:
    """Return the built-in validator for ``format_name``.

    Raises:
        UnknownFormatError: if the format is not built in
    """
    return get_registry().get(format_name)
