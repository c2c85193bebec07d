"""The contract shared by all format validators."""

from abc import ABC, abstractmethod

from schema_formats.validation.results import ValidationResult


class FormatValidator(ABC):
    """Named, stateless predicate checking a string against a textual format.

    Subclasses set ``name`` (the key a ``format`` keyword refers to) and
    ``description`` (used in failure messages), and implement ``validate``.
    ``validate`` must accept ``None`` and must never raise: every outcome is
    reported as a ValidationResult.
    """

    name = "unnamed-format"
    description = "value"

    @abstractmethod
    def validate(self, subject: str | None) -> ValidationResult:
        """Check ``subject`` against this format."""

    def valid(self) -> ValidationResult:
        return ValidationResult.valid(self.name)

    def invalid(self, subject: str | None) -> ValidationResult:
        return ValidationResult.invalid(
            self.name, f"[{subject}] is not a valid {self.description}"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
