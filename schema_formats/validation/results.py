"""Validation result types.

This module defines the structured result returned by every format
validator, replacing an optional error string with a type-safe value object.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Immutable validation result.

    A passing result carries an empty message; a failing result carries a
    human-readable message that embeds the rejected subject.
    """

    success: bool
    message: str
    format_name: str

    @classmethod
    def valid(cls, format_name: str) -> "ValidationResult":
        return cls(success=True, message="", format_name=format_name)

    @classmethod
    def invalid(cls, format_name: str, message: str) -> "ValidationResult":
        return cls(success=False, message=message, format_name=format_name)

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.success

    def format_error(self) -> str:
        """Format error message for error reports.

        Returns empty string if validation succeeded.
        """
        if self.success:
            return ""
        return f"## {self.format_name} format\n```\n{self.message}\n```"
