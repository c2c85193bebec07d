"""Implementations of the "ipv4" and "ipv6" formats.

Both accept only the bare textual address: no brackets, prefixes or zone
identifiers.
"""

import ipaddress

from schema_formats.utils.logging import get_logger
from schema_formats.validation.base import FormatValidator
from schema_formats.validation.results import ValidationResult

logger = get_logger(__name__)


class IPv4FormatValidator(FormatValidator):
    """Validates dotted-quad IPv4 addresses."""

    name = "ipv4"
    description = "ipv4 address"

    def validate(self, subject: str | None) -> ValidationResult:
        if not isinstance(subject, str):
            return self.invalid(subject)
        try:
            ipaddress.IPv4Address(subject)
        except ValueError as e:
            logger.debug("Rejected ipv4 address", subject=subject, reason=str(e))
            return self.invalid(subject)
        return self.valid()


class IPv6FormatValidator(FormatValidator):
    """Validates IPv6 addresses.

    IPv4-mapped addresses (``::ffff:a.b.c.d``) denote IPv4 hosts and are
    rejected here; the ipv4 format covers them in their dotted-quad form.
    """

    name = "ipv6"
    description = "ipv6 address"

    def validate(self, subject: str | None) -> ValidationResult:
        if not isinstance(subject, str):
            return self.invalid(subject)
        try:
            address = ipaddress.IPv6Address(subject)
        except ValueError as e:
            logger.debug("Rejected ipv6 address", subject=subject, reason=str(e))
            return self.invalid(subject)
        if address.scope_id is not None or address.ipv4_mapped is not None:
            logger.debug("Rejected ipv6 address", subject=subject, reason="not a plain ipv6 address")
            return self.invalid(subject)
        return self.valid()
