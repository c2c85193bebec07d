"""Implementation of the "hostname" format.

Syntax-only check adapted from the host name rules of Guava's
``InternetDomainName``: no DNS resolution is performed.
"""

import string

from schema_formats.utils.logging import get_logger
from schema_formats.validation.base import FormatValidator
from schema_formats.validation.results import ValidationResult

logger = get_logger(__name__)

MAX_HOSTNAME_LENGTH = 253
MAX_HOSTNAME_LABELS = 127
MAX_LABEL_LENGTH = 63

# ASCII full stop, ideographic full stop, fullwidth full stop and halfwidth
# ideographic full stop all separate labels.
LABEL_SEPARATORS = ".\u3002\uff0e\uff61"
_TO_ASCII_DOT = str.maketrans({sep: "." for sep in LABEL_SEPARATORS})

DASH_CHARS = frozenset("-_")
LABEL_CHARS = frozenset(string.ascii_letters + string.digits) | DASH_CHARS


class HostnameFormatValidator(FormatValidator):
    """Validates DNS host names against a restricted label grammar."""

    name = "hostname"
    description = "hostname"

    def validate(self, subject: str | None) -> ValidationResult:
        reason = self.rejection_reason(subject)
        if reason is not None:
            logger.debug("Rejected hostname", subject=subject, reason=reason)
            return self.invalid(subject)
        return self.valid()

    def rejection_reason(self, subject: str | None) -> str | None:
        """Return why ``subject`` is not a hostname, or None if it is one."""
        if not isinstance(subject, str):
            return "Hostname is absent"
        if len(subject) > MAX_HOSTNAME_LENGTH:
            return "Hostname too long"

        labels = subject.translate(_TO_ASCII_DOT).split(".")
        if len(labels) > MAX_HOSTNAME_LABELS:
            return "Hostname has too many parts"

        for label in labels:
            if not label:
                return "Empty label not allowed in hostname"
            if len(label) > MAX_LABEL_LENGTH:
                return "Hostname part too long"
            if label[0] in DASH_CHARS or label[-1] in DASH_CHARS:
                return "Hostname part cannot start or end with a dash or underscore"
            for char in label:
                if char not in LABEL_CHARS:
                    return f"Illegal character {char!r}"

        if labels[-1][0] in string.digits:
            return "Last hostname part cannot start with a digit"

        return None
