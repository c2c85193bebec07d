"""Implementation of the "email" format.

The grammar follows the address check of Apache Commons Validator's
``EmailValidator``: a dotted-word local-part, and a domain that is either an
IP literal or a host name. It is intentionally narrower than RFC 5322.
"""

import re

from schema_formats.utils.logging import get_logger
from schema_formats.validation.base import FormatValidator
from schema_formats.validation.hostname import HostnameFormatValidator
from schema_formats.validation.ip import IPv4FormatValidator, IPv6FormatValidator
from schema_formats.validation.results import ValidationResult

logger = get_logger(__name__)

MAX_LOCAL_PART_LENGTH = 64

# ASCII whitespace only; non-ASCII spaces are ordinary characters here.
WHITESPACE = r" \t\n\x0b\f\r"
WHITESPACE_CHARS = " \t\n\x0b\f\r"
LINE_TERMINATORS = "\n\r\x85\u2028\u2029"
# Any character except a line terminator.
ANY_CHAR = r"[^\n\r\x85\u2028\u2029]"

SPECIAL_CHARS = r"\x00-\x1f\x7f()<>@,;:'\\\".\[\]"
VALID_CHARS = rf"(?:\\{ANY_CHAR}|[^{WHITESPACE}{SPECIAL_CHARS}])"
QUOTED_USER = r'(?:"(?:\\"|[^"])*")'
WORD = rf"(?:(?:{VALID_CHARS}|')+|{QUOTED_USER})"

LOCAL_PART_PATTERN = re.compile(rf"[{WHITESPACE}]*{WORD}(?:\.{WORD})*")


def split_address(subject: str) -> tuple[str, str] | None:
    """Split ``subject`` into local-part and domain in linear time.

    The local-part runs up to the last ``@``. Leading whitespace stays in the
    local-part unless it contains a line terminator, in which case it is
    dropped up to and including the last one. Trailing whitespace is trimmed
    from the domain. Returns None when the subject has no such shape, or when
    either part would contain a line terminator.
    """
    head, at, tail = subject.rpartition("@")
    if not at or not head or not tail:
        return None

    last_terminator = max(head.rfind(char) for char in LINE_TERMINATORS)
    if last_terminator >= 0:
        if head[: last_terminator + 1].strip(WHITESPACE_CHARS):
            return None
        head = head[last_terminator + 1 :]
        if not head:
            return None

    # the domain keeps at least one character, as in "a@ "
    domain = tail.rstrip(WHITESPACE_CHARS) or tail[0]
    if any(char in LINE_TERMINATORS for char in domain):
        return None

    return head, domain


class EmailFormatValidator(FormatValidator):
    """Validates addresses of the form ``local-part@domain``."""

    name = "email"
    description = "email address"

    def __init__(self):
        self.ipv4_validator = IPv4FormatValidator()
        self.ipv6_validator = IPv6FormatValidator()
        self.hostname_validator = HostnameFormatValidator()

    def validate(self, subject: str | None) -> ValidationResult:
        if not isinstance(subject, str) or subject.endswith("."):
            return self._reject(subject, "absent or ends with a dot")

        parts = split_address(subject)
        if parts is None:
            return self._reject(subject, "not of the form local-part@domain")

        local_part, domain = parts

        if len(local_part) > MAX_LOCAL_PART_LENGTH:
            return self._reject(subject, "local-part too long")

        if LOCAL_PART_PATTERN.fullmatch(local_part) is None:
            return self._reject(subject, "malformed local-part")

        if (
            self.ipv4_validator.validate(domain).failed
            and self.ipv6_validator.validate(domain).failed
            and self.hostname_validator.validate(domain).failed
        ):
            return self._reject(subject, "domain is neither an IP literal nor a hostname")

        return self.valid()

    def _reject(self, subject: str | None, reason: str) -> ValidationResult:
        logger.debug("Rejected email address", subject=subject, reason=reason)
        return self.invalid(subject)
