"""Host kinds and validation error kinds.

ErrorKind members are mutually exclusive; the validator reports the
first one it hits.
"""

from __future__ import annotations

from enum import StrEnum


class HostKind(StrEnum):
    """What an accepted string was recognized as."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    FQDN = "fqdn"


class ErrorKind(StrEnum):
    """Reasons a string is rejected as a host identifier."""

    INVALID_CHARACTERS = "invalid_characters"
    INVALID_LABEL_START = "invalid_label_start"
    INVALID_LABEL_END = "invalid_label_end"
    STRING_TOO_LONG = "string_too_long"
    LABEL_TOO_LONG = "label_too_long"

    @property
    def message(self) -> str:
        """Diagnostic line printed in verbose mode."""
        return ERROR_MESSAGES[self]


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_CHARACTERS: "Invalid characters found in string",
    ErrorKind.INVALID_LABEL_START: (
        "Invalid first character found in string label (example 'subdomain.-domain'"
    ),
    ErrorKind.INVALID_LABEL_END: (
        "Invalid last character found in string label (example 'subdomain.domain.'"
    ),
    ErrorKind.STRING_TOO_LONG: "String is too long (> 255)",
    ErrorKind.LABEL_TOO_LONG: "Too long label (> 63)",
}
