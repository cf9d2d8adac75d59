"""Tests for host and error kind enums."""

import pytest

from fqdncheck.domain.types import ERROR_MESSAGES, ErrorKind, HostKind


def test_host_kind_values() -> None:
    assert {k.value for k in HostKind} == {"ipv4", "ipv6", "fqdn"}


def test_error_kind_values() -> None:
    assert {e.value for e in ErrorKind} == {
        "invalid_characters",
        "invalid_label_start",
        "invalid_label_end",
        "string_too_long",
        "label_too_long",
    }


def test_every_error_has_a_message() -> None:
    assert set(ERROR_MESSAGES) == set(ErrorKind)


@pytest.mark.parametrize(
    "error,message",
    [
        (ErrorKind.INVALID_CHARACTERS, "Invalid characters found in string"),
        (ErrorKind.STRING_TOO_LONG, "String is too long (> 255)"),
        (ErrorKind.LABEL_TOO_LONG, "Too long label (> 63)"),
        (
            ErrorKind.INVALID_LABEL_START,
            "Invalid first character found in string label (example 'subdomain.-domain'",
        ),
        (
            ErrorKind.INVALID_LABEL_END,
            "Invalid last character found in string label (example 'subdomain.domain.'",
        ),
    ],
)
def test_message_property(error: ErrorKind, message: str) -> None:
    assert error.message == message


def test_str_enum_compares_to_value() -> None:
    assert ErrorKind.LABEL_TOO_LONG == "label_too_long"
    assert isinstance(HostKind.FQDN, str)
