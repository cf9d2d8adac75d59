"""FQDN syntax rules.

A name is split on ``.`` into labels and scanned once, left to right.
The first broken rule decides the verdict:

- the whole name is at most 255 bytes and starts with a letter or digit
- no label is empty (so a trailing root dot is rejected)
- every label is at most 63 bytes
- no label starts or ends with ``-``
- non-final labels hold letters, digits and inner hyphens only
- the final label holds letters only

Lengths are counted in bytes of the UTF-8 encoding. Character classes
are ASCII; any other byte is an invalid character.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterator
from typing import NamedTuple

from fqdncheck.domain.types import ErrorKind, HostKind
from fqdncheck.domain.verdict import Verdict

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255
MAX_LABEL_LENGTH = 63

LABEL_SEPARATOR = b"."

_LETTERS = frozenset(string.ascii_letters.encode("ascii"))
_ALNUM = frozenset((string.ascii_letters + string.digits).encode("ascii"))
_INNER_CHARS = _ALNUM | frozenset(b"-")
_EDGE_FORBIDDEN = frozenset(b"-.")


class Label(NamedTuple):
    """A label as a view into the scanned name."""

    start: int
    length: int
    last: bool

    @property
    def end(self) -> int:
        return self.start + self.length


def encode_name(text: str) -> bytes:
    """Return the raw bytes of *text*, undoing surrogate-escaped argv bytes."""
    return text.encode("utf-8", "surrogateescape")


def iter_labels(data: bytes) -> Iterator[Label]:
    """Yield the labels of the encoded name *data* in order.

    Zero-length labels are yielded too (``a..b``, ``a.``); empty input
    yields a single empty label.
    """
    start = 0
    while True:
        end = data.find(LABEL_SEPARATOR, start)
        if end == -1:
            yield Label(start, len(data) - start, True)
            return
        yield Label(start, end - start, False)
        start = end + 1


def _fail(error: ErrorKind, data: bytes, index: int | None, position: int | None) -> Verdict:
    logger.debug(
        "fqdn rejected: %s (label=%s, position=%s, length=%d)",
        error.value,
        index,
        position,
        len(data),
    )
    return Verdict.failure(error, label_index=index, position=position)


def _check_label(data: bytes, label: Label) -> ErrorKind | None:
    if label.length == 0:
        return ErrorKind.INVALID_CHARACTERS
    if label.length > MAX_LABEL_LENGTH:
        return ErrorKind.LABEL_TOO_LONG
    # One kind for both edges; "." can't actually sit at an edge.
    if data[label.start] in _EDGE_FORBIDDEN or data[label.end - 1] in _EDGE_FORBIDDEN:
        return ErrorKind.INVALID_LABEL_START

    allowed = _LETTERS if label.last else _INNER_CHARS
    for i in range(label.start, label.end):
        if data[i] not in allowed:
            return ErrorKind.INVALID_CHARACTERS
    return None


def validate_fqdn(text: str) -> Verdict:
    """Check *text* against the FQDN label and length rules.

    Lengths and positions are counted in bytes of the UTF-8 encoding.
    Returns a success Verdict with ``HostKind.FQDN`` or a failure Verdict
    carrying the first rule violated.
    """
    data = encode_name(text)
    if len(data) > MAX_NAME_LENGTH:
        return _fail(ErrorKind.STRING_TOO_LONG, data, None, None)

    if not data or data[0] not in _ALNUM:
        return _fail(ErrorKind.INVALID_LABEL_START, data, 0, 0)

    for index, label in enumerate(iter_labels(data)):
        error = _check_label(data, label)
        if error is not None:
            return _fail(error, data, index, label.start)

    return Verdict.success(HostKind.FQDN)
