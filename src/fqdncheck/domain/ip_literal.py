"""IP literal recognition.

Only the textual form is checked: the whole string must be exactly one
address. Ranges (private, multicast, reserved) are not inspected.
"""

from __future__ import annotations

import ipaddress

from fqdncheck.domain.types import HostKind


def is_ipv4_literal(text: str) -> bool:
    """Return True if *text* is a dotted-quad IPv4 address."""
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def is_ipv6_literal(text: str) -> bool:
    """Return True if *text* is an IPv6 address (``::`` forms included).

    Zone identifiers such as ``fe80::1%eth0`` are not address literals.
    """
    try:
        address = ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return address.scope_id is None


def ip_literal_kind(text: str) -> HostKind | None:
    """Classify *text* as an IPv4 or IPv6 literal, IPv4 first."""
    if is_ipv4_literal(text):
        return HostKind.IPV4
    if is_ipv6_literal(text):
        return HostKind.IPV6
    return None
