"""Host identifier check: IP literal first, FQDN rules as fallback."""

from __future__ import annotations

import logging

from fqdncheck.domain.fqdn import validate_fqdn
from fqdncheck.domain.ip_literal import ip_literal_kind
from fqdncheck.domain.verdict import Verdict

logger = logging.getLogger(__name__)


def check_host(text: str) -> Verdict:
    """Decide whether *text* is usable as a host identifier.

    An IPv4 or IPv6 literal is accepted without looking at the FQDN
    rules; anything else goes through :func:`validate_fqdn`.
    """
    kind = ip_literal_kind(text)
    if kind is not None:
        logger.debug("recognized %s literal", kind.value)
        return Verdict.success(kind)
    return validate_fqdn(text)
