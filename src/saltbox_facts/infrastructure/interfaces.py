"""Local interface-address table access for the IPv6 capability probe."""

from __future__ import annotations

from pathlib import Path

import structlog

from saltbox_facts.domain.addresses import has_global_ipv6
from saltbox_facts.domain.types import CapabilityState

log = structlog.get_logger(__name__)


def probe_ipv6(path: Path) -> CapabilityState:
    """Decide whether local configuration makes IPv6 egress plausible.

    An unreadable table is not fatal: capability reads as absent and the
    read failure is carried as the state's diagnostic.
    """
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.warning("ipv6.probe_failed", path=str(path), error=str(exc))
        return CapabilityState(present=False, error=f"Error checking IPv6: {exc}")
    present = has_global_ipv6(content)
    log.debug("ipv6.probe", path=str(path), present=present)
    return CapabilityState(present=present)
