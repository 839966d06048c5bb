"""Shared HTTP client for source queries."""

from __future__ import annotations

import httpx

from saltbox_facts import __version__
from saltbox_facts.config.models import NetworkConfig

USER_AGENT = f"saltbox-facts/{__version__}"


def create_client(
    config: NetworkConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the connection pool shared by every attempt of a run.

    ``httpx.AsyncClient`` is safe for concurrent use from many tasks, so
    both families' races use it without locking. *transport* lets tests
    substitute ``httpx.MockTransport``.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout),
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
        transport=transport,
    )
