"""FactsService — assemble the full host snapshot.

IP resolution and the local-file readers run concurrently and are joined
before anything is built. Network failures are recorded inside the facts;
only a local-file failure makes the operation fail.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import structlog

from saltbox_facts import __version__
from saltbox_facts.domain.types import HostFacts, IpFacts
from saltbox_facts.infrastructure.http import create_client
from saltbox_facts.infrastructure.local_files import get_timezone, parse_groups, parse_users
from saltbox_facts.services.resolution import ResolutionOrchestrator
from saltbox_facts.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from saltbox_facts.config.settings import FactsSettings

log = structlog.get_logger(__name__)


class FactsService:
    """Collect facts according to *settings*.

    *transport* replaces the HTTP transport of the per-run client
    (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        settings: FactsSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    # ── Public operations ─────────────────────────────────────────────

    def collect(self) -> ServiceResult:
        """Full snapshot: IP facts, users, groups, timezone."""
        try:
            facts = asyncio.run(self.gather())
        except (OSError, UnicodeDecodeError) as exc:
            log.error("collect.local_file_failed", error=str(exc))
            filename = getattr(exc, "filename", None)
            return ServiceResult(
                ok=False,
                op="collect",
                error=ServiceError(
                    code="LOCAL_FACTS_FAILED",
                    message=str(exc),
                    detail={"path": str(filename)} if filename else {},
                ),
            )
        return ServiceResult(
            ok=True,
            op="collect",
            data=facts.to_wire(),
            warnings=_family_warnings(facts.ip),
        )

    def ip(self) -> ServiceResult:
        """IP facts only; never fails."""
        ip_facts = asyncio.run(self.resolve_ip())
        return ServiceResult(
            ok=True,
            op="ip",
            data=ip_facts.model_dump(mode="json"),
            warnings=_family_warnings(ip_facts),
        )

    # ── Coroutines ────────────────────────────────────────────────────

    async def resolve_ip(self) -> IpFacts:
        async with create_client(self._settings.network, transport=self._transport) as client:
            orchestrator = ResolutionOrchestrator(
                self._settings.network, client, self._settings.paths.if_inet6
            )
            return await orchestrator.resolve()

    async def gather(self) -> HostFacts:
        """Run every collaborator concurrently and join them.

        Raises:
            OSError: A local account database could not be read.
        """
        paths = self._settings.paths
        ip_facts, groups, users, timezone = await asyncio.gather(
            self.resolve_ip(),
            asyncio.to_thread(parse_groups, paths.group_file),
            asyncio.to_thread(parse_users, paths.passwd_file),
            asyncio.to_thread(get_timezone, paths),
        )
        return HostFacts(
            saltbox_facts_version=__version__,
            ip=ip_facts,
            groups=groups,
            users=users,
            timezone=timezone,
        )


def _family_warnings(ip_facts: IpFacts) -> list[str]:
    """Surface fully failed families on stderr without touching the facts."""
    warnings: list[str] = []
    if ip_facts.error_ipv4:
        warnings.append(f"IPv4 resolution failed: {ip_facts.error_ipv4}")
    if ip_facts.error_ipv6:
        warnings.append(f"IPv6 resolution failed: {ip_facts.error_ipv6}")
    if ip_facts.ipv6_check_error:
        warnings.append(ip_facts.ipv6_check_error)
    return warnings
