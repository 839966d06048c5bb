"""ResolutionOrchestrator — gate IPv6 on local capability, race both families."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import structlog

from saltbox_facts.config.models import NetworkConfig
from saltbox_facts.domain.types import AddressFamily, FamilyResult, IpFacts
from saltbox_facts.infrastructure.interfaces import probe_ipv6
from saltbox_facts.services.racer import race

log = structlog.get_logger(__name__)


class ResolutionOrchestrator:
    """Produce the IP portion of the snapshot for one run.

    The capability probe runs first and needs no network. IPv4 is always
    raced; IPv6 only when the probe found a global-scope address, in which
    case both races run concurrently over the shared *client*.
    """

    def __init__(self, config: NetworkConfig, client: httpx.AsyncClient, if_inet6: Path) -> None:
        self._config = config
        self._client = client
        self._if_inet6 = if_inet6

    async def resolve(self) -> IpFacts:
        capability = probe_ipv6(self._if_inet6)

        ipv4_race = self._race(AddressFamily.IPV4, self._config.ipv4_sources)
        if capability.present:
            ipv4, ipv6 = await asyncio.gather(
                ipv4_race,
                self._race(AddressFamily.IPV6, self._config.ipv6_sources),
            )
        else:
            log.debug("ipv6.skipped", reason=capability.error or "no global address")
            ipv4 = await ipv4_race
            ipv6 = FamilyResult()

        return IpFacts.from_results(ipv4, ipv6, capability)

    async def _race(self, family: AddressFamily, sources: tuple[str, ...]) -> FamilyResult:
        return await race(
            self._client,
            sources,
            family,
            self._config.timeout,
            ordered_errors=self._config.ordered_errors,
        )
