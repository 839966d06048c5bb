"""Race several plain-text "what is my IP" sources for one address family.

Every source is queried concurrently through the shared client. Outcomes are
drained in completion order: the first validated address wins and all
still-pending attempts are cancelled without being awaited. If every attempt
fails, the per-source diagnostics are joined into one error string.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import httpx
import structlog

from saltbox_facts.domain.addresses import validate_address
from saltbox_facts.domain.types import AddressFamily, FamilyResult, ResolutionOutcome

log = structlog.get_logger(__name__)

NO_SOURCES_MESSAGE = "No sources configured"
ERROR_SEPARATOR = "; "


def _format_seconds(seconds: float) -> str:
    return f"{seconds:g}s"


async def fetch_address(
    client: httpx.AsyncClient,
    url: str,
    family: AddressFamily,
    timeout: float,
) -> ResolutionOutcome:
    """Query one source, converting every failure kind into a diagnostic.

    Only cancellation propagates.
    """
    try:
        async with asyncio.timeout(timeout):
            response = await client.get(url)
    except (TimeoutError, httpx.TimeoutException):
        return ResolutionOutcome.failure(url, f"Timeout after {_format_seconds(timeout)} for {url}")
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return ResolutionOutcome.failure(url, f"Request failed for {url}: {exc}")

    if not response.is_success:
        status = f"{response.status_code} {response.reason_phrase}".rstrip()
        return ResolutionOutcome.failure(url, f"HTTP {status} received from {url}")

    body = response.text.strip()
    if not validate_address(body, family):
        return ResolutionOutcome.failure(
            url, f"Invalid {family.label} address '{body}' received from {url}"
        )
    return ResolutionOutcome.success(url, body)


async def race(
    client: httpx.AsyncClient,
    sources: Sequence[str],
    family: AddressFamily,
    timeout: float,
    *,
    ordered_errors: bool = False,
) -> FamilyResult:
    """Return the first validated address from *sources*, or every diagnostic.

    Args:
        client: Shared HTTP client.
        sources: Candidate URLs. Empty means an immediate failure, no I/O.
        family: Family the returned literal must belong to.
        timeout: Per-attempt bound in seconds.
        ordered_errors: Join diagnostics in *sources* order rather than the
            order attempts completed.
    """
    if not sources:
        return FamilyResult(error=NO_SOURCES_MESSAGE)

    tasks = [
        asyncio.create_task(
            fetch_address(client, url, family, timeout),
            name=f"fetch-{family}-{index}",
        )
        for index, url in enumerate(sources)
    ]
    failures: list[ResolutionOutcome] = []
    try:
        for next_done in asyncio.as_completed(tasks):
            outcome = await next_done
            if outcome.ok:
                log.debug("race.won", family=str(family), source=outcome.source)
                return FamilyResult(address=outcome.address)
            log.debug("race.attempt_failed", family=str(family), error=outcome.error)
            failures.append(outcome)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()

    if ordered_errors:
        position = {url: index for index, url in enumerate(sources)}
        failures.sort(key=lambda outcome: position[outcome.source])
    combined = ERROR_SEPARATOR.join(outcome.error or "" for outcome in failures)
    log.warning("race.exhausted", family=str(family), sources=len(sources))
    return FamilyResult(error=combined)
