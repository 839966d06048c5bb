"""Fact types produced by a single run.

Every model here is frozen: values are created once per run, folded into
the aggregate :class:`HostFacts`, serialized, and discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field


class AddressFamily(StrEnum):
    """Address family of a resolved public address."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def label(self) -> str:
        """Human-readable family name used in diagnostics."""
        return "IPv4" if self is AddressFamily.IPV4 else "IPv6"


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of querying one source: an address or a diagnostic, never both."""

    source: str
    address: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.address is not None

    @classmethod
    def success(cls, source: str, address: str) -> ResolutionOutcome:
        return cls(source=source, address=address)

    @classmethod
    def failure(cls, source: str, error: str) -> ResolutionOutcome:
        return cls(source=source, error=error)


class FamilyResult(BaseModel):
    """Committed result for one address family after racing its sources.

    ``FamilyResult()`` with both fields empty means the family was never
    attempted (IPv6 without local capability).
    """

    model_config = {"frozen": True}

    address: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.address is None


class CapabilityState(BaseModel):
    """Whether local interface configuration makes IPv6 egress plausible."""

    model_config = {"frozen": True}

    present: bool
    error: str | None = None


class IpFacts(BaseModel):
    """IP portion of the snapshot, in its wire shape."""

    model_config = {"frozen": True}

    public_ip: str = ""
    public_ipv6: str = ""
    error_ipv4: str | None = None
    error_ipv6: str | None = None
    failed_ipv4: bool = True
    failed_ipv6: bool = True
    ipv6_check_error: str | None = None

    @classmethod
    def from_results(
        cls,
        ipv4: FamilyResult,
        ipv6: FamilyResult,
        capability: CapabilityState,
    ) -> IpFacts:
        return cls(
            public_ip=ipv4.address or "",
            public_ipv6=ipv6.address or "",
            error_ipv4=ipv4.error,
            error_ipv6=ipv6.error,
            failed_ipv4=ipv4.failed,
            failed_ipv6=ipv6.failed,
            ipv6_check_error=capability.error,
        )


class GroupData(BaseModel):
    """One ``/etc/group`` entry."""

    model_config = {"frozen": True, "populate_by_name": True}

    gid: str
    group_list: list[str] = Field(default_factory=list, alias="group-list")


class UserData(BaseModel):
    """One ``/etc/passwd`` entry (password field dropped)."""

    model_config = {"frozen": True}

    uid: str
    gid: str
    comment: str
    home: str
    shell: str


class TimezoneData(BaseModel):
    model_config = {"frozen": True}

    timezone: str


class HostFacts(BaseModel):
    """The aggregate snapshot emitted by ``saltbox-facts collect``."""

    model_config = {"frozen": True}

    saltbox_facts_version: str
    ip: IpFacts
    groups: dict[str, GroupData] = Field(default_factory=dict)
    users: dict[str, UserData] = Field(default_factory=dict)
    timezone: TimezoneData

    def to_wire(self) -> dict:
        """Plain JSON-ready mapping with wire field names (``group-list``)."""
        return self.model_dump(mode="json", by_alias=True)
