"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, saltbox-facts.toml only
contains overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_IPV4_SOURCES = ("https://ipify.saltbox.dev", "https://ipv4.icanhazip.com")
DEFAULT_IPV6_SOURCES = ("https://ipify6.saltbox.dev", "https://ipv6.icanhazip.com")
DEFAULT_TIMEOUT = 3.0


class NetworkConfig(BaseModel):
    """[network] section.

    Attributes:
        ipv4_sources: URLs returning the caller's IPv4 address as plain text.
        ipv6_sources: URLs returning the caller's IPv6 address as plain text.
        timeout: Per-attempt bound in seconds. All attempts of a family run
            concurrently, so this also bounds the family's wall time.
        ordered_errors: Join exhaustion diagnostics in source declaration
            order instead of completion order.
    """

    model_config = {"frozen": True}

    ipv4_sources: tuple[str, ...] = DEFAULT_IPV4_SOURCES
    ipv6_sources: tuple[str, ...] = DEFAULT_IPV6_SOURCES
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    ordered_errors: bool = False


class PathsConfig(BaseModel):
    """[paths] section: local files read by the collaborators."""

    model_config = {"frozen": True}

    group_file: Path = Path("/etc/group")
    passwd_file: Path = Path("/etc/passwd")
    if_inet6: Path = Path("/proc/net/if_inet6")
    etc_timezone: Path = Path("/etc/timezone")
    localtime: Path = Path("/etc/localtime")

