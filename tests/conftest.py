"""Shared pytest fixtures and test helpers for saltbox-facts tests."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest
import structlog
from click.testing import CliRunner

from saltbox_facts.config.models import NetworkConfig, PathsConfig
from saltbox_facts.config.settings import FactsSettings

GLOBAL_IF_INET6 = (
    "fe800000000000000000000000000001 02 40 20 80 eth0\n"
    "2a0104f9c014e6d90000000000000001 02 40 00 80 eth0\n"
)
LINK_LOCAL_IF_INET6 = "fe800000000000000000000000000001 02 40 20 80 eth0\n"

PASSWD = (
    "root:x:0:0:root:/root:/bin/bash\n"
    "seed:x:1000:1000:Seed User,,,:/home/seed:/bin/bash\n"
)
GROUP = "root:x:0:\ndocker:x:998:seed,root\n"

FILE_KEYS = {
    "group_file": "group",
    "passwd_file": "passwd",
    "if_inet6": "if_inet6",
    "etc_timezone": "timezone",
    "localtime": "localtime",
}


@dataclass
class Source:
    """Simulated source: answers after *delay* seconds, or raises *exc*."""

    body: str = ""
    status: int = 200
    delay: float = 0.0
    exc: type[httpx.HTTPError] | None = None


@dataclass
class SourceNetwork:
    """Mock transport routing requests by host to :class:`Source` entries."""

    sources: dict[str, Source]
    requested: list[str] = field(default_factory=list)
    cancelled: list[str] = field(default_factory=list)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        self.requested.append(host)
        source = self.sources.get(host)
        if source is None:
            raise httpx.ConnectError(f"unknown host {host}", request=request)
        try:
            if source.delay:
                await asyncio.sleep(source.delay)
        except asyncio.CancelledError:
            self.cancelled.append(host)
            raise
        if source.exc is not None:
            raise source.exc("connection refused", request=request)
        return httpx.Response(source.status, text=source.body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport())


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Drop handlers bound to CliRunner streams once a test finishes."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def host_root(tmp_path: Path) -> Path:
    """Temporary directory holding fake passwd/group/if_inet6 files."""
    (tmp_path / "passwd").write_text(PASSWD)
    (tmp_path / "group").write_text(GROUP)
    (tmp_path / "if_inet6").write_text(GLOBAL_IF_INET6)
    (tmp_path / "timezone").write_text("Europe/Copenhagen\n")
    return tmp_path


@pytest.fixture
def paths(host_root: Path) -> PathsConfig:
    return PathsConfig(**{key: host_root / name for key, name in FILE_KEYS.items()})


@pytest.fixture
def source_network() -> Callable[[dict[str, dict[str, Any]]], SourceNetwork]:
    """Factory: ``source_network({"a.test": {"body": "203.0.113.7"}})``."""

    def _make(routes: dict[str, dict[str, Any]]) -> SourceNetwork:
        return SourceNetwork({host: Source(**spec) for host, spec in routes.items()})

    return _make


@pytest.fixture
def make_settings(
    paths: PathsConfig, monkeypatch: pytest.MonkeyPatch
) -> Callable[..., FactsSettings]:
    """Build settings pointing at the fake host files, without TOML discovery."""
    monkeypatch.delenv("TZ", raising=False)

    def _make(**network: Any) -> FactsSettings:
        network.setdefault("ipv4_sources", ("https://v4a.test/", "https://v4b.test/"))
        network.setdefault("ipv6_sources", ("https://v6a.test/", "https://v6b.test/"))
        return FactsSettings(network=NetworkConfig(**network), paths=paths)

    return _make


@pytest.fixture
def write_config(host_root: Path) -> Callable[..., Path]:
    """Write a saltbox-facts.toml pointing at the fake host files."""

    def _write(directory: Path, *, ipv4: list[str], ipv6: list[str]) -> Path:
        config = directory / "saltbox-facts.toml"
        lines = [
            "[network]",
            f"ipv4_sources = {json.dumps(ipv4)}",
            f"ipv6_sources = {json.dumps(ipv6)}",
            "timeout = 0.5",
            "[paths]",
        ]
        for key, name in FILE_KEYS.items():
            lines.append(f'{key} = "{host_root / name}"')
        config.write_text("\n".join(lines) + "\n")
        return config

    return _write
