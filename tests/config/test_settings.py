"""Tests for FactsSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from saltbox_facts.config.models import DEFAULT_IPV4_SOURCES, NetworkConfig
from saltbox_facts.config.settings import FactsSettings


@pytest.fixture(autouse=True)
def _no_system_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("SALTBOX_FACTS_CONFIG", raising=False)
    monkeypatch.setattr(
        "saltbox_facts.config.discovery.SYSTEM_CONFIG", tmp_path / "no-system.toml"
    )


class TestFactsSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = FactsSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.verbose is False
        assert settings.network.ipv4_sources == DEFAULT_IPV4_SOURCES
        assert settings.network.timeout == 3.0
        assert settings.paths.if_inet6 == Path("/proc/net/if_inet6")

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FactsSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(Exception):
            NetworkConfig(timeout=0)


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "saltbox-facts.toml").write_text(
            '[network]\nipv4_sources = ["https://one.test/"]\ntimeout = 1.5\n'
        )
        settings = FactsSettings.from_cli(search_from=tmp_path)
        assert settings.network.ipv4_sources == ("https://one.test/",)
        assert settings.network.timeout == 1.5
        assert settings.network.ordered_errors is False  # default preserved

    def test_empty_source_list(self, tmp_path: Path) -> None:
        (tmp_path / "saltbox-facts.toml").write_text("[network]\nipv6_sources = []\n")
        settings = FactsSettings.from_cli(search_from=tmp_path)
        assert settings.network.ipv6_sources == ()

    def test_paths_section(self, tmp_path: Path) -> None:
        (tmp_path / "saltbox-facts.toml").write_text('[paths]\npasswd_file = "/srv/passwd"\n')
        settings = FactsSettings.from_cli(search_from=tmp_path)
        assert settings.paths.passwd_file == Path("/srv/passwd")
        assert settings.paths.group_file == Path("/etc/group")

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[network]\ntimeout = 9\n")
        settings = FactsSettings.from_cli(config_path=str(custom))
        assert settings.network.timeout == 9
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "saltbox-facts.toml").write_text("[network\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FactsSettings.from_cli(search_from=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "saltbox-facts.toml").write_text("[network]\ntimeout = 1.5\n")
        monkeypatch.setenv("SALTBOX_FACTS_NETWORK__TIMEOUT", "7")
        settings = FactsSettings.from_cli(search_from=tmp_path)
        assert settings.network.timeout == 7

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SALTBOX_FACTS_LOG_JSON", "false")
        settings = FactsSettings.from_cli(search_from=tmp_path, log_json=True)
        assert settings.log_json is True
