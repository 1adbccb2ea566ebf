"""Tests for the link CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from fluentlink.cli import cli


def _link(cli_runner: CliRunner, *args: str) -> dict[str, object]:
    result = cli_runner.invoke(cli, ["--json", "link", *args])
    assert result.exit_code == 0, result.output
    data: dict[str, object] = json.loads(result.output)["data"]
    return data


@pytest.mark.usefixtures("_isolated_site")
class TestLinkCommand:
    def test_path_mode(self, cli_runner: CliRunner) -> None:
        data = _link(cli_runner, "about-us/my-staff", "--locale", "de_DE")
        assert data["link"] == "/german/about-us/my-staff/"
        assert data["absolute_link"] == "http://mocked/german/about-us/my-staff/"

    def test_home(self, cli_runner: CliRunner) -> None:
        data = _link(cli_runner, "/", "-l", "es_ES")
        assert data["link"] == "/es_ES/"
        assert data["x_default"] is True

    def test_single_locale_domain(self, cli_runner: CliRunner) -> None:
        data = _link(cli_runner, "about-us", "-l", "de_DE", "--host", "www.example.de")
        assert data["link"] == "/about-us/"
        assert data["absolute_link"] == "http://www.example.de/about-us/"

    def test_cross_domain(self, cli_runner: CliRunner) -> None:
        data = _link(cli_runner, "about-us", "-l", "es_ES", "--host", "www.example.de")
        assert data["link"] == "http://www.example.com/es_ES/about-us/"

    def test_domain_mode_without_host(self, cli_runner: CliRunner) -> None:
        data = _link(cli_runner, "about-us", "-l", "de_DE", "--domain-mode")
        assert data["link"] == "http://www.example.de/about-us/"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "a-page", "-l", "en_US"])
        assert result.exit_code == 0
        assert "OK  resolve_link" in result.output
        assert "link: /usa/a-page/" in result.output

    def test_unknown_locale(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "link", "a-page", "-l", "fr_FR"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "LOCALE_NOT_FOUND"
        assert payload["error"]["detail"] == {"locale": "fr_FR"}

    def test_locale_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "a-page"])
        assert result.exit_code == 2
        assert "--locale" in result.output

    def test_env_var_suppression(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FLUENTLINK_ROUTING__DISABLE_DEFAULT_PREFIX", "true")
        data = _link(cli_runner, "a-page", "-l", "en_NZ")
        assert data["link"] == "/a-page/"
