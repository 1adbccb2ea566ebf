"""Shared pytest fixtures and test helpers for fluentlink tests.

The reference site has five locales and two domains:

- ``en_NZ`` (global default, prefix ``newzealand``) and ``zh_CN``: no domain.
- ``de_DE`` (prefix ``german``): alone on ``www.example.de``.
- ``en_US`` (default, prefix ``usa``) and ``es_ES``: on ``www.example.com``.

Pages: ``home``, ``about-us`` and its child ``my-staff``, and ``a-page``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest
from click.testing import CliRunner

from fluentlink.config.settings import FluentSettings
from fluentlink.domain.content import ContentNode
from fluentlink.infrastructure.content_store import InMemoryContentStore
from fluentlink.infrastructure.runtime import Runtime

LOCALES: list[dict[str, Any]] = [
    {
        "code": "en_NZ",
        "title": "English (New Zealand)",
        "language_native": "English",
        "url_segment": "newzealand",
        "is_global_default": True,
    },
    {
        "code": "de_DE",
        "title": "German (Germany)",
        "language_native": "Deutsch",
        "url_segment": "german",
        "domain": "www.example.de",
        "fallbacks": ["en_NZ"],
    },
    {
        "code": "en_US",
        "title": "English (US)",
        "language_native": "English",
        "url_segment": "usa",
        "domain": "www.example.com",
        "is_default": True,
    },
    {
        "code": "es_ES",
        "title": "Spanish (Spain)",
        "language_native": "Español",
        "domain": "www.example.com",
        "fallbacks": ["en_US", "en_NZ"],
    },
    {
        "code": "zh_CN",
        "title": "Chinese (Simplified)",
        "language_native": "中文",
    },
]

DOMAINS: list[dict[str, Any]] = [
    {"hostname": "www.example.de"},
    {"hostname": "www.example.com"},
]

TOML_CONFIG = """\
[routing]
default_host = "mocked"

[[domains]]
hostname = "www.example.de"

[[domains]]
hostname = "www.example.com"

[[locales]]
code = "en_NZ"
url_segment = "newzealand"
is_global_default = true

[[locales]]
code = "de_DE"
url_segment = "german"
domain = "www.example.de"

[[locales]]
code = "en_US"
url_segment = "usa"
domain = "www.example.com"
is_default = true

[[locales]]
code = "es_ES"
domain = "www.example.com"
"""


def make_settings(**routing: Any) -> FluentSettings:
    """Reference settings with *routing* overrides."""
    return FluentSettings(
        routing={"default_host": "mocked", **routing},
        locales=LOCALES,
        domains=DOMAINS,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FLUENTLINK_* variables from the outer shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("FLUENTLINK_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo the handler swap done by ``configure_logging`` in CLI tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("fluentlink").setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> FluentSettings:
    return make_settings()


@pytest.fixture
def store() -> InMemoryContentStore:
    return InMemoryContentStore()


@pytest.fixture
def runtime(settings: FluentSettings, store: InMemoryContentStore) -> Iterator[Runtime]:
    """Runtime over the reference site, with the page tree populated."""
    rt = Runtime(settings, existence=store)
    rt.tree.add("home")
    about = rt.tree.add("about-us")
    rt.tree.add("my-staff", about)
    rt.tree.add("a-page")
    yield rt
    rt.stack.reset()


def page(runtime: Runtime, path: str) -> ContentNode:
    """Look up a page of the reference tree, asserting it exists."""
    node = runtime.tree.find_by_path(path)
    assert node is not None, path
    return node


@pytest.fixture
def _isolated_site(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir holding the reference ``fluentlink.toml``.

    Use via ``@pytest.mark.usefixtures("_isolated_site")`` on command test classes.
    """
    (tmp_path / "fluentlink.toml").write_text(TOML_CONFIG, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
