"""Tests for Runtime wiring and reload."""

from __future__ import annotations

import pytest

from fluentlink.domain.context import ExecutionContext
from fluentlink.domain.errors import LocaleNotFoundError
from fluentlink.infrastructure.content_store import InMemoryContentStore
from fluentlink.infrastructure.runtime import Runtime
from fluentlink.services.content_state import ExistenceProvider
from tests.conftest import make_settings, page


class TestWiring:
    def test_default_existence_provider(self) -> None:
        rt = Runtime(make_settings())
        assert isinstance(rt.existence, ExistenceProvider)
        assert len(rt.registry) == 5

    def test_base_context(self) -> None:
        rt = Runtime(make_settings(), base_context=ExecutionContext(locale="en_US"))
        assert rt.stack.current().locale == "en_US"
        rt.stack.push(locale="de_DE")
        rt.stack.reset()
        assert rt.stack.current().locale == "en_US"

    def test_services_share_the_stack(self, runtime: Runtime) -> None:
        with runtime.stack.scope(locale="de_DE"):
            assert runtime.links.resolve_link(page(runtime, "a-page")) == "/german/a-page/"


class TestReload:
    def test_new_settings_take_effect(self, runtime: Runtime) -> None:
        node = page(runtime, "about-us/my-staff")
        with runtime.stack.scope(locale="en_NZ"):
            assert runtime.links.resolve_link(node) == "/newzealand/about-us/my-staff/"

        runtime.reload(make_settings(disable_default_prefix=True))

        with runtime.stack.scope(locale="en_NZ"):
            assert runtime.links.resolve_link(node) == "/about-us/my-staff/"

    def test_resets_stack(self, runtime: Runtime) -> None:
        runtime.stack.push(locale="de_DE")
        runtime.reload()
        assert runtime.stack.depth == 1
        assert runtime.stack.current().locale is None

    def test_keeps_tree_and_store(self, runtime: Runtime, store: InMemoryContentStore) -> None:
        runtime.reload()
        assert len(runtime.tree) == 4
        assert runtime.existence is store

    def test_removed_locale_is_gone(self, runtime: Runtime) -> None:
        settings = make_settings()
        runtime.reload(
            settings.model_copy(update={"locales": settings.locales[:1], "domains": []})
        )
        assert len(runtime.registry) == 1
        with pytest.raises(LocaleNotFoundError):
            runtime.links.resolve_link(page(runtime, "a-page"), "de_DE")

    def test_plugin_adapter_follows_reload(self, runtime: Runtime) -> None:
        node = page(runtime, "a-page")
        plugins = runtime.plugins
        assert plugins.relative_link(node, "a-page", "en_NZ") == "newzealand/a-page"
        runtime.reload(make_settings(disable_default_prefix=True))
        assert runtime.plugins is plugins
        assert plugins.relative_link(node, "a-page", "en_NZ") == "a-page"
