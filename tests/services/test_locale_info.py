"""Tests for LocaleInformationService."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluentlink.domain.errors import LocaleNotFoundError
from fluentlink.domain.flags import LinkingMode
from fluentlink.infrastructure.content_store import InMemoryContentStore
from fluentlink.infrastructure.runtime import Runtime
from tests.conftest import page


class TestInformation:
    def test_new_zealand_page(self, runtime: Runtime) -> None:
        node = page(runtime, "a-page")
        info = runtime.locale_info.information(node, "en_NZ")

        assert info.locale == "en_NZ"
        assert info.title == "English (New Zealand)"
        assert info.language == "en"
        assert info.language_native == "English"
        assert info.url_segment == "newzealand"
        assert info.link == "/newzealand/a-page/"
        assert info.absolute_link == "http://mocked/newzealand/a-page/"

    def test_hreflang(self, runtime: Runtime) -> None:
        info = runtime.locale_info.information(page(runtime, "a-page"), "en_US")
        assert info.rfc1766 == "en-us"
        assert info.hreflang == "en-us"

    def test_linking_mode(self, runtime: Runtime) -> None:
        node = page(runtime, "a-page")
        with runtime.stack.scope(locale="de_DE"):
            current = runtime.locale_info.information(node, "de_DE")
            other = runtime.locale_info.information(node, "es_ES")
        assert current.linking_mode is LinkingMode.CURRENT
        assert other.linking_mode is LinkingMode.LINK

    def test_existence_and_source(self, runtime: Runtime, store: InMemoryContentStore) -> None:
        node = page(runtime, "a-page")
        store.write(node.id, "en_NZ", publish=True)  # type: ignore[arg-type]

        native = runtime.locale_info.information(node, "en_NZ")
        inherited = runtime.locale_info.information(node, "de_DE")

        assert native.exists_draft and native.exists_published
        assert native.source_locale is None
        assert not inherited.exists_draft
        assert inherited.source_locale == "en_NZ"

    def test_cross_domain_link_is_absolute(self, runtime: Runtime) -> None:
        node = page(runtime, "about-us/my-staff")
        with runtime.stack.scope(is_domain_mode=True, active_hostname="www.example.com"):
            info = runtime.locale_info.information(node, "de_DE")
        assert info.link == "http://www.example.de/about-us/my-staff/"
        assert info.absolute_link == info.link

    def test_nested_node_gets_parent_and_prefix(self, runtime: Runtime) -> None:
        info = runtime.locale_info.information(page(runtime, "about-us/my-staff"), "de_DE")
        assert info.link == "/german/about-us/my-staff/"
        assert info.absolute_link == "http://mocked/german/about-us/my-staff/"

    def test_does_not_leak_scope(self, runtime: Runtime) -> None:
        with runtime.stack.scope(locale="es_ES"):
            runtime.locale_info.information(page(runtime, "a-page"), "zh_CN")
            assert runtime.stack.current().locale == "es_ES"
            assert runtime.stack.depth == 2

    def test_unknown_locale(self, runtime: Runtime) -> None:
        with pytest.raises(LocaleNotFoundError):
            runtime.locale_info.information(page(runtime, "a-page"), "fr_FR")

    def test_frozen(self, runtime: Runtime) -> None:
        info = runtime.locale_info.information(page(runtime, "a-page"), "en_NZ")
        with pytest.raises(ValidationError):
            info.title = "changed"  # type: ignore[misc]


class TestLocales:
    def test_one_entry_per_locale_in_order(self, runtime: Runtime) -> None:
        infos = runtime.locale_info.locales(page(runtime, "a-page"))
        assert [i.locale for i in infos] == ["en_NZ", "de_DE", "en_US", "es_ES", "zh_CN"]

    def test_links_per_locale(self, runtime: Runtime) -> None:
        infos = runtime.locale_info.locales(page(runtime, "/"))
        assert {i.locale: i.link for i in infos} == {
            "en_NZ": "/newzealand/",
            "de_DE": "/german/",
            "en_US": "/usa/",
            "es_ES": "/es_ES/",
            "zh_CN": "/zh_CN/",
        }
