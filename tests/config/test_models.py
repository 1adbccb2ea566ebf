"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluentlink.config.models import (
    DomainConfig,
    FluentConfig,
    LocaleConfig,
    RoutingConfig,
    StatusConfig,
)


class TestDefaults:
    def test_routing(self) -> None:
        routing = RoutingConfig()
        assert routing.disable_default_prefix is False
        assert routing.nested_urls is True
        assert routing.query_param == "l"
        assert routing.homepage_segment == "home"
        assert routing.base_url == "/"

    def test_status(self) -> None:
        status = StatusConfig()
        assert status.locale_published_status_message is True
        assert status.frontend_publish_required is False
        assert status.cms_localisation_required is False

    def test_empty_config_is_unlocalised(self) -> None:
        config = FluentConfig()
        assert config.locales == []
        assert config.domains == []


class TestValidation:
    def test_sparse_sections(self) -> None:
        config = FluentConfig.model_validate(
            {
                "routing": {"disable_default_prefix": True},
                "locales": [{"code": "en_NZ", "fallbacks": ["en_US"]}],
                "domains": [{"hostname": "www.example.com"}],
            }
        )
        assert config.routing.disable_default_prefix is True
        assert config.routing.nested_urls is True
        assert config.locales[0] == LocaleConfig(code="en_NZ", fallbacks=["en_US"])
        assert config.domains[0] == DomainConfig(hostname="www.example.com")

    def test_locale_requires_code(self) -> None:
        with pytest.raises(ValidationError):
            LocaleConfig.model_validate({"title": "No code"})

    def test_wrong_type(self) -> None:
        with pytest.raises(ValidationError):
            RoutingConfig.model_validate({"nested_urls": "sometimes"})

    def test_frozen(self) -> None:
        routing = RoutingConfig()
        with pytest.raises(ValidationError):
            routing.scheme = "https"  # type: ignore[misc]
