"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fluentlink.toml only contains
overrides. A site with no locales configured behaves as non-localised.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- fluentlink.toml sections ---


class RoutingConfig(BaseModel):
    """[routing] section."""

    model_config = {"frozen": True}

    disable_default_prefix: bool = False
    nested_urls: bool = True
    query_param: str = "l"
    homepage_segment: str = "home"
    base_url: str = "/"
    scheme: str = "http"
    default_host: str = "localhost"


class StatusConfig(BaseModel):
    """[status] section."""

    model_config = {"frozen": True}

    locale_published_status_message: bool = True
    frontend_publish_required: bool = False
    cms_localisation_required: bool = False


class LocaleConfig(BaseModel):
    """One [[locales]] entry."""

    model_config = {"frozen": True}

    code: str
    title: str = ""
    rfc1766: str = ""
    language_code: str = ""
    language_native: str = ""
    url_segment: str = ""
    domain: str | None = None
    is_default: bool = False
    is_global_default: bool = False
    fallbacks: list[str] = Field(default_factory=list)


class DomainConfig(BaseModel):
    """One [[domains]] entry."""

    model_config = {"frozen": True}

    hostname: str
    default_locale: str | None = None


class FluentConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)
    locales: list[LocaleConfig] = Field(default_factory=list)
    domains: list[DomainConfig] = Field(default_factory=list)
