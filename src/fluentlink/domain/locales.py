"""Locale and Domain records.

Both are immutable once loaded. The registry rebuilds them on configuration
reload; nothing in the core mutates a record after construction.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from fluentlink.domain.urls import join_links


class Locale(BaseModel):
    """A language/region identifier with metadata and an optional domain binding.

    Attributes:
        code: Locale code, e.g. ``"en_US"``.
        rfc1766: RFC 1766 tag, e.g. ``"en-us"``. Derived from *code* if omitted.
        title: Human readable title, e.g. ``"English (US)"``.
        language_code: Two-letter language, derived from *code* if omitted.
        language_native: Native name of the language.
        url_segment: Path prefix used when the locale is prefixed onto links.
        domain: Hostname of the bound domain, or None.
        is_default: Whether this is the default locale of its domain.
        is_global_default: Whether this is the site-wide default locale.
        fallbacks: Ordered locale codes consulted when content is absent.
    """

    model_config = {"frozen": True}

    code: str
    rfc1766: str = ""
    title: str = ""
    language_code: str = ""
    language_native: str = ""
    url_segment: str = ""
    domain: str | None = None
    is_default: bool = False
    is_global_default: bool = False
    fallbacks: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _derive_defaults(cls, data: object) -> object:
        if not isinstance(data, dict) or not data.get("code"):
            return data
        code = str(data["code"])
        defaults = {
            "rfc1766": code.replace("_", "-").lower(),
            "language_code": code.split("_", 1)[0].lower(),
            "title": code,
            "url_segment": code,
        }
        derived = dict(data)
        for key, value in defaults.items():
            if not derived.get(key):
                derived[key] = value
        return derived

    @property
    def hreflang(self) -> str:
        """Value for ``<link rel="alternate" hreflang=...>`` tags."""
        return self.rfc1766.lower()


class Domain(BaseModel):
    """A hostname serving one or more locales.

    ``locales`` is ordered as configured and never empty.
    """

    model_config = {"frozen": True}

    hostname: str
    locales: tuple[str, ...] = Field(min_length=1)
    default_locale: str

    def link(self, scheme: str = "http", base_url: str = "/") -> str:
        """Absolute base link for this domain, e.g. ``http://www.example.com/``."""
        return join_links(f"{scheme}://{self.hostname}", base_url)

    @property
    def is_single_locale(self) -> bool:
        return len(self.locales) == 1
