"""LocaleRegistry — immutable catalogue of locales and the domains serving them.

Built once from configuration and never mutated; a configuration reload
builds a new registry. All lookups are pure.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from fluentlink.domain.errors import InvalidConfigurationError, LocaleNotFoundError
from fluentlink.domain.locales import Domain, Locale

if TYPE_CHECKING:
    from fluentlink.config.models import DomainConfig, FluentConfig, LocaleConfig
    from fluentlink.domain.context import ExecutionContext

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Lookup over :class:`Locale` and :class:`Domain` records.

    The context-free queries (:meth:`is_only_locale_on_domain`,
    :meth:`get_default_locale_for_domain`) look at domain bindings only.
    The ``*_in`` variants take an :class:`ExecutionContext` and treat a
    locale as domain-less whenever domain mode is off.
    """

    def __init__(self, locales: Iterable[Locale], domains: Iterable[Domain] = ()) -> None:
        self._locales: dict[str, Locale] = {}
        for locale in locales:
            if locale.code in self._locales:
                msg = f"Duplicate locale code: {locale.code!r}"
                raise InvalidConfigurationError(msg)
            self._locales[locale.code] = locale
        self._domains: dict[str, Domain] = {d.hostname: d for d in domains}
        self._validate()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_config(cls, config: FluentConfig) -> LocaleRegistry:
        """Build a registry from the ``[[locales]]`` and ``[[domains]]`` tables.

        Domain membership comes from each locale's ``domain`` key; a domain's
        default is its ``default_locale``, else the locale flagged
        ``is_default``, else its first locale.

        Raises:
            InvalidConfigurationError: If the tables are inconsistent.
        """
        declared = {d.hostname: d for d in config.domains}
        members: dict[str, list[LocaleConfig]] = {hostname: [] for hostname in declared}
        for entry in config.locales:
            if entry.domain is None:
                continue
            if entry.domain not in declared:
                msg = f"Locale {entry.code!r} is bound to undeclared domain {entry.domain!r}"
                raise InvalidConfigurationError(msg)
            members[entry.domain].append(entry)

        defaults = {
            hostname: _pick_domain_default(declared[hostname], entries)
            for hostname, entries in members.items()
        }

        locales = [
            Locale(
                code=entry.code,
                title=entry.title,
                rfc1766=entry.rfc1766,
                language_code=entry.language_code,
                language_native=entry.language_native,
                url_segment=entry.url_segment,
                domain=entry.domain,
                is_default=entry.domain is not None and defaults[entry.domain] == entry.code,
                is_global_default=entry.is_global_default,
                fallbacks=tuple(entry.fallbacks),
            )
            for entry in config.locales
        ]
        domains = [
            Domain(
                hostname=hostname,
                locales=tuple(e.code for e in entries),
                default_locale=defaults[hostname],
            )
            for hostname, entries in members.items()
        ]
        return cls(locales, domains)

    def _validate(self) -> None:
        for domain in self._domains.values():
            for code in domain.locales:
                locale = self._locales.get(code)
                if locale is None:
                    msg = f"Domain {domain.hostname!r} references unknown locale {code!r}"
                    raise InvalidConfigurationError(msg)
                if locale.domain != domain.hostname:
                    msg = f"Locale {code!r} is listed on {domain.hostname!r} but bound elsewhere"
                    raise InvalidConfigurationError(msg)
            flagged = [c for c in domain.locales if self._locales[c].is_default]
            if len(flagged) > 1:
                msg = f"Domain {domain.hostname!r} has several default locales: {flagged}"
                raise InvalidConfigurationError(msg)
            if domain.default_locale not in domain.locales:
                msg = (
                    f"Default locale {domain.default_locale!r} is not served "
                    f"by domain {domain.hostname!r}"
                )
                raise InvalidConfigurationError(msg)
            if flagged and flagged[0] != domain.default_locale:
                msg = (
                    f"Domain {domain.hostname!r} names {domain.default_locale!r} as default "
                    f"but locale {flagged[0]!r} is flagged is_default"
                )
                raise InvalidConfigurationError(msg)

        for locale in self._locales.values():
            if locale.domain is not None and locale.domain not in self._domains:
                msg = f"Locale {locale.code!r} is bound to unregistered domain {locale.domain!r}"
                raise InvalidConfigurationError(msg)
            for code in locale.fallbacks:
                if code == locale.code:
                    msg = f"Locale {locale.code!r} lists itself as a fallback"
                    raise InvalidConfigurationError(msg)
                if code not in self._locales:
                    msg = f"Locale {locale.code!r} falls back to unknown locale {code!r}"
                    raise InvalidConfigurationError(msg)

        global_defaults = [c for c, loc in self._locales.items() if loc.is_global_default]
        if len(global_defaults) > 1:
            msg = f"Several global default locales configured: {global_defaults}"
            raise InvalidConfigurationError(msg)

    # ------------------------------------------------------------------
    # Catalogue queries
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Locale]:
        return iter(self._locales.values())

    def __len__(self) -> int:
        return len(self._locales)

    def __contains__(self, code: object) -> bool:
        return code in self._locales

    @property
    def domains(self) -> list[Domain]:
        return list(self._domains.values())

    def get_locale(self, code: str) -> Locale:
        """Return the locale for *code*.

        Raises:
            LocaleNotFoundError: If *code* is not registered.
        """
        try:
            return self._locales[code]
        except KeyError:
            raise LocaleNotFoundError(code) from None

    def find_locale(self, code: str | None) -> Locale | None:
        """Like :meth:`get_locale` but returns None for missing or unknown codes."""
        if code is None:
            return None
        return self._locales.get(code)

    def get_domain(self, hostname: str | None) -> Domain | None:
        if hostname is None:
            return None
        return self._domains.get(hostname)

    def domain_of(self, code: str) -> Domain | None:
        """The domain *code* is bound to, regardless of domain mode."""
        return self.get_domain(self.get_locale(code).domain)

    def get_default_locale_for_domain(self, hostname: str) -> Locale | None:
        domain = self._domains.get(hostname)
        if domain is None:
            return None
        return self._locales[domain.default_locale]

    def global_default(self) -> Locale | None:
        """The site-wide default: the flagged locale, else the first configured."""
        for locale in self._locales.values():
            if locale.is_global_default:
                return locale
        return next(iter(self._locales.values()), None)

    def is_only_locale_on_domain(self, code: str) -> bool:
        """True iff *code* is bound to a domain serving exactly one locale."""
        domain = self.domain_of(code)
        return domain is not None and domain.is_single_locale

    def fallback_order(self, code: str) -> tuple[str, ...]:
        """Configured fallback codes for *code*, never including *code* itself."""
        return tuple(c for c in self.get_locale(code).fallbacks if c != code)

    # ------------------------------------------------------------------
    # Context-aware queries
    # ------------------------------------------------------------------

    def domain_for(self, code: str, context: ExecutionContext) -> Domain | None:
        """The locale's domain while domain mode is on, else None."""
        if not context.is_domain_mode:
            return None
        return self.domain_of(code)

    def is_default_in(self, code: str, context: ExecutionContext) -> bool:
        """Whether *code* is the default locale where it is served under *context*."""
        domain = self.domain_for(code, context)
        if domain is not None:
            return domain.default_locale == code
        default = self.global_default()
        return default is not None and default.code == code

    def is_only_locale_in(self, code: str, context: ExecutionContext) -> bool:
        """Whether nothing but *code* competes for the locale prefix under *context*."""
        domain = self.domain_for(code, context)
        if domain is not None:
            return domain.is_single_locale
        return len(self._locales) == 1 and code in self._locales


def _pick_domain_default(domain: DomainConfig, entries: list[LocaleConfig]) -> str:
    if not entries:
        msg = f"Domain {domain.hostname!r} has no locales"
        raise InvalidConfigurationError(msg)
    codes = [e.code for e in entries]
    flagged = [e.code for e in entries if e.is_default]
    if len(flagged) > 1:
        msg = f"Domain {domain.hostname!r} has several default locales: {flagged}"
        raise InvalidConfigurationError(msg)
    if domain.default_locale is not None:
        if domain.default_locale not in codes:
            msg = (
                f"Default locale {domain.default_locale!r} is not served "
                f"by domain {domain.hostname!r}"
            )
            raise InvalidConfigurationError(msg)
        if flagged and flagged[0] != domain.default_locale:
            msg = (
                f"Domain {domain.hostname!r} names {domain.default_locale!r} as default "
                f"but locale {flagged[0]!r} is flagged is_default"
            )
            raise InvalidConfigurationError(msg)
        return domain.default_locale
    if flagged:
        return flagged[0]
    if len(codes) > 1:
        logger.warning(
            "Domain %s has no default locale; using first locale %s",
            domain.hostname,
            codes[0],
        )
    return codes[0]
