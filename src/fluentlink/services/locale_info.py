"""Per-locale information about a node — the data behind alternate links.

Used by templates for language switchers and ``hreflang`` tags. Each entry
is resolved in its own locale scope, so links reflect that locale's
prefix and domain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from fluentlink.domain.flags import LinkingMode

if TYPE_CHECKING:
    from fluentlink.domain.content import ContentNode
    from fluentlink.services.content_state import ContentStateResolver
    from fluentlink.services.links import LinkResolver, ParentLinkProvider
    from fluentlink.services.registry import LocaleRegistry
    from fluentlink.services.state import ContextStack


class LocaleInformation(BaseModel):
    """Everything a template needs to link to one locale of a node."""

    model_config = {"frozen": True}

    locale: str
    rfc1766: str
    hreflang: str
    title: str
    language: str
    language_native: str
    url_segment: str
    link: str
    absolute_link: str
    linking_mode: LinkingMode
    exists_draft: bool
    exists_published: bool
    source_locale: str | None = None


class LocaleInformationService:
    """Build :class:`LocaleInformation` entries for nodes."""

    def __init__(
        self,
        registry: LocaleRegistry,
        stack: ContextStack,
        links: LinkResolver,
        states: ContentStateResolver,
    ) -> None:
        self._registry = registry
        self._stack = stack
        self._links = links
        self._states = states

    def information(
        self,
        node: ContentNode,
        locale_code: str,
        *,
        parent_links: ParentLinkProvider | None = None,
    ) -> LocaleInformation:
        """Information for *node* in *locale_code*.

        Raises:
            LocaleNotFoundError: If *locale_code* is not registered.
        """
        locale = self._registry.get_locale(locale_code)
        current = self._stack.current().locale
        record = self._states.resolve(node.id, locale.code)
        return LocaleInformation(
            locale=locale.code,
            rfc1766=locale.rfc1766,
            hreflang=locale.hreflang,
            title=locale.title,
            language=locale.language_code,
            language_native=locale.language_native,
            url_segment=locale.url_segment,
            link=self._links.resolve_link(node, locale.code, parent_links=parent_links),
            absolute_link=self._links.absolute_link(node, locale.code, parent_links=parent_links),
            linking_mode=LinkingMode.CURRENT if locale.code == current else LinkingMode.LINK,
            exists_draft=record.exists_draft,
            exists_published=record.exists_published,
            source_locale=record.source_locale.code if record.source_locale else None,
        )

    def locales(
        self,
        node: ContentNode,
        *,
        parent_links: ParentLinkProvider | None = None,
    ) -> list[LocaleInformation]:
        """One entry per registered locale, in configured order."""
        return [
            self.information(node, locale.code, parent_links=parent_links)
            for locale in self._registry
        ]
