"""LinkResolver — locale prefixes and cross-domain rewriting for node links.

Link resolution happens in two steps, matching the host framework's hooks:

1. :meth:`LinkResolver.resolve_relative` decides whether a node's relative
   link gets the locale's URL segment as a path prefix. Only the root of a
   URL chain is ever prefixed; nested children inherit the prefix through
   the parent link supplied by the caller.
2. :meth:`LinkResolver.rewrite_for_domain` turns a root-relative link into
   an absolute one when the locale is served on a different domain from
   the one handling the request.

Walking up the tree is delegated to a :class:`ParentLinkProvider`, injected
at construction (the runtime wires its site tree) or passed per call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol

from fluentlink.domain.errors import ParentLinkUnavailableError
from fluentlink.domain.urls import join_links

if TYPE_CHECKING:
    from fluentlink.config.models import RoutingConfig
    from fluentlink.domain.content import ContentNode
    from fluentlink.domain.context import ExecutionContext
    from fluentlink.domain.locales import Locale
    from fluentlink.services.registry import LocaleRegistry
    from fluentlink.services.state import ContextStack

logger = logging.getLogger(__name__)


class ParentLinkProvider(Protocol):
    """Resolves the relative link of a node's parent in the current context."""

    def parent_relative_link(self, node: ContentNode) -> str: ...


class LinkResolver:
    """Compute localised links for content nodes."""

    def __init__(
        self,
        registry: LocaleRegistry,
        stack: ContextStack,
        routing: RoutingConfig,
        parents: ParentLinkProvider | None = None,
    ) -> None:
        self._registry = registry
        self._stack = stack
        self._routing = routing
        self._parents = parents

    # ------------------------------------------------------------------
    # Locale lookup
    # ------------------------------------------------------------------

    def _locale(self, locale_code: str | None, context: ExecutionContext) -> Locale | None:
        """Explicit codes must be registered; an ambient one may be missing."""
        if locale_code is not None:
            return self._registry.get_locale(locale_code)
        if context.locale is None:
            return None
        locale = self._registry.find_locale(context.locale)
        if locale is None:
            logger.warning("Context locale %s is not registered; links unchanged", context.locale)
        return locale

    @contextmanager
    def _in_locale(self, locale_code: str | None) -> Iterator[ExecutionContext]:
        """Scope the stack to *locale_code* so parent lookups resolve in it too."""
        current = self._stack.current()
        if locale_code is None:
            yield current
            return
        self._registry.get_locale(locale_code)
        if locale_code == current.locale:
            yield current
            return
        with self._stack.scope(locale=locale_code) as frame:
            yield frame

    def _parent_link(
        self, node: ContentNode, parent_links: ParentLinkProvider | None
    ) -> str | None:
        """Parent's localised relative link, or None if *node* is not nested.

        Raises:
            ParentLinkUnavailableError: If *node* nests but no provider was
                injected or passed.
        """
        if not (node.has_parent and self._routing.nested_urls):
            return None
        provider = parent_links if parent_links is not None else self._parents
        if provider is None:
            msg = f"No parent link provider to resolve nested node {node.id}"
            raise ParentLinkUnavailableError(msg)
        return provider.parent_relative_link(node)

    # ------------------------------------------------------------------
    # Core rules
    # ------------------------------------------------------------------

    def node_base(self, node: ContentNode, parent_link: str | None = None) -> str:
        """The unlocalised base of *node*'s relative link.

        Nested nodes hang off *parent_link*; a root-level home page has an
        empty base so that it resolves to ``/``.
        """
        if node.has_parent and self._routing.nested_urls and parent_link is not None:
            return join_links(parent_link, node.url_segment)
        if node.url_segment == self._routing.homepage_segment:
            return ""
        return node.url_segment

    def resolve_relative(
        self,
        node: ContentNode,
        base: str,
        locale_code: str | None = None,
        *,
        context: ExecutionContext | None = None,
    ) -> str:
        """Apply the locale prefix rules to *base*.

        Args:
            node: The node whose link is being built.
            base: The node's link before localisation.
            locale_code: Locale to resolve in; defaults to the context locale.
            context: Snapshot to resolve under; defaults to the stack's top frame.

        Raises:
            LocaleNotFoundError: If an explicit *locale_code* is not registered.
        """
        context = context or self._stack.current()

        if node.has_parent and self._routing.nested_urls:
            return base

        locale = self._locale(locale_code, context)
        if locale is None:
            return base

        # Transient pages (e.g. security forms) have no tree position.
        if not node.exists:
            return join_links(base, f"?{self._routing.query_param}={locale.code}")

        if self._routing.disable_default_prefix and self._registry.is_default_in(
            locale.code, context
        ):
            return base

        # The domain alone identifies the locale; suppression config is irrelevant.
        if self._registry.is_only_locale_in(locale.code, context):
            return base

        return join_links(locale.url_segment, base)

    def rewrite_for_domain(
        self,
        link: str,
        locale_code: str | None = None,
        *,
        context: ExecutionContext | None = None,
    ) -> str:
        """Prefix *link* with the locale's domain when it differs from the active one.

        *link* is root-relative and already contains the base URL.
        """
        context = context or self._stack.current()
        locale = self._locale(locale_code, context)
        if locale is None:
            return link

        domain = self._registry.domain_for(locale.code, context)
        if domain is None:
            return link
        if domain.hostname == context.active_hostname:
            return link

        return join_links(f"{self._routing.scheme}://{domain.hostname}", link)

    def is_x_default_candidate(
        self,
        node: ContentNode,
        locale_code: str | None = None,
        *,
        context: ExecutionContext | None = None,
    ) -> bool:
        """Whether *node* should also be advertised as the ``x-default`` alternate."""
        if self._routing.disable_default_prefix:
            return False
        context = context or self._stack.current()
        locale = self._locale(locale_code, context)
        if locale is not None and self._registry.is_only_locale_in(locale.code, context):
            return False
        return node.url_segment == self._routing.homepage_segment

    # ------------------------------------------------------------------
    # Composed links
    # ------------------------------------------------------------------

    def relative_link(
        self,
        node: ContentNode,
        locale_code: str | None = None,
        *,
        parent_links: ParentLinkProvider | None = None,
    ) -> str:
        """Localised link relative to the base URL, always with a trailing slash."""
        with self._in_locale(locale_code) as context:
            base = self.node_base(node, self._parent_link(node, parent_links))
            return join_links(self.resolve_relative(node, base, context=context), "/")

    def resolve_link(
        self,
        node: ContentNode,
        locale_code: str | None = None,
        *,
        parent_links: ParentLinkProvider | None = None,
    ) -> str:
        """Root-relative link, or absolute when the locale lives on another domain."""
        with self._in_locale(locale_code) as context:
            relative = self.relative_link(node, parent_links=parent_links)
            link = join_links(self._routing.base_url, relative)
            return self.rewrite_for_domain(link, context=context)

    def absolute_link(
        self,
        node: ContentNode,
        locale_code: str | None = None,
        *,
        parent_links: ParentLinkProvider | None = None,
    ) -> str:
        """Like :meth:`resolve_link` but always includes scheme and host."""
        with self._in_locale(locale_code) as context:
            link = self.resolve_link(node, parent_links=parent_links)
            if "://" in link:
                return link
            host = context.active_hostname or self._routing.default_host
            return join_links(f"{self._routing.scheme}://{host}", link)

    def url_segment_prefix(
        self,
        node: ContentNode,
        *,
        parent_links: ParentLinkProvider | None = None,
    ) -> str:
        """Absolute URL shown in front of *node*'s editable URL segment.

        Resolved as the frontend would see it in domain mode, whatever the
        current request is.
        """
        with self._stack.scope(is_domain_mode=True, is_frontend=True) as context:
            parent_relative = self._parent_link(node, parent_links)
            if parent_relative is None:
                parent_relative = self.resolve_relative(node, "/", context=context)

            locale = self._locale(None, context)
            domain = self._registry.domain_for(locale.code, context) if locale else None
            if domain is not None:
                parent_base = domain.link(self._routing.scheme, self._routing.base_url)
            else:
                parent_base = join_links(
                    f"{self._routing.scheme}://{self._routing.default_host}",
                    self._routing.base_url,
                )
            return join_links(parent_base, parent_relative)
