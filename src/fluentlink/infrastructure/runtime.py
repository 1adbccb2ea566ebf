"""Runtime — the single dependency injected into adapter-facing services.

Wires the locale registry, one context stack, the existence provider, and
the resolvers that depend on them. :meth:`Runtime.reload` rebuilds the
registry from settings and rewires every resolver, so nothing keeps a
reference to a stale catalogue.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fluentlink.domain.context import ExecutionContext
from fluentlink.infrastructure.content_store import InMemoryContentStore
from fluentlink.infrastructure.site_tree import SiteTree
from fluentlink.services.content_state import ContentStateResolver
from fluentlink.services.links import LinkResolver
from fluentlink.services.locale_info import LocaleInformationService
from fluentlink.services.registry import LocaleRegistry
from fluentlink.services.state import ContextStack
from fluentlink.services.status_flags import StatusFlagComputer

if TYPE_CHECKING:
    from fluentlink.config.settings import FluentSettings
    from fluentlink.plugins.manager import PluginManager
    from fluentlink.services.content_state import ExistenceProvider

logger = logging.getLogger(__name__)


class Runtime:
    """Localisation services for one logical flow of control.

    Each concurrent request or task builds its own runtime (or at least its
    own :class:`ContextStack`); the stack is not shared.
    """

    def __init__(
        self,
        settings: FluentSettings,
        *,
        existence: ExistenceProvider | None = None,
        base_context: ExecutionContext | None = None,
    ) -> None:
        self.settings = settings
        self.existence: ExistenceProvider = existence or InMemoryContentStore()
        self.stack = ContextStack(base_context)
        self._plugins: PluginManager | None = None
        self.tree = SiteTree(homepage_segment=settings.routing.homepage_segment)
        self._wire()

    def _wire(self) -> None:
        config = self.settings.config
        self.registry = LocaleRegistry.from_config(config)
        self.states = ContentStateResolver(self.registry, self.existence)
        self.links = LinkResolver(self.registry, self.stack, config.routing, parents=self.tree)
        self.tree.bind(self.links, config.routing.homepage_segment)
        self.flags = StatusFlagComputer(self.registry, self.states, self.stack)
        self.locale_info = LocaleInformationService(
            self.registry, self.stack, self.links, self.states
        )
        logger.debug(
            "Runtime wired: %d locales, %d domains",
            len(self.registry),
            len(self.registry.domains),
        )

    def reload(self, settings: FluentSettings | None = None) -> None:
        """Rebuild the registry and resolvers, optionally from new *settings*.

        The context stack is reset to its base frame; the site tree keeps its
        nodes but resolves through the new link resolver.
        """
        if settings is not None:
            self.settings = settings
        self.stack.reset()
        self._wire()

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager with the built-in localisation adapter (created lazily)."""
        if self._plugins is None:
            from fluentlink.plugins.adapter import LocalisationPlugin
            from fluentlink.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.register_plugin(LocalisationPlugin(self), name="localisation")
        return self._plugins
