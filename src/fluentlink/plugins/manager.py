"""Plugin discovery, registration, and hook dispatch for host adapters.

Hosts either call the hook relay directly (``pm.hook.update_link(...)``)
or use the typed helpers below, which fall back to the unchanged input
when no plugin answers.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

import pluggy

from fluentlink.plugins.hookspecs import PROJECT_NAME, FluentHookSpec

if TYPE_CHECKING:
    from fluentlink.domain.content import ContentNode

ENTRY_POINT_GROUP = "fluentlink.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(FluentHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins registered under the ``fluentlink.plugins`` entry point group.

        Returns the names of all registered plugins.
        """
        try:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load %s entry points", ENTRY_POINT_GROUP, exc_info=True)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. the built-in adapter)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Typed dispatch helpers
    # ------------------------------------------------------------------

    def relative_link(self, node: ContentNode, base: str, locale: str | None = None) -> str:
        result = self._pm.hook.update_relative_link(node=node, base=base, locale=locale)
        return base if result is None else result

    def link(self, node: ContentNode, link: str, locale: str | None = None) -> str:
        result = self._pm.hook.update_link(node=node, link=link, locale=locale)
        return link if result is None else result

    def status_flags(
        self,
        node: ContentNode,
        flags: dict[str, Any],
        locale: str | None = None,
    ) -> dict[str, Any]:
        result = self._pm.hook.update_status_flags(node=node, flags=flags, locale=locale)
        return dict(flags) if result is None else result

    def links_to_x_default(self, node: ContentNode, locale: str | None = None) -> bool:
        return bool(self._pm.hook.link_to_x_default(node=node, locale=locale))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
