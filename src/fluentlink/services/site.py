"""SiteService — inspect a localisation configuration for the CLI.

Operations:
- ``list_locales``: the registry as data.
- ``resolve_link``: localised link of a path in the runtime's site tree.
- ``check``: validate the configuration and summarise it.
"""

from __future__ import annotations

from typing import Any

from fluentlink.services.base import BaseService
from fluentlink.services.registry import LocaleRegistry
from fluentlink.services.result import ServiceResult


class SiteService(BaseService):
    """Read-only operations over a :class:`Runtime`."""

    def list_locales(self) -> ServiceResult:
        registry = self._runtime.registry

        def payload() -> dict[str, Any]:
            default = registry.global_default()
            items = [
                {
                    "code": locale.code,
                    "title": locale.title,
                    "url_segment": locale.url_segment,
                    "hreflang": locale.hreflang,
                    "domain": locale.domain,
                    "is_default": locale.is_default,
                    "is_global_default": default is not None and default.code == locale.code,
                    "fallbacks": list(locale.fallbacks),
                }
                for locale in registry
            ]
            return {"count": len(items), "items": items}

        return self._run("list_locales", payload)

    def resolve_link(
        self,
        path: str,
        locale: str,
        *,
        host: str | None = None,
        domain_mode: bool = False,
        frontend: bool = True,
    ) -> ServiceResult:
        """Resolve *path* (created in the tree on demand) in *locale*."""
        runtime = self._runtime

        def payload() -> dict[str, Any]:
            runtime.registry.get_locale(locale)
            node = runtime.tree.ensure_path(path)
            with runtime.stack.scope(
                locale=locale,
                is_domain_mode=domain_mode or host is not None,
                is_frontend=frontend,
                active_hostname=host,
            ):
                return {
                    "path": path,
                    "locale": locale,
                    "link": runtime.links.resolve_link(node),
                    "absolute_link": runtime.links.absolute_link(node),
                    "x_default": runtime.links.is_x_default_candidate(node),
                }

        return self._run("resolve_link", payload)

    def check(self) -> ServiceResult:
        """Rebuild the registry from settings to surface configuration errors."""
        settings = self._runtime.settings

        def payload() -> dict[str, Any]:
            registry = LocaleRegistry.from_config(settings.config)
            return {
                "healthy": True,
                "locales": len(registry),
                "domains": len(registry.domains),
                "config_path": str(settings.config_path) if settings.config_path else None,
            }

        return self._run("check", payload)
