"""LocalisationPlugin — built-in hook implementations backed by the runtime.

Each hook is a one-line delegation to a core service; the plugin holds no
state of its own beyond the runtime reference, so it survives reloads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluentlink.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from fluentlink.domain.content import ContentNode
    from fluentlink.infrastructure.runtime import Runtime


class LocalisationPlugin:
    """Answer the host's link and status hooks from a :class:`Runtime`."""

    def __init__(self, runtime: Runtime) -> None:
        self._runtime = runtime

    @hookimpl
    def update_relative_link(self, node: ContentNode, base: str, locale: str | None) -> str:
        return self._runtime.links.resolve_relative(node, base, locale)

    @hookimpl
    def update_link(self, node: ContentNode, link: str, locale: str | None) -> str:
        return self._runtime.links.rewrite_for_domain(link, locale)

    @hookimpl
    def update_status_flags(
        self,
        node: ContentNode,
        flags: dict[str, Any],
        locale: str | None,
    ) -> dict[str, Any]:
        return self._runtime.flags.compute(node.id, flags, locale)

    @hookimpl
    def link_to_x_default(self, node: ContentNode, locale: str | None) -> bool:
        return self._runtime.links.is_x_default_candidate(node, locale)
