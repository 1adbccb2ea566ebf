"""Pluggy hook specifications for the host framework's link and status hooks.

A host (CMS, site generator, web app) calls these at the points where it
builds a page link or the admin tree's status flags. The core never sees
the host's classes; it only answers through these hooks.
All hooks are ``firstresult``: the first non-None answer wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from fluentlink.domain.content import ContentNode

PROJECT_NAME = "fluentlink"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class FluentHookSpec:
    """Hook specifications for the fluentlink plugin system."""

    @hookspec(firstresult=True)
    def update_relative_link(
        self,
        node: ContentNode,
        base: str,
        locale: str | None,
    ) -> str | None:
        """Return *node*'s relative link with locale rules applied to *base*."""

    @hookspec(firstresult=True)
    def update_link(
        self,
        node: ContentNode,
        link: str,
        locale: str | None,
    ) -> str | None:
        """Return *link* rewritten for the locale's domain."""

    @hookspec(firstresult=True)
    def update_status_flags(
        self,
        node: ContentNode,
        flags: dict[str, Any],
        locale: str | None,
    ) -> dict[str, Any] | None:
        """Return the admin tree's status flags for *node* in *locale*."""

    @hookspec(firstresult=True)
    def link_to_x_default(
        self,
        node: ContentNode,
        locale: str | None,
    ) -> bool | None:
        """Return whether *node* is also the ``x-default`` alternate."""
