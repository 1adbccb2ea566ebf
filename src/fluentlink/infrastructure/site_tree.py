"""In-memory site tree — node lookup and parent link recursion.

The link resolver handles one node at a time; this tree supplies the
parent's already-localised link when a nested node needs it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import count
from typing import TYPE_CHECKING

from fluentlink.domain.content import ContentNode
from fluentlink.domain.errors import ParentLinkUnavailableError

if TYPE_CHECKING:
    from fluentlink.services.links import LinkResolver

logger = logging.getLogger(__name__)


class SiteTree:
    """Nodes keyed by id, implementing ``ParentLinkProvider``."""

    def __init__(
        self, links: LinkResolver | None = None, homepage_segment: str = "home"
    ) -> None:
        self._links = links
        self._homepage_segment = homepage_segment
        self._nodes: dict[int, ContentNode] = {}
        self._ids = count(1)

    def bind(self, links: LinkResolver, homepage_segment: str) -> None:
        """Resolve parent links through *links* from now on (wiring or config reload)."""
        self._links = links
        self._homepage_segment = homepage_segment

    def __iter__(self) -> Iterator[ContentNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, url_segment: str, parent: ContentNode | None = None) -> ContentNode:
        """Create and store a node under *parent* (or at the root)."""
        node = ContentNode(
            id=next(self._ids),
            parent_id=parent.id if parent else None,
            url_segment=url_segment,
            is_root=parent is None and url_segment == self._homepage_segment,
        )
        self._nodes[node.id] = node  # type: ignore[index]
        return node

    def get(self, node_id: int | None) -> ContentNode | None:
        if node_id is None:
            return None
        return self._nodes.get(node_id)

    def children(self, node: ContentNode | None) -> list[ContentNode]:
        parent_id = node.id if node else None
        return [n for n in self._nodes.values() if n.parent_id == parent_id]

    def find_by_path(self, path: str) -> ContentNode | None:
        """Walk slash-separated *path* segments from the root. ``/`` is the home page."""
        segments = [s for s in path.strip("/").split("/") if s]
        if not segments:
            segments = [self._homepage_segment]
        node: ContentNode | None = None
        for segment in segments:
            node = next((n for n in self.children(node) if n.url_segment == segment), None)
            if node is None:
                return None
        return node

    def ensure_path(self, path: str) -> ContentNode:
        """Like :meth:`find_by_path`, creating missing segments on the way."""
        segments = [s for s in path.strip("/").split("/") if s] or [self._homepage_segment]
        node: ContentNode | None = None
        for segment in segments:
            found = next((n for n in self.children(node) if n.url_segment == segment), None)
            node = found or self.add(segment, node)
        assert node is not None
        return node

    def parent_relative_link(self, node: ContentNode) -> str:
        """Relative link of *node*'s parent, localised in the current context."""
        parent = self.get(node.parent_id)
        if parent is None:
            logger.debug("Parent %s of node %s not in tree", node.parent_id, node.id)
            return ""
        if self._links is None:
            raise ParentLinkUnavailableError("Site tree is not bound to a link resolver")
        return self._links.relative_link(parent, parent_links=self)
