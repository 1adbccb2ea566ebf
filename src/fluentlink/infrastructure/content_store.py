"""In-memory content store — the existence side of the storage layer.

Holds which (node, locale) pairs have draft, published, or archived rows.
Implements :class:`~fluentlink.services.content_state.ExistenceProvider`
for tests, the CLI, and hosts that already know their existence data.
"""

from __future__ import annotations

from collections import defaultdict
from enum import StrEnum


class Stage(StrEnum):
    """Versioned storage stage of a localised row."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class InMemoryContentStore:
    """Sets of locale codes per node and stage."""

    def __init__(self) -> None:
        self._rows: dict[Stage, defaultdict[int, set[str]]] = {
            stage: defaultdict(set) for stage in Stage
        }

    def write(self, node_id: int, locale_code: str, *, publish: bool = False) -> None:
        """Save a draft row, and a published row when *publish* is set."""
        self._rows[Stage.DRAFT][node_id].add(locale_code)
        self._rows[Stage.ARCHIVED][node_id].discard(locale_code)
        if publish:
            self._rows[Stage.PUBLISHED][node_id].add(locale_code)

    def unpublish(self, node_id: int, locale_code: str) -> None:
        self._rows[Stage.PUBLISHED][node_id].discard(locale_code)

    def archive(self, node_id: int, locale_code: str) -> None:
        """Move the locale's rows to the archive."""
        self._rows[Stage.DRAFT][node_id].discard(locale_code)
        self._rows[Stage.PUBLISHED][node_id].discard(locale_code)
        self._rows[Stage.ARCHIVED][node_id].add(locale_code)

    def _has(self, stage: Stage, node_id: int, locale_code: str) -> bool:
        return locale_code in self._rows[stage].get(node_id, ())

    def exists_draft(self, node_id: int, locale_code: str) -> bool:
        return self._has(Stage.DRAFT, node_id, locale_code)

    def exists_published(self, node_id: int, locale_code: str) -> bool:
        return self._has(Stage.PUBLISHED, node_id, locale_code)

    def exists_archived(self, node_id: int, locale_code: str) -> bool:
        return self._has(Stage.ARCHIVED, node_id, locale_code)

    def has_any_locale_instance(self, node_id: int) -> bool:
        """Whether any locale holds a draft row for *node_id*."""
        return bool(self._rows[Stage.DRAFT].get(node_id))
