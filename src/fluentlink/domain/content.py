"""Content node and per-locale record state.

``ContentNode`` is owned by the storage layer; the core only reads it.
``RecordLocale`` is computed fresh on every resolution and never persisted.
"""

from __future__ import annotations

from pydantic import BaseModel

from fluentlink.domain.locales import Locale


class ContentNode(BaseModel):
    """A page in the content tree, as seen by link resolution.

    Attributes:
        id: Storage identifier, or None for transient/unsaved nodes.
        parent_id: Identifier of the parent node, None at the tree root.
        url_segment: This node's own path segment, e.g. ``"about-us"``.
        is_root: True for the configured home node.
    """

    model_config = {"frozen": True}

    id: int | None = None
    parent_id: int | None = None
    url_segment: str = ""
    is_root: bool = False

    @property
    def exists(self) -> bool:
        """Whether the node has been written to storage."""
        return self.id is not None

    @property
    def has_parent(self) -> bool:
        return bool(self.parent_id)


class RecordLocale(BaseModel):
    """Existence state of one node in one locale.

    ``source_locale`` is set only when neither draft nor published content
    exists here but some locale in the fallback chain has either.
    """

    model_config = {"frozen": True}

    node_id: int | None
    locale: Locale
    exists_draft: bool = False
    exists_published: bool = False
    exists_archived: bool = False
    source_locale: Locale | None = None

    @property
    def is_localised(self) -> bool:
        """Draft or published content exists in this locale itself."""
        return self.exists_draft or self.exists_published

    @property
    def is_inherited(self) -> bool:
        return self.source_locale is not None
