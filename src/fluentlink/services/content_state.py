"""ContentStateResolver — per-locale draft/published/archived state.

Existence data comes from the storage layer through :class:`ExistenceProvider`.
When a locale has neither draft nor published content, the locale's
fallback chain is walked in order and the first locale holding either
becomes the record's source locale.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fluentlink.domain.content import RecordLocale
from fluentlink.domain.flags import LocaleStatusMessage

if TYPE_CHECKING:
    from fluentlink.config.models import StatusConfig
    from fluentlink.domain.context import ExecutionContext
    from fluentlink.services.registry import LocaleRegistry

logger = logging.getLogger(__name__)


@runtime_checkable
class ExistenceProvider(Protocol):
    """Storage-side predicates over per-locale content rows."""

    def exists_draft(self, node_id: int, locale_code: str) -> bool: ...

    def exists_published(self, node_id: int, locale_code: str) -> bool: ...

    def exists_archived(self, node_id: int, locale_code: str) -> bool: ...

    def has_any_locale_instance(self, node_id: int) -> bool: ...


class ContentStateResolver:
    """Resolve :class:`RecordLocale` values from raw existence predicates."""

    def __init__(self, registry: LocaleRegistry, existence: ExistenceProvider) -> None:
        self._registry = registry
        self._existence = existence

    def resolve(self, node_id: int | None, locale_code: str) -> RecordLocale:
        """Return the existence state of *node_id* in *locale_code*.

        A transient node (``node_id`` None) exists nowhere.

        Raises:
            LocaleNotFoundError: If *locale_code* is not registered.
        """
        locale = self._registry.get_locale(locale_code)
        if node_id is None:
            return RecordLocale(node_id=None, locale=locale)

        draft = self._existence.exists_draft(node_id, locale_code)
        published = self._existence.exists_published(node_id, locale_code)
        archived = self._existence.exists_archived(node_id, locale_code)

        source = None
        if not draft and not published:
            for code in self._registry.fallback_order(locale_code):
                if self._existence.exists_draft(node_id, code) or self._existence.exists_published(
                    node_id, code
                ):
                    source = self._registry.get_locale(code)
                    break
            logger.debug(
                "Node %s absent in %s; source locale %s",
                node_id,
                locale_code,
                source.code if source else None,
            )

        return RecordLocale(
            node_id=node_id,
            locale=locale,
            exists_draft=draft,
            exists_published=published,
            exists_archived=archived,
            source_locale=source,
        )

    def has_any_locale_instance(self, node_id: int | None) -> bool:
        if node_id is None:
            return False
        return self._existence.has_any_locale_instance(node_id)


# ---------------------------------------------------------------------------
# Visibility and admin hints derived from a RecordLocale
# ---------------------------------------------------------------------------


def is_visible(record: RecordLocale, context: ExecutionContext, status: StatusConfig) -> bool:
    """Whether the node should be listed for *record*'s locale under *context*.

    Frontend requests hide nodes not published in the locale when
    ``frontend_publish_required``; admin requests hide nodes without a
    draft in the locale when ``cms_localisation_required``.
    """
    if context.is_frontend:
        return record.exists_published or not status.frontend_publish_required
    return record.exists_draft or not status.cms_localisation_required


def status_message(record: RecordLocale, status: StatusConfig) -> LocaleStatusMessage | None:
    """Key of the admin notice for *record*, or None when no notice applies."""
    if not status.locale_published_status_message or record.exists_published:
        return None
    if status.frontend_publish_required:
        return LocaleStatusMessage.INVISIBLE
    if not record.exists_draft:
        if record.is_inherited:
            return LocaleStatusMessage.INHERITED
        return LocaleStatusMessage.UNKNOWN
    return LocaleStatusMessage.DRAFT


def restore_available(record: RecordLocale) -> bool:
    """Restoring only makes sense with a draft or an archived version in the locale."""
    return record.exists_draft or record.exists_archived
