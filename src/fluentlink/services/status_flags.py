"""StatusFlagComputer — localise the admin tree's status flags.

Rules run in a fixed order; each only adds or removes a named flag and
leaves unrelated keys alone. ``archived`` is settled before ``no-source``
is considered so the two never appear together.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fluentlink.domain.flags import INVISIBLE_DESCRIPTOR, NO_SOURCE_DESCRIPTOR, StatusFlag

if TYPE_CHECKING:
    from fluentlink.domain.content import RecordLocale
    from fluentlink.services.content_state import ContentStateResolver
    from fluentlink.services.registry import LocaleRegistry
    from fluentlink.services.state import ContextStack

logger = logging.getLogger(__name__)


def apply_status_rules(
    flags: Mapping[str, Any],
    record: RecordLocale,
    *,
    has_any_locale_instance: bool,
) -> dict[str, Any]:
    """Return a copy of *flags* with the localisation rules applied."""
    result = dict(flags)

    if StatusFlag.MODIFIED in result and not record.exists_draft:
        del result[StatusFlag.MODIFIED]

    if StatusFlag.ARCHIVED in result and has_any_locale_instance:
        del result[StatusFlag.ARCHIVED]

    if (
        StatusFlag.ARCHIVED not in result
        and not record.is_localised
        and not record.is_inherited
        and has_any_locale_instance
    ):
        result[StatusFlag.NO_SOURCE.value] = NO_SOURCE_DESCRIPTOR

    if not record.is_localised:
        result[StatusFlag.INVISIBLE.value] = INVISIBLE_DESCRIPTOR

    return result


class StatusFlagComputer:
    """Compute status flags for a node in a locale."""

    def __init__(
        self,
        registry: LocaleRegistry,
        resolver: ContentStateResolver,
        stack: ContextStack,
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._stack = stack

    def compute(
        self,
        node_id: int | None,
        raw_flags: Mapping[str, Any],
        locale_code: str | None = None,
    ) -> dict[str, Any]:
        """Return *raw_flags* localised for *locale_code* (default: the context locale).

        Pass-through when no locale is set in the current context, or when
        the context locale is not registered.
        """
        context = self._stack.current()
        if context.locale is None:
            return dict(raw_flags)

        code = locale_code or context.locale
        if locale_code is None and code not in self._registry:
            logger.warning("Context locale %s is not registered; flags unchanged", code)
            return dict(raw_flags)

        record = self._resolver.resolve(node_id, code)
        return apply_status_rules(
            raw_flags,
            record,
            has_any_locale_instance=self._resolver.has_any_locale_instance(node_id),
        )
