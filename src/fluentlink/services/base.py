"""BaseService — foundation for adapter-facing services.

Every service receives a :class:`Runtime` at construction time. The runtime
owns the registry, the context stack, and the resolvers wired to them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from fluentlink.domain.errors import FluentError
from fluentlink.services.result import ServiceResult

if TYPE_CHECKING:
    from fluentlink.infrastructure.runtime import Runtime

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes that return ServiceResult.

    Usage::

        class SiteService(BaseService):
            def list_locales(self) -> ServiceResult:
                return self._run("list_locales", lambda: {...})
    """

    def __init__(self, runtime: Runtime) -> None:
        self._runtime = runtime

    def _run(self, op: str, func: Callable[[], dict[str, Any]]) -> ServiceResult:
        """Call *func* and wrap its payload, turning fluentlink errors into failures.

        INVARIANT: only FluentError is converted; anything else is a bug and propagates.
        """
        try:
            data = func()
        except FluentError as exc:
            logger.debug("%s failed: %s", op, exc)
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data=data)
