"""structlog configuration for fluentlink.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (--log-json): Structured JSON lines to stderr

Library modules log through stdlib ``logging.getLogger(__name__)``; the
ProcessorFormatter gives those records the same structured fields. Inside a
``ContextStack.scope`` every event also carries the scoped frame's
``locale``, ``host`` and ``domain_mode`` through structlog's contextvars.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from fluentlink.domain.context import ExecutionContext

LOGGER_NAME = "fluentlink"

CONTEXT_KEYS = ("locale", "host", "domain_mode")


def execution_context_fields(context: ExecutionContext) -> dict[str, Any]:
    """Log fields describing *context*. Unset locale and host are left out."""
    fields: dict[str, Any] = {"domain_mode": context.is_domain_mode}
    if context.locale is not None:
        fields["locale"] = context.locale
    if context.active_hostname is not None:
        fields["host"] = context.active_hostname
    return fields


def bound_execution_context(context: ExecutionContext) -> AbstractContextManager[None]:
    """Bind *context* to log events for the duration of a ``with`` block.

    Nested blocks shadow the outer fields and restore them on exit. A field
    the inner frame leaves unset is cleared so an outer locale cannot leak
    into events logged for a frame without one.
    """
    fields: dict[str, Any] = dict.fromkeys(CONTEXT_KEYS)
    fields.update(execution_context_fields(context))
    return structlog.contextvars.bound_contextvars(**fields)


def _drop_unset_context(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    for key in CONTEXT_KEYS:
        if key in event_dict and event_dict[key] is None:
            del event_dict[key]
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _drop_unset_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("pluggy").setLevel(logging.WARNING)
