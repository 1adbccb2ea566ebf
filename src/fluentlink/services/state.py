"""ContextStack — scoped, stack-based execution context.

The stack always holds a base frame. :meth:`ContextStack.scope` pushes a
copy of the current frame with overrides applied and pops it on every exit
path, so a nested computation (e.g. building a frontend link while serving
an admin request) can never leak its locale into later calls.

One logical flow of control owns a stack instance. Concurrent requests or
tasks each get their own instance; the stack is not safe to share.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from fluentlink.config.logging import bound_execution_context
from fluentlink.domain.context import ExecutionContext
from fluentlink.domain.errors import ContextStackUnderflowError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_FIELDS = frozenset(ExecutionContext.model_fields)


def _check_overrides(overrides: dict[str, Any]) -> None:
    unknown = set(overrides) - _FIELDS
    if unknown:
        msg = f"Unknown execution context fields: {sorted(unknown)}"
        raise TypeError(msg)


class ContextStack:
    """Stack of :class:`ExecutionContext` frames with a permanent base frame."""

    def __init__(self, base: ExecutionContext | None = None) -> None:
        self._frames: list[ExecutionContext] = [base or ExecutionContext()]

    def current(self) -> ExecutionContext:
        """Top frame. Never empty."""
        return self._frames[-1]

    @property
    def depth(self) -> int:
        """Number of frames, base frame included."""
        return len(self._frames)

    def _derive(self, changes: dict[str, Any]) -> ExecutionContext:
        _check_overrides(changes)
        return ExecutionContext.model_validate({**self.current().model_dump(), **changes})

    def push(self, **overrides: Any) -> ExecutionContext:
        """Push a copy of the current frame with *overrides* applied.

        Raises:
            TypeError: If an override names an unknown field.
            pydantic.ValidationError: If an override has the wrong type.
        """
        frame = self._derive(overrides)
        self._frames.append(frame)
        return frame

    def pop(self) -> ExecutionContext:
        """Remove and return the top frame.

        Raises:
            ContextStackUnderflowError: If only the base frame remains.
        """
        if len(self._frames) == 1:
            raise ContextStackUnderflowError("Cannot pop the base execution context")
        return self._frames.pop()

    def update(self, **changes: Any) -> ExecutionContext:
        """Replace the top frame with a copy carrying *changes*.

        Inside a scope this only affects the scoped frame; the caller's
        frame is restored untouched when the scope exits.
        """
        frame = self._derive(changes)
        self._frames[-1] = frame
        return frame

    @contextmanager
    def scope(self, **overrides: Any) -> Iterator[ExecutionContext]:
        """Context manager form of :meth:`with_scope`::

            with stack.scope(locale="de_DE", is_frontend=True) as ctx:
                link = resolver.resolve_link(page)

        Log events emitted inside the block carry the frame's locale and host.
        """
        depth = len(self._frames)
        frame = self.push(**overrides)
        try:
            with bound_execution_context(frame):
                yield frame
        finally:
            # Frames pushed and left behind by the body are discarded too.
            del self._frames[depth:]

    def with_scope(self, overrides: dict[str, Any], body: Callable[[], _T]) -> _T:
        """Run *body* in a frame carrying *overrides* and return its result.

        *body* takes no arguments; it reads the frame through :meth:`current`.
        The frame is popped whether *body* returns or raises.
        """
        with self.scope(**overrides):
            return body()

    def reset(self, base: ExecutionContext | None = None) -> None:
        """Drop every frame above the base, optionally replacing the base."""
        if len(self._frames) > 1:
            logger.debug("Discarding %d scoped execution contexts", len(self._frames) - 1)
        self._frames = [base or self._frames[0]]
