"""Request-scoped context for Vercel Functions."""

from __future__ import annotations

import contextvars
import dataclasses
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .purge.types import PurgeApi


@dataclasses.dataclass(frozen=True)
class RequestContext:
    purge: PurgeApi | None = None


_EMPTY_CONTEXT = RequestContext()

_ctx: contextvars.ContextVar[RequestContext | None] = contextvars.ContextVar(
    "vercel_functions_request_context", default=None
)


def get_context() -> RequestContext:
    """Return the context installed for the current execution scope.

    An empty ``RequestContext`` is returned when nothing has been installed,
    so ``get_context().purge`` is always safe to read.
    """
    ctx = _ctx.get()
    if ctx is None:
        return _EMPTY_CONTEXT
    return ctx


def set_context(ctx: RequestContext | None) -> contextvars.Token[RequestContext | None]:
    return _ctx.set(ctx)


def reset_context(token: contextvars.Token[RequestContext | None]) -> None:
    _ctx.reset(token)


@contextmanager
def request_context(*, purge: PurgeApi | None = None) -> Iterator[RequestContext]:
    """Install a fresh ``RequestContext`` for the duration of a ``with`` block.

    Usage:
        with request_context(purge=provider):
            await invalidate_by_tag("products")
    """
    ctx = RequestContext(purge=purge)
    token = _ctx.set(ctx)
    try:
        yield ctx
    finally:
        _ctx.reset(token)


__all__ = [
    "RequestContext",
    "get_context",
    "set_context",
    "reset_context",
    "request_context",
]
