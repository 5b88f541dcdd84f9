from __future__ import annotations

from collections.abc import Callable
from typing import Union

import fastapi

from .._context import RequestContext, reset_context, set_context
from ..purge.types import PurgeApi

PurgeFactory = Callable[[fastapi.Request], Union[PurgeApi, None]]


def with_purge(
    app: fastapi.FastAPI,
    purge: PurgeApi | PurgeFactory | None,
) -> fastapi.FastAPI:
    """Install a request context carrying ``purge`` around every request.

    ``purge`` is either a provider shared by all requests or a callable that
    receives the incoming request and returns the provider for it (or ``None``).
    Any value that is not such a callable is installed as-is.
    """
    if callable(purge) and not isinstance(purge, PurgeApi):
        resolve = purge

    else:
        provider = purge

        def resolve(request: fastapi.Request) -> PurgeApi | None:
            return provider  # type: ignore[return-value]

    @app.middleware("http")
    async def ensure_request_context(request: fastapi.Request, call_next):
        token = set_context(RequestContext(purge=resolve(request)))
        try:
            return await call_next(request)
        finally:
            reset_context(token)

    return app


__all__ = ["PurgeFactory", "with_purge"]
