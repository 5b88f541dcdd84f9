"""vercel_functions – Python helpers for Vercel Functions runtime."""

from ._context import (
    RequestContext,
    get_context,
    request_context,
    reset_context,
    set_context,
)
from .purge import (
    DangerouslyDeleteOptions,
    PurgeApi,
    dangerously_delete_by_src_image,
    dangerously_delete_by_tag,
    invalidate_by_src_image,
    invalidate_by_tag,
)

__all__ = [
    "RequestContext",
    "get_context",
    "set_context",
    "reset_context",
    "request_context",
    "DangerouslyDeleteOptions",
    "PurgeApi",
    "invalidate_by_tag",
    "invalidate_by_src_image",
    "dangerously_delete_by_tag",
    "dangerously_delete_by_src_image",
]
