"""Cache purge helpers for Vercel Functions.

Each helper resolves the purge provider from the current request context and
forwards the call to it unchanged. When no provider is configured (local
development, tests, runtimes without a purge backend) the helpers return
without doing anything.
"""

from __future__ import annotations

from .._context import RequestContext, get_context
from .._debug import debug
from .types import DangerouslyDeleteOptions, PurgeApi, TagOrTags


def _resolve_api(context: RequestContext | None) -> PurgeApi | None:
    ctx = context if context is not None else get_context()
    return ctx.purge


async def invalidate_by_tag(
    tag: TagOrTags,
    *,
    context: RequestContext | None = None,
) -> None:
    """Invalidate a tag or tags by marking them as stale.

    Args:
        tag: The tag or tags to invalidate.
        context: Request context to use instead of the ambient one.
    """
    api = _resolve_api(context)
    if api is None:
        debug("invalidate_by_tag skipped: no purge provider in context")
        return None
    debug("invalidate_by_tag", tag)
    return await api.invalidate_by_tag(tag)


async def invalidate_by_src_image(
    src: TagOrTags,
    *,
    context: RequestContext | None = None,
) -> None:
    """Invalidate a source image or images by marking them as stale.

    Args:
        src: The source image or images to invalidate.
        context: Request context to use instead of the ambient one.
    """
    api = _resolve_api(context)
    if api is None:
        debug("invalidate_by_src_image skipped: no purge provider in context")
        return None
    debug("invalidate_by_src_image", src)
    return await api.invalidate_by_src_image(src)


async def dangerously_delete_by_tag(
    tag: TagOrTags,
    options: DangerouslyDeleteOptions | None = None,
    *,
    context: RequestContext | None = None,
) -> None:
    """Delete a tag or tags.

    The data is deleted after ``options["revalidationDeadlineSeconds"]``. When
    no deadline is given the provider applies its default of 0 and the data is
    deleted immediately.

    Args:
        tag: The tag or tags to delete.
        options: Deletion strategy, forwarded to the provider as given.
        context: Request context to use instead of the ambient one.
    """
    api = _resolve_api(context)
    if api is None:
        debug("dangerously_delete_by_tag skipped: no purge provider in context")
        return None
    debug("dangerously_delete_by_tag", tag, options)
    return await api.dangerously_delete_by_tag(tag, options)


async def dangerously_delete_by_src_image(
    src: TagOrTags,
    options: DangerouslyDeleteOptions | None = None,
    *,
    context: RequestContext | None = None,
) -> None:
    """Delete a source image or images.

    Args:
        src: The source image or images to delete.
        options: Deletion strategy, forwarded to the provider as given.
        context: Request context to use instead of the ambient one.
    """
    api = _resolve_api(context)
    if api is None:
        debug("dangerously_delete_by_src_image skipped: no purge provider in context")
        return None
    debug("dangerously_delete_by_src_image", src, options)
    return await api.dangerously_delete_by_src_image(src, options)


__all__ = [
    "DangerouslyDeleteOptions",
    "PurgeApi",
    "TagOrTags",
    "invalidate_by_tag",
    "invalidate_by_src_image",
    "dangerously_delete_by_tag",
    "dangerously_delete_by_src_image",
]
