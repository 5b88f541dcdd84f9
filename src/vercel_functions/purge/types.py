from __future__ import annotations

from typing import Protocol, Sequence, TypedDict, Union, runtime_checkable

TagOrTags = Union[str, Sequence[str]]


class DangerouslyDeleteOptions(TypedDict, total=False):
    # Seconds stale data may still be served while revalidating in the
    # background. Omitted means 0: the data is deleted immediately.
    revalidationDeadlineSeconds: int | float


@runtime_checkable
class PurgeApi(Protocol):
    """Vercel Cache Purge APIs."""

    async def invalidate_by_tag(self, tag: TagOrTags) -> None:
        """Mark a tag or tags as stale.

        On the next access the stale data is served and a background
        revalidation is triggered.
        """
        ...

    async def invalidate_by_src_image(self, src: TagOrTags) -> None:
        """Mark a source image or images as stale."""
        ...

    async def dangerously_delete_by_tag(
        self,
        tag: TagOrTags,
        options: DangerouslyDeleteOptions | None = None,
    ) -> None:
        """Delete a tag or tags once the revalidation deadline has passed."""
        ...

    async def dangerously_delete_by_src_image(
        self,
        src: TagOrTags,
        options: DangerouslyDeleteOptions | None = None,
    ) -> None:
        """Delete a source image or images once the revalidation deadline has passed."""
        ...


__all__ = ["TagOrTags", "DangerouslyDeleteOptions", "PurgeApi"]
