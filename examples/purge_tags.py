from __future__ import annotations

import asyncio

from vercel_functions import (
    DangerouslyDeleteOptions,
    dangerously_delete_by_tag,
    invalidate_by_src_image,
    invalidate_by_tag,
    request_context,
)


class PrintingPurge:
    async def invalidate_by_tag(self, tag):
        print("invalidate tag:", tag)

    async def invalidate_by_src_image(self, src):
        print("invalidate src image:", src)

    async def dangerously_delete_by_tag(self, tag, options: DangerouslyDeleteOptions | None = None):
        deadline = (options or {}).get("revalidationDeadlineSeconds", 0)
        print(f"delete tag: {tag} (deadline {deadline}s)")

    async def dangerously_delete_by_src_image(
        self, src, options: DangerouslyDeleteOptions | None = None
    ):
        deadline = (options or {}).get("revalidationDeadlineSeconds", 0)
        print(f"delete src image: {src} (deadline {deadline}s)")


async def main() -> None:
    # No provider configured: nothing happens
    await invalidate_by_tag("products")

    with request_context(purge=PrintingPurge()):
        await invalidate_by_tag(["products", "product:42"])
        await invalidate_by_src_image("/images/hero.jpg")
        await dangerously_delete_by_tag("drafts")
        await dangerously_delete_by_tag("feed", {"revalidationDeadlineSeconds": 30})

    print("Purge helpers ok")


if __name__ == "__main__":
    asyncio.run(main())
