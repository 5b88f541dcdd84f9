from __future__ import annotations

import os
from typing import Any


def is_debug() -> bool:
    return os.getenv("VERCEL_PURGE_DEBUG") == "true"


def debug(*args: Any) -> None:
    if is_debug():
        print("[vercel-functions]", *args)


__all__ = ["debug", "is_debug"]
