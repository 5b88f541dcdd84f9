"""Shared fixtures for all tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest


class RecordingPurge:
    """Purge provider that records every call it receives."""

    def __init__(self, error: BaseException | None = None) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.error = error

    async def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    async def invalidate_by_tag(self, tag):
        await self._record("invalidate_by_tag", tag)

    async def invalidate_by_src_image(self, src):
        await self._record("invalidate_by_src_image", src)

    async def dangerously_delete_by_tag(self, tag, options=None):
        await self._record("dangerously_delete_by_tag", tag, options)

    async def dangerously_delete_by_src_image(self, src, options=None):
        await self._record("dangerously_delete_by_src_image", src, options)


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear environment variables that change runtime behaviour."""
    monkeypatch.delenv("VERCEL_PURGE_DEBUG", raising=False)
    yield


@pytest.fixture
def recording_purge() -> RecordingPurge:
    return RecordingPurge()


@pytest.fixture
def failing_purge() -> RecordingPurge:
    return RecordingPurge(error=RuntimeError("purge backend unavailable"))
