from __future__ import annotations

import asyncio
from typing import Awaitable, Callable


class Debouncer:
    """Run a coroutine only after calls have paused for ``delay`` seconds.

    Each :meth:`schedule` cancels the previous call while it is still
    waiting out the quiet period. A call whose quiet period has elapsed is
    already firing and is left alone.
    """

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._waiting: asyncio.Task | None = None
        self._latest: asyncio.Task | None = None

    def schedule(self, callback: Callable[[], Awaitable[None]]) -> asyncio.Task:
        self.cancel()
        task = asyncio.get_running_loop().create_task(self._run(callback))
        self._waiting = task
        self._latest = task
        return task

    async def _run(self, callback: Callable[[], Awaitable[None]]) -> None:
        await asyncio.sleep(self.delay)
        if self._waiting is asyncio.current_task():
            self._waiting = None
        await callback()

    def cancel(self) -> None:
        if self._waiting is not None and not self._waiting.done():
            self._waiting.cancel()
        self._waiting = None

    @property
    def pending(self) -> bool:
        return self._waiting is not None and not self._waiting.done()

    async def wait(self) -> None:
        """Block until the most recently scheduled call has finished."""

        if self._latest is not None:
            await asyncio.wait({self._latest})
