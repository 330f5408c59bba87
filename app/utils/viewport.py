"""
Coordination helpers for map viewport queries.

Panning a map fires a burst of viewport changes. Only the last change in a
quiet window should hit the API, and a response for an older viewport must
never replace the result of a newer one.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class RequestGenerationCounter:
    """
    Issues increasing generation tokens.

    Take a token before starting a request and apply the result only while
    `is_current(token)` still holds.
    """

    def __init__(self):
        self._generation = 0

    @property
    def current(self) -> int:
        return self._generation

    def next(self) -> int:
        self._generation += 1
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation


class Debouncer:
    """
    Delays a coroutine until calls have been quiet for `delay` seconds.

    Each `trigger()` cancels the pending call and schedules a new one, so
    only the last trigger of a burst runs.
    """

    def __init__(self, func: Callable[..., Awaitable[Any]], delay: float = 0.3):
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._func = func
        self.delay = delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def trigger(self, *args, **kwargs) -> asyncio.Task:
        """Schedule the call, replacing any call still waiting."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(*args, **kwargs))
        return self._task

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()

    async def flush(self) -> Any:
        """Wait for the pending call, if any, and return its result."""
        if self._task is None:
            return None
        try:
            return await self._task
        except asyncio.CancelledError:
            return None

    async def _run(self, *args, **kwargs) -> Any:
        await asyncio.sleep(self.delay)
        return await self._func(*args, **kwargs)
