"""
Timer-driven poller with an explicit start/stop lifecycle.

Used by the streaming endpoints (message streams, onboarding status) in
place of free-running interval timers. A poller is an async iterator:
each step awaits the interval, then calls the poll function.

    async with Poller(check_status, interval=5.0) as poller:
        async for status in poller:
            ...
            if done:
                poller.stop()
"""

import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


class Poller(Generic[T]):
    """Calls an async function on a fixed interval until stopped."""

    def __init__(
        self,
        func: Callable[[], Awaitable[T]],
        interval: float,
        immediate: bool = True,
    ) -> None:
        """
        Args:
            func: Coroutine factory called on every tick
            interval: Seconds between ticks
            immediate: Whether the first tick fires without waiting
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._func = func
        self._interval = interval
        self._immediate = immediate
        self._stopped = asyncio.Event()
        self._started = False
        self._first = True
        self._ticks = 0

    @property
    def running(self) -> bool:
        return self._started and not self._stopped.is_set()

    @property
    def ticks(self) -> int:
        """Number of completed poll calls."""
        return self._ticks

    def start(self) -> None:
        self._stopped.clear()
        self._started = True
        self._first = True

    def stop(self) -> None:
        """Stop polling. A pending wait ends immediately."""
        self._stopped.set()

    async def __aenter__(self) -> "Poller[T]":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def __aiter__(self) -> "Poller[T]":
        return self

    async def __anext__(self) -> T:
        if not self._started:
            raise RuntimeError("Poller has not been started")
        if self._stopped.is_set():
            raise StopAsyncIteration

        if not (self._first and self._immediate):
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                pass
            else:
                raise StopAsyncIteration

        self._first = False
        result = await self._func()
        self._ticks += 1
        return result
