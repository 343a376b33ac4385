"""
Exponential-backoff retry for outbound calls.

Only gateway calls that are safe to repeat use this (the SMS verification
client). Everything else fails fast and propagates to the caller.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry_with_backoff(
    func: Callable[[], Awaitable[T]],
    attempts: int = 3,
    base_delay: float = 2.0,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
) -> T:
    """
    Await ``func()`` up to ``attempts`` times.

    After failed attempt ``n`` (1-indexed) the helper sleeps
    ``base_delay ** n`` seconds before trying again. The last failure is
    re-raised unchanged. Exceptions outside ``retry_on`` are raised
    immediately.

    Args:
        func: Zero-argument coroutine factory to call
        attempts: Total number of attempts (>= 1)
        base_delay: Base of the exponential delay, in seconds
        retry_on: Exception types that trigger another attempt

    Returns:
        Whatever the first successful call returns
    """
    if attempts < 1:
        raise ValueError("attempts must be >= 1")

    for attempt in range(1, attempts + 1):
        try:
            return await func()
        except retry_on as e:
            if attempt == attempts:
                raise
            delay = base_delay ** attempt
            logger.warning(
                f"Attempt {attempt}/{attempts} failed ({e}); retrying in {delay:.1f}s"
            )
            await asyncio.sleep(delay)

    raise AssertionError("unreachable")
