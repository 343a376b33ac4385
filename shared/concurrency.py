"""
Structured fan-out helpers.

Repositories wrap the synchronous Supabase client, so independent queries
are run in worker threads under an ``asyncio.TaskGroup``. If one branch
fails, or the request handling them is cancelled, the remaining branches
are cancelled as well and nothing is written back.

Single repository calls made while handling a request run inline in the
service. Fan-outs, poll loops and the feed path, which issue many queries
per request or hold the loop for a stream's lifetime, go through worker
threads.
"""

import asyncio
from typing import Any, Callable, Hashable, Iterable, TypeVar

T = TypeVar("T")


async def fan_out(*calls: Callable[[], T]) -> list[T]:
    """
    Run blocking zero-argument callables concurrently.

    Args:
        *calls: Callables to run, typically bound repository methods
            wrapped in ``functools.partial``

    Returns:
        Results in the same order as ``calls``

    Raises:
        The first exception raised by any branch (unwrapped from the
        task group's ExceptionGroup).
    """
    if not calls:
        return []

    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(asyncio.to_thread(call)) for call in calls]
    except ExceptionGroup as group:
        first = group.exceptions[0]
        while isinstance(first, ExceptionGroup):
            first = first.exceptions[0]
        raise first from None

    return [task.result() for task in tasks]


def merge_by_id(
    groups: Iterable[Iterable[T]],
    key: Callable[[T], Hashable] = lambda item: item.id,  # type: ignore[attr-defined]
) -> dict[Any, T]:
    """
    Merge ordered groups of records into an id-keyed mapping.

    The first record seen for an id wins; later duplicates are ignored even
    if their fields differ. The mapping iterates in first-seen order, so a
    fixed group order gives a deterministic result.

    Args:
        groups: Record groups in priority order
        key: Function extracting the identifier

    Returns:
        Dict of id -> record
    """
    merged: dict[Any, T] = {}
    for group in groups:
        for item in group:
            merged.setdefault(key(item), item)
    return merged
