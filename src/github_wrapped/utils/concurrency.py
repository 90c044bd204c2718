"""Best-effort fan-out collection."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


async def gather_best_effort(
    keys: Sequence[K],
    fetch: Callable[[K], Awaitable[T]],
    default: Callable[[], T],
    batch_size: int = 10,
) -> tuple[dict[K, T], list[K]]:
    """Run ``fetch(key)`` for every key, tolerating individual failures.

    Calls run concurrently in batches of ``batch_size``. Every call is
    awaited; a call that raises is logged and its result replaced by
    ``default()``. The batch never aborts.

    Args:
        keys: Items to fetch, e.g. repository names
        fetch: Coroutine factory for one key
        default: Factory for the substitute result of a failed call
        batch_size: Maximum calls in flight at once

    Returns:
        (results keyed by input key in input order, keys whose fetch failed)
    """
    results: dict[K, T] = {}
    failed: list[K] = []

    for i in range(0, len(keys), batch_size):
        batch = keys[i : i + batch_size]
        outcomes = await asyncio.gather(
            *(fetch(key) for key in batch), return_exceptions=True
        )

        for key, outcome in zip(batch, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning("Fetch failed for %s: %s", key, outcome)
                failed.append(key)
                results[key] = default()
            else:
                results[key] = outcome

    return results, failed
