from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import TypeVar

T = TypeVar("T")

QUEUE_MIN_LENGTH = 80


def resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def resolve_now(now_utc: datetime | None) -> datetime:
    return now_utc or datetime.now(timezone.utc)


def elapsed_ms(shown_at: datetime, now_utc: datetime) -> int:
    return max(int((now_utc - shown_at).total_seconds() * 1000), 0)


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    result = list(items)
    rng.shuffle(result)
    return result


def build_queue(
    make_batch: Callable[[], list[T]],
    *,
    min_length: int = QUEUE_MIN_LENGTH,
) -> tuple[T, ...]:
    """Concatenate freshly shuffled batches until the queue outlasts a session.

    An empty batch stops the loop, so an empty pool yields an empty queue.
    """
    queue = make_batch()
    if not queue:
        return ()
    while len(queue) < min_length:
        queue.extend(make_batch())
    return tuple(queue)
