"""Index-based even sampling."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def sample_evenly(items: Sequence[T], count: int) -> list[T]:
    """Pick *count* items spread evenly by index across *items*.

    If ``len(items) <= count`` every item is returned in order.  Otherwise
    item ``floor(i * len(items) / count)`` is taken for ``i`` in
    ``range(count)``: index 0 is always included, the last index need not be.
    A non-positive *count* gives ``[]``.
    """
    n = len(items)
    if n <= count:
        return list(items)
    if count <= 0:
        return []

    step = n / count
    return [items[math.floor(i * step)] for i in range(count)]
