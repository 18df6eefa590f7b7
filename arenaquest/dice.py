"""Bounded random integers used for every roll in the game."""

from __future__ import annotations

import random

INT_MAX = 2**31 - 1

_default_rng = random.Random()


def randint(start: int, end: int, rng: random.Random | None = None) -> int:
    """Return a uniformly chosen integer in ``[start, end]``, both ends included.

    Raises ``ValueError`` when ``start > end`` and ``OverflowError`` when a
    bound is negative or does not fit in a signed 32-bit integer.
    """
    if start < 0 or end < 0:
        raise OverflowError("Range too big for int")
    if start > end:
        raise ValueError("Logic Error: start > end")
    if end > INT_MAX:
        raise OverflowError("Range too big for int")
    return (rng or _default_rng).randint(start, end)