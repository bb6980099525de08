"""Uniform random numbers over a closed range."""

from __future__ import annotations

import random as _random

_rng = _random.Random()


def range_float(start: float, end: float) -> float:
    """Return a random float between ``start`` and ``end``."""
    if start == end:
        return start
    return _rng.uniform(start, end)


def range_int(start: int, end: int) -> int:
    """Return a random integer in ``[start, end]``, both ends included.

    Raises ``ValueError`` when ``start`` is greater than ``end``.
    """
    if start == end:
        return start
    return _rng.randint(start, end)