"""Discrete first derivative of a sequence."""

from __future__ import annotations

from collections.abc import Sequence


def gradient(values: Sequence[float]) -> list[float]:
    """Return the gradient of ``values``, one entry per input.

    Inner points use central differences, the end points one-sided
    differences.  A single value has gradient zero.
    """
    count = len(values)
    if count == 0:
        return []
    if count == 1:
        return [0]
    first = values[1] - values[0]
    if count == 2:
        return [first, first]
    inner = [(after - before) / 2 for before, after in zip(values, values[2:])]
    return [first, *inner, values[-1] - values[-2]]