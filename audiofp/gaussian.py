"""Box filters and their repetition as an approximate Gaussian blur."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _reflect(position: int, size: int) -> int:
    """Map a position outside ``[0, size)`` back inside by mirroring.

    The edge sample is repeated, so position -1 maps to 0 and position
    ``size`` maps to ``size - 1``.
    """
    wrapped = position % (2 * size)
    return wrapped if wrapped < size else 2 * size - 1 - wrapped


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def box_filter(values: Sequence[float], width: int) -> list[float]:
    """Return the moving average of ``values`` over ``width`` samples.

    The window for sample ``i`` spans ``width // 2`` samples to the left
    and the rest to the right, with the signal mirrored at both ends.
    A width of zero yields zeros.
    """
    size = len(values)
    if width == 0 or size == 0:
        return [0.0] * size

    left = width // 2
    right = width - left

    total = 0.0
    for position in range(-left, right):
        total += values[_reflect(position, size)]

    output: list[float] = []
    for index in range(size):
        output.append(total / width)
        total += values[_reflect(index + right, size)] - values[_reflect(index - left, size)]
    return output


def gaussian_filter(values: Sequence[float], sigma: float, n: int) -> list[float]:
    """Approximate a Gaussian blur of deviation ``sigma`` with ``n`` box passes."""
    if n < 1:
        raise ValueError("n must be at least 1")

    w = math.floor(math.sqrt(12 * sigma * sigma / n + 1))
    lower = w - (1 if w % 2 == 0 else 0)
    upper = lower + 2
    m = _round_half_away(
        (12 * sigma * sigma - n * lower * lower - 4 * n * lower - 3 * n)
        / (-4 * lower - 4)
    )

    data = [float(value) for value in values]
    passes = 0
    while passes < m:
        data = box_filter(data, lower)
        passes += 1
    while passes < n:
        data = box_filter(data, upper)
        passes += 1
    return data