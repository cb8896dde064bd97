"""Cutting a stream of samples into fixed-size, overlapping windows."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class AudioSlicer(Generic[T]):
    """Splits incoming samples into windows of ``size`` items.

    Consecutive windows start ``increment`` samples apart.  Samples that
    do not yet fill a window are kept until the next call to
    :meth:`process`.
    """

    def __init__(self, size: int, increment: int) -> None:
        if increment < 1:
            raise ValueError("increment must be at least 1")
        if size < increment:
            raise ValueError("size must not be smaller than increment")
        self._size = size
        self._increment = increment
        self._pending: list[T] = []

    @property
    def size(self) -> int:
        """Number of samples in each window."""
        return self._size

    @property
    def increment(self) -> int:
        """Distance in samples between the starts of consecutive windows."""
        return self._increment

    def reset(self) -> None:
        """Drop any samples held back from earlier calls."""
        self._pending.clear()

    def process(self, samples: Iterable[T]) -> list[list[T]]:
        """Feed samples in and return every window they complete, in order."""
        self._pending.extend(samples)
        windows: list[list[T]] = []
        while len(self._pending) >= self._size:
            windows.append(self._pending[: self._size])
            del self._pending[: self._increment]
        return windows