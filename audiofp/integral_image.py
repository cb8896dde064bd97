"""Summed-area table that keeps only the most recent rows."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


class RollingIntegralImage:
    """Integral image over a stream of rows with bounded memory.

    Only the last ``max_rows`` rows (plus the one before them) are kept,
    so areas can be queried only over that recent part of the image.
    """

    def __init__(self, max_rows: int) -> None:
        self._max_rows = max_rows + 1
        self._num_columns = 0
        self._num_rows = 0
        self._rows: list[list[float]] = []

    @property
    def num_columns(self) -> int:
        """Width of the image, fixed by the first non-empty row."""
        return self._num_columns

    @property
    def num_rows(self) -> int:
        """Total number of rows added since the last reset."""
        return self._num_rows

    def reset(self) -> None:
        """Forget all rows and the image width."""
        self._rows = []
        self._num_rows = 0
        self._num_columns = 0

    def _row(self, index: int) -> list[float]:
        return self._rows[index % self._max_rows]

    def add_row(self, row: Iterable[float]) -> None:
        """Append a row of values to the bottom of the image."""
        values = [float(value) for value in row]
        if self._num_columns == 0:
            self._num_columns = len(values)
            self._rows = [[0.0] * self._num_columns for _ in range(self._max_rows)]
        if len(values) != self._num_columns:
            raise ValueError(
                f"row has {len(values)} columns, expected {self._num_columns}"
            )

        current = list(accumulate(values))
        if self._num_rows > 0:
            previous = self._row(self._num_rows - 1)
            current = [above + here for above, here in zip(previous, current)]
        self._rows[self._num_rows % self._max_rows] = current
        self._num_rows += 1

    def area(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Return the sum of rows ``[r1, r2)`` and columns ``[c1, c2)``."""
        if r1 > self._num_rows or r2 > self._num_rows:
            raise IndexError("row index beyond the end of the image")
        if self._num_rows > self._max_rows:
            oldest = self._num_rows - self._max_rows
            if r1 <= oldest or r2 <= oldest:
                raise IndexError("row is no longer kept in the image")
        if c1 > self._num_columns or c2 > self._num_columns:
            raise IndexError("column index beyond the width of the image")

        if r1 == r2 or c1 == c2:
            return 0.0
        if r2 < r1 or c2 < c1:
            raise ValueError("area corners are in the wrong order")

        bottom = self._row(r2 - 1)
        if r1 == 0:
            if c1 == 0:
                return bottom[c2 - 1]
            return bottom[c2 - 1] - bottom[c1 - 1]
        top = self._row(r1 - 1)
        if c1 == 0:
            return bottom[c2 - 1] - top[c2 - 1]
        return bottom[c2 - 1] - top[c2 - 1] - bottom[c1 - 1] + top[c1 - 1]