"""A small dense matrix of floats."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable


class Matrix:
    """A dense row-major matrix of floats with fixed dimensions."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        values: Iterable[Iterable[float]] | None = None,
    ) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative: {num_rows}x{num_cols}")
        self._num_rows = num_rows
        self._num_cols = num_cols
        if values is None:
            self._values = [[0.0] * num_cols for _ in range(num_rows)]
            return
        rows = [[float(v) for v in row] for row in values]
        if len(rows) != num_rows or any(len(row) != num_cols for row in rows):
            raise ValueError(f"Values do not match the dimensions {num_rows}x{num_cols}")
        self._values = rows

    @classmethod
    def _from_rows(cls, rows: list[list[float]], num_cols: int) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._num_rows = len(rows)
        matrix._num_cols = num_cols
        matrix._values = rows
        return matrix

    @classmethod
    def zeros(cls, num_rows: int, num_cols: int) -> Matrix:
        """Return a matrix filled with zeros."""
        return cls(num_rows, num_cols)

    @classmethod
    def random(
        cls, num_rows: int, num_cols: int, rng: _random.Random | None = None
    ) -> Matrix:
        """Return a matrix of values drawn uniformly from [0, 1)."""
        rng = rng if rng is not None else _random.Random()
        return cls(
            num_rows,
            num_cols,
            [[rng.random() for _ in range(num_cols)] for _ in range(num_rows)],
        )

    @classmethod
    def column(cls, values: Iterable[float]) -> Matrix:
        """Return a single-column matrix holding the given values."""
        rows = [[float(v)] for v in values]
        return cls._from_rows(rows, 1)

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    def _check_index(self, key: tuple[int, int]) -> tuple[int, int]:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("Matrix indices must be a (row, col) pair") from None
        if not (0 <= row < self._num_rows and 0 <= col < self._num_cols):
            raise IndexError(
                f"Index ({row}, {col}) out of range for {self._num_rows}x{self._num_cols} matrix"
            )
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check_index(key)
        return self._values[row][col]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check_index(key)
        self._values[row][col] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._num_rows == other._num_rows
            and self._num_cols == other._num_cols
            and self._values == other._values
        )

    def _require_same_shape(self, other: Matrix) -> None:
        if self._num_rows != other._num_rows or self._num_cols != other._num_cols:
            raise ValueError(
                f"Dimension mismatch: {self._num_rows}x{self._num_cols} "
                f"vs {other._num_rows}x{other._num_cols}"
            )

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        if self._num_rows == 0:
            rows: list[list[float]] = [[] for _ in range(self._num_cols)]
        else:
            rows = [list(col) for col in zip(*self._values)]
        return Matrix._from_rows(rows, self._num_rows)

    def elementwise_multiply(self, other: Matrix) -> Matrix:
        """Return the element-by-element product with a matrix of the same shape."""
        self._require_same_shape(other)
        rows = [
            [a * b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._values, other._values)
        ]
        return Matrix._from_rows(rows, self._num_cols)

    def scaled(self, scalar: float) -> Matrix:
        """Return a copy with every value multiplied by scalar."""
        rows = [[v * scalar for v in row] for row in self._values]
        return Matrix._from_rows(rows, self._num_cols)

    def scale(self, scalar: float) -> None:
        """Multiply every value by scalar in place."""
        self._values = [[v * scalar for v in row] for row in self._values]

    def to_list(self) -> list[float]:
        """Return all values flattened in row-major order."""
        return [v for row in self._values for v in row]

    def rows(self) -> list[list[float]]:
        """Return a copy of the values as a list of rows."""
        return [list(row) for row in self._values]

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._num_cols != other._num_rows:
            raise ValueError(
                f"Cannot multiply {self._num_rows}x{self._num_cols} "
                f"by {other._num_rows}x{other._num_cols}"
            )
        if other._num_rows == 0:
            columns: list[tuple[float, ...]] = [()] * other._num_cols
        else:
            columns = list(zip(*other._values))
        rows = [
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self._values
        ]
        return Matrix._from_rows(rows, other._num_cols)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        rows = [
            [a + b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._values, other._values)
        ]
        return Matrix._from_rows(rows, self._num_cols)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        rows = [
            [a - b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._values, other._values)
        ]
        return Matrix._from_rows(rows, self._num_cols)

    def __str__(self) -> str:
        """Each row as tab-terminated values, one row per line."""
        return "".join(
            "".join(f"{v:g}\t" for v in row) + "\n" for row in self._values
        )

    def __repr__(self) -> str:
        return f"Matrix({self._num_rows}, {self._num_cols}, {self._values!r})"