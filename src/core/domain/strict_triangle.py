"""
StrictTriangle / SymmetricTriangle — No-Diagonal Adapters

Адаптеры поверх TriangleAccessor для матриц без диагонали. Матрица с осью m
хранится как упакованный треугольник с диагональю и осью m - 1:

    StrictTriangle UPPER, m=5      (row, col) → inner (row, col - 1), row < col
    StrictTriangle LOWER, m=5      (row, col) → inner (row - 1, col), row > col

    SymmetricTriangle, m=5         (a, b) == (b, a), a != b
        .  0  1  2  3
        0  .  4  5  6
        1  4  .  7  8
        2  5  7  .  9
        3  6  8  9  .

Диагональ не хранится: обращение к (a, a) всегда даёт InvalidCoordinate.
В отличие от базового accessor адаптеры всегда проверяют координаты.
"""

from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar

from src.core.domain.orientation import TriangleLayout
from src.core.domain.packed_triangle import AccessorConfig, ElementRef, TriangleAccessor
from src.core.math.coordinate_guards import InvalidCoordinate, validate_axis_index
from src.core.math.triangular import Orientation, PositionSequence

T = TypeVar("T")


class StrictTriangle(Generic[T]):
    """Треугольник без диагонали: row < col (UPPER) или row > col (LOWER)."""

    def __init__(
        self,
        orientation: Orientation,
        m: int,
        storage: Sequence[T],
        config: AccessorConfig | None = None,
    ):
        if m < 1:
            raise ValueError(f"axis length must be at least 1, got {m}")

        self._orientation = orientation
        self._m = m
        self._inner: TriangleAccessor[T] = TriangleAccessor(
            TriangleLayout(orientation=orientation, axis_length=m - 1), storage, config
        )

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def inner(self) -> TriangleAccessor[T]:
        """Базовый accessor с диагональю и осью m - 1."""
        return self._inner

    def n(self) -> int:
        return self._m

    def _inner_coordinate(self, row: int, col: int) -> tuple[int, int]:
        validate_axis_index(row, "row", self._m)
        validate_axis_index(col, "col", self._m)

        if self._orientation is Orientation.UPPER and row < col:
            return row, col - 1
        if self._orientation is Orientation.LOWER and row > col:
            return row - 1, col

        relation = "row < col" if self._orientation is Orientation.UPPER else "row > col"
        raise InvalidCoordinate(
            f"coordinate ({row}, {col}) is outside the strict {self._orientation.value} "
            f"triangle (requires {relation}, n={self._m})"
        )

    # -------------------------------------------------------------------------
    # Индексы
    # -------------------------------------------------------------------------

    def get_element_index(self, row: int, col: int) -> int:
        return self._inner.get_element_index(*self._inner_coordinate(row, col))

    def get_row_indices(self, row: int) -> Sequence[int]:
        """Позиции элементов строки; строка без элементов невалидна."""
        validate_axis_index(row, "row", self._m)

        if self._orientation is Orientation.UPPER:
            if row == self._m - 1:
                raise InvalidCoordinate(f"row {row} of the strict upper triangle is empty")
            return self._inner.get_row_indices(row)

        if row == 0:
            raise InvalidCoordinate("row 0 of the strict lower triangle is empty")
        return self._inner.get_row_indices(row - 1)

    def get_col_indices(self, col: int) -> Sequence[int]:
        """Позиции элементов столбца; столбец без элементов невалиден."""
        validate_axis_index(col, "col", self._m)

        if self._orientation is Orientation.UPPER:
            if col == 0:
                raise InvalidCoordinate("col 0 of the strict upper triangle is empty")
            return self._inner.get_col_indices(col - 1)

        if col == self._m - 1:
            raise InvalidCoordinate(f"col {col} of the strict lower triangle is empty")
        return self._inner.get_col_indices(col)

    def iter_indices(self) -> Iterator[tuple[int, int]]:
        """Все координаты без диагонали в порядке хранилища."""
        for row, col in self._inner.iter_indices():
            if self._orientation is Orientation.UPPER:
                yield row, col + 1
            else:
                yield row + 1, col

    # -------------------------------------------------------------------------
    # Элементы
    # -------------------------------------------------------------------------

    def get_element(self, row: int, col: int) -> T:
        return self._inner.storage[self.get_element_index(row, col)]

    def get_element_mut(self, row: int, col: int) -> ElementRef[T]:
        return self._inner.get_element_mut(*self._inner_coordinate(row, col))

    def set_element(self, row: int, col: int, value: T) -> None:
        self._inner.set_element(*self._inner_coordinate(row, col), value)

    def get_row(self, row: int) -> Iterator[T]:
        storage = self._inner.storage
        return (storage[position] for position in self.get_row_indices(row))

    def get_col(self, col: int) -> Iterator[T]:
        storage = self._inner.storage
        return (storage[position] for position in self.get_col_indices(col))

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, col = key
        return self.get_element(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self.set_element(row, col, value)

    def __len__(self) -> int:
        return len(self._inner)


class SymmetricTriangle(StrictTriangle[T]):
    """Симметричная матрица без диагонали: (a, b) и (b, a) задают один элемент.

    Ориентация задаёт только порядок упаковки хранилища.
    """

    def _inner_coordinate(self, row: int, col: int) -> tuple[int, int]:
        validate_axis_index(row, "row", self._m)
        validate_axis_index(col, "col", self._m)

        if row == col:
            raise InvalidCoordinate(
                f"diagonal element ({row}, {col}) is not stored in a symmetric triangle"
            )

        low, high = min(row, col), max(row, col)
        if self._orientation is Orientation.UPPER:
            return super()._inner_coordinate(low, high)
        return super()._inner_coordinate(high, low)

    def get_row_indices(self, row: int) -> PositionSequence:
        """Позиции строки row для всех столбцов, кроме диагонального, по возрастанию столбца."""
        validate_axis_index(row, "row", self._m)

        def position_of(k: int) -> int:
            col = k if k < row else k + 1
            return self.get_element_index(row, col)

        return PositionSequence(self._m - 1, position_of)

    def get_col_indices(self, col: int) -> PositionSequence:
        return self.get_row_indices(col)
