"""
Triangular Indexing — Packed Storage Index Arithmetic

Модуль отображает координаты (row, col) треугольной матрицы в позиции
одномерного упакованного хранилища (и обратно) для двух ориентаций:
- UPPER: row <= col (верхний треугольник вместе с диагональю)
- LOWER: row >= col (нижний треугольник вместе с диагональю)

Хранилище содержит ровно tri_num(n) элементов, строки упакованы подряд
слева направо, сверху вниз:

    UPPER, n=4               LOWER, n=4
    0  1  2  3               0
       4  5  6               1  2
          7  8               3  4  5
             9               6  7  8  9

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отображение (row, col) → position биективно на множестве валидных координат
2. Все функции чистые: результат зависит только от (orientation, n, аргументов)
3. Последовательности индексов строк/столбцов перезапускаемы и не делят курсор
4. Вычисления не проверяют предусловия (см. coordinate_guards для проверок)

ФОРМУЛЫ:
    tri_num(n)            = n * (n + 1) / 2
    offset_upper(i)       = i * n - i * (i - 1) / 2
    offset_lower(i)       = i * (i + 1) / 2
    index_upper(row, col) = offset_upper(row) + (col - row)
    index_lower(row, col) = offset_lower(row) + col
"""

import math
from collections.abc import Callable, Iterator, Sequence
from enum import Enum
from typing import Final, overload

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимальная длина оси (пустая матрица допустима)
AXIS_LENGTH_MIN: Final[int] = 0


# =============================================================================
# ТИПЫ
# =============================================================================


class Orientation(str, Enum):
    """Ориентация упакованного треугольника"""

    UPPER = "upper"
    LOWER = "lower"

    def is_valid(self, row: int, col: int) -> bool:
        """
        Предикат порядка координаты для ориентации.

        Returns:
            row <= col для UPPER, row >= col для LOWER
        """
        if self is Orientation.UPPER:
            return row <= col
        return row >= col


class PositionSequence(Sequence[int]):
    """
    Ленивая последовательность позиций хранилища.

    Каждый элемент вычисляется напрямую из своего номера через position_of,
    поэтому последовательность не хранит курсор: её можно обходить повторно,
    а несколько итераторов над ней независимы.

    Examples:
        >>> seq = PositionSequence(3, lambda k: 2 * k)
        >>> list(seq)
        [0, 2, 4]
        >>> seq[-1]
        4
    """

    __slots__ = ("_length", "_position_of")

    def __init__(self, length: int, position_of: Callable[[int], int]):
        self._length = length
        self._position_of = position_of

    def __len__(self) -> int:
        return self._length

    @overload
    def __getitem__(self, k: int) -> int: ...

    @overload
    def __getitem__(self, k: slice) -> list[int]: ...

    def __getitem__(self, k: int | slice) -> int | list[int]:
        if isinstance(k, slice):
            return [self._position_of(i) for i in range(*k.indices(self._length))]

        if k < 0:
            k += self._length
        if not 0 <= k < self._length:
            raise IndexError("position sequence index out of range")

        return self._position_of(k)

    def __iter__(self) -> Iterator[int]:
        for k in range(self._length):
            yield self._position_of(k)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (PositionSequence, range)):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"PositionSequence({list(self)!r})"


# =============================================================================
# ТРЕУГОЛЬНЫЕ ЧИСЛА
# =============================================================================


def tri_num(n: int) -> int:
    """
    Треугольное число T(n) = n(n+1)/2.

    Полное количество упакованных элементов треугольника с осью n,
    включая диагональ.

    Examples:
        >>> tri_num(0)
        0
        >>> tri_num(4)
        10
    """
    return n * (n + 1) // 2


# =============================================================================
# НАЧАЛА СТРОК И СТОЛБЦОВ
# =============================================================================


def row_start_index(orientation: Orientation, row: int, n: int) -> int:
    """
    Позиция первого элемента строки row.

    UPPER: строка k имеет длину n - k, начало строки row = row*n - row*(row-1)/2
    LOWER: строка k имеет длину k + 1, начало строки row = row*(row+1)/2

    Examples:
        >>> [row_start_index(Orientation.UPPER, i, 4) for i in range(4)]
        [0, 4, 7, 9]
        >>> [row_start_index(Orientation.LOWER, i, 4) for i in range(4)]
        [0, 1, 3, 6]
    """
    if orientation is Orientation.UPPER:
        return row * n - row * (row - 1) // 2
    return tri_num(row)


def col_start_index(orientation: Orientation, col: int, n: int) -> int:
    """
    Позиция первого (верхнего) элемента столбца col.

    UPPER: первый элемент лежит в строке 0, позиция = col
    LOWER: первый элемент лежит на диагонали, позиция = tri_num(col) + col

    Examples:
        >>> [col_start_index(Orientation.LOWER, j, 4) for j in range(4)]
        [0, 2, 5, 9]
    """
    if orientation is Orientation.UPPER:
        return col
    return tri_num(col) + col


def row_length(orientation: Orientation, row: int, n: int) -> int:
    """Количество элементов строки row: n - row (UPPER) или row + 1 (LOWER)."""
    if orientation is Orientation.UPPER:
        return n - row
    return row + 1


def col_length(orientation: Orientation, col: int, n: int) -> int:
    """Количество элементов столбца col: col + 1 (UPPER) или n - col (LOWER)."""
    if orientation is Orientation.UPPER:
        return col + 1
    return n - col


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТИ ИНДЕКСОВ
# =============================================================================


def row_indices(orientation: Orientation, row: int, n: int) -> range:
    """
    Позиции всех элементов строки row по возрастанию.

    Строка упакована непрерывно, поэтому результат: range.

    UPPER: столбцы row..n-1, длина n - row
    LOWER: столбцы 0..row, длина row + 1

    Examples:
        >>> list(row_indices(Orientation.UPPER, 1, 4))
        [4, 5, 6]
        >>> list(row_indices(Orientation.LOWER, 2, 4))
        [3, 4, 5]
    """
    start = row_start_index(orientation, row, n)
    return range(start, start + row_length(orientation, row, n))


def col_indices(orientation: Orientation, col: int, n: int) -> PositionSequence:
    """
    Позиции всех элементов столбца col по возрастанию (по одной на строку).

    UPPER: строки 0..col, элемент строки i = row_start_index(i) + (col - i)
    LOWER: строки col..n-1, элемент строки i = row_start_index(i) + col

    Examples:
        >>> list(col_indices(Orientation.UPPER, 3, 4))
        [3, 6, 8, 9]
        >>> list(col_indices(Orientation.LOWER, 1, 4))
        [2, 4, 7]
    """
    length = col_length(orientation, col, n)

    if orientation is Orientation.UPPER:
        return PositionSequence(
            length, lambda i: row_start_index(orientation, i, n) + col - i
        )

    return PositionSequence(
        length, lambda k: row_start_index(orientation, col + k, n) + col
    )


# =============================================================================
# ОТДЕЛЬНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


def element_index(orientation: Orientation, row: int, col: int, n: int) -> int:
    """
    Позиция элемента (row, col) в упакованном хранилище.

    Предусловие (не проверяется): 0 <= row, col < n и orientation.is_valid(row, col).
    Для проверки использовать coordinate_guards.checked_element_index.

    UPPER: offset_upper(row) + (col - row)
    LOWER: offset_lower(row) + col

    Examples:
        >>> element_index(Orientation.UPPER, 1, 3, 4)
        6
        >>> element_index(Orientation.LOWER, 3, 1, 4)
        7
    """
    if orientation is Orientation.UPPER:
        return row_start_index(orientation, row, n) + col - row
    return row_start_index(orientation, row, n) + col


def element_coordinate(orientation: Orientation, position: int, n: int) -> tuple[int, int]:
    """
    Обратное отображение: позиция хранилища → координата (row, col).

    LOWER: строка = наибольшее r с tri_num(r) <= position.
    UPPER: позиции отсчитываются с конца хранилища, где строки UPPER
    (длины 1, 2, ..., n) образуют зеркальный LOWER треугольник.

    Предусловие (не проверяется): 0 <= position < tri_num(n).

    Examples:
        >>> element_coordinate(Orientation.UPPER, 5, 4)
        (1, 2)
        >>> element_coordinate(Orientation.LOWER, 5, 4)
        (2, 2)
    """
    if orientation is Orientation.LOWER:
        row = (math.isqrt(8 * position + 1) - 1) // 2
        return row, position - tri_num(row)

    mirrored = tri_num(n) - 1 - position
    mirrored_row = (math.isqrt(8 * mirrored + 1) - 1) // 2
    row = n - 1 - mirrored_row

    # Смещение от конца строки → смещение от диагонали
    offset_from_end = mirrored - tri_num(mirrored_row)
    return row, row + (n - row - 1) - offset_from_end


def iter_triangle_indices(orientation: Orientation, n: int) -> Iterator[tuple[int, int]]:
    """
    Все валидные координаты (row, col) в порядке хранилища.

    k-я выданная координата имеет позицию k.

    Examples:
        >>> list(iter_triangle_indices(Orientation.LOWER, 2))
        [(0, 0), (1, 0), (1, 1)]
    """
    for row in range(n):
        if orientation is Orientation.UPPER:
            cols = range(row, n)
        else:
            cols = range(row + 1)
        for col in cols:
            yield row, col
