"""
Coordinate Guards — Validated Triangular Indexing

Базовая арифметика (triangular.py) не проверяет предусловия, чтобы вычисление
позиции оставалось без ветвлений. Этот модуль добавляет опциональный проверяющий слой:
каждая функция сначала валидирует аргументы и только затем делегирует
непроверенной арифметике.

Ошибки:
- InvalidCoordinate: row/col вне [0, n), нарушен предикат порядка ориентации
  (row > col для UPPER, row < col для LOWER) или индекс не целое число
- StorageLengthMismatch: длина хранилища отличается от tri_num(n)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидная координата никогда не превращается в позицию хранилища
2. Все ошибки восстанавливаемые (подклассы ValueError)
3. Для валидных аргументов результат совпадает с непроверенной арифметикой
"""

from collections.abc import Sized

from src.core.math.triangular import (
    AXIS_LENGTH_MIN,
    Orientation,
    PositionSequence,
    col_indices,
    element_coordinate,
    element_index,
    row_indices,
    tri_num,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidCoordinate(ValueError):
    """
    Координата или номер строки/столбца вне треугольника.

    Покрывает оба случая:
    1. row или col вне [0, n)
    2. координата нарушает предикат порядка ориентации
    """

    pass


class StorageLengthMismatch(ValueError):
    """Длина хранилища не равна tri_num(n)."""

    pass


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def _is_index(value: object) -> bool:
    # bool является подклассом int, но индексом не является
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_coordinate(orientation: Orientation, row: int, col: int, n: int) -> bool:
    """
    Проверка координаты без exception.

    Returns:
        True если 0 <= row, col < n и orientation.is_valid(row, col)

    Examples:
        >>> is_valid_coordinate(Orientation.UPPER, 1, 3, 4)
        True
        >>> is_valid_coordinate(Orientation.UPPER, 3, 1, 4)
        False
    """
    if not (_is_index(row) and _is_index(col)):
        return False

    if not (0 <= row < n and 0 <= col < n):
        return False

    return orientation.is_valid(row, col)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_axis_length(n: int) -> None:
    """
    Валидация длины оси.

    Raises:
        ValueError: Если n не целое число или n < 0
    """
    if not _is_index(n):
        raise ValueError(f"axis length must be an integer, got {n!r}")

    if n < AXIS_LENGTH_MIN:
        raise ValueError(f"axis length must be non-negative, got {n}")


def validate_axis_index(value: int, name: str, n: int) -> None:
    """
    Валидация номера строки или столбца.

    Args:
        value: Проверяемый номер
        name: Имя параметра (для сообщения об ошибке)
        n: Длина оси

    Raises:
        InvalidCoordinate: Если value не целое число или вне [0, n)
    """
    if not _is_index(value):
        raise InvalidCoordinate(f"{name} must be an integer, got {value!r}")

    if not 0 <= value < n:
        raise InvalidCoordinate(f"{name} must be in [0, {n}), got {value}")


def validate_coordinate(orientation: Orientation, row: int, col: int, n: int) -> None:
    """
    Валидация координаты (row, col) для ориентации.

    Raises:
        InvalidCoordinate: Если row/col вне [0, n) или нарушен предикат порядка
    """
    validate_axis_index(row, "row", n)
    validate_axis_index(col, "col", n)

    if not orientation.is_valid(row, col):
        relation = "row <= col" if orientation is Orientation.UPPER else "row >= col"
        raise InvalidCoordinate(
            f"coordinate ({row}, {col}) is outside the {orientation.value} triangle "
            f"(requires {relation}, n={n})"
        )


def validate_position(position: int, n: int) -> None:
    """
    Валидация позиции хранилища.

    Raises:
        InvalidCoordinate: Если position вне [0, tri_num(n))
    """
    validate_axis_index(position, "position", tri_num(n))


def validate_storage_length(storage: Sized, n: int) -> None:
    """
    Валидация длины хранилища.

    Raises:
        StorageLengthMismatch: Если len(storage) != tri_num(n)
    """
    expected = tri_num(n)
    actual = len(storage)

    if actual != expected:
        raise StorageLengthMismatch(
            f"storage length must equal tri_num({n})={expected}, got {actual}"
        )


# =============================================================================
# ПРОВЕРЕННАЯ АРИФМЕТИКА
# =============================================================================


def checked_row_indices(orientation: Orientation, row: int, n: int) -> range:
    """row_indices с проверкой row ∈ [0, n)."""
    validate_axis_index(row, "row", n)
    return row_indices(orientation, row, n)


def checked_col_indices(orientation: Orientation, col: int, n: int) -> PositionSequence:
    """col_indices с проверкой col ∈ [0, n)."""
    validate_axis_index(col, "col", n)
    return col_indices(orientation, col, n)


def checked_element_index(orientation: Orientation, row: int, col: int, n: int) -> int:
    """
    element_index с полной проверкой координаты.

    Raises:
        InvalidCoordinate: Если координата невалидна для ориентации

    Examples:
        >>> checked_element_index(Orientation.LOWER, 3, 1, 4)
        7
    """
    validate_coordinate(orientation, row, col, n)
    return element_index(orientation, row, col, n)


def checked_element_coordinate(orientation: Orientation, position: int, n: int) -> tuple[int, int]:
    """element_coordinate с проверкой position ∈ [0, tri_num(n))."""
    validate_position(position, n)
    return element_coordinate(orientation, position, n)
