"""
PackedTriangle — Triangle Accessor over Borrowed Storage

Accessor объединяет индексную арифметику (src.core.math.triangular) с
заимствованным доступом к внешнему одномерному хранилищу. Хранилище
принадлежит вызывающему коду: accessor его не копирует и не создаёт,
а только вычисляет позиции и читает/пишет по ним.

Порядок проверок:
1. Конструктор: длина хранилища == tri_num(n) (AccessorConfig.check_storage_length)
2. Каждый вызов: координата внутри треугольника (AccessorConfig.check_coordinates)

По умолчанию проверка координат выключена: нарушение предусловия —
ошибка вызывающего кода, результат не определён.

Доступ к хранилищу (контракт, не проверяется):
- любое количество читателей одновременно, ИЛИ
- ровно один писатель (get_element_mut / set_element / __setitem__)
"""

from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from src.core.domain.orientation import TriangleAxis
from src.core.math.coordinate_guards import (
    validate_axis_index,
    validate_coordinate,
    validate_storage_length,
)
from src.core.math.triangular import (
    Orientation,
    PositionSequence,
    col_indices,
    col_start_index,
    element_index,
    iter_triangle_indices,
    row_indices,
    row_start_index,
)

T = TypeVar("T")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AccessorConfig:
    """Конфигурация TriangleAccessor.

    check_coordinates=True превращает accessor в проверяющую обёртку:
    невалидная координата даёт InvalidCoordinate до обращения к хранилищу.
    """

    check_coordinates: bool = False
    check_storage_length: bool = True


# =============================================================================
# ELEMENT REFERENCE
# =============================================================================


@dataclass(frozen=True)
class ElementRef(Generic[T]):
    """Изменяемая ссылка на одну позицию хранилища."""

    storage: MutableSequence[T]
    position: int

    def get(self) -> T:
        return self.storage[self.position]

    def set(self, value: T) -> None:
        self.storage[self.position] = value


# =============================================================================
# ACCESSOR
# =============================================================================


class TriangleAccessor(Generic[T]):
    """Доступ к упакованному треугольнику по координатам (row, col).

    Не хранит состояния кроме заимствованных ссылок: каждый вызов
    вычисляется заново из (orientation, n, аргументов). Последовательности
    индексов строк и столбцов независимы и перезапускаемы.

    Examples:
        >>> storage = list(range(10))
        >>> m = TriangleAccessor(TriangleLayout.upper(4), storage)
        >>> list(m.get_row_indices(1))
        [4, 5, 6]
        >>> m.get_element(1, 3)
        6
    """

    def __init__(
        self,
        layout: TriangleAxis,
        storage: Sequence[T],
        config: AccessorConfig | None = None,
    ):
        self._layout = layout
        self._storage = storage
        self._config = config or AccessorConfig()

        if self._config.check_storage_length:
            validate_storage_length(storage, layout.n())

    @property
    def orientation(self) -> Orientation:
        return self._layout.orientation

    @property
    def storage(self) -> Sequence[T]:
        return self._storage

    def n(self) -> int:
        return self._layout.n()

    # -------------------------------------------------------------------------
    # Индексы
    # -------------------------------------------------------------------------

    def get_row_start_index(self, row: int) -> int:
        """Позиция первого элемента строки."""
        if self._config.check_coordinates:
            validate_axis_index(row, "row", self.n())
        return row_start_index(self.orientation, row, self.n())

    def get_col_start_index(self, col: int) -> int:
        """Позиция первого элемента столбца."""
        if self._config.check_coordinates:
            validate_axis_index(col, "col", self.n())
        return col_start_index(self.orientation, col, self.n())

    def get_row_indices(self, row: int) -> range:
        """Позиции элементов строки по возрастанию."""
        if self._config.check_coordinates:
            validate_axis_index(row, "row", self.n())
        return row_indices(self.orientation, row, self.n())

    def get_col_indices(self, col: int) -> PositionSequence:
        """Позиции элементов столбца по возрастанию."""
        if self._config.check_coordinates:
            validate_axis_index(col, "col", self.n())
        return col_indices(self.orientation, col, self.n())

    def get_element_index(self, row: int, col: int) -> int:
        """Позиция элемента (row, col) в хранилище."""
        if self._config.check_coordinates:
            validate_coordinate(self.orientation, row, col, self.n())
        return element_index(self.orientation, row, col, self.n())

    def iter_indices(self) -> Iterator[tuple[int, int]]:
        """Все координаты треугольника в порядке хранилища."""
        return iter_triangle_indices(self.orientation, self.n())

    # -------------------------------------------------------------------------
    # Элементы
    # -------------------------------------------------------------------------

    def get_element(self, row: int, col: int) -> T:
        """Значение элемента (row, col), разделяемый доступ."""
        return self._storage[self.get_element_index(row, col)]

    def get_element_mut(self, row: int, col: int) -> ElementRef[T]:
        """Ссылка на элемент (row, col) для записи, эксклюзивный доступ."""
        return ElementRef(self._mutable_storage(), self.get_element_index(row, col))

    def set_element(self, row: int, col: int, value: T) -> None:
        """Запись значения элемента (row, col)."""
        self._mutable_storage()[self.get_element_index(row, col)] = value

    def get_row(self, row: int) -> Iterator[T]:
        """Значения элементов строки в порядке столбцов."""
        storage = self._storage
        return (storage[position] for position in self.get_row_indices(row))

    def get_col(self, col: int) -> Iterator[T]:
        """Значения элементов столбца в порядке строк."""
        storage = self._storage
        return (storage[position] for position in self.get_col_indices(col))

    def _mutable_storage(self) -> MutableSequence[T]:
        if not hasattr(self._storage, "__setitem__"):
            raise TypeError(
                f"storage of type {type(self._storage).__name__} does not support item assignment"
            )
        return self._storage  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Протокол контейнера
    # -------------------------------------------------------------------------

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, col = key
        return self.get_element(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self.set_element(row, col, value)

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return (
            f"TriangleAccessor(orientation={self.orientation.value!r}, "
            f"n={self.n()}, checked={self._config.check_coordinates})"
        )
