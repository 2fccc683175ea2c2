"""
Тесты для Triangular Indexing — Packed Storage Index Arithmetic

Проверяемые инварианты:
1. tri_num(n) = n(n+1)/2 для всех n >= 0
2. Строки UPPER разбивают [0, tri_num(n)) без пропусков и повторов
3. Законы длин строк и столбцов
4. Согласованность последовательностей строк/столбцов и element_index
5. element_coordinate: обратное отображение element_index
6. Последовательности индексов перезапускаемы и не делят курсор
"""

import pytest

from src.core.math.triangular import (
    AXIS_LENGTH_MIN,
    Orientation,
    PositionSequence,
    col_indices,
    col_length,
    col_start_index,
    element_coordinate,
    element_index,
    iter_triangle_indices,
    row_indices,
    row_length,
    row_start_index,
    tri_num,
)

UPPER = Orientation.UPPER
LOWER = Orientation.LOWER

AXIS_LENGTHS = list(range(0, 9))


# =============================================================================
# ТЕСТЫ: tri_num
# =============================================================================


class TestTriNum:
    """Тесты tri_num"""

    def test_zero(self) -> None:
        """Пустой треугольник не содержит элементов"""
        assert tri_num(0) == 0
        assert AXIS_LENGTH_MIN == 0

    def test_known_values(self) -> None:
        """Известные треугольные числа"""
        assert [tri_num(n) for n in range(7)] == [0, 1, 3, 6, 10, 15, 21]

    @pytest.mark.parametrize("n", AXIS_LENGTHS + [100, 1001])
    def test_matches_accumulated_sum(self, n: int) -> None:
        """tri_num(n) равен сумме 0 + 1 + ... + n"""
        assert tri_num(n) == sum(range(n + 1))
        assert tri_num(n) == n * (n + 1) // 2

    def test_result_is_int(self) -> None:
        """Результат: целое число, а не float"""
        assert isinstance(tri_num(5), int)


# =============================================================================
# ТЕСТЫ: UPPER, n=4
# =============================================================================


class TestUpperConcrete:
    """Конкретный сценарий UPPER с n=4

        0  1  2  3
           4  5  6
              7  8
                 9
    """

    N = 4

    def test_row_start_index(self) -> None:
        assert [row_start_index(UPPER, i, self.N) for i in range(4)] == [0, 4, 7, 9]

    def test_col_start_index(self) -> None:
        assert [col_start_index(UPPER, j, self.N) for j in range(4)] == [0, 1, 2, 3]

    def test_row_indices(self) -> None:
        assert list(row_indices(UPPER, 0, self.N)) == [0, 1, 2, 3]
        assert list(row_indices(UPPER, 1, self.N)) == [4, 5, 6]
        assert list(row_indices(UPPER, 2, self.N)) == [7, 8]
        assert list(row_indices(UPPER, 3, self.N)) == [9]

    def test_col_indices(self) -> None:
        assert list(col_indices(UPPER, 0, self.N)) == [0]
        assert list(col_indices(UPPER, 1, self.N)) == [1, 4]
        assert list(col_indices(UPPER, 2, self.N)) == [2, 5, 7]
        assert list(col_indices(UPPER, 3, self.N)) == [3, 6, 8, 9]

    def test_element_index(self) -> None:
        expected = {
            (0, 0): 0, (0, 1): 1, (0, 2): 2, (0, 3): 3,
            (1, 1): 4, (1, 2): 5, (1, 3): 6,
            (2, 2): 7, (2, 3): 8,
            (3, 3): 9,
        }
        for (row, col), position in expected.items():
            assert element_index(UPPER, row, col, self.N) == position

    def test_element_coordinate(self) -> None:
        assert element_coordinate(UPPER, 0, self.N) == (0, 0)
        assert element_coordinate(UPPER, 3, self.N) == (0, 3)
        assert element_coordinate(UPPER, 4, self.N) == (1, 1)
        assert element_coordinate(UPPER, 5, self.N) == (1, 2)
        assert element_coordinate(UPPER, 8, self.N) == (2, 3)
        assert element_coordinate(UPPER, 9, self.N) == (3, 3)


# =============================================================================
# ТЕСТЫ: LOWER, n=4
# =============================================================================


class TestLowerConcrete:
    """Конкретный сценарий LOWER с n=4

        0
        1  2
        3  4  5
        6  7  8  9
    """

    N = 4

    def test_row_start_index(self) -> None:
        assert [row_start_index(LOWER, i, self.N) for i in range(4)] == [0, 1, 3, 6]

    def test_col_start_index(self) -> None:
        assert [col_start_index(LOWER, j, self.N) for j in range(4)] == [0, 2, 5, 9]

    def test_row_indices(self) -> None:
        assert list(row_indices(LOWER, 0, self.N)) == [0]
        assert list(row_indices(LOWER, 1, self.N)) == [1, 2]
        assert list(row_indices(LOWER, 2, self.N)) == [3, 4, 5]
        assert list(row_indices(LOWER, 3, self.N)) == [6, 7, 8, 9]

    def test_col_indices(self) -> None:
        assert list(col_indices(LOWER, 0, self.N)) == [0, 1, 3, 6]
        assert list(col_indices(LOWER, 1, self.N)) == [2, 4, 7]
        assert list(col_indices(LOWER, 2, self.N)) == [5, 8]
        assert list(col_indices(LOWER, 3, self.N)) == [9]

    def test_element_index(self) -> None:
        expected = {
            (0, 0): 0,
            (1, 0): 1, (1, 1): 2,
            (2, 0): 3, (2, 1): 4, (2, 2): 5,
            (3, 0): 6, (3, 1): 7, (3, 2): 8, (3, 3): 9,
        }
        for (row, col), position in expected.items():
            assert element_index(LOWER, row, col, self.N) == position

    def test_element_coordinate(self) -> None:
        assert element_coordinate(LOWER, 0, self.N) == (0, 0)
        assert element_coordinate(LOWER, 2, self.N) == (1, 1)
        assert element_coordinate(LOWER, 4, self.N) == (2, 1)
        assert element_coordinate(LOWER, 6, self.N) == (3, 0)
        assert element_coordinate(LOWER, 9, self.N) == (3, 3)


# =============================================================================
# ТЕСТЫ: Свойства для всех n
# =============================================================================


@pytest.mark.parametrize("orientation", [UPPER, LOWER])
@pytest.mark.parametrize("n", AXIS_LENGTHS)
class TestIndexProperties:
    """Структурные свойства, общие для обеих ориентаций"""

    def test_rows_partition_storage(self, orientation: Orientation, n: int) -> None:
        """Конкатенация строк: каждая позиция ровно один раз, по возрастанию"""
        positions = [p for i in range(n) for p in row_indices(orientation, i, n)]
        assert positions == list(range(tri_num(n)))

    def test_columns_cover_storage(self, orientation: Orientation, n: int) -> None:
        """Столбцы покрывают хранилище без повторов"""
        positions = [p for j in range(n) for p in col_indices(orientation, j, n)]
        assert sorted(positions) == list(range(tri_num(n)))

    def test_row_length_law(self, orientation: Orientation, n: int) -> None:
        for i in range(n):
            expected = n - i if orientation is UPPER else i + 1
            assert len(row_indices(orientation, i, n)) == expected
            assert row_length(orientation, i, n) == expected

    def test_col_length_law(self, orientation: Orientation, n: int) -> None:
        for j in range(n):
            expected = j + 1 if orientation is UPPER else n - j
            assert len(col_indices(orientation, j, n)) == expected
            assert col_length(orientation, j, n) == expected

    def test_sequences_ascending(self, orientation: Orientation, n: int) -> None:
        for k in range(n):
            row = list(row_indices(orientation, k, n))
            col = list(col_indices(orientation, k, n))
            assert row == sorted(row)
            assert col == sorted(col)

    def test_row_consistent_with_element_index(self, orientation: Orientation, n: int) -> None:
        """Элемент строки на смещении столбца совпадает с element_index"""
        for row, col in iter_triangle_indices(orientation, n):
            offset = col - row if orientation is UPPER else col
            assert row_indices(orientation, row, n)[offset] == element_index(orientation, row, col, n)

    def test_col_consistent_with_element_index(self, orientation: Orientation, n: int) -> None:
        """Элемент столбца на смещении строки совпадает с element_index"""
        for row, col in iter_triangle_indices(orientation, n):
            offset = row if orientation is UPPER else row - col
            assert col_indices(orientation, col, n)[offset] == element_index(orientation, row, col, n)

    def test_start_indices_are_first_elements(self, orientation: Orientation, n: int) -> None:
        for k in range(n):
            assert row_start_index(orientation, k, n) == row_indices(orientation, k, n)[0]
            assert col_start_index(orientation, k, n) == col_indices(orientation, k, n)[0]

    def test_iter_indices_in_storage_order(self, orientation: Orientation, n: int) -> None:
        """k-я координата имеет позицию k"""
        coordinates = list(iter_triangle_indices(orientation, n))
        assert len(coordinates) == tri_num(n)
        for position, (row, col) in enumerate(coordinates):
            assert orientation.is_valid(row, col)
            assert element_index(orientation, row, col, n) == position

    def test_element_coordinate_inverts_element_index(self, orientation: Orientation, n: int) -> None:
        for position in range(tri_num(n)):
            row, col = element_coordinate(orientation, position, n)
            assert 0 <= row < n and 0 <= col < n
            assert element_index(orientation, row, col, n) == position


# =============================================================================
# ТЕСТЫ: Orientation
# =============================================================================


class TestOrientation:
    """Тесты Orientation"""

    def test_values(self) -> None:
        assert Orientation.UPPER.value == "upper"
        assert Orientation.LOWER.value == "lower"
        assert Orientation("lower") is Orientation.LOWER

    def test_upper_predicate(self) -> None:
        assert UPPER.is_valid(1, 3)
        assert UPPER.is_valid(2, 2)
        assert not UPPER.is_valid(3, 1)

    def test_lower_predicate(self) -> None:
        assert LOWER.is_valid(3, 1)
        assert LOWER.is_valid(2, 2)
        assert not LOWER.is_valid(1, 3)


# =============================================================================
# ТЕСТЫ: PositionSequence
# =============================================================================


class TestPositionSequence:
    """Тесты PositionSequence: ленивость, перезапуск, независимость"""

    @pytest.fixture
    def column(self) -> PositionSequence:
        return col_indices(UPPER, 3, 4)

    def test_len_and_getitem(self, column: PositionSequence) -> None:
        assert len(column) == 4
        assert column[0] == 3
        assert column[3] == 9

    def test_negative_index(self, column: PositionSequence) -> None:
        assert column[-1] == 9
        assert column[-4] == 3

    def test_out_of_range_raises(self, column: PositionSequence) -> None:
        with pytest.raises(IndexError):
            column[4]
        with pytest.raises(IndexError):
            column[-5]

    def test_slice(self, column: PositionSequence) -> None:
        assert column[1:3] == [6, 8]
        assert column[::-1] == [9, 8, 6, 3]

    def test_restartable(self, column: PositionSequence) -> None:
        """Повторный обход даёт тот же результат"""
        assert list(column) == list(column) == [3, 6, 8, 9]

    def test_independent_iterators(self, column: PositionSequence) -> None:
        """Два итератора над одной последовательностью не мешают друг другу"""
        first = iter(column)
        second = iter(column)
        assert next(first) == 3
        assert next(first) == 6
        assert next(second) == 3
        assert list(first) == [8, 9]
        assert list(second) == [6, 8, 9]

    def test_sequence_protocol(self, column: PositionSequence) -> None:
        assert 8 in column
        assert 7 not in column
        assert column.index(8) == 2
        assert list(reversed(column)) == [9, 8, 6, 3]

    def test_equality(self, column: PositionSequence) -> None:
        assert column == [3, 6, 8, 9]
        assert column == (3, 6, 8, 9)
        assert column == col_indices(UPPER, 3, 4)
        assert column != [3, 6, 8]

    def test_empty(self) -> None:
        empty = PositionSequence(0, lambda k: k)
        assert len(empty) == 0
        assert list(empty) == []
