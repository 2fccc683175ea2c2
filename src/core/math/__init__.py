"""
Core math modules для packed triangle indexing

Чистая индексная арифметика упакованных треугольных матриц и опциональный
проверяющий слой поверх неё.
"""

# Triangular indexing
from src.core.math.triangular import (
    # Constants
    AXIS_LENGTH_MIN,
    # Types
    Orientation,
    PositionSequence,
    # Functions
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

# Coordinate guards
from src.core.math.coordinate_guards import (
    # Exceptions
    InvalidCoordinate,
    StorageLengthMismatch,
    # Predicates
    is_valid_coordinate,
    # Validation
    validate_axis_index,
    validate_axis_length,
    validate_coordinate,
    validate_position,
    validate_storage_length,
    # Checked arithmetic
    checked_col_indices,
    checked_element_coordinate,
    checked_element_index,
    checked_row_indices,
)

__all__ = [
    # Triangular — Constants
    "AXIS_LENGTH_MIN",
    # Triangular — Types
    "Orientation",
    "PositionSequence",
    # Triangular — Functions
    "col_indices",
    "col_length",
    "col_start_index",
    "element_coordinate",
    "element_index",
    "iter_triangle_indices",
    "row_indices",
    "row_length",
    "row_start_index",
    "tri_num",
    # Coordinate guards — Exceptions
    "InvalidCoordinate",
    "StorageLengthMismatch",
    # Coordinate guards — Predicates
    "is_valid_coordinate",
    # Coordinate guards — Validation
    "validate_axis_index",
    "validate_axis_length",
    "validate_coordinate",
    "validate_position",
    "validate_storage_length",
    # Coordinate guards — Checked arithmetic
    "checked_col_indices",
    "checked_element_coordinate",
    "checked_element_index",
    "checked_row_indices",
]
