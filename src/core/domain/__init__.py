"""
Domain models and accessors.

Contains the orientation capability (TriangleLayout), the packed triangle
accessor and the no-diagonal adapters built on top of it.
"""

from src.core.domain.orientation import TriangleAxis, TriangleLayout
from src.core.domain.packed_triangle import (
    AccessorConfig,
    ElementRef,
    TriangleAccessor,
)
from src.core.domain.strict_triangle import StrictTriangle, SymmetricTriangle

__all__ = [
    # Orientation capability
    "TriangleAxis",
    "TriangleLayout",
    # Accessor
    "AccessorConfig",
    "ElementRef",
    "TriangleAccessor",
    # No-diagonal adapters
    "StrictTriangle",
    "SymmetricTriangle",
]
