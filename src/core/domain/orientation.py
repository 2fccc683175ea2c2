"""
TriangleLayout — Orientation Capability

Immutable Pydantic модель, описывающая упакованный треугольник: ориентацию
(UPPER/LOWER) и длину оси n. Любой объект с атрибутом orientation и методом
n() удовлетворяет протоколу TriangleAxis и может использоваться вместо неё.
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from src.core.math.triangular import AXIS_LENGTH_MIN, Orientation, tri_num


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class TriangleAxis(Protocol):
    """
    Возможность ориентации: ориентация + длина оси.

    n() должен быть чистым и возвращать одно и то же значение при повторных
    вызовах на одном объекте.
    """

    @property
    def orientation(self) -> Orientation: ...

    def n(self) -> int: ...


# =============================================================================
# LAYOUT MODEL
# =============================================================================


class TriangleLayout(BaseModel):
    """
    Описание упакованного треугольника.

    Immutable модель (frozen=True): ориентация и длина оси фиксированы
    на всё время жизни вычислений.
    """

    orientation: Orientation = Field(..., description="Ориентация (upper/lower)")
    axis_length: int = Field(
        ..., ge=AXIS_LENGTH_MIN, description="Длина стороны квадратной матрицы"
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def upper(cls, n: int) -> "TriangleLayout":
        """Верхний треугольник с осью n."""
        return cls(orientation=Orientation.UPPER, axis_length=n)

    @classmethod
    def lower(cls, n: int) -> "TriangleLayout":
        """Нижний треугольник с осью n."""
        return cls(orientation=Orientation.LOWER, axis_length=n)

    def n(self) -> int:
        """Длина оси."""
        return self.axis_length

    def size(self) -> int:
        """
        Требуемая длина хранилища.

        Returns:
            tri_num(n), включая диагональ
        """
        return tri_num(self.axis_length)
