"""
Vector3 — Трёхкомпонентный вектор фиксированной размерности

Immutable NamedTuple (x, y, z). Длина проверяется при конструировании через
from_sequence: последовательность неверной длины → DimensionError с понятным
сообщением вместо IndexError в середине вычисления.
"""

from typing import Final, NamedTuple, Sequence, Union

Number = Union[int, float]

# Размерность векторов для dot/cross/length/normalize
VECTOR_DIM: Final[int] = 3


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DimensionError(ValueError):
    """
    Вектор имеет неверное количество компонент.

    Нарушение контракта вызывающей стороны: не перехватывается и не
    исправляется внутри библиотеки.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Wrong dimension: expected {expected} components, got {actual}"
        )


# =============================================================================
# VECTOR3
# =============================================================================


class Vector3(NamedTuple):
    """
    Трёхмерный вектор.

    Сравнивается как обычный tuple: Vector3(1, 2, 3) == (1, 2, 3).
    """

    x: Number
    y: Number
    z: Number

    @classmethod
    def from_sequence(cls, values: Sequence[Number]) -> "Vector3":
        """
        Конструирование из произвольной последовательности.

        Args:
            values: Последовательность ровно из VECTOR_DIM компонент

        Returns:
            Vector3 (сам values, если это уже Vector3)

        Raises:
            DimensionError: Если len(values) != VECTOR_DIM
        """
        if isinstance(values, cls):
            return values

        if len(values) != VECTOR_DIM:
            raise DimensionError(VECTOR_DIM, len(values))

        return cls(*values)

    def negated(self) -> "Vector3":
        """Вектор с противоположным направлением (-x, -y, -z)."""
        return Vector3(-self.x, -self.y, -self.z)
