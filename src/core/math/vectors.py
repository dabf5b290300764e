"""
Vector Algebra — Fixed-Size Vector Operations

Операции над короткими векторами:
- multiply / multiply_scalar: произвольная длина, truncating zip
- dot / cross: строго 3 компоненты
- vec_length: ЦЕЛОЧИСЛЕННЫЙ корень (floor) из x² + y² + z²
- normalize: float, единичный вектор

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. multiply отбрасывает хвост более длинного вектора, ошибки нет
2. dot/cross/vec_length/normalize → DimensionError при len != 3
3. vec_length и normalize НЕ объединяются: разная семантика округления
4. normalize(нулевой вектор) возвращает вход без изменений (деления на ноль нет)
"""

import math
from typing import Sequence

from src.core.domain.vector import Number, Vector3


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ (произвольная длина)
# =============================================================================


def multiply(a: Sequence[Number], b: Sequence[Number]) -> list[Number]:
    """
    Поэлементное произведение с truncating zip.

    Пары сверх длины более короткого вектора молча отбрасываются.

    Examples:
        >>> multiply([1, 2], [2, 3])
        [2, 6]
        >>> multiply([1, 2, 3], [2, 3])
        [2, 6]
    """
    return [x * y for x, y in zip(a, b)]


def multiply_scalar(a: Sequence[Number], s: Number) -> list[Number]:
    """
    Умножение вектора на скаляр.

    Examples:
        >>> multiply_scalar([2, 6], 3)
        [6, 18]
    """
    return [x * s for x in a]


# =============================================================================
# 3D ОПЕРАЦИИ
# =============================================================================


def dot(a: Sequence[Number], b: Sequence[Number]) -> Number:
    """
    Скалярное произведение a·b.

    Raises:
        DimensionError: Если любой из векторов не 3-компонентный
    """
    u = Vector3.from_sequence(a)
    v = Vector3.from_sequence(b)
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(a: Sequence[Number], b: Sequence[Number]) -> Vector3:
    """
    Векторное произведение a×b (правая тройка).

    cross(a, b) == cross(b, a).negated()

    Raises:
        DimensionError: Если любой из векторов не 3-компонентный

    Examples:
        >>> cross([1, 0, 0], [0, 1, 0])
        Vector3(x=0, y=0, z=1)
    """
    u = Vector3.from_sequence(a)
    v = Vector3.from_sequence(b)
    return Vector3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def vec_length(a: Sequence[int]) -> int:
    """
    Целочисленная длина вектора: floor(sqrt(x² + y² + z²)).

    Используется math.isqrt, а не round(math.sqrt(...)): для не полных
    квадратов результат округляется вниз.

    Args:
        a: Вектор с целыми компонентами

    Returns:
        Целая часть евклидовой длины

    Raises:
        DimensionError: Если вектор не 3-компонентный
        TypeError: Если компоненты не целые

    Examples:
        >>> vec_length([0, 4, -3])
        5
        >>> vec_length([1, 1, 1])  # sqrt(3) ≈ 1.73
        1
    """
    return math.isqrt(dot(a, a))


def normalize(a: Sequence[Number]) -> Vector3:
    """
    Единичный вектор того же направления.

    Если квадрат длины равен 0, возвращается копия входа без деления.
    Иначе каждая компонента умножается на 1 / length.

    Raises:
        DimensionError: Если вектор не 3-компонентный

    Examples:
        >>> normalize([0, 0, 0])
        Vector3(x=0, y=0, z=0)
    """
    v = Vector3.from_sequence(a)
    length_sq = dot(v, v)

    if length_sq == 0:
        return Vector3(*v)

    inv_length = 1.0 / math.sqrt(length_sq)
    return Vector3(v.x * inv_length, v.y * inv_length, v.z * inv_length)
