"""
Numerical Safeguards — Tolerances & Approximate Equality

Модуль содержит общие примитивы сравнения float и валидации аргументов:
- Сравнение с толерантностью-экспонентой (количество десятичных знаков)
- Классическое сравнение rel/abs толерантностью (math.isclose)
- Проверки валидности float и неотрицательных целых счётчиков

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_almost_equal интерпретирует epsilon как степень: порог = 10^(-epsilon)
2. is_close НЕ принимает количество знаков, только rel_tol/abs_tol
3. Невалидные аргументы → ValueError немедленно, без fallback
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Количество десятичных знаков по умолчанию для is_almost_equal
DEFAULT_DECIMAL_PLACES: Final[int] = 5

# Относительная толерантность для is_close (как у math.isclose)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close (как у math.isclose)
EPS_FLOAT_COMPARE_ABS: Final[float] = 0.0


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_almost_equal(
    x: float,
    y: float,
    epsilon: float = DEFAULT_DECIMAL_PLACES,
) -> bool:
    """
    Сравнение с точностью до epsilon десятичных знаков.

    epsilon: это экспонента толерантности, а не сама толерантность:
    epsilon=5 означает "совпадают до 5 знаков после запятой".

    Алгоритм:
        abs(x - y) < 10 ** (-epsilon)

    Args:
        x: Первое значение
        y: Второе значение
        epsilon: Количество десятичных знаков (default: DEFAULT_DECIMAL_PLACES)

    Returns:
        True если значения совпадают с заданной точностью

    Raises:
        ValueError: Если epsilon NaN/Inf

    Examples:
        >>> is_almost_equal(3.14159265, 3.14159, 5)
        True
        >>> is_almost_equal(3.14159265, 3.14159, 7)
        False
    """
    if not is_valid_float(epsilon):
        raise ValueError(f"epsilon must be a finite number of places, got {epsilon}")

    try:
        threshold = 10.0 ** (-epsilon)
    except OverflowError:
        # epsilon < ~-308: порог за пределами float
        threshold = math.inf

    return abs(x - y) < threshold


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с относительной и абсолютной толерантностью.

    Обёртка над math.isclose. Третьего аргумента "количество знаков" нет,
    поэтому is_close(math.pi, 3.14159) == False при толерантностях по умолчанию.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 0.0)

    Returns:
        True если значения близки с учётом толерантности
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация неотрицательного целого счётчика (n в суммах и факториале).

    bool отвергается явно: True/False не являются счётчиками.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

