"""
Series Summation — Closed Form & Iterative Sums

Модуль содержит суммирование рядов по целочисленным диапазонам:
- Треугольные числа в замкнутой форме (float)
- Итеративные суммы по полуоткрытым диапазонам [0, n)
- Двойное суммирование по вложенным диапазонам
- Левую свёртку (fold) и факториал через неё

ФОРМУЛЫ:
    sum_to_n(n)   = n(n+1)/2
    iter_sum(n)   = Σ_{k=0}^{n-1} k        = n(n-1)/2
    iter_sum_2(n) = Σ_{k=0}^{n-1} (2k + 1) = n²
    nested_range_sum(I, J, c) = Σ_{i∈I} Σ_{j∈J} c·i·j

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sum_to_n(n) == iter_sum(n + 1) для неотрицательных целых n
2. iter_sum_2(n) == n * n
3. fold: левая свёртка, fold([a, b], init, op) == op(op(init, a), b)
"""

from functools import reduce
from typing import Callable, Final, Iterable, TypeVar

from src.core.math.numerical_safeguards import validate_non_negative_int
from src.core.math.scalar import plus, times

T = TypeVar("T")
A = TypeVar("A")

# Множитель слагаемого в nested_range_sum по умолчанию
NESTED_SUM_FACTOR_DEFAULT: Final[int] = 3


# =============================================================================
# ЗАМКНУТАЯ ФОРМА
# =============================================================================


def sum_to_n(n: float) -> float:
    """
    Треугольное число n(n+1)/2 в замкнутой форме.

    Вычисляется во float: результат точен для целых n, пока n(n+1)
    помещается в 53-битную мантиссу.

    Args:
        n: Верхняя граница (включительно)

    Returns:
        n(n+1)/2 как float

    Examples:
        >>> sum_to_n(100)
        5050.0
    """
    n = float(n)
    return (n * (n + 1.0)) / 2.0


# =============================================================================
# ИТЕРАТИВНЫЕ СУММЫ
# =============================================================================


def iter_sum(n: int) -> int:
    """
    Сумма 0 + 1 + ... + (n - 1).

    Raises:
        ValueError: Если n отрицательное или не int

    Examples:
        >>> iter_sum(101)
        5050
    """
    validate_non_negative_int(n, "n")
    return fold(range(n), 0, plus)


def iter_sum_2(n: int) -> int:
    """
    Сумма первых n нечётных чисел: 1 + 3 + ... + (2n - 1) == n².

    Raises:
        ValueError: Если n отрицательное или не int
    """
    validate_non_negative_int(n, "n")
    return fold((2 * k + 1 for k in range(n)), 0, plus)


def nested_range_sum(
    outer: range,
    inner: range,
    factor: int = NESTED_SUM_FACTOR_DEFAULT,
) -> int:
    """
    Двойная сумма Σ_{i∈outer} Σ_{j∈inner} factor·i·j.

    Накопление слева направо: внешний цикл по outer, внутренний по inner.
    Диапазоны полуоткрытые, как у range.

    Args:
        outer: Диапазон внешнего индекса i
        inner: Диапазон внутреннего индекса j
        factor: Множитель слагаемого (default: 3)

    Returns:
        Накопленная сумма

    Examples:
        >>> nested_range_sum(range(1, 3), range(1, 3))  # 3*(1+2+2+4)
        27
    """
    total = 0
    for i in outer:
        for j in inner:
            total += factor * i * j
    return total


# =============================================================================
# СВЁРТКА
# =============================================================================


def fold(values: Iterable[T], initial: A, operator: Callable[[A, T], A]) -> A:
    """
    Левая свёртка: operator(...operator(operator(initial, v0), v1)..., vN).

    Направление свёртки имеет значение для некоммутативных операторов.

    Args:
        values: Итерируемая последовательность
        initial: Начальное значение аккумулятора
        operator: Бинарная функция (accumulator, value) -> accumulator

    Returns:
        Итоговое значение аккумулятора (initial для пустой последовательности)

    Examples:
        >>> fold(range(1, 7), 1, times)
        720
    """
    return reduce(operator, values, initial)


def factorial(n: int) -> int:
    """
    n! через левую свёртку times по 1..n.

    Raises:
        ValueError: Если n отрицательное или не int
    """
    validate_non_negative_int(n, "n")
    return fold(range(1, n + 1), 1, times)
