"""
Scalar Arithmetic — Integer Primitives

Простейшие целочисленные операции, используемые как переиспользуемые
операторы (например, times в fold для факториала).

Целые Python не переполняются: plus/times/absolute никогда не "заворачиваются"
по модулю 2^32 и не имеют граничного значения MIN.
"""


def plus(x: int, y: int) -> int:
    """
    Сложение двух целых.

    Examples:
        >>> plus(1, 1)
        2
    """
    return x + y


def times(x: int, y: int) -> int:
    """
    Умножение двух целых.

    Бинарный оператор для fold: fold(range(1, 7), 1, times) == 720.
    """
    return x * y


def absolute(x: int) -> int:
    """Модуль целого (|x|)."""
    return -x if x < 0 else x
