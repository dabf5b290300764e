"""
Тесты для Scalar Arithmetic

Проверяет:
1. plus: сложение и коммутативность
2. times: умножение как оператор свёртки
3. absolute: модуль целого
4. Отсутствие переполнения у целых Python
"""

import pytest

from src.core.math.scalar import absolute, plus, times

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


class TestPlus:
    """Тесты для plus"""

    def test_one_plus_one(self) -> None:
        """1 + 1 == 2"""
        assert plus(1, 1) == 2

    def test_negative_operands(self) -> None:
        assert plus(-3, 5) == 2
        assert plus(-3, -5) == -8

    @pytest.mark.parametrize(
        "a, b",
        [(0, 0), (1, -1), (7, 35), (-1000, 999), (INT32_MAX, INT32_MIN)],
    )
    def test_commutativity(self, a: int, b: int) -> None:
        """plus(a, b) == plus(b, a)"""
        assert plus(a, b) == plus(b, a)

    def test_no_wraparound(self) -> None:
        """Целые Python не заворачиваются на границе int32"""
        assert plus(INT32_MAX, 1) == 2**31


class TestTimes:
    """Тесты для times"""

    def test_basic(self) -> None:
        assert times(6, 7) == 42
        assert times(-2, 3) == -6
        assert times(0, 12345) == 0

    def test_usable_as_binary_operator(self) -> None:
        """times передаётся как функция"""
        assert list(map(times, [1, 2, 3], [4, 5, 6])) == [4, 10, 18]

    def test_no_wraparound(self) -> None:
        assert times(INT32_MAX, 2) == 2 * INT32_MAX


class TestAbsolute:
    """Тесты для absolute"""

    def test_positive_unchanged(self) -> None:
        assert absolute(5) == 5

    def test_negative_flipped(self) -> None:
        assert absolute(-5) == 5

    def test_zero(self) -> None:
        assert absolute(0) == 0

    def test_int32_min_has_no_boundary(self) -> None:
        """Для INT32_MIN результат корректен (нет переполнения)"""
        assert absolute(INT32_MIN) == 2**31

    @pytest.mark.parametrize("x", [-17, -1, 0, 1, 17])
    def test_matches_builtin(self, x: int) -> None:
        assert absolute(x) == abs(x)
