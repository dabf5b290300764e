"""
Тесты для Matrix Determinant

Проверяемые инварианты:
1. det2 = ad - bc
2. det(I_n) == 1 для n ∈ {1, 2, 3, 100}
3. Общий N×N совпадает с разложением по кофакторам
4. Перестановка строк меняет знак
5. Вырожденная матрица → 0.0
6. Невалидная форма → ValidationError
"""

import logging

import pytest
from pydantic import ValidationError

from src.core.domain.matrix import Matrix
from src.core.math.determinant import det2, determinant, identity_determinant


def _cofactor_determinant(rows: list[list[float]]) -> float:
    """Эталон: разложение по первой строке."""
    if len(rows) == 1:
        return rows[0][0]
    total = 0.0
    for col, value in enumerate(rows[0]):
        minor = [row[:col] + row[col + 1 :] for row in rows[1:]]
        total += (-1) ** col * value * _cofactor_determinant(minor)
    return total


# =============================================================================
# 2×2
# =============================================================================


class TestDet2:
    """Тесты det2"""

    def test_basic(self) -> None:
        assert det2(1.0, 2.0, 3.0, 4.0) == -2.0

    def test_identity(self) -> None:
        assert det2(1.0, 0.0, 0.0, 1.0) == 1.0

    def test_singular(self) -> None:
        assert det2(2.0, 4.0, 1.0, 2.0) == 0.0

    def test_matrix_dispatch(self) -> None:
        """determinant для 2×2 использует ad - bc"""
        assert determinant([[3.0, 8.0], [4.0, 6.0]]) == -14.0


# =============================================================================
# IDENTITY
# =============================================================================


class TestIdentityDeterminant:
    """Тесты det(I_n)"""

    @pytest.mark.parametrize("n", [1, 2, 3, 10, 100])
    def test_identity_is_one(self, n: int) -> None:
        """det(I_n) == 1 точно"""
        assert identity_determinant(n) == 1.0

    def test_identity_matrix_object(self) -> None:
        assert determinant(Matrix.identity(100)) == 1.0

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            identity_determinant(0)


# =============================================================================
# GENERAL N×N
# =============================================================================


class TestDeterminantGeneral:
    """Тесты determinant для N >= 3"""

    def test_one_by_one(self) -> None:
        assert determinant([[7.5]]) == 7.5

    def test_three_by_three(self) -> None:
        rows = [[6.0, 1.0, 1.0], [4.0, -2.0, 5.0], [2.0, 8.0, 7.0]]
        assert determinant(rows) == pytest.approx(-306.0)

    def test_matches_cofactor_expansion(self) -> None:
        rows = [
            [2.0, -1.0, 0.0, 3.0],
            [1.0, 4.0, -2.0, 0.5],
            [0.0, 3.0, 1.0, -1.0],
            [5.0, 0.0, 2.0, 1.0],
        ]
        assert determinant(rows) == pytest.approx(_cofactor_determinant(rows))

    def test_row_swap_flips_sign(self) -> None:
        rows = [[1.0, 2.0, 3.0], [0.0, 4.0, 5.0], [1.0, 0.0, 6.0]]
        swapped = [rows[1], rows[0], rows[2]]
        assert determinant(swapped) == pytest.approx(-determinant(rows))

    def test_pivoting_on_zero_leading_entry(self) -> None:
        """Нулевой a[0][0] требует перестановки строк"""
        rows = [[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]
        assert determinant(rows) == pytest.approx(-1.0)

    def test_singular_is_zero(self) -> None:
        rows = [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [7.0, 8.0, 9.0]]
        assert determinant(rows) == pytest.approx(0.0, abs=1e-12)

    def test_zero_column_short_circuits(self, caplog: pytest.LogCaptureFixture) -> None:
        rows = [[0.0, 1.0, 2.0], [0.0, 3.0, 4.0], [0.0, 5.0, 6.0]]
        with caplog.at_level(logging.DEBUG, logger="src.core.math.determinant"):
            assert determinant(rows) == 0.0
        assert "Zero pivot column 0" in caplog.text

    def test_diagonal(self) -> None:
        rows = [[2.0, 0.0, 0.0], [0.0, 3.0, 0.0], [0.0, 0.0, 4.0]]
        assert determinant(rows) == 24.0

    def test_input_not_mutated(self) -> None:
        rows = [[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]
        snapshot = [list(row) for row in rows]
        determinant(rows)
        assert rows == snapshot

    def test_non_square_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Matrix must be square"):
            determinant([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
