"""
Matrix Determinant — 2×2, Identity & General N×N

Модуль вычисляет детерминант квадратных матриц:
- det2: явная формула ad - bc
- determinant: 1×1 → элемент, 2×2 → det2, N×N → метод Гаусса
  с частичным выбором ведущего элемента (LU)
- identity_determinant: детерминант единичной матрицы N×N

ФОРМУЛЫ:
    det([[a, b], [c, d]]) = a·d - b·c
    det(A) = (-1)^swaps × Π u_ii,  где PA = LU

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. det(I_n) == 1.0 для любого n >= 1 (точно, без погрешности)
2. Перестановка двух строк меняет знак
3. Нулевой столбец ведущих элементов → 0.0 (вырожденная матрица)
"""

import logging
from typing import Sequence, Union

from src.core.domain.matrix import Matrix

logger = logging.getLogger(__name__)

MatrixLike = Union[Matrix, Sequence[Sequence[float]]]


def det2(a: float, b: float, c: float, d: float) -> float:
    """
    Детерминант матрицы [[a, b], [c, d]].

    Examples:
        >>> det2(1.0, 2.0, 3.0, 4.0)
        -2.0
    """
    return a * d - b * c


def determinant(matrix: MatrixLike) -> float:
    """
    Детерминант квадратной матрицы.

    Args:
        matrix: Matrix или вложенная последовательность строк

    Returns:
        det(matrix) как float

    Raises:
        pydantic.ValidationError: Если вход пустой, рваный или неквадратный
            (MatrixShapeError внутри, ValueError снаружи)

    Examples:
        >>> determinant([[1.0, 2.0], [3.0, 4.0]])
        -2.0
        >>> determinant(Matrix.identity(3))
        1.0
    """
    if not isinstance(matrix, Matrix):
        matrix = Matrix.from_rows(matrix)

    rows = matrix.rows
    n = matrix.size

    if n == 1:
        return rows[0][0]

    if n == 2:
        return det2(rows[0][0], rows[0][1], rows[1][0], rows[1][1])

    return _determinant_lu([list(row) for row in rows])


def _determinant_lu(a: list[list[float]]) -> float:
    """
    Метод Гаусса с частичным выбором ведущего элемента.

    Модифицирует a на месте (вызывающая сторона передаёт копию).
    """
    n = len(a)
    det = 1.0

    for col in range(n):
        # Ведущий элемент: максимальный по модулю в столбце
        pivot_row = max(range(col, n), key=lambda r: abs(a[r][col]))
        pivot = a[pivot_row][col]

        if pivot == 0.0:
            logger.debug("Zero pivot column %d in %dx%d matrix, determinant is 0", col, n, n)
            return 0.0

        if pivot_row != col:
            a[col], a[pivot_row] = a[pivot_row], a[col]
            det = -det

        det *= pivot

        for r in range(col + 1, n):
            factor = a[r][col] / pivot
            if factor == 0.0:
                continue
            for c in range(col, n):
                a[r][c] -= factor * a[col][c]

    return det


def identity_determinant(n: int) -> float:
    """
    Детерминант единичной матрицы N×N (всегда 1.0).

    Raises:
        ValueError: Если n < 1
    """
    return determinant(Matrix.identity(n))
