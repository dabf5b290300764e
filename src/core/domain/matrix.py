"""
Matrix — Квадратная матрица float

Immutable Pydantic модель, строки хранятся row-major как tuple[tuple[float, ...], ...].
Валидация отвергает пустые, рваные и неквадратные матрицы: детерминант
определён только для квадратных.
"""

from typing import Sequence

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixShapeError(ValueError):
    """Матрица пустая, рваная или неквадратная."""

    pass


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Квадратная матрица N×N (N >= 1).

    Immutable модель (frozen=True). Элементы приводятся к float.
    """

    rows: tuple[tuple[float, ...], ...] = Field(..., description="Строки матрицы (row-major)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("rows")
    @classmethod
    def validate_square(
        cls, v: tuple[tuple[float, ...], ...]
    ) -> tuple[tuple[float, ...], ...]:
        """
        Проверка квадратности.

        MatrixShapeError поднимается из валидатора и оборачивается
        pydantic в ValidationError (тоже ValueError).
        """
        n = len(v)
        if n == 0:
            raise MatrixShapeError("Matrix must have at least one row")

        for index, row in enumerate(v):
            if len(row) != n:
                raise MatrixShapeError(
                    f"Matrix must be square: row {index} has {len(row)} "
                    f"columns, expected {n}"
                )
        return v

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Конструирование из вложенной последовательности строк."""
        return cls(rows=rows)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """
        Единичная матрица N×N.

        Args:
            n: Размер (>= 1)

        Raises:
            ValueError: Если n < 1 или не int
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(f"n must be an integer, got {n!r}")

        if n < 1:
            raise ValueError(f"n must be positive, got {n}")

        return cls(
            rows=tuple(
                tuple(1.0 if i == j else 0.0 for j in range(n)) for i in range(n)
            )
        )

    @property
    def size(self) -> int:
        """Размер N."""
        return len(self.rows)

    def is_identity(self) -> bool:
        """Точная проверка на единичную матрицу."""
        return all(
            value == (1.0 if i == j else 0.0)
            for i, row in enumerate(self.rows)
            for j, value in enumerate(row)
        )
