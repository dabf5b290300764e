"""
Domain value types.

Contains immutable numeric entities: Vector3, ComplexNumber, Matrix.
"""

from src.core.domain.complex_number import ComplexNumber
from src.core.domain.matrix import Matrix, MatrixShapeError
from src.core.domain.vector import VECTOR_DIM, DimensionError, Number, Vector3

__all__ = [
    # Vector
    "VECTOR_DIM",
    "DimensionError",
    "Number",
    "Vector3",
    # Complex
    "ComplexNumber",
    # Matrix
    "Matrix",
    "MatrixShapeError",
]
