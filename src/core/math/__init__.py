"""
Core math modules

Чистые численные функции: скаляры, ряды, векторы, детерминанты.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    DEFAULT_DECIMAL_PLACES,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Comparisons
    is_almost_equal,
    is_close,
    is_valid_float,
    # Validation
    validate_non_negative_int,
)

# Scalar Arithmetic
from src.core.math.scalar import absolute, plus, times

# Series Summation
from src.core.math.series import (
    NESTED_SUM_FACTOR_DEFAULT,
    factorial,
    fold,
    iter_sum,
    iter_sum_2,
    nested_range_sum,
    sum_to_n,
)

# Vector Algebra
from src.core.math.vectors import (
    cross,
    dot,
    multiply,
    multiply_scalar,
    normalize,
    vec_length,
)

# Matrix Determinant
from src.core.math.determinant import det2, determinant, identity_determinant

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "DEFAULT_DECIMAL_PLACES",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Comparisons
    "is_almost_equal",
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_non_negative_int",
    # Scalar Arithmetic
    "absolute",
    "plus",
    "times",
    # Series Summation — Constants
    "NESTED_SUM_FACTOR_DEFAULT",
    # Series Summation — Functions
    "factorial",
    "fold",
    "iter_sum",
    "iter_sum_2",
    "nested_range_sum",
    "sum_to_n",
    # Vector Algebra
    "cross",
    "dot",
    "multiply",
    "multiply_scalar",
    "normalize",
    "vec_length",
    # Matrix Determinant
    "det2",
    "determinant",
    "identity_determinant",
]
