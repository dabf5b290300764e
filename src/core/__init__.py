"""
Core numeric value types and pure math functions.

The domain package holds immutable value types (Vector3, ComplexNumber,
Matrix); the math package holds stateless functions over them.
"""
