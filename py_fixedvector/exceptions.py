"""py_fixedvector exception types.

Every error raised by this library is a programmer error: the call site broke a
contract of the vector type. None of them is retried or recovered inside the
library.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── VectorTypeError
│       ├── InvalidArityError
│       ├── ScalarTypeError
│       └── UnsupportedOperationError
└── ValueError
    └── DimensionMismatchError

Exception Types
---------------

- InvalidArityError: A vector class was constructed with a number of components
  different from its dimension. Contains:
  - expected: The dimension of the vector class
  - actual: The number of components supplied

- ScalarTypeError: A component or scalar multiplier is not a real number, or
  does not fit the scalar type of the vector class (e.g. a float in an integer
  vector). Contains:
  - value: The offending value
  - scalar: The scalar type of the vector class

- UnsupportedOperationError: An operation was requested on a vector whose
  dimension does not define it (the cross product outside three dimensions).
  Contains:
  - operation: Name of the operation
  - dim: Dimension of the vector it was called on

- DimensionMismatchError: A binary operation combined two vectors of different
  dimensions. Contains:
  - expected: Dimension of the left operand
  - actual: Dimension of the right operand
"""
from __future__ import annotations

from typing import Any

__all__ = (
    'VectorTypeError',
    'InvalidArityError',
    'ScalarTypeError',
    'UnsupportedOperationError',
    'DimensionMismatchError',
)


class VectorTypeError(TypeError):
    """Vector type error."""


class InvalidArityError(VectorTypeError):
    """Exception for constructing a vector with the wrong number of components."""

    def __init__(self, name: str, expected: int, actual: int):
        """
        Parameters:
        - name: Name of the vector class
        - expected: The dimension of the vector class
        - actual: The number of components supplied
        """
        self.expected: int = expected
        self.actual: int = actual
        super().__init__(f'{name} takes exactly {expected} components ({actual} given)')


class ScalarTypeError(VectorTypeError):
    """Exception for values that are not valid scalars of a vector class."""

    def __init__(self, value: Any, scalar: type):
        self.value = value
        self.scalar: type = scalar
        super().__init__(f'{value!r} is not a valid {scalar.__name__} scalar')


class UnsupportedOperationError(VectorTypeError):
    """Exception for operations not defined on vectors of the given dimension."""

    def __init__(self, operation: str, dim: int):
        self.operation: str = operation
        self.dim: int = dim
        super().__init__(f'{operation} is not defined for {dim}-dimensional vectors')


class DimensionMismatchError(ValueError):
    """Exception for combining two vectors of different dimensions."""

    def __init__(self, expected: int, actual: int):
        self.expected: int = expected
        self.actual: int = actual
        super().__init__(f'Expected a {expected}-dimensional vector, got {actual} dimensions')
