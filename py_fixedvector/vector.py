"""Fixed-dimension vector mathematics.

Vectors are immutable tuples of exactly `dim` real components. Each concrete vector
class fixes its dimension and its scalar type (`float` or `int`) and validates both
once, at construction; every operation returns a new vector.

Key Features:
    - Immutable tuple-based implementation, hashable and unpackable
    - Operator overloading: `+`, `-`, unary `-`, `*` as scaling or dot product, `/`
    - Euclidean length using math.hypot()
    - Cross product on the three-dimensional family only
    - `[ c0, c1, ... ]` text rendering with configurable precision

Typical Usage:
    ```python
    from py_fixedvector import Vector3d, vector_type

    position = Vector3d(100.0, 50.0, 0.0)
    velocity = Vector3d(800.0, 0.0, 0.0)
    new_position = position + velocity * time_step

    normal = Vector3d(1, 0, 0).cross(Vector3d(0, 1, 0))  # Vector3d(0.0, 0.0, 1.0)
    print(normal)  # [ 0.000000, 0.000000, 1.000000 ]

    Vector4d = vector_type(4)
    Vector4d(1, 2, 3, 4) * Vector4d(1, 1, 1, 1)  # 10.0
    ```
"""
from __future__ import annotations

import math
from numbers import Integral, Real
from operator import itemgetter
from typing import ClassVar, Dict, Iterable, Sequence, TextIO, Tuple, Type, Union

from typing_extensions import Self

from py_fixedvector.exceptions import (DimensionMismatchError, InvalidArityError,
                                       ScalarTypeError, UnsupportedOperationError)
from py_fixedvector.settings import VectorSettings

__all__ = (
    'FixedVector',
    'Vector3',
    'Vector2d',
    'Vector3d',
    'vector_type',
    'dot',
    'cross',
)

Number = Union[int, float]

# scalar type of a vector class -> numbers ABC its components must satisfy
_SCALAR_KINDS: Dict[type, type] = {
    float: Real,
    int: Integral,
}


class FixedVector(tuple):
    """Immutable vector of exactly `dim` scalar components.

    `FixedVector` is the abstract base: concrete classes set the `dim` and `scalar`
    class attributes. Use the `Vector2d` and `Vector3d` aliases or create other classes
    with `vector_type()`.

    Attributes:
        dim: Number of components of every instance of the class.
        scalar: Type every component is stored as (`float` or `int`).

    Raises:
        InvalidArityError: If the number of components differs from `dim`.
        ScalarTypeError: If a component is not a real number of the class scalar kind.

    Examples:
        ```python
        a = Vector3d(1, 2, 3)
        b = Vector3d(4, 5, 6)
        a + b        # Vector3d(5.0, 7.0, 9.0)
        a * 2        # Vector3d(2.0, 4.0, 6.0)
        a * b        # 32.0, dot product
        str(a)       # '[ 1.000000, 2.000000, 3.000000 ]'
        ```

    Note:
        Equality is tuple equality, so `Vector3d(1, 2, 3) == (1.0, 2.0, 3.0)`.
        Arithmetic with plain tuples is rejected with TypeError.
    """

    __slots__ = ()

    dim: ClassVar[int]
    scalar: ClassVar[type]

    def __new__(cls, *components: Number) -> Self:
        return cls._make(components)

    def __reduce__(self):
        # rebuilds classes created by vector_type(), which are not module attributes
        return _rebuild, (self.dim, self.scalar, tuple(self))

    @classmethod
    def from_iterable(cls, iterable: Iterable[Number]) -> Self:
        """Build a vector from any iterable of exactly `dim` scalars."""
        return cls._make(tuple(iterable))

    @classmethod
    def zero(cls) -> Self:
        """Vector with every component equal to zero."""
        return cls._make([0] * cls._dimension())

    @classmethod
    def _dimension(cls) -> int:
        dim = getattr(cls, 'dim', None)
        if dim is None or getattr(cls, 'scalar', None) is None:
            raise TypeError(f"Can't instantiate abstract vector class {cls.__name__}; "
                            f"use vector_type() to create a concrete one")
        return dim

    @classmethod
    def _make(cls, values: Sequence[Number]) -> Self:
        dim = cls._dimension()
        if len(values) != dim:
            raise InvalidArityError(cls.__name__, dim, len(values))
        return tuple.__new__(cls, [cls._coerce(v) for v in values])

    @classmethod
    def _coerce(cls, value: Number) -> Number:
        if isinstance(value, bool) or not isinstance(value, _SCALAR_KINDS[cls.scalar]):
            raise ScalarTypeError(value, cls.scalar)
        return cls.scalar(value)

    def _check_dim(self, other: FixedVector) -> None:
        if len(other) != len(self):
            raise DimensionMismatchError(len(self), len(other))

    def _vector_operand(self, other: object, op: str) -> FixedVector:
        """Accept only vectors of this dimension as the other operand."""
        if not isinstance(other, FixedVector):
            raise TypeError(f"unsupported operand type(s) for {op}: "
                            f"'{type(self).__name__}' and '{type(other).__name__}'")
        self._check_dim(other)
        return other

    def add(self, b: FixedVector) -> Self:
        """Add two vectors component-wise.

        Args:
            b: Vector of the same dimension.

        Returns:
            New vector of this vector's class with components `self[i] + b[i]`.

        Raises:
            TypeError: If `b` is not a vector.
            DimensionMismatchError: If `b` has another dimension.
        """
        self._vector_operand(b, "add()")
        return self._make([x + y for x, y in zip(self, b)])

    def subtract(self, b: FixedVector) -> Self:
        """Subtract `b` component-wise; the result points from `b` to `self`."""
        self._vector_operand(b, "subtract()")
        return self._make([x - y for x, y in zip(self, b)])

    def negate(self) -> Self:
        """Vector with all components negated."""
        return self._make([-x for x in self])

    def scale(self, s: Number) -> Self:
        """Multiply vector by a scalar constant.

        Args:
            s: Real scalar multiplier.

        Returns:
            New vector with components `s * self[i]`.

        Raises:
            ScalarTypeError: If `s` is not a real number, or if the products do not fit
                the scalar type (an integer vector scaled by a non-integral factor).
        """
        if isinstance(s, bool) or not isinstance(s, Real):
            raise ScalarTypeError(s, float)
        return self._make([s * x for x in self])

    def dot(self, b: FixedVector) -> Number:
        """Calculate the dot product of two vectors.

        Products are summed left to right starting from zero.

        Args:
            b: Vector of the same dimension.

        Returns:
            Scalar `self[0] * b[0] + self[1] * b[1] + ...`.

        Raises:
            TypeError: If `b` is not a vector.
            DimensionMismatchError: If `b` has another dimension.
        """
        self._vector_operand(b, "dot()")
        ret = 0
        for x, y in zip(self, b):
            ret += x * y
        return ret

    def length(self) -> float:
        """Euclidean norm, never negative and zero only for the zero vector.

        Note:
            Uses math.hypot() for numerical stability with extreme values.
            Equivalent to sqrt(self * self).
        """
        return math.hypot(*self)

    def normalize(self) -> Self:
        """Unit vector in the same direction.

        Vectors with length below 1e-10 are returned unchanged to avoid division by zero.
        """
        m = self.length()
        if math.fabs(m) < 1e-10:
            return self
        return self.scale(1.0 / m)

    def isclose(self, other: FixedVector,
                rel_tol: Union[float, None] = None,
                abs_tol: Union[float, None] = None) -> bool:
        """Component-wise math.isclose().

        Args:
            other: Vector of the same dimension.
            rel_tol: Relative tolerance, defaults to `VectorSettings.rel_tol`.
            abs_tol: Absolute tolerance, defaults to `VectorSettings.abs_tol`.
        """
        self._vector_operand(other, "isclose()")
        if rel_tol is None:
            rel_tol = VectorSettings.rel_tol
        if abs_tol is None:
            abs_tol = VectorSettings.abs_tol
        return all(math.isclose(x, y, rel_tol=rel_tol, abs_tol=abs_tol) for x, y in zip(self, other))

    def cross(self, other: FixedVector) -> Self:
        """Cross product, defined only for three-dimensional vectors.

        Raises:
            UnsupportedOperationError: Always, for vectors that are not three-dimensional.
        """
        raise UnsupportedOperationError('cross product', len(self))

    def to_string(self) -> str:
        """Render as `[ c0, c1, ..., cN ]`.

        Float components use fixed-point notation with `VectorSettings.precision`
        decimals (6 by default, like C `%f`); integer components render as integers.
        Display only: the text is not meant to be parsed back.
        """
        precision = VectorSettings.precision
        return '[ ' + ', '.join(
            str(x) if isinstance(x, int) else f'{x:.{precision}f}' for x in self
        ) + ' ]'

    def write(self, stream: TextIO) -> TextIO:
        """Write `str(self)` to a text stream and return the stream."""
        stream.write(self.to_string())
        return stream

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self))})"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.to_string()
        return '[ ' + ', '.join(format(x, format_spec) for x in self) + ' ]'

    def __add__(self, other: FixedVector) -> Self:  # type: ignore[override]
        return self.add(self._vector_operand(other, '+'))

    def __radd__(self, other: FixedVector) -> Self:
        # reached for `tuple + vector`, which would otherwise concatenate
        return self._vector_operand(other, '+').add(self)

    def __sub__(self, other: FixedVector) -> Self:
        return self.subtract(self._vector_operand(other, '-'))

    def __rsub__(self, other: FixedVector) -> Self:
        return self._vector_operand(other, '-').subtract(self)

    def __mul__(self, other: Union[Number, FixedVector]) -> Union[Number, Self]:  # type: ignore[override]
        """Scale by a real scalar, or take the dot product with another vector.

        Raises:
            TypeError: If other is neither a real scalar nor a vector.
        """
        if isinstance(other, FixedVector):
            return self.dot(other)
        if isinstance(other, Real):
            return self.scale(other)
        raise TypeError(other)

    __rmul__ = __mul__

    def __truediv__(self, s: Number) -> Self:
        if isinstance(s, bool) or not isinstance(s, Real):
            raise TypeError(s)
        return self._make([x / s for x in self])

    def __neg__(self) -> Self:
        return self.negate()

    def __pos__(self) -> Self:
        return self


class Vector3(FixedVector):
    """Base of the three-dimensional vectors, the only family with a cross product.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    __slots__ = ()

    dim: ClassVar[int] = 3

    x = property(itemgetter(0), doc='First component')
    y = property(itemgetter(1), doc='Second component')
    z = property(itemgetter(2), doc='Third component')

    def cross(self, other: FixedVector) -> Self:
        """Calculate the cross product `self x other`.

        The result is perpendicular to both operands, its length is
        `|self| |other| sin(angle)`, and `a.cross(b) == -(b.cross(a))`.

        Args:
            other: Any three-dimensional vector, whatever its scalar type.

        Returns:
            New vector of this vector's class.

        Raises:
            TypeError: If other is not a vector.
            DimensionMismatchError: If other is not three-dimensional.

        Examples:
            ```python
            Vector3d(1, 0, 0).cross(Vector3d(0, 1, 0))  # Vector3d(0.0, 0.0, 1.0)
            ```
        """
        self._vector_operand(other, "cross()")
        ax, ay, az = self
        bx, by, bz = other
        return self._make((
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        ))


class Vector2d(FixedVector):
    """Two-dimensional double precision vector."""

    __slots__ = ()

    dim: ClassVar[int] = 2
    scalar: ClassVar[type] = float


class Vector3d(Vector3):
    """Three-dimensional double precision vector, the common case for 3-D geometry."""

    __slots__ = ()

    scalar: ClassVar[type] = float


_VECTOR_TYPES: Dict[Tuple[int, type], Type[FixedVector]] = {
    (2, float): Vector2d,
    (3, float): Vector3d,
}


def vector_type(dim: int, scalar: type = float) -> Type[FixedVector]:
    """Return the vector class with the given dimension and scalar type.

    Classes are cached, so repeated calls return the same class and its instances
    combine with each other. Three-dimensional classes derive from `Vector3` and
    support the cross product.

    Args:
        dim: Number of components, a positive integer.
        scalar: `float` or `int`.

    Raises:
        ValueError: If dim is not a positive integer.
        TypeError: If scalar is not a supported scalar type.

    Examples:
        >>> Vector4d = vector_type(4)
        >>> Vector4d(1, 2, 3, 4) * Vector4d(1, 1, 1, 1)
        10.0
        >>> vector_type(3) is Vector3d
        True
    """
    if isinstance(dim, bool) or not isinstance(dim, int) or dim < 1:
        raise ValueError(f"Vector dimension must be a positive integer, got {dim!r}")
    if scalar not in _SCALAR_KINDS:
        raise TypeError(f"Unsupported scalar type {scalar!r}; expected float or int")

    key = (dim, scalar)
    if (cls := _VECTOR_TYPES.get(key)) is None:
        base = Vector3 if dim == 3 else FixedVector
        name = f"Vector{dim}{'d' if scalar is float else 'i'}"
        cls = type(name, (base,), {'__slots__': (), '__module__': __name__,
                                   'dim': dim, 'scalar': scalar})
        _VECTOR_TYPES[key] = cls
    return cls


def _rebuild(dim: int, scalar: type, components: Tuple[Number, ...]) -> FixedVector:
    return vector_type(dim, scalar)._make(components)


def dot(a: FixedVector, b: FixedVector) -> Number:
    """Dot product of two vectors of the same dimension."""
    return a.dot(b)


def cross(a: FixedVector, b: FixedVector) -> FixedVector:
    """Cross product of two three-dimensional vectors.

    Raises:
        UnsupportedOperationError: If `a` is not three-dimensional.
    """
    return a.cross(b)
