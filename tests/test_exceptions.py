import pytest

from py_fixedvector.exceptions import (VectorTypeError, InvalidArityError, ScalarTypeError,
                                       UnsupportedOperationError, DimensionMismatchError)


@pytest.mark.parametrize(
    "exc_type, base",
    [
        (VectorTypeError, TypeError),
        (InvalidArityError, VectorTypeError),
        (ScalarTypeError, VectorTypeError),
        (UnsupportedOperationError, VectorTypeError),
        (DimensionMismatchError, ValueError),
    ],
)
def test_hierarchy(exc_type, base):
    assert issubclass(exc_type, base)


def test_invalid_arity_error_message_and_attrs():
    err = InvalidArityError('Vector3d', 3, 2)
    assert err.expected == 3
    assert err.actual == 2
    assert str(err) == "Vector3d takes exactly 3 components (2 given)"


def test_scalar_type_error_message_and_attrs():
    err = ScalarTypeError('a', float)
    assert err.value == 'a'
    assert err.scalar is float
    assert str(err) == "'a' is not a valid float scalar"


def test_unsupported_operation_error_message_and_attrs():
    err = UnsupportedOperationError('cross product', 2)
    assert err.operation == 'cross product'
    assert err.dim == 2
    assert str(err) == "cross product is not defined for 2-dimensional vectors"


def test_dimension_mismatch_error_message_and_attrs():
    err = DimensionMismatchError(3, 2)
    assert (err.expected, err.actual) == (3, 2)
    assert str(err) == "Expected a 3-dimensional vector, got 2 dimensions"
