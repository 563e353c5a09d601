import pytest

from py_fixedvector import (Vector2d, Vector3d, vector_type, cross,
                            UnsupportedOperationError, DimensionMismatchError)

Vector3i = vector_type(3, int)


class TestCrossProduct:

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Vector3d(1, 0, 0), Vector3d(0, 1, 0), Vector3d(0, 0, 1)),
            (Vector3d(0, 1, 0), Vector3d(0, 0, 1), Vector3d(1, 0, 0)),
            (Vector3d(0, 0, 1), Vector3d(1, 0, 0), Vector3d(0, 1, 0)),
            (Vector3d(1, 2, 3), Vector3d(4, 5, 6), Vector3d(-3, 6, -3)),
            (Vector3d(2, 2, 2), Vector3d(1, 1, 1), Vector3d(0, 0, 0)),
        ],
    )
    def test_cross(self, a, b, expected):
        assert a.cross(b) == expected
        assert cross(a, b) == expected

    def test_anticommutative(self):
        a = Vector3d(1.5, -2, 7)
        b = Vector3d(-4, 0.25, 3)
        assert a.cross(b) == -(b.cross(a))

    def test_perpendicular(self):
        a = Vector3d(1.5, -2, 7)
        b = Vector3d(-4, 0.25, 3)
        c = a.cross(b)
        assert c * a == pytest.approx(0, abs=1e-12)
        assert c * b == pytest.approx(0, abs=1e-12)

    def test_magnitude_of_orthogonal_operands(self):
        assert Vector3d(2, 0, 0).cross(Vector3d(0, 3, 0)).length() == 6.0

    def test_int_vectors(self):
        result = Vector3i(1, 2, 3).cross(Vector3i(4, 5, 6))
        assert result == Vector3i(-3, 6, -3)
        assert type(result) is Vector3i

    def test_mixed_scalar_operand(self):
        result = Vector3d(1, 0, 0).cross(Vector3i(0, 1, 0))
        assert type(result) is Vector3d
        assert result == Vector3d(0, 0, 1)

    def test_plain_sequence_operand(self):
        with pytest.raises(TypeError):
            Vector3d(1, 0, 0).cross((0, 1, 0))
        with pytest.raises(TypeError):
            cross(Vector3d(1, 0, 0), [0, 1, 0])

    def test_non_3d_operand(self):
        with pytest.raises(DimensionMismatchError):
            Vector3d(1, 0, 0).cross(Vector2d(0, 1))

    @pytest.mark.parametrize("dim", [1, 2, 4, 7])
    def test_unsupported_dimension(self, dim):
        cls = vector_type(dim)
        a = cls.from_iterable(range(dim))
        with pytest.raises(UnsupportedOperationError) as excinfo:
            a.cross(a)
        assert excinfo.value.dim == dim
        with pytest.raises(UnsupportedOperationError):
            cross(a, a)


class TestComponents:

    def test_xyz(self):
        v = Vector3d(1, 2, 3)
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
        x, y, z = v
        assert (x, y, z) == (1.0, 2.0, 3.0)

    def test_xyz_only_on_3d(self):
        with pytest.raises(AttributeError):
            _ = Vector2d(1, 2).x  # type: ignore[attr-defined]
