"""
Tests for stabqec.QEC.surface module.
"""
import pytest

from stabqec.Algebra import any_anticommute, is_independent
from stabqec.QEC import Surface, code_distance, distance_logicals, surface_code, verify_code
from stabqec.util import weight


class TestSurfaceConstruction:
    """Tests for the layout of the rotated surface code."""

    @pytest.mark.parametrize("size", [1, 2, 3, 4])
    def test_parameters(self, size):
        """(size+1)^2 qubits, (size+1)^2 - 1 generators, one logical qubit."""
        code = surface_code(size)
        side = size + 1
        assert isinstance(code, Surface)
        assert code.size == size
        assert code.n == side * side
        assert code.k == 1
        assert code.d == side
        assert len(code.stabilizers) == side * side - 1

    def test_plaquette_weights(self):
        """Bulk plaquettes have weight 4, boundary plaquettes weight 2."""
        code = surface_code(3)
        weights = sorted(weight(s) for s in code.stabilizers)
        assert weights == [2] * 6 + [4] * 9

    def test_plaquettes_are_single_type(self):
        """Every plaquette is either all X or all Z."""
        for stab in surface_code(3).stabilizer_strings():
            assert set(stab) - {"I"} in ({"X"}, {"Z"})

    def test_logical_operators(self):
        """Logical X is X on the first column, logical Z is Z on the first row."""
        code = surface_code(2)
        assert [int(s) for s in code.logical_X(0)] == [1, 0, 0, 1, 0, 0, 1, 0, 0]
        assert [int(s) for s in code.logical_Z(0)] == [3, 3, 3, 0, 0, 0, 0, 0, 0]

    def test_size_must_be_positive(self):
        """A surface code has at least one plaquette per side."""
        with pytest.raises(ValueError):
            surface_code(0)


class TestSurfaceVerification:
    """The surface code is a valid stabilizer code."""

    @pytest.mark.parametrize("size", [1, 2, 3, 4])
    def test_verify(self, size):
        """Generators commute, are independent, and logicals are consistent."""
        code = surface_code(size)
        assert any_anticommute(code.stabilizers) == 0
        assert is_independent(code.stabilizers) is True
        assert verify_code(code) is True

    def test_size_three_minimum_weight(self):
        """The first logical operator of the size-3 code has minimum weight 4."""
        surface = surface_code(3)
        assert verify_code(surface)
        assert distance_logicals(surface)[0] == 4

    @pytest.mark.parametrize("size", [1, 2, 3])
    def test_distance(self, size):
        """The distance equals the side length."""
        code = surface_code(size)
        assert distance_logicals(code) == [size + 1, size + 1]
        distance, op = code_distance(code)
        assert distance == size + 1
        assert weight(op) == size + 1
