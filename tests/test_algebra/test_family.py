"""
Tests for stabqec.Algebra.family module.

Tests OperatorFamily, any_anticommute(), weighted_product() and syndrome().
"""
import numpy as np
import pytest

from stabqec.Algebra import OperatorFamily, any_anticommute, syndrome, weighted_product
from stabqec.errors import InvalidPowerError, LengthMismatchError, MalformedFamilyError
from stabqec.util import Pauli, vector_product


class TestOperatorFamily:
    """Tests for the OperatorFamily container."""

    def test_num_qubits_inferred(self, five_qubit_stabilizers):
        """The common length is taken from the operators."""
        family = OperatorFamily(five_qubit_stabilizers)
        assert len(family) == 4
        assert family.num_qubits == 5
        assert list(family[0]) == [1, 3, 3, 1, 0]

    def test_length_mismatch(self):
        """Members of different length are rejected at construction."""
        with pytest.raises(LengthMismatchError):
            OperatorFamily([[1, 0], [1, 0, 0]])
        with pytest.raises(LengthMismatchError):
            OperatorFamily([[1, 0]], num_qubits=3)

    def test_zero_qubits_rejected(self):
        """Zero-length operators are a malformed family."""
        with pytest.raises(MalformedFamilyError):
            OperatorFamily([[]])
        with pytest.raises(MalformedFamilyError):
            OperatorFamily([], num_qubits=0)

    def test_empty_family(self):
        """An empty family may or may not know its width."""
        assert OperatorFamily().num_qubits is None
        assert OperatorFamily([], num_qubits=4).num_qubits == 4

    def test_copies_caller_data(self):
        """The family does not alias the caller's lists."""
        ops = [[1, 0], [0, 3]]
        family = OperatorFamily(ops)
        ops[0][0] = 3
        assert family[0] == (Pauli.X, Pauli.I)

    def test_extend_returns_new_family(self, five_qubit_stabilizers):
        """extend() leaves the original family unchanged."""
        family = OperatorFamily(five_qubit_stabilizers)
        longer = family.extend([[3, 3, 3, 3, 3]])
        assert len(family) == 4
        assert len(longer) == 5
        with pytest.raises(LengthMismatchError):
            family.extend([[3, 3]])

    def test_slicing_and_equality(self, five_qubit_stabilizers):
        """Slices are families; equality is elementwise."""
        family = OperatorFamily(five_qubit_stabilizers)
        assert family[:2] == OperatorFamily(five_qubit_stabilizers[:2])
        assert family[:2] != family[1:3]

    def test_to_array(self, five_qubit_stabilizers):
        """to_array() gives an (M, N) uint8 array."""
        array = OperatorFamily(five_qubit_stabilizers).to_array()
        assert array.shape == (4, 5)
        assert array.dtype == np.uint8
        assert array.tolist() == five_qubit_stabilizers
        assert OperatorFamily([], num_qubits=3).to_array().shape == (0, 3)


class TestAnyAnticommute:
    """Tests for the any_anticommute() function."""

    def test_five_qubit_code_commutes(self, five_qubit_stabilizers):
        """The five-qubit stabilizers pairwise commute."""
        assert any_anticommute(five_qubit_stabilizers) == 0

    def test_trivial_families(self):
        """Empty and single-member families commute."""
        assert any_anticommute([]) == 0
        assert any_anticommute([[1, 2, 3]]) == 0

    def test_detects_anticommuting_pair(self):
        """A single anticommuting pair is enough."""
        assert any_anticommute([[1, 0], [0, 3], [3, 0]]) == 1

    def test_even_overlap_commutes(self):
        """XZ and ZX commute (two anticommuting positions)."""
        assert any_anticommute([[1, 3], [3, 1]]) == 0


class TestWeightedProduct:
    """Tests for the weighted_product() function."""

    def test_all_zero_powers_give_identity(self, five_qubit_stabilizers):
        """No selected operator -> identity operator."""
        assert weighted_product(five_qubit_stabilizers, [0, 0, 0, 0]) == (Pauli.I,) * 5

    def test_single_power(self, five_qubit_stabilizers):
        """Selecting one operator returns it."""
        assert list(weighted_product(five_qubit_stabilizers, [0, 0, 1, 0])) == [1, 0, 1, 3, 3]

    def test_product_of_selection(self, five_qubit_stabilizers):
        """Selecting several operators multiplies them."""
        s = five_qubit_stabilizers
        expected = vector_product(vector_product(s[0], s[1]), s[3])
        assert weighted_product(s, [1, 1, 0, 1]) == expected
        assert list(weighted_product(s, [1, 1, 0, 0])) == [1, 2, 0, 2, 1]

    def test_invalid_power(self, five_qubit_stabilizers):
        """Powers outside {0, 1} are rejected, never clamped."""
        with pytest.raises(InvalidPowerError):
            weighted_product(five_qubit_stabilizers, [0, 2, 0, 0])
        with pytest.raises(InvalidPowerError):
            weighted_product(five_qubit_stabilizers, [0, -1, 0, 0])

    def test_wrong_number_of_powers(self, five_qubit_stabilizers):
        """One power per operator is required."""
        with pytest.raises(InvalidPowerError):
            weighted_product(five_qubit_stabilizers, [1, 1])

    def test_empty_family(self):
        """An empty family gives the identity only when its width is known."""
        assert weighted_product(OperatorFamily([], num_qubits=2), []) == (Pauli.I, Pauli.I)
        with pytest.raises(MalformedFamilyError):
            weighted_product([], [])


class TestSyndrome:
    """Tests for the syndrome() function."""

    def test_syndrome_of_xx_error(self, five_qubit_stabilizers):
        """Error XXIII flips stabilizers 0 and 3."""
        assert syndrome(five_qubit_stabilizers, [1, 1, 0, 0, 0]) == [1, 0, 0, 1]

    def test_logical_has_trivial_syndrome(self, five_qubit_stabilizers, five_qubit_logical_z):
        """Logical Z commutes with every stabilizer."""
        assert syndrome(five_qubit_stabilizers, five_qubit_logical_z) == [0, 0, 0, 0]

    def test_length_mismatch(self, five_qubit_stabilizers):
        """The error must act on the same qubits."""
        with pytest.raises(LengthMismatchError):
            syndrome(five_qubit_stabilizers, [1, 1])
