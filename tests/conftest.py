"""
Shared pytest fixtures for stabqec tests.
"""
import pytest


# ============================================================================
# Pauli Operator Fixtures (I=0, X=1, Y=2, Z=3)
# ============================================================================

@pytest.fixture
def five_qubit_stabilizers():
    """Stabilizers for the [[5,1,3]] five-qubit code: XZZXI, IXZZX, XIXZZ, ZXIXZ."""
    return [
        [1, 3, 3, 1, 0],
        [0, 1, 3, 3, 1],
        [1, 0, 1, 3, 3],
        [3, 1, 0, 1, 3],
    ]


@pytest.fixture
def five_qubit_logical_z():
    """Logical Z operator for the five-qubit code."""
    return [3, 3, 3, 3, 3]


@pytest.fixture
def steane_stabilizers():
    """Stabilizers for the [[7,1,3]] Steane code."""
    return [
        "IIIXXXX",
        "IXXIIXX",
        "XIXIXIX",
        "IIIZZZZ",
        "IZZIIZZ",
        "ZIZIZIZ",
    ]


@pytest.fixture
def shor_stabilizers():
    """Stabilizers for the [[9,1,3]] Shor code."""
    return [
        "ZZIIIIIII",
        "IZZIIIIII",
        "IIIZZIIII",
        "IIIIZZIII",
        "IIIIIIZZI",
        "IIIIIIIZZ",
        "XXXXXXIII",
        "XXXIIIXXX",
    ]


@pytest.fixture
def all_symbols():
    """The four Pauli symbols as integers."""
    return [0, 1, 2, 3]
