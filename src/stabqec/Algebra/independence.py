"""
Independence test for families of Pauli operators.

A family is independent when no nonempty subset multiplies to the identity
operator. This is Gaussian elimination on the binary symplectic
representation, carried out directly on Pauli symbols: each qubit column is
a two-dimensional space over GF(2), so up to two pivots (of distinct
non-identity types) span it, and the third type is their product.
"""

from typing import List, Optional, Sequence

from ..util.pauli import Pauli, identity_operator, vector_product
from .family import as_family


def _eliminate(operator: tuple, qubit: int, pivots: Sequence[tuple]) -> Optional[tuple]:
    """
    Multiply `operator` by the pivots so that it acts as the identity on `qubit`.

    Tries the first pivot, then the second, then both. Returns None if no
    combination clears the column.
    """
    candidate = vector_product(operator, pivots[0])
    if candidate[qubit] is Pauli.I:
        return candidate
    if len(pivots) == 1:
        return None
    candidate = vector_product(operator, pivots[1])
    if candidate[qubit] is Pauli.I:
        return candidate
    candidate = vector_product(vector_product(operator, pivots[0]), pivots[1])
    if candidate[qubit] is Pauli.I:
        return candidate
    return None


def is_independent(operators) -> bool:
    """
    Check whether a family of Pauli operators is independent, i.e. whether no
    operator of the family is a product of the others.

    The caller's operators are never modified; elimination runs on a copy.

    Examples:
        >>> stabilizers = [[1, 3, 3, 1, 0], [0, 1, 3, 3, 1], [1, 0, 1, 3, 3], [3, 1, 0, 1, 3]]
        >>> is_independent(stabilizers)
        True
        >>> is_independent(stabilizers + [[1, 2, 0, 2, 1]])  # S0 * S1
        False

    Args:
        operators: An OperatorFamily or a sequence of equal-length operators.

    Returns:
        bool: True if the family is independent.
    """
    family = as_family(operators)
    if len(family) == 0:
        return True

    num_qubits = family.num_qubits
    identity = identity_operator(num_qubits)
    work: List[tuple] = list(family)
    remaining = list(range(len(work)))

    for qubit in range(num_qubits):
        paulis = [Pauli.X, Pauli.Y, Pauli.Z]
        indices = []
        for alpha in remaining:
            if work[alpha][qubit] in paulis:
                paulis.remove(work[alpha][qubit])
                indices.append(alpha)
            if len(paulis) == 1:
                break

        remaining = [alpha for alpha in remaining if alpha not in indices]
        pivots = [work[alpha] for alpha in indices]
        for alpha in remaining:
            if work[alpha][qubit] is Pauli.I:
                continue
            reduced = _eliminate(work[alpha], qubit, pivots)
            if reduced is not None:
                work[alpha] = reduced

        if any(work[alpha] == identity for alpha in remaining):
            return False

    return True
