"""
Families of Pauli operators acting on the same number of qubits, and the
relations computed over a whole family.
"""

from collections.abc import Sequence
from typing import Iterable, List, Optional

import numpy as np

from ..errors import InvalidPowerError, LengthMismatchError, MalformedFamilyError
from ..util.pauli import (
    PauliOperator,
    as_operator,
    identity_operator,
    vector_commutation,
    vector_product,
)


class OperatorFamily(Sequence):
    """
    An ordered, immutable collection of Pauli operators of a common length.

    The common length (number of qubits) is checked once, here, so the
    functions working on families can rely on it.

    Args:
        operators: Iterable of operators (sequences of integer-like symbols).
        num_qubits: Expected operator length. Inferred from the first operator
            when omitted; an empty family without it has unknown width.

    Raises:
        LengthMismatchError: If an operator does not have the common length.
        MalformedFamilyError: If the common length is zero.
    """

    def __init__(self, operators: Iterable = (), num_qubits: Optional[int] = None) -> None:
        ops = [as_operator(op) for op in operators]
        if num_qubits is None and ops:
            num_qubits = len(ops[0])
        if num_qubits is not None and num_qubits < 1:
            raise MalformedFamilyError(f"Pauli operators act on at least one qubit, got {num_qubits}.")
        for op in ops:
            if len(op) != num_qubits:
                raise LengthMismatchError(num_qubits, len(op))
        self._operators: tuple = tuple(ops)
        self._num_qubits = num_qubits

    @property
    def num_qubits(self) -> Optional[int]:
        """
        Length shared by all operators, or None for an empty family of unknown width.
        """
        return self._num_qubits

    def __len__(self) -> int:
        return len(self._operators)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return OperatorFamily(self._operators[index], self._num_qubits)
        return self._operators[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, OperatorFamily):
            return self._operators == other._operators
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._operators)

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(str(int(s)) for s in op) + "]" for op in self._operators)
        return f"OperatorFamily([{rows}], num_qubits={self._num_qubits})"

    def extend(self, operators: Iterable) -> "OperatorFamily":
        """
        Return a new family with `operators` appended.
        """
        return OperatorFamily(list(self._operators) + list(operators), self._num_qubits)

    def to_array(self) -> np.ndarray:
        """
        Return the family as an (M, N) uint8 array of symbols.
        """
        if self._num_qubits is None:
            return np.zeros((0, 0), dtype=np.uint8)
        return np.array(self._operators, dtype=np.uint8).reshape(len(self), self._num_qubits)


def as_family(operators) -> OperatorFamily:
    if isinstance(operators, OperatorFamily):
        return operators
    return OperatorFamily(operators)


def any_anticommute(operators) -> int:
    """
    Check whether a family contains two operators that anticommute.

    Returns:
        int: 1 if some pair anticommutes, 0 if all pairs commute (or the
        family has fewer than two members).
    """
    family = as_family(operators)
    for n in range(len(family)):
        for m in range(n):
            if vector_commutation(family[n], family[m]) == 1:
                return 1
    return 0


def weighted_product(operators, powers: Sequence) -> PauliOperator:
    """
    Product of the family members selected by binary powers.

    Examples:
        >>> [int(s) for s in weighted_product([[1, 0], [3, 3]], [1, 1])]
        [2, 3]

    Raises:
        InvalidPowerError: If a power is not 0 or 1, or if there is not one
            power per operator.
        MalformedFamilyError: If the family is empty and its width unknown.
    """
    family = as_family(operators)
    if len(powers) != len(family):
        raise InvalidPowerError(f"Expected {len(family)} powers, got {len(powers)}.")
    for p in powers:
        if p not in (0, 1):
            raise InvalidPowerError(f"Powers of Paulis must be 0 or 1, got {p!r}.")
    if family.num_qubits is None:
        raise MalformedFamilyError("Cannot form a product over an empty family of unknown width.")

    output = identity_operator(family.num_qubits)
    for op, p in zip(family, powers):
        if p == 1:
            output = vector_product(output, op)
    return output


def syndrome(operators, error: Sequence) -> List[int]:
    """
    Commutation of `error` with every operator of the family.

    Examples:
        >>> stabilizers = [[1, 3, 3, 1, 0], [0, 1, 3, 3, 1], [1, 0, 1, 3, 3], [3, 1, 0, 1, 3]]
        >>> syndrome(stabilizers, [1, 1, 0, 0, 0])
        [1, 0, 0, 1]
    """
    return [vector_commutation(op, error) for op in as_family(operators)]
