"""
Phase-free Pauli algebra on symbols and on operators (one symbol per qubit).

Symbols are encoded as I=0, X=1, Y=2, Z=3. An operator is a tuple of symbols.
Functions accept any sequence of integer-like symbols and return tuples.
"""

from enum import IntEnum
from typing import Sequence, Tuple

import numpy as np

from ..errors import LengthMismatchError, MalformedFamilyError, UnrecognizedSymbolError


class Pauli(IntEnum):
    I = 0
    X = 1
    Y = 2
    Z = 3

    @classmethod
    def coerce(cls, value) -> "Pauli":
        """
        Convert an integer-like value into a Pauli symbol.

        Raises:
            UnrecognizedSymbolError: If the value is not one of 0, 1, 2, 3.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise UnrecognizedSymbolError(value) from None


PauliOperator = Tuple[Pauli, ...]


def commutation(a, b) -> int:
    """
    Commutation relation of two Pauli symbols: 0 if they commute, 1 if not.

    Examples:
        >>> commutation(Pauli.X, Pauli.X)
        0
        >>> commutation(Pauli.X, Pauli.Z)
        1
    """
    a = Pauli.coerce(a)
    b = Pauli.coerce(b)
    match (a, b):
        case (Pauli.I, _) | (_, Pauli.I):
            return 0
        case _ if a is b:
            return 0
        case _:
            return 1


def product(a, b) -> Pauli:
    """
    Product of two Pauli symbols, ignoring the phase.

    Examples:
        >>> product(Pauli.X, Pauli.Y)
        <Pauli.Z: 3>
    """
    a = Pauli.coerce(a)
    b = Pauli.coerce(b)
    match (a, b):
        case (Pauli.I, _):
            return b
        case (_, Pauli.I):
            return a
        case _ if a is b:
            return Pauli.I
        case _:
            # X, Y, Z are 1, 2, 3: the odd one out of two distinct ones is 6 - a - b
            return Pauli(6 - a - b)


COMMUTATION_TABLE = np.array(
    [[commutation(a, b) for b in Pauli] for a in Pauli], dtype=np.uint8
)
PRODUCT_TABLE = np.array(
    [[product(a, b) for b in Pauli] for a in Pauli], dtype=np.uint8
)


def as_operator(operator: Sequence) -> PauliOperator:
    """
    Coerce a sequence of integer-like symbols into a Pauli operator.
    """
    return tuple(Pauli.coerce(s) for s in operator)


def identity_operator(num_qubits: int) -> PauliOperator:
    """
    The identity operator on `num_qubits` qubits.
    """
    if num_qubits < 1:
        raise MalformedFamilyError(f"Pauli operators act on at least one qubit, got {num_qubits}.")
    return (Pauli.I,) * num_qubits


def _check_lengths(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))


def vector_commutation(a: Sequence, b: Sequence) -> int:
    """
    Commutation relation of two Pauli operators.

    Two operators commute iff the number of qubits on which their symbols
    anticommute is even.

    Examples:
        >>> vector_commutation([1, 3, 3, 1, 0], [1, 1, 1, 1, 1])
        0

    Raises:
        LengthMismatchError: If the operators have different lengths.
    """
    _check_lengths(a, b)
    return sum(commutation(x, y) for x, y in zip(a, b)) % 2


def vector_product(a: Sequence, b: Sequence) -> PauliOperator:
    """
    Qubit-wise product of two Pauli operators, ignoring the global phase.

    Examples:
        >>> [int(s) for s in vector_product([1, 0, 3, 2], [1, 1, 1, 3])]
        [0, 1, 2, 1]

    Raises:
        LengthMismatchError: If the operators have different lengths.
    """
    _check_lengths(a, b)
    return tuple(product(x, y) for x, y in zip(a, b))


def weight(operator: Sequence) -> int:
    """
    Number of qubits on which the operator acts non-trivially.
    """
    return sum(1 for s in operator if Pauli.coerce(s) is not Pauli.I)


def is_identity(operator: Sequence) -> bool:
    return weight(operator) == 0
