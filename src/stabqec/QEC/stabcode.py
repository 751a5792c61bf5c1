from typing import Dict, List, Optional, Sequence, Union

from ..Algebra.family import OperatorFamily
from ..errors import LengthMismatchError
from ..util.convert import format_operator, parse_operator
from ..util.pauli import PauliOperator, as_operator
from ..util.printer import format_stabilizer_table


OperatorLike = Union[str, Sequence[int]]


def _to_operator(op: OperatorLike) -> PauliOperator:
    if isinstance(op, str):
        return parse_operator(op)
    return as_operator(op)


class StabCode:
    """
    A quantum error-correcting code given by its stabilizer generators and a
    pair of logical operators (X, Z) per logical qubit.

    Operators may be given as Pauli strings ("XZZXI") or as symbol sequences
    ([1, 3, 3, 1, 0]).
    """

    def __init__(self, n: int, k: int = 0, d: Optional[int] = None) -> None:
        self._n = n
        self._k = k
        self._d = d
        self._stabs: List[PauliOperator] = []
        self._logicalX: Dict[int, PauliOperator] = {}
        self._logicalZ: Dict[int, PauliOperator] = {}

    @property
    def n(self) -> int:
        """
        Number of physical qubits.
        """
        return self._n

    @property
    def k(self) -> int:
        """
        Number of logical qubits.
        """
        return self._k

    @property
    def d(self) -> Optional[int]:
        """
        Expected code distance, if known.
        """
        return self._d

    def _check(self, op: OperatorLike) -> PauliOperator:
        operator = _to_operator(op)
        if len(operator) != self._n:
            raise LengthMismatchError(self._n, len(operator))
        return operator

    def add_stab(self, stab: OperatorLike) -> None:
        """
        Add a stabilizer generator to the code.

        Args:
            stab: The stabilizer generator, acting on n qubits.
        """
        self._stabs.append(self._check(stab))

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._k:
            raise ValueError(f"logical qubit index {index} out of range (k={self._k}).")

    def set_logical_X(self, index: int, logicalX: OperatorLike) -> None:
        """
        Set the logical X operator for a given logical qubit.
        """
        self._check_index(index)
        self._logicalX[index] = self._check(logicalX)

    def set_logical_Z(self, index: int, logicalZ: OperatorLike) -> None:
        """
        Set the logical Z operator for a given logical qubit.
        """
        self._check_index(index)
        self._logicalZ[index] = self._check(logicalZ)

    @property
    def stabilizers(self) -> OperatorFamily:
        return OperatorFamily(self._stabs, self._n)

    @property
    def logicals(self) -> OperatorFamily:
        """
        Logical operators in the order X0, Z0, X1, Z1, ... Unset operators are skipped.
        """
        ops = []
        for index in range(self._k):
            if index in self._logicalX:
                ops.append(self._logicalX[index])
            if index in self._logicalZ:
                ops.append(self._logicalZ[index])
        return OperatorFamily(ops, self._n)

    def logical_X(self, index: int) -> Optional[PauliOperator]:
        return self._logicalX.get(index)

    def logical_Z(self, index: int) -> Optional[PauliOperator]:
        return self._logicalZ.get(index)

    def stabilizer_strings(self) -> List[str]:
        return [format_operator(stab, uppercase=True) for stab in self._stabs]

    def show_stabilizers(self) -> None:
        """
        Print the stabilizer generators and logical operators of the code.
        """
        labels = [f"S{idx}" for idx in range(len(self._stabs))]
        ops = list(self._stabs)
        for index in range(self._k):
            for name, table in (("X", self._logicalX), ("Z", self._logicalZ)):
                if index in table:
                    labels.append(f"L{name}{index}")
                    ops.append(table[index])
        print(f"[[{self._n},{self._k},{self._d if self._d is not None else '?'}]] code")
        print(format_stabilizer_table(ops, labels=labels))
