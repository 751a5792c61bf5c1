"""
Useful analyzers for quantum error correction codes.
Specifically, we provide code verification, logical operator checks and a
brute-force code distance computation.
"""

from itertools import product as iter_product
from typing import List, Literal, Optional, Sequence, Tuple

import numpy as np

from ..Algebra.family import OperatorFamily, any_anticommute, as_family, weighted_product
from ..Algebra.independence import is_independent
from ..util.pauli import PRODUCT_TABLE, PauliOperator, as_operator, is_identity, vector_commutation
from .stabcode import StabCode


# The distance computation enumerates all 2**r elements of the stabilizer group.
MAX_ENUMERATED_GENERATORS = 24


class StabilizerAnalyzer:
    """
    Check that the stabilizers of a code form a valid generating set.
    """

    def __init__(self, code: StabCode):
        self.code = code

    def verify_commutation(self) -> bool:
        """
        Verify if all stabilizers commute with each other.
        """
        return any_anticommute(self.code.stabilizers) == 0

    def verify_independence(self) -> bool:
        """
        Verify that no stabilizer is a product of the others.
        """
        return is_independent(self.code.stabilizers)


class LogicalOperatorAnalyzer:
    """
    Analyzer to identify and verify logical operators in a quantum error correction code.

    Group membership (whether an operator is in the stabilizer group) is
    decided with the independence test: an operator belongs to the group iff
    appending it to an independent generating set makes the set dependent.
    """

    def __init__(self, code: StabCode):
        self.code = code
        self._n: int = code.n
        self._stabs: OperatorFamily = code.stabilizers
        self._basis: OperatorFamily = self._independent_subset(self._stabs)

    @staticmethod
    def _independent_subset(family: OperatorFamily) -> OperatorFamily:
        basis = OperatorFamily([], family.num_qubits)
        for op in family:
            extended = basis.extend([op])
            if is_independent(extended):
                basis = extended
        return basis

    def is_in_stabilizer_group(self, op: Sequence) -> bool:
        """
        Check if `op` is a product of stabilizers (ignoring phases).
        """
        op = as_operator(op)
        if is_identity(op):
            return True
        if len(self._basis) == 0:
            return False
        return not is_independent(self._basis.extend([op]))

    def is_logical_operator(self, op: Sequence) -> bool:
        """
        Verify if the given operator is a logical operator of the code.

        Criteria:
        1. It must commute with all stabilizers of the code.
        2. It must not be in the stabilizer group itself.
        """
        op = as_operator(op)
        if len(op) != self._n:
            raise ValueError(
                f"Operator length {len(op)} does not match code length {self._n}."
            )
        for stab in self._stabs:
            if vector_commutation(op, stab) == 1:
                return False
        return not self.is_in_stabilizer_group(op)

    def verify_logical_relations(self) -> bool:
        """
        Verify the canonical commutation relations of the logical operators:
        X_i anticommutes with Z_i and every other pair commutes.
        """
        k = self.code.k
        for i in range(k):
            if self.code.logical_X(i) is None or self.code.logical_Z(i) is None:
                return False
        for i in range(k):
            for j in range(k):
                xi, zj = self.code.logical_X(i), self.code.logical_Z(j)
                if vector_commutation(xi, zj) != int(i == j):
                    return False
                if j > i:
                    if vector_commutation(xi, self.code.logical_X(j)) == 1:
                        return False
                    if vector_commutation(self.code.logical_Z(i), zj) == 1:
                        return False
        return True


def verify_code(code: StabCode, verbose: bool = False) -> bool:
    """
    Check that a code is a well-formed stabilizer code.

    1. The stabilizers pairwise commute.
    2. The stabilizers are independent.
    3. Every logical qubit has a logical X and a logical Z.
    4. Every logical operator commutes with every stabilizer.
    5. The logical operators satisfy the canonical commutation relations.
    6. Stabilizers and logical operators together are independent.
    7. n equals the number of stabilizers plus k.

    Args:
        code: The code to verify.
        verbose: Print the first failing condition.

    Returns:
        bool: True if every condition holds.
    """

    def fail(message: str) -> bool:
        if verbose:
            print(f"Code verification failed: {message}")
        return False

    stabs = code.stabilizers
    logicals = code.logicals

    stab_analyzer = StabilizerAnalyzer(code)
    if not stab_analyzer.verify_commutation():
        return fail("stabilizers do not commute.")
    if not stab_analyzer.verify_independence():
        return fail("stabilizers are not independent.")
    if len(logicals) != 2 * code.k:
        return fail(f"expected {2 * code.k} logical operators, got {len(logicals)}.")
    for op in logicals:
        if any(vector_commutation(op, stab) == 1 for stab in stabs):
            return fail("a logical operator anticommutes with a stabilizer.")
    if not LogicalOperatorAnalyzer(code).verify_logical_relations():
        return fail("logical operators do not satisfy the canonical commutation relations.")
    if not is_independent(stabs.extend(logicals)):
        return fail("stabilizers and logical operators are not independent.")
    if code.n != len(stabs) + code.k:
        return fail(f"n={code.n} does not match {len(stabs)} stabilizers plus k={code.k}.")
    return True


def stabilizer_group(stabilizers) -> np.ndarray:
    """
    All 2**r products of r stabilizer generators, as an (2**r, n) uint8 array.
    The first row is the identity.

    Raises:
        ValueError: If there are more than MAX_ENUMERATED_GENERATORS generators.
    """
    family = as_family(stabilizers)
    if len(family) > MAX_ENUMERATED_GENERATORS:
        raise ValueError(
            f"Refusing to enumerate 2**{len(family)} group elements "
            f"(limit is {MAX_ENUMERATED_GENERATORS} generators)."
        )
    group = np.zeros((1, family.num_qubits or 0), dtype=np.uint8)
    for stab in family.to_array():
        group = np.concatenate([group, PRODUCT_TABLE[group, stab]])
    return group


def minimum_weight_representative(op: Sequence, group: np.ndarray) -> Tuple[int, PauliOperator]:
    """
    Lowest-weight operator among op * g for every g in `group`.

    Returns:
        (weight, operator) of one minimum-weight representative.
    """
    op = np.asarray(as_operator(op), dtype=np.uint8)
    coset = PRODUCT_TABLE[group, op]
    weights = np.count_nonzero(coset, axis=1)
    best = int(np.argmin(weights))
    return int(weights[best]), as_operator(coset[best].tolist())


def distance_logicals(code: StabCode) -> List[int]:
    """
    Minimum weight of each logical operator of the code (in the order
    X0, Z0, X1, Z1, ...), minimised over multiplication by stabilizers.
    """
    group = stabilizer_group(code.stabilizers)
    return [minimum_weight_representative(op, group)[0] for op in code.logicals]


def code_distance(code: StabCode) -> Tuple[int, PauliOperator]:
    """
    Compute the code distance by brute force: the minimum weight over every
    nontrivial product of logical operators, times every stabilizer.

    Returns:
        (distance, operator) where operator is a logical operator of that weight.
    """
    logicals = code.logicals
    if len(logicals) == 0:
        raise ValueError("The code has no logical operators.")
    group = stabilizer_group(code.stabilizers)
    best: Optional[Tuple[int, PauliOperator]] = None
    for powers in iter_product((0, 1), repeat=len(logicals)):
        if not any(powers):
            continue
        candidate = minimum_weight_representative(weighted_product(logicals, powers), group)
        if best is None or candidate[0] < best[0]:
            best = candidate
    return best


class DistanceAnalyzer:
    """
    Analyzer to compute the code distance of a quantum error correction code.

    Only the brute-force search over the stabilizer group is supported.
    """

    supported_methods = {"bruteforce"}

    def __init__(self, code: StabCode, method: Literal["bruteforce"] = "bruteforce"):
        self.code = code
        if method not in self.supported_methods:
            raise ValueError(
                f"Unsupported method '{method}'. Supported methods are: {self.supported_methods}"
            )
        self.method = method

    def compute_distance_bruteforce(self) -> int:
        """
        Compute the code distance using brute-force method.
        """
        return code_distance(self.code)[0]

    def verify_code_distance(self) -> bool:
        """
        Verify if the computed distance matches the expected distance.
        """
        return self.compute_distance_bruteforce() == self.code.d
