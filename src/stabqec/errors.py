"""
Exceptions raised by the Pauli algebra.

Every error is a rejected input: nothing here is transient, so callers either
validate beforehand or handle the specific class they care about.
"""


class PauliAlgebraError(ValueError):
    """
    Base class for all input errors of the Pauli algebra.
    """


class LengthMismatchError(PauliAlgebraError):
    """
    Two operators of different length were compared or combined.
    """

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"Pauli operators must have the same length, got {expected} and {got}.")
        self.expected = expected
        self.got = got


class InvalidPowerError(PauliAlgebraError):
    """
    A power vector entry is not 0 or 1, or the power vector has the wrong length.
    """


class UnrecognizedSymbolError(PauliAlgebraError):
    """
    A character or integer outside the Pauli alphabet.
    """

    def __init__(self, symbol) -> None:
        super().__init__(f"Unrecognized Pauli symbol {symbol!r}.")
        self.symbol = symbol


class MalformedFamilyError(PauliAlgebraError):
    """
    Degenerate operator family, e.g. operators acting on zero qubits.
    """
