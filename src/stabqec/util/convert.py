"""
Conversion between the integer encoding of Pauli symbols and human-readable
text, plus interop with stim.
"""

from typing import Sequence

import stim

from ..errors import UnrecognizedSymbolError
from .pauli import Pauli, PauliOperator, as_operator


_CHAR_TO_SYMBOL = {
    "I": Pauli.I,
    "x": Pauli.X,
    "y": Pauli.Y,
    "z": Pauli.Z,
}
_SYMBOL_TO_CHAR = {symbol: char for char, symbol in _CHAR_TO_SYMBOL.items()}


def to_symbol(char: str) -> Pauli:
    """
    Convert a mnemonic character ('I', 'x', 'y', 'z') to a Pauli symbol.

    Raises:
        UnrecognizedSymbolError: For any other input.
    """
    try:
        return _CHAR_TO_SYMBOL[char]
    except (KeyError, TypeError):
        raise UnrecognizedSymbolError(char) from None


def to_char(symbol) -> str:
    """
    Convert a Pauli symbol (0, 1, 2, 3) to its mnemonic character.

    Raises:
        UnrecognizedSymbolError: For any other input.
    """
    return _SYMBOL_TO_CHAR[Pauli.coerce(symbol)]


def parse_operator(text: str) -> PauliOperator:
    """
    Parse a Pauli string into an operator.

    Both the mnemonic form ("Ixzz") and the upper-case form ("XZZXI") are
    accepted.

    Examples:
        >>> [int(s) for s in parse_operator("XZZXI")]
        [1, 3, 3, 1, 0]
    """
    return tuple(to_symbol("I" if ch in "Ii" else ch.lower()) for ch in text)


def format_operator(operator: Sequence, uppercase: bool = False) -> str:
    """
    Render an operator as a Pauli string.

    Args:
        operator: Sequence of Pauli symbols.
        uppercase: Use "XYZ" instead of the mnemonic "xyz".
    """
    text = "".join(to_char(s) for s in operator)
    return text.upper() if uppercase else text


def to_stim(operator: Sequence) -> stim.PauliString:
    """
    Convert an operator into a stim.PauliString with a +1 sign.

    stim uses the same 0=I, 1=X, 2=Y, 3=Z encoding.
    """
    return stim.PauliString([int(s) for s in as_operator(operator)])


def from_stim(pauli_string: stim.PauliString) -> PauliOperator:
    """
    Convert a stim.PauliString into an operator. The sign is dropped.
    """
    return as_operator(pauli_string[k] for k in range(len(pauli_string)))
