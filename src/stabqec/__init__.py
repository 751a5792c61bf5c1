"""
stabqec: phase-free Pauli algebra for stabilizer error-correcting codes
"""

from . import errors
from .errors import (
    PauliAlgebraError,
    LengthMismatchError,
    InvalidPowerError,
    UnrecognizedSymbolError,
    MalformedFamilyError,
)
from .util import (
    Pauli,
    commutation,
    product,
    vector_commutation,
    vector_product,
    weight,
    to_symbol,
    to_char,
    parse_operator,
    format_operator,
)
from .Algebra import OperatorFamily, any_anticommute, weighted_product, syndrome, is_independent
from .QEC import StabCode, surface_code, verify_code, distance_logicals, code_distance


__all__ = [
    "errors",
    "PauliAlgebraError",
    "LengthMismatchError",
    "InvalidPowerError",
    "UnrecognizedSymbolError",
    "MalformedFamilyError",
    "Pauli",
    "commutation",
    "product",
    "vector_commutation",
    "vector_product",
    "weight",
    "to_symbol",
    "to_char",
    "parse_operator",
    "format_operator",
    "OperatorFamily",
    "any_anticommute",
    "weighted_product",
    "syndrome",
    "is_independent",
    "StabCode",
    "surface_code",
    "verify_code",
    "distance_logicals",
    "code_distance",
]
