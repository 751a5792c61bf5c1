# Re-export high-level components for easy access

from .pauli import (
    Pauli,
    PauliOperator,
    COMMUTATION_TABLE,
    PRODUCT_TABLE,
    commutation,
    product,
    as_operator,
    identity_operator,
    is_identity,
    vector_commutation,
    vector_product,
    weight,
)
from .convert import to_symbol, to_char, parse_operator, format_operator, to_stim, from_stim
from .printer import format_stabilizer_table

__all__ = [
    "Pauli",
    "PauliOperator",
    "COMMUTATION_TABLE",
    "PRODUCT_TABLE",
    "commutation",
    "product",
    "as_operator",
    "identity_operator",
    "is_identity",
    "vector_commutation",
    "vector_product",
    "weight",
    "to_symbol",
    "to_char",
    "parse_operator",
    "format_operator",
    "to_stim",
    "from_stim",
    "format_stabilizer_table",
]
