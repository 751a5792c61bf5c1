# Re-export high-level components for easy access

from .family import OperatorFamily, as_family, any_anticommute, weighted_product, syndrome
from .independence import is_independent


__all__ = [
    "OperatorFamily",
    "as_family",
    "any_anticommute",
    "weighted_product",
    "syndrome",
    "is_independent",
]
