# Re-export high-level components for easy access

from .stabcode import StabCode
from .small import fivequbitCode, steaneCode, ShorCode
from .surface import Surface, surface_code
from .analyzer import (
    StabilizerAnalyzer,
    LogicalOperatorAnalyzer,
    DistanceAnalyzer,
    verify_code,
    distance_logicals,
    code_distance,
)


__all__ = [
    "StabCode",
    "fivequbitCode",
    "steaneCode",
    "ShorCode",
    "Surface",
    "surface_code",
    "StabilizerAnalyzer",
    "LogicalOperatorAnalyzer",
    "DistanceAnalyzer",
    "verify_code",
    "distance_logicals",
    "code_distance",
]
