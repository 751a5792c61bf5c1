from typing import Iterable, Optional, Sequence

from .convert import format_operator
from .pauli import weight


def format_stabilizer_table(
    operators: Iterable[Sequence],
    prefix: str = "S",
    labels: Optional[Sequence[str]] = None,
    uppercase: bool = True,
) -> str:
    """
    Format operators as a table, one per line:
    S0  XZZXI  (w=4)

    Rows are labelled prefix0, prefix1, ... unless explicit labels are given.
    """
    operators = list(operators)
    if labels is None:
        labels = [f"{prefix}{idx}" for idx in range(len(operators))]
    width = max((len(label) for label in labels), default=0)
    lines = []
    for label, op in zip(labels, operators):
        lines.append(f"{label.ljust(width)}  {format_operator(op, uppercase=uppercase)}  (w={weight(op)})")
    return "\n".join(lines)
