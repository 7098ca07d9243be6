"""
Per-row score normalization.

Scores of one instance are min-max rescaled and then divided by their sum,
so each row ends up as a vector in [0, 1] summing to 1. The bounds used for
the rescaling are seeded at zero: for non-negative scores the lower bound is
always 0 and the first stage is a division by the row maximum.
"""

from typing import Optional, Sequence
import numpy as np

from ..config import DEGENERATE_ROW_POLICIES, ERROR, MIDPOINT
from .errors import DegenerateRowNormalization


def bounded_min(values: Sequence[float]) -> float:
    """
    Smallest value, never above zero.

    The accumulator starts at 0 and only moves on a strictly smaller value.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return 0.0
    return min(0.0, float(values.min()))


def bounded_max(values: Sequence[float]) -> float:
    """
    Largest value, never below zero.

    The accumulator starts at 0 and only moves on a strictly larger value.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return 0.0
    return max(0.0, float(values.max()))


def normalize_row(
    values: Sequence[float],
    degenerate_policy: str = MIDPOINT,
    row: Optional[int] = None
) -> np.ndarray:
    """
    Two-stage normalization of one instance's scores.

    Args:
        values: Scores of a single instance
        degenerate_policy: What to do when max == min ('midpoint' or 'error')
        row: Row index, reported in the error

    Returns:
        Normalized scores summing to 1
    """
    if degenerate_policy not in DEGENERATE_ROW_POLICIES:
        raise ValueError(
            f"Unknown degenerate row policy {degenerate_policy!r}, "
            f"expected one of {DEGENERATE_ROW_POLICIES}"
        )

    values = np.asarray(values, dtype=np.float64)
    hi = bounded_max(values)
    lo = bounded_min(values)

    if hi == lo:
        if degenerate_policy == ERROR:
            raise DegenerateRowNormalization(row if row is not None else 0)
        return np.full(values.shape, 1.0 / values.size)

    rescaled = (values - lo) / (hi - lo)

    # Largest entry is 1 after rescaling, so the sum is never zero
    return rescaled / rescaled.sum()
