"""
Mathematical helpers shared by the controllers and the metrics.
"""

from typing import Optional
import numpy as np
from numpy.typing import ArrayLike


def clamp(value: float, min_val: Optional[float], max_val: Optional[float]) -> float:
    """Clamp a value between minimum and maximum bounds."""
    if min_val is None and max_val is None:
        return value
    return float(np.clip(value, min_val, max_val))


def sign_changes(values: ArrayLike) -> int:
    """
    Count direction reversals in a sequence.
    
    Compares the sign of consecutive first differences; a move between
    rising, falling and flat counts as one change.
    """
    arr = np.asarray(values, dtype=float)
    if len(arr) < 3:
        return 0
    slope_sign = np.sign(np.diff(arr))
    return int(np.count_nonzero(np.diff(slope_sign)))
