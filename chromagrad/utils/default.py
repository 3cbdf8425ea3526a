import math
from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def non_negative(value: float) -> float:
    """Clamp NaN and negative values to ``0.0``; infinities pass through."""
    if math.isnan(value) or value < 0.0:
        return 0.0
    return float(value)
