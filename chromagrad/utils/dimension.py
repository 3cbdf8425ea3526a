from typing import Any
from collections.abc import Sized

import numpy as np


def get_dimension(element: Any) -> int:
    """Channel count of a color-like element; scalars and strings count as one."""
    if element is None:
        return 0
    if isinstance(element, np.ndarray):
        return element.shape[-1] if element.ndim else 1
    if isinstance(element, (str, bytes)) or not isinstance(element, Sized):
        return 1
    return len(element)
