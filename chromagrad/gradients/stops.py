from typing import Tuple


def build_stops(size: int) -> Tuple[float, ...]:
    """
    Evenly distribute ``size`` stops over [0, 1).

    Stop ``i`` sits at ``i / size``: every sample covers the same ``1 / size``
    slice of the gradient, so the last stop falls short of 1.0.

    >>> build_stops(4)
    (0.0, 0.25, 0.5, 0.75)
    """
    if size < 1:
        return ()
    return tuple(index / size for index in range(size))
