from .default import value_or_default, non_negative
from .dimension import get_dimension

__all__ = ["value_or_default", "non_negative", "get_dimension"]
