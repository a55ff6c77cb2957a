"""Domain services: the pure compile stages."""

from .cipher_mapper import CHARS_TRANSFORMED, CipherMapper
from .range_expander import (
    RANGES_EXPANDED,
    InvalidRangeError,
    RangeExpander,
    expand_range,
    validate_range,
)

__all__ = [
    "CHARS_TRANSFORMED",
    "RANGES_EXPANDED",
    "CipherMapper",
    "InvalidRangeError",
    "RangeExpander",
    "expand_range",
    "validate_range",
]
