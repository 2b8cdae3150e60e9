"""
Math layer for the ladder engine

Integer-only helpers matching the contract's fixed-point arithmetic:
- fixed_point: mulDiv with floor / ceiling / nearest rounding
- scaling: size <-> quote <-> base conversions, bid size normalization
"""

from .fixed_point import (
    mul_div_down,
    mul_div_up,
    mul_div_round,
    decimal_digit_count,
    log10_floor,
    precision_exponent,
)
from .scaling import (
    quote_to_size,
    size_to_quote,
    size_to_base,
    base_to_size,
    normalize_bid_size,
)
