"""
Fixed Point Math - overflow-aware mul/div primitives

Integer multiply-divide helpers with the same rounding and guard semantics as
the order book contract's fixed-point library. All inputs are unsigned
integers bounded by a 256-bit word.

References:
- Solidity FixedPointMathLib: mulDivUp / mulDivDown

Rounding:
    mul_div_down(x, y, d) = floor(x * y / d)
    mul_div_up(x, y, d)   = ceil(x * y / d)
    mul_div_round(x, y, d) = floor((x * y + d / 2) / d)
"""

from ..constants import UINT256_MAX
from ..errors import ArithmeticOverflow, DivisionByZero


def _checked_product(x: int, y: int, d: int) -> int:
    """Validate operands and return x * y.

    Raises:
        ValueError: negative operand
        DivisionByZero: d == 0
        ArithmeticOverflow: x * y exceeds a uint256 word
    """
    if x < 0 or y < 0 or d < 0:
        raise ValueError(f"unsigned operands required: x={x}, y={y}, d={d}")
    if d == 0:
        raise DivisionByZero("MulDivFailed: denominator is zero")

    z = x * y
    if z > UINT256_MAX:
        raise ArithmeticOverflow(f"MulDivFailed: multiplication overflow ({x} * {y})")
    return z


def mul_div_down(x: int, y: int, d: int) -> int:
    """(x * y) / d, rounded down"""
    return _checked_product(x, y, d) // d


def mul_div_up(x: int, y: int, d: int) -> int:
    """(x * y) / d, rounded up

    Equal to mul_div_down exactly when (x * y) % d == 0, one more otherwise.

    Args:
        x: first multiplicand
        y: second multiplicand
        d: denominator

    Returns:
        ceil(x * y / d)

    Raises:
        DivisionByZero: d == 0
        ArithmeticOverflow: product does not fit in 256 bits
    """
    quotient, remainder = divmod(_checked_product(x, y, d), d)
    return quotient + 1 if remainder else quotient


def mul_div_round(x: int, y: int, d: int) -> int:
    """(x * y) / d, rounded to nearest (half up)"""
    return (_checked_product(x, y, d) + d // 2) // d


def decimal_digit_count(n: int) -> int:
    """Number of base-10 digits in n (0 has one digit)"""
    if n < 0:
        raise ValueError(f"unsigned value required: {n}")
    return len(str(n))


def log10_floor(n: int) -> int:
    """floor(log10(n)) for a positive integer"""
    if n == 0:
        raise ValueError("log10 of zero is undefined")
    return decimal_digit_count(n) - 1


def precision_exponent(precision: int) -> int:
    """Exponent of a power-of-ten precision factor

    precision_exponent(10**8) == 8

    Raises:
        ValueError: precision is not a positive power of ten
    """
    if precision <= 0:
        raise ValueError(f"precision must be positive: {precision}")
    exponent = log10_floor(precision)
    if 10 ** exponent != precision:
        raise ValueError(f"precision must be a power of ten: {precision}")
    return exponent
