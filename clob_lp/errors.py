"""
Ladder engine errors

Every failure of the engine aborts the whole computation; no partial ladder
is ever returned. The taxonomy mirrors the builtin exception each case
specialises so callers may catch either.
"""


class LadderError(Exception):
    """Base class for all engine failures."""


class RangeTooWide(LadderError, ValueError):
    """The price range needs more than ``max_price_points`` grid steps."""


class DegenerateRange(LadderError, ValueError):
    """A weighted-reciprocal sum or a derived liquidity total is zero."""


class MissingLiquidityTotal(LadderError, ValueError):
    """Neither a quote nor a base liquidity total was supplied."""


class DivisionByZero(LadderError, ZeroDivisionError):
    """Fixed-point division by a zero denominator."""


class ArithmeticOverflow(LadderError, OverflowError):
    """Fixed-point product does not fit in an unsigned 256-bit word."""
