"""
CLOB Concentrated Liquidity Engine

Client-side ladder engine for an on-chain limit order book: generates a
fee-compounded price ladder, distributes a liquidity budget over it and
rescales the result to the market's minimum order size, all in on-chain
fixed-point integers.
"""

__version__ = "0.1.0"

from .constants import FEE_DENOMINATOR, UINT256_MAX
from .errors import (
    LadderError,
    RangeTooWide,
    DegenerateRange,
    MissingLiquidityTotal,
    DivisionByZero,
    ArithmeticOverflow,
)
