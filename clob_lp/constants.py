"""
Engine constants

Fixed-point constants shared by the ladder engine:
- FEE_DENOMINATOR: basis-point denominator used by the fee step function
- UINT256_MAX: upper bound of an on-chain unsigned word
- BID / ASK: side labels used by the shape weights
"""

from typing import Final

# Basis points (30 bps = 0.30%)
FEE_DENOMINATOR: Final[int] = 10_000

# uint256 bounds
UINT256_MAX: Final[int] = 2 ** 256 - 1

# Ladder sides
BID: Final[str] = "bid"
ASK: Final[str] = "ask"
