"""
Ladder data types

Immutable containers passed between the grid generator, the allocator and
the min-size normalizer. Every numeric field is an int in on-chain fixed
point; nothing here is ever a float.
"""

from dataclasses import dataclass, field, replace
from typing import List, Tuple


@dataclass(frozen=True)
class Position:
    """One resting order at one price level

    - price: order price (price_precision scaled)
    - flip_price: price the filled inventory is re-quoted at on the other side
    - liquidity: order size (size_precision scaled)
    """
    price: int
    flip_price: int
    liquidity: int = 0

    def with_liquidity(self, liquidity: int) -> "Position":
        return replace(self, liquidity=liquidity)


@dataclass(frozen=True)
class Ladder:
    """Bid and ask positions, each side ordered by increasing price"""
    bids: Tuple[Position, ...] = ()
    asks: Tuple[Position, ...] = ()

    @property
    def bid_prices(self) -> List[int]:
        return [p.price for p in self.bids]

    @property
    def ask_prices(self) -> List[int]:
        return [p.price for p in self.asks]

    def __len__(self) -> int:
        return len(self.bids) + len(self.asks)


@dataclass(frozen=True)
class MarketParams:
    """Market scale parameters, fixed for one call

    Read from the order book contract by the caller:
    - price_precision / size_precision: powers of ten
    - base_asset_decimals / quote_asset_decimals: ERC20 decimals
    - tick_size: price increment (price_precision scaled)
    - min_fees_bps: fee step between ladder levels (basis points)
    - min_size: smallest tradable size (size_precision scaled)
    """
    price_precision: int
    size_precision: int
    base_asset_decimals: int
    quote_asset_decimals: int
    tick_size: int
    min_fees_bps: int
    min_size: int


@dataclass(frozen=True)
class BatchLPDetails:
    """Raw engine output

    quote_liquidity / base_liquidity are token amounts in the asset's own
    decimals. min_size_error flags any position below the market min size.
    """
    bids: Tuple[Position, ...]
    asks: Tuple[Position, ...]
    quote_liquidity: int
    base_liquidity: int
    min_size_error: bool = False


@dataclass(frozen=True)
class LPSummary:
    """Ladder rescaled so each side's smallest position equals min_size"""
    bids: Tuple[Position, ...]
    asks: Tuple[Position, ...]
    quote_liquidity: int
    base_liquidity: int
    min_size_error: bool = False


@dataclass(frozen=True)
class BatchLPResult:
    details: BatchLPDetails
    summary: LPSummary


@dataclass(frozen=True)
class BatchInputs:
    """Flattened arrays consumed by the batch provisioning call

    Bids come first, then asks; is_buy is True for bids.
    """
    prices: List[int] = field(default_factory=list)
    flip_prices: List[int] = field(default_factory=list)
    sizes: List[int] = field(default_factory=list)
    is_buy: List[bool] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.prices)
