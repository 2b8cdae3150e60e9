"""
Allocator - distribute a liquidity budget across a ladder

Shapes (quote weight per position, ladder in ascending price order):

    FLAT     bids 1, 1, ..., 1          asks 1, 1, ..., 1
    CURVE    bids 1, 2, ..., N          asks N, ..., 2, 1      thick at the spread
    BID_ASK  bids N, ..., 2, 1          asks 1, 2, ..., N      thick at the edges

    unit = total / sum(weights)    (total / N for FLAT, 2 * total / (N * (N + 1)) otherwise)
    quote_i = unit * weight_i

Solve directions:
- QuoteGiven: the quote total is spread on each side by the shape
- BaseGiven: the base total is spread over the asks so that their quote
  values follow the shape; the resulting quote total mirrors onto the bids
- BothGiven: each side's own total is split evenly
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from ..constants import ASK, BID
from ..errors import DegenerateRange, MissingLiquidityTotal
from ..math.fixed_point import mul_div_down, mul_div_up
from ..math.scaling import (
    base_to_size,
    normalize_bid_size,
    quote_to_size,
    size_to_base,
)
from .types import BatchLPDetails, Ladder, MarketParams, Position

logger = logging.getLogger(__name__)


class Shape(str, Enum):
    """Liquidity distribution shape"""

    FLAT = "flat"
    CURVE = "curve"
    BID_ASK = "bid_ask"


@dataclass(frozen=True)
class QuoteGiven:
    quote_liquidity: int


@dataclass(frozen=True)
class BaseGiven:
    base_liquidity: int


@dataclass(frozen=True)
class BothGiven:
    quote_liquidity: int
    base_liquidity: int


LiquidityTarget = Union[QuoteGiven, BaseGiven, BothGiven]


def liquidity_target(
    quote_liquidity: Optional[int] = None,
    base_liquidity: Optional[int] = None
) -> LiquidityTarget:
    """Pick the solve direction from whichever totals are supplied

    Raises:
        MissingLiquidityTotal: both totals are None
    """
    if quote_liquidity is None and base_liquidity is None:
        raise MissingLiquidityTotal("Either quoteLiquidity or baseLiquidity must be provided.")
    for name, value in (("quote_liquidity", quote_liquidity), ("base_liquidity", base_liquidity)):
        if value is not None and value < 0:
            raise ValueError(f"{name} must be non-negative: {value}")

    if base_liquidity is None:
        return QuoteGiven(quote_liquidity)
    if quote_liquidity is None:
        return BaseGiven(base_liquidity)
    return BothGiven(quote_liquidity, base_liquidity)


def quote_multipliers(shape: Shape, count: int, side: str) -> List[int]:
    """Quote weight of each position on one side, in ascending price order"""
    if side not in (BID, ASK):
        raise ValueError(f"unknown side: {side}")

    shape = Shape(shape)
    if shape is Shape.FLAT:
        return [1] * count

    ascending = list(range(1, count + 1))
    descending = ascending[::-1]
    if shape is Shape.CURVE:
        return ascending if side == BID else descending
    return descending if side == BID else ascending


def quote_unit(total: int, multipliers: Sequence[int]) -> int:
    """Quote amount carried by a weight of one"""
    weight = sum(multipliers)
    if weight == 0:
        return 0
    return total // weight


# === per-side helpers ===

def _size_bids(
    bids: Sequence[Position],
    market: MarketParams,
    shape: Shape,
    quote_total: int
) -> Tuple[Position, ...]:
    multipliers = quote_multipliers(shape, len(bids), BID)
    unit = quote_unit(quote_total, multipliers)

    sized = []
    for bid, multiplier in zip(bids, multipliers):
        raw_size = quote_to_size(
            unit * multiplier,
            bid.price,
            market.price_precision,
            market.size_precision,
            market.quote_asset_decimals,
        )
        sized.append(bid.with_liquidity(
            normalize_bid_size(bid.price, market.size_precision, raw_size)
        ))
    return tuple(sized)


def _size_asks_from_quote(
    asks: Sequence[Position],
    market: MarketParams,
    shape: Shape,
    quote_total: int
) -> Tuple[Position, ...]:
    multipliers = quote_multipliers(shape, len(asks), ASK)
    unit = quote_unit(quote_total, multipliers)

    return tuple(
        ask.with_liquidity(quote_to_size(
            unit * multiplier,
            ask.price,
            market.price_precision,
            market.size_precision,
            market.quote_asset_decimals,
        ))
        for ask, multiplier in zip(asks, multipliers)
    )


def _require_funded(side: str, positions: Sequence[Position]) -> None:
    if positions and not any(p.liquidity for p in positions):
        raise DegenerateRange(f"{side} side of {len(positions)} positions resolves to zero liquidity")


def _has_undersized(market: MarketParams, *sides: Sequence[Position]) -> bool:
    return any(p.liquidity < market.min_size for side in sides for p in side)


def _details(
    bids: Tuple[Position, ...],
    asks: Tuple[Position, ...],
    market: MarketParams,
    quote_liquidity: int,
    base_liquidity: int
) -> BatchLPDetails:
    _require_funded(BID, bids)
    _require_funded(ASK, asks)

    min_size_error = _has_undersized(market, bids, asks)
    if min_size_error:
        logger.warning(
            "ladder has positions below min size %d (bids=%d, asks=%d)",
            market.min_size, len(bids), len(asks)
        )
    return BatchLPDetails(
        bids=bids,
        asks=asks,
        quote_liquidity=quote_liquidity,
        base_liquidity=base_liquidity,
        min_size_error=min_size_error,
    )


# === solve directions ===

def allocate_quote_given(
    ladder: Ladder,
    market: MarketParams,
    shape: Shape,
    quote_liquidity: int
) -> BatchLPDetails:
    """Spread quote_liquidity over each side; base total is implied by the asks

    Raises:
        DegenerateRange: zero quote total, or a side that resolves to zero
    """
    if quote_liquidity == 0:
        raise DegenerateRange("quote liquidity is zero")
    bids = _size_bids(ladder.bids, market, shape, quote_liquidity)
    asks = _size_asks_from_quote(ladder.asks, market, shape, quote_liquidity)

    base_liquidity = sum(
        size_to_base(ask.liquidity, market.size_precision, market.base_asset_decimals)
        for ask in asks
    )
    return _details(bids, asks, market, quote_liquidity, base_liquidity)


def allocate_base_given(
    ladder: Ladder,
    market: MarketParams,
    shape: Shape,
    base_liquidity: int
) -> BatchLPDetails:
    """Spread base_liquidity over the asks, mirror the implied quote onto the bids

    With weights m_i and a reference ask r where m_r == 1, every ask carries
    quote_i = m_i * b_r * p_r, so

        base_i = m_i * b_r * p_r / p_i
        B      = b_r * sum(m_i * p_r / p_i)

    The sum is scaled by price_precision to stay integral, which gives
    b_r = B * price_precision / weighted_sum.

    Raises:
        DegenerateRange: no asks, zero weighted sum, zero base unit, or a
            derived total that resolves to zero on either side
    """
    asks_in = ladder.asks
    if not asks_in:
        raise DegenerateRange("Cannot provide baseLiquidity when there are no asks to place it in.")

    multipliers = quote_multipliers(shape, len(asks_in), ASK)
    reference_price = asks_in[multipliers.index(1)].price

    weighted_sum = sum(
        mul_div_up(multiplier * reference_price, market.price_precision, ask.price)
        for ask, multiplier in zip(asks_in, multipliers)
    )
    if weighted_sum == 0:
        raise DegenerateRange("weighted reciprocal sum is zero, check price inputs")

    base_unit = mul_div_down(base_liquidity, market.price_precision, weighted_sum)
    if base_unit == 0:
        raise DegenerateRange(
            f"base liquidity {base_liquidity} is too small for {len(asks_in)} asks"
        )
    logger.debug("base unit %d at reference price %d", base_unit, reference_price)

    asks = []
    quote_total = 0
    for ask, multiplier in zip(asks_in, multipliers):
        base_amount = mul_div_down(multiplier * base_unit, reference_price, ask.price)
        asks.append(ask.with_liquidity(
            base_to_size(base_amount, market.size_precision, market.base_asset_decimals)
        ))
        quote_total += mul_div_down(
            base_amount * ask.price,
            10 ** market.quote_asset_decimals,
            10 ** market.base_asset_decimals * market.price_precision,
        )

    if quote_total == 0 and ladder.bids:
        raise DegenerateRange(
            f"base liquidity {base_liquidity} is worth zero quote, nothing to place on the bids"
        )

    bids = _size_bids(ladder.bids, market, shape, quote_total)
    return _details(bids, tuple(asks), market, quote_total, base_liquidity)


def allocate_both_given(
    ladder: Ladder,
    market: MarketParams,
    quote_liquidity: int,
    base_liquidity: int
) -> BatchLPDetails:
    """Split each side's own total evenly over that side

    Raises:
        DegenerateRange: a zero total for a side that has positions
    """
    if quote_liquidity == 0 and ladder.bids:
        raise DegenerateRange("quote liquidity is zero but the ladder has bids")
    if base_liquidity == 0 and ladder.asks:
        raise DegenerateRange("base liquidity is zero but the ladder has asks")

    bids =_size_bids(ladder.bids, market, Shape.FLAT, quote_liquidity)

    asks: Tuple[Position, ...] = ()
    if ladder.asks:
        ask_size = mul_div_down(
            base_liquidity,
            market.size_precision,
            len(ladder.asks) * 10 ** market.base_asset_decimals,
        )
        asks = tuple(ask.with_liquidity(ask_size) for ask in ladder.asks)

    return _details(bids, asks, market, quote_liquidity, base_liquidity)


def allocate(
    ladder: Ladder,
    market: MarketParams,
    shape: Shape,
    target: LiquidityTarget
) -> BatchLPDetails:
    """Fill in liquidity on every position of the ladder

    Raises:
        DegenerateRange: the ladder is empty or a side total resolves to zero
    """
    if len(ladder) == 0:
        raise DegenerateRange("price range produced no positions")

    shape = Shape(shape)
    if isinstance(target, QuoteGiven):
        return allocate_quote_given(ladder, market, shape, target.quote_liquidity)
    if isinstance(target, BaseGiven):
        return allocate_base_given(ladder, market, shape, target.base_liquidity)
    if isinstance(target, BothGiven):
        return allocate_both_given(ladder, market, target.quote_liquidity, target.base_liquidity)
    raise TypeError(f"unsupported liquidity target: {target!r}")
