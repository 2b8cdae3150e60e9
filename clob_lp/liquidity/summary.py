"""
LP summary - rescale a ladder to the market min size

Each side is scaled independently so its smallest position becomes exactly
min_size and the rest keep their proportions:

    liquidity_i' = liquidity_i * min_size / min(liquidity)

On the bid side the minimum is a quote-denominated amount: min_size priced
at the bid's own level, min_size * p * 10^qd / (price_p * size_p). The
binding bid's notional and that minimum share the same price factor, so the
ratio reduces to min_size / liquidity and is applied in size units.

Aggregates are recomputed from the rescaled positions.
"""

from typing import Sequence, Tuple

from ..math.scaling import size_to_base, size_to_quote
from .types import BatchLPDetails, LPSummary, MarketParams, Position


def min_notional_at(price: int, market: MarketParams) -> int:
    """Quote value of a min-size order at price"""
    return size_to_quote(
        market.min_size,
        price,
        market.price_precision,
        market.size_precision,
        market.quote_asset_decimals,
    )


def _scale_side(positions: Sequence[Position], min_size: int) -> Tuple[Position, ...]:
    if not positions:
        return ()
    smallest = min(p.liquidity for p in positions)
    if smallest == 0:
        return tuple(positions)
    return tuple(p.with_liquidity(p.liquidity * min_size // smallest) for p in positions)


def summarize_for_min_size(details: BatchLPDetails, market: MarketParams) -> LPSummary:
    """Rescale both sides of a ladder to the market min size

    Args:
        details: raw allocator output
        market: market parameters (min_size, precisions, decimals)

    Returns:
        LPSummary whose quote/base totals are summed from the rescaled
        positions; sides that are empty or have a zero-sized position are
        left as they are
    """
    bids = _scale_side(details.bids, market.min_size)
    asks = _scale_side(details.asks, market.min_size)

    quote_liquidity = sum(
        size_to_quote(
            bid.liquidity,
            bid.price,
            market.price_precision,
            market.size_precision,
            market.quote_asset_decimals,
        )
        for bid in bids
    )
    base_liquidity = sum(
        size_to_base(ask.liquidity, market.size_precision, market.base_asset_decimals)
        for ask in asks
    )
    min_size_error = any(p.liquidity < market.min_size for p in bids + asks)

    return LPSummary(
        bids=bids,
        asks=asks,
        quote_liquidity=quote_liquidity,
        base_liquidity=base_liquidity,
        min_size_error=min_size_error,
    )
