"""
Position viewer - one call from a price range to a batch of orders

    generate_ladder -> allocate -> summarize_for_min_size

The shape-named wrappers mirror the SDK entry points for spot, curve and
bid-ask liquidity. build_batch_inputs flattens a result for the batch
provisioning call.
"""

import logging
from typing import Optional, Union

from .allocator import Shape, allocate, liquidity_target
from .grid import generate_ladder
from .summary import summarize_for_min_size
from .types import BatchInputs, BatchLPDetails, BatchLPResult, LPSummary, MarketParams

logger = logging.getLogger(__name__)


def get_batch_lp_details(
    shape: Union[Shape, str],
    market: MarketParams,
    start_price: int,
    end_price: int,
    best_ask_price: int,
    quote_liquidity: Optional[int] = None,
    base_liquidity: Optional[int] = None,
    max_price_points: Optional[int] = None
) -> BatchLPResult:
    """Compute the ladder, its liquidity and its min-size summary

    Args:
        shape: liquidity shape (flat, curve, bid_ask)
        market: market scale parameters
        start_price: farthest bid price
        end_price: upper bound of the ask range
        best_ask_price: current best ask
        quote_liquidity: quote total in quote decimals
        base_liquidity: base total in base decimals
        max_price_points: optional bound on the number of levels

    Returns:
        BatchLPResult(details, summary)

    Raises:
        MissingLiquidityTotal, RangeTooWide, DegenerateRange
    """
    # validate the target before walking the grid
    target = liquidity_target(quote_liquidity, base_liquidity)
    ladder = generate_ladder(
        start_price,
        end_price,
        best_ask_price,
        market.tick_size,
        market.min_fees_bps,
        max_price_points,
    )
    details = allocate(ladder, market, Shape(shape), target)
    summary = summarize_for_min_size(details, market)

    logger.debug(
        "%s batch: %d bids, %d asks, quote=%d base=%d",
        Shape(shape).value, len(details.bids), len(details.asks),
        details.quote_liquidity, details.base_liquidity
    )
    return BatchLPResult(details=details, summary=summary)


def get_spot_batch_lp_details(
    market: MarketParams,
    start_price: int,
    end_price: int,
    best_ask_price: int,
    quote_liquidity: Optional[int] = None,
    base_liquidity: Optional[int] = None,
    max_price_points: Optional[int] = None
) -> BatchLPResult:
    """Flat ladder, same quote on every position"""
    return get_batch_lp_details(
        Shape.FLAT, market, start_price, end_price, best_ask_price,
        quote_liquidity, base_liquidity, max_price_points
    )


def get_curve_batch_lp_details(
    market: MarketParams,
    start_price: int,
    end_price: int,
    best_ask_price: int,
    quote_liquidity: Optional[int] = None,
    base_liquidity: Optional[int] = None,
    max_price_points: Optional[int] = None
) -> BatchLPResult:
    """Ladder concentrated at the spread"""
    return get_batch_lp_details(
        Shape.CURVE, market, start_price, end_price, best_ask_price,
        quote_liquidity, base_liquidity, max_price_points
    )


def get_bid_ask_batch_lp_details(
    market: MarketParams,
    start_price: int,
    end_price: int,
    best_ask_price: int,
    quote_liquidity: Optional[int] = None,
    base_liquidity: Optional[int] = None,
    max_price_points: Optional[int] = None
) -> BatchLPResult:
    """Ladder concentrated at the range edges"""
    return get_batch_lp_details(
        Shape.BID_ASK, market, start_price, end_price, best_ask_price,
        quote_liquidity, base_liquidity, max_price_points
    )


def build_batch_inputs(batch: Union[BatchLPDetails, LPSummary]) -> BatchInputs:
    """Flatten bids then asks into (prices, flip_prices, sizes, is_buy)"""
    inputs = BatchInputs()
    for is_buy, side in ((True, batch.bids), (False, batch.asks)):
        for position in side:
            inputs.prices.append(position.price)
            inputs.flip_prices.append(position.flip_price)
            inputs.sizes.append(position.liquidity)
            inputs.is_buy.append(is_buy)
    return inputs
