"""
Grid - fee-compounded price ladder

Builds tick-aligned bid and ask price levels. Each level sits one fee step
above the previous one so a filled order can be flipped to the other side
at a profit of at least min_fees_bps.

Step function:
    next = floor_to_tick(price * (D + fee) / D)    D = 10_000
    next = price + tick_size                      if next == price

The walk starts at start_price, emits bids while below min(best_ask, end),
then keeps walking and emits asks while below end_price.
"""

import logging
from typing import List, Optional, Tuple

from ..constants import FEE_DENOMINATOR
from ..errors import RangeTooWide
from .types import Ladder, Position

logger = logging.getLogger(__name__)


def _validate_grid_args(tick_size: int, min_fees_bps: int) -> None:
    if tick_size <= 0:
        raise ValueError(f"tick_size must be positive: {tick_size}")
    if not 0 <= min_fees_bps < FEE_DENOMINATOR:
        raise ValueError(f"min_fees_bps out of range [0, {FEE_DENOMINATOR}): {min_fees_bps}")


def floor_to_tick(price: int, tick_size: int) -> int:
    """Round price down to a multiple of tick_size"""
    return price - price % tick_size


def next_grid_price(price: int, tick_size: int, min_fees_bps: int) -> int:
    """One fee step up, tick aligned, always strictly above price"""
    next_price = floor_to_tick(
        price * (FEE_DENOMINATOR + min_fees_bps) // FEE_DENOMINATOR,
        tick_size
    )
    if next_price <= price:
        next_price = price + tick_size
    return next_price


def bid_flip_price(price: int, tick_size: int, min_fees_bps: int) -> int:
    """Ask price for inventory bought by a bid at price

    Two fee steps up: the bid's own next level, then one more.
    """
    return next_grid_price(next_grid_price(price, tick_size, min_fees_bps), tick_size, min_fees_bps)


def ask_flip_price(price: int, tick_size: int, min_fees_bps: int) -> int:
    """Bid price for quote received by an ask at price

    price * (D - fee)^2 / D^2, tick aligned, strictly below price.
    """
    flip_price = floor_to_tick(
        price * (FEE_DENOMINATOR - min_fees_bps) ** 2 // FEE_DENOMINATOR ** 2,
        tick_size
    )
    if flip_price >= price:
        flip_price = price - tick_size
    return flip_price


def compute_reachable_price(min_fees_bps: int, start: int, max_steps: int) -> int:
    """Price reached after max_steps untruncated fee steps from start

    start * (D + fee)^max_steps / D^max_steps
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative: {max_steps}")
    return start * (FEE_DENOMINATOR + min_fees_bps) ** max_steps // FEE_DENOMINATOR ** max_steps


def check_price_points(
    start_price: int,
    end_price: int,
    min_fees_bps: int,
    max_price_points: int
) -> None:
    """Reject ranges that need more than max_price_points fee steps

    Raises:
        RangeTooWide: reachable price after max_price_points steps <= end_price
    """
    reachable = compute_reachable_price(min_fees_bps, start_price, max_price_points)
    if reachable <= end_price:
        raise RangeTooWide(
            f"maxPricePoints constraint violated: maximum reachable price ({reachable}) "
            f"would exceed or equal endPrice ({end_price})"
        )


def generate_ladder(
    start_price: int,
    end_price: int,
    best_ask_price: int,
    tick_size: int,
    min_fees_bps: int,
    max_price_points: Optional[int] = None
) -> Ladder:
    """Generate the bid and ask price levels for a range

    Args:
        start_price: farthest bid (rounded down to a tick)
        end_price: exclusive upper bound of the ask walk
        best_ask_price: current best ask; bids stay strictly below it
        tick_size: price increment
        min_fees_bps: fee step between levels
        max_price_points: optional bound on the number of levels

    Returns:
        Ladder with zero liquidity on every position

    Raises:
        RangeTooWide: the range needs more than max_price_points levels
        ValueError: bad tick or fee, negative prices, or a start that floors to zero
    """
    _validate_grid_args(tick_size, min_fees_bps)
    if start_price < 0 or end_price < 0 or best_ask_price < 0:
        raise ValueError("prices must be non-negative")
    if floor_to_tick(start_price, tick_size) == 0:
        raise ValueError(
            f"start_price {start_price} rounds down to zero at tick_size {tick_size}"
        )

    if max_price_points is not None:
        check_price_points(start_price, end_price, min_fees_bps, max_price_points)

    current = floor_to_tick(start_price, tick_size)
    bids: List[Position] = []
    asks: List[Position] = []

    def _check_bound() -> None:
        # tick flooring can slow compounding below the pre-check estimate
        if max_price_points is not None and len(bids) + len(asks) >= max_price_points:
            raise RangeTooWide(
                f"ladder from {start_price} to {end_price} exceeds {max_price_points} price points"
            )

    bid_limit = min(best_ask_price, end_price)
    while current < bid_limit:
        _check_bound()
        bids.append(Position(
            price=current,
            flip_price=bid_flip_price(current, tick_size, min_fees_bps),
        ))
        current = next_grid_price(current, tick_size, min_fees_bps)

    while current < end_price:
        _check_bound()
        asks.append(Position(
            price=current,
            flip_price=ask_flip_price(current, tick_size, min_fees_bps),
        ))
        current = next_grid_price(current, tick_size, min_fees_bps)

    logger.debug(
        "ladder %s..%s (best ask %s): %d bids, %d asks",
        start_price, end_price, best_ask_price, len(bids), len(asks)
    )
    return Ladder(bids=tuple(bids), asks=tuple(asks))


def first_ask_price(
    min_fees_bps: int,
    start_price: int,
    end_price: int,
    best_ask_price: int,
    tick_size: int
) -> int:
    """First grid price at or above best ask, 0 if the range ends below it"""
    _validate_grid_args(tick_size, min_fees_bps)
    if end_price < best_ask_price:
        return 0

    current = floor_to_tick(start_price, tick_size)
    while current < best_ask_price:
        current = next_grid_price(current, tick_size, min_fees_bps)
    return current


def _previous_grid_price(price: int, tick_size: int, min_fees_bps: int) -> int:
    prev_price = floor_to_tick(
        price * FEE_DENOMINATOR // (FEE_DENOMINATOR + min_fees_bps),
        tick_size
    )
    if prev_price >= price:
        prev_price = price - tick_size
    return max(prev_price, 0)


def price_range_for_points(
    best_ask_price: int,
    tick_size: int,
    num_price_points: int,
    min_fees_bps: int
) -> Tuple[int, int]:
    """(min_price, max_price) for a ladder of about num_price_points levels

    Half the points (rounded down) go below best ask, the rest at or above
    it. Stepping down is the inverse of the grid step, so the forward walk
    from min_price may land a tick off the mirrored levels.
    """
    _validate_grid_args(tick_size, min_fees_bps)
    if num_price_points < 1:
        raise ValueError(f"num_price_points must be at least 1: {num_price_points}")

    num_bids = num_price_points // 2
    num_asks = num_price_points - num_bids
    center = floor_to_tick(best_ask_price, tick_size)

    min_price = center
    for _ in range(num_bids):
        min_price = _previous_grid_price(min_price, tick_size, min_fees_bps)

    max_price = center
    for _ in range(num_asks):
        max_price = next_grid_price(max_price, tick_size, min_fees_bps)

    return min_price, max_price
