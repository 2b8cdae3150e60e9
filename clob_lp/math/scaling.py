"""
Scaling - size / quote / base unit conversions

A position's liquidity is a base-asset size scaled by size_precision; its
price is scaled by price_precision. Token amounts use the asset's decimals.

    size  = quote * size_p * price_p / (price * 10^quote_decimals)
    quote = size * price * 10^quote_decimals / (size_p * price_p)
    base  = size * 10^base_decimals / size_p
"""

from .fixed_point import mul_div_down, mul_div_up


def quote_to_size(
    quote_amount: int,
    price: int,
    price_precision: int,
    size_precision: int,
    quote_decimals: int
) -> int:
    """Quote token amount -> base size at price (rounded down)"""
    return mul_div_down(
        quote_amount,
        size_precision * price_precision,
        price * 10 ** quote_decimals
    )


def size_to_quote(
    size: int,
    price: int,
    price_precision: int,
    size_precision: int,
    quote_decimals: int
) -> int:
    """Base size at price -> quote token amount (rounded down)"""
    return mul_div_down(
        size * price,
        10 ** quote_decimals,
        size_precision * price_precision
    )


def size_to_base(size: int, size_precision: int, base_decimals: int) -> int:
    """Base size -> base token amount (rounded down)"""
    return mul_div_down(size, 10 ** base_decimals, size_precision)


def base_to_size(base_amount: int, size_precision: int, base_decimals: int) -> int:
    """Base token amount -> base size (rounded down)"""
    return mul_div_down(base_amount, size_precision, 10 ** base_decimals)


def normalize_bid_size(price: int, size_precision: int, bid_size: int) -> int:
    """Trim a bid so its ceiling quote cost does not exceed its floor cost

    The contract charges a bid ceil(price * size / size_p) quote. When that
    differs from the floor value the bid would pull one quote unit more than
    its allotted share, so the size is reduced by ceil(size_p / price), the
    smallest size step that moves the cost by at least one unit.

    Args:
        price: bid price (price_precision scaled)
        size_precision: size precision factor
        bid_size: raw bid size

    Returns:
        adjusted bid size (never negative)
    """
    if mul_div_up(price, bid_size, size_precision) > price * bid_size // size_precision:
        return max(bid_size - mul_div_up(1, size_precision, price), 0)

    return bid_size
