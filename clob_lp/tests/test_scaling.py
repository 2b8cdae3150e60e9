"""
Scaling tests

Unit conversions between sizes and token amounts, and bid size trimming.
"""

from ..math.fixed_point import mul_div_up
from ..math.scaling import (
    quote_to_size,
    size_to_quote,
    size_to_base,
    base_to_size,
    normalize_bid_size,
)

PRICE_P = 10**6
SIZE_P = 10**6


class TestConversions:

    def test_quote_to_size_at_par(self):
        assert quote_to_size(250_000, 1_000_000, PRICE_P, SIZE_P, 6) == 250_000

    def test_quote_to_size_at_half(self):
        """half the price buys twice the size"""
        assert quote_to_size(250_000, 500_000, PRICE_P, SIZE_P, 6) == 500_000

    def test_size_to_quote(self):
        assert size_to_quote(250_000, 1_000_000, PRICE_P, SIZE_P, 6) == 250_000
        assert size_to_quote(500_000, 2_000_000, PRICE_P, SIZE_P, 6) == 1_000_000

    def test_base_conversions(self):
        assert size_to_base(SIZE_P, SIZE_P, 18) == 10**18
        assert base_to_size(10**18, SIZE_P, 18) == SIZE_P

    def test_truncation(self):
        assert quote_to_size(1, 3_000_000, PRICE_P, SIZE_P, 6) == 0


class TestNormalizeBidSize:
    """normalize_bid_size tests"""

    def test_trims_when_cost_rounds_up(self):
        # ceil(3 * 5 / 10) = 2 > floor = 1, trim by ceil(10 / 3) = 4
        assert normalize_bid_size(3, 10, 5) == 1

    def test_exact_cost_unchanged(self):
        assert normalize_bid_size(2, 10, 5) == 5

    def test_zero_size(self):
        assert normalize_bid_size(7, 10, 0) == 0

    def test_never_negative(self):
        assert normalize_bid_size(3, 100, 1) == 0

    def test_ceiling_cost_within_floor_allocation(self):
        size_precision = 100
        for price in range(1, 40):
            for size in range(0, 60):
                trimmed = normalize_bid_size(price, size_precision, size)
                assert trimmed <= size
                assert mul_div_up(price, trimmed, size_precision) <= price * size // size_precision
