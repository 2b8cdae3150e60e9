"""
Grid tests

Fee-compounded ladder generation, flip prices and the price-point bound.
"""

import pytest

from ..errors import RangeTooWide
from ..liquidity.grid import (
    floor_to_tick,
    next_grid_price,
    bid_flip_price,
    ask_flip_price,
    compute_reachable_price,
    check_price_points,
    generate_ladder,
    first_ask_price,
    price_range_for_points,
)

BEST_ASK = 1_000_000


def assert_ladder_invariants(ladder, best_ask, tick_size):
    for side in (ladder.bids, ladder.asks):
        prices = [p.price for p in side]
        assert all(price % tick_size == 0 for price in prices)
        assert all(a < b for a, b in zip(prices, prices[1:]))
    assert all(p.price < best_ask for p in ladder.bids)
    assert all(p.price >= best_ask for p in ladder.asks)
    assert all(p.flip_price > p.price for p in ladder.bids)
    assert all(p.flip_price < p.price for p in ladder.asks)
    assert all(p.flip_price % tick_size == 0 for p in ladder.bids + ladder.asks)
    assert all(p.liquidity == 0 for p in ladder.bids + ladder.asks)


class TestStepFunction:
    """floor_to_tick, next_grid_price tests"""

    def test_floor_to_tick(self):
        assert floor_to_tick(1234, 100) == 1200
        assert floor_to_tick(1200, 100) == 1200
        assert floor_to_tick(99, 100) == 0

    def test_fee_step(self):
        assert next_grid_price(1_000_000, 1, 30) == 1_003_000

    def test_step_tick_aligned(self):
        # 100_300 floors to 100_200 on a 200 tick
        assert next_grid_price(100_000, 200, 30) == 100_200

    def test_forced_progress(self):
        """rounding that collapses the step moves up one tick"""
        assert next_grid_price(100, 1, 30) == 101
        assert next_grid_price(1000, 1, 0) == 1001
        assert next_grid_price(100_000, 1000, 30) == 101_000


class TestFlipPrices:
    """bid_flip_price, ask_flip_price tests"""

    def test_bid_flip_two_steps_up(self):
        # 1_000_000 -> 1_003_000 -> 1_006_009
        assert bid_flip_price(1_000_000, 1, 30) == 1_006_009

    def test_ask_flip_two_steps_down(self):
        # 1_000_000 * 9970^2 / 10000^2
        assert ask_flip_price(1_000_000, 1, 30) == 994_009

    def test_ask_flip_tick_aligned(self):
        assert ask_flip_price(1_000_000, 100, 30) == 994_000

    def test_ask_flip_zero_fee(self):
        assert ask_flip_price(1000, 10, 0) == 990


class TestPricePointBound:
    """compute_reachable_price, check_price_points tests"""

    def test_reachable_price(self):
        assert compute_reachable_price(30, 1_000_000, 0) == 1_000_000
        assert compute_reachable_price(30, 1_000_000, 1) == 1_003_000
        assert compute_reachable_price(30, 1_000_000, 2) == 1_006_009

    def test_range_too_wide(self):
        with pytest.raises(RangeTooWide, match="maxPricePoints"):
            check_price_points(995_000, 1_005_000, 30, 3)

    def test_range_within_bound(self):
        check_price_points(995_000, 1_005_000, 30, 4)

    def test_range_too_wide_is_value_error(self):
        with pytest.raises(ValueError):
            check_price_points(995_000, 1_005_000, 30, 2)


class TestGenerateLadder:
    """generate_ladder tests"""

    def test_reference_ladder(self):
        ladder = generate_ladder(995_000, 1_005_000, BEST_ASK, 1, 30)

        assert ladder.bid_prices == [995_000, 997_985]
        assert ladder.ask_prices == [1_000_978, 1_003_980]
        assert [p.flip_price for p in ladder.bids] == [1_000_978, 1_003_980]
        assert ladder.asks[0].flip_price == 994_981
        assert len(ladder) == 4

    def test_deterministic(self):
        first = generate_ladder(995_000, 1_005_000, BEST_ASK, 1, 30)
        second = generate_ladder(995_000, 1_005_000, BEST_ASK, 1, 30)
        assert first == second

    def test_invariants(self):
        for tick_size in (1, 7, 100, 1000):
            for fee in (0, 5, 30, 100):
                ladder = generate_ladder(900_000, 1_100_000, BEST_ASK, tick_size, fee)
                assert_ladder_invariants(ladder, BEST_ASK, tick_size)
                assert ladder.bids and ladder.asks

    def test_start_aligned_to_tick(self):
        ladder = generate_ladder(995_050, 1_005_000, BEST_ASK, 100, 30)
        assert ladder.bids[0].price == 995_000

    def test_range_below_best_ask(self):
        ladder = generate_ladder(995_000, 999_000, BEST_ASK, 1, 30)
        assert ladder.bid_prices == [995_000, 997_985]
        assert ladder.asks == ()

    def test_range_above_best_ask(self):
        ladder = generate_ladder(1_001_000, 1_005_000, BEST_ASK, 1, 30)
        assert ladder.bids == ()
        assert ladder.ask_prices == [1_001_000, 1_004_003]

    def test_max_price_points_accepts(self):
        ladder = generate_ladder(995_000, 1_005_000, BEST_ASK, 1, 30, max_price_points=4)
        assert len(ladder) == 4

    def test_max_price_points_rejects(self):
        with pytest.raises(RangeTooWide):
            generate_ladder(995_000, 1_005_000, BEST_ASK, 1, 30, max_price_points=3)

    def test_tick_flooring_cannot_exceed_bound(self):
        """200 ticks slow the 30 bps step: five levels against a bound of four"""
        with pytest.raises(RangeTooWide):
            generate_ladder(100_000, 100_950, 100_500, 200, 30, max_price_points=4)

    def test_tick_flooring_without_bound(self):
        ladder = generate_ladder(100_000, 100_950, 100_500, 200, 30)
        assert ladder.bid_prices == [100_000, 100_200, 100_400]
        assert ladder.ask_prices == [100_600, 100_800]

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            generate_ladder(995_000, 1_005_000, BEST_ASK, 0, 30)
        with pytest.raises(ValueError):
            generate_ladder(995_000, 1_005_000, BEST_ASK, 1, 10_000)
        with pytest.raises(ValueError):
            generate_ladder(-1, 1_005_000, BEST_ASK, 1, 30)

    def test_start_below_one_tick(self):
        with pytest.raises(ValueError, match="rounds down to zero"):
            generate_ladder(150, 1_005_000, BEST_ASK, 200, 30)
        with pytest.raises(ValueError, match="rounds down to zero"):
            generate_ladder(0, 1_005_000, BEST_ASK, 1, 30)


class TestRangeHelpers:
    """first_ask_price, price_range_for_points tests"""

    def test_first_ask_price(self):
        assert first_ask_price(30, 995_000, 1_005_000, BEST_ASK, 1) == 1_000_978

    def test_first_ask_price_matches_ladder(self):
        ladder = generate_ladder(995_000, 1_005_000, BEST_ASK, 1, 30)
        assert first_ask_price(30, 995_000, 1_005_000, BEST_ASK, 1) == ladder.asks[0].price

    def test_first_ask_price_range_below(self):
        assert first_ask_price(30, 995_000, 999_000, BEST_ASK, 1) == 0

    def test_price_range_for_points(self):
        assert price_range_for_points(BEST_ASK, 1, 4, 30) == (994_025, 1_006_009)

    def test_price_range_brackets_best_ask(self):
        for points in (1, 2, 5, 10):
            min_price, max_price = price_range_for_points(BEST_ASK, 10, points, 30)
            assert min_price <= BEST_ASK < max_price

    def test_price_range_needs_points(self):
        with pytest.raises(ValueError):
            price_range_for_points(BEST_ASK, 1, 0, 30)
