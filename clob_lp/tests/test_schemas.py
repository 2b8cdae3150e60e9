"""
Request schema tests
"""

import pytest
from pydantic import ValidationError

from ..config import settings
from ..liquidity.allocator import Shape
from ..liquidity.types import MarketParams
from ..schemas import LadderRequest

EXAMPLE = LadderRequest.model_config["json_schema_extra"]["example"]


def make_request(**overrides):
    data = dict(EXAMPLE)
    data.update(overrides)
    return LadderRequest(**data)


class TestLadderRequest:
    """LadderRequest validation tests"""

    def test_example_runs(self):
        request = make_request()
        result = request.run()

        assert request.shape is Shape.CURVE
        assert [p.price for p in result.details.bids] == [995_000, 997_985]
        assert [p.price for p in result.details.asks] == [1_000_978, 1_003_980]

    def test_to_market(self):
        market = make_request().to_market()
        assert market == MarketParams(
            price_precision=10**6,
            size_precision=10**6,
            base_asset_decimals=18,
            quote_asset_decimals=6,
            tick_size=1,
            min_fees_bps=30,
            min_size=1000,
        )

    def test_defaults(self):
        data = {k: v for k, v in EXAMPLE.items() if k not in ("shape", "max_price_points", "min_size")}
        request = LadderRequest(**data)

        assert request.shape is Shape(settings.DEFAULT_SHAPE)
        assert request.max_price_points == settings.MAX_PRICE_POINTS
        assert request.min_size == 0

    def test_start_not_below_end(self):
        with pytest.raises(ValidationError):
            make_request(start_price=1_005_000)

    def test_precision_not_power_of_ten(self):
        with pytest.raises(ValidationError):
            make_request(price_precision=300)

    def test_missing_liquidity(self):
        data = dict(EXAMPLE)
        data.pop("quote_liquidity")
        with pytest.raises(ValidationError):
            LadderRequest(**data)

    def test_fee_out_of_range(self):
        with pytest.raises(ValidationError):
            make_request(min_fees_bps=10_000)

    def test_unknown_shape(self):
        with pytest.raises(ValidationError):
            make_request(shape="triangle")

    def test_frozen(self):
        request = make_request()
        with pytest.raises(ValidationError):
            request.tick_size = 2
