"""
Request schema using Pydantic

Validates a ladder request coming from a config file or another service
before it reaches the integer engine.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .config import settings
from .constants import FEE_DENOMINATOR
from .liquidity.allocator import Shape
from .liquidity.types import BatchLPResult, MarketParams
from .liquidity.viewer import get_batch_lp_details
from .math.fixed_point import precision_exponent


class LadderRequest(BaseModel):
    """Inputs for one batch ladder computation

    Prices are price_precision scaled, liquidity totals are in the asset's
    own decimals, min_size is size_precision scaled.
    """
    shape: Shape = Field(default_factory=lambda: Shape(settings.DEFAULT_SHAPE), description="Liquidity shape")

    # Range
    start_price: int = Field(..., description="Farthest bid price", gt=0)
    end_price: int = Field(..., description="Upper bound of the ask range", gt=0)
    best_ask_price: int = Field(..., description="Current best ask", gt=0)

    # Market
    price_precision: int = Field(..., description="Price precision (power of ten)", gt=0)
    size_precision: int = Field(..., description="Size precision (power of ten)", gt=0)
    base_asset_decimals: int = Field(..., description="Base token decimals", ge=0)
    quote_asset_decimals: int = Field(..., description="Quote token decimals", ge=0)
    tick_size: int = Field(..., description="Price increment", gt=0)
    min_fees_bps: int = Field(..., description="Fee step between levels (bps)", ge=0, lt=FEE_DENOMINATOR)
    min_size: int = Field(default=0, description="Market min order size", ge=0)

    # Budget
    quote_liquidity: Optional[int] = Field(default=None, description="Quote total (quote decimals)", ge=0)
    base_liquidity: Optional[int] = Field(default=None, description="Base total (base decimals)", ge=0)
    max_price_points: Optional[int] = Field(
        default_factory=lambda: settings.MAX_PRICE_POINTS,
        description="Upper bound on ladder levels",
        ge=1,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "shape": "curve",
                "start_price": 995000,
                "end_price": 1005000,
                "best_ask_price": 1000000,
                "price_precision": 1000000,
                "size_precision": 1000000,
                "base_asset_decimals": 18,
                "quote_asset_decimals": 6,
                "tick_size": 1,
                "min_fees_bps": 30,
                "min_size": 1000,
                "quote_liquidity": 1000000000,
                "max_price_points": 50,
            }
        },
    }

    @field_validator("price_precision", "size_precision")
    @classmethod
    def validate_power_of_ten(cls, v: int) -> int:
        precision_exponent(v)
        return v

    @model_validator(mode="after")
    def validate_range_and_budget(self) -> "LadderRequest":
        if self.start_price >= self.end_price:
            raise ValueError(
                f"start_price ({self.start_price}) must be less than end_price ({self.end_price})"
            )
        if self.quote_liquidity is None and self.base_liquidity is None:
            raise ValueError("either quote_liquidity or base_liquidity must be provided")
        return self

    def to_market(self) -> MarketParams:
        return MarketParams(
            price_precision=self.price_precision,
            size_precision=self.size_precision,
            base_asset_decimals=self.base_asset_decimals,
            quote_asset_decimals=self.quote_asset_decimals,
            tick_size=self.tick_size,
            min_fees_bps=self.min_fees_bps,
            min_size=self.min_size,
        )

    def run(self) -> BatchLPResult:
        """Compute the ladder for this request"""
        return get_batch_lp_details(
            self.shape,
            self.to_market(),
            self.start_price,
            self.end_price,
            self.best_ask_price,
            quote_liquidity=self.quote_liquidity,
            base_liquidity=self.base_liquidity,
            max_price_points=self.max_price_points,
        )
