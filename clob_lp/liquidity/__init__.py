"""
Concentrated liquidity layer

- grid: fee-compounded, tick-aligned price ladder
- allocator: liquidity distribution by shape and solve direction
- summary: min-size rescaling of a computed ladder
- viewer: one-call facade and batch flattening
"""

from .types import (
    Position,
    Ladder,
    MarketParams,
    BatchLPDetails,
    LPSummary,
    BatchLPResult,
    BatchInputs,
)
from .grid import (
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
from .allocator import (
    Shape,
    QuoteGiven,
    BaseGiven,
    BothGiven,
    liquidity_target,
    quote_multipliers,
    quote_unit,
    allocate,
    allocate_quote_given,
    allocate_base_given,
    allocate_both_given,
)
from .summary import summarize_for_min_size, min_notional_at
from .viewer import (
    get_batch_lp_details,
    get_spot_batch_lp_details,
    get_curve_batch_lp_details,
    get_bid_ask_batch_lp_details,
    build_batch_inputs,
)
