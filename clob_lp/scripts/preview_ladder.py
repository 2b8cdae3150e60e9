#!/usr/bin/env python
"""
Preview the order ladder for a batch liquidity request.

Usage:
  python -m clob_lp.scripts.preview_ladder --config request.yaml
  python -m clob_lp.scripts.preview_ladder --shape curve --start-price 995000 \
      --end-price 1005000 --best-ask-price 1000000 --price-precision 1000000 \
      --size-precision 1000000 --base-decimals 18 --quote-decimals 6 \
      --tick-size 1 --min-fees-bps 30 --min-size 1000 --quote-liquidity 1000000000
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import ValidationError

from ..config import settings
from ..liquidity.summary import min_notional_at
from ..liquidity.types import MarketParams, Position
from ..liquidity.viewer import build_batch_inputs
from ..schemas import LadderRequest

logger = logging.getLogger(__name__)

# CLI flag -> request field
FLAG_FIELDS = {
    'shape': 'shape',
    'start_price': 'start_price',
    'end_price': 'end_price',
    'best_ask_price': 'best_ask_price',
    'price_precision': 'price_precision',
    'size_precision': 'size_precision',
    'base_decimals': 'base_asset_decimals',
    'quote_decimals': 'quote_asset_decimals',
    'tick_size': 'tick_size',
    'min_fees_bps': 'min_fees_bps',
    'min_size': 'min_size',
    'quote_liquidity': 'quote_liquidity',
    'base_liquidity': 'base_liquidity',
    'max_price_points': 'max_price_points',
}


def load_request(config_path: Optional[Path], overrides: Dict[str, object]) -> LadderRequest:
    """Merge a YAML request file with CLI overrides and validate it."""
    raw = {}
    if config_path is not None:
        with open(config_path, 'r') as f:
            raw = yaml.safe_load(f) or {}

    raw.update({k: v for k, v in overrides.items() if v is not None})
    return LadderRequest(**raw)


def format_side(title: str, positions: List[Position], market: MarketParams, is_bid: bool) -> List[str]:
    lines = [f"{title} ({len(positions)})"]
    for p in positions:
        line = f"  price={p.price:>14} flip={p.flip_price:>14} size={p.liquidity:>20}"
        if is_bid:
            line += f" min_notional={min_notional_at(p.price, market)}"
        lines.append(line)
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Preview a concentrated liquidity order ladder')
    parser.add_argument('--config', type=Path, help='YAML request file')
    parser.add_argument('--shape', type=str, choices=['flat', 'curve', 'bid_ask'], help='Liquidity shape')
    for flag in FLAG_FIELDS:
        if flag != 'shape':
            parser.add_argument(f"--{flag.replace('_', '-')}", dest=flag, type=int)
    parser.add_argument('--summary-only', action='store_true', help='Print only the min-size summary')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)

    overrides = {field: getattr(args, flag) for flag, field in FLAG_FIELDS.items()}
    try:
        request = load_request(args.config, overrides)
        result = request.run()
    except (ValidationError, ValueError) as e:
        logger.error("ladder request failed: %s", e)
        return 1

    market = request.to_market()
    details, summary = result.details, result.summary

    if not args.summary_only:
        print("=== Batch LP details ===")
        print("\n".join(format_side("Bids", details.bids, market, True)))
        print("\n".join(format_side("Asks", details.asks, market, False)))
        print(f"quote_liquidity={details.quote_liquidity} base_liquidity={details.base_liquidity} "
              f"min_size_error={details.min_size_error}")
        print()

    print("=== Min-size summary ===")
    print("\n".join(format_side("Bids", summary.bids, market, True)))
    print("\n".join(format_side("Asks", summary.asks, market, False)))
    print(f"quote_liquidity={summary.quote_liquidity} base_liquidity={summary.base_liquidity}")
    print(f"batch orders: {len(build_batch_inputs(summary))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
