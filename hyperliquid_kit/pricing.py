"""Prices and amounts for market orders and transfers."""

from __future__ import annotations

from .rounding import round_to_decimals, round_to_significant_and_decimal

DEFAULT_SLIPPAGE = 0.05
"""Slippage used for market orders when none is given."""

PRICE_SIG_FIGS = 5
SPOT_ASSET_OFFSET = 10_000
PERP_MAX_DECIMALS = 6
SPOT_MAX_DECIMALS = 8


def max_price_decimals(asset_index: int) -> int:
    """Return how many decimals a price may have: 6 for perps, 8 for spot.

    Raises ``ValueError`` for a negative asset index.
    """
    if asset_index < 0:
        raise ValueError(f"asset index must not be negative: {asset_index}")
    if asset_index < SPOT_ASSET_OFFSET:
        return PERP_MAX_DECIMALS
    return SPOT_MAX_DECIMALS


def slippage_price(
    px: float,
    is_buy: bool,
    slippage: float | None,
    sz_decimals: int,
    asset_index: int,
) -> float:
    """Move ``px`` by the slippage against the taker and round it to a valid price."""
    if slippage is None:
        slippage = DEFAULT_SLIPPAGE
    price_decimals = max(max_price_decimals(asset_index) - sz_decimals, 0)
    factor = 1.0 + slippage if is_buy else 1.0 - slippage
    return round_to_significant_and_decimal(px * factor, PRICE_SIG_FIGS, price_decimals)


def usdc_units(amount: float) -> int:
    """Return a USDC amount in millionths, rounded half away from zero."""
    return int(round_to_decimals(amount * 1e6, 0))