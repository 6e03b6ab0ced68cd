"""Rounding of prices and sizes."""

from __future__ import annotations

import math


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    whole = math.floor(abs(x))
    if abs(x) - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), x)


def round_to_decimals(value: float, decimals: int) -> float:
    """Round to a number of decimal places, halves away from zero."""
    factor = 10.0 ** decimals
    return _round_half_away(value * factor) / factor


def round_to_significant_and_decimal(value: float, sig_figs: int, max_decimals: int) -> float:
    """Round to ``sig_figs`` significant figures, then to ``max_decimals`` places."""
    if value == 0 or not math.isfinite(value):
        raise ValueError(f"cannot round {value} to significant figures")
    abs_value = abs(value)
    magnitude = math.floor(math.log10(abs_value))
    scale = 10.0 ** (sig_figs - magnitude - 1)
    rounded = _round_half_away(abs_value * scale) / scale
    return round_to_decimals(math.copysign(rounded, value), max_decimals)