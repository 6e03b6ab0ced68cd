"""Typed actions, hashing, payloads and reply parsing for the Hyperliquid exchange API."""

__version__ = "0.6.0"

__all__ = [
    "actions",
    "builder",
    "cancel",
    "consts",
    "eip712",
    "errors",
    "hashing",
    "modify",
    "order",
    "payload",
    "pricing",
    "responses",
    "rounding",
]