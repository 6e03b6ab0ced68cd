"""Signatures and the request body posted to the exchange endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .actions import Action
from .eip712 import address_bytes
from .errors import GenericParseError

_U256_LIMIT = 1 << 256


@dataclass(frozen=True)
class Signature:
    """An ECDSA signature with its recovery byte (27 or 28)."""

    r: int
    s: int
    v: int

    def __post_init__(self) -> None:
        if not (0 <= self.r < _U256_LIMIT and 0 <= self.s < _U256_LIMIT):
            raise GenericParseError("signature r and s must be 256-bit values")
        if self.v not in (27, 28):
            raise GenericParseError(f"invalid recovery byte: {self.v}")

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON form sent with an action."""
        return {"r": f"0x{self.r:x}", "s": f"0x{self.s:x}", "v": self.v}

    @classmethod
    def from_hex(cls, text: str) -> Signature:
        """Parse 65 bytes of hex: r, s and a parity or recovery byte."""
        body = text[2:] if text[:2].lower() == "0x" else text
        try:
            raw = bytes.fromhex(body)
        except ValueError:
            raise GenericParseError(f"invalid signature hex: {text}") from None
        if len(raw) != 65:
            raise GenericParseError(f"signature must be 65 bytes, got {len(raw)}")
        v = raw[64]
        if v in (0, 1):
            v += 27
        return cls(
            r=int.from_bytes(raw[:32], "big"),
            s=int.from_bytes(raw[32:64], "big"),
            v=v,
        )

    def __str__(self) -> str:
        return f"0x{self.r:064x}{self.s:064x}{self.v:02x}"


def exchange_payload(
    action: Action | Mapping[str, Any],
    signature: Signature,
    nonce: int,
    vault_address: bytes | str | None = None,
) -> dict[str, Any]:
    """Return the body posted to the exchange endpoint."""
    wire = action.to_wire() if isinstance(action, Action) else dict(action)
    return {
        "action": wire,
        "signature": signature.to_wire(),
        "nonce": nonce,
        "vaultAddress": None
        if vault_address is None
        else "0x" + address_bytes(vault_address).hex(),
    }