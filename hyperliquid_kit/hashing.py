"""Hashing of exchange actions into the connection id that is signed."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import msgpack

from .actions import Action
from .eip712 import address_bytes, keccak256
from .errors import RmpParseError

_U64_LIMIT = 1 << 64


def pack_action(action: Action | Mapping[str, Any]) -> bytes:
    """Return the MessagePack encoding of an action's wire form, keys by name."""
    wire = action.to_wire() if isinstance(action, Action) else action
    try:
        return msgpack.packb(wire, use_bin_type=True)
    except (TypeError, ValueError, OverflowError) as exc:
        raise RmpParseError(str(exc)) from None


def action_hash(
    action: Action | Mapping[str, Any],
    timestamp: int,
    vault_address: bytes | str | None = None,
) -> bytes:
    """Return the Keccak-256 connection id of an action, nonce and optional vault."""
    if not 0 <= timestamp < _U64_LIMIT:
        raise ValueError(f"timestamp out of range for uint64: {timestamp}")
    data = pack_action(action) + timestamp.to_bytes(8, "big")
    if vault_address is None:
        data += b"\x00"
    else:
        data += b"\x01" + address_bytes(vault_address)
    return keccak256(data)