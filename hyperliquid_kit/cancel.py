"""Cancel requests, by order id or by client order id."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from .errors import JsonParseError


def _field(data: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if name in data:
            return data[name]
    raise JsonParseError(f"missing field {names[0]}")


@dataclass
class ClientCancelRequest:
    """Cancel of an order id, keyed by coin name."""

    asset: str
    oid: int


@dataclass(frozen=True)
class CancelRequest:
    """Cancel of an order id as sent to the exchange."""

    asset: int
    oid: int

    def to_wire(self) -> dict[str, Any]:
        return {"a": self.asset, "o": self.oid}

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> CancelRequest:
        return cls(asset=_field(data, "a", "asset"), oid=_field(data, "o", "oid"))


@dataclass
class ClientCancelRequestCloid:
    """Cancel of a client order id, keyed by coin name."""

    asset: str
    cloid: UUID


@dataclass(frozen=True)
class CancelRequestCloid:
    """Cancel of a client order id as sent to the exchange."""

    asset: int
    cloid: str

    def to_wire(self) -> dict[str, Any]:
        return {"asset": self.asset, "cloid": self.cloid}

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> CancelRequestCloid:
        return cls(asset=_field(data, "asset"), cloid=_field(data, "cloid"))