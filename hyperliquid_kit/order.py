"""Order types, in client form and in wire form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union
from uuid import UUID

from .errors import JsonParseError, OrderTypeNotFoundError

_MISSING = object()


def _field(data: Mapping[str, Any], *names: str, default: Any = _MISSING) -> Any:
    for name in names:
        if name in data:
            return data[name]
    if default is _MISSING:
        raise JsonParseError(f"missing field {names[0]}")
    return default


@dataclass(frozen=True)
class Limit:
    """A limit order with its time-in-force."""

    tif: str

    def to_wire(self) -> dict[str, Any]:
        return {"limit": {"tif": self.tif}}


@dataclass(frozen=True)
class Trigger:
    """A take-profit or stop-loss trigger order."""

    is_market: bool
    trigger_px: str
    tpsl: str

    def to_wire(self) -> dict[str, Any]:
        return {
            "trigger": {
                "isMarket": self.is_market,
                "triggerPx": self.trigger_px,
                "tpsl": self.tpsl,
            }
        }


OrderType = Union[Limit, Trigger]


def order_type_from_wire(data: Mapping[str, Any]) -> OrderType:
    """Build a Limit or Trigger from its tagged wire form."""
    if isinstance(data, Mapping):
        if "limit" in data:
            return Limit(tif=_field(data["limit"], "tif"))
        if "trigger" in data:
            body = data["trigger"]
            return Trigger(
                is_market=_field(body, "isMarket"),
                trigger_px=_field(body, "triggerPx"),
                tpsl=_field(body, "tpsl"),
            )
    raise OrderTypeNotFoundError()


@dataclass(frozen=True)
class OrderRequest:
    """An order as it is sent to the exchange."""

    asset: int
    is_buy: bool
    limit_px: str
    sz: str
    order_type: OrderType
    reduce_only: bool = False
    cloid: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the compact wire form, keys in signing order."""
        wire: dict[str, Any] = {
            "a": self.asset,
            "b": self.is_buy,
            "p": self.limit_px,
            "s": self.sz,
            "r": self.reduce_only,
            "t": self.order_type.to_wire(),
        }
        if self.cloid is not None:
            wire["c"] = self.cloid
        return wire

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> OrderRequest:
        """Build from the compact or the long-named wire form."""
        return cls(
            asset=_field(data, "a", "asset"),
            is_buy=_field(data, "b", "isBuy"),
            limit_px=_field(data, "p", "limitPx"),
            sz=_field(data, "s", "sz"),
            reduce_only=_field(data, "r", "reduceOnly", default=False),
            order_type=order_type_from_wire(_field(data, "t", "orderType")),
            cloid=_field(data, "c", "cloid", default=None),
        )


@dataclass
class ClientLimit:
    """Limit settings of an order as the caller gives them."""

    tif: str


@dataclass
class ClientTrigger:
    """Trigger settings of an order as the caller gives them."""

    is_market: bool
    trigger_px: float
    tpsl: str


@dataclass
class ClientOrderRequest:
    """An order keyed by coin name, with numeric prices and sizes."""

    asset: str
    is_buy: bool
    reduce_only: bool
    limit_px: float
    sz: float
    order_type: ClientLimit | ClientTrigger
    cloid: UUID | None = None


@dataclass
class MarketOrderParams:
    """Parameters of an order that opens a position at market."""

    asset: str
    is_buy: bool
    sz: float
    px: float | None = None
    slippage: float | None = None
    cloid: UUID | None = None
    wallet: Any = None


@dataclass
class MarketCloseParams:
    """Parameters of an order that closes a position at market."""

    asset: str
    sz: float | None = None
    px: float | None = None
    slippage: float | None = None
    cloid: UUID | None = None
    wallet: Any = None