"""Requests that replace an existing order."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import JsonParseError
from .order import ClientOrderRequest, OrderRequest


@dataclass
class ClientModifyRequest:
    """Replacement of order ``oid`` by a client order."""

    oid: int
    order: ClientOrderRequest


@dataclass(frozen=True)
class ModifyRequest:
    """Replacement of order ``oid`` as sent to the exchange."""

    oid: int
    order: OrderRequest

    def to_wire(self) -> dict[str, Any]:
        return {"oid": self.oid, "order": self.order.to_wire()}

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> ModifyRequest:
        try:
            oid, order = data["oid"], data["order"]
        except KeyError as exc:
            raise JsonParseError(f"missing field {exc.args[0]}") from None
        return cls(oid=oid, order=OrderRequest.from_wire(order))