"""Parsing of the exchange's replies."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .errors import JsonParseError


class SimpleStatus(Enum):
    """Statuses that carry no data."""

    SUCCESS = "success"
    WAITING_FOR_FILL = "waitingForFill"
    WAITING_FOR_TRIGGER = "waitingForTrigger"


@dataclass(frozen=True)
class ErrorStatus:
    """An action that the exchange refused."""

    message: str


@dataclass(frozen=True)
class RestingOrder:
    """An order now resting on the book."""

    oid: int


@dataclass(frozen=True)
class FilledOrder:
    """An order that filled at once."""

    total_sz: str
    avg_px: str
    oid: int


Status = Union[SimpleStatus, ErrorStatus, RestingOrder, FilledOrder]


@dataclass(frozen=True)
class ExchangeResponse:
    """A successful reply, with one status per submitted item if any."""

    response_type: str
    statuses: tuple[Status, ...] | None = None


@dataclass(frozen=True)
class ExchangeError:
    """A reply in which the exchange rejected the request as a whole."""

    message: str


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping) or key not in data:
        raise JsonParseError(f"missing field {key}")
    return data[key]


def _load(data: Any) -> Any:
    if isinstance(data, (str, bytes, bytearray)):
        try:
            return json.loads(data)
        except json.JSONDecodeError as exc:
            raise JsonParseError(str(exc)) from None
    return data


def parse_status(data: Any) -> Status:
    """Parse one entry of a reply's status list."""
    if isinstance(data, str):
        try:
            return SimpleStatus(data)
        except ValueError:
            raise JsonParseError(f"unknown status: {data}") from None
    if isinstance(data, Mapping) and len(data) == 1:
        ((key, value),) = data.items()
        if key == "error" and isinstance(value, str):
            return ErrorStatus(value)
        if key == "resting":
            return RestingOrder(oid=_require(value, "oid"))
        if key == "filled":
            return FilledOrder(
                total_sz=_require(value, "totalSz"),
                avg_px=_require(value, "avgPx"),
                oid=_require(value, "oid"),
            )
        if key in {s.value for s in SimpleStatus} and value is None:
            return SimpleStatus(key)
    raise JsonParseError(f"unknown status: {data!r}")


def parse_response_status(data: Any) -> ExchangeResponse | ExchangeError:
    """Parse a whole reply, given as JSON text or as decoded data."""
    data = _load(data)
    status = _require(data, "status")
    response = _require(data, "response")
    if status == "err":
        if not isinstance(response, str):
            raise JsonParseError("error response must be a string")
        return ExchangeError(response)
    if status != "ok":
        raise JsonParseError(f"unknown response status: {status}")
    response_type = _require(response, "type")
    body = response.get("data")
    if body is None:
        return ExchangeResponse(response_type)
    statuses = _require(body, "statuses")
    if not isinstance(statuses, list):
        raise JsonParseError("statuses must be a list")
    return ExchangeResponse(response_type, tuple(parse_status(item) for item in statuses))