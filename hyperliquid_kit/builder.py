"""Builder fee information attached to orders."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import JsonParseError


@dataclass
class BuilderInfo:
    """A builder address and the fee it charges, in tenths of a basis point."""

    builder: str = ""
    fee: int = 0

    def to_wire(self) -> dict[str, Any]:
        """Return the compact wire form."""
        return {"b": self.builder, "f": self.fee}

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> BuilderInfo:
        """Build from the compact wire form."""
        try:
            return cls(builder=data["b"], fee=data["f"])
        except KeyError as exc:
            raise JsonParseError(f"missing field {exc.args[0]}") from None