"""Exchange actions and the EIP-712 hashing of the user-signed ones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .builder import BuilderInfo
from .cancel import CancelRequest, CancelRequestCloid
from .eip712 import Eip712Domain, Eip712Struct, address_bytes, hyperliquid_domain, keccak256
from .modify import ModifyRequest
from .order import OrderRequest

SIGNATURE_CHAIN_ID = 421614
"""Chain id placed in the domain of user-signed actions."""

_U64_MAX = (1 << 64) - 1


def hyperliquid_chain(is_mainnet: bool) -> str:
    """Return the chain name that user-signed actions carry."""
    return "Mainnet" if is_mainnet else "Testnet"


def _hex_chain_id(value: int) -> str:
    return f"0x{value:x}"


def _address_hex(address: bytes | str) -> str:
    return "0x" + address_bytes(address).hex()


def _uint64_word(value: int) -> bytes:
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"value out of range for uint64: {value}")
    return value.to_bytes(32, "big")


def _address_word(address: bytes | str) -> bytes:
    return address_bytes(address).rjust(32, b"\x00")


def _encode(*words: bytes) -> bytes:
    return keccak256(b"".join(words))


class Action:
    """An action sent to the exchange, tagged by its ``type``."""

    action_type: ClassVar[str]

    def _body(self) -> dict[str, Any]:
        return {}

    def to_wire(self) -> dict[str, Any]:
        """Return the wire form: the type tag followed by the fields in order."""
        return {"type": self.action_type, **self._body()}


@dataclass
class UsdSend(Action, Eip712Struct):
    """Transfer of USDC to another address."""

    action_type: ClassVar[str] = "usdSend"
    _TYPE: ClassVar[str] = (
        "HyperliquidTransaction:UsdSend(string hyperliquidChain,string destination,"
        "string amount,uint64 time)"
    )

    signature_chain_id: int
    hyperliquid_chain: str
    destination: str
    amount: str
    time: int

    def _body(self) -> dict[str, Any]:
        return {
            "signatureChainId": _hex_chain_id(self.signature_chain_id),
            "hyperliquidChain": self.hyperliquid_chain,
            "destination": self.destination,
            "amount": self.amount,
            "time": self.time,
        }

    def domain(self) -> Eip712Domain:
        return hyperliquid_domain(self.signature_chain_id)

    def struct_hash(self) -> bytes:
        return _encode(
            keccak256(self._TYPE),
            keccak256(self.hyperliquid_chain),
            keccak256(self.destination),
            keccak256(self.amount),
            _uint64_word(self.time),
        )


@dataclass
class UpdateLeverage(Action):
    """Change of leverage on one asset."""

    action_type: ClassVar[str] = "updateLeverage"

    asset: int
    is_cross: bool
    leverage: int

    def _body(self) -> dict[str, Any]:
        return {"asset": self.asset, "isCross": self.is_cross, "leverage": self.leverage}


@dataclass
class UpdateIsolatedMargin(Action):
    """Change of isolated margin on one asset, in millionths of USDC."""

    action_type: ClassVar[str] = "updateIsolatedMargin"

    asset: int
    is_buy: bool
    ntli: int

    def _body(self) -> dict[str, Any]:
        return {"asset": self.asset, "isBuy": self.is_buy, "ntli": self.ntli}


@dataclass
class BulkOrder(Action):
    """One or more orders placed together."""

    action_type: ClassVar[str] = "order"

    orders: list[OrderRequest]
    grouping: str = "na"
    builder: BuilderInfo | None = None

    def _body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "orders": [order.to_wire() for order in self.orders],
            "grouping": self.grouping,
        }
        if self.builder is not None:
            body["builder"] = self.builder.to_wire()
        return body


@dataclass
class BulkCancel(Action):
    """Cancels by order id."""

    action_type: ClassVar[str] = "cancel"

    cancels: list[CancelRequest]

    def _body(self) -> dict[str, Any]:
        return {"cancels": [cancel.to_wire() for cancel in self.cancels]}


@dataclass
class BulkModify(Action):
    """Replacements of existing orders."""

    action_type: ClassVar[str] = "batchModify"

    modifies: list[ModifyRequest]

    def _body(self) -> dict[str, Any]:
        return {"modifies": [modify.to_wire() for modify in self.modifies]}


@dataclass
class BulkCancelCloid(Action):
    """Cancels by client order id."""

    action_type: ClassVar[str] = "cancelByCloid"

    cancels: list[CancelRequestCloid]

    def _body(self) -> dict[str, Any]:
        return {"cancels": [cancel.to_wire() for cancel in self.cancels]}


@dataclass
class ApproveAgent(Action, Eip712Struct):
    """Approval of an agent key that may trade for the account."""

    action_type: ClassVar[str] = "approveAgent"
    _TYPE: ClassVar[str] = (
        "HyperliquidTransaction:ApproveAgent(string hyperliquidChain,address agentAddress,"
        "string agentName,uint64 nonce)"
    )

    signature_chain_id: int
    hyperliquid_chain: str
    agent_address: str
    agent_name: str | None
    nonce: int

    def _body(self) -> dict[str, Any]:
        return {
            "signatureChainId": _hex_chain_id(self.signature_chain_id),
            "hyperliquidChain": self.hyperliquid_chain,
            "agentAddress": _address_hex(self.agent_address),
            "agentName": self.agent_name,
            "nonce": self.nonce,
        }

    def domain(self) -> Eip712Domain:
        return hyperliquid_domain(self.signature_chain_id)

    def struct_hash(self) -> bytes:
        return _encode(
            keccak256(self._TYPE),
            keccak256(self.hyperliquid_chain),
            _address_word(self.agent_address),
            keccak256(self.agent_name or ""),
            _uint64_word(self.nonce),
        )


@dataclass
class Withdraw3(Action, Eip712Struct):
    """Withdrawal of USDC through the bridge."""

    action_type: ClassVar[str] = "withdraw3"
    _TYPE: ClassVar[str] = (
        "HyperliquidTransaction:Withdraw(string hyperliquidChain,string destination,"
        "string amount,uint64 time)"
    )

    signature_chain_id: int
    hyperliquid_chain: str
    destination: str
    amount: str
    time: int

    def _body(self) -> dict[str, Any]:
        return {
            "signatureChainId": _hex_chain_id(self.signature_chain_id),
            "hyperliquidChain": self.hyperliquid_chain,
            "destination": self.destination,
            "amount": self.amount,
            "time": self.time,
        }

    def domain(self) -> Eip712Domain:
        return hyperliquid_domain(self.signature_chain_id)

    def struct_hash(self) -> bytes:
        return _encode(
            keccak256(self._TYPE),
            keccak256(self.hyperliquid_chain),
            keccak256(self.destination),
            keccak256(self.amount),
            _uint64_word(self.time),
        )


@dataclass
class SpotSend(Action, Eip712Struct):
    """Transfer of a spot token to another address."""

    action_type: ClassVar[str] = "spotSend"
    _TYPE: ClassVar[str] = (
        "HyperliquidTransaction:SpotSend(string hyperliquidChain,string destination,"
        "string token,string amount,uint64 time)"
    )

    signature_chain_id: int
    hyperliquid_chain: str
    destination: str
    token: str
    amount: str
    time: int

    def _body(self) -> dict[str, Any]:
        return {
            "signatureChainId": _hex_chain_id(self.signature_chain_id),
            "hyperliquidChain": self.hyperliquid_chain,
            "destination": self.destination,
            "token": self.token,
            "amount": self.amount,
            "time": self.time,
        }

    def domain(self) -> Eip712Domain:
        return hyperliquid_domain(self.signature_chain_id)

    def struct_hash(self) -> bytes:
        return _encode(
            keccak256(self._TYPE),
            keccak256(self.hyperliquid_chain),
            keccak256(self.destination),
            keccak256(self.token),
            keccak256(self.amount),
            _uint64_word(self.time),
        )


@dataclass
class ClassTransfer:
    """Movement of USDC, in millionths, between spot and perp balances."""

    usdc: int
    to_perp: bool

    def to_wire(self) -> dict[str, Any]:
        return {"usdc": self.usdc, "toPerp": self.to_perp}


@dataclass
class SpotUser(Action):
    """A spot-account action holding a class transfer."""

    action_type: ClassVar[str] = "spotUser"

    class_transfer: ClassTransfer

    def _body(self) -> dict[str, Any]:
        return {"classTransfer": self.class_transfer.to_wire()}


@dataclass
class VaultTransfer(Action):
    """Deposit to or withdrawal from a vault."""

    action_type: ClassVar[str] = "vaultTransfer"

    vault_address: str
    is_deposit: bool
    usd: int

    def _body(self) -> dict[str, Any]:
        return {
            "vaultAddress": _address_hex(self.vault_address),
            "isDeposit": self.is_deposit,
            "usd": self.usd,
        }


@dataclass
class SetReferrer(Action):
    """Registration of a referral code."""

    action_type: ClassVar[str] = "setReferrer"

    code: str

    def _body(self) -> dict[str, Any]:
        return {"code": self.code}


@dataclass
class EvmUserModify(Action):
    """Switch between small and big EVM blocks."""

    action_type: ClassVar[str] = "evmUserModify"

    using_big_blocks: bool

    def _body(self) -> dict[str, Any]:
        return {"usingBigBlocks": self.using_big_blocks}


@dataclass
class ApproveBuilderFee(Action, Eip712Struct):
    """Approval of the largest fee a builder may charge."""

    action_type: ClassVar[str] = "approveBuilderFee"
    _TYPE: ClassVar[str] = (
        "HyperliquidTransaction:ApproveBuilderFee(string hyperliquidChain,string maxFeeRate,"
        "address builder,uint64 nonce)"
    )

    signature_chain_id: int
    hyperliquid_chain: str
    builder: str
    max_fee_rate: str
    nonce: int

    def _body(self) -> dict[str, Any]:
        return {
            "signatureChainId": _hex_chain_id(self.signature_chain_id),
            "hyperliquidChain": self.hyperliquid_chain,
            "builder": _address_hex(self.builder),
            "maxFeeRate": self.max_fee_rate,
            "nonce": self.nonce,
        }

    def domain(self) -> Eip712Domain:
        return hyperliquid_domain(self.signature_chain_id)

    def struct_hash(self) -> bytes:
        return _encode(
            keccak256(self._TYPE),
            keccak256(self.hyperliquid_chain),
            keccak256(self.max_fee_rate),
            _address_word(self.builder),
            _uint64_word(self.nonce),
        )


@dataclass
class ScheduleCancel(Action):
    """Cancel of all orders at a given time, or removal of that schedule."""

    action_type: ClassVar[str] = "scheduleCancel"

    time: int | None = None

    def _body(self) -> dict[str, Any]:
        return {} if self.time is None else {"time": self.time}


@dataclass
class ClaimRewards(Action):
    """Claim of accrued rewards."""

    action_type: ClassVar[str] = "claimRewards"