"""EIP-712 typed-data hashing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from Crypto.Hash import keccak

from .errors import GenericParseError

ZERO_ADDRESS = "0x" + "00" * 20

_DOMAIN_TYPE = (
    "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
)


def keccak256(data: bytes | str) -> bytes:
    """Return the Keccak-256 digest of bytes, or of a string as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def address_bytes(address: bytes | str) -> bytes:
    """Return the 20 raw bytes of an address given as hex text or bytes."""
    if isinstance(address, (bytes, bytearray)):
        raw = bytes(address)
    else:
        text = address[2:] if address[:2].lower() == "0x" else address
        try:
            raw = bytes.fromhex(text)
        except ValueError:
            raise GenericParseError(f"invalid address: {address}") from None
    if len(raw) != 20:
        raise GenericParseError(f"address must be 20 bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class Eip712Domain:
    """The domain separator fields of an EIP-712 signature."""

    name: str
    version: str
    chain_id: int
    verifying_contract: str = ZERO_ADDRESS

    def hash_struct(self) -> bytes:
        """Return the domain separator hash."""
        encoded = b"".join(
            (
                keccak256(_DOMAIN_TYPE),
                keccak256(self.name),
                keccak256(self.version),
                self.chain_id.to_bytes(32, "big"),
                address_bytes(self.verifying_contract).rjust(32, b"\x00"),
            )
        )
        return keccak256(encoded)


def hyperliquid_domain(chain_id: int) -> Eip712Domain:
    """Return the domain used for user-signed transactions."""
    return Eip712Domain(
        name="HyperliquidSignTransaction",
        version="1",
        chain_id=chain_id,
        verifying_contract=ZERO_ADDRESS,
    )


class Eip712Struct(ABC):
    """A typed structure that can be signed under EIP-712."""

    @abstractmethod
    def domain(self) -> Eip712Domain:
        """Return the signing domain."""

    @abstractmethod
    def struct_hash(self) -> bytes:
        """Return the hash of the encoded structure."""

    def signing_hash(self) -> bytes:
        """Return the digest that is signed."""
        return keccak256(b"\x19\x01" + self.domain().hash_struct() + self.struct_hash())