import pytest

from hyperliquid_kit.eip712 import (
    Eip712Domain,
    Eip712Struct,
    address_bytes,
    hyperliquid_domain,
    keccak256,
)
from hyperliquid_kit.errors import GenericParseError


class _Fixed(Eip712Struct):
    def __init__(self, digest, chain_id=421614):
        self.digest = digest
        self.chain_id = chain_id

    def domain(self):
        return hyperliquid_domain(self.chain_id)

    def struct_hash(self):
        return self.digest


def test_keccak_of_empty_input():
    assert keccak256(b"") == bytes.fromhex(
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_keccak_accepts_text():
    assert keccak256("abc") == keccak256(b"abc")
    assert len(keccak256("abc")) == 32


def test_address_bytes_from_hex():
    text = "0x1234567890123456789012345678901234567890"
    assert address_bytes(text) == bytes.fromhex(text[2:])
    assert address_bytes(text.upper().replace("0X", "0x")) == bytes.fromhex(text[2:])


def test_address_bytes_passes_raw_bytes():
    raw = bytes(range(20))
    assert address_bytes(raw) == raw


@pytest.mark.parametrize("bad", ["0x1234", "0xzz" + "00" * 19, bytes(19)])
def test_address_bytes_rejects_bad_input(bad):
    with pytest.raises(GenericParseError):
        address_bytes(bad)


def test_hyperliquid_domain_fields():
    domain = hyperliquid_domain(421614)
    assert domain.name == "HyperliquidSignTransaction"
    assert domain.version == "1"
    assert domain.chain_id == 421614
    assert address_bytes(domain.verifying_contract) == bytes(20)


def test_domain_hash_depends_on_fields():
    base = hyperliquid_domain(421614)
    assert len(base.hash_struct()) == 32
    assert base.hash_struct() == hyperliquid_domain(421614).hash_struct()
    assert base.hash_struct() != hyperliquid_domain(1337).hash_struct()
    renamed = Eip712Domain("Other", "1", 421614)
    assert renamed.hash_struct() != base.hash_struct()


def test_signing_hash_is_deterministic_and_sensitive():
    one = keccak256(b"one")
    two = keccak256(b"two")
    first = _Fixed(one).signing_hash()
    assert len(first) == 32
    assert first == _Fixed(keccak256(b"one")).signing_hash()
    assert first != _Fixed(two).signing_hash()
    assert first != _Fixed(one, chain_id=1).signing_hash()
    assert first != one
    assert first != hyperliquid_domain(421614).hash_struct()


def test_struct_base_is_abstract():
    with pytest.raises(TypeError):
        Eip712Struct()