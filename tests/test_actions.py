import pytest

from hyperliquid_kit.actions import (
    SIGNATURE_CHAIN_ID,
    ApproveAgent,
    ApproveBuilderFee,
    BulkCancel,
    BulkCancelCloid,
    BulkModify,
    BulkOrder,
    ClaimRewards,
    ClassTransfer,
    EvmUserModify,
    ScheduleCancel,
    SetReferrer,
    SpotSend,
    SpotUser,
    UpdateIsolatedMargin,
    UpdateLeverage,
    UsdSend,
    VaultTransfer,
    Withdraw3,
    hyperliquid_chain,
)
from hyperliquid_kit.builder import BuilderInfo
from hyperliquid_kit.cancel import CancelRequest, CancelRequestCloid
from hyperliquid_kit.eip712 import hyperliquid_domain
from hyperliquid_kit.errors import GenericParseError
from hyperliquid_kit.modify import ModifyRequest
from hyperliquid_kit.order import Limit, OrderRequest

ADDRESS = "0x1234567890123456789012345678901234567890"
MIXED_CASE = "0xABCDEF0123456789abcdef0123456789ABCDEF01"


def _order():
    return OrderRequest(
        asset=1, is_buy=True, limit_px="2000.0", sz="3.5", order_type=Limit(tif="Ioc")
    )


def _builder_fee(chain="Mainnet", builder=ADDRESS):
    return ApproveBuilderFee(
        signature_chain_id=421614,
        hyperliquid_chain=chain,
        builder=builder,
        max_fee_rate="0.001%",
        nonce=1583838,
    )


def test_hyperliquid_chain_names():
    assert hyperliquid_chain(True) == "Mainnet"
    assert hyperliquid_chain(False) == "Testnet"


def test_signature_chain_id_is_written_as_hex():
    wire = _builder_fee().to_wire()
    assert wire["signatureChainId"] == "0x66eee"
    assert int(wire["signatureChainId"], 16) == SIGNATURE_CHAIN_ID


def test_claim_rewards_wire_is_only_the_tag():
    assert ClaimRewards().to_wire() == {"type": "claimRewards"}


def test_bulk_order_wire_holds_orders_and_grouping():
    order = _order()
    wire = BulkOrder(orders=[order], grouping="na").to_wire()
    assert wire["type"] == "order"
    assert wire["orders"] == [order.to_wire()]
    assert wire["grouping"] == "na"
    assert "builder" not in wire


def test_bulk_order_with_builder():
    builder = BuilderInfo(builder=ADDRESS, fee=10)
    wire = BulkOrder(orders=[_order()], builder=builder).to_wire()
    assert wire["builder"] == builder.to_wire()


@pytest.mark.parametrize(
    "action",
    [
        UpdateLeverage(asset=3, is_cross=True, leverage=5),
        UpdateIsolatedMargin(asset=3, is_buy=True, ntli=1_000_000),
        BulkCancel(cancels=[CancelRequest(asset=1, oid=82382)]),
        BulkCancelCloid(cancels=[CancelRequestCloid(asset=1, cloid="0xabc")]),
        SetReferrer(code="CODE"),
        EvmUserModify(using_big_blocks=True),
        ScheduleCancel(time=1583838),
        _builder_fee(),
    ],
)
def test_type_tag_comes_first(action):
    wire = action.to_wire()
    assert next(iter(wire)) == "type"
    assert wire["type"] == type(action).action_type


def test_cancel_wire_uses_cancel_entries():
    cancels = [CancelRequest(asset=1, oid=82382), CancelRequest(asset=2, oid=7)]
    wire = BulkCancel(cancels=cancels).to_wire()
    assert wire["cancels"] == [c.to_wire() for c in cancels]


def test_modify_wire_uses_modify_entries():
    modify = ModifyRequest(oid=9, order=_order())
    wire = BulkModify(modifies=[modify]).to_wire()
    assert wire["modifies"] == [modify.to_wire()]


def test_update_leverage_field_values():
    wire = UpdateLeverage(asset=4, is_cross=False, leverage=20).to_wire()
    assert (wire["asset"], wire["isCross"], wire["leverage"]) == (4, False, 20)


def test_spot_user_nests_class_transfer():
    transfer = ClassTransfer(usdc=1_500_000, to_perp=True)
    wire = SpotUser(class_transfer=transfer).to_wire()
    assert wire["classTransfer"] == transfer.to_wire()
    assert wire["classTransfer"]["usdc"] == 1_500_000
    assert wire["classTransfer"]["toPerp"] is True


def test_vault_transfer_lowercases_address():
    wire = VaultTransfer(vault_address=MIXED_CASE, is_deposit=True, usd=5).to_wire()
    assert wire["vaultAddress"] == MIXED_CASE.lower()
    assert wire["isDeposit"] is True


def test_schedule_cancel_without_time_omits_field():
    assert "time" not in ScheduleCancel().to_wire()
    assert ScheduleCancel(time=42).to_wire()["time"] == 42


def test_approve_agent_wire_keeps_null_name():
    agent = ApproveAgent(421614, "Testnet", ADDRESS, None, 1)
    wire = agent.to_wire()
    assert "agentName" in wire
    assert wire["agentName"] is None
    assert wire["agentAddress"] == ADDRESS


def test_domain_uses_signature_chain_id():
    assert _builder_fee().domain() == hyperliquid_domain(421614)
    send = UsdSend(1, "Mainnet", ADDRESS, "1", 2)
    assert send.domain() == hyperliquid_domain(1)


def test_struct_hash_depends_on_chain():
    mainnet = _builder_fee("Mainnet")
    testnet = _builder_fee("Testnet")
    assert len(mainnet.struct_hash()) == 32
    assert mainnet.struct_hash() != testnet.struct_hash()
    assert mainnet.signing_hash() != testnet.signing_hash()


def test_struct_hash_is_deterministic():
    first = ApproveBuilderFee(421614, "Mainnet", ADDRESS, "0.001%", 1583838).struct_hash()
    second = ApproveBuilderFee(421614, "Mainnet", ADDRESS, "0.001%", 1583838).struct_hash()
    assert len(first) == 32
    assert first == second


def test_address_case_does_not_change_hash():
    lower = _builder_fee(builder=MIXED_CASE.lower())
    mixed = _builder_fee(builder=MIXED_CASE)
    assert lower.struct_hash() == mixed.struct_hash()


def test_usd_send_and_withdraw_hash_differently():
    fields = (421614, "Mainnet", ADDRESS, "10", 1583838)
    assert UsdSend(*fields).struct_hash() != Withdraw3(*fields).struct_hash()
    assert UsdSend(*fields).to_wire()["amount"] == Withdraw3(*fields).to_wire()["amount"]


def test_spot_send_hash_depends_on_token():
    first = SpotSend(421614, "Mainnet", ADDRESS, "USDC:0x1", "1", 7)
    second = SpotSend(421614, "Mainnet", ADDRESS, "PURR:0x2", "1", 7)
    assert first.struct_hash() != second.struct_hash()
    assert first.to_wire()["token"] == "USDC:0x1"


def test_missing_agent_name_hashes_as_empty():
    unnamed = ApproveAgent(421614, "Mainnet", ADDRESS, None, 5)
    empty = ApproveAgent(421614, "Mainnet", ADDRESS, "", 5)
    named = ApproveAgent(421614, "Mainnet", ADDRESS, "bot", 5)
    assert unnamed.struct_hash() == empty.struct_hash()
    assert unnamed.struct_hash() != named.struct_hash()


def test_time_changes_signing_hash():
    first = UsdSend(421614, "Mainnet", ADDRESS, "1", 1)
    second = UsdSend(421614, "Mainnet", ADDRESS, "1", 2)
    assert first.signing_hash() != second.signing_hash()


def test_invalid_address_is_rejected():
    with pytest.raises(GenericParseError):
        _builder_fee(builder="0x1234").struct_hash()
    with pytest.raises(GenericParseError):
        VaultTransfer(vault_address="not an address", is_deposit=False, usd=1).to_wire()


def test_negative_time_is_rejected():
    with pytest.raises(ValueError):
        UsdSend(421614, "Mainnet", ADDRESS, "1", -1).struct_hash()