# hyperliquid_kit

Building blocks for the Hyperliquid exchange API: typed order, cancel and
modify requests, the exchange action types with their wire form, the
msgpack-based action hash used as the connection id for L1 signing, EIP-712
hashes for user-signed actions, price rounding helpers, the JSON body posted
to `/exchange`, and parsing of the exchange's replies.

## Installation

```
pip install hyperliquid_kit
```

To run the test suite:

```
pip install "hyperliquid_kit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `hyperliquid_kit.consts` | `MAINNET_API_URL`, `TESTNET_API_URL`, `LOCAL_API_URL`, `EPSILON`, `INF_BPS` |
| `hyperliquid_kit.errors` | `HyperliquidError` and its subclasses |
| `hyperliquid_kit.eip712` | `keccak256`, `address_bytes`, `Eip712Domain`, `Eip712Struct`, `hyperliquid_domain` |
| `hyperliquid_kit.order` | `OrderRequest`, `Limit`, `Trigger`, `order_type_from_wire`, `ClientOrderRequest`, `ClientLimit`, `ClientTrigger`, `MarketOrderParams`, `MarketCloseParams` |
| `hyperliquid_kit.cancel` | `CancelRequest`, `CancelRequestCloid`, `ClientCancelRequest`, `ClientCancelRequestCloid` |
| `hyperliquid_kit.modify` | `ModifyRequest`, `ClientModifyRequest` |
| `hyperliquid_kit.builder` | `BuilderInfo` |
| `hyperliquid_kit.actions` | every exchange action (`BulkOrder`, `BulkCancel`, `BulkCancelCloid`, `BulkModify`, `UsdSend`, `Withdraw3`, `SpotSend`, `ApproveAgent`, `ApproveBuilderFee`, ...), `hyperliquid_chain`, `SIGNATURE_CHAIN_ID` |
| `hyperliquid_kit.responses` | `parse_response_status`, `parse_status` and the status types |
| `hyperliquid_kit.rounding` | `round_to_decimals`, `round_to_significant_and_decimal` |
| `hyperliquid_kit.pricing` | `slippage_price`, `max_price_decimals`, `usdc_units`, `DEFAULT_SLIPPAGE` |
| `hyperliquid_kit.hashing` | `pack_action`, `action_hash` |
| `hyperliquid_kit.payload` | `Signature`, `exchange_payload` |

## Hashing an order action

An L1 action's wire form is packed with msgpack, followed by the nonce as
eight big-endian bytes and then `0x00`, or `0x01` and the 20-byte vault
address, and hashed with Keccak-256. The result is the connection id that
gets signed.

```python
from hyperliquid_kit.actions import BulkOrder
from hyperliquid_kit.hashing import action_hash
from hyperliquid_kit.order import Limit, OrderRequest

order = OrderRequest(
    asset=1,
    is_buy=True,
    limit_px="2000.0",
    sz="3.5",
    reduce_only=False,
    order_type=Limit(tif="Ioc"),
    cloid=None,
)
action = BulkOrder(orders=[order], grouping="na", builder=None)

connection_id = action_hash(action, 1583838, None)
print(connection_id.hex())
```

`action.to_wire()` gives the JSON-ready dictionary, with the `type` tag
first and the fields in the order the hash depends on. Orders and cancels by
order id use the compact keys (`a`, `b`, `p`, `s`, `r`, `t`, `c`; `a`, `o`);
their `from_wire` class methods accept both the compact and the long names.

## User-signed actions

`UsdSend`, `Withdraw3`, `SpotSend`, `ApproveAgent` and `ApproveBuilderFee`
are EIP-712 structures. Each provides `domain()`, `struct_hash()` and
`signing_hash()`; the last is the digest to sign:

```python
from hyperliquid_kit.actions import SIGNATURE_CHAIN_ID, UsdSend, hyperliquid_chain

send = UsdSend(
    signature_chain_id=SIGNATURE_CHAIN_ID,
    hyperliquid_chain=hyperliquid_chain(True),
    destination="0x1234567890123456789012345678901234567890",
    amount="1",
    time=1583838,
)
digest = send.signing_hash()
```

## Building the request body

Once a signature has been produced, `Signature.from_hex` reads its 65 bytes
(a parity byte of 0 or 1 becomes 27 or 28) and `exchange_payload` assembles
the body for `/exchange`, with `r`, `s` and `v` in the form the server reads:

```python
from hyperliquid_kit.payload import Signature, exchange_payload

signature = Signature.from_hex(signature_hex)  # from your own signer
body = exchange_payload(action, signature, 1583838, None)
```

## Reading replies

`parse_response_status` takes the reply as JSON text or decoded data. It
returns an `ExchangeResponse` for an `"ok"` status, with one entry per
submitted item in `statuses` (`SimpleStatus`, `ErrorStatus`, `RestingOrder`
or `FilledOrder`), or an `ExchangeError` for an `"err"` status. A reply it
cannot read raises `JsonParseError`.

## Prices

Market orders are placed as immediate-or-cancel limit orders at a price moved
by the slippage (5% by default) and rounded to five significant figures and
to the decimals the asset allows: 6 minus the size decimals for perps, 8 minus
them for spot assets (index 10000 and above).

```python
from hyperliquid_kit.pricing import slippage_price, usdc_units
from hyperliquid_kit.rounding import round_to_decimals

px = slippage_price(2000.0, True, 0.05, 2, 1)   # 2100.0
sz = round_to_decimals(0.123456, 2)             # 0.12
units = usdc_units(1.5)                         # 1500000
```

Rounding is half away from zero.

## Errors

Every error defined by the package derives from
`hyperliquid_kit.errors.HyperliquidError`. The modules raise
`JsonParseError` for wire data or replies they cannot read,
`OrderTypeNotFoundError` for an order type that is neither `limit` nor
`trigger`, `GenericParseError` for a malformed address or signature, and
`RmpParseError` when an action cannot be packed. Out-of-range numbers, such
as a negative nonce, raise `ValueError`.

## What this package does not do

It makes no network requests: there is no HTTP or websocket client, no
queries for metadata, mids or user state, and no lookup of coin names to
asset indices. `ClientOrderRequest`, `ClientCancelRequest` and the market
order parameter classes only hold the caller's values. It also holds no keys
and does not produce ECDSA signatures; it computes the digests to sign and
lays out a signature made elsewhere.