"""Exception hierarchy for the package."""

from __future__ import annotations


class HyperliquidError(Exception):
    """Base class for every error raised by this package."""

    default_message = "Hyperliquid error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class _DetailError(HyperliquidError):
    """An error whose message is a fixed prefix followed by a detail."""

    prefix = "Error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class ClientRequestError(HyperliquidError):
    """The server rejected a request with a 4xx status."""

    def __init__(
        self,
        status_code: int,
        error_message: str,
        error_code: int | None = None,
        error_data: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        self.error_data = error_data
        super().__init__(
            f"Client error: status code: {status_code}, error code: {error_code}, "
            f"error message: {error_message}, error data: {error_data}"
        )


class ServerRequestError(HyperliquidError):
    """The server failed with a 5xx status."""

    def __init__(self, status_code: int, error_message: str) -> None:
        self.status_code = status_code
        self.error_message = error_message
        super().__init__(
            f"Server error: status code: {status_code}, error message: {error_message}"
        )


class GenericRequestError(_DetailError):
    prefix = "Generic request error"


class ChainNotAllowedError(HyperliquidError):
    default_message = "Chain type not allowed for this function"


class AssetNotFoundError(HyperliquidError):
    default_message = "Asset not found"


class Eip712Error(_DetailError):
    prefix = "Error from Eip712 struct"


class JsonParseError(_DetailError, ValueError):
    prefix = "Json parse error"


class GenericParseError(_DetailError, ValueError):
    prefix = "Generic parse error"


class WalletError(_DetailError):
    prefix = "Wallet error"


class WebsocketError(_DetailError):
    prefix = "Websocket error"


class SubscriptionNotFoundError(HyperliquidError):
    default_message = "Subscription not found"


class WsManagerNotFoundError(HyperliquidError):
    default_message = "WS manager not instantiated"


class WsSendError(_DetailError):
    prefix = "WS send error"


class ReaderDataNotFoundError(HyperliquidError):
    default_message = "Reader data not found"


class GenericReaderError(_DetailError):
    prefix = "Reader error"


class ReaderTextConversionError(_DetailError):
    prefix = "Reader text conversion error"


class OrderTypeNotFoundError(HyperliquidError):
    default_message = "Order type not found"


class RandGenError(_DetailError):
    prefix = "Issue with generating random data"


class PrivateKeyParseError(_DetailError, ValueError):
    prefix = "Private key parse error"


class UserEventsError(HyperliquidError):
    default_message = "Cannot subscribe to multiple user events"


class RmpParseError(_DetailError, ValueError):
    prefix = "Rmp parse error"


class FloatStringParseError(HyperliquidError, ValueError):
    default_message = "Invalid input number"


class NoCloidError(HyperliquidError):
    default_message = "No cloid found in order request when expected"


class SignatureFailureError(_DetailError):
    prefix = "ECDSA signature failed"


class VaultAddressNotFoundError(HyperliquidError):
    default_message = "Vault address not found"