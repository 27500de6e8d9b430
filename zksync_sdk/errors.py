"""Custom exceptions for the zkSync Python SDK."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(eq=False)
class ZkSyncSDKError(Exception):
    """Base exception raised by the zkSync SDK."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @classmethod
    def validation_error(cls, message: str, **details: Any) -> "ZkSyncSDKError":
        return ZkSyncSDKError(message, "VALIDATION_ERROR", details)

    @classmethod
    def not_found_error(cls, method: str, params: Any = None) -> "NotFoundError":
        return NotFoundError(
            f"{method} returned no result",
            "NOT_FOUND",
            {"method": method, "params": params},
        )

    @classmethod
    def transport_error(cls, url: str, method: str, cause: BaseException) -> "TransportError":
        return TransportError(
            f"Failed to query {method} at {url}: {cause}",
            "TRANSPORT_ERROR",
            {"url": url, "method": method, "cause": repr(cause)},
        )

    @classmethod
    def invalid_response_error(cls, method: str, payload: Any) -> "TransportError":
        return TransportError(
            f"Invalid JSON-RPC response to {method}",
            "INVALID_RESPONSE",
            {"method": method, "payload": payload},
        )

    @classmethod
    def decode_error(cls, what: str, value: Any, reason: Optional[str] = None) -> "TransportError":
        message = f"Failed to decode response as {what}"
        if reason:
            message = f"{message}: {reason}"
        return TransportError(message, "DECODE_ERROR", {"value": value, "expected": what})

    @classmethod
    def from_http_response(cls, url: str, method: str, status: int, body: Any) -> "TransportError":
        return TransportError(
            f"Unexpected HTTP Error {status} from {url} while calling {method}",
            "HTTP_ERROR",
            {"status": status, "body": body, "url": url, "method": method},
        )

    @classmethod
    def from_rpc_error(cls, method: str, error: Any) -> "RpcError":
        if isinstance(error, Mapping):
            rpc_code = error.get("code")
            rpc_message = error.get("message")
            rpc_data = error.get("data")
        else:
            rpc_code, rpc_message, rpc_data = None, str(error), None
        return RpcError(
            f"Failed to query {method}: {rpc_message} (code {rpc_code})",
            "RPC_ERROR",
            {
                "method": method,
                "rpc_code": rpc_code,
                "rpc_message": rpc_message,
                "rpc_data": rpc_data,
            },
        )

    @classmethod
    def wait_cancelled_error(
        cls, tx_hash: str, reason: Optional[str], stage: str, prefix: Optional[str] = None
    ) -> "WaitCancelledError":
        message = f"Transaction wait {reason or 'cancelled'}."
        if prefix:
            message = f"{prefix}: {message}"
        return WaitCancelledError(
            message,
            "TRANSACTION_WAIT_CANCELLED",
            {"tx_hash": tx_hash, "reason": reason, "stage": stage},
        )

    @classmethod
    def empty_tx_block_number_error(cls, tx_hash: str) -> "InvariantViolationError":
        return InvariantViolationError(
            "Mined receipt has an empty block number",
            "EMPTY_TX_BLOCK_NUMBER",
            {"tx_hash": tx_hash},
        )

    @classmethod
    def finalized_block_not_found_error(
        cls, tx_hash: str, cause: BaseException
    ) -> "NotFoundError":
        return NotFoundError(
            f"Failed to get finalized block: {cause}",
            "FINALIZED_BLOCK_NOT_FOUND",
            {"tx_hash": tx_hash, "cause": repr(cause)},
        )


class TransportError(ZkSyncSDKError):
    """The request never produced a usable result."""


class RpcError(TransportError):
    """The node answered with a JSON-RPC error object."""

    @property
    def rpc_code(self) -> Optional[int]:
        return (self.details or {}).get("rpc_code")


class NotFoundError(ZkSyncSDKError):
    """The node has no such record (yet)."""


class WaitCancelledError(ZkSyncSDKError):
    """A confirmation wait was cancelled or ran past its deadline."""

    @property
    def reason(self) -> Optional[str]:
        return (self.details or {}).get("reason")


class InvariantViolationError(ZkSyncSDKError):
    pass
