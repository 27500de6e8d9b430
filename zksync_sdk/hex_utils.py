"""Helpers for the hex encodings used on the JSON-RPC wire."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from eth_utils import to_checksum_address

from .errors import ZkSyncSDKError

ADDRESS_LENGTH = 20
HASH_LENGTH = 32


def _strip_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def decode_big(value: Any) -> int:
    """Decode a ``0x``-prefixed hex quantity into an :class:`int`."""

    if not isinstance(value, str):
        raise ZkSyncSDKError.decode_error("big int", value, "expected a hex string")
    if value[:2] not in ("0x", "0X"):
        raise ZkSyncSDKError.decode_error("big int", value, "missing 0x prefix")
    digits = value[2:]
    if not digits:
        raise ZkSyncSDKError.decode_error("big int", value, "hex string \"0x\"")
    try:
        return int(digits, 16)
    except ValueError as exc:
        raise ZkSyncSDKError.decode_error("big int", value, "invalid hex digits") from exc


def decode_optional_big(value: Any) -> Optional[int]:
    if value is None:
        return None
    return decode_big(value)


def encode_big(value: int) -> str:
    if value < 0:
        raise ZkSyncSDKError.validation_error(
            "Cannot hex-encode a negative quantity", value=value
        )
    return hex(value)


def decode_bytes(value: Any) -> bytes:
    if not isinstance(value, str):
        raise ZkSyncSDKError.decode_error("bytes", value, "expected a hex string")
    digits = _strip_prefix(value)
    if len(digits) % 2:
        digits = "0" + digits
    try:
        return bytes.fromhex(digits)
    except ValueError as exc:
        raise ZkSyncSDKError.decode_error("bytes", value, "invalid hex digits") from exc


def encode_bytes(value: bytes) -> str:
    return "0x" + bytes(value).hex()


def _fit(raw: bytes, length: int) -> bytes:
    # Longer inputs keep their trailing bytes, shorter ones are left-padded.
    if len(raw) > length:
        return raw[-length:]
    return raw.rjust(length, b"\x00")


def to_address(value: Any) -> str:
    """Return the EIP-55 checksummed form of ``value``.

    The conversion is lenient: short values are left-padded and long values
    keep their last 20 bytes.
    """

    raw = value if isinstance(value, (bytes, bytearray)) else decode_bytes(value)
    return to_checksum_address(encode_bytes(_fit(bytes(raw), ADDRESS_LENGTH)))


def to_optional_address(value: Any) -> Optional[str]:
    if value is None:
        return None
    return to_address(value)


def to_hash(value: Any) -> str:
    """Return ``value`` as a lowercase, ``0x``-prefixed 32-byte hash."""

    raw = value if isinstance(value, (bytes, bytearray)) else decode_bytes(value)
    return encode_bytes(_fit(bytes(raw), HASH_LENGTH))


def to_optional_hash(value: Any) -> Optional[str]:
    if value is None:
        return None
    return to_hash(value)


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value

    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ZkSyncSDKError.decode_error("decimal", value) from exc
    if not result.is_finite():
        raise ZkSyncSDKError.decode_error("decimal", value, "not a finite number")
    return result
