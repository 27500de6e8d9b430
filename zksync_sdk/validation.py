"""Input validation helpers."""
from __future__ import annotations

import re
from typing import Any

from eth_utils import is_hex_address

from .errors import ZkSyncSDKError

_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]*$")

UINT8_MAX = 2**8 - 1
UINT32_MAX = 2**32 - 1


def validate_address(address: Any, parameter_name: str = "address") -> str:
    stripped = address.strip() if isinstance(address, str) else address
    if not isinstance(stripped, str) or stripped[:2] not in ("0x", "0X") or not is_hex_address(stripped):
        raise ZkSyncSDKError.validation_error(
            f"Invalid {parameter_name}: must be a 0x-prefixed 20-byte hex string",
            type="INVALID_ADDRESS",
            parameter_name=parameter_name,
            value=address,
        )
    return stripped


def validate_hash(value: Any, parameter_name: str = "hash") -> str:
    if not isinstance(value, str) or not _HEX_RE.match(value.strip()):
        raise ZkSyncSDKError.validation_error(
            f"Invalid {parameter_name}: must be a 0x-prefixed hex string",
            type="INVALID_HASH",
            parameter_name=parameter_name,
            value=value,
        )
    digits = value.strip()[2:]
    if not digits or len(digits) > 64:
        raise ZkSyncSDKError.validation_error(
            f"Invalid {parameter_name}: must encode between 1 and 32 bytes",
            type="INVALID_HASH",
            parameter_name=parameter_name,
            value=value,
        )
    return value.strip()


def validate_uint(value: Any, maximum: int, parameter_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value > maximum:
        raise ZkSyncSDKError.validation_error(
            f"Invalid {parameter_name}: must be an integer between 0 and {maximum}",
            type="INVALID_UINT",
            parameter_name=parameter_name,
            value=value,
            maximum=maximum,
        )
    return value

