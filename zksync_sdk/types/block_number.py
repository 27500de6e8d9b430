"""Block tags accepted wherever the node expects a block number."""
from __future__ import annotations

import re
from enum import Enum
from typing import Union

from ..errors import ZkSyncSDKError

_HEX_QUANTITY_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")


class BlockNumber(str, Enum):
    """Named block tags understood by zkSync nodes."""

    LATEST = "latest"
    PENDING = "pending"
    EARLIEST = "earliest"
    COMMITTED = "committed"
    FINALIZED = "finalized"


BlockNumberLike = Union[BlockNumber, str, int]


def encode_block_number(block_number: BlockNumberLike) -> str:
    """Return the wire form of a block tag or height."""

    if isinstance(block_number, BlockNumber):
        return block_number.value
    if isinstance(block_number, int) and not isinstance(block_number, bool):
        if block_number < 0:
            raise ZkSyncSDKError.validation_error(
                "Invalid block number: must be non-negative",
                type="INVALID_BLOCK_NUMBER",
                value=block_number,
            )
        return hex(block_number)
    if isinstance(block_number, str):
        try:
            return BlockNumber(block_number).value
        except ValueError:
            pass
        if _HEX_QUANTITY_RE.match(block_number):
            return block_number
    raise ZkSyncSDKError.validation_error(
        "Invalid block number: expected a block tag, an integer or a hex quantity",
        type="INVALID_BLOCK_NUMBER",
        value=block_number,
    )
