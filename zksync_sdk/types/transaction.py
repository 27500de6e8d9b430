"""Request structures serialized into JSON-RPC call parameters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from ..errors import ZkSyncSDKError
from ..hex_utils import encode_big, encode_bytes, to_address, to_hash
from .block_number import BlockNumberLike, encode_block_number

DEFAULT_GAS_PER_PUBDATA_LIMIT = 50_000


@dataclass(slots=True)
class PaymasterParams:
    paymaster: str
    paymaster_input: bytes = b""

    def to_payload(self) -> Dict[str, Any]:
        return {
            "paymaster": to_address(self.paymaster),
            "paymasterInput": list(self.paymaster_input),
        }


@dataclass(slots=True)
class Eip712Meta:
    """zkSync specific transaction fields."""

    gas_per_pubdata: int = DEFAULT_GAS_PER_PUBDATA_LIMIT
    custom_signature: Optional[bytes] = None
    factory_deps: List[bytes] = field(default_factory=list)
    paymaster_params: Optional[PaymasterParams] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"gasPerPubdata": encode_big(self.gas_per_pubdata)}
        if self.custom_signature is not None:
            payload["customSignature"] = encode_bytes(self.custom_signature)
        if self.factory_deps:
            payload["factoryDeps"] = [list(dep) for dep in self.factory_deps]
        if self.paymaster_params is not None:
            payload["paymasterParams"] = self.paymaster_params.to_payload()
        return payload


@dataclass(slots=True)
class Transaction:
    """Unsigned call request used for gas and fee estimation."""

    from_address: str
    to: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    value: Optional[int] = None
    data: bytes = b""
    eip712_meta: Optional[Eip712Meta] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"from": to_address(self.from_address)}
        if self.to is not None:
            payload["to"] = to_address(self.to)
        if self.gas is not None:
            payload["gas"] = encode_big(self.gas)
        if self.gas_price is not None:
            payload["gasPrice"] = encode_big(self.gas_price)
        if self.value is not None:
            payload["value"] = encode_big(self.value)
        if self.data:
            payload["data"] = encode_bytes(self.data)
        if self.eip712_meta is not None:
            payload["eip712Meta"] = self.eip712_meta.to_payload()
        return payload


TopicPosition = Union[None, str, Sequence[str]]


@dataclass(slots=True)
class FilterQuery:
    """Event log filter for ``eth_getLogs``.

    Each entry of ``topics`` matches one topic position: ``None`` matches
    anything, a string matches that hash, a list matches any of its hashes.
    """

    block_hash: Optional[str] = None
    from_block: Optional[BlockNumberLike] = None
    to_block: Optional[BlockNumberLike] = None
    addresses: List[str] = field(default_factory=list)
    topics: List[TopicPosition] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "address": [to_address(address) for address in self.addresses],
            "topics": [_topic_position(position) for position in self.topics],
        }
        if self.block_hash is not None:
            if self.from_block is not None or self.to_block is not None:
                raise ZkSyncSDKError.validation_error(
                    "Cannot specify both block_hash and from_block/to_block",
                    type="INVALID_FILTER",
                )
            payload["blockHash"] = to_hash(self.block_hash)
            return payload

        payload["fromBlock"] = "0x0" if self.from_block is None else encode_block_number(self.from_block)
        payload["toBlock"] = "latest" if self.to_block is None else encode_block_number(self.to_block)
        return payload


def _topic_position(position: TopicPosition) -> Union[None, str, List[str]]:
    if position is None:
        return None
    if isinstance(position, str):
        return to_hash(position)
    return [to_hash(topic) for topic in position]
