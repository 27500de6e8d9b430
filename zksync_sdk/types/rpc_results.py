"""Dataclasses describing results returned by zkSync nodes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from ..hex_utils import (
    decode_big,
    decode_bytes,
    decode_optional_big,
    to_address,
    to_hash,
    to_optional_address,
    to_optional_hash,
)


def _quantity(value: Any) -> int:
    # zks_* methods mix plain JSON numbers with hex quantities.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return decode_big(value)


def _optional_quantity(value: Any) -> Optional[int]:
    if value is None:
        return None
    return _quantity(value)


@dataclass(slots=True)
class Log:
    address: str
    topics: List[str]
    data: bytes
    block_number: Optional[int]
    block_hash: Optional[str]
    transaction_hash: Optional[str]
    transaction_index: Optional[int]
    log_index: Optional[int]
    l1_batch_number: Optional[int] = None
    removed: bool = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Log":
        return cls(
            address=to_address(payload["address"]),
            topics=[to_hash(topic) for topic in payload.get("topics") or []],
            data=decode_bytes(payload.get("data") or "0x"),
            block_number=decode_optional_big(payload.get("blockNumber")),
            block_hash=to_optional_hash(payload.get("blockHash")),
            transaction_hash=to_optional_hash(payload.get("transactionHash")),
            transaction_index=decode_optional_big(payload.get("transactionIndex")),
            log_index=decode_optional_big(payload.get("logIndex")),
            l1_batch_number=decode_optional_big(payload.get("l1BatchNumber")),
            removed=bool(payload.get("removed", False)),
        )


@dataclass(slots=True)
class L2ToL1Log:
    block_number: int
    block_hash: Optional[str]
    l1_batch_number: Optional[int]
    transaction_index: int
    shard_id: int
    is_service: bool
    sender: str
    key: str
    value: str
    transaction_hash: str
    log_index: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "L2ToL1Log":
        return cls(
            block_number=decode_big(payload["blockNumber"]),
            block_hash=to_optional_hash(payload.get("blockHash")),
            l1_batch_number=decode_optional_big(payload.get("l1BatchNumber")),
            transaction_index=decode_big(payload["transactionIndex"]),
            shard_id=decode_big(payload["shardId"]),
            is_service=bool(payload["isService"]),
            sender=to_address(payload["sender"]),
            key=to_hash(payload["key"]),
            value=to_hash(payload["value"]),
            transaction_hash=to_hash(payload["transactionHash"]),
            log_index=decode_big(payload["logIndex"]),
        )


@dataclass(slots=True)
class TransactionReceipt:
    transaction_hash: str
    transaction_index: Optional[int]
    block_hash: Optional[str]
    block_number: Optional[int]
    from_address: Optional[str]
    to_address: Optional[str]
    contract_address: Optional[str]
    cumulative_gas_used: Optional[int]
    gas_used: Optional[int]
    effective_gas_price: Optional[int]
    status: Optional[int]
    type: Optional[int]
    logs: List[Log] = field(default_factory=list)
    l2_to_l1_logs: List[L2ToL1Log] = field(default_factory=list)
    l1_batch_number: Optional[int] = None
    l1_batch_tx_index: Optional[int] = None
    logs_bloom: Optional[bytes] = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def is_mined(self) -> bool:
        return self.block_number is not None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TransactionReceipt":
        bloom = payload.get("logsBloom")
        return cls(
            transaction_hash=to_hash(payload["transactionHash"]),
            transaction_index=decode_optional_big(payload.get("transactionIndex")),
            block_hash=to_optional_hash(payload.get("blockHash")),
            block_number=decode_optional_big(payload.get("blockNumber")),
            from_address=to_optional_address(payload.get("from")),
            to_address=to_optional_address(payload.get("to")),
            contract_address=to_optional_address(payload.get("contractAddress")),
            cumulative_gas_used=decode_optional_big(payload.get("cumulativeGasUsed")),
            gas_used=decode_optional_big(payload.get("gasUsed")),
            effective_gas_price=decode_optional_big(payload.get("effectiveGasPrice")),
            status=decode_optional_big(payload.get("status")),
            type=decode_optional_big(payload.get("type")),
            logs=[Log.from_payload(item) for item in payload.get("logs") or []],
            l2_to_l1_logs=[L2ToL1Log.from_payload(item) for item in payload.get("l2ToL1Logs") or []],
            l1_batch_number=decode_optional_big(payload.get("l1BatchNumber")),
            l1_batch_tx_index=decode_optional_big(payload.get("l1BatchTxIndex")),
            logs_bloom=decode_bytes(bloom) if bloom is not None else None,
            raw=dict(payload),
        )


@dataclass(slots=True)
class TransactionResponse:
    hash: str
    nonce: int
    block_hash: Optional[str]
    block_number: Optional[int]
    transaction_index: Optional[int]
    from_address: str
    to_address: Optional[str]
    value: int
    gas: int
    gas_price: Optional[int]
    input: bytes
    type: Optional[int] = None
    chain_id: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None
    l1_batch_number: Optional[int] = None
    l1_batch_tx_index: Optional[int] = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TransactionResponse":
        return cls(
            hash=to_hash(payload["hash"]),
            nonce=decode_big(payload["nonce"]),
            block_hash=to_optional_hash(payload.get("blockHash")),
            block_number=decode_optional_big(payload.get("blockNumber")),
            transaction_index=decode_optional_big(payload.get("transactionIndex")),
            from_address=to_address(payload["from"]),
            to_address=to_optional_address(payload.get("to")),
            value=decode_big(payload.get("value") or "0x0"),
            gas=decode_big(payload["gas"]),
            gas_price=decode_optional_big(payload.get("gasPrice")),
            input=decode_bytes(payload.get("input") or "0x"),
            type=decode_optional_big(payload.get("type")),
            chain_id=decode_optional_big(payload.get("chainId")),
            max_fee_per_gas=decode_optional_big(payload.get("maxFeePerGas")),
            max_priority_fee_per_gas=decode_optional_big(payload.get("maxPriorityFeePerGas")),
            l1_batch_number=decode_optional_big(payload.get("l1BatchNumber")),
            l1_batch_tx_index=decode_optional_big(payload.get("l1BatchTxIndex")),
            raw=dict(payload),
        )


@dataclass(slots=True)
class Header:
    number: int
    hash: Optional[str]
    parent_hash: Optional[str]
    timestamp: int
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Header":
        return cls(
            number=decode_big(payload["number"]),
            hash=to_optional_hash(payload.get("hash")),
            parent_hash=to_optional_hash(payload.get("parentHash")),
            timestamp=decode_big(payload.get("timestamp") or "0x0"),
            raw=dict(payload),
        )


@dataclass(slots=True)
class Block:
    number: int
    hash: Optional[str]
    parent_hash: Optional[str]
    timestamp: int
    gas_limit: Optional[int]
    gas_used: Optional[int]
    base_fee_per_gas: Optional[int]
    transactions: List[Union[str, TransactionResponse]]
    l1_batch_number: Optional[int] = None
    l1_batch_timestamp: Optional[int] = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def header(self) -> Header:
        return Header(self.number, self.hash, self.parent_hash, self.timestamp, self.raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Block":
        transactions: List[Union[str, TransactionResponse]] = []
        for item in payload.get("transactions") or []:
            if isinstance(item, Mapping):
                transactions.append(TransactionResponse.from_payload(item))
            else:
                transactions.append(to_hash(item))

        return cls(
            number=decode_big(payload["number"]),
            hash=to_optional_hash(payload.get("hash")),
            parent_hash=to_optional_hash(payload.get("parentHash")),
            timestamp=decode_big(payload.get("timestamp") or "0x0"),
            gas_limit=decode_optional_big(payload.get("gasLimit")),
            gas_used=decode_optional_big(payload.get("gasUsed")),
            base_fee_per_gas=decode_optional_big(payload.get("baseFeePerGas")),
            transactions=transactions,
            l1_batch_number=decode_optional_big(payload.get("l1BatchNumber")),
            l1_batch_timestamp=decode_optional_big(payload.get("l1BatchTimestamp")),
            raw=dict(payload),
        )


@dataclass(slots=True)
class BlockDetails:
    number: int
    l1_batch_number: int
    timestamp: int
    l1_tx_count: int
    l2_tx_count: int
    root_hash: Optional[str]
    status: str
    commit_tx_hash: Optional[str] = None
    committed_at: Optional[str] = None
    prove_tx_hash: Optional[str] = None
    proven_at: Optional[str] = None
    execute_tx_hash: Optional[str] = None
    executed_at: Optional[str] = None
    operator_address: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BlockDetails":
        return cls(
            number=_quantity(payload["number"]),
            l1_batch_number=_quantity(payload["l1BatchNumber"]),
            timestamp=_quantity(payload["timestamp"]),
            l1_tx_count=_quantity(payload.get("l1TxCount", 0)),
            l2_tx_count=_quantity(payload.get("l2TxCount", 0)),
            root_hash=to_optional_hash(payload.get("rootHash")),
            status=str(payload.get("status", "")),
            commit_tx_hash=to_optional_hash(payload.get("commitTxHash")),
            committed_at=payload.get("committedAt"),
            prove_tx_hash=to_optional_hash(payload.get("proveTxHash")),
            proven_at=payload.get("provenAt"),
            execute_tx_hash=to_optional_hash(payload.get("executeTxHash")),
            executed_at=payload.get("executedAt"),
            operator_address=to_optional_address(payload.get("operatorAddress")),
        )


@dataclass(slots=True)
class Token:
    l1_address: str
    l2_address: str
    name: str
    symbol: str
    decimals: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Token":
        return cls(
            l1_address=to_address(payload["l1Address"]),
            l2_address=to_address(payload["l2Address"]),
            name=payload.get("name", ""),
            symbol=payload.get("symbol", ""),
            decimals=_quantity(payload.get("decimals", 0)),
        )


@dataclass(slots=True)
class L2ToL1MessageProof:
    id: int
    proof: List[str]
    root: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "L2ToL1MessageProof":
        return cls(
            id=_quantity(payload["id"]),
            proof=[to_hash(item) for item in payload.get("proof") or []],
            root=to_hash(payload["root"]),
        )


@dataclass(slots=True)
class BridgeContracts:
    l1_erc20_default_bridge: Optional[str]
    l2_erc20_default_bridge: Optional[str]
    l1_weth_bridge: Optional[str] = None
    l2_weth_bridge: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BridgeContracts":
        return cls(
            l1_erc20_default_bridge=to_optional_address(payload.get("l1Erc20DefaultBridge")),
            l2_erc20_default_bridge=to_optional_address(payload.get("l2Erc20DefaultBridge")),
            l1_weth_bridge=to_optional_address(payload.get("l1WethBridge")),
            l2_weth_bridge=to_optional_address(payload.get("l2WethBridge")),
        )


@dataclass(slots=True)
class Fee:
    gas_limit: int
    gas_per_pubdata_limit: int
    max_fee_per_gas: int
    max_priority_fee_per_gas: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Fee":
        return cls(
            gas_limit=_quantity(payload["gas_limit"]),
            gas_per_pubdata_limit=_quantity(payload["gas_per_pubdata_limit"]),
            max_fee_per_gas=_quantity(payload["max_fee_per_gas"]),
            max_priority_fee_per_gas=_quantity(payload["max_priority_fee_per_gas"]),
        )
