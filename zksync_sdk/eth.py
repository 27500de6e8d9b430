"""Standard ``eth_*`` queries against a zkSync node."""
from __future__ import annotations

from typing import Any, Callable, List, Optional, TypeVar

from .errors import ZkSyncSDKError
from .hex_utils import decode_big, encode_bytes, to_hash
from .http import RpcClient
from .types.block_number import BlockNumber, BlockNumberLike, encode_block_number
from .types.rpc_results import Block, Header, Log, TransactionReceipt, TransactionResponse
from .types.transaction import FilterQuery, Transaction
from .validation import validate_address, validate_hash

_T = TypeVar("_T")


def decode_result(what: str, parse: Callable[[Any], _T], payload: Any) -> _T:
    """Run ``parse`` over an RPC result, reporting malformed payloads as decode errors."""

    try:
        return parse(payload)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ZkSyncSDKError.decode_error(what, payload, repr(exc)) from exc


class Eth:
    def __init__(self, rpc_client: RpcClient) -> None:
        self._rpc_client = rpc_client

    def _call_big(self, method: str, *params: Any) -> int:
        return decode_big(self._rpc_client.call(method, *params))

    def _call_record(self, method: str, *params: Any, timeout: Optional[float] = None) -> Any:
        result = self._rpc_client.call(method, *params, timeout=timeout)
        if result is None:
            raise ZkSyncSDKError.not_found_error(method, list(params))
        return result

    def chain_id(self) -> int:
        return self._call_big("eth_chainId")

    def block_number(self) -> int:
        return self._call_big("eth_blockNumber")

    def get_balance(self, address: str, block_number: BlockNumberLike = BlockNumber.LATEST) -> int:
        return self._call_big(
            "eth_getBalance", validate_address(address), encode_block_number(block_number)
        )

    def get_transaction_count(
        self, address: str, block_number: BlockNumberLike = BlockNumber.LATEST
    ) -> int:
        return self._call_big(
            "eth_getTransactionCount", validate_address(address), encode_block_number(block_number)
        )

    def get_block_by_number(
        self, block_number: BlockNumberLike, full_transactions: bool = False
    ) -> Block:
        payload = self._call_record(
            "eth_getBlockByNumber", encode_block_number(block_number), full_transactions
        )
        return decode_result("block", Block.from_payload, payload)

    def get_block_by_hash(self, block_hash: str, full_transactions: bool = False) -> Block:
        payload = self._call_record(
            "eth_getBlockByHash", to_hash(validate_hash(block_hash, "block_hash")), full_transactions
        )
        return decode_result("block", Block.from_payload, payload)

    def get_finalized_block_header(self, timeout: Optional[float] = None) -> Header:
        """Fetch the header of the latest finalized block.

        ``timeout`` bounds the request, so a waiter can pass its remaining
        deadline through.
        """

        payload = self._call_record(
            "eth_getBlockByNumber", BlockNumber.FINALIZED.value, False, timeout=timeout
        )
        return decode_result("header", Header.from_payload, payload)

    def get_transaction_receipt(self, tx_hash: str) -> TransactionReceipt:
        payload = self._call_record(
            "eth_getTransactionReceipt", to_hash(validate_hash(tx_hash, "tx_hash"))
        )
        return decode_result("transaction receipt", TransactionReceipt.from_payload, payload)

    def get_transaction(self, tx_hash: str) -> TransactionResponse:
        payload = self._call_record(
            "eth_getTransactionByHash", to_hash(validate_hash(tx_hash, "tx_hash"))
        )
        return decode_result("transaction", TransactionResponse.from_payload, payload)

    def estimate_gas(self, tx: Transaction) -> int:
        return self._call_big("eth_estimateGas", tx.to_payload(), BlockNumber.LATEST.value)

    def get_gas_price(self) -> int:
        return self._call_big("eth_gasPrice")

    def send_raw_transaction(self, raw_tx: bytes) -> str:
        """Broadcast an already signed transaction and return its hash."""

        if not raw_tx:
            raise ZkSyncSDKError.validation_error(
                "Invalid raw transaction: must be non-empty bytes", type="INVALID_RAW_TRANSACTION"
            )
        result = self._rpc_client.call("eth_sendRawTransaction", encode_bytes(raw_tx))
        return to_hash(result)

    def get_logs(self, query: FilterQuery) -> List[Log]:
        payload = self._rpc_client.call("eth_getLogs", query.to_payload())
        return decode_result(
            "logs", lambda items: [Log.from_payload(item) for item in items or []], payload
        )
