"""zkSync specific ``zks_*`` queries."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List

from .errors import ZkSyncSDKError
from .eth import decode_result
from .hex_utils import decode_big, to_address, to_decimal, to_hash
from .http import RpcClient
from .types.rpc_results import BlockDetails, BridgeContracts, Fee, L2ToL1MessageProof, Token
from .types.transaction import Transaction
from .validation import UINT8_MAX, UINT32_MAX, validate_address, validate_hash, validate_uint


class Zks:
    def __init__(self, rpc_client: RpcClient) -> None:
        self._rpc_client = rpc_client

    def _call(self, method: str, *params: Any) -> Any:
        return self._rpc_client.call(method, *params)

    def _call_record(self, method: str, *params: Any) -> Any:
        result = self._call(method, *params)
        if result is None:
            raise ZkSyncSDKError.not_found_error(method, list(params))
        return result

    def get_main_contract(self) -> str:
        return to_address(self._call("zks_getMainContract"))

    def l1_chain_id(self) -> int:
        return decode_big(self._call("zks_L1ChainId"))

    def l1_batch_number(self) -> int:
        return decode_big(self._call("zks_L1BatchNumber"))

    def get_confirmed_tokens(self, offset: int = 0, limit: int = UINT8_MAX) -> List[Token]:
        """Page through the tokens confirmed by the node, ``limit`` at a time."""

        validate_uint(offset, UINT32_MAX, "offset")
        validate_uint(limit, UINT8_MAX, "limit")
        payload = self._call("zks_getConfirmedTokens", offset, limit)
        return decode_result(
            "tokens", lambda items: [Token.from_payload(item) for item in items or []], payload
        )

    def is_token_liquid(self, address: str) -> bool:
        result = self._call("zks_isTokenLiquid", validate_address(address))
        if not isinstance(result, bool):
            raise ZkSyncSDKError.decode_error("bool", result)
        return result

    def get_token_price(self, address: str) -> Decimal:
        return to_decimal(self._call("zks_getTokenPrice", validate_address(address)))

    def get_l2_to_l1_log_proof(self, tx_hash: str, log_index: int) -> L2ToL1MessageProof:
        payload = self._call_record(
            "zks_getL2ToL1LogProof", to_hash(validate_hash(tx_hash, "tx_hash")), log_index
        )
        return decode_result("L2 to L1 proof", L2ToL1MessageProof.from_payload, payload)

    def get_l2_to_l1_msg_proof(self, block: int, sender: str, msg: str) -> L2ToL1MessageProof:
        validate_uint(block, UINT32_MAX, "block")
        payload = self._call_record(
            "zks_getL2ToL1MsgProof",
            block,
            validate_address(sender, "sender"),
            to_hash(validate_hash(msg, "msg")),
        )
        return decode_result("L2 to L1 proof", L2ToL1MessageProof.from_payload, payload)

    def get_all_account_balances(self, address: str) -> Dict[str, int]:
        payload = self._call("zks_getAllAccountBalances", validate_address(address))
        if not isinstance(payload, dict):
            raise ZkSyncSDKError.decode_error("balances", payload)
        return {to_address(token): decode_big(balance) for token, balance in payload.items()}

    def get_bridge_contracts(self) -> BridgeContracts:
        payload = self._call("zks_getBridgeContracts")
        return decode_result("bridge contracts", BridgeContracts.from_payload, payload or {})

    def estimate_fee(self, tx: Transaction) -> Fee:
        payload = self._call("zks_estimateFee", tx.to_payload())
        return decode_result("fee", Fee.from_payload, payload)

    def get_testnet_paymaster(self) -> str:
        return to_address(self._call("zks_getTestnetPaymaster"))

    def get_block_details(self, block: int) -> BlockDetails:
        validate_uint(block, UINT32_MAX, "block")
        payload = self._call_record("zks_getBlockDetails", block)
        return decode_result("block details", BlockDetails.from_payload, payload)
