#!/usr/bin/env python3
"""Run zkSync read-only RPC checks and emit CI-friendly output."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from zksync_sdk import Cancellation, ZkSyncProvider
from zksync_sdk.errors import ZkSyncSDKError
from zksync_sdk.provider import ProviderOptions
from zksync_sdk.types import Token

WEI_PER_ETH = Decimal(10) ** 18


@dataclass(slots=True)
class RpcCheckResult:
    comment: str
    summary: str


def _env_float(name: str, default: str) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError as exc:  # pragma: no cover - defensive
        raise SystemExit(f"Invalid number for {name}: {os.environ.get(name)}") from exc


def _format_wei(value: int) -> str:
    eth = Decimal(value) / WEI_PER_ETH
    text = format(eth.normalize(), "f")
    return "0" if text == "-0" else text


def _format_tokens(tokens: List[Token], max_items: int = 5) -> str:
    if not tokens:
        return "- No confirmed tokens returned."

    lines = [
        f"- **{token.symbol or token.name}** L2 `{token.l2_address}` (decimals: {token.decimals})"
        for token in tokens[:max_items]
    ]
    if len(tokens) > max_items:
        lines.append(f"- …and {len(tokens) - max_items} more tokens")
    return "\n".join(lines)


def _format_balances(balances: Dict[str, int]) -> str:
    if not balances:
        return "- No token balances returned."
    return "\n".join(f"- `{token}`: {amount}" for token, amount in balances.items())


def _wait_section(provider: ZkSyncProvider, tx_hash: Optional[str], timeout: float) -> List[str]:
    if not tx_hash:
        return []

    cancellation = Cancellation.with_timeout(timeout)
    try:
        receipt = provider.wait_finalized(tx_hash, cancellation)
    except ZkSyncSDKError as exc:
        return ["", f"**Transaction `{tx_hash}`**", f"- Not finalized: {exc.message} ({exc.code})"]
    return [
        "",
        f"**Transaction `{tx_hash}`**",
        f"- Finalized in block {receipt.block_number} (L1 batch {receipt.l1_batch_number})",
        f"- Status: {receipt.status}, gas used: {receipt.gas_used}",
    ]


def run_checks() -> RpcCheckResult:
    rpc_url = os.environ.get("ZKSYNC_RPC_URL", "https://mainnet.era.zksync.io")
    address = os.environ.get("ZKSYNC_ADDRESS", "0x0000000000000000000000000000000000008006")
    tx_hash = os.environ.get("ZKSYNC_TX_HASH")
    wait_timeout = _env_float("ZKSYNC_WAIT_TIMEOUT", "60")

    provider = ZkSyncProvider(ProviderOptions(rpc_url=rpc_url))

    chain_id = provider.eth.chain_id()
    l1_chain_id = provider.zks.l1_chain_id()
    block_number = provider.eth.block_number()
    l1_batch_number = provider.zks.l1_batch_number()
    finalized = provider.eth.get_finalized_block_header()
    gas_price = provider.eth.get_gas_price()
    main_contract = provider.zks.get_main_contract()
    bridges = provider.zks.get_bridge_contracts()
    balance = provider.eth.get_balance(address)
    balances = provider.zks.get_all_account_balances(address)
    tokens = provider.zks.get_confirmed_tokens(0, 5)

    comment_lines = [
        "<!-- zksync-readonly -->",
        "### zkSync Read-only RPC Verification",
        "",
        "**Chain**",
        f"- Chain id: {chain_id} (L1 chain id {l1_chain_id})",
        f"- Latest block: {block_number}, finalized block: {finalized.number}",
        f"- L1 batch number: {l1_batch_number}",
        f"- Gas price: {gas_price} wei",
        f"- Main contract: `{main_contract}`",
        f"- L1/L2 ERC20 bridges: `{bridges.l1_erc20_default_bridge}` / `{bridges.l2_erc20_default_bridge}`",
        "",
        f"**Balances for `{address}`**",
        f"- ETH: {_format_wei(balance)}",
        _format_balances(balances),
        "",
        "**Confirmed tokens**",
        _format_tokens(tokens),
        *_wait_section(provider, tx_hash, wait_timeout),
        "",
        "<sub>Generated by python-zksync-sdk CI</sub>",
    ]

    summary_lines = [
        "### zkSync Read-only RPC Verification",
        f"* Endpoint: {rpc_url}",
        f"* Blocks: latest {block_number}, finalized {finalized.number}",
        f"* Confirmed tokens returned: {len(tokens)}",
        f"* Token balances returned: {len(balances)}",
    ]

    return RpcCheckResult(comment="\n".join(comment_lines), summary="\n".join(summary_lines))


def main() -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    result = run_checks()

    print(result.summary)
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if summary_path:
        with open(summary_path, "a", encoding="utf-8") as handle:
            handle.write(result.summary)
            handle.write("\n")

    output_path = os.environ.get("GITHUB_OUTPUT")
    if output_path:
        with open(output_path, "a", encoding="utf-8") as handle:
            handle.write("comment_body<<ZKSYNC\n")
            handle.write(result.comment)
            handle.write("\nZKSYNC\n")


if __name__ == "__main__":
    main()
