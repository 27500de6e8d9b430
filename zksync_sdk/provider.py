"""Public entry point for the zkSync Python SDK."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cancellation import Cancellation
from .eth import Eth
from .http import HttpRequestor, RpcClient
from .pending_transaction import PendingTransaction
from .tx_waiter import DEFAULT_POLL_INTERVAL, ConfirmationWaiter
from .types.rpc_results import TransactionReceipt
from .zks import Zks


@dataclass(slots=True)
class ProviderOptions:
    rpc_url: str = "https://mainnet.era.zksync.io"
    request_timeout: float = 30.0
    poll_interval: float = DEFAULT_POLL_INTERVAL
    user_agent: str = "python-zksync-sdk/0.1"
    http_requestor: Optional[HttpRequestor] = None


class ZkSyncProvider:
    """Main entry point for querying a zkSync node over JSON-RPC."""

    def __init__(
        self,
        options: Optional[ProviderOptions] = None,
        *,
        rpc_client: Optional[RpcClient] = None,
    ) -> None:
        self.options = options or ProviderOptions()

        self._rpc_client = rpc_client or RpcClient(
            self.options.rpc_url,
            self.options.http_requestor,
            user_agent=self.options.user_agent,
            timeout=self.options.request_timeout,
        )

        self.eth = Eth(self._rpc_client)
        self.zks = Zks(self._rpc_client)
        self.waiter = ConfirmationWaiter(self.eth, self.options.poll_interval)

    @classmethod
    def from_url(cls, rpc_url: str) -> "ZkSyncProvider":
        return cls(ProviderOptions(rpc_url=rpc_url))

    @property
    def rpc_client(self) -> RpcClient:
        return self._rpc_client

    @property
    def rpc_url(self) -> str:
        return self.options.rpc_url

    def wait_mined(
        self, tx_hash: str, cancellation: Optional[Cancellation] = None
    ) -> TransactionReceipt:
        return self.waiter.wait_mined(tx_hash, cancellation)

    def wait_finalized(
        self, tx_hash: str, cancellation: Optional[Cancellation] = None
    ) -> TransactionReceipt:
        return self.waiter.wait_finalized(tx_hash, cancellation)

    def submit_raw_transaction(self, raw_tx: bytes) -> PendingTransaction:
        tx_hash = self.eth.send_raw_transaction(raw_tx)
        return PendingTransaction(transaction_hash=tx_hash, _waiter=self.waiter)
