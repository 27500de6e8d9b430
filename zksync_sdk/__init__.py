"""Python client for the zkSync Era JSON-RPC interface."""
from .cancellation import Cancellation
from .errors import (
    InvariantViolationError,
    NotFoundError,
    RpcError,
    TransportError,
    WaitCancelledError,
    ZkSyncSDKError,
)
from .eth import Eth
from .http import RpcClient
from .pending_transaction import PendingTransaction
from .provider import ProviderOptions, ZkSyncProvider
from .tx_waiter import ConfirmationWaiter
from .types import BlockNumber, FilterQuery, Transaction
from .zks import Zks

__all__ = [
    "Cancellation",
    "ConfirmationWaiter",
    "Eth",
    "PendingTransaction",
    "ProviderOptions",
    "RpcClient",
    "Zks",
    "ZkSyncProvider",
    "BlockNumber",
    "FilterQuery",
    "Transaction",
    "ZkSyncSDKError",
    "TransportError",
    "RpcError",
    "NotFoundError",
    "WaitCancelledError",
    "InvariantViolationError",
]
