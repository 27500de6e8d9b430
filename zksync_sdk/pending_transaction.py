"""Representation of a transaction that has been broadcast but not confirmed."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cancellation import Cancellation
from .tx_waiter import ConfirmationWaiter
from .types.rpc_results import TransactionReceipt


@dataclass(slots=True)
class PendingTransaction:
    transaction_hash: str
    _waiter: ConfirmationWaiter

    def wait_mined(self, cancellation: Optional[Cancellation] = None) -> TransactionReceipt:
        """Block until the transaction is included in a block."""

        return self._waiter.wait_mined(self.transaction_hash, cancellation)

    def wait_finalized(self, cancellation: Optional[Cancellation] = None) -> TransactionReceipt:
        """Block until the block holding the transaction is finalized."""

        return self._waiter.wait_finalized(self.transaction_hash, cancellation)
