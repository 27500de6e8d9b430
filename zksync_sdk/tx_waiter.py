"""Utilities for waiting until transactions are mined or finalized."""
from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from .cancellation import Cancellation
from .errors import WaitCancelledError, ZkSyncSDKError
from .types.rpc_results import Header, TransactionReceipt
from .validation import validate_hash

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 1.0


class ReceiptSource(Protocol):
    def get_transaction_receipt(self, tx_hash: str) -> TransactionReceipt:
        ...

    def get_finalized_block_header(self, timeout: Optional[float] = None) -> Header:
        ...


class _Ticker:
    """Fixed-rate ticker. Ticks that were missed while the caller was busy are dropped."""

    def __init__(self, interval: float) -> None:
        self._interval = interval
        self._next = time.monotonic() + interval

    def wait(self, cancellation: Optional[Cancellation]) -> bool:
        """Block until the next tick. Returns ``False`` if cancelled first."""

        while True:
            if cancellation is not None and cancellation.cancelled:
                return False
            now = time.monotonic()
            if now >= self._next:
                missed = int((now - self._next) // self._interval) + 1
                self._next += missed * self._interval
                return True
            delay = self._next - now
            if cancellation is None:
                time.sleep(delay)
            elif cancellation.wait(delay):
                return False


class ConfirmationWaiter:
    """Poll a :class:`ReceiptSource` until a transaction is mined or finalized.

    Every call owns its own ticker, so concurrent waits for different
    transactions do not interact. Cancellation is checked between polls and
    never interrupts a request that is already in flight.
    """

    def __init__(self, source: ReceiptSource, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        if poll_interval <= 0:
            raise ZkSyncSDKError.validation_error(
                "Invalid poll_interval: must be positive", value=poll_interval
            )
        self._source = source
        self._poll_interval = poll_interval

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    def wait_mined(
        self, tx_hash: str, cancellation: Optional[Cancellation] = None
    ) -> TransactionReceipt:
        tx_hash = validate_hash(tx_hash, "tx_hash")
        ticker = _Ticker(self._poll_interval)
        attempts = 0
        while True:
            attempts += 1
            try:
                receipt = self._source.get_transaction_receipt(tx_hash)
            except ZkSyncSDKError as exc:
                # Not mined yet, or the node could not answer. Either way, retry.
                logger.debug("receipt for %s unavailable (attempt %d): %s", tx_hash, attempts, exc)
            else:
                if receipt.block_number is not None:
                    logger.info(
                        "transaction %s mined in block %d after %d attempt(s)",
                        tx_hash,
                        receipt.block_number,
                        attempts,
                    )
                    return receipt
                logger.debug("receipt for %s has no block number yet (attempt %d)", tx_hash, attempts)

            if not ticker.wait(cancellation):
                assert cancellation is not None
                raise ZkSyncSDKError.wait_cancelled_error(tx_hash, cancellation.reason, "mined")

    def wait_finalized(
        self, tx_hash: str, cancellation: Optional[Cancellation] = None
    ) -> TransactionReceipt:
        try:
            receipt = self.wait_mined(tx_hash, cancellation)
        except WaitCancelledError as exc:
            raise ZkSyncSDKError.wait_cancelled_error(
                tx_hash,
                exc.reason,
                "mined",
                prefix="Failed waiting for transaction to be mined",
            ) from exc

        if receipt.block_number is None:
            raise ZkSyncSDKError.empty_tx_block_number_error(tx_hash)

        ticker = _Ticker(self._poll_interval)
        while True:
            timeout = cancellation.remaining() if cancellation is not None else None
            try:
                header = self._source.get_finalized_block_header(timeout=timeout)
            except ZkSyncSDKError as exc:
                if cancellation is not None and cancellation.cancelled:
                    raise ZkSyncSDKError.wait_cancelled_error(
                        tx_hash, cancellation.reason, "finalized"
                    ) from exc
                # Not retried, unlike the receipt poll.
                raise ZkSyncSDKError.finalized_block_not_found_error(tx_hash, exc) from exc

            if header.number >= receipt.block_number:
                logger.info(
                    "transaction %s finalized (block %d, finalized head %d)",
                    tx_hash,
                    receipt.block_number,
                    header.number,
                )
                return receipt
            logger.debug(
                "transaction %s in block %d, finalized head at %d",
                tx_hash,
                receipt.block_number,
                header.number,
            )

            if not ticker.wait(cancellation):
                assert cancellation is not None
                raise ZkSyncSDKError.wait_cancelled_error(tx_hash, cancellation.reason, "finalized")
