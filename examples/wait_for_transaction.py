"""Example waiting for a zkSync transaction to be finalized."""
import sys

from zksync_sdk import Cancellation, ZkSyncProvider


def main() -> None:
    tx_hash = sys.argv[1]
    provider = ZkSyncProvider.from_url("https://sepolia.era.zksync.dev")

    receipt = provider.wait_mined(tx_hash, Cancellation.with_timeout(120))
    print("Mined in block:", receipt.block_number)

    receipt = provider.wait_finalized(tx_hash, Cancellation.with_timeout(3600))
    print("Finalized, L1 batch:", receipt.l1_batch_number)
    print("Gas used:", receipt.gas_used)


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
