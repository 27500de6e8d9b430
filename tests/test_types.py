import pytest

from zksync_sdk.errors import ZkSyncSDKError
from zksync_sdk.types import BlockNumber, FilterQuery, Transaction
from zksync_sdk.types.rpc_results import BlockDetails, Fee, TransactionReceipt
from zksync_sdk.types.transaction import Eip712Meta

ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
BLOCK_HASH = "0x" + "cd" * 32


def test_filter_query_defaults_block_range():
    payload = FilterQuery().to_payload()

    assert payload == {"address": [], "topics": [], "fromBlock": "0x0", "toBlock": "latest"}


def test_filter_query_with_block_hash_omits_range():
    payload = FilterQuery(block_hash=BLOCK_HASH, topics=[["0x01", "0x02"]]).to_payload()

    assert payload["blockHash"] == BLOCK_HASH
    assert "fromBlock" not in payload and "toBlock" not in payload
    assert payload["topics"] == [["0x" + "00" * 31 + "01", "0x" + "00" * 31 + "02"]]


def test_filter_query_rejects_block_hash_with_range():
    with pytest.raises(ZkSyncSDKError) as excinfo:
        FilterQuery(block_hash=BLOCK_HASH, to_block=BlockNumber.FINALIZED).to_payload()

    assert excinfo.value.details["type"] == "INVALID_FILTER"


def test_transaction_payload_with_factory_deps():
    tx = Transaction(
        from_address=ADDRESS.lower(),
        gas=21000,
        gas_price=0,
        eip712_meta=Eip712Meta(gas_per_pubdata=800, custom_signature=b"\xaa", factory_deps=[b"\x01\x02"]),
    )

    assert tx.to_payload() == {
        "from": ADDRESS,
        "gas": "0x5208",
        "gasPrice": "0x0",
        "eip712Meta": {
            "gasPerPubdata": "0x320",
            "customSignature": "0xaa",
            "factoryDeps": [[1, 2]],
        },
    }


def test_fee_accepts_numbers_and_hex():
    fee = Fee.from_payload(
        {
            "gas_limit": 100,
            "gas_per_pubdata_limit": "0x64",
            "max_fee_per_gas": "0x1",
            "max_priority_fee_per_gas": 0,
        }
    )

    assert (fee.gas_limit, fee.gas_per_pubdata_limit) == (100, 100)


def test_block_details_minimal_payload():
    details = BlockDetails.from_payload({"number": "0x1", "l1BatchNumber": 0, "timestamp": 5, "status": "sealed"})

    assert details.number == 1
    assert details.root_hash is None
    assert details.l1_tx_count == 0


def test_receipt_raw_payload_is_kept():
    payload = {"transactionHash": "0x01", "blockNumber": "0xa", "customField": "x"}

    receipt = TransactionReceipt.from_payload(payload)

    assert receipt.raw["customField"] == "x"
    assert receipt.logs == []
