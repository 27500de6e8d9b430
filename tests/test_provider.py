from __future__ import annotations

from zksync_sdk import Cancellation, PendingTransaction, ProviderOptions, ZkSyncProvider
from zksync_sdk.http import RpcClient

TX_HASH = "0x" + "ab" * 32


class FakeResponse:
    ok = True
    status_code = 200
    text = ""

    def __init__(self, payload):
        self._payload = payload

    def json(self):
        return self._payload


class ScriptedNode:
    """Fake JSON-RPC endpoint answering from per-method result scripts."""

    def __init__(self, scripts):
        self.methods = []
        self._scripts = {method: list(results) for method, results in scripts.items()}

    def __call__(self, url, kwargs):
        body = kwargs["json"]
        self.methods.append(body["method"])
        script = self._scripts[body["method"]]
        result = script.pop(0) if len(script) > 1 else script[0]
        return FakeResponse({"jsonrpc": "2.0", "id": body["id"], "result": result})


def test_provider_options_defaults():
    options = ProviderOptions()

    assert options.rpc_url == "https://mainnet.era.zksync.io"
    assert options.poll_interval == 1.0
    assert options.request_timeout == 30.0


def test_provider_builds_rpc_client_from_options():
    provider = ZkSyncProvider(ProviderOptions(rpc_url="https://rpc.example", request_timeout=5, poll_interval=0.5))

    assert isinstance(provider.rpc_client, RpcClient)
    assert provider.rpc_client.url == "https://rpc.example"
    assert provider.rpc_client.timeout == 5
    assert provider.waiter.poll_interval == 0.5
    assert provider.rpc_url == "https://rpc.example"


def test_from_url():
    assert ZkSyncProvider.from_url("https://rpc.example").rpc_url == "https://rpc.example"


def test_provider_does_not_expose_transport_methods():
    provider = ZkSyncProvider(ProviderOptions(rpc_url="https://rpc.example"))

    assert not hasattr(provider, "call")


def test_submit_and_wait_finalized_end_to_end():
    node = ScriptedNode(
        {
            "eth_sendRawTransaction": [TX_HASH],
            "eth_getTransactionReceipt": [
                None,
                {"transactionHash": TX_HASH, "blockNumber": "0x64", "status": "0x1"},
            ],
            "eth_getBlockByNumber": [{"number": "0x63"}, {"number": "0x64"}],
        }
    )
    provider = ZkSyncProvider(ProviderOptions(rpc_url="https://rpc.example", poll_interval=0.01, http_requestor=node))

    pending = provider.submit_raw_transaction(b"\x71\x01")

    assert isinstance(pending, PendingTransaction)
    assert pending.transaction_hash == TX_HASH

    receipt = pending.wait_finalized(Cancellation.with_timeout(5))

    assert receipt.block_number == 100
    assert node.methods == [
        "eth_sendRawTransaction",
        "eth_getTransactionReceipt",
        "eth_getTransactionReceipt",
        "eth_getBlockByNumber",
        "eth_getBlockByNumber",
    ]


def test_provider_wait_mined_delegates_to_waiter():
    node = ScriptedNode({"eth_getTransactionReceipt": [{"transactionHash": TX_HASH, "blockNumber": "0x1"}]})
    provider = ZkSyncProvider(ProviderOptions(poll_interval=0.01, http_requestor=node))

    assert provider.wait_mined(TX_HASH).block_number == 1
    assert node.methods == ["eth_getTransactionReceipt"]
