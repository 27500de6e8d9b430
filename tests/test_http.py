import pytest
import requests

from zksync_sdk.errors import RpcError, TransportError
from zksync_sdk.http import RpcClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class RecordingRequestor:
    def __init__(self, *responses):
        self.calls = []
        self._responses = list(responses)

    def __call__(self, url, kwargs):
        self.calls.append((url, kwargs))
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


def test_call_posts_json_rpc_envelope():
    requestor = RecordingRequestor(FakeResponse(payload={"jsonrpc": "2.0", "id": 1, "result": "0x10"}))
    client = RpcClient("https://rpc.example", requestor)

    result = client.call("eth_getBalance", "0xabc", "latest")

    assert result == "0x10"
    url, kwargs = requestor.calls[0]
    assert url == "https://rpc.example"
    assert kwargs["method"] == "POST"
    assert kwargs["timeout"] == 30.0
    assert kwargs["headers"]["User-Agent"] == "python-zksync-sdk/0.1"
    assert kwargs["json"] == {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "eth_getBalance",
        "params": ["0xabc", "latest"],
    }


def test_call_increments_request_ids():
    requestor = RecordingRequestor(
        FakeResponse(payload={"result": None}),
        FakeResponse(payload={"result": None}),
    )
    client = RpcClient("https://rpc.example", requestor)

    client.call("eth_gasPrice")
    client.call("eth_gasPrice")

    assert [kwargs["json"]["id"] for _, kwargs in requestor.calls] == [1, 2]


def test_null_result_is_returned_as_none():
    requestor = RecordingRequestor(FakeResponse(payload={"jsonrpc": "2.0", "id": 1, "result": None}))
    client = RpcClient("https://rpc.example", requestor)

    assert client.call("eth_getTransactionReceipt", "0x01") is None


def test_per_call_timeout_overrides_default():
    requestor = RecordingRequestor(FakeResponse(payload={"result": "0x1"}))
    client = RpcClient("https://rpc.example", requestor, timeout=10)

    client.call("eth_blockNumber", timeout=2.5)

    assert requestor.calls[0][1]["timeout"] == 2.5


def test_expired_timeout_fails_without_sending():
    requestor = RecordingRequestor()
    client = RpcClient("https://rpc.example", requestor)

    with pytest.raises(TransportError) as excinfo:
        client.call("eth_getBlockByNumber", "finalized", False, timeout=0)

    assert excinfo.value.code == "TRANSPORT_ERROR"
    assert requestor.calls == []


def test_rpc_error_object_raises_rpc_error():
    payload = {"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "execution reverted"}}
    client = RpcClient("https://rpc.example", RecordingRequestor(FakeResponse(payload=payload)))

    with pytest.raises(RpcError) as excinfo:
        client.call("eth_estimateGas", {})

    error = excinfo.value
    assert error.code == "RPC_ERROR"
    assert error.rpc_code == -32000
    assert error.details["rpc_message"] == "execution reverted"
    assert isinstance(error, TransportError)


def test_http_error_status_raises_transport_error():
    response = FakeResponse(status_code=502, text="bad gateway")
    client = RpcClient("https://rpc.example", RecordingRequestor(response))

    with pytest.raises(TransportError) as excinfo:
        client.call("eth_chainId")

    assert excinfo.value.code == "HTTP_ERROR"
    assert excinfo.value.details["status"] == 502
    assert excinfo.value.details["body"] == "bad gateway"


def test_network_failure_is_wrapped():
    failure = requests.ConnectionError("connection refused")
    client = RpcClient("https://rpc.example", RecordingRequestor(failure))

    with pytest.raises(TransportError) as excinfo:
        client.call("eth_chainId")

    assert excinfo.value.code == "TRANSPORT_ERROR"
    assert excinfo.value.__cause__ is failure


def test_non_json_body_is_invalid_response():
    client = RpcClient("https://rpc.example", RecordingRequestor(FakeResponse(text="<html>")))

    with pytest.raises(TransportError) as excinfo:
        client.call("eth_chainId")

    assert excinfo.value.code == "INVALID_RESPONSE"


def test_envelope_without_result_is_invalid_response():
    client = RpcClient("https://rpc.example", RecordingRequestor(FakeResponse(payload={"jsonrpc": "2.0", "id": 1})))

    with pytest.raises(TransportError) as excinfo:
        client.call("eth_chainId")

    assert excinfo.value.code == "INVALID_RESPONSE"
