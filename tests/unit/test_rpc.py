import asyncio

import pytest
import requests

from xrpl_intents.rpc import JsonRpcTransport, RpcConfig, RpcError
from xrpl_intents.transport import get_native_balance

SRC = "r9cZA1mLK5R5Am25ArfXFmqgNwjZgnfk59"


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.body


class FakeSession:
    """Minimal requests.Session stand-in recording POST payloads."""

    def __init__(self, response):
        self.response = response
        self.posts = []

    def post(self, url, json=None, timeout=None):
        self.posts.append((url, json, timeout))
        return self.response

    def close(self):
        pass


def test_request_unwraps_result_and_shapes_payload():
    session = FakeSession(FakeResponse({"result": {"account_data": {"Balance": "2500000"}, "status": "success"}}))
    t = JsonRpcTransport(RpcConfig("http://127.0.0.1:5005", timeout=5), session=session)
    balance = asyncio.run(get_native_balance(t, SRC))
    assert balance == "2.5"
    url, payload, timeout = session.posts[0]
    assert url == "http://127.0.0.1:5005"
    assert timeout == 5
    assert payload == {
        "method": "account_info",
        "params": [{"account": SRC, "ledger_index": "validated"}],
    }


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse({"id": 1}),
        FakeResponse({"result": {"status": "error", "error": "actNotFound"}}),
        FakeResponse({}, status_code=503),
    ],
)
def test_request_errors(response):
    t = JsonRpcTransport(RpcConfig("http://node"), session=FakeSession(response))
    with pytest.raises(RpcError):
        asyncio.run(t.request({"command": "account_info", "account": SRC}))
