from __future__ import annotations
import copy
from typing import Any, Dict, List

import pytest


# -----------------------------
# Test helpers
# -----------------------------


class FakeTransport:
    """In-memory Transport: answers each `command` from a canned result.

    - responses: command -> result dict, or an Exception instance to raise.
    - calls: every request received, in order.
    """

    def __init__(self, responses: Dict[str, Any] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: List[Dict[str, Any]] = []

    async def request(self, request: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(copy.deepcopy(request))
        resp = self.responses[request["command"]]
        if isinstance(resp, Exception):
            raise resp
        return copy.deepcopy(resp)

    def commands(self) -> List[str]:
        return [c["command"] for c in self.calls]


def account_info(balance_drops: str) -> Dict[str, Any]:
    return {"account_data": {"Balance": balance_drops}, "status": "success"}


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def fake_transport():
    return FakeTransport


@pytest.fixture()
def account_info_result():
    return account_info
