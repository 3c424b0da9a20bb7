"""JSON-RPC transport over HTTP (rippled admin/public port).

One POST per request, executed in a worker thread so callers can await it.
No retries; failures surface as RpcError (or the underlying requests error).
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

# Debug printing control
DEBUG_RPC = False

def _dbg(msg: str) -> None:
    if DEBUG_RPC:
        print(msg)


class RpcError(RuntimeError):
    """Raised for HTTP failures, envelopes without `result`, or non-success status."""

    def __init__(self, message: str, *, result: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.result = result


@dataclass(frozen=True)
class RpcConfig:
    """Endpoint settings, e.g. RpcConfig("http://127.0.0.1:5005")."""
    url: str
    timeout: int = 60


class JsonRpcTransport:
    """`Transport` implementation backed by a `requests.Session`."""

    def __init__(self, config: RpcConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session or requests.Session()

    def call(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """Blocking round trip. Returns the `result` object, not the envelope."""
        params = {k: v for k, v in request.items() if k != "command"}
        payload = {"method": request["command"], "params": [params]}
        _dbg(f"rpc -> {payload['method']}")
        try:
            r = self.session.post(self.config.url, json=payload, timeout=self.config.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise RpcError(f"{request['command']}: {e}") from e
        out = r.json()

        if "result" not in out:
            raise RpcError(f"Bad RPC response (no 'result'): {out}")
        result = out["result"]
        # rippled sometimes omits "status"; if present and not success => treat as error
        if result.get("status") not in (None, "success"):
            raise RpcError(
                f"{request['command']}: {result.get('error_message') or result.get('error')}",
                result=result,
            )
        return result

    async def request(self, request: Dict[str, Any]) -> Dict[str, Any]:
        return await asyncio.to_thread(self.call, request)

    def close(self) -> None:
        self.session.close()


__all__ = ["RpcError", "RpcConfig", "JsonRpcTransport"]
