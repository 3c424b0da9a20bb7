"""
Transport seam.

The package never opens connections itself. Anything with an async
`request(dict) -> dict` method that returns the rippled `result` object can be
used; `xrpl_intents.rpc.JsonRpcTransport` is the bundled implementation.
"""
from __future__ import annotations

from typing import Any, Dict, Protocol

from .core.amounts import xrp_from_drops
from .core.fmt import fmt_value


class Transport(Protocol):
    async def request(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """Single round trip. `request` carries `command` plus its parameters."""
        ...


async def get_native_balance(transport: Transport, address: str) -> str:
    """XRP balance of `address` as a decimal string (account_info, drops -> XRP)."""
    result = await transport.request({
        "command": "account_info",
        "account": address,
        "ledger_index": "validated",
    })
    return fmt_value(xrp_from_drops(result["account_data"]["Balance"]))


__all__ = ["Transport", "get_native_balance"]
