"""
Public entry points.

`LedgerApi` binds a transport and a preparer. Compilation is synchronous and
raises ValidationError before anything external is touched; only preparation
and route discovery cross the seam.
"""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from .check import create_check_create_transaction
from .core.datatypes import CheckIntent, Instructions, PathFindIntent, PaymentIntent, Prepared, RouteSet
from .pathfind import find_paths
from .payment import create_payment_transaction
from .prepare import prepare_transaction
from .transport import Transport

Preparer = Callable[[Dict[str, Any], Optional[Instructions]], Union[Prepared, Awaitable[Prepared]]]


class LedgerApi:
    def __init__(self, transport: Optional[Transport] = None, *, prepare: Preparer = prepare_transaction) -> None:
        self.transport = transport
        self.prepare = prepare

    async def _prepare(self, tx_json: Dict[str, Any], instructions: Optional[Instructions]) -> Prepared:
        prepared = self.prepare(tx_json, instructions)
        if inspect.isawaitable(prepared):
            prepared = await prepared
        return prepared

    async def compile_payment(
        self, address: str, payment: PaymentIntent, instructions: Optional[Instructions] = None
    ) -> Prepared:
        tx_json = create_payment_transaction(address, payment)
        return await self._prepare(tx_json, instructions)

    async def compile_check_create(
        self, address: str, check: CheckIntent, instructions: Optional[Instructions] = None
    ) -> Prepared:
        tx_json = create_check_create_transaction(address, check)
        return await self._prepare(tx_json, instructions)

    async def find_paths(self, pathfind: PathFindIntent) -> RouteSet:
        if self.transport is None:
            raise RuntimeError("find_paths requires a transport")
        return await find_paths(self.transport, pathfind)


__all__ = ["LedgerApi", "Preparer"]
