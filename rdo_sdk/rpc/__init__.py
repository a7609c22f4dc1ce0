"""
rdo_sdk.rpc
-----------

HTTP transport for the random.org JSON-RPC endpoint.

This package exposes:
- RpcClient: posts one JSON-RPC envelope, returns the decoded response (see .http)

Import style:

    from rdo_sdk.rpc import RpcClient
    rpc = RpcClient(url="https://api.random.org/json-rpc/2/invoke")

Any object with a compatible ``post(payload) -> dict`` method can stand in
for RpcClient (tests use an in-memory fake).
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from .http import RpcClient


class Transport(Protocol):
    def post(self, payload: Mapping[str, Any]) -> Any: ...


__all__ = ["RpcClient", "Transport"]
