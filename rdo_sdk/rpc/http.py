from __future__ import annotations

"""
HTTP JSON-RPC transport (sync).

- Uses httpx (preferred) or requests, selected by `backend`.
- Posts one request envelope and returns the decoded response envelope
  as-is; JSON-RPC `error` members are *not* raised here, callers inspect them.
- No retries: transport failures surface immediately as RpcError.

Example:
    from rdo_sdk.rpc.http import RpcClient
    rpc = RpcClient("https://api.random.org/json-rpc/2/invoke")
    env = rpc.post({"jsonrpc": "2.0", "method": "getUsage",
                    "params": {"apiKey": "..."}, "id": 22407})
    print(env["result"]["bitsLeft"])
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

import httpx
import requests

from ..config import ClientConfig
from ..errors import JsonRpcCode, RpcError
from ..version import user_agent

logger = logging.getLogger(__name__)

JSON = Union[dict, list, str, int, float, bool, None]

_BACKENDS = ("httpx", "requests")


@dataclass
class RpcClient:
    """Synchronous JSON-RPC 2.0 transport over HTTP POST."""

    url: str
    timeout: float = 30.0
    headers: Optional[Mapping[str, str]] = None
    backend: str = "httpx"
    # Pre-built httpx.Client / requests.Session (or anything with .post); owned by the caller.
    session: Any = None
    _client: Any = field(init=False, default=None)
    _owns_client: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.backend not in _BACKENDS:
            raise ValueError(f"backend must be one of {_BACKENDS}, got: {self.backend!r}")
        merged_headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": user_agent(),
        }
        if self.headers:
            merged_headers.update(dict(self.headers))
        self.headers = merged_headers

        if self.session is not None:
            self._client = self.session
            return

        if self.backend == "httpx":
            self._client = httpx.Client(timeout=self.timeout, headers=merged_headers)
        else:
            self._client = requests.Session()
            self._client.headers.update(merged_headers)
        self._owns_client = True

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "RpcClient":
        return cls(
            url=config.endpoint,
            timeout=config.timeout,
            headers=config.http_headers(),
            **kwargs,
        )

    # --- context manager -------------------------------------------------

    def __enter__(self) -> "RpcClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    # --- public API ------------------------------------------------------

    def post(self, payload: Mapping[str, Any]) -> JSON:
        """POST one JSON-RPC envelope and return the decoded response body."""
        method = payload.get("method")
        if self._client is None:
            raise RpcError(
                method=method,
                code=JsonRpcCode.TRANSPORT_ERROR,
                message="RpcClient is closed",
            )
        try:
            body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            # NaN/Infinity have no JSON encoding
            raise RpcError(
                method=method,
                code=JsonRpcCode.INVALID_PARAMS,
                message="Request is not valid JSON",
                data=str(e),
            ) from e
        logger.debug("POST %s method=%s", self.url, method)

        if self.backend == "httpx":
            try:
                r = self._client.post(self.url, content=body, headers=self.headers)
            except httpx.HTTPError as e:
                raise RpcError(
                    method=method,
                    code=JsonRpcCode.TRANSPORT_ERROR,
                    message="Network error",
                    data=str(e),
                ) from e
        else:
            try:
                r = self._client.post(self.url, data=body, headers=self.headers, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                raise RpcError(
                    method=method,
                    code=JsonRpcCode.TRANSPORT_ERROR,
                    message="Network error",
                    data=str(e),
                ) from e

        # Avoid raise_for_status() to keep the error body visible below
        try:
            resp = r.json()
        except ValueError as e:
            raise RpcError(
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                message="Non-JSON response from RPC",
                data=f"HTTP {r.status_code}: {r.text[:256]}",
                http_status=r.status_code,
            ) from e

        if not isinstance(resp, dict):
            raise RpcError(
                method=method,
                code=JsonRpcCode.INTERNAL_ERROR,
                message="Invalid JSON-RPC response type",
                data=type(resp).__name__,
                http_status=r.status_code,
            )
        return resp


__all__ = ["RpcClient"]
