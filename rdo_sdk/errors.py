"""
Typed error classes for rdo_sdk.

Validation failures and JSON-RPC error members are *returned* to callers as
`Rejected` / `Failure` replies (see `rdo_sdk.types.reply`); the classes here
are what `raise_for_error()` turns them into, and what the HTTP client raises
for transport problems. Catch the base `RdoSdkError` to handle all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional

__all__ = [
    "RdoSdkError",
    "RpcError",
    "ValidationError",
    "JsonRpcCode",
    "from_jsonrpc_error",
    "raise_for_jsonrpc_result",
]


class RdoSdkError(Exception):
    """Base class for all SDK errors."""


class JsonRpcCode(IntEnum):
    # JSON-RPC 2.0 spec
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # Client-side codes used by rdo_sdk.rpc.http
    TRANSPORT_ERROR = -32098
    SERVER_ERROR = -32000

    # random.org service errors (kept as hints)
    VALUE_ORDER = 300
    RANGE_TOO_SMALL = 301
    KEY_NOT_FOUND = 400
    KEY_NOT_RUNNING = 401
    REQUESTS_EXHAUSTED = 402
    BITS_EXHAUSTED = 403
    KEY_NOT_VALID_FOR_METHOD = 404
    SERVICE_INTERNAL = 500


@dataclass(slots=True)
class RpcError(RdoSdkError):
    """Raised for a JSON-RPC error member or a failed HTTP exchange."""

    method: Optional[str]
    code: int
    message: str
    data: Optional[Any] = None
    request_id: Optional[Any] = None
    http_status: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        parts = [f"RPC[{self.method or '-'}] code={self.code} msg={self.message!r}"]
        if self.request_id is not None:
            parts.append(f"id={self.request_id}")
        if self.http_status is not None:
            parts.append(f"http={self.http_status}")
        if self.data is not None:
            parts.append(f"data={self.data!r}")
        return " ".join(parts)

    @property
    def code_enum(self) -> Optional[JsonRpcCode]:
        try:
            return JsonRpcCode(self.code)
        except ValueError:
            return None


@dataclass(slots=True)
class ValidationError(RdoSdkError):
    """
    Raised by `Rejected.raise_for_error()`.

    Fields:
      - message: the human-readable rejection text
      - method: JSON-RPC method that would have been called, if known
    """

    message: str
    method: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = f" [{self.method}]" if self.method else ""
        return f"ValidationError{where}: {self.message}"


def from_jsonrpc_error(
    err_obj: Dict[str, Any],
    *,
    method: Optional[str] = None,
    request_id: Optional[Any] = None,
    http_status: Optional[int] = None,
) -> RpcError:
    """
    Convert a JSON-RPC error object into RpcError.

    `err_obj` should resemble: {"code": int, "message": str, "data": any?}
    """
    code = int(err_obj.get("code", JsonRpcCode.SERVER_ERROR))
    message = str(err_obj.get("message", "Unknown JSON-RPC error"))
    data = err_obj.get("data")
    return RpcError(
        method=method,
        code=code,
        message=message,
        data=data,
        request_id=request_id,
        http_status=http_status,
    )


def raise_for_jsonrpc_result(
    envelope: Dict[str, Any],
    *,
    method: Optional[str] = None,
    http_status: Optional[int] = None,
) -> None:
    """If `envelope` contains an "error" member, raise RpcError."""
    if "error" in envelope and envelope["error"] is not None:
        rid = envelope.get("id")
        raise from_jsonrpc_error(
            envelope["error"], method=method, request_id=rid, http_status=http_status
        )
