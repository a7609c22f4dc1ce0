"""
Reply types for the random.org client.

Two complementary representations:
- `TypedDict` shapes mirroring the JSON-RPC payloads on the wire.
- Frozen dataclasses for what client calls return: a `Success` carrying a
  per-method result variant, a `Failure` carrying the JSON-RPC error member,
  or a `Rejected` produced locally when validation fails (nothing was sent).

`Success` and `Failure` keep the decoded response in `raw`, untouched.
Nothing here performs network I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TypedDict, Union

from ..errors import JsonRpcCode, RpcError, ValidationError, raise_for_jsonrpc_result

# --- JSON-RPC TypedDict shapes ----------------------------------------------


class RequestDict(TypedDict):
    jsonrpc: str
    method: str
    params: Dict[str, Any]
    id: int


class ErrorDict(TypedDict, total=False):
    code: int
    message: str
    data: Any


class RandomDict(TypedDict, total=False):
    data: List[Any]
    completionTime: str
    # Signed results echo the request and carry a serial number
    method: str
    hashedApiKey: str
    serialNumber: int


class ResultDict(TypedDict, total=False):
    random: RandomDict
    signature: str
    bitsUsed: int
    bitsLeft: int
    requestsLeft: int
    advisoryDelay: int
    authenticity: bool
    status: str
    creationTime: str
    totalBits: int
    totalRequests: int


class ResponseDict(TypedDict, total=False):
    jsonrpc: str
    result: ResultDict
    error: ErrorDict
    id: int


# --- Result variants ---------------------------------------------------------


@dataclass(slots=True, frozen=True)
class RandomData:
    data: List[Any]
    completion_time: Optional[str] = None
    serial_number: Optional[int] = None

    @staticmethod
    def from_rpc_dict(d: RandomDict) -> "RandomData":
        return RandomData(
            data=d.get("data", []),
            completion_time=d.get("completionTime"),
            serial_number=d.get("serialNumber"),
        )


@dataclass(slots=True, frozen=True)
class UsageResult:
    """getUsage: quota fields only."""

    bits_left: int
    requests_left: Optional[int] = None
    status: Optional[str] = None
    creation_time: Optional[str] = None
    total_bits: Optional[int] = None
    total_requests: Optional[int] = None

    @staticmethod
    def from_rpc_dict(d: ResultDict) -> "UsageResult":
        return UsageResult(
            bits_left=d["bitsLeft"],
            requests_left=d.get("requestsLeft"),
            status=d.get("status"),
            creation_time=d.get("creationTime"),
            total_bits=d.get("totalBits"),
            total_requests=d.get("totalRequests"),
        )


@dataclass(slots=True, frozen=True)
class RandomResult:
    """generate*: random data plus quota bookkeeping; `signature` only on signed calls."""

    random: RandomData
    bits_used: Optional[int] = None
    bits_left: Optional[int] = None
    requests_left: Optional[int] = None
    advisory_delay: Optional[int] = None  # ms; informational, never applied
    signature: Optional[str] = None

    @property
    def data(self) -> List[Any]:
        return self.random.data

    @property
    def signed(self) -> bool:
        return self.signature is not None

    @staticmethod
    def from_rpc_dict(d: ResultDict) -> "RandomResult":
        return RandomResult(
            random=RandomData.from_rpc_dict(d["random"]),
            bits_used=d.get("bitsUsed"),
            bits_left=d.get("bitsLeft"),
            requests_left=d.get("requestsLeft"),
            advisory_delay=d.get("advisoryDelay"),
            signature=d.get("signature"),
        )


@dataclass(slots=True, frozen=True)
class VerificationResult:
    authenticity: bool

    @staticmethod
    def from_rpc_dict(d: ResultDict) -> "VerificationResult":
        return VerificationResult(authenticity=bool(d["authenticity"]))


@dataclass(slots=True, frozen=True)
class StoredResult:
    """getResult: a previously generated signed result."""

    random: RandomData
    signature: str

    @staticmethod
    def from_rpc_dict(d: ResultDict) -> "StoredResult":
        return StoredResult(
            random=RandomData.from_rpc_dict(d["random"]),
            signature=d["signature"],
        )


ResultShape = Union[UsageResult, RandomResult, VerificationResult, StoredResult]


@dataclass(slots=True, frozen=True)
class ErrorShape:
    code: int
    message: str
    data: Any = None

    @staticmethod
    def from_rpc_dict(d: ErrorDict) -> "ErrorShape":
        return ErrorShape(
            code=int(d.get("code", 0)),
            message=str(d.get("message", "")),
            data=d.get("data"),
        )


# --- Replies -----------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Success:
    method: str
    result: ResultShape
    raw: Dict[str, Any]

    ok = True

    def raise_for_error(self) -> "Success":
        return self


@dataclass(slots=True, frozen=True)
class Failure:
    method: str
    error: ErrorShape
    raw: Dict[str, Any]

    ok = False

    def raise_for_error(self) -> "Success":
        raise_for_jsonrpc_result(self.raw, method=self.method)
        raise AssertionError("Failure without an error member")


@dataclass(slots=True, frozen=True)
class Rejected:
    """Produced locally; no request was sent."""

    method: str
    message: str

    ok = False

    def raise_for_error(self) -> "Success":
        raise ValidationError(self.message, method=self.method)


Reply = Union[Success, Failure, Rejected]


_PARSERS = {
    "getUsage": UsageResult.from_rpc_dict,
    "verifySignature": VerificationResult.from_rpc_dict,
    "getResult": StoredResult.from_rpc_dict,
}


def parse_reply(method: str, envelope: Dict[str, Any]) -> Union[Success, Failure]:
    """Wrap a decoded response envelope in the matching reply variant."""
    if envelope.get("error") is not None:
        return Failure(
            method=method,
            error=ErrorShape.from_rpc_dict(envelope["error"]),
            raw=envelope,
        )
    if "result" not in envelope:
        raise RpcError(
            method=method,
            code=JsonRpcCode.INTERNAL_ERROR,
            message="Malformed JSON-RPC response",
            data=envelope,
            request_id=envelope.get("id"),
        )
    parser = _PARSERS.get(method, RandomResult.from_rpc_dict)
    return Success(method=method, result=parser(envelope["result"]), raw=envelope)


__all__ = [
    "RequestDict",
    "ResponseDict",
    "ResultDict",
    "RandomDict",
    "ErrorDict",
    "RandomData",
    "UsageResult",
    "RandomResult",
    "VerificationResult",
    "StoredResult",
    "ResultShape",
    "ErrorShape",
    "Success",
    "Failure",
    "Rejected",
    "Reply",
    "parse_reply",
]
