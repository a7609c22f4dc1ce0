import copy
from typing import Any, Callable, Dict, List, Mapping, Optional

import pytest

from rdo_sdk import ClientConfig, RandomOrgClient

API_KEY = "6b1e65b9-4186-45c2-8981-b77a9842c4f0"


def usage_envelope(bits_left: int = 250000) -> Dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "result": {
            "status": "running",
            "creationTime": "2020-07-30 10:02:11Z",
            "bitsLeft": bits_left,
            "requestsLeft": 1000,
            "totalBits": 0,
            "totalRequests": 0,
        },
        "id": 22407,
    }


def random_envelope(data: List[Any], **extra: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "random": {"data": data, "completionTime": "2020-08-01 22:54:49Z"},
        "bitsUsed": 28,
        "bitsLeft": 3361463,
        "requestsLeft": 773473,
        "advisoryDelay": 3150,
    }
    result.update(extra)
    return {"jsonrpc": "2.0", "result": result, "id": 22407}


def error_envelope(code: int, message: str, data: Any = None) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "error": {"code": code, "message": message, "data": data}, "id": 22407}


class FakeTransport:
    """
    In-memory stand-in for RpcClient.

    Records every posted envelope; answers getUsage with a usage envelope and
    every other method from `responses` (method -> envelope or callable).
    """

    def __init__(self, bits_left: int = 250000) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.bits_left = bits_left
        self.responses: Dict[str, Any] = {}
        self.closed = False

    def post(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        self.calls.append(copy.deepcopy(dict(payload)))
        method = payload["method"]
        if method in self.responses:
            resp = self.responses[method]
            return resp(payload) if callable(resp) else resp
        if method == "getUsage":
            return usage_envelope(self.bits_left)
        return random_envelope([1, 2, 3])

    def close(self) -> None:  # pragma: no cover - never owned by the client
        self.closed = True

    @property
    def methods(self) -> List[str]:
        return [c["method"] for c in self.calls]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def make_client(transport: FakeTransport) -> Callable[..., RandomOrgClient]:
    def _make(api_key: Optional[str] = None, **overrides: Any) -> RandomOrgClient:
        cfg = ClientConfig()
        if api_key is not None:
            overrides["api_key"] = api_key
        return RandomOrgClient(transport, config=cfg.with_overrides(**overrides))

    return _make


@pytest.fixture
def client(make_client) -> RandomOrgClient:
    return make_client()


@pytest.fixture
def signed_client(make_client) -> RandomOrgClient:
    return make_client(API_KEY)
