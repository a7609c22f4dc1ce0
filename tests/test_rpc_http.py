import json

import httpx
import pytest
import requests

from rdo_sdk import ClientConfig, JsonRpcCode, RandomOrgClient, RpcClient, RpcError, Success

URL = "https://api.random.org/json-rpc/2/invoke"

USAGE = {"jsonrpc": "2.0", "result": {"bitsLeft": 900, "requestsLeft": 10}, "id": 22407}


def _httpx_rpc(handler, **kwargs) -> RpcClient:
    return RpcClient(URL, session=httpx.Client(transport=httpx.MockTransport(handler)), **kwargs)


def test_httpx_post_sends_envelope_and_headers():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=USAGE)

    rpc = _httpx_rpc(handler)
    payload = {"jsonrpc": "2.0", "method": "getUsage", "params": {"apiKey": "k"}, "id": 22407}
    assert rpc.post(payload) == USAGE

    (req,) = seen
    assert req.method == "POST"
    assert str(req.url) == URL
    assert req.headers["content-type"] == "application/json"
    assert req.headers["user-agent"].startswith("rdo-sdk-python/")
    assert json.loads(req.content) == payload


def test_error_member_is_returned_not_raised():
    body = {"jsonrpc": "2.0", "error": {"code": 401, "message": "not running"}, "id": 22407}
    rpc = _httpx_rpc(lambda request: httpx.Response(200, json=body))
    assert rpc.post({"method": "getUsage"}) == body


def test_network_error_becomes_rpc_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    rpc = _httpx_rpc(handler)
    with pytest.raises(RpcError) as ei:
        rpc.post({"method": "getUsage"})
    assert ei.value.code == JsonRpcCode.TRANSPORT_ERROR
    assert ei.value.method == "getUsage"
    assert isinstance(ei.value.__cause__, httpx.ConnectError)


def test_non_json_body_becomes_rpc_error():
    rpc = _httpx_rpc(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))
    with pytest.raises(RpcError) as ei:
        rpc.post({"method": "generateUUIDs"})
    assert ei.value.code == JsonRpcCode.INTERNAL_ERROR
    assert ei.value.http_status == 502
    assert "Bad gateway" in ei.value.data


def test_non_object_body_becomes_rpc_error():
    rpc = _httpx_rpc(lambda request: httpx.Response(200, json=[1, 2]))
    with pytest.raises(RpcError) as ei:
        rpc.post({"method": "getUsage"})
    assert ei.value.message == "Invalid JSON-RPC response type"


class FakeResponse:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self._body = body
        self.text = body if isinstance(body, str) else json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.posts = []

    def post(self, url, data=None, headers=None, timeout=None):
        self.posts.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


def test_requests_backend_posts_body():
    session = FakeSession(FakeResponse(200, USAGE))
    rpc = RpcClient(URL, backend="requests", session=session, timeout=4.0)
    assert rpc.post({"method": "getUsage"}) == USAGE
    (sent,) = session.posts
    assert sent["url"] == URL
    assert sent["timeout"] == 4.0
    assert json.loads(sent["data"]) == {"method": "getUsage"}


def test_requests_backend_errors():
    rpc = RpcClient(URL, backend="requests", session=FakeSession(exc=requests.exceptions.ConnectionError("down")))
    with pytest.raises(RpcError) as ei:
        rpc.post({"method": "getUsage"})
    assert ei.value.code == JsonRpcCode.TRANSPORT_ERROR

    rpc = RpcClient(URL, backend="requests", session=FakeSession(FakeResponse(503, "busy")))
    with pytest.raises(RpcError) as ei:
        rpc.post({"method": "getUsage"})
    assert ei.value.http_status == 503


def test_unknown_backend():
    with pytest.raises(ValueError):
        RpcClient(URL, backend="urllib")


def test_owned_client_is_closed():
    rpc = RpcClient(URL)
    assert isinstance(rpc._client, httpx.Client)
    with rpc:
        pass
    assert rpc._client is None

    rpc = RpcClient(URL, backend="requests")
    assert isinstance(rpc._client, requests.Session)
    rpc.close()
    assert rpc._client is None


def test_from_config_and_end_to_end():
    cfg = ClientConfig(endpoint="https://example.test/invoke", timeout=3.0)
    calls = []

    def handler(request):
        body = json.loads(request.content)
        calls.append(body)
        if body["method"] == "getUsage":
            return httpx.Response(200, json=USAGE)
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "result": {"random": {"data": [3, 1], "completionTime": "t"}, "bitsLeft": 880},
                "id": body["id"],
            },
        )

    rpc = RpcClient.from_config(cfg, session=httpx.Client(transport=httpx.MockTransport(handler)))
    assert rpc.url == "https://example.test/invoke"
    assert rpc.timeout == 3.0

    with RandomOrgClient(rpc, config=cfg) as rdo:
        reply = rdo.generate_integers(2, max=3)
    assert isinstance(reply, Success)
    assert reply.result.data == [3, 1]
    assert [c["method"] for c in calls] == ["getUsage", "generateIntegers"]


def test_nan_never_reaches_the_wire():
    seen = []
    rpc = _httpx_rpc(lambda request: seen.append(request) or httpx.Response(200, json=USAGE))
    with pytest.raises(RpcError) as ei:
        rpc.post({"method": "generateGaussians", "params": {"mean": float("nan")}})
    assert ei.value.code == JsonRpcCode.INVALID_PARAMS
    assert isinstance(ei.value.__cause__, ValueError)
    assert seen == []


def test_post_after_close_raises_rpc_error():
    rpc = RpcClient(URL)
    rpc.close()
    with pytest.raises(RpcError) as ei:
        rpc.post({"method": "getUsage"})
    assert ei.value.message == "RpcClient is closed"


def test_closed_owned_client_reports_clearly():
    rdo = RandomOrgClient()
    rdo.close()
    with pytest.raises(RpcError) as ei:
        rdo.get_usage()
    assert ei.value.code == JsonRpcCode.TRANSPORT_ERROR
