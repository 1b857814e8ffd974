"""Unit tests for ApiClient.api_fetch."""

from __future__ import annotations

import json

import httpx
import pytest

from tg_search_web.client.api import ApiClient, ClientConfig, RequestOptions

pytestmark = [pytest.mark.unit]


class _Recorder:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self, response: httpx.Response | None = None, exc: Exception | None = None):
        self.response = response or httpx.Response(200, json={"ok": True})
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.response


def _client(handler: _Recorder, **config) -> ApiClient:
    cfg = ClientConfig(**{"api_base": "http://api.test", **config})
    return ApiClient(cfg, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestBaseResolution:
    def test_explicit_base_wins_and_trailing_slash_is_stripped(self):
        cfg = ClientConfig(api_base="http://api.test/", origin="http://origin.test")
        assert cfg.resolve_base() == "http://api.test"

    def test_origin_is_used_without_explicit_base(self):
        cfg = ClientConfig(origin="http://origin.test")
        assert cfg.resolve_base() == "http://origin.test"

    def test_local_default_is_last_fallback(self):
        assert ClientConfig().resolve_base() == "http://localhost:5174"


class TestUrlConstruction:
    async def test_relative_path_resolves_against_base(self):
        handler = _Recorder()
        async with _client(handler) as client:
            await client.api_fetch("/api/search")
        assert str(handler.requests[0].url) == "http://api.test/api/search"

    async def test_absolute_url_is_used_verbatim(self):
        handler = _Recorder()
        async with _client(handler) as client:
            await client.api_fetch("HTTPS://other.test/x")
        assert handler.requests[0].url.host == "other.test"
        assert handler.requests[0].url.path == "/x"

    async def test_none_query_values_are_skipped_and_others_stringified(self):
        handler = _Recorder()
        query = {"q": "hello", "page": 2, "exact": True, "ratio": 0.5, "chat": None}
        async with _client(handler) as client:
            await client.api_fetch("/api/search", RequestOptions(query=query))

        params = handler.requests[0].url.params
        assert "chat" not in params
        assert params["q"] == "hello"
        assert params["page"] == "2"
        assert params["exact"] == "true"
        assert params["ratio"] == "0.5"

    async def test_integral_float_is_rendered_without_fraction(self):
        handler = _Recorder()
        async with _client(handler) as client:
            await client.api_fetch("/api/search", RequestOptions(query={"page": 2.0}))
        assert handler.requests[0].url.params["page"] == "2"

    async def test_query_value_replaces_key_already_in_path(self):
        handler = _Recorder()
        async with _client(handler) as client:
            await client.api_fetch("/x?page=1&q=a", RequestOptions(query={"page": 2}))
        params = handler.requests[0].url.params
        assert params.get_list("page") == ["2"]
        assert params["q"] == "a"


class TestHeadersAndBody:
    async def test_no_authorization_header_for_empty_token(self):
        handler = _Recorder()
        async with _client(handler, auth_token="") as client:
            await client.api_fetch("/api/user/profile")
        request = handler.requests[0]
        assert "authorization" not in request.headers
        assert request.headers["content-type"] == "application/json"

    async def test_bearer_header_for_configured_token(self):
        handler = _Recorder()
        async with _client(handler, auth_token="secret") as client:
            await client.api_fetch("/api/user/profile")
        assert handler.requests[0].headers["authorization"] == "Bearer secret"

    async def test_caller_headers_override_defaults(self):
        handler = _Recorder()
        options = RequestOptions(headers={"authorization": "Token x", "Content-Type": "text/plain"})
        async with _client(handler, auth_token="secret") as client:
            await client.api_fetch("/api/x", options)
        headers = handler.requests[0].headers
        assert headers.get_list("authorization") == ["Token x"]
        assert headers["content-type"] == "text/plain"

    async def test_post_body_is_serialized_as_json(self):
        handler = _Recorder()
        body = {"phone_number": "+8613800138000", "code": "12345", "nested": [1, None, "中文"]}
        async with _client(handler) as client:
            await client.api_fetch("/api/login", RequestOptions(method="POST", body=body))
        request = handler.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == body

    async def test_get_never_sends_body(self):
        handler = _Recorder()
        async with _client(handler) as client:
            await client.api_fetch("/api/x", RequestOptions(body={"a": 1}))
        assert handler.requests[0].content == b""


class TestResponseNormalization:
    async def test_envelope_success(self):
        handler = _Recorder(httpx.Response(200, json={"code": 200, "data": {"suggestions": ["AI"]}}))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/suggestions")
        assert result.ok is True
        assert result.status == 200
        assert result.data["data"]["suggestions"] == ["AI"]
        assert result.error is None

    async def test_bare_array_body_is_success_on_2xx(self):
        handler = _Recorder(httpx.Response(200, json=["a", "b"]))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/search/suggestions")
        assert result.ok is True
        assert result.data == ["a", "b"]

    async def test_backend_code_overrides_http_success(self):
        handler = _Recorder(httpx.Response(200, json={"code": 500, "message": "x"}))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/trending")
        assert result.ok is False
        assert result.status == 200
        assert result.error == "x"

    async def test_http_error_with_unparsable_body(self):
        handler = _Recorder(httpx.Response(404, content=b"<html>not found</html>"))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/missing")
        assert result.ok is False
        assert result.status == 404
        assert result.data is None
        assert result.error == "Not Found"

    async def test_http_error_prefers_body_message(self):
        handler = _Recorder(httpx.Response(401, json={"status": "error", "message": "验证码错误"}))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/login", RequestOptions(method="POST", body={"code": "0"}))
        assert result.ok is False
        assert result.status == 401
        assert result.error == "验证码错误"
        assert result.data["status"] == "error"

    async def test_success_status_with_empty_body_is_reported_as_failure(self):
        handler = _Recorder(httpx.Response(200, content=b""))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/x")
        assert result.ok is False
        assert result.status == 200
        assert result.data is None
        assert result.error


class TestTransportFailures:
    async def test_connect_error_never_raises(self):
        handler = _Recorder(exc=httpx.ConnectError("connection refused"))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/search")
        assert result.ok is False
        assert result.status == 0
        assert result.error == "connection refused"

    async def test_exception_without_message_still_has_error_text(self):
        handler = _Recorder(exc=httpx.ReadTimeout(""))
        async with _client(handler) as client:
            result = await client.api_fetch("/api/search")
        assert result.status == 0
        assert result.error == "ReadTimeout"

    async def test_unserializable_body_is_reported_not_raised(self):
        handler = _Recorder()
        async with _client(handler) as client:
            result = await client.api_fetch("/api/x", RequestOptions(method="POST", body={"a": object()}))
        assert result.ok is False
        assert result.status == 0
        assert result.error
        assert handler.requests == []

    async def test_malformed_base_url_is_reported_not_raised(self):
        async with ApiClient(ClientConfig(api_base="not a url")) as client:
            result = await client.api_fetch("/x")
        assert result.ok is False
        assert result.status == 0
        assert result.data is None
        assert result.error
