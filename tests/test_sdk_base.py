# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for sdk_base module: session construction, transport and decoding."""

from __future__ import annotations

import logging

import httpx
import pytest

from unbound_sdk import (
    DecodeError,
    InvalidArgument,
    RemoteError,
    SdkConfig,
    TransportError,
    UnboundSDK,
    create_sdk,
)
from unbound_sdk.sdk_base import encode_query
from unbound_sdk.services import SERVICES


class TestConstruction:
    """Tests for the supported construction forms."""

    def test_named_options_mapping(self):
        sdk = UnboundSDK({"namespace": "acme", "token": "jwt", "callId": "c-1"})
        assert sdk.namespace == "acme"
        assert sdk.token == "jwt"
        assert sdk.call_id == "c-1"

    def test_keyword_options(self):
        sdk = UnboundSDK(namespace="acme", fw_request_id="r-1")
        assert sdk.namespace == "acme"
        assert sdk.fw_request_id == "r-1"

    def test_legacy_positional(self):
        sdk = UnboundSDK("acme", "call-1", "jwt", "req-1", "api.example", "sockets")
        assert sdk.namespace == "acme"
        assert sdk.call_id == "call-1"
        assert sdk.token == "jwt"
        assert sdk.fw_request_id == "req-1"
        assert sdk.url == "api.example"
        assert sdk.socket_store == "sockets"

    def test_legacy_equivalent_to_named_form(self):
        legacy = UnboundSDK("n", "c", "t", "f")
        named = UnboundSDK({"namespace": "n", "callId": "c", "token": "t", "fwRequestId": "f"})
        for attr in ("namespace", "call_id", "token", "fw_request_id", "url", "user_id"):
            assert getattr(legacy, attr) == getattr(named, attr)
        assert legacy.base_url == named.base_url

    def test_empty_construction(self):
        sdk = UnboundSDK()
        for attr in ("namespace", "call_id", "token", "fw_request_id", "url", "user_id"):
            assert getattr(sdk, attr) is None
        assert sdk.store is None
        assert sdk.layouts is not None

    def test_legacy_positional_partial(self):
        sdk = UnboundSDK("acme")
        assert sdk.namespace == "acme"
        assert sdk.token is None

    def test_legacy_too_many_positionals(self):
        with pytest.raises(TypeError, match="at most 6"):
            UnboundSDK("a", "b", "c", "d", "e", "f", "g")

    def test_legacy_duplicate_keyword(self):
        with pytest.raises(TypeError, match="multiple values"):
            UnboundSDK("acme", namespace="other")

    def test_mapping_must_be_alone(self):
        with pytest.raises(TypeError):
            UnboundSDK({"namespace": "a"}, "extra")

    def test_unsupported_first_argument(self):
        with pytest.raises(TypeError, match="expects an options mapping"):
            UnboundSDK(42)

    def test_explicit_config(self):
        sdk = UnboundSDK(config=SdkConfig(namespace="acme"), token="jwt")
        assert sdk.namespace == "acme"
        assert sdk.token == "jwt"

    def test_empty_strings_become_none(self):
        sdk = UnboundSDK(namespace="", token="")
        assert sdk.namespace is None
        assert sdk.token is None

    def test_create_sdk(self):
        sdk = create_sdk({"namespace": "acme"}, token="jwt")
        assert isinstance(sdk, UnboundSDK)
        assert sdk.namespace == "acme"
        assert sdk.token == "jwt"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("UNBOUND_NAMESPACE", "envns")
        monkeypatch.delenv("UNBOUND_URL", raising=False)
        sdk = UnboundSDK.from_env()
        assert sdk.namespace == "envns"

    def test_every_service_installed(self):
        sdk = UnboundSDK()
        assert list(sdk.services) == list(SERVICES)
        for name in SERVICES:
            assert getattr(sdk, name) is sdk.services[name]
            assert getattr(sdk, name).sdk is sdk


class TestBaseUrl:
    """Tests for base URL resolution."""

    def test_derived_from_namespace(self):
        assert UnboundSDK(namespace="acme").base_url == "https://acme.api.unbound.cx"

    def test_login_host_without_namespace(self):
        assert UnboundSDK().base_url == "https://login.api.unbound.cx"

    def test_custom_api_domain(self):
        sdk = UnboundSDK(namespace="acme", api_domain="example.test")
        assert sdk.base_url == "https://acme.example.test"

    def test_explicit_url_wins(self):
        sdk = UnboundSDK(namespace="acme", url="https://api.example/")
        assert sdk.base_url == "https://api.example"

    def test_scheme_added_when_missing(self):
        assert UnboundSDK(url="api.example").base_url == "https://api.example"

    def test_namespace_change_moves_base_url(self):
        sdk = UnboundSDK(namespace="a")
        sdk.set_namespace("b")
        assert sdk.base_url == "https://b.api.unbound.cx"


class TestRequestBuilding:
    """Tests for _fetch request construction."""

    async def test_headers_reflect_session_context(self, recorder):
        sdk = UnboundSDK(
            namespace="acme", token="k", call_id="c-1", fw_request_id="r-1",
            transport=recorder.transport(),
        )
        await sdk._fetch("/ping", "GET")
        headers = recorder.last.headers
        assert headers["authorization"] == "Bearer k"
        assert headers["x-namespace"] == "acme"
        assert headers["x-call-id"] == "c-1"
        assert headers["x-request-id-fw"] == "r-1"
        assert headers["accept"] == "application/json"
        await sdk.aclose()

    async def test_empty_context_headers_omitted(self, recorder):
        sdk = UnboundSDK(transport=recorder.transport())
        await sdk._fetch("/ping", "GET")
        headers = recorder.last.headers
        assert "authorization" not in headers
        assert "x-namespace" not in headers
        assert "x-call-id" not in headers
        await sdk.aclose()

    async def test_skip_auth_omits_authorization(self, sdk, recorder):
        await sdk._fetch("/ping", "GET", skip_auth=True)
        assert "authorization" not in recorder.last.headers
        assert recorder.last.headers["x-namespace"] == "acme"

    async def test_token_change_seen_by_next_request(self, sdk, recorder):
        sdk.set_token("fresh")
        await sdk._fetch("/ping", "GET")
        assert recorder.last.headers["authorization"] == "Bearer fresh"

    async def test_json_body(self, sdk, recorder):
        await sdk._fetch("/things", "POST", {"body": {"a": 1}})
        assert recorder.last.method == "POST"
        assert str(recorder.last.url) == "https://acme.api.unbound.cx/things"
        assert recorder.last.headers["content-type"] == "application/json"
        assert recorder.body() == {"a": 1}

    async def test_no_body_without_body_option(self, sdk, recorder):
        await sdk._fetch("/things/1", "DELETE")
        assert recorder.last.content == b""
        assert "content-type" not in recorder.last.headers

    async def test_get_never_sends_body(self, sdk, recorder):
        await sdk._fetch("/things", "GET", {"body": {"a": 1}})
        assert recorder.last.content == b""

    async def test_query_string(self, sdk, recorder):
        await sdk._fetch("/things", "GET", {"query": {"limit": 10, "q": "a b"}})
        assert recorder.last.url.params["limit"] == "10"
        assert recorder.last.url.params["q"] == "a b"

    async def test_method_is_case_insensitive(self, sdk, recorder):
        await sdk._fetch("/things", "put", {"body": {}})
        assert recorder.last.method == "PUT"

    async def test_unsupported_method(self, sdk, recorder):
        with pytest.raises(InvalidArgument):
            await sdk._fetch("/things", "PATCH")
        assert recorder.requests == []

    async def test_relative_path_rejected(self, sdk, recorder):
        with pytest.raises(InvalidArgument):
            await sdk._fetch("things", "GET")
        assert recorder.requests == []

    async def test_request_line_logged(self, sdk, caplog):
        with caplog.at_level(logging.DEBUG, logger="unbound_sdk.sdk_base"):
            await sdk._fetch("/things", "GET")
        assert "API :: https :: GET :: /things :: 200" in caplog.text

    async def test_debug_mode_logs_at_info(self, sdk, caplog):
        sdk.debug()
        with caplog.at_level(logging.INFO, logger="unbound_sdk.sdk_base"):
            await sdk._fetch("/things", "GET")
        assert "API :: https :: GET :: /things :: 200" in caplog.text


class TestResponseDecoding:
    """Tests for success body decoding and error mapping."""

    async def test_json_body(self, sdk, recorder):
        recorder.reply(200, json={"id": "1"})
        assert await sdk._fetch("/x", "GET") == {"id": "1"}

    async def test_empty_body_is_none(self, sdk, recorder):
        recorder.reply(204)
        assert await sdk._fetch("/x", "DELETE") is None

    async def test_text_body(self, sdk, recorder):
        recorder.reply(200, text="pong")
        assert await sdk._fetch("/x", "GET") == "pong"

    async def test_binary_body(self, sdk, recorder):
        recorder.reply(200, content=b"\x89PNG", headers={"content-type": "image/png"})
        assert await sdk._fetch("/x", "GET") == b"\x89PNG"

    async def test_require_json_rejects_text(self, sdk, recorder):
        recorder.reply(200, text="not json")
        with pytest.raises(DecodeError):
            await sdk._fetch("/x", "GET", require_json=True)

    async def test_remote_error_carries_status_and_body(self, sdk, recorder):
        recorder.reply(404, json={"message": "not found"})
        with pytest.raises(RemoteError) as exc_info:
            await sdk._fetch("/x/1", "get")
        error = exc_info.value
        assert error.status == 404
        assert error.body == {"message": "not found"}
        assert error.method == "GET"
        assert error.path == "/x/1"
        assert error.message == "not found"

    async def test_remote_error_text_body(self, sdk, recorder):
        recorder.reply(502, text="Bad gateway")
        with pytest.raises(RemoteError) as exc_info:
            await sdk._fetch("/x", "GET")
        assert exc_info.value.body == "Bad gateway"

    async def test_transport_failure(self):
        def fail(request):
            raise httpx.ConnectError("refused", request=request)

        sdk = UnboundSDK(namespace="acme", transport=httpx.MockTransport(fail))
        with pytest.raises(TransportError) as exc_info:
            await sdk._fetch("/x", "GET")
        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        await sdk.aclose()

    async def test_any_request_failure_is_a_transport_error(self):
        def fail(request):
            raise httpx.RequestError("aborted", request=request)

        sdk = UnboundSDK(namespace="acme", transport=httpx.MockTransport(fail))
        with pytest.raises(TransportError):
            await sdk._fetch("/x", "GET")
        await sdk.aclose()

    async def test_corrupt_content_encoding(self, sdk, recorder):
        async def chunks():
            yield b"not gzip"

        recorder.reply(200, content=chunks(), headers={"content-encoding": "gzip"})
        with pytest.raises(DecodeError) as exc_info:
            await sdk._fetch("/x", "GET")
        assert isinstance(exc_info.value.__cause__, httpx.DecodingError)

    async def test_remote_error_message_uses_request_scheme(self, recorder):
        sdk = UnboundSDK(url="http://localhost:8080", transport=recorder.transport())
        recorder.reply(500, json={"message": "boom"})
        with pytest.raises(RemoteError) as exc_info:
            await sdk._fetch("/x", "GET")
        assert str(exc_info.value) == "API :: Error :: http :: GET :: /x :: 500"
        assert exc_info.value.scheme == "http"
        await sdk.aclose()


class TestSessionOperations:
    """Tests for status(), get_ip() and client lifecycle."""

    async def test_status_healthy(self, sdk, recorder):
        recorder.reply(
            200,
            json={"hasAuthorization": True, "authType": "bearer", "transport": "https"},
        )
        result = await sdk.status()
        assert recorder.last.url.path == "/health"
        assert result["healthy"] is True
        assert result["hasAuthorization"] is True
        assert result["authType"] == "bearer"
        assert result["namespace"] == "acme"
        assert result["statusCode"] == 200

    async def test_status_remote_failure_reported(self, sdk, recorder):
        recorder.reply(503, json={"error": "down"})
        result = await sdk.status()
        assert result["healthy"] is False
        assert result["error"] == "down"
        assert result["statusCode"] == 503

    async def test_status_transport_failure_reported(self):
        def fail(request):
            raise httpx.ConnectError("refused", request=request)

        sdk = UnboundSDK(namespace="acme", transport=httpx.MockTransport(fail))
        result = await sdk.status()
        assert result["healthy"] is False
        assert result["statusCode"] is None
        await sdk.aclose()

    async def test_get_ip(self, sdk, recorder):
        recorder.reply(200, json={"ip": "203.0.113.7"})
        assert await sdk.get_ip() == {"ip": "203.0.113.7"}
        assert recorder.last.url.path == "/get-ip"

    async def test_client_reused_and_closed(self, sdk):
        client = sdk._get_client()
        assert sdk._get_client() is client
        await sdk.aclose()
        assert sdk._client is None
        assert client.is_closed

    async def test_async_context_manager(self, recorder):
        async with UnboundSDK(namespace="acme", transport=recorder.transport()) as sdk:
            await sdk._fetch("/x", "GET")
            client = sdk._client
        assert client.is_closed


class TestEncodeQuery:
    """Tests for encode_query()."""

    def test_empty(self):
        assert encode_query(None) == ""
        assert encode_query({}) == ""

    def test_none_dropped(self):
        assert encode_query({"a": None, "b": "x"}) == "b=x"

    def test_booleans(self):
        assert encode_query({"a": True, "b": False}) == "a=true&b=false"

    def test_lists_repeat_key(self):
        assert encode_query({"id": ["1", "2"]}) == "id=1&id=2"

    def test_spaces_percent_encoded(self):
        assert encode_query({"q": "a b"}) == "q=a%20b"

    def test_mappings_json_encoded(self):
        assert encode_query({"where": {"a": 1}}) == "where=%7B%22a%22%3A%201%7D"
