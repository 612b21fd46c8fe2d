# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Session object for the Unbound platform API.

UnboundSDK is the foundation layer of the SDK, providing:

1. Session context: namespace, user_id, url, token, call_id, fw_request_id,
   socket_store, plus an optional host key/value store.
2. Transport: _fetch() builds, dispatches and decodes every HTTP request
   through one lazily created httpx.AsyncClient.
3. Services: the fixed facade roster, installed as attributes and reachable
   by name through self.services.

Construction forms:
    # Modern, named options (mapping keys in camelCase or snake_case):
    sdk = UnboundSDK({"namespace": "acme", "token": "..."})
    sdk = UnboundSDK(namespace="acme", token="...")

    # Legacy positional: (namespace, call_id, token, fw_request_id, url, socket_store)
    sdk = UnboundSDK("acme", "call-1", "jwt", "req-1")

    # Explicit config or environment:
    sdk = UnboundSDK(config=SdkConfig(namespace="acme"))
    sdk = UnboundSDK.from_env()

Context headers sent on every request, one per non-empty field:
    x-namespace: namespace
    x-call-id: call_id
    x-request-id-fw: fw_request_id

Usage:
    async with UnboundSDK(namespace="acme", token=token) as sdk:
        reply = await sdk.ai.generative.chat(method="gpt", prompt="Hello")
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from .errors import DecodeError, InvalidArgument, RemoteError, TransportError
from .interface.service_base import ServiceManager
from .sdk_config import SdkConfig, config_from_env
from .services import SERVICES

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")

CONTEXT_HEADERS = (
    ("namespace", "x-namespace"),
    ("call_id", "x-call-id"),
    ("fw_request_id", "x-request-id-fw"),
)

LEGACY_ARGS = ("namespace", "call_id", "token", "fw_request_id", "url", "socket_store")

_TEXT_TYPES = ("json", "text/", "xml", "javascript")


class UnboundSDK:
    """Session bound to a tenant namespace and credentials.

    Attributes:
        namespace: Tenant identifier.
        user_id: Authenticated principal (set by login, cleared by logout).
        url: Explicit base URL, None when derived from namespace.
        token: Bearer credential.
        call_id: Voice call correlation id.
        fw_request_id: Forwarded request correlation id.
        socket_store: Opaque realtime socket registry handle.
        store: Host key/value store mirroring login state, or None.
        services: ServiceManager with every facade by name.
    """

    def __init__(self, *args: Any, config: SdkConfig | None = None, **kwargs: Any):
        """Initialize session from one of the supported construction forms.

        Raises:
            TypeError: If the arguments match none of the forms.
        """
        self._configure(self._resolve_config(args, config, kwargs))

        self._client: httpx.AsyncClient | None = None
        self._log_level = logging.DEBUG

        self.services = ServiceManager(self, SERVICES)

    @staticmethod
    def _resolve_config(
        args: tuple[Any, ...], config: SdkConfig | None, kwargs: dict[str, Any]
    ) -> SdkConfig:
        """Reduce legacy, mapping, keyword and config forms to one SdkConfig."""
        if config is not None:
            if args:
                raise TypeError("Positional options cannot be combined with config=")
            return dataclasses.replace(config, **SdkConfig.normalize_options(kwargs))

        if not args:
            return SdkConfig.from_options(kwargs)

        first = args[0]
        if isinstance(first, Mapping):
            if len(args) > 1:
                raise TypeError("Options mapping must be the only positional argument")
            return SdkConfig.from_options(first, **kwargs)

        if first is None or isinstance(first, str):
            if len(args) > len(LEGACY_ARGS):
                raise TypeError(
                    f"UnboundSDK() takes at most {len(LEGACY_ARGS)} positional arguments "
                    f"but {len(args)} were given"
                )
            legacy = dict(zip(LEGACY_ARGS, args))
            for key in kwargs:
                if key in legacy:
                    raise TypeError(f"UnboundSDK() got multiple values for argument '{key}'")
            return SdkConfig.from_options(legacy, **kwargs)

        raise TypeError(
            "UnboundSDK() expects an options mapping or a namespace string, "
            f"got {type(first).__name__}"
        )

    def _configure(self, config: SdkConfig) -> None:
        self.config = config
        self.namespace: str | None = config.namespace or None
        self.call_id: str | None = config.call_id or None
        self.token: str | None = config.token or None
        self.fw_request_id: str | None = config.fw_request_id or None
        self.url: str | None = config.url or None
        self.user_id: str | None = config.user_id or None
        self.socket_store = config.socket_store
        self.store = config.store
        self.timeout = config.timeout
        self.api_domain = config.api_domain
        self._transport = config.transport

    @classmethod
    def from_env(cls, **kwargs: Any) -> UnboundSDK:
        """Create a session from UNBOUND_* environment variables."""
        return cls(config=config_from_env(), **kwargs)

    def __repr__(self) -> str:
        return f"<UnboundSDK namespace={self.namespace!r} url={self.base_url!r}>"

    # -------------------------------------------------------------------------
    # Context
    # -------------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        """Absolute base URL without trailing slash."""
        if self.url:
            url = self.url if "://" in self.url else f"https://{self.url}"
            return url.rstrip("/")
        return f"https://{self.namespace or 'login'}.{self.api_domain}"

    def set_token(self, token: str | None) -> None:
        self.token = token or None

    def set_namespace(self, namespace: str | None) -> None:
        self.namespace = namespace or None

    def debug(self, enabled: bool = True) -> UnboundSDK:
        """Log request lines at INFO instead of DEBUG for this session."""
        self._log_level = logging.INFO if enabled else logging.DEBUG
        return self

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def _get_client(self) -> httpx.AsyncClient:
        """Lazy-create the shared HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client. The session may be reused afterwards."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> UnboundSDK:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _build_headers(self, has_body: bool, skip_auth: bool) -> dict[str, str]:
        """Headers reflecting the session context at call time."""
        headers = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.token and not skip_auth:
            headers["Authorization"] = f"Bearer {self.token}"
        for attr, header in CONTEXT_HEADERS:
            value = getattr(self, attr)
            if value:
                headers[header] = str(value)
        return headers

    async def _send(
        self,
        path: str,
        method: str,
        options: dict[str, Any] | None = None,
        skip_auth: bool = False,
    ) -> httpx.Response:
        """Build and dispatch a request, returning the raw response.

        Raises:
            InvalidArgument: If method or path are malformed.
            TransportError: If no HTTP response was received.
            DecodeError: If the body could not be decoded by its content encoding.
        """
        options = options or {}
        method = method.upper()
        if method not in HTTP_METHODS:
            raise InvalidArgument(f"Unsupported HTTP method {method}", param="method")
        if not path.startswith("/"):
            raise InvalidArgument(f"Path must start with '/': {path}", param="path")

        url = f"{self.base_url}{path}"
        query_string = encode_query(options.get("query"))
        if query_string:
            url = f"{url}?{query_string}"

        body = options.get("body") if method != "GET" else None
        files = options.get("files")
        request: dict[str, Any] = {}
        if files is not None:
            request["files"] = files
            request["data"] = options.get("data") or {}
        elif body is not None:
            request["content"] = json.dumps(body)

        headers = self._build_headers(has_body="content" in request, skip_auth=skip_auth)

        scheme = httpx.URL(url).scheme
        try:
            response = await self._get_client().request(method, url, headers=headers, **request)
        except httpx.DecodingError as e:
            logger.warning("API :: %s :: %s :: %s :: bad encoding: %s", scheme, method, path, e)
            raise DecodeError(f"{method} {path} body could not be decoded: {e}") from e
        except httpx.RequestError as e:
            logger.warning("API :: %s :: %s :: %s :: failure: %s", scheme, method, path, e)
            raise TransportError(f"{method} {path} failed: {e}", cause=e) from e

        status = response.status_code
        logger.log(self._log_level, "API :: %s :: %s :: %s :: %s", scheme, method, path, status)
        return response

    async def _fetch(
        self,
        path: str,
        method: str,
        options: dict[str, Any] | None = None,
        skip_auth: bool = False,
        require_json: bool = False,
    ) -> Any:
        """Perform a request and return the decoded response body.

        Args:
            path: Path relative to the base URL, starting with '/'.
            method: GET, POST, PUT or DELETE.
            options: {"body": ..., "query": ...}; multipart uploads use
                {"files": ..., "data": ...}.
            skip_auth: Omit the Authorization header.
            require_json: Raise DecodeError instead of returning raw text.

        Returns:
            Decoded JSON, raw text for non-JSON text bodies, bytes for binary
            content, None for an empty body.

        Raises:
            TransportError: If no HTTP response was received.
            RemoteError: If the status is outside 200-299.
            DecodeError: If require_json is set and the body is not JSON.
        """
        response = await self._send(path, method, options, skip_auth=skip_auth)
        if not response.is_success:
            raise RemoteError(
                response.status_code,
                _error_body(response),
                method.upper(),
                path,
                scheme=response.request.url.scheme,
            )
        return _decode_body(response, require_json)

    # -------------------------------------------------------------------------
    # Session-level operations
    # -------------------------------------------------------------------------

    async def status(self) -> dict[str, Any]:
        """Check configuration and API connectivity via GET /health.

        Never raises for remote or transport failures; reports them instead.
        """
        try:
            response = await self._send("/health", "GET")
        except (TransportError, DecodeError) as e:
            return self._status_failure(str(e), None)

        if not response.is_success:
            body = _error_body(response)
            message = RemoteError(response.status_code, body).message
            return self._status_failure(message or response.reason_phrase, response.status_code)

        try:
            health = response.json()
        except ValueError:
            health = {}
        if not isinstance(health, dict):
            health = {}

        return {
            "healthy": True,
            "hasAuthorization": health.get("hasAuthorization", False),
            "authType": health.get("authType"),
            "namespace": self.namespace,
            "transport": health.get("transport", "unknown"),
            "timestamp": health.get("timestamp"),
            "url": health.get("url"),
            "statusCode": response.status_code,
        }

    def _status_failure(self, error: str, status_code: int | None) -> dict[str, Any]:
        return {
            "healthy": False,
            "hasAuthorization": False,
            "authType": None,
            "namespace": self.namespace,
            "error": error,
            "statusCode": status_code,
        }

    async def get_ip(self) -> Any:
        """Return the caller's public IP address as seen by the API."""
        return await self._fetch("/get-ip", "GET")


def create_sdk(options: Mapping[str, Any] | None = None, **kwargs: Any) -> UnboundSDK:
    """Factory forwarding to the named-options form of UnboundSDK."""
    return UnboundSDK(dict(options or {}), **kwargs)


def encode_query(query: Mapping[str, Any] | None) -> str:
    """Encode a query mapping as a URL query string (without '?').

    None values are dropped, sequences repeat the key, booleans become
    true/false and mappings are JSON encoded.
    """
    if not query:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _query_value(value)))
    return urlencode(pairs, quote_via=quote)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        return json.dumps(value)
    return str(value)


def _decode_body(response: httpx.Response, require_json: bool) -> Any:
    """Decode a success body per its content type."""
    if not response.content:
        if require_json:
            raise DecodeError("Empty response body", body=None)
        return None

    content_type = response.headers.get("content-type", "").lower()
    if content_type and not any(marker in content_type for marker in _TEXT_TYPES):
        if require_json:
            raise DecodeError(f"Expected JSON, got {content_type}", body=response.content)
        return response.content

    try:
        return response.json()
    except ValueError:
        if require_json:
            raise DecodeError("Response body is not valid JSON", body=response.text) from None
        return response.text


def _error_body(response: httpx.Response) -> Any:
    """Decoded body of an error response: JSON if possible, else text."""
    try:
        return response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code} {response.reason_phrase}"


__all__ = ["CONTEXT_HEADERS", "UnboundSDK", "create_sdk", "encode_query"]
