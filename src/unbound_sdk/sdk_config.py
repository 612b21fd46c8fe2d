# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Session configuration for the Unbound SDK.

SdkConfig is the single options value every construction form of UnboundSDK
is reduced to. It holds the session context (tenant namespace, correlation
ids, credentials, base URL) plus client-side settings (timeout, API domain,
optional httpx transport and host key/value store).

Configuration via environment variables (config_from_env):
    UNBOUND_NAMESPACE: Tenant namespace.
    UNBOUND_TOKEN: Bearer token.
    UNBOUND_URL: Absolute base URL of the tenant API.
    UNBOUND_API_DOMAIN: API domain used to derive the base URL
        (falls back to API_BASE_URL, then "api.unbound.cx").
    UNBOUND_TIMEOUT: Request timeout in seconds (default: 30).

Usage:
    config = SdkConfig(namespace="acme", token="...")
    sdk = UnboundSDK(config=config)

    # Mapping with camelCase or snake_case keys:
    config = SdkConfig.from_options({"namespace": "acme", "callId": "c-1"})
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from pydantic.alias_generators import to_snake

if TYPE_CHECKING:
    import httpx

    from .storage import KeyValueStore

DEFAULT_API_DOMAIN = "api.unbound.cx"


@dataclass
class SdkConfig:
    """Options accepted by UnboundSDK.

    Attributes:
        namespace: Tenant identifier, also used to derive the default base URL.
        call_id: Correlation id of an in-progress voice call.
        token: Bearer credential for authenticated calls.
        fw_request_id: Forwarded request id for chained server-to-server calls.
        url: Absolute base URL of the tenant API (scheme optional).
        socket_store: Opaque handle to an external realtime socket registry.
        user_id: Authenticated principal within the namespace.
        store: Host key/value store mirroring login state. None disables it.
        timeout: Request timeout in seconds.
        api_domain: Domain used to build the base URL when url is not set.
        transport: httpx transport used by the session's client (tests, proxies).
    """

    namespace: str | None = None
    call_id: str | None = None
    token: str | None = None
    fw_request_id: str | None = None
    url: str | None = None
    socket_store: Any = None
    user_id: str | None = None
    store: KeyValueStore | None = None
    timeout: float = 30.0
    api_domain: str = DEFAULT_API_DOMAIN
    transport: httpx.AsyncBaseTransport | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None, **kwargs: Any) -> SdkConfig:
        """Build config from a mapping and/or keyword arguments.

        Keys may be camelCase (callId) or snake_case (call_id). Keyword
        arguments override mapping entries.

        Raises:
            TypeError: If an unknown option is given.
        """
        return cls(**cls.normalize_options({**dict(options or {}), **kwargs}))

    @classmethod
    def normalize_options(cls, options: Mapping[str, Any]) -> dict[str, Any]:
        """Map option keys to field names, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in options.items():
            name = to_snake(key)
            if name not in known:
                raise TypeError(f"Unknown SDK option '{key}'")
            values[name] = value
        return values


def config_from_env() -> SdkConfig:
    """Build SdkConfig from UNBOUND_* environment variables."""
    return SdkConfig(
        namespace=os.environ.get("UNBOUND_NAMESPACE") or None,
        token=os.environ.get("UNBOUND_TOKEN") or None,
        url=os.environ.get("UNBOUND_URL") or None,
        timeout=float(os.environ.get("UNBOUND_TIMEOUT", "30")),
        api_domain=(
            os.environ.get("UNBOUND_API_DOMAIN")
            or os.environ.get("API_BASE_URL")
            or DEFAULT_API_DOMAIN
        ),
    )


__all__ = ["DEFAULT_API_DOMAIN", "SdkConfig", "config_from_env"]
