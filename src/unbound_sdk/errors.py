# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy raised by the SDK.

Every error surfaced to callers derives from UnboundError:

- InvalidArgument: a parameter failed schema validation (raised before any I/O).
- TransportError: no HTTP response was received (DNS, connection, TLS, timeout).
- RemoteError: the API answered with a non-2xx status.
- DecodeError: a success body could not be decoded where JSON was required.
"""

from __future__ import annotations

from typing import Any


class UnboundError(Exception):
    """Base class for all SDK errors."""


class InvalidArgument(UnboundError, ValueError):
    """Parameter missing or of the wrong kind.

    Attributes:
        param: Name of the offending parameter.
        expected: Declared kind, or None when the parameter is missing.
    """

    def __init__(self, message: str, param: str | None = None, expected: str | None = None):
        super().__init__(message)
        self.param = param
        self.expected = expected


class TransportError(UnboundError):
    """The request could not be delivered or no response was received."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class RemoteError(UnboundError):
    """The API returned a non-success HTTP status.

    Attributes:
        status: HTTP status code.
        body: Decoded JSON body, or raw text when the body is not JSON.
        method: HTTP method of the failed request.
        path: Request path relative to the base URL.
        scheme: URL scheme the request was sent over.
    """

    def __init__(
        self, status: int, body: Any, method: str = "", path: str = "", scheme: str = "https"
    ):
        super().__init__(f"API :: Error :: {scheme} :: {method} :: {path} :: {status}")
        self.scheme = scheme
        self.status = status
        self.body = body
        self.method = method
        self.path = path

    @property
    def message(self) -> str | None:
        """Server supplied message, when the body carries one."""
        if isinstance(self.body, dict):
            value = self.body.get("message") or self.body.get("error")
            return str(value) if value is not None else None
        if isinstance(self.body, str) and self.body:
            return self.body
        return None


class DecodeError(UnboundError):
    """A success response was not valid JSON where structured data was required."""

    def __init__(self, message: str, body: Any = None):
        super().__init__(message)
        self.body = body


__all__ = ["DecodeError", "InvalidArgument", "RemoteError", "TransportError", "UnboundError"]
