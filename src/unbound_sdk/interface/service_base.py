# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base classes for service facades and their declarative operations.

A service facade is a namespaced group of operations bound to a session.
Most operations are pure declarations: an HTTP method, a path template and
a parameter Schema. Endpoint turns such a declaration into an async method
that validates its arguments, builds the request and hands it to the
session's transport.

Components:
    Endpoint: Declarative operation, used as a class attribute.
    BaseService: Base class holding the back-reference to the session.
    ServiceManager: Fixed roster of facades installed on a session.

Example:
    Define a facade::

        from unbound_sdk.interface import BaseService, Endpoint
        from unbound_sdk.validation import Param, Schema

        class PortalsService(BaseService):
            name = "portals"

            get = Endpoint(
                "GET", "/portals/{portal_id}",
                Schema(portal_id=Param("string", required=True)),
                args=("portal_id",),
            )

            list = Endpoint("GET", "/portals")

        portal = await sdk.portals.get("P-1")

Note:
    Operations with request shapes that do not fit a declaration (nested
    "where" bodies, optional path segments, local state updates) are written
    as ordinary async methods that call validate_params() and
    self.sdk._fetch() directly.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from ..validation import Schema

if TYPE_CHECKING:
    from ..sdk_base import UnboundSDK

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class Endpoint:
    """Declarative service operation.

    Args:
        method: HTTP method (GET, POST, PUT, DELETE).
        path: Path template; ``{name}`` placeholders are filled from the
            validated parameter of the same name and URL-escaped.
        schema: Parameter declarations. Defaults to an empty schema.
        args: Parameter names accepted positionally, in order.
        send: "body" or "query". Defaults to "query" for GET, else "body".
        payload: Name of an object parameter sent as the whole body/query
            instead of being wrapped under its own key.
        wrap: Key under which the parameters are nested, e.g. "where".
        extra: Constant fields merged into the body/query.
        skip_auth: Omit the Authorization header.
    """

    def __init__(
        self,
        method: str,
        path: str,
        schema: Schema | None = None,
        *,
        args: tuple[str, ...] = (),
        send: str | None = None,
        payload: str | None = None,
        extra: dict[str, Any] | None = None,
        wrap: str | None = None,
        skip_auth: bool = False,
    ):
        self.method = method.upper()
        self.path = path
        self.schema = schema or Schema()
        self.args = args
        self.send = send or ("query" if self.method == "GET" else "body")
        self.payload = payload
        self.extra = extra or {}
        self.wrap = wrap
        self.skip_auth = skip_auth
        self.path_params = tuple(_PLACEHOLDER.findall(path))
        self.name = ""

        for name in (*self.path_params, *self.args):
            if name not in self.schema:
                raise ValueError(f"Parameter '{name}' of {path} is not declared in its schema")

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: BaseService | None, owner: type | None = None) -> Any:
        if instance is None:
            return self

        async def operation(*args: Any, **kwargs: Any) -> Any:
            return await self.invoke(instance, *args, **kwargs)

        operation.__name__ = self.name
        operation.__qualname__ = f"{type(instance).__name__}.{self.name}"
        operation.__doc__ = f"{self.method} {self.path}"
        return operation

    def __repr__(self) -> str:
        return f"Endpoint({self.method} {self.path})"

    def bind(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
        """Map positional and keyword arguments to parameter names."""
        if len(args) > len(self.args):
            raise TypeError(
                f"{self.name}() takes {len(self.args)} positional arguments "
                f"but {len(args)} were given"
            )
        values = dict(zip(self.args, args))
        for key, value in kwargs.items():
            if key in values:
                raise TypeError(f"{self.name}() got multiple values for argument '{key}'")
            values[key] = value
        return values

    def build_path(self, values: dict[str, Any]) -> str:
        """Fill path placeholders with URL-escaped validated values."""
        return _PLACEHOLDER.sub(lambda m: quote(str(values[m.group(1)]), safe=""), self.path)

    def build_options(self, values: dict[str, Any], payload: dict[str, Any]) -> dict[str, Any]:
        """Build the transport options ({"body": ...} or {"query": ...})."""
        if self.payload:
            data = dict(values.get(self.payload) or {})
        else:
            data = {
                key: value
                for key, value in payload.items()
                if key not in {self.schema.wire_name(p) for p in self.path_params}
            }
        if self.wrap:
            data = {self.wrap: data}
        data = {**self.extra, **data}

        body_params = [p for p in self.schema if p not in self.path_params]
        if not data and not body_params and not self.extra:
            return {}
        return {self.send: data}

    async def invoke(self, service: BaseService, /, *args: Any, **kwargs: Any) -> Any:
        """Validate arguments, build the request and dispatch it."""
        values = self.bind(args, kwargs)
        payload = self.schema.validate(values)
        return await service.sdk._fetch(
            self.build_path(values),
            self.method,
            self.build_options(values, payload),
            skip_auth=self.skip_auth,
        )


_INTROSPECTION = ("get_methods", "get_http_method", "operations")


class BaseService:
    """Base class for all service facades.

    A facade holds nothing but its session back-reference, so credential
    changes on the session are observed by every facade immediately.

    Attributes:
        name: Stable registry name of the facade.
        children: Nested facades, instantiated with the same session.
        sdk: Owning UnboundSDK session.
    """

    name: str = ""
    children: dict[str, type[BaseService]] = {}

    def __init__(self, sdk: UnboundSDK):
        self.sdk = sdk
        for attr, service_class in self.children.items():
            setattr(self, attr, service_class(sdk))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    def get_methods(self) -> list[tuple[str, Callable]]:
        """Return all public operations as (name, bound coroutine function)."""
        methods = []
        for method_name in dir(type(self)):
            if method_name.startswith("_") or method_name in _INTROSPECTION:
                continue
            attr = inspect.getattr_static(type(self), method_name)
            if isinstance(attr, Endpoint) or inspect.iscoroutinefunction(attr):
                methods.append((method_name, getattr(self, method_name)))
        return methods

    def get_http_method(self, method_name: str) -> str | None:
        """HTTP method of a declared Endpoint, None for hand-written operations."""
        attr = inspect.getattr_static(type(self), method_name, None)
        if isinstance(attr, Endpoint):
            return attr.method
        return None

    def operations(self, prefix: str = "") -> dict[str, str | None]:
        """Dotted names of every operation in this facade and its children.

        Values are the HTTP method of declared endpoints, None for
        hand-written operations.
        """
        result = {prefix + name: self.get_http_method(name) for name, _ in self.get_methods()}
        for attr in self.children:
            result.update(getattr(self, attr).operations(f"{prefix}{attr}."))
        return result


class ServiceManager:
    """Fixed roster of service facades for one session.

    Installs every facade on the session as an attribute and provides
    dict-like access by name.

    Attributes:
        sdk: Owning session.
        _services: Facade instances keyed by registry name.
    """

    def __init__(self, parent: UnboundSDK, roster: dict[str, type[BaseService]]):
        self.sdk = parent
        self._services: dict[str, BaseService] = {}
        for name, service_class in roster.items():
            service = service_class(parent)
            self._services[name] = service
            setattr(parent, name, service)

    def __getitem__(self, name: str) -> BaseService:
        """Get facade by name."""
        if name not in self._services:
            raise KeyError(f"Service '{name}' not found")
        return self._services[name]

    def __contains__(self, name: str) -> bool:
        return name in self._services

    def __iter__(self) -> Iterator[str]:
        return iter(self._services)

    def __len__(self) -> int:
        return len(self._services)

    def values(self):
        return self._services.values()

    def items(self):
        return self._services.items()

    def operations(self) -> dict[str, str | None]:
        """Every operation of the roster keyed by its dotted attribute path."""
        result: dict[str, str | None] = {}
        for name, service in self._services.items():
            result.update(service.operations(f"{name}."))
        return result


__all__ = ["BaseService", "Endpoint", "ServiceManager"]
