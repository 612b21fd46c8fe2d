# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""External OAuth facade: stored third-party OAuth client configurations."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

_ID = Schema(id=Param("string", required=True))


class ExternalOAuthService(BaseService):
    name = "external_oauth"

    create = Endpoint(
        "POST",
        "/externalOAuth",
        Schema(
            name=Param("string", required=True),
            provider=Param("string", required=True),
            scopes=Param("array", required=True),
            credentials=Param("object"),
            configuration=Param("object"),
        ),
    )

    update = Endpoint(
        "PUT",
        "/externalOAuth/{id}",
        _ID.extend(
            name=Param("string"),
            scopes=Param("array"),
            credentials=Param("object"),
            configuration=Param("object"),
        ),
        args=("id",),
    )

    delete = Endpoint("DELETE", "/externalOAuth/{id}", _ID, args=("id",))

    get = Endpoint("GET", "/externalOAuth/{id}", _ID, args=("id",))

    get_by_name = Endpoint(
        "GET",
        "/externalOAuth/byName",
        Schema(name=Param("string", required=True)),
        args=("name",),
    )

    get_by_scope_and_provider = Endpoint(
        "GET",
        "/externalOAuth/byScopeAndProvider",
        Schema(scope=Param("string", required=True), provider=Param("string", required=True)),
        args=("scope", "provider"),
    )

    list = Endpoint("GET", "/externalOAuth")
