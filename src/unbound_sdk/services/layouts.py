# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Layouts facade: UI layout definitions per object."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema, validate_params

GET_SCHEMA = Schema(
    object_name=Param("string", required=True),
    id=Param("string"),
    query=Param("object"),
)

_ID = Schema(id=Param("string", required=True))


class LayoutsService(BaseService):
    name = "layouts"

    async def get(
        self, object_name: str, id: str | None = None, query: dict[str, Any] | None = None
    ) -> Any:
        """Fetch layouts of an object, or one layout when id is given.

        GET /layouts/{object_name} or GET /layouts/{object_name}/{id}.
        """
        validate_params({"object_name": object_name, "id": id, "query": query}, GET_SCHEMA)
        path = f"/layouts/{quote(object_name, safe='')}"
        if id:
            path = f"{path}/{quote(id, safe='')}"
        return await self.sdk._fetch(path, "GET", {"query": dict(query or {})})

    create = Endpoint(
        "POST",
        "/layouts/",
        Schema(layout=Param("object", required=True)),
        args=("layout",),
        payload="layout",
    )

    update = Endpoint(
        "PUT",
        "/layouts/{id}",
        _ID.extend(layout=Param("object", required=True)),
        args=("id", "layout"),
        payload="layout",
    )

    delete = Endpoint("DELETE", "/layouts/{id}", _ID, args=("id",))

    dynamic_select_search = Endpoint(
        "GET",
        "/layouts/dynamic-select-search",
        Schema(query=Param("object", required=True)),
        args=("query",),
        payload="query",
    )
