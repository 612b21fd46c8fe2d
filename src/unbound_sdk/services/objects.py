# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Objects facade: generic record CRUD on platform objects.

Update and delete operations address records through a "where" clause in
the request body; the *_by_id variants build that clause from an id.
"""

from __future__ import annotations

from typing import Any

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema, validate_params

UPDATE_BY_ID_SCHEMA = Schema(
    object=Param("string", required=True),
    id=Param("string", required=True),
    update=Param("object", required=True),
)


class ObjectsService(BaseService):
    """Generic object records."""

    name = "objects"

    by_id = Endpoint(
        "GET",
        "/object/{id}",
        Schema(id=Param("string", required=True), query=Param("object")),
        args=("id", "query"),
        payload="query",
    )

    query = Endpoint(
        "GET",
        "/object/query/{object}",
        Schema(object=Param("string", required=True), query=Param("object")),
        args=("object", "query"),
        payload="query",
    )

    async def update_by_id(self, object: str, id: str, update: dict[str, Any]) -> Any:
        """Update one record: PUT /object/{object} with {where: {id}, update}."""
        validate_params({"object": object, "id": id, "update": update}, UPDATE_BY_ID_SCHEMA)
        return await self.update(object, {"id": id}, update)

    update = Endpoint(
        "PUT",
        "/object/{object}",
        Schema(
            object=Param("string", required=True),
            where=Param("object", required=True),
            update=Param("object", required=True),
        ),
        args=("object", "where", "update"),
    )

    create = Endpoint(
        "POST",
        "/object/{object}",
        Schema(object=Param("string", required=True), body=Param("object")),
        args=("object", "body"),
        payload="body",
    )

    delete = Endpoint(
        "DELETE",
        "/object/{object}",
        Schema(object=Param("string", required=True), where=Param("object", required=True)),
        args=("object", "where"),
    )

    delete_by_id = Endpoint(
        "DELETE",
        "/object/{object}",
        Schema(object=Param("string", required=True), id=Param("string", required=True)),
        args=("object", "id"),
        wrap="where",
    )

    describe = Endpoint(
        "GET",
        "/object/describe/{object}",
        Schema(object=Param("string", required=True)),
        args=("object",),
    )

    list = Endpoint("GET", "/object/")
