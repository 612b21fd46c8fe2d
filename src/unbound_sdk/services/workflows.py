# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Workflows facade: workflow settings, items, item connections, sessions.

Items and connections are stored as platform objects (workflowItems and
workflowItemConnections) and go through the generic /object routes.
"""

from __future__ import annotations

from typing import Any

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema, validate_params

ITEMS_PATH = "/object/workflowItems"
CONNECTIONS_PATH = "/object/workflowItemConnections"

_ID = Schema(id=Param("string", required=True))

ITEM_UPDATE_SCHEMA = _ID.extend(
    description=Param("string"),
    label=Param("string"),
    label_bg_color=Param("string"),
    label_text_color=Param("string"),
    description_bg_color=Param("string"),
    description_text_color=Param("string"),
    icon=Param("string"),
    icon_bg_color=Param("string"),
    icon_text_color=Param("string"),
    ports=Param("array"),
    connections=Param("object"),
    position=Param("object"),
    settings=Param("object"),
)

CONNECTION_SCHEMA = Schema(
    workflow_item_id=Param("string", required=True),
    workflow_item_port_id=Param("string", required=True),
    in_workflow_item_id=Param("string", required=True),
    in_workflow_item_port_id=Param("string", required=True),
)


class WorkflowItemsService(BaseService):
    name = "items"

    delete = Endpoint("DELETE", ITEMS_PATH, _ID, args=("id",), wrap="where")

    list = Endpoint(
        "GET",
        ITEMS_PATH,
        Schema(workflow_version_id=Param("string", required=True)),
        args=("workflow_version_id",),
        extra={"expandDetails": True},
    )

    async def get(self, id: str) -> Any:
        """Fetch one workflow item by id through the objects facade."""
        validate_params({"id": id}, _ID)
        return await self.sdk.objects.by_id(id)

    create = Endpoint(
        "POST",
        ITEMS_PATH,
        Schema(
            workflow_version_id=Param("string", required=True),
            category=Param("string", required=True),
            type=Param("string", required=True),
            description=Param("string"),
            position=Param("object"),
            settings=Param("object"),
        ),
    )

    async def update(self, id: str, **fields: Any) -> Any:
        """Update an item: PUT /object/workflowItems with {where: {id}, update}."""
        update = validate_params({"id": id, **fields}, ITEM_UPDATE_SCHEMA)
        update.pop("id")
        body = {"where": {"id": id}, "update": update}
        return await self.sdk._fetch(ITEMS_PATH, "PUT", {"body": body})


class WorkflowConnectionsService(BaseService):
    name = "connections"

    delete = Endpoint(
        "DELETE",
        CONNECTIONS_PATH,
        CONNECTION_SCHEMA,
        args=(
            "workflow_item_id",
            "workflow_item_port_id",
            "in_workflow_item_id",
            "in_workflow_item_port_id",
        ),
        wrap="where",
    )

    create = Endpoint("POST", CONNECTIONS_PATH, CONNECTION_SCHEMA)


_SESSION = Schema(session_id=Param("string", required=True))


class WorkflowSessionsService(BaseService):
    name = "sessions"

    create = Endpoint(
        "POST",
        "/workflows/{workflow_id}/sessions",
        Schema(
            workflow_id=Param("string", required=True),
            session_data=Param("object", required=True),
        ),
        args=("workflow_id", "session_data"),
        payload="session_data",
    )

    get = Endpoint(
        "GET", "/workflows/sessions/{session_id}", _SESSION, args=("session_id",)
    )

    update = Endpoint(
        "PUT",
        "/workflows/sessions/{session_id}",
        _SESSION.extend(update_data=Param("object", required=True)),
        args=("session_id", "update_data"),
        payload="update_data",
    )

    delete = Endpoint(
        "DELETE", "/workflows/sessions/{session_id}", _SESSION, args=("session_id",)
    )


class WorkflowsService(BaseService):
    """Workflow builder data."""

    name = "workflows"
    children = {
        "items": WorkflowItemsService,
        "connections": WorkflowConnectionsService,
        "sessions": WorkflowSessionsService,
    }

    get_settings = Endpoint(
        "GET",
        "/workflows/settings",
        Schema(type=Param("string", required=True)),
        args=("type",),
    )
