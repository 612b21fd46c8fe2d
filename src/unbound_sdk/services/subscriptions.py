# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Subscriptions facade: realtime socket subscriptions."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema, validate_params

CREATE_SCHEMA = Schema(
    session_id=Param("string", required=True),
    subscription_params=Param("object", required=True),
)


class SocketSubscriptionsService(BaseService):
    name = "socket"

    get_connection = Endpoint(
        "GET",
        "/subscriptions/socket/connection",
        Schema(session_id=Param("string")),
        args=("session_id",),
    )

    async def create(self, session_id: str, subscription_params: dict[str, Any]) -> Any:
        """Create a subscription, or replace it when subscription_params has an id.

        The body is subscription_params plus sessionId.
        """
        validate_params(
            {"session_id": session_id, "subscription_params": subscription_params},
            CREATE_SCHEMA,
        )
        path = "/subscriptions/socket/"
        if subscription_params.get("id"):
            path = f"/subscriptions/socket/{quote(str(subscription_params['id']), safe='')}"
        body = {"sessionId": session_id, **subscription_params}
        return await self.sdk._fetch(path, "POST", {"body": body})

    delete = Endpoint(
        "DELETE",
        "/subscriptions/socket/{id}",
        Schema(id=Param("string", required=True), session_id=Param("string", required=True)),
        args=("id", "session_id"),
    )


class SubscriptionsService(BaseService):
    name = "subscriptions"
    children = {"socket": SocketSubscriptionsService}
