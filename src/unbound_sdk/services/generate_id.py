# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Id generation: local opaque ids and server-issued service ids.

The facade is callable, so ``sdk.generate_id()`` returns a fresh local id
without a round trip, while ``sdk.generate_id.create_id(...)`` asks the
server for a service-scoped id.
"""

from __future__ import annotations

from typing import Any

from genro_toolbox import get_uuid

from ..errors import InvalidArgument
from ..interface import BaseService, Endpoint
from ..validation import Param, Schema


class GenerateIdService(BaseService):
    name = "generate_id"

    def __call__(self) -> str:
        """Return a new opaque unique identifier."""
        return get_uuid()

    _create_id = Endpoint(
        "POST",
        "/generateId/",
        Schema(service=Param("string"), service_code=Param("string")),
        send="query",
    )

    async def create_id(self, service: str | None = None, service_code: str | None = None) -> Any:
        """Request a server-issued id for a service name or service code.

        Raises:
            InvalidArgument: If neither service nor service_code is given.
        """
        if not service and not service_code:
            raise InvalidArgument("Either service or service_code parameter is required")
        return await self._create_id(service=service, service_code=service_code)

    validate_id = Endpoint(
        "GET",
        "/generateId/{input}",
        Schema(input=Param("string", required=True)),
        args=("input",),
    )
