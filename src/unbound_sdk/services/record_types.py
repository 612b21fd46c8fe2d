# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Record types facade: record-level access groups and per-user defaults."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

USER_PATH = "/recordTypes/user/"

_ID = Schema(id=Param("string", required=True))

USER_DEFAULT_SCHEMA = Schema(
    record_type_id=Param("string", required=True),
    object=Param("string", required=True),
    user_id=Param("string"),
)

USER_LOOKUP_SCHEMA = Schema(object=Param("string", required=True), user_id=Param("string"))


class UserRecordTypeDefaultsService(BaseService):
    """Default record type per object, optionally per user."""

    name = "user"

    create = Endpoint("POST", USER_PATH, USER_DEFAULT_SCHEMA)

    update = Endpoint("PUT", USER_PATH, USER_DEFAULT_SCHEMA)

    delete = Endpoint("DELETE", USER_PATH, USER_LOOKUP_SCHEMA)

    get = Endpoint("GET", USER_PATH, USER_LOOKUP_SCHEMA)


class RecordTypesService(BaseService):
    """Record types.

    The create/update/read/delete arguments of create() are user id lists::

        await sdk.record_types.create(
            name="Sales", description="Sales team", read=["u1"], delete=["u2"],
        )
    """

    name = "record_types"
    children = {"user": UserRecordTypeDefaultsService}

    create = Endpoint(
        "POST",
        "/recordTypes/",
        Schema(
            name=Param("string", required=True),
            description=Param("string", required=True),
            create=Param("array"),
            update=Param("array"),
            read=Param("array"),
            delete=Param("array"),
        ),
    )

    update = Endpoint(
        "PUT",
        "/recordTypes/{id}",
        _ID.extend(
            name=Param("string"),
            description=Param("string"),
            remove=Param("object"),
            add=Param("object"),
        ),
        args=("id",),
    )

    delete = Endpoint("DELETE", "/recordTypes/{id}", _ID, args=("id",))

    get = Endpoint("GET", "/recordTypes/{id}", _ID, args=("id",))

    list = Endpoint("GET", "/recordTypes/")
