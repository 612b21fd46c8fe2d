# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Notes facade: rich-text notes attached to records.

Note content fields keep their snake_case wire names (content_html,
content_binary, content_json).
"""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

CONTENT_FIELDS = Schema(
    title=Param("string"),
    content_html=Param("string", alias="content_html"),
    content_binary=Param("array", alias="content_binary"),
    content_json=Param("object", alias="content_json"),
    version=Param("number"),
)

_NOTE = Schema(note_id=Param("string", required=True))


class NotesService(BaseService):
    name = "notes"

    list = Endpoint(
        "GET",
        "/notes",
        Schema(
            related_id=Param("string", required=True),
            record_type_id=Param("string"),
            limit=Param("number"),
            order_by=Param("string"),
            order_direction=Param("string"),
        ),
    )

    create = Endpoint(
        "POST",
        "/notes",
        CONTENT_FIELDS.extend(
            related_id=Param("string", required=True),
            record_type_id=Param("string"),
        ),
    )

    update = Endpoint(
        "PUT", "/notes/{note_id}", _NOTE.extend(**CONTENT_FIELDS.params), args=("note_id",)
    )

    delete = Endpoint("DELETE", "/notes/{note_id}", _NOTE, args=("note_id",))

    get = Endpoint("GET", "/notes/{note_id}", _NOTE, args=("note_id",))
