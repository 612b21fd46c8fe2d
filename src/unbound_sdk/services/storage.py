# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Storage facade: file upload, download and metadata.

upload_files() sends multipart/form-data. Each file is anything httpx
accepts as a file value: raw bytes, an open binary file, or a tuple
``(filename, content)`` / ``(filename, content, content_type)``. A list
uploads several files in one request.

Example:
    ::

        with open("invoice.pdf", "rb") as fh:
            result = await sdk.storage.upload_files(
                ("invoice.pdf", fh, "application/pdf"),
                classification="invoices",
                is_public=False,
            )
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

from ..errors import InvalidArgument
from ..interface import BaseService, Endpoint
from ..validation import Param, Schema, validate_params

UPLOAD_OPTIONS = Schema(
    classification=Param("string"),
    expire_after=Param("any"),
    is_public=Param("boolean"),
    metadata=Param("object"),
)

_FILE = Schema(storage_id=Param("string", required=True))
_FILE_URL = _FILE.extend(download=Param("boolean"))


class StorageService(BaseService):
    """Stored files."""

    name = "storage"

    async def upload_files(self, files: Any, **options: Any) -> Any:
        """Upload one or more files.

        Args:
            files: One file, or a list of files.
            **options: classification, expire_after, is_public, metadata.

        Raises:
            InvalidArgument: If files is empty or an option has the wrong kind.
        """
        if files is None or (isinstance(files, list) and not files):
            raise InvalidArgument("Files parameter is required", param="files")
        fields = validate_params(options, UPLOAD_OPTIONS)

        items = files if isinstance(files, list) else [files]
        data: dict[str, str] = {}
        if fields.get("classification"):
            data["classification"] = fields["classification"]
        if fields.get("expireAfter"):
            data["expireAfter"] = str(fields["expireAfter"])
        if "isPublic" in fields:
            data["isPublic"] = "true" if fields["isPublic"] else "false"
        if fields.get("metadata"):
            data["metadata"] = json.dumps(fields["metadata"])

        return await self.sdk._fetch(
            "/storage/upload",
            "POST",
            {"files": [("files", item) for item in items], "data": data},
        )

    get_file = Endpoint(
        "GET", "/storage/file/{storage_id}", _FILE_URL, args=("storage_id", "download")
    )

    def get_file_url(self, storage_id: str, download: bool = False) -> str:
        """Absolute URL of a stored file. No request is made."""
        validate_params({"storage_id": storage_id, "download": download}, _FILE_URL)
        url = f"{self.sdk.base_url}/storage/file/{quote(storage_id, safe='')}"
        if download:
            url += "?download=true"
        return url

    delete_file = Endpoint("DELETE", "/storage/file/{storage_id}", _FILE, args=("storage_id",))

    get_storage_classifications = Endpoint("GET", "/storage/classifications")

    get_file_info = Endpoint(
        "GET", "/storage/file/{storage_id}/info", _FILE, args=("storage_id",)
    )

    update_file_metadata = Endpoint(
        "PUT",
        "/storage/file/{storage_id}/metadata",
        _FILE.extend(metadata=Param("object", required=True)),
        args=("storage_id", "metadata"),
    )

    list_files = Endpoint(
        "GET",
        "/storage/files",
        Schema(
            classification=Param("string"),
            limit=Param("number"),
            offset=Param("number"),
            order_by=Param("string"),
            order_direction=Param("string"),
        ),
    )
