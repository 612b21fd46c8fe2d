# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Portals facade: customer-facing portals served on custom domains."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

PORTAL_FIELDS = Schema(
    name=Param("string"),
    domain=Param("string"),
    settings=Param("object"),
    is_public=Param("boolean"),
    custom_css=Param("string"),
    custom_js=Param("string"),
    favicon=Param("string"),
    logo=Param("string"),
)

_PORTAL = Schema(portal_id=Param("string", required=True))


class PortalsService(BaseService):
    """Portals.

    Only the fields actually passed are sent::

        await sdk.portals.update("P", name="X", is_public=False)
        # PUT /portals/P  {"name": "X", "isPublic": false}
    """

    name = "portals"

    create = Endpoint(
        "POST",
        "/portals",
        PORTAL_FIELDS.extend(
            name=Param("string", required=True),
            domain=Param("string", required=True),
        ),
    )

    update = Endpoint(
        "PUT", "/portals/{portal_id}", _PORTAL.extend(**PORTAL_FIELDS.params), args=("portal_id",)
    )

    delete = Endpoint("DELETE", "/portals/{portal_id}", _PORTAL, args=("portal_id",))

    get = Endpoint("GET", "/portals/{portal_id}", _PORTAL, args=("portal_id",))

    get_public = Endpoint(
        "GET", "/portals/public", Schema(domain=Param("string", required=True)), args=("domain",)
    )

    verify_dns = Endpoint(
        "POST", "/portals/{portal_id}/verify-dns", _PORTAL, args=("portal_id",)
    )

    list = Endpoint("GET", "/portals")
