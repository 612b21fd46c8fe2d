# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""SIP endpoints facade: SIP/WebRTC registrations."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

_ENDPOINT = Schema(endpoint_id=Param("string", required=True))


class SipEndpointsService(BaseService):
    name = "sip_endpoints"

    create = Endpoint(
        "POST",
        "/sipEndpoints",
        Schema(
            username=Param("string", required=True),
            password=Param("string", required=True),
            domain=Param("string", required=True),
            display_name=Param("string"),
            description=Param("string"),
        ),
    )

    get_web_rtc_details = Endpoint("GET", "/sipEndpoints", skip_auth=True)

    get_users_web_rtc = Endpoint("GET", "/sipEndpoints/users/webrtc")

    get = Endpoint("GET", "/sipEndpoints/{endpoint_id}", _ENDPOINT, args=("endpoint_id",))

    update = Endpoint(
        "PUT",
        "/sipEndpoints/{endpoint_id}",
        _ENDPOINT.extend(
            display_name=Param("string"),
            description=Param("string"),
            enabled=Param("boolean"),
        ),
        args=("endpoint_id",),
    )

    delete = Endpoint("DELETE", "/sipEndpoints/{endpoint_id}", _ENDPOINT, args=("endpoint_id",))

    list = Endpoint("GET", "/sipEndpoints/list")
