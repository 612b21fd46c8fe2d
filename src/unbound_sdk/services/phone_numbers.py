# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Phone numbers facade: number inventory search, ordering and routing."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

_PHONE_NUMBER = Schema(phone_number=Param("string", required=True))


class PhoneNumberCarrierService(BaseService):
    name = "carrier"

    sync = Endpoint(
        "POST",
        "/phoneNumbers/carrier/syncPhoneNumbers/{carrier}",
        Schema(
            carrier=Param("string", required=True),
            update_voice_connection=Param("boolean"),
            update_messaging_connection=Param("boolean"),
        ),
        args=("carrier",),
        send="query",
    )

    get_details = Endpoint(
        "GET", "/phoneNumbers/carrier/{phone_number}", _PHONE_NUMBER, args=("phone_number",)
    )

    delete = Endpoint(
        "DELETE", "/phoneNumbers/carrier/{phone_number}", _PHONE_NUMBER, args=("phone_number",)
    )


class PhoneNumbersService(BaseService):
    """Owned phone numbers."""

    name = "phone_numbers"
    children = {"carrier": PhoneNumberCarrierService}

    search = Endpoint(
        "GET",
        "/phoneNumbers/search",
        Schema(
            type=Param("string"),
            country=Param("string"),
            state=Param("string"),
            city=Param("string"),
            starts_with=Param("string"),
            ends_with=Param("string"),
            contains=Param("string"),
            limit=Param("number"),
            minimum_block_size=Param("number"),
            sms=Param("boolean"),
            mms=Param("boolean"),
            voice=Param("boolean"),
        ),
    )

    order = Endpoint(
        "POST",
        "/phoneNumbers/order",
        Schema(phone_numbers=Param("array", required=True), name=Param("string")),
        args=("phone_numbers",),
    )

    remove = Endpoint(
        "DELETE", "/phoneNumbers/{phone_number}", _PHONE_NUMBER, args=("phone_number",)
    )

    update = Endpoint(
        "PUT",
        "/phoneNumbers/{id}",
        Schema(
            id=Param("string", required=True),
            name=Param("string"),
            messaging_web_hook_url=Param("string"),
            voice_web_hook_url=Param("string"),
            voice_app_external_url=Param("string"),
            voice_app_external_method=Param("string"),
            voice_app=Param("string"),
            voice_app_meta_data=Param("object"),
            voice_record_type_id=Param("string"),
            messaging_record_type_id=Param("string"),
        ),
        args=("id",),
    )

    update_cnam = Endpoint(
        "PUT",
        "/phoneNumbers/cnam/{phone_number}",
        _PHONE_NUMBER.extend(cnam=Param("string", required=True)),
        args=("phone_number", "cnam"),
    )

    format = Endpoint(
        "GET",
        "/phoneNumbers/format/{number}",
        Schema(number=Param("string", required=True)),
        args=("number",),
    )
