# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Lookup facade: phone number intelligence (caller name, routing, carrier)."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

_PHONE_NUMBER = Schema(phone_number=Param("string", required=True))


class LookupService(BaseService):
    name = "lookup"

    cnam = Endpoint("GET", "/lookup/cnam", _PHONE_NUMBER, args=("phone_number",))

    lrn = Endpoint("GET", "/lookup/lrn", _PHONE_NUMBER, args=("phone_number",))

    number = Endpoint("GET", "/lookup/number", _PHONE_NUMBER, args=("phone_number",))
