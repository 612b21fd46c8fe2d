# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Verification facade: one-time codes over SMS and email."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

CODE_OPTIONS = Schema(
    code=Param("string"),
    expires_in=Param("number"),
    metadata=Param("object"),
)


class VerificationService(BaseService):
    name = "verification"

    create_sms_verification = Endpoint(
        "POST",
        "/verification/sms",
        CODE_OPTIONS.extend(phone_number=Param("string", required=True)),
        args=("phone_number",),
    )

    validate_sms_verification = Endpoint(
        "POST",
        "/verification/sms/validate",
        Schema(
            phone_number=Param("string", required=True),
            code=Param("string", required=True),
        ),
        args=("phone_number", "code"),
    )

    create_email_verification = Endpoint(
        "POST",
        "/verification/email",
        CODE_OPTIONS.extend(email=Param("string", required=True)),
        args=("email",),
    )

    validate_email_verification = Endpoint(
        "POST",
        "/verification/email/validate",
        Schema(email=Param("string", required=True), code=Param("string", required=True)),
        args=("email", "code"),
    )
