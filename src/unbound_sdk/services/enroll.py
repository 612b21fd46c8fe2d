# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Enroll facade: self-service tenant enrollment.

Most steps take a free-form object that is sent as the request body.
"""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

_ENROLLMENT = Schema(enrollment_id=Param("string", required=True))


def _object_post(path: str, name: str) -> Endpoint:
    """POST endpoint whose body is the single object argument ``name``."""
    return Endpoint(
        "POST", path, Schema(**{name: Param("object", required=True)}), args=(name,), payload=name
    )


class EnrollService(BaseService):
    """Enrollment steps, in the order a new tenant goes through them."""

    name = "enroll"

    check_namespace = Endpoint(
        "GET",
        "/enroll/checkNamespace",
        Schema(namespace=Param("string", required=True)),
        args=("namespace",),
    )

    collect_company_info = _object_post("/enroll/companyInfo", "company_info")

    update_enrollment_info = Endpoint(
        "PUT",
        "/enroll/enrollment/{enrollment_id}",
        _ENROLLMENT.extend(update_data=Param("object", required=True)),
        args=("enrollment_id", "update_data"),
        payload="update_data",
    )

    validate_enrollment = _object_post("/enroll/validate", "enrollment_data")

    verify_email = Endpoint(
        "POST",
        "/enroll/verifyEmail",
        Schema(email=Param("string", required=True), code=Param("string", required=True)),
        args=("email", "code"),
    )

    verify_sms = Endpoint(
        "POST",
        "/enroll/verifySms",
        Schema(
            phone_number=Param("string", required=True),
            code=Param("string", required=True),
        ),
        args=("phone_number", "code"),
    )

    verify_payment = _object_post("/enroll/verifyPayment", "payment_data")

    create_stripe_verification_session = _object_post(
        "/enroll/stripeVerification", "session_data"
    )

    get_stripe_verification_status = Endpoint(
        "GET",
        "/enroll/stripeVerification/status",
        Schema(session_id=Param("string", required=True)),
        args=("session_id",),
    )

    sign_agreement = _object_post("/enroll/signAgreement", "agreement_data")

    get_agreement = Endpoint(
        "GET",
        "/enroll/agreement",
        Schema(
            agreement_type=Param("string", required=True, alias="type"),
            version=Param("string"),
        ),
        args=("agreement_type", "version"),
    )

    get_brand_for_enrollment = Endpoint(
        "GET", "/enroll/brand/{enrollment_id}", _ENROLLMENT, args=("enrollment_id",)
    )

    get_build_status = Endpoint(
        "GET", "/enroll/buildStatus/{enrollment_id}", _ENROLLMENT, args=("enrollment_id",)
    )

    complete_enrollment = Endpoint(
        "POST",
        "/enroll/complete/{enrollment_id}",
        _ENROLLMENT.extend(completion_data=Param("object", required=True)),
        args=("enrollment_id", "completion_data"),
        payload="completion_data",
    )

    create_account_database = Endpoint(
        "POST", "/enroll/createDatabase/{enrollment_id}", _ENROLLMENT, args=("enrollment_id",)
    )
