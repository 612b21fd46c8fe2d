# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Request shape of declared operations across the smaller facades.

Each row: dotted operation, positional args, keyword args, expected HTTP
method, path, query and JSON body (None when nothing is sent).
"""

from __future__ import annotations

import pytest

ROUTES = [
    # enroll
    ("enroll.check_namespace", ("acme",), {}, "GET", "/enroll/checkNamespace", {"namespace": "acme"}, None),
    ("enroll.collect_company_info", ({"name": "Acme"},), {}, "POST", "/enroll/companyInfo", {}, {"name": "Acme"}),
    ("enroll.update_enrollment_info", ("e-1", {"step": 2}), {}, "PUT", "/enroll/enrollment/e-1", {}, {"step": 2}),
    ("enroll.verify_sms", ("+15550100", "1234"), {}, "POST", "/enroll/verifySms", {}, {"phoneNumber": "+15550100", "code": "1234"}),
    ("enroll.get_agreement", ("msa",), {}, "GET", "/enroll/agreement", {"type": "msa"}, None),
    ("enroll.get_build_status", ("e-1",), {}, "GET", "/enroll/buildStatus/e-1", {}, None),
    ("enroll.complete_enrollment", ("e-1", {"ok": True}), {}, "POST", "/enroll/complete/e-1", {}, {"ok": True}),
    ("enroll.create_account_database", ("e-1",), {}, "POST", "/enroll/createDatabase/e-1", {}, None),
    # record types
    ("record_types.create", (), {"name": "Sales", "description": "d", "read": ["u1"]}, "POST", "/recordTypes/", {}, {"name": "Sales", "description": "d", "read": ["u1"]}),
    ("record_types.delete", ("rt-1",), {}, "DELETE", "/recordTypes/rt-1", {}, None),
    ("record_types.list", (), {}, "GET", "/recordTypes/", {}, None),
    ("record_types.user.create", (), {"record_type_id": "rt-1", "object": "contacts"}, "POST", "/recordTypes/user/", {}, {"recordTypeId": "rt-1", "object": "contacts"}),
    ("record_types.user.get", (), {"object": "contacts", "user_id": "u1"}, "GET", "/recordTypes/user/", {"object": "contacts", "userId": "u1"}, None),
    ("record_types.user.delete", (), {"object": "contacts"}, "DELETE", "/recordTypes/user/", {}, {"object": "contacts"}),
    # notes
    ("notes.list", (), {"related_id": "r-1", "limit": 5}, "GET", "/notes", {"relatedId": "r-1", "limit": "5"}, None),
    ("notes.create", (), {"related_id": "r-1", "content_html": "<p/>"}, "POST", "/notes", {}, {"relatedId": "r-1", "content_html": "<p/>"}),
    ("notes.update", ("n-1",), {"title": "T"}, "PUT", "/notes/n-1", {}, {"title": "T"}),
    ("notes.get", ("n-1",), {}, "GET", "/notes/n-1", {}, None),
    # google calendar
    ("google_calendar.remove_webhook", ("w-1",), {}, "DELETE", "/googleCalendar/webhook/w-1", {}, None),
    ("google_calendar.list_webhooks", (), {}, "GET", "/googleCalendar/webhooks", {}, None),
    ("google_calendar.get_calendar_events", ("primary",), {"max_results": 10}, "GET", "/googleCalendar/events", {"calendarId": "primary", "maxResults": "10"}, None),
    ("google_calendar.process_calendar_change", ({"id": "ev-1"},), {}, "POST", "/googleCalendar/processChange", {}, {"id": "ev-1"}),
    # external oauth
    ("external_oauth.create", (), {"name": "g", "provider": "google", "scopes": ["mail"]}, "POST", "/externalOAuth", {}, {"name": "g", "provider": "google", "scopes": ["mail"]}),
    ("external_oauth.get_by_name", ("g",), {}, "GET", "/externalOAuth/byName", {"name": "g"}, None),
    ("external_oauth.get_by_scope_and_provider", ("mail", "google"), {}, "GET", "/externalOAuth/byScopeAndProvider", {"scope": "mail", "provider": "google"}, None),
    ("external_oauth.delete", ("o-1",), {}, "DELETE", "/externalOAuth/o-1", {}, None),
    # sip endpoints
    ("sip_endpoints.get_users_web_rtc", (), {}, "GET", "/sipEndpoints/users/webrtc", {}, None),
    ("sip_endpoints.get", ("s-1",), {}, "GET", "/sipEndpoints/s-1", {}, None),
    ("sip_endpoints.list", (), {}, "GET", "/sipEndpoints/list", {}, None),
    # verification
    ("verification.create_sms_verification", ("+15550100",), {"expires_in": 300}, "POST", "/verification/sms", {}, {"expiresIn": 300, "phoneNumber": "+15550100"}),
    ("verification.validate_email_verification", ("a@b.c", "42"), {}, "POST", "/verification/email/validate", {}, {"email": "a@b.c", "code": "42"}),
    # phone numbers
    ("phone_numbers.search", (), {"country": "US", "sms": True}, "GET", "/phoneNumbers/search", {"country": "US", "sms": "true"}, None),
    ("phone_numbers.order", (["+15550100"],), {}, "POST", "/phoneNumbers/order", {}, {"phoneNumbers": ["+15550100"]}),
    ("phone_numbers.update_cnam", ("+15550100", "ACME"), {}, "PUT", "/phoneNumbers/cnam/%2B15550100", {}, {"cnam": "ACME"}),
    ("phone_numbers.carrier.get_details", ("5550100",), {}, "GET", "/phoneNumbers/carrier/5550100", {}, None),
    # video
    ("video.place_call", ("r-1", "+15550100"), {}, "POST", "/video/r-1/placeOutboundCall", {}, {"phoneNumber": "+15550100"}),
    ("video.list_meetings", (), {"limit": 10}, "GET", "/video/meetings", {"limit": "10"}, None),
    ("video.add_participant", ("r-1", {"name": "Ann"}), {}, "POST", "/video/r-1/participants", {}, {"name": "Ann"}),
    ("video.close_room", ("r-1",), {}, "POST", "/video/r-1/close", {}, None),
    # campaigns
    ("messaging.campaigns.toll_free.refresh_status", ("tf-1",), {}, "GET", "/messaging/campaigns/tollfree/refresh/tf-1", {}, None),
    ("messaging.campaigns.toll_free.delete", ("tf-1",), {}, "DELETE", "/messaging/campaigns/tollfree/tf-1", {}, None),
    ("messaging.campaigns.ten_dlc.brands.revet", ("b-1",), {}, "PUT", "/messaging/campaigns/10dlc/brand/b-1/revet", {}, None),
    ("messaging.campaigns.ten_dlc.brands.get_external_vetting_responses", ("b-1",), {}, "GET", "/messaging/campaigns/10dlc/brand/b-1/externalvetting/responses", {}, None),
    ("messaging.campaigns.ten_dlc.brands.resend_2fa", ("b-1",), {}, "POST", "/messaging/campaigns/10dlc/brand/b-1/resend-2fa", {}, None),
    ("messaging.campaigns.ten_dlc.brands.list", (), {"status": "ACTIVE"}, "GET", "/messaging/campaigns/10dlc/brand", {"status": "ACTIVE"}, None),
    ("messaging.campaigns.ten_dlc.campaigns.create", (), {"brand_id": "b-1", "description": "d", "message_flow": "f"}, "POST", "/messaging/campaigns/10dlc/campaign", {}, {"brandId": "b-1", "description": "d", "messageFlow": "f"}),
    ("messaging.campaigns.ten_dlc.campaigns.get_operation_status", ("c-1",), {}, "GET", "/messaging/campaigns/10dlc/campaign/c-1/operationStatus", {}, None),
    ("messaging.campaigns.ten_dlc.campaigns.get_mno_meta_data", ("c-1",), {}, "GET", "/messaging/campaigns/10dlc/campaign/c-1/mnoMetaData", {}, None),
    ("messaging.campaigns.ten_dlc.campaigns.update_phone_number", ("c-1", {"phoneNumber": "+15550100"}), {}, "PUT", "/messaging/campaigns/10dlc/campaign/c-1/phoneNumber", {}, {"phoneNumber": "+15550100"}),
]


def resolve(sdk, dotted):
    target = sdk
    for attr in dotted.split("."):
        target = getattr(target, attr)
    return target


class TestEndpointTable:
    """Method, path, query and body of each listed operation."""

    @pytest.mark.parametrize(
        "operation, args, kwargs, method, path, query, body",
        ROUTES,
        ids=[row[0] for row in ROUTES],
    )
    async def test_request_shape(self, sdk, recorder, operation, args, kwargs, method, path, query, body):
        await resolve(sdk, operation)(*args, **kwargs)

        request = recorder.last
        assert request.method == method
        assert request.url.raw_path.split(b"?")[0].decode() == path
        assert dict(request.url.params) == query
        assert recorder.body() == body

    def test_rows_name_declared_operations(self, sdk):
        operations = sdk.services.operations()
        for row in ROUTES:
            assert operations[row[0]] == row[3]
