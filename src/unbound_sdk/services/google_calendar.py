# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Google Calendar facade: calendar listing, events and push webhooks."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema


class GoogleCalendarService(BaseService):
    name = "google_calendar"

    setup_webhook = Endpoint(
        "POST",
        "/googleCalendar/webhook",
        Schema(
            calendar_id=Param("string", required=True),
            event_types=Param("array", required=True),
            webhook_url=Param("string", required=True),
            expiration_time=Param("number"),
        ),
    )

    remove_webhook = Endpoint(
        "DELETE",
        "/googleCalendar/webhook/{webhook_id}",
        Schema(webhook_id=Param("string", required=True)),
        args=("webhook_id",),
    )

    list_webhooks = Endpoint("GET", "/googleCalendar/webhooks")

    get_calendar_list = Endpoint("GET", "/googleCalendar/calendars")

    get_calendar_events = Endpoint(
        "GET",
        "/googleCalendar/events",
        Schema(
            calendar_id=Param("string", required=True),
            time_min=Param("string"),
            time_max=Param("string"),
            max_results=Param("number"),
            order_by=Param("string"),
        ),
        args=("calendar_id",),
    )

    process_calendar_change = Endpoint(
        "POST",
        "/googleCalendar/processChange",
        Schema(change_data=Param("object", required=True)),
        args=("change_data",),
        payload="change_data",
    )
