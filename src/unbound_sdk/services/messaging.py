# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Messaging facade: SMS and email delivery.

Tree of facades reachable from ``sdk.messaging``::

    sms                 send, get
    sms.templates       create, update, delete, get, list
    email               send, get, update, delete, update_domain, drafts,
                        mailbox emails
    email.templates     create, update, delete, get, list
    email.domains       sender domain verification
    email.addresses     single sender address verification
    email.mailboxes     inbound mailboxes and their aliases
    email.analytics     delivery statistics
    email.queue         outbound queue inspection
    email.suppression   bounce and complaint suppression lists
    campaigns           toll-free and 10DLC carrier registration
"""

from __future__ import annotations

from typing import Any

from ..errors import InvalidArgument
from ..interface import BaseService, Endpoint
from ..validation import Param, Schema, validate_params
from .campaigns import CampaignsService

MAX_REASON_LENGTH = 128

_ID = Schema(id=Param("string", required=True))
_EMAIL_ADDRESS = Schema(email_address=Param("string", required=True))
_PAGE = Schema(page=Param("number"), limit=Param("number"))

# -----------------------------------------------------------------------------
# SMS
# -----------------------------------------------------------------------------


class SmsTemplatesService(BaseService):
    name = "templates"

    create = Endpoint(
        "POST",
        "/messaging/sms/templates",
        Schema(
            name=Param("string", required=True),
            message=Param("string", required=True),
            variables=Param("object"),
        ),
    )

    update = Endpoint(
        "PUT",
        "/messaging/sms/templates/{id}",
        _ID.extend(name=Param("string"), message=Param("string"), variables=Param("object")),
        args=("id",),
    )

    delete = Endpoint("DELETE", "/messaging/sms/templates/{id}", _ID, args=("id",))

    get = Endpoint("GET", "/messaging/sms/templates/{id}", _ID, args=("id",))

    list = Endpoint("GET", "/messaging/sms/templates")


class SmsService(BaseService):
    name = "sms"
    children = {"templates": SmsTemplatesService}

    send = Endpoint(
        "POST",
        "/messaging/sms",
        Schema(
            to=Param("string", required=True),
            from_=Param("string", alias="from"),
            message=Param("string"),
            template_id=Param("string"),
            variables=Param("object"),
            media_urls=Param("array"),
            webhook_url=Param("string"),
        ),
    )

    get = Endpoint("GET", "/messaging/sms/{id}", _ID, args=("id",))


# -----------------------------------------------------------------------------
# Email
# -----------------------------------------------------------------------------


class EmailTemplatesService(BaseService):
    name = "templates"

    create = Endpoint(
        "POST",
        "/messaging/email/template",
        Schema(
            name=Param("string", required=True),
            subject=Param("string", required=True),
            html=Param("string"),
            text=Param("string"),
        ),
    )

    update = Endpoint(
        "PUT",
        "/messaging/email/template/{id}",
        _ID.extend(
            name=Param("string"),
            subject=Param("string"),
            html=Param("string"),
            text=Param("string"),
        ),
        args=("id",),
    )

    delete = Endpoint("DELETE", "/messaging/email/template/{id}", _ID, args=("id",))

    get = Endpoint("GET", "/messaging/email/template/{id}", _ID, args=("id",))

    list = Endpoint("GET", "/messaging/email/template")


class EmailDomainsService(BaseService):
    """Sender domain verification (DKIM, mail-from subdomain)."""

    name = "domains"

    create = Endpoint(
        "POST",
        "/messaging/email/validate/domain",
        Schema(
            domain=Param("string", required=True),
            primary_region=Param("string"),
            secondary_region=Param("string"),
            mail_from_subdomain=Param("string"),
        ),
        args=("domain",),
    )

    delete = Endpoint(
        "DELETE",
        "/messaging/email/validate/domain",
        Schema(domain_id=Param("string", required=True)),
        args=("domain_id",),
    )

    get = Endpoint(
        "GET",
        "/messaging/email/validate/domain/{domain_id}",
        Schema(domain_id=Param("string", required=True)),
        args=("domain_id",),
    )

    validate_dns = Endpoint(
        "GET",
        "/messaging/email/validate/domain/dns",
        Schema(domain=Param("string", required=True)),
        args=("domain",),
    )

    check_status = Endpoint(
        "GET",
        "/messaging/email/validate/domain/status",
        Schema(domain=Param("string", required=True)),
        args=("domain",),
    )

    update = Endpoint(
        "PUT",
        "/messaging/email/validate/domain",
        Schema(
            domain_id=Param("string", required=True),
            primary_region=Param("string"),
            secondary_region=Param("string"),
            dkim_enabled=Param("boolean"),
            custom_dkim=Param("object"),
        ),
        args=("domain_id",),
    )

    list = Endpoint("GET", "/messaging/email/validate/domain")


class EmailAddressesService(BaseService):
    """Single sender address verification."""

    name = "addresses"

    create = Endpoint(
        "POST", "/messaging/email/validate/emailAddress", _EMAIL_ADDRESS, args=("email_address",)
    )

    delete = Endpoint(
        "DELETE",
        "/messaging/email/validate/emailAddress/{email_address}",
        _EMAIL_ADDRESS,
        args=("email_address",),
    )

    check_status = Endpoint(
        "GET",
        "/messaging/email/validate/emailAddress/status",
        _EMAIL_ADDRESS,
        args=("email_address",),
    )

    list = Endpoint("GET", "/messaging/email/validate/emailAddress")


MAILBOX_FIELDS = Schema(
    mailbox=Param("string"),
    name=Param("string"),
    user_id=Param("string"),
    record_type_id=Param("string"),
    use_engagement_sessions=Param("boolean"),
    queue_id=Param("string"),
    ticket_prefix=Param("string"),
    ticket_create_email_template_id=Param("string"),
    ticket_create_email_from=Param("string"),
)

MAILBOX_LIST_SCHEMA = Schema(
    user_id=Param("string"),
    search_query=Param("string", alias="search"),
    folder_counts=Param("array"),
    page=Param("number", default=1),
    limit=Param("number", default=50),
    sort_by=Param("string", default="createdAt"),
    sort_order=Param("string", default="desc"),
)


class EmailMailboxesService(BaseService):
    """Inbound mailboxes and their address aliases."""

    name = "mailboxes"

    create = Endpoint("POST", "/messaging/email/mailbox", MAILBOX_FIELDS)

    async def list(self, **options: Any) -> Any:
        """List mailboxes. folder_counts is sent as a comma-separated list."""
        query = validate_params(options, MAILBOX_LIST_SCHEMA)
        if isinstance(query.get("folderCounts"), (list, tuple)):
            query["folderCounts"] = ",".join(str(f) for f in query["folderCounts"])
        return await self.sdk._fetch("/messaging/email/mailbox", "GET", {"query": query})

    get = Endpoint(
        "GET",
        "/messaging/email/mailbox/{id}",
        _ID.extend(include_aliases=Param("boolean", default=True)),
        args=("id", "include_aliases"),
    )

    update = Endpoint(
        "PUT",
        "/messaging/email/mailbox/{id}",
        _ID.extend(**MAILBOX_FIELDS.params, is_active=Param("boolean")),
        args=("id",),
    )

    delete = Endpoint("DELETE", "/messaging/email/mailbox/{id}", _ID, args=("id",))

    create_alias = Endpoint(
        "POST",
        "/messaging/email/mailbox/{mailbox_id}/alias",
        Schema(
            mailbox_id=Param("string", required=True),
            email_domain_id=Param("string", required=True),
            mailbox_name=Param("string", required=True, alias="mailbox"),
            record_type_id=Param("string"),
            is_default=Param("boolean", default=False),
        ),
        args=("mailbox_id", "email_domain_id", "mailbox_name", "record_type_id", "is_default"),
    )

    update_alias = Endpoint(
        "PUT",
        "/messaging/email/mailbox/alias/{alias_id}",
        Schema(
            alias_id=Param("string", required=True),
            is_default=Param("boolean"),
            is_active=Param("boolean"),
            record_type_id=Param("string"),
        ),
        args=("alias_id", "is_default", "is_active", "record_type_id"),
    )

    delete_alias = Endpoint(
        "DELETE",
        "/messaging/email/mailbox/alias/{alias_id}",
        Schema(alias_id=Param("string", required=True)),
        args=("alias_id",),
    )

    list_folders = Endpoint(
        "GET",
        "/messaging/email/mailbox/{mailbox_id}/folders",
        Schema(mailbox_id=Param("string", required=True)),
        args=("mailbox_id",),
    )


class EmailAnalyticsService(BaseService):
    name = "analytics"

    time_series = Endpoint(
        "GET",
        "/messaging/email/analytics/timeseries",
        Schema(period=Param("string"), granularity=Param("string"), timezone=Param("string")),
    )

    summary = Endpoint(
        "GET",
        "/messaging/email/analytics/summary",
        Schema(period=Param("string"), timezone=Param("string")),
    )

    realtime = Endpoint("GET", "/messaging/email/analytics/realtime")

    errors = Endpoint(
        "GET", "/messaging/email/analytics/errors", Schema(period=Param("string"))
    )


class EmailQueueService(BaseService):
    name = "queue"

    list = Endpoint("GET", "/messaging/email/queue", _PAGE.extend(status=Param("string")))

    async def get_queued(self, page: int | None = None, limit: int | None = None) -> Any:
        return await self.list(page=page, limit=limit, status="queued")

    async def get_failed(self, page: int | None = None, limit: int | None = None) -> Any:
        return await self.list(page=page, limit=limit, status="failed")

    async def get_sent(self, page: int | None = None, limit: int | None = None) -> Any:
        return await self.list(page=page, limit=limit, status="sent")

    async def get_delivered(self, page: int | None = None, limit: int | None = None) -> Any:
        return await self.list(page=page, limit=limit, status="delivered")


SUPPRESSION_DELETE_SCHEMA = _ID.extend(reason=Param("string", required=True))
REMOVAL_REQUEST_SCHEMA = _EMAIL_ADDRESS.extend(reason=Param("string", required=True))


def _check_reason(reason: str) -> None:
    if len(reason) > MAX_REASON_LENGTH:
        raise InvalidArgument(
            f"Reason must be {MAX_REASON_LENGTH} characters or less", param="reason"
        )


class EmailSuppressionService(BaseService):
    """Bounce and complaint suppression lists."""

    name = "suppression"

    list = Endpoint(
        "GET",
        "/messaging/email/suppression",
        _PAGE.extend(
            type=Param("string"),
            email_address=Param("string"),
            from_address=Param("string"),
            carrier_name=Param("string"),
        ),
    )

    _delete = Endpoint(
        "DELETE",
        "/messaging/email/suppression/{id}",
        SUPPRESSION_DELETE_SCHEMA,
        args=("id", "reason"),
    )

    async def delete(self, id: str, reason: str) -> Any:
        """Remove a suppression entry. reason is limited to 128 characters."""
        validate_params({"id": id, "reason": reason}, SUPPRESSION_DELETE_SCHEMA)
        _check_reason(reason)
        return await self._delete(id, reason)

    check_global = Endpoint(
        "GET",
        "/messaging/email/suppression/global/{email_address}",
        _EMAIL_ADDRESS,
        args=("email_address",),
    )

    _request_removal = Endpoint(
        "POST",
        "/messaging/email/suppression/global/{email_address}/request-removal",
        REMOVAL_REQUEST_SCHEMA,
        args=("email_address", "reason"),
    )

    async def request_removal(self, email_address: str, reason: str) -> Any:
        """Ask for removal from the global suppression list."""
        validate_params(
            {"email_address": email_address, "reason": reason},
            REMOVAL_REQUEST_SCHEMA,
        )
        _check_reason(reason)
        return await self._request_removal(email_address, reason)

    async def get_bounces(self, page: int | None = None, limit: int | None = None) -> Any:
        return await self.list(type="bounce", page=page, limit=limit)

    async def get_complaints(self, page: int | None = None, limit: int | None = None) -> Any:
        return await self.list(type="complaint", page=page, limit=limit)


DRAFT_FIELDS = Schema(
    from_=Param("string", alias="from"),
    to=Param("any"),
    cc=Param("any"),
    bcc=Param("any"),
    subject=Param("string"),
    html=Param("string"),
    text=Param("string"),
    template_id=Param("string"),
    variables=Param("object"),
    storage_id=Param("array"),
    reply_to=Param("string"),
    reply_to_email_id=Param("string"),
    related_id=Param("string"),
    email_type=Param("string"),
    tracking=Param("boolean"),
    mailbox_id=Param("string"),
    engagement_session_id=Param("string"),
)

SEND_SCHEMA = DRAFT_FIELDS.extend(draft_id=Param("string"))

SEND_REQUIRED = Schema(
    from_=Param("string", required=True, alias="from"),
    subject=Param("string", required=True),
)


class EmailService(BaseService):
    """Email delivery, drafts and mailbox messages."""

    name = "email"
    children = {
        "templates": EmailTemplatesService,
        "domains": EmailDomainsService,
        "addresses": EmailAddressesService,
        "mailboxes": EmailMailboxesService,
        "analytics": EmailAnalyticsService,
        "queue": EmailQueueService,
        "suppression": EmailSuppressionService,
    }

    async def send(self, **fields: Any) -> Any:
        """Send an email, or send a saved draft when draft_id is given.

        Without draft_id, from_ and subject are required.
        """
        if not fields.get("draft_id"):
            validate_params(fields, SEND_REQUIRED)
        body = validate_params(fields, SEND_SCHEMA)
        return await self.sdk._fetch("/messaging/email", "POST", {"body": body})

    get = Endpoint("GET", "/messaging/email/message/{id}", _ID, args=("id",))

    update = Endpoint(
        "PUT",
        "/messaging/email/message/{email_id}",
        Schema(
            email_id=Param("string", required=True),
            folder=Param("string"),
            is_read=Param("boolean"),
        ),
        args=("email_id",),
    )

    delete = Endpoint(
        "DELETE",
        "/messaging/email/message/{email_id}",
        Schema(email_id=Param("string", required=True)),
        args=("email_id",),
    )

    update_domain = Endpoint(
        "PUT",
        "/messaging/email/{id}",
        _ID.extend(dkim_enabled=Param("boolean"), custom_dkim=Param("object")),
        args=("id",),
    )

    create_draft = Endpoint(
        "POST",
        "/messaging/email/drafts",
        DRAFT_FIELDS.extend(reply_type=Param("string")),
    )

    update_draft = Endpoint(
        "PUT",
        "/messaging/email/drafts/{id}",
        _ID.extend(**DRAFT_FIELDS.params),
        args=("id",),
    )

    get_draft = Endpoint("GET", "/messaging/email/drafts/{id}", _ID, args=("id",))

    delete_draft = Endpoint("DELETE", "/messaging/email/drafts/{id}", _ID, args=("id",))

    list_drafts = Endpoint(
        "GET",
        "/messaging/email/drafts",
        Schema(
            mailbox_id=Param("string"),
            subject=Param("string"),
            thread_id=Param("string"),
            limit=Param("number", default=50),
            offset=Param("number", default=0),
        ),
    )

    get_mailbox_emails = Endpoint(
        "GET",
        "/messaging/email/mailbox/{mailbox_id}/emails",
        Schema(
            mailbox_id=Param("string", required=True),
            folder=Param("string", default="open"),
            include_drafts=Param("boolean", default=False),
            search=Param("string"),
            sort_by=Param("string", default="dateTime"),
            sort_order=Param("string", default="desc"),
            limit=Param("number", default=25),
            offset=Param("number", default=0),
        ),
        args=("mailbox_id",),
    )


class MessagingService(BaseService):
    """SMS and email."""

    name = "messaging"
    children = {"sms": SmsService, "email": EmailService, "campaigns": CampaignsService}
