# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Service facades of the Unbound platform API.

SERVICES is the fixed roster installed on every UnboundSDK session, in
order, keyed by the attribute name the facade is reachable under.
"""

from .ai import AIService
from .engagement_metrics import EngagementMetricsService
from .enroll import EnrollService
from .external_oauth import ExternalOAuthService
from .generate_id import GenerateIdService
from .google_calendar import GoogleCalendarService
from .layouts import LayoutsService
from .login import LoginService
from .lookup import LookupService
from .messaging import MessagingService
from .notes import NotesService
from .objects import ObjectsService
from .phone_numbers import PhoneNumbersService
from .portals import PortalsService
from .record_types import RecordTypesService
from .sip_endpoints import SipEndpointsService
from .storage import StorageService
from .subscriptions import SubscriptionsService
from .verification import VerificationService
from .video import VideoService
from .voice import VoiceService
from .workflows import WorkflowsService

SERVICES = {
    "login": LoginService,
    "objects": ObjectsService,
    "messaging": MessagingService,
    "video": VideoService,
    "voice": VoiceService,
    "ai": AIService,
    "lookup": LookupService,
    "layouts": LayoutsService,
    "subscriptions": SubscriptionsService,
    "workflows": WorkflowsService,
    "notes": NotesService,
    "storage": StorageService,
    "verification": VerificationService,
    "portals": PortalsService,
    "sip_endpoints": SipEndpointsService,
    "external_oauth": ExternalOAuthService,
    "google_calendar": GoogleCalendarService,
    "enroll": EnrollService,
    "phone_numbers": PhoneNumbersService,
    "record_types": RecordTypesService,
    "generate_id": GenerateIdService,
    "engagement_metrics": EngagementMetricsService,
}

__all__ = [
    "SERVICES",
    "AIService",
    "EngagementMetricsService",
    "EnrollService",
    "ExternalOAuthService",
    "GenerateIdService",
    "GoogleCalendarService",
    "LayoutsService",
    "LoginService",
    "LookupService",
    "MessagingService",
    "NotesService",
    "ObjectsService",
    "PhoneNumbersService",
    "PortalsService",
    "RecordTypesService",
    "SipEndpointsService",
    "StorageService",
    "SubscriptionsService",
    "VerificationService",
    "VideoService",
    "VoiceService",
    "WorkflowsService",
]
