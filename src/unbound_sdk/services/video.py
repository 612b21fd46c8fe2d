# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Video facade: meeting rooms, participants and meeting analytics."""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

_ROOM = Schema(room_id=Param("string", required=True))
_PARTICIPANT = _ROOM.extend(participant_id=Param("string", required=True))

ROOM_FIELDS = Schema(
    name=Param("string"),
    password=Param("string"),
    start_time=Param("string"),
    end_time=Param("string"),
    duration=Param("number"),
    duration_unit=Param("string"),
    timezone=Param("string"),
    waiting_room=Param("boolean"),
    hosts=Param("array"),
    participants=Param("array"),
    start_camera_muted=Param("boolean"),
    start_camera_muted_after=Param("number"),
    start_microphone_muted=Param("boolean"),
    start_microphone_muted_after=Param("number"),
)


class VideoService(BaseService):
    """Video rooms.

    Room fields use snake_case keyword arguments and travel as camelCase::

        room = await sdk.video.create_room(name="Standup", waiting_room=True)
        await sdk.video.update_room(room["id"], start_camera_muted=True)
    """

    name = "video"

    clear_token = Endpoint("POST", "/video/clearVideoToken", skip_auth=True)

    join_room = Endpoint(
        "POST",
        "/video/{room}/join",
        Schema(
            room=Param("string", required=True),
            password=Param("string"),
            email=Param("string"),
        ),
        args=("room", "password", "email"),
        extra={"tokenType": "cookie"},
    )

    update_participant = Endpoint(
        "PUT",
        "/video/{room_id}/{participant_id}",
        _PARTICIPANT.extend(update=Param("object", required=True)),
        args=("room_id", "participant_id", "update"),
        payload="update",
    )

    remove_participant = Endpoint(
        "DELETE",
        "/video/{room_id}/leave",
        _ROOM.extend(participant_id=Param("string", required=True)),
        args=("room_id", "participant_id"),
    )

    leave_room = Endpoint("DELETE", "/video/{room_id}/leave", _ROOM, args=("room_id",))

    mute = Endpoint(
        "PUT",
        "/video/{room_id}/{participant_id}/mute/{media_type}",
        _PARTICIPANT.extend(
            media_type=Param("string", required=True),
            is_mute=Param("boolean", required=True),
            no_device=Param("boolean", default=False),
            stream_creation=Param("boolean", default=False),
        ),
        args=(
            "room_id",
            "participant_id",
            "media_type",
            "is_mute",
            "no_device",
            "stream_creation",
        ),
    )

    create_room = Endpoint("POST", "/video", ROOM_FIELDS)

    update_room = Endpoint(
        "PUT", "/video/{room_id}", ROOM_FIELDS.extend(**_ROOM.params), args=("room_id",)
    )

    place_call = Endpoint(
        "POST",
        "/video/{room_id}/placeOutboundCall",
        _ROOM.extend(
            phone_number=Param("string", required=True),
            caller_id_number=Param("string"),
        ),
        args=("room_id", "phone_number", "caller_id_number"),
    )

    list_meetings = Endpoint(
        "GET",
        "/video/meetings",
        Schema(
            start_date=Param("string"),
            end_date=Param("string"),
            limit=Param("number"),
            offset=Param("number"),
        ),
    )

    get_meeting_analytics = Endpoint(
        "GET",
        "/video/meetings/{room_id}/analytics",
        _ROOM.extend(
            participant_id=Param("string"),
            start_time=Param("string"),
            end_time=Param("string"),
            granularity=Param("string"),
            timezone=Param("string"),
        ),
        args=("room_id",),
    )

    delete_room = Endpoint("DELETE", "/video/{room_id}", _ROOM, args=("room_id",))

    add_participant = Endpoint(
        "POST",
        "/video/{room_id}/participants",
        _ROOM.extend(participant=Param("object", required=True)),
        args=("room_id", "participant"),
        payload="participant",
    )

    close_room = Endpoint("POST", "/video/{room_id}/close", _ROOM, args=("room_id",))

    validate_guest_token = Endpoint(
        "POST",
        "/video/validateGuestToken",
        Schema(token=Param("string", required=True)),
        args=("token",),
    )

    log_stats = Endpoint(
        "POST",
        "/video/{room_id}/stats",
        _ROOM.extend(stats=Param("object", required=True)),
        args=("room_id", "stats"),
        payload="stats",
    )
