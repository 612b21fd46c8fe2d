# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Voice facade: outbound calls, recording, transcription and call control."""

from __future__ import annotations

from typing import Any

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

_CHANNEL = Schema(voice_channel_id=Param("string", required=True))
_CHANNELS = Schema(channels=Param("array", required=True))


class VoiceService(BaseService):
    """Voice calls.

    Call-level operations (record, call, hangup) address a call by its id;
    channel-level operations (mute, dtmf, transcribe) address one leg.
    """

    name = "voice"

    record = Endpoint(
        "POST",
        "/voice/record/",
        Schema(
            cdr_id=Param("string"),
            call_id=Param("string"),
            action=Param("string", default="start"),
            direction=Param("string", default="sendrecv"),
        ),
    )

    call = Endpoint(
        "POST",
        "/voice/",
        Schema(
            to=Param("string", required=True),
            from_=Param("string", required=True, alias="from"),
            destination=Param("string"),
            app=Param("object"),
            timeout=Param("number"),
            custom_headers=Param("object"),
        ),
    )

    replace_call_app = Endpoint(
        "PUT",
        "/voice/replace",
        Schema(call_id=Param("string", required=True), app=Param("object", required=True)),
        args=("call_id", "app"),
    )

    hangup = Endpoint(
        "PUT",
        "/voice/hangup",
        Schema(call_id=Param("string", required=True)),
        args=("call_id",),
    )

    hold = Endpoint("PUT", "/voice/calls/hold", _CHANNELS, args=("channels",))

    mute = Endpoint(
        "PUT",
        "/voice/calls/mute/{voice_channel_id}",
        _CHANNEL.extend(
            action=Param("string", default="mute"),
            direction=Param("string", default="in"),
        ),
        args=("voice_channel_id", "action", "direction"),
    )

    async def unmute(self, voice_channel_id: str, direction: str = "in") -> Any:
        return await self.mute(voice_channel_id, "unmute", direction)

    send_dtmf = Endpoint(
        "POST",
        "/voice/calls/dtmf/{voice_channel_id}",
        _CHANNEL.extend(dtmf=Param("string", required=True)),
        args=("voice_channel_id", "dtmf"),
    )

    async def stop_recording(self, call_id: str, direction: str = "both") -> Any:
        return await self.record(call_id=call_id, action="stop", direction=direction)

    async def pause_recording(self, call_id: str, direction: str = "both") -> Any:
        return await self.record(call_id=call_id, action="pause", direction=direction)

    async def resume_recording(self, call_id: str, direction: str = "both") -> Any:
        return await self.record(call_id=call_id, action="resume", direction=direction)

    transcribe = Endpoint(
        "POST",
        "/voice/calls/transcribe/{voice_channel_id}",
        _CHANNEL.extend(
            action=Param("string", default="start"),
            direction=Param("string", default="in"),
            forward_text=Param("object"),
            forward_rtp=Param("object"),
        ),
        args=("voice_channel_id", "action", "direction", "forward_text", "forward_rtp"),
    )

    async def stop_transcribing(self, voice_channel_id: str, direction: str = "in") -> Any:
        return await self.transcribe(voice_channel_id, "stop", direction)

    transfer = Endpoint(
        "POST",
        "/voice/calls/transfer",
        _CHANNELS.extend(
            to=Param("string"),
            caller_id_name=Param("string"),
            caller_id_number=Param("string"),
            timeout=Param("number"),
            voice_app=Param("object"),
        ),
        args=("channels",),
    )

    conference = Endpoint("POST", "/voice/calls/conference", _CHANNELS, args=("channels",))
