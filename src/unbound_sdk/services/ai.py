# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""AI facade: generative chat, playbook execution and text-to-speech.

The ``stream`` flag is forwarded to the server as-is; responses are decoded
like any other response.
"""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

GENERATIVE_FIELDS = Schema(
    prompt=Param("string"),
    messages=Param("array"),
    related_id=Param("string"),
    model=Param("string"),
    temperature=Param("number"),
    subscription_id=Param("string"),
    stream=Param("boolean"),
)

CHAT_SCHEMA = GENERATIVE_FIELDS.extend(method=Param("string", required=True))

PLAYBOOK_SCHEMA = GENERATIVE_FIELDS.extend(
    playbook_id=Param("string", required=True),
    session_id=Param("string"),
)


class GenerativeService(BaseService):
    name = "generative"

    chat = Endpoint("POST", "/ai/generative/chat", CHAT_SCHEMA)

    playbook = Endpoint("POST", "/ai/generative/playbook", PLAYBOOK_SCHEMA)

    chat_ollama = Endpoint("POST", "/ai/generative/ollama", CHAT_SCHEMA)


class TextToSpeechService(BaseService):
    name = "tts"

    create = Endpoint(
        "POST",
        "/ai/tts",
        Schema(
            text=Param("string", required=True),
            voice=Param("string"),
            language_code=Param("string"),
            ssml_gender=Param("string"),
            audio_encoding=Param("string"),
            speaking_rate=Param("number"),
            pitch=Param("number"),
            volume_gain_db=Param("number"),
            effects_profile_ids=Param("array"),
        ),
    )


class AIService(BaseService):
    """Generative AI and speech synthesis."""

    name = "ai"
    children = {"generative": GenerativeService, "tts": TextToSpeechService}
