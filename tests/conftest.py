# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: a session wired to an in-memory httpx transport."""

from __future__ import annotations

import json

import httpx
import pytest

from unbound_sdk import MemoryStore, UnboundSDK


class Recorder:
    """Captures requests and replies with queued responses.

    When the queue is empty every request gets 200 {"ok": true}.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, status_code: int = 200, **kwargs) -> None:
        self.responses.append(httpx.Response(status_code, **kwargs))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={"ok": True})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1):
        """Decoded JSON body of a captured request, None when empty."""
        content = self.requests[index].content
        return json.loads(content) if content else None

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
async def sdk(recorder, store):
    """Session for namespace 'acme' with token 'tok'."""
    session = UnboundSDK(
        namespace="acme", token="tok", store=store, transport=recorder.transport()
    )
    yield session
    await session.aclose()
