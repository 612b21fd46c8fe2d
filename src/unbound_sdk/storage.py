# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Host key/value store used to mirror login state.

Browser builds of the platform SDK persist a small identity tuple in local
storage after login. Here the store is an explicit dependency passed to the
session: anything with set() and remove() qualifies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

STORE_URL_KEY = "unbound_url"
STORE_USER_ID_KEY = "unbound_userId"
STORE_NAMESPACE_KEY = "unbound_namespace"

STORE_KEYS = (STORE_URL_KEY, STORE_USER_ID_KEY, STORE_NAMESPACE_KEY)


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal key/value sink interface."""

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """In-process dict-backed KeyValueStore."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def items(self):
        return self._data.items()


__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "STORE_KEYS",
    "STORE_NAMESPACE_KEY",
    "STORE_URL_KEY",
    "STORE_USER_ID_KEY",
]
