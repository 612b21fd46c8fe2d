# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""unbound-sdk: async Python client for the Unbound platform API."""

from .errors import DecodeError, InvalidArgument, RemoteError, TransportError, UnboundError
from .sdk_base import UnboundSDK, create_sdk
from .sdk_config import SdkConfig, config_from_env
from .storage import KeyValueStore, MemoryStore
from .validation import Param, Schema, validate_params

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "InvalidArgument",
    "KeyValueStore",
    "MemoryStore",
    "Param",
    "RemoteError",
    "Schema",
    "SdkConfig",
    "TransportError",
    "UnboundError",
    "UnboundSDK",
    "config_from_env",
    "create_sdk",
    "validate_params",
]
