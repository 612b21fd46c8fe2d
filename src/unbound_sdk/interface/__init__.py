# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Interface layer for service facades.

- service_base: Endpoint declarations, BaseService and ServiceManager

Example:
    ::

        from unbound_sdk.interface import BaseService, Endpoint
        from unbound_sdk.validation import Param, Schema

        class LookupService(BaseService):
            name = "lookup"

            cnam = Endpoint(
                "GET", "/lookup/cnam",
                Schema(phone_number=Param("string", required=True)),
                args=("phone_number",),
            )
"""

from .service_base import BaseService, Endpoint, ServiceManager

__all__ = ["BaseService", "Endpoint", "ServiceManager"]
