# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Login facade: session login/logout and password management.

login() and logout() are the only operations that change session state:
a successful login copies the identity returned by the server onto the
session and mirrors it into the host key/value store, logout clears it.
"""

from __future__ import annotations

from ..errors import DecodeError
from ..interface import BaseService, Endpoint
from ..storage import STORE_KEYS, STORE_NAMESPACE_KEY, STORE_URL_KEY, STORE_USER_ID_KEY
from ..validation import Param, Schema, validate_params

LOGIN_SCHEMA = Schema(
    username=Param("string", required=True),
    password=Param("string", required=True),
    namespace=Param("string"),
)


class LoginService(BaseService):
    """Authentication operations."""

    name = "login"

    async def login(self, username: str, password: str, namespace: str | None = None) -> dict:
        """Authenticate and update the session identity.

        Args:
            username: Login name.
            password: Password.
            namespace: Tenant namespace. Defaults to the server's choice.

        Returns:
            {"valid": True, "userId": ..., "namespace": ..., "url": ...}

        Raises:
            InvalidArgument: If username or password is missing.
            RemoteError: If the credentials are rejected.
            DecodeError: If the response is not a JSON object.
        """
        body = validate_params(
            {"username": username, "password": password, "namespace": namespace},
            LOGIN_SCHEMA,
        )
        body["tokenType"] = "cookie"
        result = await self.sdk._fetch(
            "/login", "POST", {"body": body}, skip_auth=True, require_json=True
        )
        if not isinstance(result, dict):
            raise DecodeError("Login response is not a JSON object", body=result)

        sdk = self.sdk
        if result.get("userId"):
            sdk.user_id = result["userId"]
        if result.get("namespace"):
            sdk.namespace = result["namespace"]
        if result.get("url"):
            sdk.url = result["url"]
        if result.get("token"):
            sdk.token = result["token"]

        if sdk.store is not None:
            for key, value in (
                (STORE_URL_KEY, sdk.url),
                (STORE_USER_ID_KEY, sdk.user_id),
                (STORE_NAMESPACE_KEY, sdk.namespace),
            ):
                if value:
                    sdk.store.set(key, value)

        return {
            "valid": True,
            "userId": sdk.user_id,
            "namespace": sdk.namespace,
            "url": sdk.url,
        }

    async def logout(self) -> bool:
        """End the server session and forget the local identity."""
        await self.sdk._fetch("/login", "DELETE", skip_auth=True)
        self.sdk.user_id = None
        if self.sdk.store is not None:
            for key in STORE_KEYS:
                self.sdk.store.remove(key)
        return True

    validate = Endpoint("POST", "/login/validate", skip_auth=True)

    change_password = Endpoint(
        "PUT",
        "/login/changePassword",
        Schema(new_password=Param("string", required=True, alias="password")),
        args=("new_password",),
    )

    get_password_requirements = Endpoint("GET", "/login/passwordRequirements")

    validate_password_strength = Endpoint(
        "POST",
        "/login/validatePasswordStrength",
        Schema(password=Param("string", required=True)),
        args=("password",),
    )

    forgot_password = Endpoint(
        "POST",
        "/login/forgotPassword",
        Schema(email=Param("string", required=True)),
        args=("email",),
        skip_auth=True,
    )

