"""
Auth client: register, login and logout against the API.

Each operation sends exactly one request through the shared ApiClient, so the
session cookie the API sets on login/register is kept for later calls.
"""

from typing import Any, Dict, Optional

from frontend.lib.api import ApiClient, raise_for_error
from frontend.auth_service.models import Credentials

REGISTER_FAILED = "Registration failed"
LOGIN_FAILED = "Login failed"
LOGOUT_FAILED = "Logout failed"


class AuthClient:
    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def register(self, email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
        """
        Create an account.

        Returns:
            dict: The decoded response body, expected to be {"user": {...}}.

        Raises:
            ApiError: Server message, or "Registration failed".
        """
        creds = Credentials(email=email, password=password, name=name)
        response = self.api.post("/api/auth/register", json=creds.to_payload())
        raise_for_error(response, REGISTER_FAILED)
        return response.json()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Start a session.

        Returns:
            dict: The decoded response body, expected to be {"user": {...}}.

        Raises:
            ApiError: Server message, or "Login failed".
        """
        creds = Credentials(email=email, password=password)
        response = self.api.post("/api/auth/login", json=creds.to_payload(include_name=False))
        raise_for_error(response, LOGIN_FAILED)
        return response.json()

    def logout(self) -> None:
        """
        End the session. Sends no body.

        Raises:
            ApiError: Server message, or "Logout failed".
        """
        response = self.api.post("/api/auth/logout")
        raise_for_error(response, LOGOUT_FAILED)
