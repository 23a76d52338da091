"""
Events API calls: list open events and register a participant.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from frontend.lib.api import ApiClient, ApiError, raise_for_error
from frontend.events_service.models import Event

LOAD_EVENTS_FAILED = "Failed to load available events"
REGISTRATION_FAILED = "Registration failed"


class EventsClient:
    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def list_events(self) -> List[Event]:
        """
        Fetch events currently open for registration.

        Returns:
            list: Event objects, empty when the API returns none.

        Raises:
            ApiError: Non-success status or a body that is not {"events": [...]}.
            requests.RequestException: On transport failure.
        """
        response = self.api.get("/api/events")
        raise_for_error(response, LOAD_EVENTS_FAILED)

        try:
            data = response.json()
            return [Event.from_dict(item) for item in (data.get("events") or [])]
        except (ValueError, KeyError, TypeError, AttributeError):
            raise ApiError(LOAD_EVENTS_FAILED, response.status_code)

    def register(self, event_id: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Register a participant for one event.

        Args:
            event_id (str): Selected event id.
            payload (dict): Body built by RegistrationForm.to_payload().

        Returns:
            dict: Decoded response body, or None when the body is empty or not JSON.

        Raises:
            ApiError: Server message, or "Registration failed".
        """
        path = f"/api/events/{quote(str(event_id), safe='')}/register"
        response = self.api.post(path, json=payload)
        raise_for_error(response, REGISTRATION_FAILED)

        try:
            return response.json()
        except ValueError:
            return None
