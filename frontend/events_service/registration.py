"""
Event registration page state.

One EventRegistrationPage lives for one page view. Its collaborators are
injected: an ApiClient for the network and a navigate(path) callback for
leaving the page after a successful submission.

States:
    idle     -> waiting for input
    loading  -> a submission is in flight
    success  -> registered, navigation requested
    error    -> last action failed, message in `error`, input still editable
"""

import logging
from datetime import date
from typing import Any, Callable, List, Optional

from frontend.lib.api import ApiClient, ApiError
from frontend.events_service.client import EventsClient, LOAD_EVENTS_FAILED, REGISTRATION_FAILED
from frontend.events_service.models import Event, RegistrationForm, graduation_years

IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"

SELECT_EVENT_ERROR = "Please select an event"
SUCCESS_ROUTE = "/"


class EventRegistrationPage:
    def __init__(
        self,
        api: ApiClient,
        navigate: Callable[[str], Any],
        today: Optional[date] = None,
    ) -> None:
        self.events_client = EventsClient(api)
        self.navigate = navigate
        self.graduation_years: List[int] = graduation_years(today)

        self.events: List[Event] = []
        self.selected_event: str = ""
        self.form = RegistrationForm()
        self.loading = False
        self.error = ""
        self.succeeded = False
        self.request_sent = False
        self._events_loaded = False

    @property
    def state(self) -> str:
        if self.loading:
            return LOADING
        if self.succeeded:
            return SUCCESS
        if self.error:
            return ERROR
        return IDLE

    def load_events(self) -> None:
        """
        Fetch the open events once for this page.

        On failure the list stays empty and a fixed message is shown. On
        success the first event is pre-selected when nothing is selected yet.
        """
        if self._events_loaded:
            return
        self._events_loaded = True

        try:
            events = self.events_client.list_events()
        except Exception as e:
            logging.error(f"[Events] Failed to load events: {e}")
            self.error = LOAD_EVENTS_FAILED
            return

        self.events = events
        if events and not self.selected_event:
            self.selected_event = events[0].id

    def restore_events(self, events: List[Event]) -> None:
        """
        Reuse the list this page already loaded, e.g. when re-rendering after
        a failed submit. Counts as loaded; the selection is left alone.
        """
        self.events = list(events)
        self._events_loaded = True

    def select_event(self, event_id: Optional[str]) -> None:
        self.selected_event = event_id or ""

    def update(self, field: str, value: Any) -> None:
        self.form = self.form.with_field(field, value)

    def submit(self) -> bool:
        """
        Validate and send the current form snapshot.

        Returns:
            bool: True if the registration was accepted and navigation requested.
        """
        # Advisory guard only, matches the disabled submit button
        if self.loading or self.succeeded:
            logging.warning("[Events] Ignoring submit while a registration is in flight or done")
            return False

        self.error = ""
        self.loading = True
        try:
            if not self.selected_event:
                self.error = SELECT_EVENT_ERROR
                return False

            problem = self.form.validation_error(self.graduation_years)
            if problem:
                self.error = problem
                return False

            snapshot = self.form
            self.request_sent = True
            try:
                self.events_client.register(self.selected_event, snapshot.to_payload())
            except ApiError as e:
                self.error = e.message
                return False
            except Exception as e:
                logging.error(f"[Events] Registration request failed: {e}")
                self.error = REGISTRATION_FAILED
                return False

            logging.info(f"[Events] Registered {snapshot.email} for event {self.selected_event}")
            self.succeeded = True
            self.navigate(SUCCESS_ROUTE)
            return True
        finally:
            self.loading = False
