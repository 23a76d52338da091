"""
Event registration page routes.

GET renders the form with the open events. POST submits the registration and
redirects home on success, or re-renders the form with the error and the
user's input kept.
"""

import logging
from typing import List, Optional, Union

from flask import Blueprint, request, render_template, redirect, flash, session, Response

from frontend.lib.api import get_api
from frontend.lib.forms import first_error
from frontend.events_service.forms import EventRegistrationForm
from frontend.events_service.models import TSHIRT_SIZES, DIVISIONS, Event, RegistrationForm
from frontend.events_service.registration import EventRegistrationPage

events_bp = Blueprint("events", __name__)

REGISTRATION_COMPLETE = "Registration complete. See you at the event!"
EVENTS_CACHE_KEY = "registration_events"


class Navigator:
    """Records where the page asked to go so the route can redirect there."""

    def __init__(self) -> None:
        self.location: Optional[str] = None

    def __call__(self, to: str) -> None:
        self.location = to


# --- REQUEST LOGGING ---
@events_bp.before_request
def before_request() -> None:
    logging.info(f"[Events] Incoming {request.method} {request.path}")


@events_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Events] Response {response.status}")
    return response


def render_page(page: EventRegistrationPage, wtform: EventRegistrationForm) -> str:
    return render_template(
        "event_registration.html",
        page=page,
        form=page.form,
        wtform=wtform,
        tshirt_sizes=TSHIRT_SIZES,
        divisions=DIVISIONS,
    )


def remember_events(page: EventRegistrationPage) -> None:
    # The list shown on GET is reused if the POST has to re-render the form
    session[EVENTS_CACHE_KEY] = [event.to_dict() for event in page.events]


def cached_events() -> Optional[List[Event]]:
    cached = session.get(EVENTS_CACHE_KEY)
    if cached is None:
        return None
    try:
        return [Event.from_dict(item) for item in cached]
    except (KeyError, TypeError):
        return None


@events_bp.route("", methods=["GET"])
def show_form() -> str:
    """
    Render the registration form.

    Loads the open events once and pre-selects the first one if any.
    """
    page = EventRegistrationPage(get_api(), navigate=Navigator())
    page.load_events()
    if not page.error:
        remember_events(page)
    return render_page(page, EventRegistrationForm(years=page.graduation_years))


@events_bp.route("", methods=["POST"])
def submit_form() -> Union[str, Response]:
    """
    Submit a registration.

    Expects the EventRegistrationForm fields, "event" being the event id.
    Nothing is sent to the API unless an event is selected and the form
    validates.

    Returns:
        302: Redirect to the landing page on success.
        200: The form again, with an inline error message.
    """
    navigator = Navigator()
    page = EventRegistrationPage(get_api(), navigate=navigator)
    wtform = EventRegistrationForm(years=page.graduation_years)

    chosen_event = wtform.event.data or ""
    page.select_event(chosen_event)
    page.form = RegistrationForm.from_form(wtform.data)

    if not chosen_event:
        page.submit()
    elif not wtform.validate():
        page.error = first_error(wtform) or ""
    elif page.submit():
        flash(REGISTRATION_COMPLETE, "success")
        return redirect(navigator.location)

    message = page.error
    events = cached_events()
    if events is not None:
        page.restore_events(events)
    elif page.request_sent:
        page.load_events()
    page.select_event(chosen_event)
    page.error = message or page.error
    return render_page(page, wtform)
