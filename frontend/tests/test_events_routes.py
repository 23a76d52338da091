from datetime import date

import pytest

EVENTS_BODY = {
    "events": [
        {"id": "evt-1", "name": "ICMT Fall", "location": "Columbia University", "registrationOpen": True},
        {"id": "evt-2", "name": "ICMT Spring", "location": None, "registrationOpen": True},
    ]
}

FORM = {
    "event": "evt-2",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "tshirt_size": "S",
    "division": "A",
    "expected_graduation_year": "",
    "university": "Columbia University",
    "resume_url": "",
    "acknowledged_id_requirement": "on",
    "acknowledged_filming": "on",
    "acknowledged_team_merge": "on",
}


@pytest.fixture
def api(mocker, mock_api):
    mocker.patch("frontend.events_service.routes.get_api", return_value=mock_api)
    return mock_api


@pytest.fixture
def form():
    data = dict(FORM)
    data["expected_graduation_year"] = str(date.today().year + 1)
    return data


def test_get_form_preselects_first_event(client, api, make_response):
    api.get.return_value = make_response(200, EVENTS_BODY)

    response = client.get("/event-registration")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'value="evt-1" selected' in html
    assert "ICMT Fall - Columbia University" in html
    assert "ICMT Spring</option>" in html
    api.get.assert_called_once_with("/api/events")


def test_get_form_with_no_events_shows_placeholder_only(client, api, make_response):
    api.get.return_value = make_response(200, {"events": []})

    html = client.get("/event-registration").get_data(as_text=True)

    assert "-- Select an event --" in html
    assert 'value="evt-' not in html
    assert "form-error" not in html


def test_get_form_load_failure_shows_message(client, api, make_response):
    api.get.return_value = make_response(500, invalid_json=True)

    html = client.get("/event-registration").get_data(as_text=True)

    assert "Failed to load available events" in html


def test_submit_success_redirects_home(client, api, make_response, form):
    api.post.return_value = make_response(200, {"participant": {"id": "p-1"}})

    response = client.post("/event-registration", data=form)

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")
    assert api.post.call_count == 1
    path = api.post.call_args[0][0]
    payload = api.post.call_args[1]["json"]
    assert path == "/api/events/evt-2/register"
    assert payload["expectedGraduationYear"] == int(form["expected_graduation_year"])
    assert payload["resumeUrl"] is None
    assert payload["interestedInFinancialAid"] is False
    api.get.assert_not_called()


def test_submit_success_flashes_confirmation(client, api, make_response, form):
    api.post.return_value = make_response(200, {})

    response = client.post("/event-registration", data=form, follow_redirects=True)

    assert response.status_code == 200
    assert "Registration complete" in response.get_data(as_text=True)


def test_submit_server_error_rerenders_with_input(client, api, make_response, form):
    api.post.return_value = make_response(400, {"error": "Event full"})
    api.get.return_value = make_response(200, EVENTS_BODY)

    response = client.post("/event-registration", data=form)

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Event full" in html
    assert 'value="Ada"' in html
    assert 'value="evt-2" selected' in html


def test_submit_unparseable_error_shows_fallback(client, api, make_response, form):
    api.post.return_value = make_response(502, invalid_json=True)
    api.get.return_value = make_response(200, EVENTS_BODY)

    html = client.post("/event-registration", data=form).get_data(as_text=True)

    assert "Registration failed" in html


def test_submit_without_event_makes_no_api_calls(client, api, make_response, form):
    api.get.return_value = make_response(200, EVENTS_BODY)
    form["event"] = ""

    html = client.post("/event-registration", data=form).get_data(as_text=True)

    assert "Please select an event" in html
    api.post.assert_not_called()
    api.get.assert_not_called()


def test_rerender_reuses_events_from_get(client, api, make_response, form):
    api.get.return_value = make_response(200, EVENTS_BODY)
    client.get("/event-registration")
    form["event"] = ""

    html = client.post("/event-registration", data=form).get_data(as_text=True)

    assert "Please select an event" in html
    assert "ICMT Fall - Columbia University" in html
    assert 'value="evt-1" selected' not in html
    assert api.get.call_count == 1
    api.post.assert_not_called()


def test_rerender_after_api_error_uses_cached_events(client, api, make_response, form):
    api.get.return_value = make_response(200, EVENTS_BODY)
    api.post.return_value = make_response(400, {"error": "Event full"})
    client.get("/event-registration")

    html = client.post("/event-registration", data=form).get_data(as_text=True)

    assert "Event full" in html
    assert 'value="evt-2" selected' in html
    assert api.get.call_count == 1


@pytest.mark.parametrize("field, value, message", [
    ("first_name", "", "Please fill in all required fields"),
    ("tshirt_size", "XXXL", "Please select a valid t-shirt size"),
    ("division", "C", "Please select a valid division"),
    ("expected_graduation_year", "1999", "Please select a valid graduation year"),
    ("acknowledged_filming", "", "Please accept all required acknowledgements"),
])
def test_invalid_form_makes_no_api_calls(client, api, form, field, value, message):
    form[field] = value

    html = client.post("/event-registration", data=form).get_data(as_text=True)

    assert message in html
    api.post.assert_not_called()
    api.get.assert_not_called()


def test_unchecked_acknowledgement_is_rejected(client, api, form):
    del form["acknowledged_team_merge"]

    html = client.post("/event-registration", data=form).get_data(as_text=True)

    assert "Please accept all required acknowledgements" in html
    api.post.assert_not_called()
