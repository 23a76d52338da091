"""
Shared HTTP boundary to the event-management API.

Every page talks to the remote service through an ApiClient. The client keeps
one requests.Session so cookies set by the API (the login session) are sent
back on later calls. Between page loads the cookie jar lives in the Flask
session, see get_api() and save_api_cookies().
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests
from requests.utils import cookiejar_from_dict, dict_from_cookiejar
from flask import current_app, g, session, Response

# Flask session key holding the remote API cookies
API_COOKIES_KEY = "api_cookies"


class ApiError(Exception):
    """
    A non-success response from the API.

    The message is safe to show to the user: it is either what the server
    put in its {"error": ...} body or a fixed default for the operation.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """
    Thin wrapper around requests.Session for JSON calls to one API host.

    Args:
        base_url (str): Scheme and host of the API, e.g. "http://localhost:8000".
        session (requests.Session, optional): Session to reuse (tests inject one).
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def request(self, method: str, path: str, json: Optional[Any] = None) -> requests.Response:
        """
        Send a single request. No retries and no timeout.

        Args:
            method (str): HTTP method.
            path (str): Path starting with "/api/...".
            json (Any, optional): Body to send as JSON. Omitted when None.

        Returns:
            requests.Response: The raw response, whatever its status.

        Raises:
            requests.RequestException: On transport failure.
        """
        kwargs: Dict[str, Any] = {}
        if json is not None:
            kwargs["json"] = json

        logging.info(f"[API] {method} {path}")
        response = self.session.request(method, f"{self.base_url}{path}", **kwargs)
        logging.info(f"[API] {method} {path} -> {response.status_code}")
        return response

    def get(self, path: str) -> requests.Response:
        return self.request("GET", path)

    def post(self, path: str, json: Optional[Any] = None) -> requests.Response:
        return self.request("POST", path, json=json)

    def cookie_dict(self) -> Dict[str, str]:
        return dict_from_cookiejar(self.session.cookies)

    def load_cookies(self, cookies: Mapping[str, str]) -> None:
        self.session.cookies = cookiejar_from_dict(dict(cookies))

    def clear_cookies(self) -> None:
        self.session.cookies.clear()


def raise_for_error(response: requests.Response, default: str) -> None:
    """
    Turn a non-success response into an ApiError.

    The message comes from a JSON body of the form {"error": "..."}. If the body
    cannot be decoded, or carries no usable error string, `default` is used.

    Args:
        response (requests.Response): Response to check.
        default (str): Fallback message for this operation.

    Raises:
        ApiError: If the response status is not a success.
    """
    if response.ok:
        return

    try:
        body = response.json()
    except ValueError:
        body = None

    message = body.get("error") if isinstance(body, dict) else None
    if not isinstance(message, str) or not message:
        message = default

    logging.warning(f"[API] Request failed with status {response.status_code}: {message}")
    raise ApiError(message, response.status_code)


def get_api() -> ApiClient:
    """
    Return the ApiClient for the current Flask request.

    Created on first use and bound to flask.g, with the remote cookies restored
    from the user's Flask session.
    """
    if "api" not in g:
        api = ApiClient(current_app.config["API_BASE_URL"])
        api.load_cookies(session.get(API_COOKIES_KEY, {}))
        g.api = api
    return g.api


def save_api_cookies(response: Response) -> Response:
    """
    After-request hook: persist the remote cookie jar into the Flask session.

    Only writes when the jar changed, so pages that made no API call leave the
    session untouched.
    """
    api = g.get("api")
    if api is None:
        return response

    cookies = api.cookie_dict()
    if cookies != session.get(API_COOKIES_KEY, {}):
        if cookies:
            session[API_COOKIES_KEY] = cookies
        else:
            session.pop(API_COOKIES_KEY, None)
    return response
