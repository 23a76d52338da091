import os
import pytest

# Ensure SECRET_KEY is set before the app config is read
os.environ.setdefault("SECRET_KEY", "test_secret")

from frontend.gateway.server import create_app


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test_secret",
        "API_BASE_URL": "http://api.test",
        "WTF_CSRF_ENABLED": False,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_response(mocker):
    """
    Factory for fake requests.Response objects.

    Pass invalid_json=True to simulate a body that is not JSON.
    """
    def _make(status_code=200, json_body=None, invalid_json=False):
        response = mocker.Mock()
        response.status_code = status_code
        response.ok = status_code < 400
        if invalid_json:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.json.return_value = json_body
        return response

    return _make


@pytest.fixture
def mock_api(mocker):
    """
    Stand-in for ApiClient. Tests set get/post return values.
    """
    api = mocker.Mock()
    api.cookie_dict.return_value = {}
    return api
