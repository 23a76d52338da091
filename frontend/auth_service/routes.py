"""
Authentication page routes.

Provides routes for:
- Login form (/login)
- Account registration form (/register)
- Logout (/logout)

All API calls are delegated to `auth_service.client`.
"""

import logging
from typing import Any, Union

from flask import Blueprint, request, render_template, redirect, url_for, flash, Response

from frontend.lib.api import get_api, ApiError
from frontend.lib.forms import first_error
from frontend.auth_service.forms import LoginForm, RegisterForm
from frontend.auth_service.client import AuthClient, REGISTER_FAILED, LOGIN_FAILED, LOGOUT_FAILED
from frontend.auth_service.models import User

auth_bp = Blueprint("auth", __name__)


# --- REQUEST LOGGING ---
@auth_bp.before_request
def before_request() -> None:
    """
    Log every incoming request to the auth pages.
    Form bodies are not logged since they carry passwords.
    """
    logging.info(f"[Auth] Incoming {request.method} {request.path}")


@auth_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Auth] Response {response.status}")
    return response


def greet(body: Any, prefix: str) -> None:
    """
    Flash a greeting for the user in an auth response body.
    Falls back to a plain greeting when the body has no usable user object.
    """
    user_data = body.get("user") if isinstance(body, dict) else None
    if isinstance(user_data, dict):
        flash(f"{prefix}, {User.from_dict(user_data).display_name}!", "success")
    else:
        flash(f"{prefix}!", "success")


# --- LOGIN ---
@auth_bp.route("/login", methods=["GET", "POST"])
def login() -> Union[str, Response]:
    """
    Show the login form, or sign in with the posted email and password.

    Returns:
        200: The form (with an inline error after a failed attempt).
        302: Redirect to the landing page after a successful login.
    """
    form = LoginForm()
    if request.method == "GET":
        return render_template("login.html", form=form, error="")

    if not form.validate():
        return render_template("login.html", form=form, error=first_error(form) or LOGIN_FAILED)

    try:
        body = AuthClient(get_api()).login(form.email.data, form.password.data)
    except ApiError as e:
        return render_template("login.html", form=form, error=e.message)
    except Exception as e:
        logging.error(f"[Auth] Login request failed: {e}")
        return render_template("login.html", form=form, error=LOGIN_FAILED)

    greet(body, "Welcome back")
    return redirect(url_for("landing.index"))


# --- REGISTER ---
@auth_bp.route("/register", methods=["GET", "POST"])
def register() -> Union[str, Response]:
    """
    Show the account registration form, or create the account.

    Expects form fields:
    - email (str)
    - password (str)
    - name (str, optional)

    Returns:
        200: The form (with an inline error after a failed attempt).
        302: Redirect to the landing page once the account exists.
    """
    form = RegisterForm()
    if request.method == "GET":
        return render_template("register.html", form=form, error="")

    if not form.validate():
        return render_template("register.html", form=form, error=first_error(form) or REGISTER_FAILED)

    try:
        body = AuthClient(get_api()).register(form.email.data, form.password.data, form.name.data or None)
    except ApiError as e:
        return render_template("register.html", form=form, error=e.message)
    except Exception as e:
        logging.error(f"[Auth] Register request failed: {e}")
        return render_template("register.html", form=form, error=REGISTER_FAILED)

    greet(body, "Welcome")
    return redirect(url_for("landing.index"))


# --- LOGOUT ---
@auth_bp.route("/logout", methods=["POST"])
def logout() -> Response:
    """
    End the API session and forget its cookies on success.
    """
    api = get_api()
    try:
        AuthClient(api).logout()
    except ApiError as e:
        flash(e.message, "error")
    except Exception as e:
        logging.error(f"[Auth] Logout request failed: {e}")
        flash(LOGOUT_FAILED, "error")
    else:
        api.clear_cookies()
        flash("You have been logged out.", "success")

    return redirect(url_for("landing.index"))
