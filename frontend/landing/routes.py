"""
Landing page: links to the login and register flows. No API calls.
"""

import logging

from flask import Blueprint, request, render_template, Response

landing_bp = Blueprint("landing", __name__)


@landing_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Landing] {request.method} {request.path} -> {response.status}")
    return response


@landing_bp.route("/", methods=["GET"])
def index() -> str:
    return render_template("index.html")
