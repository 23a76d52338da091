"""
Front-end gateway: combines the landing, auth, and event registration blueprints.
This is the local entrypoint for development.
"""

import os
import logging
import sys
from typing import Any, Mapping, Optional, Tuple

from flask import Flask, jsonify, render_template, Response
from flask_wtf.csrf import CSRFProtect, CSRFError

from frontend.lib.config import load_config, get_port
from frontend.lib.api import save_api_cookies

# Basic console logging during page requests
logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(asctime)s - %(message)s")

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")

csrf = CSRFProtect()


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        test_config (dict, optional): Overrides applied on top of the environment config.

    Returns:
        Flask: The configured Flask application.
    """
    app = Flask(__name__, template_folder=TEMPLATE_DIR)
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)

    # Every POST form carries a CSRF token
    csrf.init_app(app)

    # --- REGISTER BLUEPRINTS ---
    try:
        from frontend.landing.routes import landing_bp
        from frontend.auth_service.routes import auth_bp
        from frontend.events_service.routes import events_bp

        app.register_blueprint(landing_bp)
        app.register_blueprint(auth_bp)
        app.register_blueprint(events_bp, url_prefix="/event-registration")

        logging.info("All blueprints registered successfully.")

    except ImportError as e:
        logging.error(f"Failed to import blueprints. Module not found: {e}")
        sys.exit(1)

    # Remote API cookies ride along in the Flask session between page loads
    app.after_request(save_api_cookies)

    # --- BASIC HEALTH CHECKPOINT ---
    @app.route("/health")
    def health() -> Tuple[Response, int]:
        """
        Health check endpoint.
        """
        return jsonify({"status": "ok"}), 200

    @app.errorhandler(CSRFError)
    def csrf_error(error) -> Tuple[str, int]:
        logging.warning(f"Rejected form post: {error.description}")
        return render_template("error.html", message="Your form expired. Please reload the page and try again."), 400

    @app.errorhandler(404)
    def not_found(error) -> Tuple[str, int]:
        return render_template("error.html", message="Page not found"), 404

    @app.errorhandler(500)
    def internal_error(error) -> Tuple[str, int]:
        logging.error(f"Unhandled error: {error}")
        return render_template("error.html", message="Something went wrong. Please try again."), 500

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=get_port(), debug=True)
