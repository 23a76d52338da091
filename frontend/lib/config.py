"""
Environment configuration for the front-end.
Reads .env once and exposes the settings the Flask app needs.
"""

import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load .env only once here
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:8000"
DEFAULT_PORT = 3000


def load_config() -> Dict[str, Any]:
    """
    Build the Flask config mapping from environment variables.

    Returns:
        dict: SECRET_KEY, API_BASE_URL and session cookie settings.

    Raises:
        RuntimeError: If SECRET_KEY is not set.
    """
    secret_key = os.getenv("SECRET_KEY")
    if not secret_key:
        raise RuntimeError("SECRET_KEY is missing. Set it in .env")

    return {
        "SECRET_KEY": secret_key,
        "API_BASE_URL": os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        "SESSION_COOKIE_HTTPONLY": True,
        "SESSION_COOKIE_SAMESITE": "Lax",
    }


def get_port() -> int:
    return int(os.getenv("FRONTEND_PORT", DEFAULT_PORT))
