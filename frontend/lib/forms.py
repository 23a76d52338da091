"""
Small helpers shared by the Flask-WTF forms.
"""

from typing import Any, Optional

from flask_wtf import FlaskForm


def strip_value(value: Any) -> Any:
    # Field filter: trim surrounding whitespace from text input
    return value.strip() if isinstance(value, str) else value


def first_error(form: FlaskForm) -> Optional[str]:
    """
    The first validation message, in field declaration order.
    """
    for field in form:
        if field.errors:
            return field.errors[0]
    return None
