"""
Event registration form (Flask-WTF).

Validates the submitted fields; the accepted data is then turned into an
immutable RegistrationForm snapshot for the page controller. Event selection
is not validated here, the page checks it before anything else.
"""

from typing import List, Optional

from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, BooleanField
from wtforms.validators import DataRequired, AnyOf, ValidationError
from wtforms.validators import Optional as OptionalValidator

from frontend.lib.forms import strip_value
from frontend.events_service.models import (
    TSHIRT_SIZES,
    DIVISIONS,
    MISSING_FIELDS_ERROR,
    INVALID_TSHIRT_ERROR,
    INVALID_DIVISION_ERROR,
    INVALID_YEAR_ERROR,
    ACKNOWLEDGEMENTS_ERROR,
    graduation_years,
)


def required() -> DataRequired:
    return DataRequired(MISSING_FIELDS_ERROR)


class EventRegistrationForm(FlaskForm):
    event = StringField("Select Event", filters=[strip_value])

    first_name = StringField("First Name", filters=[strip_value], validators=[required()])
    last_name = StringField("Last Name", filters=[strip_value], validators=[required()])
    email = StringField("Email Address", filters=[strip_value], validators=[required()])
    university = StringField("University", filters=[strip_value], validators=[required()])

    tshirt_size = SelectField(
        "T-Shirt Size",
        choices=[(size, size) for size in TSHIRT_SIZES],
        validate_choice=False,
        validators=[required(), AnyOf(TSHIRT_SIZES, message=INVALID_TSHIRT_ERROR)],
    )
    division = SelectField(
        "Division",
        choices=[(division, f"Division {division}") for division in DIVISIONS],
        validate_choice=False,
        validators=[required(), AnyOf(DIVISIONS, message=INVALID_DIVISION_ERROR)],
    )
    expected_graduation_year = StringField(
        "Expected Graduation Year", filters=[strip_value], validators=[required()]
    )

    resume_url = StringField("Resume URL (Optional)", filters=[strip_value], validators=[OptionalValidator()])

    acknowledged_id_requirement = BooleanField(validators=[DataRequired(ACKNOWLEDGEMENTS_ERROR)])
    acknowledged_filming = BooleanField(validators=[DataRequired(ACKNOWLEDGEMENTS_ERROR)])
    acknowledged_team_merge = BooleanField(validators=[DataRequired(ACKNOWLEDGEMENTS_ERROR)])
    interested_in_financial_aid = BooleanField()

    def __init__(self, *args, years: Optional[List[int]] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.years = years if years is not None else graduation_years()

    def validate_expected_graduation_year(self, field) -> None:
        if field.data not in [str(year) for year in self.years]:
            raise ValidationError(INVALID_YEAR_ERROR)
