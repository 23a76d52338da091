"""
Login and account registration forms.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, Optional

from frontend.lib.forms import strip_value

CREDENTIALS_REQUIRED = "Email and password are required"


class LoginForm(FlaskForm):
    email = StringField("Email Address", filters=[strip_value], validators=[DataRequired(CREDENTIALS_REQUIRED)])
    password = PasswordField("Password", validators=[DataRequired(CREDENTIALS_REQUIRED)])


class RegisterForm(FlaskForm):
    name = StringField("Name", filters=[strip_value], validators=[Optional()])
    email = StringField("Email Address", filters=[strip_value], validators=[DataRequired(CREDENTIALS_REQUIRED)])
    password = PasswordField("Password", validators=[DataRequired(CREDENTIALS_REQUIRED)])
