# nouasseur_app/forms/user.py
"""
Forms for registration and login
"""

from wtforms import PasswordField, StringField
from wtforms.validators import DataRequired, Email, Length, Regexp

from .base import PayloadForm, clean_text


class RegistrationForm(PayloadForm):
    """Payload for POST /api/users/register"""

    username = StringField(
        "Username",
        validators=[
            DataRequired(message="Username is required."),
            Length(min=3, max=255, message="Username must be between 3 and 255 characters."),
            Regexp(r"^[^@\s]+$", message="Username cannot contain spaces or '@'."),
        ],
        filters=[clean_text],
    )
    email = StringField(
        "Email",
        validators=[
            DataRequired(message="Email is required."),
            Email(message="Please enter a valid email address."),
            Length(max=255, message="Email must be 255 characters or less."),
        ],
        filters=[clean_text, lambda value: value.lower() if value else value],
    )
    password = PasswordField(
        "Password",
        validators=[
            DataRequired(message="Password is required."),
            Length(min=6, max=128, message="Password must be between 6 and 128 characters."),
        ],
    )


class LoginForm(PayloadForm):
    """Login accepts either the username or the email in ``username``"""

    username = StringField(
        "Username or email",
        validators=[DataRequired(message="Username and password are required.")],
        filters=[clean_text],
    )
    password = PasswordField(
        "Password",
        validators=[DataRequired(message="Username and password are required.")],
    )
