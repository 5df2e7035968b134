# nouasseur_app/forms/directory.py
"""
Payload schema for directory entry create/update requests
"""

from wtforms import BooleanField, IntegerField, StringField
from wtforms.validators import DataRequired, Email, Length, Optional

from .base import PayloadForm, clean_text, text_field


class DirectoryEntryForm(PayloadForm):
    """Fields accepted by POST/PUT /api/directories"""

    name = StringField(
        "Name",
        validators=[
            DataRequired(message="Name is required."),
            Length(max=255, message="Name must be 255 characters or less."),
        ],
        filters=[clean_text],
    )
    position = text_field("Position", 255)
    organization = text_field("Organization", 255)
    department = text_field("Department", 255)
    address = text_field("Address", 255)
    city = text_field("City", 100)
    state = text_field("State", 50)
    zip_code = text_field("ZIP code", 20)
    country = text_field("Country", 100)
    phone = text_field("Phone", 50)
    email = StringField(
        "Email",
        validators=[
            Optional(),
            Email(message="Please enter a valid email address."),
            Length(max=255, message="Email must be 255 characters or less."),
        ],
        filters=[clean_text],
    )
    website = text_field("Website", 255)
    category = text_field("Category", 100)
    sub_category = text_field("Sub-category", 100)
    description = text_field("Description")
    notes = text_field("Notes")
    sort_order = IntegerField("Sort order", validators=[Optional()])
    is_active = BooleanField("Active", default=True)
