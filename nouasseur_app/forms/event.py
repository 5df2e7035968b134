# nouasseur_app/forms/event.py
"""
Payload schema for event create/update requests
"""

from wtforms import DateField, IntegerField, StringField
from wtforms.validators import DataRequired, Length, NumberRange, Optional, ValidationError

from .base import PayloadForm, clean_text, text_field


class EventForm(PayloadForm):
    """Fields accepted by POST/PUT /api/events"""

    event_name = StringField(
        "Event name",
        validators=[
            DataRequired(message="Event name is required."),
            Length(max=255, message="Event name must be 255 characters or less."),
        ],
        filters=[clean_text],
    )
    event_subtitle = text_field("Subtitle", 255)
    event_loc = text_field("Location", 255)
    event_datebeg = DateField("Start date", validators=[Optional()], format="%Y-%m-%d")
    event_dateend = DateField("End date", validators=[Optional()], format="%Y-%m-%d")
    event_time = text_field("Time", 100)
    event_desc = text_field("Description")
    event_photo1 = text_field("Photo 1", 255)
    event_photo2 = text_field("Photo 2", 255)
    event_photo3 = text_field("Photo 3", 255)
    event_photo4 = text_field("Photo 4", 255)
    event_status = text_field("Status", 50)
    event_moduser = text_field("Modified by", 255)
    event_sortcode = IntegerField(
        "Sort code",
        validators=[Optional(), NumberRange(min=0, message="Sort code cannot be negative.")],
    )

    def validate_event_dateend(self, field):
        """End date cannot precede the start date when both are supplied"""
        start_field = self._fields.get("event_datebeg")
        if field.data and start_field is not None and start_field.data and field.data < start_field.data:
            raise ValidationError("End date cannot be before the start date.")

    def validate_for_update(self, record):
        """Field validators plus the date order of the merged event"""
        valid = self.validate()
        start_field = self._fields.get("event_datebeg")
        end_field = self._fields.get("event_dateend")
        if not valid or (start_field is None and end_field is None):
            return valid

        start = start_field.data if start_field is not None else record.event_datebeg
        end = end_field.data if end_field is not None else record.event_dateend
        if start and end and end < start:
            if end_field is not None:
                end_field.errors.append("End date cannot be before the start date.")
            else:
                start_field.errors.append("Start date cannot be after the end date.")
            return False
        return True
