# nouasseur_app/models/event.py

from datetime import date

from .base import BaseModel, db, utcnow


class Event(BaseModel):
    """Calendar entry shown on the home and events pages"""

    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    event_name = db.Column(db.String(255), nullable=False, index=True)
    event_subtitle = db.Column(db.String(255), nullable=True)
    event_loc = db.Column(db.String(255), nullable=True)
    event_datebeg = db.Column(db.Date, nullable=True, index=True)
    event_dateend = db.Column(db.Date, nullable=True)
    event_time = db.Column(db.String(100), nullable=True)  # Free text, e.g. "6pm - 9pm"
    event_desc = db.Column(db.Text, nullable=True)
    event_photo1 = db.Column(db.String(255), nullable=True)
    event_photo2 = db.Column(db.String(255), nullable=True)
    event_photo3 = db.Column(db.String(255), nullable=True)
    event_photo4 = db.Column(db.String(255), nullable=True)
    event_status = db.Column(db.String(50), nullable=True)
    event_moddate = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=True)
    event_moduser = db.Column(db.String(255), nullable=True)
    event_sortcode = db.Column(db.Integer, nullable=True)

    def __repr__(self):
        return f"<Event {self.event_name}>"

    @property
    def photos(self):
        return [photo for photo in (self.event_photo1, self.event_photo2, self.event_photo3, self.event_photo4) if photo]

    def is_upcoming(self, today=None):
        """True when the event starts today or later"""
        if self.event_datebeg is None:
            return False
        return self.event_datebeg >= (today or date.today())

    def is_past(self, today=None):
        if self.event_datebeg is None:
            return False
        return self.event_datebeg < (today or date.today())
