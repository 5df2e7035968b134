# nouasseur_app/models/member.py

from sqlalchemy import Index

from .base import BaseModel, db


class Member(BaseModel):
    """Alumni record carried over from the association's member spreadsheet.

    ``id`` is the only key used by the API; ``member_id`` is the spreadsheet's
    own identifier and is informational.
    """

    __tablename__ = "members"

    id = db.Column(db.Integer, primary_key=True)
    member_id = db.Column(db.Integer, nullable=True)
    status = db.Column(db.String(50), nullable=True)

    # Names
    first_name = db.Column(db.String(100), nullable=True)
    middle_initial = db.Column(db.String(255), nullable=True)
    school = db.Column(db.String(100), nullable=True)
    nickname1 = db.Column(db.String(100), nullable=True)
    nickname2 = db.Column(db.String(100), nullable=True)
    last_name = db.Column(db.String(100), nullable=True)
    married_name = db.Column(db.String(100), nullable=True)
    spouse_name = db.Column(db.String(100), nullable=True)
    member_type = db.Column(db.String(50), nullable=True)

    # Address and contact
    address1 = db.Column(db.String(255), nullable=True)
    address2 = db.Column(db.String(255), nullable=True)
    address3 = db.Column(db.String(255), nullable=True)
    city = db.Column(db.String(100), nullable=True)
    state = db.Column(db.String(50), nullable=True)
    zip_code = db.Column(db.String(20), nullable=True)
    country = db.Column(db.String(100), nullable=True)
    home_phone = db.Column(db.String(50), nullable=True)
    work_phone = db.Column(db.String(50), nullable=True)
    fax = db.Column(db.String(50), nullable=True)
    mailing_option = db.Column(db.String(255), nullable=True)
    email1 = db.Column(db.String(255), nullable=True)
    email2 = db.Column(db.String(255), nullable=True)

    # Sensitive identifiers, never serialized
    member_license = db.Column(db.String(50), nullable=True)
    spouse_license = db.Column(db.String(50), nullable=True)
    member_ssn = db.Column(db.String(50), nullable=True)
    spouse_ssn = db.Column(db.String(50), nullable=True)

    # Locating
    located_date = db.Column(db.Date, nullable=True)
    source = db.Column(db.String(255), nullable=True)
    location_cost = db.Column(db.String(50), nullable=True)

    # School history
    graduation_year = db.Column(db.String(20), nullable=True)
    ncb_graduate = db.Column(db.String(255), nullable=True)
    grades_attended = db.Column(db.String(100), nullable=True)
    dates_attended = db.Column(db.String(100), nullable=True)
    other_school1 = db.Column(db.String(255), nullable=True)
    dates_grades1 = db.Column(db.String(100), nullable=True)
    other_school2 = db.Column(db.String(255), nullable=True)
    dates_grades2 = db.Column(db.String(100), nullable=True)
    other_school3 = db.Column(db.String(255), nullable=True)
    dates_grades3 = db.Column(db.String(100), nullable=True)
    parent_father = db.Column(db.String(255), nullable=True)
    parent_mother = db.Column(db.String(255), nullable=True)
    parent_address = db.Column(db.String(255), nullable=True)

    # Correspondence
    sent_mra = db.Column(db.String(255), nullable=True)
    questionnaire_date = db.Column(db.Date, nullable=True)
    questionnaire_return = db.Column(db.String(255), nullable=True)
    date_returned = db.Column(db.Date, nullable=True)
    directory_requested = db.Column(db.String(255), nullable=True)
    amount_received = db.Column(db.String(50), nullable=True)
    directory_sent = db.Column(db.Date, nullable=True)

    # Biography
    member_bio = db.Column(db.Text, nullable=True)
    spouse_bio = db.Column(db.Text, nullable=True)
    new_bio = db.Column(db.String(255), nullable=True)
    comments = db.Column(db.Text, nullable=True)
    reunion_attended = db.Column(db.String(255), nullable=True)

    serialize_exclude = ("member_ssn", "spouse_ssn", "member_license", "spouse_license")

    __table_args__ = (Index("idx_member_name", "last_name", "first_name"),)

    def __repr__(self):
        return f"<Member {self.display_name}>"

    @property
    def display_name(self):
        parts = [self.first_name, self.middle_initial, self.last_name]
        name = " ".join(part.strip() for part in parts if part and part.strip())
        if self.married_name:
            name = f"{name} ({self.married_name.strip()})" if name else self.married_name.strip()
        return name or "Unnamed member"

    @property
    def location(self):
        return ", ".join(part for part in (self.city, self.state, self.country) if part)

    def to_dict(self):
        data = super().to_dict()
        data["display_name"] = self.display_name
        return data
