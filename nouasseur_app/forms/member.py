# nouasseur_app/forms/member.py
"""
Payload schema for member create/update requests
"""

from wtforms import DateField, IntegerField
from wtforms.validators import Optional

from .base import PayloadForm, text_field


class MemberForm(PayloadForm):
    """Fields accepted by POST/PUT /api/members.

    Every field is optional, but a member needs at least one name part.
    """

    member_id = IntegerField("Member ID", validators=[Optional()])
    status = text_field("Status", 50)
    first_name = text_field("First name", 100)
    middle_initial = text_field("Middle initial", 255)
    school = text_field("School", 100)
    nickname1 = text_field("Nickname", 100)
    nickname2 = text_field("Second nickname", 100)
    last_name = text_field("Last name", 100)
    married_name = text_field("Married name", 100)
    spouse_name = text_field("Spouse name", 100)
    member_type = text_field("Member type", 50)
    address1 = text_field("Address line 1", 255)
    address2 = text_field("Address line 2", 255)
    address3 = text_field("Address line 3", 255)
    city = text_field("City", 100)
    state = text_field("State", 50)
    zip_code = text_field("ZIP code", 20)
    country = text_field("Country", 100)
    home_phone = text_field("Home phone", 50)
    work_phone = text_field("Work phone", 50)
    fax = text_field("Fax", 50)
    mailing_option = text_field("Mailing option", 255)
    email1 = text_field("Email", 255)
    email2 = text_field("Second email", 255)
    member_license = text_field("Member license", 50)
    spouse_license = text_field("Spouse license", 50)
    member_ssn = text_field("Member SSN", 50)
    spouse_ssn = text_field("Spouse SSN", 50)
    located_date = DateField("Located date", validators=[Optional()], format="%Y-%m-%d")
    source = text_field("Source", 255)
    location_cost = text_field("Location cost", 50)
    graduation_year = text_field("Graduation year", 20)
    ncb_graduate = text_field("NCB graduate", 255)
    grades_attended = text_field("Grades attended", 100)
    dates_attended = text_field("Dates attended", 100)
    other_school1 = text_field("Other school 1", 255)
    dates_grades1 = text_field("Dates/grades 1", 100)
    other_school2 = text_field("Other school 2", 255)
    dates_grades2 = text_field("Dates/grades 2", 100)
    other_school3 = text_field("Other school 3", 255)
    dates_grades3 = text_field("Dates/grades 3", 100)
    parent_father = text_field("Father", 255)
    parent_mother = text_field("Mother", 255)
    parent_address = text_field("Parent address", 255)
    sent_mra = text_field("Sent MRA", 255)
    questionnaire_date = DateField("Questionnaire date", validators=[Optional()], format="%Y-%m-%d")
    questionnaire_return = text_field("Questionnaire return", 255)
    date_returned = DateField("Date returned", validators=[Optional()], format="%Y-%m-%d")
    directory_requested = text_field("Directory requested", 255)
    amount_received = text_field("Amount received", 50)
    directory_sent = DateField("Directory sent", validators=[Optional()], format="%Y-%m-%d")
    member_bio = text_field("Member biography")
    spouse_bio = text_field("Spouse biography")
    new_bio = text_field("New biography", 255)
    comments = text_field("Comments")
    reunion_attended = text_field("Reunion attended", 255)

    NAME_FIELDS = ("first_name", "last_name", "married_name")

    def validate_for_create(self):
        """Field validators plus: at least one of first, last or married name"""
        valid = self.validate()
        if not any(self._fields.get(name) is not None and self._fields[name].data for name in self.NAME_FIELDS):
            self.form_errors.append("A first, last or married name is required.")
            valid = False
        return valid
