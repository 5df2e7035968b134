from datetime import date

import pytest

from nouasseur_app.forms import (
    DirectoryEntryForm,
    EventForm,
    LoginForm,
    MemberForm,
    RegistrationForm,
    bind_payload,
    clean_text,
)

pytestmark = pytest.mark.unit


def test_clean_text():
    assert clean_text("  Casablanca ") == "Casablanca"
    assert clean_text("   ") is None
    assert clean_text(None) is None
    assert clean_text(1985) == "1985"


class TestBindPayload:
    def test_create_keeps_required_fields_bound(self, app_ctx):
        form = bind_payload(EventForm, {"event_loc": "Hangar 3"})
        assert "event_name" in form
        assert "event_desc" not in form
        assert not form.validate_for_create()
        assert form.error_messages() == {"event_name": ["Event name is required."]}

    def test_partial_only_binds_supplied_fields(self, app_ctx):
        form = bind_payload(EventForm, {"event_loc": " Hangar 3 "}, partial=True)
        assert [field.name for field in form] == ["event_loc"]
        assert form.validate()
        assert form.cleaned_data() == {"event_loc": "Hangar 3"}

    def test_null_clears_value(self, app_ctx):
        form = bind_payload(MemberForm, {"city": None}, partial=True)
        assert form.validate()
        assert form.cleaned_data() == {"city": None}

    def test_numbers_and_dates_are_coerced(self, app_ctx):
        form = bind_payload(EventForm, {"event_name": "Gala", "event_sortcode": 7, "event_datebeg": "2030-01-02"})
        assert form.validate_for_create()
        data = form.cleaned_data()
        assert data["event_sortcode"] == 7
        assert data["event_datebeg"] == date(2030, 1, 2)

    def test_boolean_false_survives(self, app_ctx):
        form = bind_payload(DirectoryEntryForm, {"is_active": False}, partial=True)
        assert form.validate()
        assert form.cleaned_data() == {"is_active": False}


class TestMemberForm:
    def test_needs_a_name_on_create(self, app_ctx):
        form = bind_payload(MemberForm, {"city": "Rabat"})
        assert not form.validate_for_create()
        assert form.error_messages() == {"form": ["A first, last or married name is required."]}

    def test_married_name_alone_is_enough(self, app_ctx):
        form = bind_payload(MemberForm, {"married_name": "Benali"})
        assert form.validate_for_create()

    def test_long_value_is_rejected(self, app_ctx):
        form = bind_payload(MemberForm, {"first_name": "x" * 101}, partial=True)
        assert not form.validate()
        assert "first_name" in form.error_messages()


class TestUserForms:
    def test_registration_lowercases_email(self, app_ctx):
        form = bind_payload(
            RegistrationForm, {"username": "pilot", "email": "Pilot@Nouasseur.ORG", "password": "s3cretpw"}
        )
        assert form.validate()
        assert form.email.data == "pilot@nouasseur.org"

    def test_login_form_requires_both(self, app_ctx):
        form = bind_payload(LoginForm, {"username": "pilot"})
        assert not form.validate()
        assert "password" in form.error_messages()
