# nouasseur_app/forms/base.py
"""
Shared helpers for validating JSON payloads with Flask-WTF forms
"""

from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import StringField
from wtforms.validators import Length, Optional


def clean_text(value):
    """Strip strings, turning blanks into None"""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def text_field(label, max_length=None, **kwargs):
    """Optional free-text field with the standard clean-up filter"""
    validators = [Optional()]
    if max_length:
        validators.append(
            Length(max=max_length, message=f"{label} must be {max_length} characters or less.")
        )
    return StringField(label, validators=validators, filters=[clean_text], **kwargs)


class PayloadForm(FlaskForm):
    """Base form for API payloads; JSON clients cannot carry CSRF tokens"""

    class Meta:
        csrf = False

    def validate_for_create(self):
        return self.validate()

    def validate_for_update(self, record):
        """Validate a partial payload against the stored ``record``"""
        return self.validate()

    def error_messages(self):
        """Field errors keyed by field name; form-level errors under 'form'"""
        messages = {name: list(field.errors) for name, field in self._fields.items() if field.errors}
        if self.form_errors:
            messages["form"] = list(self.form_errors)
        return messages

    def cleaned_data(self):
        return {field.name: field.data for field in self}


def _formdata_value(value):
    if value is None:
        return ""
    if isinstance(value, (bool, str)):
        return value
    return str(value)


def bind_payload(form_class, payload, partial=False):
    """
    Bind a decoded JSON object to ``form_class``.

    Only keys present in the payload are kept on the form, so partial updates
    merge the supplied fields and nothing else. On create (``partial=False``)
    required fields stay bound even when absent so that their validators fire.
    JSON nulls clear a field.
    """
    formdata = MultiDict({key: _formdata_value(value) for key, value in payload.items()})
    form = form_class(formdata=formdata)
    for field in list(form):
        if field.name in payload:
            continue
        if not partial and field.flags.required:
            continue
        del form[field.name]
    return form
