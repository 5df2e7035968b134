# nouasseur_app/routes/resources.py
"""
Shared request handling for the list/get/create/update/delete JSON endpoints.

Every helper returns a ``(response, status)`` pair built with the envelope
helpers in ``nouasseur_app.utils.responses``. Store failures are rolled back,
logged with the traceback and reported with a generic message.
"""

from flask import current_app, request
from sqlalchemy.exc import SQLAlchemyError

from nouasseur_app.forms import bind_payload
from nouasseur_app.models import db
from nouasseur_app.services.listing import PageRequest
from nouasseur_app.utils.responses import failure, not_found, read_payload, success


def store_failure(action, label, error=None):
    """Roll back, log and answer 500 without leaking the store's message"""
    db.session.rollback()
    if error is not None:
        current_app.logger.error(f"Error trying to {action} {label.lower()}: {str(error)}", exc_info=True)
    return failure(f"Failed to {action} {label.lower()}", 500)


def page_request_from_args(default_page_size):
    return PageRequest.from_args(
        request.args,
        default_page_size=default_page_size,
        max_page_size=int(current_app.config.get("LISTING_MAX_PAGE_SIZE", 100)),
    )


def list_records(list_fn, default_page_size, label):
    """Run ``list_fn`` for the request's page/search/category arguments"""
    try:
        result = list_fn(page_request_from_args(default_page_size))
    except SQLAlchemyError as e:
        return store_failure("fetch", label, e)
    return success([row.to_dict() for row in result.rows], pagination=result.pagination())


def get_record(model, record_id, label):
    try:
        record = model.find_by_id(record_id)
    except SQLAlchemyError as e:
        return store_failure("fetch", label, e)
    if record is None:
        return not_found(label)
    return success(record.to_dict())


def _bound_form(form_class, record=None):
    """Return (form, error_response); exactly one of them is None.

    With a stored ``record`` the payload is a partial update checked against it.
    """
    payload = read_payload()
    if payload is None:
        return None, failure("Request body must be a JSON object", 400)
    if record is None:
        form = bind_payload(form_class, payload)
        valid = form.validate_for_create()
    else:
        form = bind_payload(form_class, payload, partial=True)
        valid = form.validate_for_update(record)
    if not valid:
        return None, failure("Validation failed", 400, errors=form.error_messages())
    return form, None


def create_record(model, form_class, label, stamp=None):
    """Validate the payload and insert a new row.

    ``stamp`` is an optional callable returning server-side values merged over
    the validated fields (audit columns, for instance).
    """
    form, error_response = _bound_form(form_class)
    if error_response is not None:
        return error_response

    values = form.cleaned_data()
    if stamp is not None:
        values.update(stamp())

    record, error = model.safe_create(**values)
    if error:
        return store_failure("create", label)

    current_app.logger.info(f"{label} {record.id} created")
    return success(record.to_dict(), 201)


def update_record(model, form_class, record_id, label, stamp=None):
    """Merge the fields present in the payload into an existing row"""
    try:
        record = model.find_by_id(record_id)
    except SQLAlchemyError as e:
        return store_failure("update", label, e)
    if record is None:
        return not_found(label)

    form, error_response = _bound_form(form_class, record)
    if error_response is not None:
        return error_response

    values = form.cleaned_data()
    if stamp is not None:
        values.update(stamp())

    updated, error = record.safe_update(**values)
    if not updated:
        return store_failure("update", label)

    current_app.logger.info(f"{label} {record.id} updated ({', '.join(sorted(values)) or 'no fields'})")
    return success(record.to_dict())


def delete_record(model, record_id, label):
    try:
        record = model.find_by_id(record_id)
    except SQLAlchemyError as e:
        return store_failure("delete", label, e)
    if record is None:
        return not_found(label)

    deleted, error = record.safe_delete()
    if not deleted:
        return store_failure("delete", label)

    current_app.logger.info(f"{label} {record_id} deleted")
    return success(message=f"{label} deleted successfully")
