# nouasseur_app/routes/api_events.py
"""
Event JSON API. Reads are public; writes need a session and record who made them.
"""

from flask_login import current_user, login_required

from nouasseur_app.forms import EventForm
from nouasseur_app.models import Event, utcnow
from nouasseur_app.services.listing import EVENTS_PAGE_SIZE, list_events

from .resources import create_record, delete_record, get_record, list_records, update_record


def _modification_stamp():
    return {"event_moduser": current_user.username, "event_moddate": utcnow()}


def register_event_api_routes(app):
    """Register /api/events routes"""

    @app.route("/api/events", methods=["GET"])
    def api_events_list():
        return list_records(list_events, EVENTS_PAGE_SIZE, "Event")

    @app.route("/api/events/<int:event_id>", methods=["GET"])
    def api_events_get(event_id):
        return get_record(Event, event_id, "Event")

    @app.route("/api/events", methods=["POST"])
    @login_required
    def api_events_create():
        return create_record(Event, EventForm, "Event", stamp=_modification_stamp)

    @app.route("/api/events/<int:event_id>", methods=["PUT"])
    @login_required
    def api_events_update(event_id):
        return update_record(Event, EventForm, event_id, "Event", stamp=_modification_stamp)

    @app.route("/api/events/<int:event_id>", methods=["DELETE"])
    @login_required
    def api_events_delete(event_id):
        return delete_record(Event, event_id, "Event")
