# nouasseur_app/routes/api_members.py
"""
Member JSON API; every endpoint requires an authenticated session
"""

from flask_login import login_required

from nouasseur_app.forms import MemberForm
from nouasseur_app.models import Member
from nouasseur_app.services.listing import MEMBERS_PAGE_SIZE, list_members

from .resources import create_record, delete_record, get_record, list_records, update_record


def register_member_api_routes(app):
    """Register /api/members routes"""

    @app.route("/api/members", methods=["GET"])
    @login_required
    def api_members_list():
        return list_records(list_members, MEMBERS_PAGE_SIZE, "Member")

    @app.route("/api/members/<int:member_id>", methods=["GET"])
    @login_required
    def api_members_get(member_id):
        return get_record(Member, member_id, "Member")

    @app.route("/api/members", methods=["POST"])
    @login_required
    def api_members_create():
        return create_record(Member, MemberForm, "Member")

    @app.route("/api/members/<int:member_id>", methods=["PUT"])
    @login_required
    def api_members_update(member_id):
        return update_record(Member, MemberForm, member_id, "Member")

    @app.route("/api/members/<int:member_id>", methods=["DELETE"])
    @login_required
    def api_members_delete(member_id):
        return delete_record(Member, member_id, "Member")
