# nouasseur_app/routes/api_directories.py
"""
Directory entry JSON API, including the distinct category list
"""

from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from nouasseur_app.forms import DirectoryEntryForm
from nouasseur_app.models import DirectoryEntry
from nouasseur_app.services.listing import DIRECTORIES_PAGE_SIZE, list_directories, list_directory_categories
from nouasseur_app.utils.responses import success

from .resources import create_record, delete_record, get_record, list_records, store_failure, update_record


def register_directory_api_routes(app):
    """Register /api/directories routes"""

    @app.route("/api/directories", methods=["GET"])
    @login_required
    def api_directories_list():
        return list_records(list_directories, DIRECTORIES_PAGE_SIZE, "Directory entry")

    @app.route("/api/directories/categories", methods=["GET"])
    @login_required
    def api_directories_categories():
        try:
            categories = list_directory_categories()
        except SQLAlchemyError as e:
            return store_failure("fetch", "directory categories", e)
        return success(categories)

    @app.route("/api/directories/<int:entry_id>", methods=["GET"])
    @login_required
    def api_directories_get(entry_id):
        return get_record(DirectoryEntry, entry_id, "Directory entry")

    @app.route("/api/directories", methods=["POST"])
    @login_required
    def api_directories_create():
        return create_record(DirectoryEntry, DirectoryEntryForm, "Directory entry")

    @app.route("/api/directories/<int:entry_id>", methods=["PUT"])
    @login_required
    def api_directories_update(entry_id):
        return update_record(DirectoryEntry, DirectoryEntryForm, entry_id, "Directory entry")

    @app.route("/api/directories/<int:entry_id>", methods=["DELETE"])
    @login_required
    def api_directories_delete(entry_id):
        return delete_record(DirectoryEntry, entry_id, "Directory entry")
