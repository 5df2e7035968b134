# nouasseur_app/routes/pages.py
"""
Server-rendered HTML pages
"""

from datetime import date

from flask import current_app, redirect, render_template, request
from flask_login import current_user, login_required
from sqlalchemy.exc import SQLAlchemyError

from nouasseur_app.models import db
from nouasseur_app.services.listing import (
    DIRECTORIES_PAGE_SIZE,
    EVENTS_PAGE_SIZE,
    list_directories,
    list_directory_categories,
    list_events,
    list_members,
    upcoming_events,
)
from nouasseur_app.utils.responses import safe_redirect_target

from .resources import page_request_from_args

# The members page shows smaller pages than the API default
MEMBERS_PAGE_PAGE_SIZE = 20


def render_error_page(error, page_name):
    """Roll back and render the 500 page; the exception text is shown only in debug mode"""
    db.session.rollback()
    current_app.logger.error(f"Error rendering {page_name} page: {str(error)}", exc_info=True)
    detail = str(error) if current_app.debug else None
    return render_template("errors/500.html", detail=detail), 500


def register_page_routes(app):
    """Register HTML page routes"""

    @app.route("/")
    def index():
        """Home page with the next few events"""
        today = date.today()
        try:
            events = upcoming_events(current_app.config.get("HOME_UPCOMING_EVENTS_LIMIT", 8), today=today)
        except SQLAlchemyError as e:
            return render_error_page(e, "home")
        return render_template("index.html", events=events, today=today)

    @app.route("/events")
    def events_page():
        today = date.today()
        page_request = page_request_from_args(EVENTS_PAGE_SIZE)
        try:
            result = list_events(page_request, today=today)
        except SQLAlchemyError as e:
            return render_error_page(e, "events")
        return render_template("events/list.html", result=result, page_request=page_request, today=today)

    @app.route("/members")
    @login_required
    def members_page():
        page_request = page_request_from_args(MEMBERS_PAGE_PAGE_SIZE)
        try:
            result = list_members(page_request)
        except SQLAlchemyError as e:
            return render_error_page(e, "members")
        return render_template("members/list.html", result=result, page_request=page_request)

    @app.route("/directory")
    @login_required
    def directory_page():
        page_request = page_request_from_args(DIRECTORIES_PAGE_SIZE)
        try:
            result = list_directories(page_request)
            categories = list_directory_categories()
        except SQLAlchemyError as e:
            return render_error_page(e, "directory")
        return render_template(
            "directory/list.html",
            result=result,
            categories=categories,
            page_request=page_request,
        )

    @app.route("/login")
    def login_page():
        """Login form; signed-in visitors go straight to their destination"""
        redirect_to = safe_redirect_target(
            request.args.get("redirectTo"),
            default=current_app.config.get("AUTH_DEFAULT_REDIRECT", "/members"),
        )
        if current_user.is_authenticated:
            return redirect(redirect_to)
        return render_template("auth/login.html", error=request.args.get("error"), redirect_to=redirect_to)
