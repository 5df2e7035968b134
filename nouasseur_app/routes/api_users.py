# nouasseur_app/routes/api_users.py
"""
User registration, login/logout and the user listing API
"""

from flask import current_app, jsonify, redirect, request, url_for
from flask_login import current_user, login_required
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from nouasseur_app.forms import LoginForm, RegistrationForm, bind_payload
from nouasseur_app.middleware.session_auth import clear_auth_cookie, get_token_service, set_auth_cookie
from nouasseur_app.models import User, db
from nouasseur_app.utils.responses import coerce_flag, failure, read_payload, safe_redirect_target, success

from .resources import get_record, store_failure

INVALID_CREDENTIALS = "Invalid username or password"
DUPLICATE_USER = "User with this email or username already exists"


def _redirect_options(payload):
    """Read serverRedirect/redirectUrl from the query string, then the body"""
    body = payload or {}
    server_redirect = coerce_flag(request.args.get("serverRedirect", body.get("serverRedirect")))
    redirect_url = safe_redirect_target(
        request.args.get("redirectUrl", body.get("redirectUrl")),
        default=current_app.config.get("AUTH_DEFAULT_REDIRECT", "/members"),
    )
    return server_redirect, redirect_url


def _login_failure(message, status, server_redirect, redirect_url):
    if server_redirect:
        return redirect(url_for("login_page", error=message, redirectTo=redirect_url))
    return failure(message, status)


def register_user_api_routes(app):
    """Register /api/users routes"""

    @app.route("/api/users/register", methods=["POST"])
    def api_users_register():
        payload = read_payload()
        if payload is None:
            return failure("Request body must be a JSON object", 400)

        form = bind_payload(RegistrationForm, payload)
        if not form.validate():
            return failure("Validation failed", 400, errors=form.error_messages())

        username = form.username.data
        email = form.email.data
        try:
            if User.find_by_username(username) or User.find_by_email(email):
                current_app.logger.warning(f"Registration rejected for duplicate username/email: {username}")
                return failure(DUPLICATE_USER, 409)

            user = User(username=username, email=email)
            user.set_password(form.password.data)
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            db.session.rollback()
            return failure(DUPLICATE_USER, 409)
        except SQLAlchemyError as e:
            return store_failure("create", "user", e)

        current_app.logger.info(f"User {user.username} registered")
        return success(user.to_dict(), 201)

    @app.route("/api/users/login", methods=["POST"])
    def api_users_login():
        """
        Verify credentials and set the auth cookie.

        ``username`` may hold either the username or the email address. With
        ``serverRedirect=true`` the response is a redirect to ``redirectUrl``
        instead of a JSON envelope.
        """
        payload = read_payload()
        server_redirect, redirect_url = _redirect_options(payload)
        if payload is None:
            return _login_failure("Request body must be a JSON object", 400, server_redirect, redirect_url)

        form = bind_payload(
            LoginForm,
            {
                "username": payload.get("username") or payload.get("email"),
                "password": payload.get("password"),
            },
        )
        if not form.validate():
            return _login_failure("Username and password are required", 400, server_redirect, redirect_url)

        try:
            user = User.find_by_login(form.username.data)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error during login: {str(e)}", exc_info=True)
            return _login_failure("Failed to login", 500, server_redirect, redirect_url)

        if user is None or not user.check_password(form.password.data):
            current_app.logger.warning(f"Failed login attempt for: {form.username.data}")
            return _login_failure(INVALID_CREDENTIALS, 401, server_redirect, redirect_url)

        token = get_token_service().issue(user)
        identity = {"id": user.id, "username": user.username, "email": user.email}
        if server_redirect:
            response = redirect(redirect_url)
        else:
            response = jsonify({"success": True, "data": identity, "redirectTo": redirect_url})

        current_app.logger.info(f"User {user.username} logged in")
        return set_auth_cookie(response, token)

    @app.route("/api/users/logout", methods=["GET", "POST"])
    def api_users_logout():
        if current_user.is_authenticated:
            current_app.logger.info(f"User {current_user.username} logged out")
        return clear_auth_cookie(redirect(url_for("login_page")))

    @app.route("/api/users/me", methods=["GET"])
    @login_required
    def api_users_me():
        return success(current_user.to_dict())

    @app.route("/api/users", methods=["GET"])
    @login_required
    def api_users_list():
        try:
            users = User.query.order_by(User.id).all()
        except SQLAlchemyError as e:
            return store_failure("fetch", "users", e)
        return success([user.to_dict() for user in users])

    @app.route("/api/users/<int:user_id>", methods=["GET"])
    @login_required
    def api_users_get(user_id):
        return get_record(User, user_id, "User")
