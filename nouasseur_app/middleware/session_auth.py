# nouasseur_app/middleware/session_auth.py
"""
Cookie-token authentication wired into Flask-Login.

The identity for a request comes from the signed ``auth`` cookie alone; Flask's
own session is not used. API paths answer unauthenticated requests with a 401
envelope, page paths redirect to the login page with a ``redirectTo`` hint.
"""

from flask import current_app, jsonify, redirect, request, url_for
from flask_login import LoginManager, UserMixin

from nouasseur_app.utils.tokens import SessionTokenService

TOKEN_SERVICE_EXTENSION_KEY = "session_tokens"


class AuthenticatedIdentity(UserMixin):
    """Identity decoded from a verified session token"""

    def __init__(self, id, username, email):
        self.id = id
        self.username = username
        self.email = email

    def __repr__(self):
        return f"<AuthenticatedIdentity {self.username}>"

    def to_dict(self):
        return {"id": self.id, "username": self.username, "email": self.email}


def get_token_service(app=None):
    app = app or current_app
    return app.extensions[TOKEN_SERVICE_EXTENSION_KEY]


def is_api_path(path):
    return path == "/api" or path.startswith("/api/")


def set_auth_cookie(response, token, app=None):
    """Attach the session token cookie to ``response``"""
    app = app or current_app
    response.set_cookie(
        app.config.get("AUTH_COOKIE_NAME", "auth"),
        token,
        max_age=get_token_service(app).max_age,
        httponly=True,
        samesite="Lax",
        secure=bool(app.config.get("AUTH_COOKIE_SECURE", False)),
        path="/",
    )
    return response


def clear_auth_cookie(response, app=None):
    """Expire the session token cookie (Max-Age=0)"""
    app = app or current_app
    response.delete_cookie(
        app.config.get("AUTH_COOKIE_NAME", "auth"),
        path="/",
        httponly=True,
        samesite="Lax",
        secure=bool(app.config.get("AUTH_COOKIE_SECURE", False)),
    )
    return response


def _login_redirect_target():
    """Original path (with query string) to return to after login"""
    query = request.query_string.decode("utf-8", errors="ignore")
    return f"{request.path}?{query}" if query else request.path


def init_session_auth(app, token_service=None):
    """Register the token service and the Flask-Login loaders on ``app``"""
    if token_service is None:
        token_service = SessionTokenService(
            app.config["SECRET_KEY"],
            max_age=int(app.config.get("AUTH_TOKEN_MAX_AGE", 86400)),
        )
    app.extensions[TOKEN_SERVICE_EXTENSION_KEY] = token_service

    login_manager = LoginManager()
    login_manager.init_app(app)
    # Identity lives in the signed cookie, not in Flask's session
    login_manager.session_protection = None
    app.extensions["login_manager"] = login_manager

    @login_manager.request_loader
    def load_identity_from_cookie(req):
        token = req.cookies.get(current_app.config.get("AUTH_COOKIE_NAME", "auth"))
        if not token:
            return None
        payload = get_token_service().verify(token)
        if payload is None:
            current_app.logger.debug(f"Ignoring invalid session token on {req.path}")
            return None
        return AuthenticatedIdentity(**payload)

    @login_manager.unauthorized_handler
    def handle_unauthorized():
        if is_api_path(request.path):
            return jsonify({"success": False, "error": "Unauthorized"}), 401
        return redirect(url_for("login_page", redirectTo=_login_redirect_target()))

    return token_service
