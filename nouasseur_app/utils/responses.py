# nouasseur_app/utils/responses.py
"""
JSON envelope helpers for the API routes.
"""

from urllib.parse import urlsplit

from flask import jsonify, request


def success(data=None, status=200, **extra):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status


def failure(error, status=400, **extra):
    body = {"success": False, "error": error}
    body.update(extra)
    return jsonify(body), status


def not_found(label):
    return failure(f"{label} not found", 404)


def read_payload():
    """Return the request body as a dict, or None when it is not a JSON object.

    JSON bodies and form posts are both accepted.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else None
    return request.form.to_dict()


def coerce_flag(value):
    """Interpret query/form style booleans ('true', '1', 'yes', 'on')"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def safe_redirect_target(target, default="/"):
    """Only allow local absolute paths as redirect targets"""
    if not target or not isinstance(target, str):
        return default
    target = target.strip()
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return default
    if not target.startswith("/") or target.startswith("//") or "\\" in target:
        return default
    return target
