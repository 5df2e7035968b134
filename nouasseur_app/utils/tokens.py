# nouasseur_app/utils/tokens.py
"""
Signed, time-limited session tokens carried in the ``auth`` cookie.

Signing and expiry are delegated to itsdangerous, the same library Flask uses
for its own session cookie.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from itsdangerous import BadData, URLSafeTimedSerializer

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_MAX_AGE = 24 * 60 * 60
TOKEN_SALT = "nouasseur-auth-token"
IDENTITY_FIELDS = ("id", "username", "email")


class SessionTokenService:
    """Issue and verify identity tokens with a server-held secret."""

    def __init__(self, secret_key: str, *, max_age: int = DEFAULT_TOKEN_MAX_AGE, salt: str = TOKEN_SALT) -> None:
        if not secret_key:
            raise ValueError("SessionTokenService requires a non-empty secret key")
        self.max_age = max_age
        self._serializer = URLSafeTimedSerializer(secret_key, salt=salt)

    def issue(self, identity: Any) -> str:
        """Return a signed token embedding the identity's id, username and email.

        ``identity`` may be a mapping or any object exposing those attributes
        (a ``User`` row, for instance).
        """
        if isinstance(identity, Mapping):
            payload = {name: identity.get(name) for name in IDENTITY_FIELDS}
        else:
            payload = {name: getattr(identity, name, None) for name in IDENTITY_FIELDS}
        return self._serializer.dumps(payload)

    def verify(self, token: Any) -> dict[str, Any] | None:
        """Return the embedded identity, or None for any invalid token.

        Bad signatures, malformed payloads and expired tokens are all reported
        the same way as an absent token.
        """
        if not token or not isinstance(token, (str, bytes)):
            return None
        try:
            payload = self._serializer.loads(token, max_age=self.max_age)
        except BadData as exc:
            logger.debug("Rejected session token: %s", exc.__class__.__name__)
            return None

        if not isinstance(payload, dict):
            return None
        if not isinstance(payload.get("id"), int) or isinstance(payload.get("id"), bool):
            return None
        if not isinstance(payload.get("username"), str) or not isinstance(payload.get("email"), str):
            return None
        return {name: payload[name] for name in IDENTITY_FIELDS}
