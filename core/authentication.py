"""
Credential authentication for the HostelGo API.

There are no sessions or tokens: every protected request re-sends the
account's email and password, and the identity is derived afresh each time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from rest_framework.authentication import BaseAuthentication

from .exceptions import AuthenticationError
from .models import User

logger = logging.getLogger(__name__)

EMAIL_HEADER = "HTTP_X_USER_EMAIL"
PASSWORD_HEADER = "HTTP_X_USER_PASSWORD"


@dataclass(frozen=True)
class Identity:
    """Who is acting on this request. Password is deliberately absent."""

    id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(id=user.pk, name=user.name or "", email=user.email, role=user.role)

    @property
    def is_student(self) -> bool:
        return self.role == User.ROLE_STUDENT

    @property
    def is_owner(self) -> bool:
        return self.role == User.ROLE_OWNER

    @property
    def is_admin(self) -> bool:
        return self.role == User.ROLE_ADMIN

    def as_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role}


def extract_credentials(request) -> Tuple[Optional[str], Optional[str]]:
    """
    Pull ``(email, password)`` off a DRF request.

    Each value is taken from the first source that provides it, in order:
    the ``X-User-Email``/``X-User-Password`` headers, the query string,
    then the request body.
    """
    email = request.META.get(EMAIL_HEADER) or None
    password = request.META.get(PASSWORD_HEADER) or None

    if not email or not password:
        email = email or request.query_params.get("email") or None
        password = password or request.query_params.get("password") or None

    if not email or not password:
        data = request.data if hasattr(request.data, "get") else {}
        email = email or data.get("email") or None
        password = password or data.get("password") or None

    return email, password


def resolve_identity(email: str, password: str) -> Tuple[User, Identity]:
    """Look up the account for ``email`` and check ``password`` against it."""
    user = User.objects.filter(email=email).first()
    # MySQL collations compare case-insensitively.
    if user is None or user.email != email or not user.is_active or not user.check_password(password):
        logger.warning("Rejected credentials for %s", email)
        raise AuthenticationError("Invalid credentials")
    return user, Identity.from_user(user)


class CredentialAuthentication(BaseAuthentication):
    """
    Authenticate each request from its re-sent email and password.

    Returns ``None`` when credentials are absent so that the permission layer
    reports "Authentication required"; raises when they are present but wrong.
    On success ``request.user`` is the account and ``request.auth`` is its
    :class:`Identity`.
    """

    def authenticate(self, request):
        email, password = extract_credentials(request)
        if not email or not password:
            logger.debug("No credentials supplied for %s %s", request.method, request.path)
            return None

        user, identity = resolve_identity(email, password)
        logger.debug("Authenticated %s as %s", identity.email, identity.role)
        return (user, identity)

    def authenticate_header(self, request):
        return 'Credentials realm="api"'
