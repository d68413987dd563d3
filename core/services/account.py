from __future__ import annotations

import logging
from typing import Any

from django.db import IntegrityError, transaction

from ..authentication import Identity, resolve_identity
from ..exceptions import AuthenticationError, ValidationError
from ..models import User

logger = logging.getLogger(__name__)


class AccountService:
    """Sign-up and credential checks for the public auth endpoints."""

    def signup(self, data: dict[str, Any]) -> User:
        email = data["email"]
        if User.objects.filter(email=email).exists():
            raise ValidationError("Email already registered")

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email,
                    password=data["password"],
                    name=data["name"],
                    role=data["role"],
                    contact_number=data.get("contact_number") or None,
                )
        except IntegrityError:
            # Lost a race with a concurrent sign-up for the same address.
            raise ValidationError("Email already registered")

        logger.info("Registered %s account %s", user.role, user.email)
        return user

    def login(self, email: str, password: str) -> Identity:
        try:
            _, identity = resolve_identity(email, password)
        except AuthenticationError:
            raise AuthenticationError("Invalid email or password")
        logger.info("Login for %s", identity.email)
        return identity
