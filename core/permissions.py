from rest_framework.permissions import BasePermission

from .models import User


class RolePermission(BasePermission):
    """Allow only authenticated callers whose role is in ``allowed_roles``."""

    allowed_roles: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        return f"Access denied. Required role: {' or '.join(self.allowed_roles)}"

    def has_permission(self, request, view):
        identity = getattr(request, "auth", None)
        if identity is None:
            return False
        return identity.role in self.allowed_roles


class IsStudent(RolePermission):
    allowed_roles = (User.ROLE_STUDENT,)


class IsOwner(RolePermission):
    allowed_roles = (User.ROLE_OWNER,)


class IsAdmin(RolePermission):
    allowed_roles = (User.ROLE_ADMIN,)
