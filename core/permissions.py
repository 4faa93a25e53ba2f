# core/permissions.py
"""
Role-based access control.

Each endpoint declares the exact set of roles allowed to call it.  There
is no hierarchy: an editor is not a "lesser admin", every operation lists
its roles explicitly.  Public endpoints declare nothing and skip
authentication entirely.
"""
from rest_framework.permissions import BasePermission, AllowAny, IsAuthenticated

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLE_EDITOR = "editor"

OPERATORS = (ROLE_ADMIN, ROLE_EDITOR)
ADMINS = (ROLE_ADMIN,)


def is_allowed(role, allowed_roles) -> bool:
    """
    Pure policy check: a role passes iff it is a member of allowed_roles.
    An empty/absent requirement means the endpoint is public.
    """
    if not allowed_roles:
        return True
    return role in allowed_roles


class HasRole(BasePermission):
    """
    Grants access when the authenticated account's role is in allowed_roles.
    Anonymous requests are always denied.
    """
    allowed_roles = frozenset()
    message = "Access denied. Insufficient permissions."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return is_allowed(getattr(user, "role", None), self.allowed_roles)


def require_roles(*roles):
    """
    Permission class factory.

    Use in views via ``permission_classes = [IsAuthenticated, require_roles("admin", "editor")]``.
    """
    return type(
        "HasRole_" + "_".join(roles),
        (HasRole,),
        {"allowed_roles": frozenset(roles)},
    )


class RoleGatedMixin:
    """
    Per-method role requirements for views that mix public and guarded
    methods on the same route, e.g. GET /events/<id> (public) and
    PATCH /events/<id> (admin, editor).

        method_roles = {"PATCH": OPERATORS, "DELETE": ADMINS}

    Methods missing from the mapping are public.
    """
    method_roles = {}

    def _roles_for(self, method):
        return self.method_roles.get(method.upper())

    def get_authenticators(self):
        # self.request is the plain HttpRequest here (set by View.setup)
        if not self._roles_for(self.request.method):
            return []
        return super().get_authenticators()

    def get_permissions(self):
        roles = self._roles_for(self.request.method)
        if not roles:
            return [AllowAny()]
        return [IsAuthenticated(), require_roles(*roles)()]
