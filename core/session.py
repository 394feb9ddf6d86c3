"""
Per-request admin session.

An ``AdminSession`` is built once from the authenticated user and handed to
every routing and permission call, so nothing downstream re-reads the token
or the user document.
"""
import logging
from typing import Optional

from pydantic import BaseModel

from core import dashboard_router
from core.role_modules import get_menu_items
from models.rbac import DashboardInfo, LegacyRole, User, UserType

logger = logging.getLogger(__name__)

# Compact permission strings ("rc") use one letter per action
SHORT_CODES = {"r": "view", "c": "create", "u": "update", "d": "delete", "e": "export"}

LEGACY_USER_TYPES = {
    LegacyRole.SUPERADMIN: UserType.SUPERADMIN,
    LegacyRole.SUPPORT: UserType.SUPPORT,
    LegacyRole.AUDITOR: UserType.AUDITOR,
    LegacyRole.FINANCE: UserType.FINANCE,
    LegacyRole.SALES_ADMIN: UserType.SALES,
}

USER_TYPE_ROLE_NAMES = {
    UserType.SUPERADMIN: "Super Admin",
    UserType.FINANCE: "Finance Admin",
    UserType.SUPPORT: "Support Agent",
    UserType.AUDITOR: "Platform Auditor",
}


def classify_user_type(user: User) -> str:
    """Portal user type, from the first RBAC role or else the legacy role."""
    if not user.roles:
        user_type = LEGACY_USER_TYPES.get(user.role, UserType.SUPERADMIN)
        logger.debug(f"Classified {user.email} as {user_type} via legacy role {user.role!r}")
        return user_type

    primary = user.roles[0]
    slug = primary.slug.lower().replace("-", "_")
    name = primary.name.lower()

    if "support" in slug or "support" in name:
        user_type = UserType.SUPPORT
    elif "auditor" in slug or "auditor" in name:
        user_type = UserType.AUDITOR
    elif "finance" in slug or "finance" in name:
        user_type = UserType.FINANCE
    else:
        # super_admin / superadmin / unrecognized roles all land here
        user_type = UserType.SUPERADMIN
    logger.debug(f"Classified {user.email} as {user_type} via role slug={slug!r} name={name!r}")
    return user_type


def primary_role_name(user: User, user_type: Optional[str]) -> str:
    if user.roles:
        return user.roles[0].name
    if user_type == UserType.SALES:
        return user.designation or "Sales Agent"
    return USER_TYPE_ROLE_NAMES.get(user_type, "User")


class AdminSession(BaseModel):
    user: User
    user_type: str
    token: Optional[str] = None

    def can(self, module: str, action: str = "view") -> bool:
        """Portal-level check against the user's own permission map.

        Superadmins pass everything. Sales users carry their permissions on the
        user record, either as action maps or as compact strings like "rc".
        """
        if self.user_type == UserType.SUPERADMIN or self.user.role == LegacyRole.SUPERADMIN:
            return True

        module_perms = self.user.permissions.get(module)
        if not module_perms:
            return False

        if isinstance(module_perms, str):
            code = next((c for c, name in SHORT_CODES.items() if name == action), None)
            return code is not None and code in module_perms

        if isinstance(module_perms, dict):
            short = "r" if action == "view" else action
            return module_perms.get(action) is True or module_perms.get(short) is True

        return module_perms is True

    def dashboard(self) -> DashboardInfo:
        return DashboardInfo(
            route=dashboard_router.resolve_dashboard_route(self.user),
            title=dashboard_router.resolve_dashboard_title(self.user),
            color=dashboard_router.resolve_role_color(self.user),
            user_type=self.user_type,
            role_name=primary_role_name(self.user, self.user_type),
            permissions=dashboard_router.get_user_permissions(self.user),
            menu=get_menu_items(self.user),
        )


def build_session(user: User, token: Optional[str] = None) -> AdminSession:
    return AdminSession(user=user, user_type=classify_user_type(user), token=token)
