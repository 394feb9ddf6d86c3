"""
Dashboard routing for platform admins.

Picks the landing dashboard, title and theme color for a user from their RBAC
roles, the legacy ``role`` field and the per-module permission flags, and
answers permission checks across all assigned roles. Every function here is
total: unknown roles and missing permissions degrade to the general dashboard
or to ``False``.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from config import (
    ROUTE_DASHBOARD, ROUTE_FINANCE_DASHBOARD, ROUTE_AUDIT_DASHBOARD,
    ROUTE_SUPPORT_DASHBOARD, ROUTE_SALES_DASHBOARD, ROUTE_SUPPORT_TICKETS, ROUTE_AUDIT,
    TITLE_DEFAULT, TITLE_SUPER_ADMIN, TITLE_FINANCE, TITLE_AUDIT, TITLE_SUPPORT, TITLE_SALES,
    DEFAULT_ROLE_COLOR,
)
from models.rbac import LegacyRole, PlatformRole, User, UserRole

logger = logging.getLogger(__name__)

# Earlier entries win when a user holds several platform roles.
ROLE_PRIORITY: List[PlatformRole] = [
    PlatformRole.SUPER_ADMIN,
    PlatformRole.SALES,
    PlatformRole.FINANCE_ADMIN,
    PlatformRole.AUDITOR,
    PlatformRole.SUPPORT,
]

# Every slug/name spelling observed for each platform role. Matching is exact.
ROLE_IDENTIFIERS: Dict[PlatformRole, frozenset] = {
    PlatformRole.SUPER_ADMIN: frozenset({"super-admin", "super_admin", "Super Admin"}),
    PlatformRole.SALES: frozenset({"platform-sales", "Platform Sales"}),
    PlatformRole.FINANCE_ADMIN: frozenset({"platform-finance-admin", "Platform Finance Admin"}),
    PlatformRole.AUDITOR: frozenset({
        "platform-read-only-auditor", "Platform Read-Only Auditor", "Platform Auditor",
    }),
    PlatformRole.SUPPORT: frozenset({"platform-support", "Platform Support"}),
}

ROLE_ROUTES: Dict[PlatformRole, str] = {
    PlatformRole.SUPER_ADMIN: ROUTE_DASHBOARD,
    PlatformRole.SALES: ROUTE_SALES_DASHBOARD,
    PlatformRole.FINANCE_ADMIN: ROUTE_FINANCE_DASHBOARD,
    PlatformRole.AUDITOR: ROUTE_AUDIT_DASHBOARD,
    PlatformRole.SUPPORT: ROUTE_SUPPORT_DASHBOARD,
}

ROLE_TITLES: Dict[PlatformRole, str] = {
    PlatformRole.SUPER_ADMIN: TITLE_SUPER_ADMIN,
    PlatformRole.SALES: TITLE_SALES,
    PlatformRole.FINANCE_ADMIN: TITLE_FINANCE,
    PlatformRole.AUDITOR: TITLE_AUDIT,
    PlatformRole.SUPPORT: TITLE_SUPPORT,
}

LEGACY_ROUTES: Dict[str, str] = {
    LegacyRole.SUPERADMIN: ROUTE_DASHBOARD,
    LegacyRole.SUPPORT: ROUTE_SUPPORT_TICKETS,
    LegacyRole.AUDITOR: ROUTE_AUDIT,
}

LEGACY_TITLES: Dict[str, str] = {
    LegacyRole.SUPERADMIN: TITLE_SUPER_ADMIN,
    LegacyRole.SUPPORT: TITLE_SUPPORT,
}

# Legacy values that still override once the RBAC search comes up empty.
LEGACY_OVERRIDES = (LegacyRole.SUPERADMIN, LegacyRole.SUPPORT)

# (modules, route) in the order they are inspected; any module's ``view`` grants.
PERMISSION_ROUTES: List[Tuple[Tuple[str, ...], str]] = [
    (("audit_logs",), ROUTE_AUDIT_DASHBOARD),
    (("payments_revenue", "billing"), ROUTE_FINANCE_DASHBOARD),
    (("user_impersonation", "view_all_orders"), ROUTE_SUPPORT_DASHBOARD),
    (("leads",), ROUTE_SALES_DASHBOARD),
]


def canonical_role(role: UserRole) -> Optional[PlatformRole]:
    """Map a role record onto its platform tag, or None for custom roles."""
    for tag in ROLE_PRIORITY:
        identifiers = ROLE_IDENTIFIERS[tag]
        if role.slug in identifiers or role.name in identifiers:
            return tag
    return None


def find_priority_role(roles: Iterable[UserRole]) -> Tuple[Optional[UserRole], Optional[PlatformRole]]:
    """Return the highest-priority platform role held, regardless of list order."""
    tagged = [(role, canonical_role(role)) for role in roles]
    for tag in ROLE_PRIORITY:
        for role, role_tag in tagged:
            if role_tag is tag:
                return role, tag
    return None, None


def _granted(permissions: Dict[str, Any], module: str, action: str) -> bool:
    actions = permissions.get(module)
    return isinstance(actions, dict) and actions.get(action) is True


def route_by_permissions(role: UserRole) -> str:
    """Infer a dashboard for a custom role from its ``view`` flags."""
    for modules, route in PERMISSION_ROUTES:
        if any(_granted(role.permissions, module, "view") for module in modules):
            return route
    return ROUTE_DASHBOARD


def resolve_dashboard_route(user: User) -> str:
    logger.debug(
        f"Routing user {user.email}: legacy_role={user.role}, roles={len(user.roles)}, "
        f"first_role={user.roles[0].slug if user.roles else None}"
    )

    if not user.roles:
        route = LEGACY_ROUTES.get(user.role, ROUTE_DASHBOARD)
        logger.debug(f"No RBAC roles for {user.email}, legacy role {user.role!r} -> {route}")
        return route

    role, tag = find_priority_role(user.roles)
    if tag is not None:
        route = ROLE_ROUTES[tag]
        logger.debug(f"Priority role '{role.name}' ({tag.value}) -> {route}")
        return route

    if user.role in LEGACY_OVERRIDES:
        route = LEGACY_ROUTES[user.role]
        logger.debug(f"No priority role for {user.email}, legacy role {user.role!r} -> {route}")
        return route

    fallback = user.roles[0]
    route = route_by_permissions(fallback)
    logger.debug(f"Custom role '{fallback.name}' routed by permissions -> {route}")
    return route


def resolve_dashboard_title(user: User) -> str:
    if not user.roles:
        return LEGACY_TITLES.get(user.role, TITLE_DEFAULT)

    _, tag = find_priority_role(user.roles)
    if tag is not None:
        return ROLE_TITLES[tag]

    if user.role in LEGACY_OVERRIDES:
        return LEGACY_TITLES[user.role]

    # Custom roles are titled by name; permissions are not consulted here.
    return f"{user.roles[0].name} Dashboard"


def resolve_role_color(user: User) -> str:
    if not user.roles:
        return DEFAULT_ROLE_COLOR
    return user.roles[0].color or DEFAULT_ROLE_COLOR


def has_permission(user: User, module: str, action: str) -> bool:
    return any(_granted(role.permissions, module, action) for role in user.roles)


def get_user_permissions(user: User) -> Dict[str, Dict[str, bool]]:
    """Union of every role's permission map; only ``True`` flags are kept."""
    combined: Dict[str, Dict[str, bool]] = {}
    for role in user.roles:
        for module, actions in role.permissions.items():
            module_perms = combined.setdefault(module, {})
            if not isinstance(actions, dict):
                continue
            for action, value in actions.items():
                if value is True:
                    module_perms[action] = True
    return combined
