"""
Dashboard routing tests for the platform admin portals.
Covers landing route, title, theme color and permission resolution across
legacy roles, priority RBAC roles and custom roles.
"""
import pytest

from models.rbac import PlatformRole, User, UserRole
from core.dashboard_router import (
    canonical_role, find_priority_role, route_by_permissions,
    resolve_dashboard_route, resolve_dashboard_title, resolve_role_color,
    has_permission, get_user_permissions,
)


def _role(slug, name, permissions=None, color=None):
    return UserRole(_id=f"role-{slug}", slug=slug, name=name, permissions=permissions or {}, color=color)


def _user(roles=None, legacy=None):
    return User(_id="u-1", name="Test", email="test@example.com", role=legacy, roles=roles or [])


SUPER_ADMIN = _role("super-admin", "Super Admin")
FINANCE = _role("platform-finance-admin", "Platform Finance Admin")
SUPPORT = _role("platform-support", "Platform Support")
SALES = _role("platform-sales", "Platform Sales")
AUDITOR = _role("platform-read-only-auditor", "Platform Read-Only Auditor")


# ═══════════════════════════════════════════════════════════════
# 1. LEGACY ROLE (NO RBAC ROLES)
# ═══════════════════════════════════════════════════════════════
class TestLegacyRole:

    def test_superadmin(self):
        user = _user(legacy="superadmin")
        assert resolve_dashboard_route(user) == "/dashboard"
        assert resolve_dashboard_title(user) == "Super Admin Dashboard"

    def test_support(self):
        user = _user(legacy="support")
        assert resolve_dashboard_route(user) == "/support-tickets"
        assert resolve_dashboard_title(user) == "Support Tickets Dashboard"

    def test_auditor(self):
        user = _user(legacy="auditor")
        assert resolve_dashboard_route(user) == "/audit"
        assert resolve_dashboard_title(user) == "Dashboard"

    @pytest.mark.parametrize("legacy", [None, "finance", "sales_admin", "SuperAdmin"])
    def test_unknown_or_absent_defaults(self, legacy):
        user = _user(legacy=legacy)
        assert resolve_dashboard_route(user) == "/dashboard"
        assert resolve_dashboard_title(user) == "Dashboard"

    def test_roles_none_treated_as_empty(self):
        user = User(name="x", email="x@example.com", role="support", roles=None)
        assert user.roles == []
        assert resolve_dashboard_route(user) == "/support-tickets"


# ═══════════════════════════════════════════════════════════════
# 2. PRIORITY RBAC ROLES
# ═══════════════════════════════════════════════════════════════
class TestPriorityRoles:

    @pytest.mark.parametrize("role,route,title", [
        (SUPER_ADMIN, "/dashboard", "Super Admin Dashboard"),
        (FINANCE, "/finance-dashboard", "Finance Dashboard"),
        (AUDITOR, "/audit-dashboard", "Audit Dashboard (Read-Only)"),
        (SUPPORT, "/support-dashboard", "Support Tickets Dashboard"),
        (SALES, "/sales-dashboard", "Sales Dashboard"),
    ])
    def test_route_and_title(self, role, route, title):
        user = _user([role])
        assert resolve_dashboard_route(user) == route
        assert resolve_dashboard_title(user) == title

    def test_finance_slug_wins_over_permissions(self):
        user = _user([_role("platform-finance-admin", "Platform Finance Admin", {})])
        assert resolve_dashboard_route(user) == "/finance-dashboard"

    def test_finance_slug_ignores_audit_permissions(self):
        role = _role("platform-finance-admin", "Platform Finance Admin", {"audit_logs": {"view": True}})
        assert resolve_dashboard_route(_user([role])) == "/finance-dashboard"

    @pytest.mark.parametrize("slug,name", [
        ("super_admin", "Root"),
        ("root", "Super Admin"),
        ("super-admin", "Owner"),
    ])
    def test_super_admin_spellings(self, slug, name):
        assert resolve_dashboard_route(_user([_role(slug, name)])) == "/dashboard"
        assert resolve_dashboard_title(_user([_role(slug, name)])) == "Super Admin Dashboard"

    def test_platform_auditor_name_only(self):
        user = _user([_role("auditor-v2", "Platform Auditor")])
        assert resolve_dashboard_route(user) == "/audit-dashboard"

    def test_matching_is_case_sensitive(self):
        user = _user([_role("Platform-Support", "platform support")])
        assert canonical_role(user.roles[0]) is None
        assert resolve_dashboard_route(user) == "/dashboard"

    @pytest.mark.parametrize("roles", [[SUPER_ADMIN, SUPPORT], [SUPPORT, SUPER_ADMIN]])
    def test_super_admin_beats_support_in_any_order(self, roles):
        user = _user(roles)
        assert resolve_dashboard_route(user) == "/dashboard"
        assert resolve_dashboard_title(user) == "Super Admin Dashboard"

    def test_sales_beats_finance(self):
        assert resolve_dashboard_route(_user([FINANCE, SALES])) == "/sales-dashboard"

    def test_finance_beats_auditor_and_support(self):
        user = _user([SUPPORT, AUDITOR, FINANCE])
        assert resolve_dashboard_route(user) == "/finance-dashboard"
        assert resolve_dashboard_title(user) == "Finance Dashboard"

    def test_auditor_beats_support(self):
        assert resolve_dashboard_route(_user([SUPPORT, AUDITOR])) == "/audit-dashboard"

    def test_rbac_role_overrides_legacy(self):
        assert resolve_dashboard_route(_user([FINANCE], legacy="support")) == "/finance-dashboard"

    def test_find_priority_role_returns_role_and_tag(self):
        role, tag = find_priority_role([SUPPORT, FINANCE])
        assert role is FINANCE
        assert tag is PlatformRole.FINANCE_ADMIN

    def test_find_priority_role_none(self):
        assert find_priority_role([_role("custom", "Custom")]) == (None, None)
        assert find_priority_role([]) == (None, None)


# ═══════════════════════════════════════════════════════════════
# 3. CUSTOM ROLES AND PERMISSION INFERENCE
# ═══════════════════════════════════════════════════════════════
class TestCustomRoles:

    def test_custom_role_route_uses_permissions_title_does_not(self):
        user = _user([_role("custom-role-x", "Custom Role X", {"audit_logs": {"view": True}})])
        assert resolve_dashboard_route(user) == "/audit-dashboard"
        assert resolve_dashboard_title(user) == "Custom Role X Dashboard"

    def test_unknown_role_falls_to_default(self):
        user = _user([_role("unknown-role", "Unknown", {})])
        assert resolve_dashboard_route(user) == "/dashboard"
        assert resolve_dashboard_title(user) == "Unknown Dashboard"

    def test_legacy_superadmin_overrides_custom_role(self):
        user = _user([_role("custom", "Custom", {"leads": {"view": True}})], legacy="superadmin")
        assert resolve_dashboard_route(user) == "/dashboard"
        assert resolve_dashboard_title(user) == "Super Admin Dashboard"

    def test_legacy_support_overrides_custom_role(self):
        user = _user([_role("custom", "Custom", {"audit_logs": {"view": True}})], legacy="support")
        assert resolve_dashboard_route(user) == "/support-tickets"
        assert resolve_dashboard_title(user) == "Support Tickets Dashboard"

    def test_legacy_auditor_does_not_override_custom_role(self):
        user = _user([_role("custom", "Custom", {"leads": {"view": True}})], legacy="auditor")
        assert resolve_dashboard_route(user) == "/sales-dashboard"
        assert resolve_dashboard_title(user) == "Custom Dashboard"

    def test_first_role_is_used_for_inference(self):
        first = _role("custom-a", "A", {"leads": {"view": True}})
        second = _role("custom-b", "B", {"audit_logs": {"view": True}})
        user = _user([first, second])
        assert resolve_dashboard_route(user) == "/sales-dashboard"
        assert resolve_dashboard_title(user) == "A Dashboard"

    @pytest.mark.parametrize("permissions,route", [
        ({"audit_logs": {"view": True}, "billing": {"view": True}}, "/audit-dashboard"),
        ({"payments_revenue": {"view": True}}, "/finance-dashboard"),
        ({"billing": {"view": True}, "leads": {"view": True}}, "/finance-dashboard"),
        ({"user_impersonation": {"view": True}}, "/support-dashboard"),
        ({"view_all_orders": {"view": True}, "leads": {"view": True}}, "/support-dashboard"),
        ({"leads": {"view": True}}, "/sales-dashboard"),
        ({"leads": {"create": True}}, "/dashboard"),
        ({"audit_logs": {"view": False}}, "/dashboard"),
        ({}, "/dashboard"),
    ])
    def test_route_by_permissions(self, permissions, route):
        assert route_by_permissions(_role("custom", "Custom", permissions)) == route

    def test_only_literal_true_grants(self):
        role = _role("custom", "Custom", {"audit_logs": {"view": "yes"}, "leads": {"view": 1}})
        assert route_by_permissions(role) == "/dashboard"

    def test_malformed_permission_entries_are_ignored(self):
        role = _role("custom", "Custom", {"audit_logs": "r", "leads": None})
        assert route_by_permissions(role) == "/dashboard"


# ═══════════════════════════════════════════════════════════════
# 4. ROLE COLOR
# ═══════════════════════════════════════════════════════════════
class TestRoleColor:

    def test_default_without_roles(self):
        assert resolve_role_color(_user()) == "#6366f1"

    def test_first_role_color_not_priority(self):
        user = _user([_role("custom", "Custom", color="#10b981"), _role("super-admin", "Super Admin", color="#ef4444")])
        assert resolve_role_color(user) == "#10b981"

    def test_first_role_without_color(self):
        assert resolve_role_color(_user([_role("custom", "Custom")])) == "#6366f1"


# ═══════════════════════════════════════════════════════════════
# 5. PERMISSION CHECKS
# ═══════════════════════════════════════════════════════════════
class TestPermissions:

    @pytest.fixture
    def two_role_user(self):
        return _user([
            _role("a", "A", {"orders": {"view": True}}),
            _role("b", "B", {"orders": {"view": False}, "billing": {"view": True}}),
        ])

    def test_has_permission_or_across_roles(self, two_role_user):
        assert has_permission(two_role_user, "orders", "view") is True
        assert has_permission(two_role_user, "billing", "view") is True

    def test_has_permission_absent(self, two_role_user):
        assert has_permission(two_role_user, "orders", "delete") is False
        assert has_permission(two_role_user, "leads", "view") is False

    def test_has_permission_no_roles(self):
        assert has_permission(_user(legacy="superadmin"), "orders", "view") is False

    def test_get_user_permissions_union(self, two_role_user):
        assert get_user_permissions(two_role_user) == {"orders": {"view": True}, "billing": {"view": True}}

    def test_get_user_permissions_never_downgrades(self):
        user = _user([
            _role("a", "A", {"leads": {"view": True, "export": False}}),
            _role("b", "B", {"leads": {"view": False, "export": True}}),
        ])
        assert get_user_permissions(user) == {"leads": {"view": True, "export": True}}

    def test_get_user_permissions_no_roles(self):
        assert get_user_permissions(_user()) == {}

    def test_get_user_permissions_drops_false_flags(self):
        user = _user([_role("a", "A", {"refunds": {"view": False}})])
        assert get_user_permissions(user) == {"refunds": {}}
