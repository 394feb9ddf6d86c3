from typing import Dict, List, Optional

from config import MODULES, MODULE_LABELS
from models.rbac import MenuItem, ModuleDefinition, User

DEFAULT_ROLE_SLUG = "super-admin"

# Which RBAC modules are relevant when editing each platform role
ROLE_MODULE_MAPPING: Dict[str, List[str]] = {
    "super-admin": [
        "platform_settings", "tenant_crud", "tenant_suspend", "subscription_plans",
        "payments_revenue", "refunds", "marketplace_control", "platform_coupons",
        "rule_engine_global", "view_all_orders", "audit_logs", "leads",
        "user_impersonation",
    ],
    "platform-sales": ["leads", "subscription_plans", "payments_revenue"],
    "platform-sales-junior": ["leads", "subscription_plans"],
    "platform-sales-senior": [
        "leads", "subscription_plans", "payments_revenue", "audit_logs", "tenant_crud",
    ],
    "platform-finance-admin": [
        "payments_revenue", "refunds", "subscription_plans", "view_all_orders",
        "audit_logs", "leads",
    ],
    "platform-support": [
        "tenant_crud", "view_all_orders", "audit_logs", "leads",
        "user_impersonation", "marketplace_control",
    ],
    "platform-auditor": ["payments_revenue", "view_all_orders", "audit_logs", "leads"],
}


def _menu(*items) -> List[MenuItem]:
    return [MenuItem(name=name, path=path, icon=icon) for name, path, icon in items]


ROLE_MENUS: Dict[str, List[MenuItem]] = {
    "super-admin": _menu(
        ("Dashboard", "/dashboard", "LayoutDashboard"),
        ("Tenants", "/tenants", "Building2"),
        ("Users", "/users", "Users"),
        ("RBAC", "/rbac", "Shield"),
        ("Analytics", "/analytics", "BarChart3"),
        ("Settings", "/settings", "Settings"),
    ),
    "platform-support": _menu(
        ("Support Tickets", "/support-tickets", "MessageSquare"),
        ("My Tickets", "/support-tickets?filter=assigned", "User"),
        ("Escalated", "/support-tickets?filter=escalated", "ArrowUpRight"),
        ("Reports", "/support-tickets/reports", "FileText"),
        ("Knowledge Base", "/support-tickets/kb", "BookOpen"),
    ),
    "platform-finance-admin": _menu(
        ("Dashboard", "/dashboard/finance", "LayoutDashboard"),
        ("Payments", "/finance/payments", "CreditCard"),
        ("Refunds", "/finance/refunds", "RefreshCw"),
        ("Reports", "/finance/reports", "FileBarChart"),
        ("Billing", "/finance/billing", "Receipt"),
    ),
    "platform-read-only-auditor": _menu(
        ("Audit Dashboard", "/audit", "Shield"),
        ("Audit Logs", "/audit/logs", "FileText"),
        ("Security Monitoring", "/audit/security", "AlertTriangle"),
        ("Financial Integrity", "/audit/financial", "DollarSign"),
        ("Cross-Tenant View", "/audit/tenants", "Building2"),
        ("Compliance Reports", "/audit/compliance", "FileBarChart"),
        ("Export Data", "/audit/export", "Download"),
    ),
}


def get_modules_for_role(role_slug: str) -> List[str]:
    return list(ROLE_MODULE_MAPPING.get(role_slug, ROLE_MODULE_MAPPING[DEFAULT_ROLE_SLUG]))


def is_module_relevant_for_role(module: str, role_slug: str) -> bool:
    return module in get_modules_for_role(role_slug)


def get_module_label(module_id: str) -> str:
    return MODULE_LABELS.get(module_id, module_id)


def get_module_definition(module_id: str) -> Optional[ModuleDefinition]:
    """Catalog entry for a labelled module, None for unknown or unlabelled ids."""
    if module_id not in MODULE_LABELS:
        return None
    return ModuleDefinition(id=module_id, label=MODULE_LABELS[module_id])


def get_module_catalog() -> List[ModuleDefinition]:
    return [ModuleDefinition(id=module_id, label=get_module_label(module_id)) for module_id in MODULES]


def get_menu_items(user: User) -> List[MenuItem]:
    """Menu for the user's first role; unknown slugs get the super-admin menu."""
    if not user.roles:
        return list(ROLE_MENUS[DEFAULT_ROLE_SLUG])
    return list(ROLE_MENUS.get(user.roles[0].slug, ROLE_MENUS[DEFAULT_ROLE_SLUG]))
