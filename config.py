from pathlib import Path
from dotenv import load_dotenv
import os

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

# JWT Config
JWT_SECRET = os.environ.get('JWT_SECRET', 'platform_admin_secret_key')
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = 24

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

# RBAC Constants
MODULES = [
    "platform_settings", "tenant_crud", "tenant_suspend", "subscription_plans",
    "payments_revenue", "billing", "refunds", "marketplace_control",
    "platform_coupons", "rule_engine_global", "view_all_orders", "audit_logs",
    "leads", "user_impersonation"
]
PERMISSION_TYPES = ["view", "create", "update", "delete", "export"]

# Display labels for the RBAC editor; modules without one are shown by id
MODULE_LABELS = {
    "platform_settings": "Platform Settings",
    "tenant_crud": "Tenant Management",
    "subscription_plans": "Subscription Plans",
    "payments_revenue": "Payments & Revenue",
    "refunds": "Refunds",
    "marketplace_control": "Marketplace Control",
    "platform_coupons": "Platform Coupons",
    "rule_engine_global": "Global Rule Engine",
    "view_all_orders": "View All Orders",
    "audit_logs": "Audit Logs",
    "leads": "Platform Leads",
    "user_impersonation": "User Impersonation",
}

# Dashboard routes
ROUTE_DASHBOARD = "/dashboard"
ROUTE_FINANCE_DASHBOARD = "/finance-dashboard"
ROUTE_AUDIT_DASHBOARD = "/audit-dashboard"
ROUTE_SUPPORT_DASHBOARD = "/support-dashboard"
ROUTE_SALES_DASHBOARD = "/sales-dashboard"
# Legacy portals
ROUTE_SUPPORT_TICKETS = "/support-tickets"
ROUTE_AUDIT = "/audit"

# Dashboard titles
TITLE_DEFAULT = "Dashboard"
TITLE_SUPER_ADMIN = "Super Admin Dashboard"
TITLE_FINANCE = "Finance Dashboard"
TITLE_AUDIT = "Audit Dashboard (Read-Only)"
TITLE_SUPPORT = "Support Tickets Dashboard"
TITLE_SALES = "Sales Dashboard"

DEFAULT_ROLE_COLOR = "#6366f1"
