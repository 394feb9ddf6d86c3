import logging
from typing import Dict, List

from core.dashboard_router import get_user_permissions, has_permission
from core.role_modules import get_menu_items
from core.session import AdminSession
from models.rbac import DashboardInfo, MenuItem, PermissionCheck

logger = logging.getLogger(__name__)


async def get_dashboard(session: AdminSession) -> DashboardInfo:
    info = session.dashboard()
    logger.info(f"Dashboard for {session.user.email} ({session.user_type}) -> {info.route}")
    return info


async def get_permissions(session: AdminSession) -> Dict[str, Dict[str, bool]]:
    return get_user_permissions(session.user)


async def check_permission(session: AdminSession, module: str, action: str) -> PermissionCheck:
    return PermissionCheck(module=module, action=action, granted=has_permission(session.user, module, action))


async def get_menu(session: AdminSession) -> List[MenuItem]:
    return get_menu_items(session.user)
