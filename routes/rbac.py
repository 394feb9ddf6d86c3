from fastapi import APIRouter, Depends
from core.auth import check_permission
from core.session import AdminSession
from controllers import rbac_controller

router = APIRouter(prefix="/rbac", tags=["rbac"])


@router.get("/role-modules")
async def get_role_modules(session: AdminSession = Depends(check_permission("platform_settings", "view"))):
    return await rbac_controller.get_role_modules()


@router.get("/role-modules/{role_slug}")
async def get_role_modules_for(role_slug: str, session: AdminSession = Depends(check_permission("platform_settings", "view"))):
    return await rbac_controller.get_role_modules_for(role_slug)


@router.get("/modules")
async def get_permission_catalog(session: AdminSession = Depends(check_permission("platform_settings", "view"))):
    return await rbac_controller.get_permission_catalog()
