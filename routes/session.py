from fastapi import APIRouter, Depends
from typing import Dict, List
from models.rbac import DashboardInfo, MenuItem, PermissionCheck
from core.auth import get_current_session
from core.session import AdminSession
from controllers import session_controller

router = APIRouter(prefix="/session", tags=["session"])


@router.get("/dashboard", response_model=DashboardInfo)
async def get_dashboard(session: AdminSession = Depends(get_current_session)):
    return await session_controller.get_dashboard(session)


@router.get("/permissions", response_model=Dict[str, Dict[str, bool]])
async def get_permissions(session: AdminSession = Depends(get_current_session)):
    return await session_controller.get_permissions(session)


@router.get("/permissions/{module}/{action}", response_model=PermissionCheck)
async def check_permission(module: str, action: str, session: AdminSession = Depends(get_current_session)):
    return await session_controller.check_permission(session, module, action)


@router.get("/menu", response_model=List[MenuItem])
async def get_menu(session: AdminSession = Depends(get_current_session)):
    return await session_controller.get_menu(session)
