from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from datetime import datetime, timezone, timedelta
import jwt

from config import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS
from core.dashboard_router import has_permission, find_priority_role
from core.session import AdminSession, build_session
from database import db
from models.rbac import PlatformRole, User

security = HTTPBearer()


def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> User:
    try:
        payload = jwt.decode(credentials.credentials, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")
    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    user_doc = await db.platform_admins.find_one({"id": user_id}, {"_id": 0, "password": 0})
    if user_doc is None:
        raise HTTPException(status_code=401, detail="User not found")
    user = User(**user_doc)
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account disabled")
    return user


async def get_current_session(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    current_user: User = Depends(get_current_user),
) -> AdminSession:
    return build_session(current_user, credentials.credentials)


def check_permission(module: str, action: str):
    async def permission_checker(session: AdminSession = Depends(get_current_session)):
        _, tag = find_priority_role(session.user.roles)
        if tag is PlatformRole.SUPER_ADMIN:
            return session
        if not has_permission(session.user, module, action):
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return session
    return permission_checker
