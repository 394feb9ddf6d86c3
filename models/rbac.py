from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Any, Dict, List, Optional
from enum import Enum


class PlatformRole(str, Enum):
    """Canonical tag for the platform roles the dashboard router recognizes."""
    SUPER_ADMIN = "super-admin"
    SALES = "platform-sales"
    FINANCE_ADMIN = "platform-finance-admin"
    AUDITOR = "platform-read-only-auditor"
    SUPPORT = "platform-support"


class LegacyRole:
    SUPERADMIN = "superadmin"
    SUPPORT = "support"
    AUDITOR = "auditor"
    FINANCE = "finance"
    SALES_ADMIN = "sales_admin"


class UserType:
    SUPERADMIN = "superadmin"
    SALES = "sales"
    SUPPORT = "support"
    AUDITOR = "auditor"
    FINANCE = "finance"


def _as_str(value) -> str:
    # Role subdocuments from Mongo carry ObjectId ids
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class UserRole(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    id: str = Field(default="", alias="_id")
    name: str = ""
    slug: str = ""
    description: Optional[str] = None
    color: Optional[str] = None
    permissions: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", "name", "slug", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return _as_str(value)

    @field_validator("description", "color", mode="before")
    @classmethod
    def _drop_non_string(cls, value):
        return value if isinstance(value, str) else None

    @field_validator("permissions", mode="before")
    @classmethod
    def _permissions_or_empty(cls, value):
        return value if isinstance(value, dict) else {}


class User(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    id: str = Field(default="", alias="_id")
    name: str = ""
    email: str = ""
    role: Optional[str] = None
    roles: List[UserRole] = Field(default_factory=list)
    is_active: bool = Field(default=True, alias="isActive")
    designation: Optional[str] = None
    permissions: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value):
        return _as_str(value)

    @field_validator("roles", mode="before")
    @classmethod
    def _roles_or_empty(cls, value):
        return [] if value is None else value

    @field_validator("permissions", mode="before")
    @classmethod
    def _permissions_or_empty(cls, value):
        return value if isinstance(value, dict) else {}


class ModuleDefinition(BaseModel):
    id: str
    label: str


class MenuItem(BaseModel):
    name: str
    path: str
    icon: str


class DashboardInfo(BaseModel):
    route: str
    title: str
    color: str
    user_type: str
    role_name: str
    permissions: Dict[str, Dict[str, bool]]
    menu: List[MenuItem]


class PermissionCheck(BaseModel):
    module: str
    action: str
    granted: bool
