from typing import Dict, List

from config import PERMISSION_TYPES
from core.role_modules import ROLE_MODULE_MAPPING, get_module_catalog, get_modules_for_role


async def get_role_modules() -> Dict[str, List[str]]:
    return {slug: list(modules) for slug, modules in ROLE_MODULE_MAPPING.items()}


async def get_role_modules_for(role_slug: str) -> dict:
    return {
        "slug": role_slug,
        "known": role_slug in ROLE_MODULE_MAPPING,
        "modules": get_modules_for_role(role_slug),
    }


async def get_permission_catalog() -> dict:
    return {
        "modules": [m.model_dump() for m in get_module_catalog()],
        "actions": list(PERMISSION_TYPES),
    }
