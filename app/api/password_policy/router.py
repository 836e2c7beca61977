"""Password Policy router.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import FromDishka
from fastapi import status
from fastapi_error_map.routing import ErrorAwareRouter

from api.error_routing import DishkaErrorAwareRoute
from api.password_policy.adapter import PasswordPolicyFastAPIAdapter
from api.password_policy.error_utils import error_map
from api.password_policy.schemas import PasswordPolicySchema

password_policy_router = ErrorAwareRouter(
    prefix="/password-policy",
    tags=["Password Policy"],
    route_class=DishkaErrorAwareRoute,
)


@password_policy_router.get("", error_map=error_map)
async def search(
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
    prefix: str = "",
) -> list[PasswordPolicySchema]:
    """Get Password Policies whose names start with prefix."""
    return await adapter.search(prefix)


@password_policy_router.post("/cache/reload", error_map=error_map)
async def reload_cache(
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> bool:
    """Reload names of Password Policies in effect from the store."""
    return await adapter.reload_cache()


@password_policy_router.get("/{name}", error_map=error_map)
async def read(
    name: str,
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> PasswordPolicySchema:
    """Get one Password Policy."""
    return await adapter.read(name)


@password_policy_router.get("/{name}/is_valid", error_map=error_map)
async def is_valid(
    name: str,
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> bool:
    """Check that Password Policy is in effect."""
    return await adapter.is_valid(name)


@password_policy_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    error_map=error_map,
)
async def add(
    policy: PasswordPolicySchema,
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> None:
    """Create one Password Policy."""
    await adapter.add(policy)


@password_policy_router.put("", error_map=error_map)
async def update(
    policy: PasswordPolicySchema,
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> None:
    """Update one Password Policy."""
    await adapter.update(policy)


@password_policy_router.delete("/{name}", error_map=error_map)
async def delete(
    name: str,
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> None:
    """Delete one Password Policy."""
    await adapter.delete(name)
