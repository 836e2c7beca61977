"""Password Policy adapter for FastAPI.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from adaptix.conversion import get_converter

from api.base_adapter import BaseAdapter
from api.password_policy.schemas import PasswordPolicySchema
from pwpolicy.dataclasses import PasswordPolicyDTO
from pwpolicy.use_cases import PasswordPolicyUseCases

_convert_schema_to_dto = get_converter(PasswordPolicySchema, PasswordPolicyDTO)
_convert_dto_to_schema = get_converter(PasswordPolicyDTO, PasswordPolicySchema)


class PasswordPolicyFastAPIAdapter(BaseAdapter[PasswordPolicyUseCases]):
    """Adapter for password policies."""

    async def search(self, prefix: str) -> list[PasswordPolicySchema]:
        """Get Password Policies by name prefix."""
        dtos = await self._call(self._service.search, prefix)
        return list(map(_convert_dto_to_schema, dtos))

    async def read(self, name: str) -> PasswordPolicySchema:
        """Get one Password Policy."""
        dto = await self._call(self._service.read, name)
        return _convert_dto_to_schema(dto)

    async def is_valid(self, name: str) -> bool:
        """Check that Password Policy is in effect."""
        return self._service.is_valid(name)

    async def add(self, policy: PasswordPolicySchema) -> None:
        """Create one Password Policy."""
        dto = _convert_schema_to_dto(policy)
        await self._call(self._service.add, dto)

    async def update(self, policy: PasswordPolicySchema) -> None:
        """Update one Password Policy."""
        dto = _convert_schema_to_dto(policy)
        await self._call(self._service.update, dto)

    async def delete(self, name: str) -> None:
        """Delete one Password Policy."""
        await self._call(self._service.delete, PasswordPolicyDTO(name=name))

    async def reload_cache(self) -> bool:
        """Rebuild the policy names cache."""
        return await self._call(self._service.reload_cache)
