"""Password Policy Use Cases.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from loguru import logger

from .dataclasses import PasswordPolicyDTO
from .gateway import PasswordPolicyGateway
from .name_cache import PasswordPolicyNameCache
from .validator import PasswordPolicyValidator


class PasswordPolicyUseCases:
    """Password Policy Use Cases.

    Every change goes validate -> store -> name cache, in that order:
    the cache is touched only after the store call succeeded, so it can
    lag behind the store but never leads it. Store calls are made once,
    errors propagate unchanged.
    """

    _password_policy_dao: PasswordPolicyGateway
    _password_policy_validator: PasswordPolicyValidator
    _name_cache: PasswordPolicyNameCache

    def __init__(
        self,
        password_policy_dao: PasswordPolicyGateway,
        password_policy_validator: PasswordPolicyValidator,
        name_cache: PasswordPolicyNameCache,
    ) -> None:
        """Initialize Password Policy Use Cases."""
        self._password_policy_dao = password_policy_dao
        self._password_policy_validator = password_policy_validator
        self._name_cache = name_cache

    def is_valid(self, name: str) -> bool:
        """Check that Password Policy is in effect, case-insensitive."""
        return self._name_cache.is_valid(name)

    def read(self, name: str) -> PasswordPolicyDTO:
        """Get one Password Policy from the store."""
        return self._password_policy_dao.get(name)

    def add(self, dto: PasswordPolicyDTO) -> None:
        """Create one Password Policy."""
        self._password_policy_validator.validate(dto)
        self._password_policy_dao.create(dto)
        self._name_cache.add(dto.name)
        logger.info(f"Password Policy created: {dto.name}")

    def update(self, dto: PasswordPolicyDTO) -> None:
        """Update one Password Policy, name is the key and never changes."""
        self._password_policy_validator.validate(dto)
        self._password_policy_dao.update(dto)

    def delete(self, dto: PasswordPolicyDTO) -> None:
        """Delete one Password Policy.

        Not validated, only the name is needed to find the entry.
        """
        self._password_policy_dao.delete(dto)
        self._name_cache.remove(dto.name)
        logger.info(f"Password Policy deleted: {dto.name}")

    def search(self, prefix: str) -> list[PasswordPolicyDTO]:
        """Get Password Policies by leading chars of the name.

        :param str prefix: case-insensitive name prefix
        :return list[PasswordPolicyDTO]: matches, empty if none
        """
        return list(self._password_policy_dao.find_by_prefix(prefix) or [])

    def reload_cache(self) -> bool:
        """Rebuild the name cache from a full store listing."""
        return self._name_cache.reload(self._password_policy_dao)
