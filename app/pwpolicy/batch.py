"""Batch deletion of Password Policies.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterable, Self

from loguru import logger

from .dataclasses import PasswordPolicyDTO
from .exceptions import PasswordPolicyError
from .use_cases import PasswordPolicyUseCases


class PasswordPolicyDeleteBatch:
    """Ordered list of Password Policies targeted for removal.

    Filled by a loader as is: no validation, no deduplication.
    """

    _policies: list[PasswordPolicyDTO]

    def __init__(self) -> None:
        """Create an empty batch."""
        self._policies = []

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Self:
        """Build a batch of policies referenced by name."""
        batch = cls()
        for name in names:
            batch.add_policy(PasswordPolicyDTO(name=name))
        return batch

    def add_policy(self, dto: PasswordPolicyDTO) -> None:
        """Append policy to the batch."""
        self._policies.append(dto)

    @property
    def policies(self) -> list[PasswordPolicyDTO]:
        """Policies in load order."""
        return self._policies

    def __len__(self) -> int:
        return len(self._policies)


def delete_password_policies(
    batch: PasswordPolicyDeleteBatch,
    use_cases: PasswordPolicyUseCases,
) -> list[str]:
    """Delete every policy of the batch, in order, one call each.

    A failed element is logged and does not stop the batch.

    :param PasswordPolicyDeleteBatch batch: policies to delete
    :param PasswordPolicyUseCases use_cases: policy manager
    :return list[str]: names which were not deleted
    """
    failed: list[str] = []

    for dto in batch.policies:
        try:
            use_cases.delete(dto)
        except PasswordPolicyError as err:
            logger.warning(
                f"Password Policy batch delete failed: {dto.name}: {err}",
            )
            failed.append(dto.name)

    return failed
