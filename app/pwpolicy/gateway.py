"""Password Policy store contract.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from abc import abstractmethod
from typing import Protocol

from abstract_dao import AbstractDAO

from .dataclasses import PasswordPolicyDTO


class PasswordPolicyNamesGateway(Protocol):
    """Full listing of policy names, used to warm the name cache."""

    @abstractmethod
    def get_all_names(self) -> set[str]: ...


class PasswordPolicyGateway(
    AbstractDAO[PasswordPolicyDTO, str],
    PasswordPolicyNamesGateway,
    Protocol,
):
    """Password Policy store.

    Lookups by name are case-insensitive.
    ``get``, ``update`` and ``delete`` raise ``PasswordPolicyNotFoundError``,
    ``create`` raises ``PasswordPolicyAlreadyExistsError``; transport and
    constraint failures raise ``PasswordPolicyStoreError``.
    """

    @abstractmethod
    def find_by_prefix(self, prefix: str) -> list[PasswordPolicyDTO]: ...
