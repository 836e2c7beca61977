"""Abstract Data Access Object (DAO) interface.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from abc import abstractmethod
from typing import Protocol, TypeVar

_T = TypeVar("_T")
_A = TypeVar("_A", int, str, contravariant=True)


class AbstractDAO(Protocol[_T, _A]):
    """Abstract Data Access Object (DAO) interface.

    Entities are addressed by ``_A`` on reads and by the whole DTO on
    writes, the DTO carries its own key.
    """

    @abstractmethod
    def get(self, _id: _A) -> _T: ...

    @abstractmethod
    def create(self, dto: _T) -> None: ...

    @abstractmethod
    def update(self, dto: _T) -> None: ...

    @abstractmethod
    def delete(self, dto: _T) -> None: ...
