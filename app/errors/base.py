"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base domain exception.

    Every subclass must declare an ``IntEnum`` code, it is sent to API
    clients alongside the message.
    """

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Check that a concrete error code is declared."""
        super().__init_subclass__()

        if not isinstance(getattr(cls, "code", None), IntEnum):
            raise AttributeError(f"{cls.__name__}.code must be an IntEnum")

    @property
    def detail(self) -> str:
        """Human readable message."""
        return str(self) or type(self).__name__
