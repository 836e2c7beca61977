"""Enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique


@unique
class DomainCodes(IntEnum):
    """Error code parts."""

    GENERAL = 1
    PASSWORD_POLICY = 2


@unique
class CheckQuality(IntEnum):
    """Password quality check modes of a directory password policy.

    NO_CHECK: the server does not check the quality of new passwords.
    ACCEPT_UNCHECKED: passwords that can't be checked (hashed by the
        client) are accepted.
    ENFORCE: passwords that can't be checked are rejected.
    """

    NO_CHECK = 0
    ACCEPT_UNCHECKED = 1
    ENFORCE = 2
