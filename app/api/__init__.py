"""API module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .password_policy import password_policy_router

__all__ = [
    "password_policy_router",
]
