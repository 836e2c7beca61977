"""Password policies module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .dataclasses import PasswordPolicyDTO
from .gateway import PasswordPolicyGateway
from .name_cache import PasswordPolicyNameCache
from .use_cases import PasswordPolicyUseCases
from .validator import PasswordPolicyValidator

__all__ = [
    "PasswordPolicyDTO",
    "PasswordPolicyGateway",
    "PasswordPolicyNameCache",
    "PasswordPolicyUseCases",
    "PasswordPolicyValidator",
]
