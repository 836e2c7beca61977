"""Password policy error utils.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from fastapi import status
from fastapi_error_map.rules import rule

from api.error_routing import ERROR_MAP_TYPE, DomainErrorTranslator
from enums import DomainCodes
from pwpolicy.exceptions import (
    PasswordPolicyAlreadyExistsError,
    PasswordPolicyNotFoundError,
    PasswordPolicyStoreError,
    PasswordPolicyValidationError,
)

translator = DomainErrorTranslator(DomainCodes.PASSWORD_POLICY)


error_map: ERROR_MAP_TYPE = {
    PasswordPolicyValidationError: rule(
        status=status.HTTP_400_BAD_REQUEST,
        translator=translator,
    ),
    PasswordPolicyNotFoundError: rule(
        status=status.HTTP_404_NOT_FOUND,
        translator=translator,
    ),
    PasswordPolicyAlreadyExistsError: rule(
        status=status.HTTP_409_CONFLICT,
        translator=translator,
    ),
    PasswordPolicyStoreError: rule(
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
        translator=translator,
    ),
}
