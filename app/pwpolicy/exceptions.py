"""Password Policies exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    PASSWORD_POLICY_ALREADY_EXISTS_ERROR = 1
    PASSWORD_POLICY_NOT_FOUND_ERROR = 2
    PASSWORD_POLICY_VALIDATION_ERROR = 3
    PASSWORD_POLICY_STORE_ERROR = 4


class PasswordPolicyError(BaseDomainException):
    """Base exception class for Password Policy service errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class PasswordPolicyAlreadyExistsError(PasswordPolicyError):
    """Exception raised when a Password Policy already exists."""

    code = ErrorCodes.PASSWORD_POLICY_ALREADY_EXISTS_ERROR


class PasswordPolicyNotFoundError(PasswordPolicyError):
    """Exception raised when a Password Policy not found."""

    code = ErrorCodes.PASSWORD_POLICY_NOT_FOUND_ERROR


class PasswordPolicyValidationError(PasswordPolicyError):
    """Exception raised when a Password Policy attribute is out of bounds."""

    code = ErrorCodes.PASSWORD_POLICY_VALIDATION_ERROR

    def __init__(self, field: str, value: object, reason: str) -> None:
        """Keep the offending field for callers."""
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}: {reason} (got {value!r})")


class PasswordPolicyStoreError(PasswordPolicyError):
    """Store failure with the attempted operation and policy name."""

    code = ErrorCodes.PASSWORD_POLICY_STORE_ERROR

    def __init__(self, operation: str, name: str | None = None) -> None:
        """Keep store call context."""
        self.operation = operation
        self.name = name
        if name is None:
            super().__init__(f"Password Policy store failed on {operation}")
        else:
            super().__init__(
                f"Password Policy store failed on {operation} "
                f"of `{name}`",
            )
