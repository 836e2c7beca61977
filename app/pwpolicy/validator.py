"""Password Policy attributes validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Callable, TypeAlias

from loguru import logger

from enums import CheckQuality

from .constants import (
    MAX_AGE,
    MAX_FAILURE,
    MAX_GRACE_COUNT,
    MAX_HISTORY,
    MAX_MIN_LENGTH,
    NAME_MAX,
)
from .dataclasses import PasswordPolicyDTO
from .exceptions import PasswordPolicyValidationError

_CheckType: TypeAlias = Callable[[int], bool]


@dataclass(frozen=True)
class _Checker:
    """Check of one optional attribute."""

    field: str
    check: _CheckType
    reason: str


def _upper_bound(field: str, limit: int) -> _Checker:
    return _Checker(field, lambda value: value <= limit, f"must be <= {limit}")


_QUALITY_VALUES = frozenset(CheckQuality)

# Evaluated in this order, the first failure wins.
_CHECKERS: tuple[_Checker, ...] = (
    _Checker(
        "check_quality",
        lambda value: value in _QUALITY_VALUES,
        "must be one of 0, 1, 2",
    ),
    _upper_bound("max_age", MAX_AGE),
    _upper_bound("min_age", MAX_AGE),
    # NOTE: upper bound, not a lower bound on the password length
    _upper_bound("min_length", MAX_MIN_LENGTH),
    _upper_bound("failure_count_interval", MAX_AGE),
    _upper_bound("max_failure", MAX_FAILURE),
    _upper_bound("in_history", MAX_HISTORY),
    _upper_bound("grace_login_limit", MAX_GRACE_COUNT),
    _upper_bound("lockout_duration", MAX_AGE),
    _upper_bound("expire_warning", MAX_AGE),
)


class PasswordPolicyValidator:
    """Bounds validator for Password Policy records.

    Stateless, one instance is shared by all threads.
    """

    def validate(self, dto: PasswordPolicyDTO) -> None:
        """Validate the given policy before it is written to the store.

        Absent (``None``) attributes are skipped, there is no aggregation:
        the first violation is logged and raised.

        :param PasswordPolicyDTO dto: policy to check
        :raises PasswordPolicyValidationError: on the first violation
        """
        length = len(dto.name)
        if length < 1 or length > NAME_MAX:
            self._fail(
                dto,
                "name",
                dto.name,
                f"length must be in [1, {NAME_MAX}], got {length}",
            )

        for checker in _CHECKERS:
            value = getattr(dto, checker.field)
            if value is None:
                continue

            # bool is an int subclass, True would pass as 1
            if isinstance(value, bool) or not isinstance(value, int):
                self._fail(dto, checker.field, value, "must be an integer")

            if not checker.check(value):
                self._fail(dto, checker.field, value, checker.reason)

    @staticmethod
    def _fail(
        dto: PasswordPolicyDTO,
        field: str,
        value: object,
        reason: str,
    ) -> None:
        logger.error(
            f"Password Policy validation failed: name=[{dto.name}] "
            f"{field}=[{value}] {reason}",
        )
        raise PasswordPolicyValidationError(field, value, reason)
