"""Password Policies data classes.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass


@dataclass
class PasswordPolicyDTO:
    """Password policy data transfer object.

    Only ``name`` is required, ``None`` marks an absent attribute: it is
    not validated and is left unchanged in the store on update.
    Durations are in seconds.
    """

    name: str

    check_quality: int | None = None
    max_age: int | None = None
    min_age: int | None = None
    min_length: int | None = None

    failure_count_interval: int | None = None
    max_failure: int | None = None
    in_history: int | None = None
    grace_login_limit: int | None = None
    lockout_duration: int | None = None
    expire_warning: int | None = None

    lockout: bool | None = None
    must_change: bool | None = None
    allow_user_change: bool | None = None
    safe_modify: bool | None = None
