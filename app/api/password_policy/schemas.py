"""Password policies schemas.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pydantic import BaseModel


class PasswordPolicySchema(BaseModel):
    """Password Policy schema.

    Bounds are checked by the domain validator, so the API reports the
    same violation as any other caller.
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
