"""Password policy entities.

(imperative mapping + dataclasses, SQLAlchemy 2.0).
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PasswordPolicy:
    """Directory password policy (ppolicy) entry."""

    id: int | None = field(init=False, default=None)
    name: str = ""

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
