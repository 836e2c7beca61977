"""Password policy tables.

(imperative mapping + dataclasses, SQLAlchemy 2.0).
"""

from __future__ import annotations

from typing import TypeVar, cast

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    func,
)
from sqlalchemy.orm import QueryableAttribute, registry

from entities import PasswordPolicy
from pwpolicy.constants import NAME_MAX

_T = TypeVar("_T")


def queryable_attr(value: _T) -> QueryableAttribute[_T]:
    """Cast a value to a QueryableAttribute.

    :param T value: The value to cast.
    :return QueryableAttribute[T]: The casted value.
    """
    return cast("QueryableAttribute[_T]", value)


mapper_registry = registry()
metadata: MetaData = mapper_registry.metadata

password_policies_table = Table(
    "PasswordPolicies",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(NAME_MAX), nullable=False),
    Column("checkQuality", Integer, nullable=True, key="check_quality"),
    Column("maxAge", Integer, nullable=True, key="max_age"),
    Column("minAge", Integer, nullable=True, key="min_age"),
    Column("minLength", Integer, nullable=True, key="min_length"),
    Column(
        "failureCountInterval",
        Integer,
        nullable=True,
        key="failure_count_interval",
    ),
    Column("maxFailure", Integer, nullable=True, key="max_failure"),
    Column("inHistory", Integer, nullable=True, key="in_history"),
    Column("graceLoginLimit", Integer, nullable=True, key="grace_login_limit"),
    Column("lockoutDuration", Integer, nullable=True, key="lockout_duration"),
    Column("expireWarning", Integer, nullable=True, key="expire_warning"),
    Column("lockout", Boolean, nullable=True),
    Column("mustChange", Boolean, nullable=True, key="must_change"),
    Column(
        "allowUserChange",
        Boolean,
        nullable=True,
        key="allow_user_change",
    ),
    Column("safeModify", Boolean, nullable=True, key="safe_modify"),
)

# policy names are case-insensitive, like directory cn values
Index(
    "ix_PasswordPolicies_lower_name",
    func.lower(password_policies_table.c.name),
    unique=True,
)


mapper_registry.map_imperatively(
    PasswordPolicy,
    password_policies_table,
)
