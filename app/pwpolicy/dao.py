"""Password Policy DAO.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from contextlib import contextmanager
from dataclasses import asdict, fields
from typing import Iterator

from adaptix.conversion import get_converter
from sqlalchemy import exists, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from entities import PasswordPolicy
from repo.pg.tables import queryable_attr as qa

from .dataclasses import PasswordPolicyDTO
from .exceptions import (
    PasswordPolicyAlreadyExistsError,
    PasswordPolicyNotFoundError,
    PasswordPolicyStoreError,
)
from .gateway import PasswordPolicyGateway

_convert_model_to_dto = get_converter(PasswordPolicy, PasswordPolicyDTO)

_UPDATABLE_FIELDS = tuple(
    f.name for f in fields(PasswordPolicyDTO) if f.name != "name"
)


class PasswordPolicyDAO(PasswordPolicyGateway):
    """Password Policy DAO.

    Each write is committed on its own, a failed call is rolled back and
    re-raised as ``PasswordPolicyStoreError``.
    """

    _session: Session

    def __init__(self, session: Session) -> None:
        """Initialize Password Policy DAO with a database session."""
        self._session = session

    @contextmanager
    def _store_call(
        self,
        operation: str,
        name: str | None = None,
    ) -> Iterator[None]:
        try:
            yield
        except IntegrityError as err:
            self._session.rollback()
            if operation == "create":
                raise PasswordPolicyAlreadyExistsError(
                    "Password Policy already exists.",
                ) from err
            raise PasswordPolicyStoreError(operation, name) from err
        except SQLAlchemyError as err:
            self._session.rollback()
            raise PasswordPolicyStoreError(operation, name) from err

    def _get_raw(self, name: str) -> PasswordPolicy:
        """Get one raw (model) Password Policy by name, case-insensitive."""
        policy = self._session.scalar(
            select(PasswordPolicy)
            .where(func.lower(qa(PasswordPolicy.name)) == name.lower()),
        )  # fmt: skip

        if not policy:
            raise PasswordPolicyNotFoundError("Password Policy not found.")

        return policy

    def _is_policy_already_exist(self, name: str) -> bool:
        _is_exists = self._session.scalar(
            select(
                exists(PasswordPolicy)
                .where(func.lower(qa(PasswordPolicy.name)) == name.lower()),
            ),
        )  # fmt: skip
        return bool(_is_exists)

    def get_all_names(self) -> set[str]:
        """Get names of all Password Policies."""
        with self._store_call("get_all_names"):
            names = self._session.scalars(select(qa(PasswordPolicy.name)))
            return set(names)

    def get(self, _id: str) -> PasswordPolicyDTO:
        """Get one Password Policy by name."""
        with self._store_call("get", _id):
            return _convert_model_to_dto(self._get_raw(_id))

    def create(self, dto: PasswordPolicyDTO) -> None:
        """Create one Password Policy."""
        with self._store_call("create", dto.name):
            if self._is_policy_already_exist(dto.name):
                raise PasswordPolicyAlreadyExistsError(
                    "Password Policy already exists.",
                )

            self._session.add(PasswordPolicy(**asdict(dto)))
            self._session.commit()

    def update(self, dto: PasswordPolicyDTO) -> None:
        """Update present attributes of one Password Policy."""
        with self._store_call("update", dto.name):
            policy = self._get_raw(dto.name)

            for name in _UPDATABLE_FIELDS:
                value = getattr(dto, name)
                if value is not None:
                    setattr(policy, name, value)

            self._session.commit()

    def delete(self, dto: PasswordPolicyDTO) -> None:
        """Delete one Password Policy."""
        with self._store_call("delete", dto.name):
            self._session.delete(self._get_raw(dto.name))
            self._session.commit()

    def find_by_prefix(self, prefix: str) -> list[PasswordPolicyDTO]:
        """Get Password Policies whose names start with prefix."""
        with self._store_call("find_by_prefix", prefix):
            policies = self._session.scalars(
                select(PasswordPolicy)
                .where(qa(PasswordPolicy.name).istartswith(
                    prefix,
                    autoescape=True,
                ))
                .order_by(qa(PasswordPolicy.name)),
            )  # fmt: skip
            return list(map(_convert_model_to_dto, policies))
