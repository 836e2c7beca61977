"""Test main config.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import replace
from threading import Lock
from typing import Iterator

import pytest
from dishka import Provider, Scope, from_context, provide
from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from config import Settings
from pwpolicy import (
    PasswordPolicyDTO,
    PasswordPolicyGateway,
    PasswordPolicyNameCache,
    PasswordPolicyUseCases,
    PasswordPolicyValidator,
)
from pwpolicy.exceptions import (
    PasswordPolicyAlreadyExistsError,
    PasswordPolicyNotFoundError,
    PasswordPolicyStoreError,
)
from repo.pg.tables import metadata


class FakePasswordPolicyGateway(PasswordPolicyGateway):
    """Thread-safe in-memory policy store.

    ``is_down`` simulates a store outage: every call raises
    ``PasswordPolicyStoreError``.
    """

    def __init__(self, *policies: PasswordPolicyDTO) -> None:
        self._policies: dict[str, PasswordPolicyDTO] = {
            dto.name.lower(): dto for dto in policies
        }
        self._lock = Lock()
        self.is_down = False

    def _check(self, operation: str, name: str | None = None) -> None:
        if self.is_down:
            raise PasswordPolicyStoreError(operation, name)

    def get_all_names(self) -> set[str]:
        self._check("get_all_names")
        with self._lock:
            return {dto.name for dto in self._policies.values()}

    def get(self, _id: str) -> PasswordPolicyDTO:
        self._check("get", _id)
        with self._lock:
            try:
                return replace(self._policies[_id.lower()])
            except KeyError:
                raise PasswordPolicyNotFoundError(_id) from None

    def create(self, dto: PasswordPolicyDTO) -> None:
        self._check("create", dto.name)
        with self._lock:
            if dto.name.lower() in self._policies:
                raise PasswordPolicyAlreadyExistsError(dto.name)
            self._policies[dto.name.lower()] = replace(dto)

    def update(self, dto: PasswordPolicyDTO) -> None:
        self._check("update", dto.name)
        with self._lock:
            stored = self._policies.get(dto.name.lower())
            if stored is None:
                raise PasswordPolicyNotFoundError(dto.name)
            changes = {
                key: value
                for key, value in vars(dto).items()
                if value is not None and key != "name"
            }
            self._policies[dto.name.lower()] = replace(stored, **changes)

    def delete(self, dto: PasswordPolicyDTO) -> None:
        self._check("delete", dto.name)
        with self._lock:
            if self._policies.pop(dto.name.lower(), None) is None:
                raise PasswordPolicyNotFoundError(dto.name)

    def find_by_prefix(self, prefix: str) -> list[PasswordPolicyDTO]:
        self._check("find_by_prefix", prefix)
        with self._lock:
            return sorted(
                (
                    replace(dto)
                    for key, dto in self._policies.items()
                    if key.startswith(prefix.lower())
                ),
                key=lambda dto: dto.name,
            )


class TestProvider(Provider):
    """Test provider over the in-memory store."""

    __test__ = False

    settings = from_context(provides=Settings, scope=Scope.APP)

    def __init__(self, gateway: FakePasswordPolicyGateway) -> None:
        """Keep the store shared by all requests."""
        super().__init__()
        self._gateway = gateway

    @provide(scope=Scope.APP, provides=PasswordPolicyGateway)
    def get_gateway(self) -> FakePasswordPolicyGateway:
        return self._gateway

    validator = provide(PasswordPolicyValidator, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_name_cache(
        self,
        gateway: PasswordPolicyGateway,
    ) -> PasswordPolicyNameCache:
        return PasswordPolicyNameCache(gateway)

    use_cases = provide(PasswordPolicyUseCases, scope=Scope.REQUEST)


@pytest.fixture
def settings() -> Settings:
    """Get settings with in-memory database."""
    return Settings(DATABASE_URI="sqlite://")


@pytest.fixture
def engine(settings: Settings) -> Iterator[Engine]:
    """Get engine with created tables."""
    engine = settings.engine
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Get database session."""
    with sessionmaker(engine, expire_on_commit=False)() as session:
        yield session


@pytest.fixture
def gateway() -> FakePasswordPolicyGateway:
    """Get in-memory store with one policy."""
    return FakePasswordPolicyGateway(
        PasswordPolicyDTO(name="Default", max_age=7_776_000, min_length=8),
    )


@pytest.fixture
def validator() -> PasswordPolicyValidator:
    """Get validator."""
    return PasswordPolicyValidator()


@pytest.fixture
def name_cache(
    gateway: FakePasswordPolicyGateway,
) -> PasswordPolicyNameCache:
    """Get name cache loaded from the store."""
    return PasswordPolicyNameCache(gateway)


@pytest.fixture
def password_use_cases(
    gateway: FakePasswordPolicyGateway,
    validator: PasswordPolicyValidator,
    name_cache: PasswordPolicyNameCache,
) -> PasswordPolicyUseCases:
    """Get use cases over the in-memory store."""
    return PasswordPolicyUseCases(gateway, validator, name_cache)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru records."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
