"""DI Provider module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator

from dishka import Provider, Scope, from_context, provide
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from api.password_policy.adapter import PasswordPolicyFastAPIAdapter
from config import Settings
from pwpolicy import (
    PasswordPolicyGateway,
    PasswordPolicyNameCache,
    PasswordPolicyUseCases,
    PasswordPolicyValidator,
)
from pwpolicy.dao import PasswordPolicyDAO


class MainProvider(Provider):
    """Provider for database access."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> Engine:
        """Get engine."""
        return settings.engine

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: Engine) -> sessionmaker[Session]:
        """Create session factory."""
        return sessionmaker(engine, expire_on_commit=False)

    @provide(scope=Scope.REQUEST)
    def create_session(
        self,
        session_factory: sessionmaker[Session],
    ) -> Iterator[Session]:
        """Create session for request."""
        with session_factory() as session:
            yield session


class PasswordPolicyProvider(Provider):
    """Provider for password policies."""

    scope = Scope.REQUEST

    password_policy_validator = provide(
        PasswordPolicyValidator,
        scope=Scope.APP,
    )

    @provide(scope=Scope.APP)
    def get_name_cache(
        self,
        session_factory: sessionmaker[Session],
    ) -> PasswordPolicyNameCache:
        """Build policy names cache once, with its own session."""
        with session_factory() as session:
            return PasswordPolicyNameCache(PasswordPolicyDAO(session))

    password_policy_dao = provide(
        PasswordPolicyDAO,
        provides=PasswordPolicyGateway,
        scope=Scope.REQUEST,
    )
    password_policy_use_cases = provide(
        PasswordPolicyUseCases,
        scope=Scope.REQUEST,
    )


class HTTPProvider(Provider):
    """HTTP adapters."""

    scope = Scope.REQUEST

    password_policy_adapter = provide(
        PasswordPolicyFastAPIAdapter,
        scope=Scope.REQUEST,
    )
