"""Module with settings.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
import sys
from functools import cached_property
from typing import ClassVar, Literal, TypeAlias

from loguru import logger
from pydantic import (
    BaseModel,
    Field,
    IPvAnyAddress,
    computed_field,
    field_validator,
)
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

LogLevel: TypeAlias = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseModel):
    """Settings with database dsn."""

    DEBUG: bool = False
    HOST: IPvAnyAddress = "0.0.0.0"  # type: ignore  # noqa
    HTTP_PORT: int = 8000
    LOG_LEVEL: LogLevel = "INFO"

    POSTGRES_SCHEMA: ClassVar[str] = "postgresql+psycopg"
    POSTGRES_DB: str = "postgres"

    POSTGRES_HOST: str = "postgres"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""

    # overrides postgres parts, e.g. `sqlite://` for local runs
    DATABASE_URI: str | None = None

    INSTANCE_DB_POOL_SIZE: int = 10
    INSTANCE_DB_POOL_LIMIT: int = 20
    INSTANCE_DB_POOL_TIMEOUT: int = 5

    VENDOR_NAME: ClassVar[str] = "MultiFactor"
    VENDOR_VERSION: str = Field("0.1.0", alias="VERSION")

    model_config = {"populate_by_name": True}

    @field_validator("LOG_LEVEL", mode="before")
    def upper_log_level(cls, level: str) -> str:  # noqa: N805
        """Accept lower case level names."""
        if isinstance(level, str):
            return level.upper()
        return level

    @computed_field  # type: ignore
    @cached_property
    def DATABASE_URL(self) -> str:  # noqa: N802
        """Build database DSN."""
        if self.DATABASE_URI:
            return self.DATABASE_URI

        return (
            f"{self.POSTGRES_SCHEMA}://"
            f"{self.POSTGRES_USER}:"
            f"{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}/"
            f"{self.POSTGRES_DB}"
        )

    @cached_property
    def engine(self) -> Engine:
        """Get engine.

        Pool sizing applies to server databases only, sqlite shares one
        connection between threads.
        """
        if self.DATABASE_URL.startswith("sqlite"):
            return create_engine(
                self.DATABASE_URL,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=self.DEBUG,
            )

        return create_engine(
            self.DATABASE_URL,
            pool_size=self.INSTANCE_DB_POOL_SIZE,
            max_overflow=self.INSTANCE_DB_POOL_LIMIT,
            pool_timeout=self.INSTANCE_DB_POOL_TIMEOUT,
            pool_pre_ping=True,
            echo=self.DEBUG,
        )

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)


def setup_logging(settings: Settings) -> None:
    """Route loguru output to stderr with the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        backtrace=settings.DEBUG,
        diagnose=settings.DEBUG,
    )
