"""Password policy service module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Callable, NoReturn

import uvicorn
from dishka import make_async_container, make_container
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, HTTPException, Request, status
from loguru import logger
from sqlalchemy import exc as sa_exc

from api import password_policy_router
from config import Settings, setup_logging
from extra.scripts.delete_password_policies import (
    delete_password_policies_from_file,
)
from ioc import HTTPProvider, MainProvider, PasswordPolicyProvider
from pwpolicy import PasswordPolicyNameCache
from repo.pg.tables import metadata


def handle_db_connect_error(
    request: Request,  # noqa: ARG001
    exc: Exception,
) -> NoReturn:
    """Handle database connection errors outside of domain calls."""
    if "QueuePool limit of size" in str(exc):
        logger.critical("POOL EXCEEDED {}", exc)

        raise HTTPException(
            status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Connection Pool Exceeded",
        )

    logger.critical("DB BACKEND ERR {}", exc)

    raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    # built before the first request, not on it
    cache = await app.state.dishka_container.get(PasswordPolicyNameCache)
    if not cache.is_loaded:
        logger.warning("Password Policy names cache started cold")

    yield
    await app.state.dishka_container.close()


def _create_basic_app(settings: Settings) -> FastAPI:
    """Create basic FastAPI app."""
    app = FastAPI(
        name="PasswordPolicy",
        title="Password Policy",
        debug=settings.DEBUG,
        root_path="/api",
        version=settings.VENDOR_VERSION,
        lifespan=_lifespan,
    )
    app.include_router(password_policy_router)
    app.add_exception_handler(sa_exc.TimeoutError, handle_db_connect_error)
    app.add_exception_handler(sa_exc.InterfaceError, handle_db_connect_error)
    return app


def create_prod_app(
    factory: Callable[[Settings], FastAPI] = _create_basic_app,
    settings: Settings | None = None,
) -> FastAPI:
    """Create production app with container."""
    settings = settings or Settings.from_os()
    setup_logging(settings)

    app = factory(settings)
    container = make_async_container(
        MainProvider(),
        PasswordPolicyProvider(),
        HTTPProvider(),
        context={Settings: settings},
    )
    setup_dishka(container, app)
    return app


def create_tables(settings: Settings) -> None:
    """Create password policy tables if absent."""
    metadata.create_all(settings.engine)
    logger.info("Password policy tables are ready")


def delete_batch(settings: Settings, path: Path) -> int:
    """Delete Password Policies listed in file, return exit status."""
    container = make_container(
        MainProvider(),
        PasswordPolicyProvider(),
        context={Settings: settings},
    )
    try:
        failed = delete_password_policies_from_file(path, container)
    finally:
        container.close()

    return 1 if failed else 0


def main() -> int:
    """Parse args and run the selected command."""
    settings = Settings.from_os()
    setup_logging(settings)

    parser = argparse.ArgumentParser(description="Password policy service")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--http", action="store_true", help="Run http app")
    group.add_argument(
        "--migrate",
        action="store_true",
        help="Create tables",
    )
    group.add_argument(
        "--delete-batch",
        type=Path,
        metavar="FILE",
        help="Delete policies listed in FILE, one name per line",
    )

    args = parser.parse_args()

    if args.http:
        uvicorn.run(
            "pwpolicy_server:create_prod_app",
            host=str(settings.HOST),
            port=settings.HTTP_PORT,
            factory=True,
        )
    elif args.migrate:
        create_tables(settings)
    elif args.delete_batch:
        return delete_batch(settings, args.delete_batch)

    return 0
