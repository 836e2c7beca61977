"""Conftest for testing Password Policy router.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import AsyncIterator

import httpx
import pytest_asyncio
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from config import Settings
from ioc import HTTPProvider
from pwpolicy_server import _create_basic_app
from tests.conftest import FakePasswordPolicyGateway, TestProvider


@pytest_asyncio.fixture
async def container(
    settings: Settings,
    gateway: FakePasswordPolicyGateway,
) -> AsyncIterator[AsyncContainer]:
    """Get container over the in-memory store."""
    container = make_async_container(
        TestProvider(gateway),
        HTTPProvider(),
        context={Settings: settings},
    )
    yield container
    await container.close()


@pytest_asyncio.fixture
async def app(
    settings: Settings,
    container: AsyncContainer,
) -> FastAPI:
    """App creator fixture."""
    app = _create_basic_app(settings)
    setup_dishka(container, app)
    return app


@pytest_asyncio.fixture
async def http_client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Get async client for fastapi tests."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app, root_path="/api"),
        timeout=3,
        base_url="http://test",
    ) as client:
        yield client
