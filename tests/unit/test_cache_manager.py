"""
Unit tests for the cache.manager module.

Covers:
- Setup of the cache lifecycle for FastAPI
- Event handlers (startup/shutdown)
- Dependency access and startup failure handling
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from cachecore.cache.manager import get_cache_app, setup_cache
from cachecore.config.base import CacheSettings
from cachecore.errors import NoConnectionError


@pytest.fixture
def reset_module_cache():
    """Reset module-level cache app for each test."""
    import cachecore.cache.manager as manager_module

    original = manager_module.cache_app
    manager_module.cache_app = None
    yield
    manager_module.cache_app = original


@pytest.fixture
def mock_app():
    """Mock FastAPI app capturing event handlers."""
    app = MagicMock(spec=FastAPI)
    app.router = MagicMock()
    app.router.on_startup = []
    app.router.on_shutdown = []

    def add_event_handler(event, func):
        if event == "startup":
            app.router.on_startup.append(func)
        elif event == "shutdown":
            app.router.on_shutdown.append(func)

    app.add_event_handler = MagicMock(side_effect=add_event_handler)
    return app


@pytest.fixture
def settings():
    return CacheSettings(REDIS_SERVER_URL="localhost:6379")


@pytest.mark.asyncio
async def test_get_cache_app_not_initialized(reset_module_cache):
    with pytest.raises(NoConnectionError, match="Cache not initialized"):
        await get_cache_app()


def test_setup_cache_registers_event_handlers(mock_app, settings):
    setup_cache(mock_app, settings, logger=MagicMock())

    assert len(mock_app.router.on_startup) == 1
    assert len(mock_app.router.on_shutdown) == 1


@pytest.mark.asyncio
async def test_startup_creates_cache_app(mock_app, settings, reset_module_cache):
    cache_app = AsyncMock()
    with patch(
        "cachecore.cache.manager.CacheApp.from_settings",
        AsyncMock(return_value=cache_app),
    ) as from_settings:
        setup_cache(mock_app, settings, logger=MagicMock())
        await mock_app.router.on_startup[0]()

    from_settings.assert_awaited_once()
    assert from_settings.await_args.args[0] is settings
    assert await get_cache_app() is cache_app


@pytest.mark.asyncio
async def test_shutdown_closes_cache_app(mock_app, settings, reset_module_cache):
    cache_app = AsyncMock()
    with patch(
        "cachecore.cache.manager.CacheApp.from_settings",
        AsyncMock(return_value=cache_app),
    ):
        setup_cache(mock_app, settings, logger=MagicMock())
        await mock_app.router.on_startup[0]()
        await mock_app.router.on_shutdown[0]()

    cache_app.close.assert_awaited_once()
    with pytest.raises(NoConnectionError):
        await get_cache_app()


@pytest.mark.asyncio
async def test_startup_failure_is_logged(mock_app, settings, reset_module_cache):
    logger = MagicMock()
    with patch(
        "cachecore.cache.manager.CacheApp.from_settings",
        AsyncMock(side_effect=ConnectionError("redis connection error")),
    ):
        setup_cache(mock_app, settings, logger=logger)
        await mock_app.router.on_startup[0]()

    logger.error.assert_called_once()
    assert "redis connection error" in logger.error.call_args.args[0]
    with pytest.raises(NoConnectionError):
        await get_cache_app()


@pytest.mark.asyncio
async def test_shutdown_without_startup_is_noop(mock_app, settings, reset_module_cache):
    setup_cache(mock_app, settings, logger=MagicMock())
    await mock_app.router.on_shutdown[0]()
