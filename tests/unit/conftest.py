"""Shared fixtures for unit tests that talk to the in-process mock backend."""

import pytest


@pytest.fixture
async def app():
    """显式运行 lifespan，并关闭模拟延迟"""
    from tg_search_web.api.app import build_app, lifespan

    app = build_app()
    async with lifespan(app):
        app.state.app_state.latency_scale = 0
        yield app
