"""Typed API facades exercised end-to-end against the mock backend."""

import httpx
import pytest

from tg_search_web.client import ApiClient, BotAPI, ClientConfig, SearchAPI, UserAPI

pytestmark = [pytest.mark.unit]


@pytest.fixture
async def api_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport) as http_client:
        yield ApiClient(ClientConfig(api_base="http://testserver/"), http_client=http_client)


async def test_search_api(api_client):
    search_api = SearchAPI(api_client)

    result = await search_api.search({"q": "telegram", "page": 2, "limit": 10, "filter": None})
    assert result.ok is True
    assert result.data["page"] == 2
    assert len(result.data["results"]) == 10

    suggestions = await search_api.get_suggestions("AI")
    assert suggestions.ok is True
    assert suggestions.data["data"]["suggestions"] == ["AI"]

    trending = await search_api.get_trending()
    assert trending.ok is True
    assert len(trending.data["data"]["trending"]) == 20


async def test_bot_api(api_client):
    bot_api = BotAPI(api_client)

    bots = await bot_api.get_bots()
    assert bots.ok is True
    assert len(bots.data["bots"]) == 3

    status = await bot_api.get_bot_status()
    assert status.ok is True
    assert status.data["code"] == 200


async def test_user_api(api_client):
    user_api = UserAPI(api_client)

    sent = await user_api.login("+8613800138000")
    assert sent.ok is True

    failed = await user_api.login("+8613800138000", code="00000")
    assert failed.ok is False
    assert failed.status == 401
    assert failed.error == "验证码错误"

    profile = await user_api.get_profile()
    assert profile.ok is True
    assert profile.data["name"] == "Trae AI"
