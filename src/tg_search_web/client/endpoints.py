"""
按业务划分的 API 封装

搜索、机器人、用户三组接口，统一返回 ApiResult
"""

from typing import Dict, Optional

from tg_search_web.client.api import ApiClient, ApiResult, QueryValue, RequestOptions


class SearchAPI:
    """搜索相关 API"""

    def __init__(self, client: ApiClient):
        self._client = client

    async def search(self, params: Dict[str, QueryValue]) -> ApiResult:
        """执行搜索，params 例如 {"q": "telegram", "page": 1, "limit": 20}"""
        return await self._client.api_fetch("/api/search", RequestOptions(query=params))

    async def get_suggestions(self, query: str) -> ApiResult:
        return await self._client.api_fetch("/api/suggestions", RequestOptions(query={"q": query}))

    async def get_trending(self) -> ApiResult:
        return await self._client.api_fetch("/api/trending")


class BotAPI:
    """机器人相关 API"""

    def __init__(self, client: ApiClient):
        self._client = client

    async def get_bots(self) -> ApiResult:
        """获取机器人详细状态列表"""
        return await self._client.api_fetch("/api/bots/status")

    async def get_bot_status(self) -> ApiResult:
        return await self._client.api_fetch("/api/bot/status")


class UserAPI:
    """用户相关 API"""

    def __init__(self, client: ApiClient):
        self._client = client

    async def login(self, phone_number: str, code: Optional[str] = None) -> ApiResult:
        """
        两步登录

        不带 code 时请求发送验证码；带 code 时校验验证码
        """
        body: Dict[str, str] = {"phone_number": phone_number}
        if code is not None:
            body["code"] = code
        return await self._client.api_fetch("/api/login", RequestOptions(method="POST", body=body))

    async def get_profile(self) -> ApiResult:
        return await self._client.api_fetch("/api/user/profile")
