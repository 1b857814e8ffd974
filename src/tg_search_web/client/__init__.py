"""
请求客户端模块

导出 ApiClient 及相关模型
"""

from tg_search_web.client.api import ApiClient, ApiResult, ClientConfig, RequestOptions, api_fetch
from tg_search_web.client.endpoints import BotAPI, SearchAPI, UserAPI

__all__ = [
    "ApiClient",
    "ApiResult",
    "BotAPI",
    "ClientConfig",
    "RequestOptions",
    "SearchAPI",
    "UserAPI",
    "api_fetch",
]
