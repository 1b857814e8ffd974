"""
依赖注入模块

提供 FastAPI 依赖注入函数
"""

import asyncio
import os
from functools import partial
from typing import TYPE_CHECKING, Any

from fastapi import Depends, HTTPException, Request

if TYPE_CHECKING:
    import meilisearch

    from tg_search_web.api.state import AppState, BotLoginRegistry


async def get_app_state(request: Request) -> "AppState":
    """获取应用状态"""
    return request.app.state.app_state


async def get_bot_login_registry(request: Request) -> "BotLoginRegistry":
    """获取登录码登记表"""
    app_state = await get_app_state(request)
    return app_state.bot_login_registry


async def get_meili_client(request: Request) -> "meilisearch.Client":
    """获取 MeiliSearch 客户端"""
    app_state = await get_app_state(request)
    if app_state.meili_client is None:
        raise HTTPException(status_code=503, detail="MeiliSearch client not initialized")
    return app_state.meili_client


async def run_sync_in_thread(func: Any, *args: Any, **kwargs: Any) -> Any:
    """
    将同步函数放入线程池执行

    用于包装 MeiliSearch 的同步调用，避免阻塞事件循环
    """
    # Escape hatch for unit tests / constrained environments.
    if os.getenv("DISABLE_THREAD_OFFLOAD", "").lower() in ("1", "true", "yes"):
        return func(*args, **kwargs)

    return await asyncio.to_thread(partial(func, *args, **kwargs))


class MeiliSearchAsync:
    """
    MeiliSearch 异步包装器

    将同步的 meilisearch.Client 索引搜索包装为异步版本
    """

    def __init__(self, client: "meilisearch.Client"):
        self._client = client

    async def search(self, query: str, index_name: str, **kwargs: Any) -> dict:
        """异步搜索"""
        index = self._client.index(index_name)
        return await run_sync_in_thread(index.search, query, kwargs)


async def get_meili_async(
    meili_client: "meilisearch.Client" = Depends(get_meili_client),
) -> MeiliSearchAsync:
    """获取异步 MeiliSearch 包装器"""
    return MeiliSearchAsync(meili_client)
