"""
搜索 API 路由

提供模拟搜索结果、搜索建议、热门搜索与 MeiliSearch 自动补全接口
"""

import math
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from meilisearch.errors import MeilisearchError

from tg_search_web.api.deps import MeiliSearchAsync, get_app_state, get_meili_async
from tg_search_web.api.models import HotSearchItem, SearchHit, SearchResponse
from tg_search_web.api.state import AppState
from tg_search_web.config.settings import AUTOCOMPLETE_INDEX
from tg_search_web.core.logger import setup_logger
from tg_search_web.services.contracts import DomainError

logger = setup_logger()

router = APIRouter()

# /api/search 模拟结果总数
SEARCH_ENDPOINT_TOTAL = 137
SEARCH_CHAT_TYPES = ("group", "channel", "bot")
SEARCH_TIMESTAMP_WINDOW = timedelta(days=7)
AUTOCOMPLETE_LIMIT = 10

HOT_SEARCHES = [
    HotSearchItem(keyword="SvelteKit", trend="hot", count=1200, rank=1, category="tech"),
    HotSearchItem(keyword="Telegram API", trend="up", count=980, rank=2, category="dev"),
    HotSearchItem(keyword="AI 助手", trend="up", count=850, rank=3, category="ai"),
    HotSearchItem(keyword="数据可视化", trend="stable", count=720, rank=4, category="tech"),
    HotSearchItem(keyword="Web3", trend="down", count=650, rank=5, category="blockchain"),
    HotSearchItem(keyword="机器学习", trend="hot", count=580, rank=6, category="ai"),
    HotSearchItem(keyword="区块链", trend="stable", count=520, rank=7, category="blockchain"),
    HotSearchItem(keyword="前端开发", trend="up", count=480, rank=8, category="dev"),
]


def build_search_hits(
    q: str,
    page: int,
    limit: int,
    filter: str = "all",
    *,
    total: int = SEARCH_ENDPOINT_TOTAL,
    rng: Optional[random.Random] = None,
) -> List[SearchHit]:
    """
    生成 /api/search 的一页结果

    id 形如 rec{n}；filter 为 all 时 type 随机取 group/channel/bot，否则固定为 filter
    """
    if page < 1 or limit < 1:
        raise DomainError("mock_invalid_page", f"page and limit must be >= 1 (got page={page}, limit={limit})")

    r = rng or random
    keyword = q or "关键词"
    now = datetime.now(timezone.utc)
    start = (page - 1) * limit
    end = min(start + limit, total)

    hits = []
    for n in range(start + 1, end + 1):
        chat_type = r.choice(SEARCH_CHAT_TYPES)
        timestamp = now - r.random() * SEARCH_TIMESTAMP_WINDOW
        hits.append(
            SearchHit(
                id=f"rec{n}",
                content=f"【{keyword}】的模拟结果 {n} —— 这是一条用于联调的占位内容。",
                sender=f"user_{n}",
                source=f"示例{chat_type}",
                type=chat_type if filter == "all" else filter,
                timestamp=timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
                relevance=round(r.random(), 2),
            )
        )
    return hits


@router.get(
    "",
    response_model=SearchResponse,
    summary="搜索消息（模拟）",
)
async def search_messages(
    q: str = Query("", max_length=500, description="搜索关键词"),
    page: int = Query(1, description="页码，从 1 开始"),
    limit: int = Query(20, le=100, description="每页数量"),
    filter: str = Query("all", description="类型过滤，all 表示不过滤"),
    sort: str = Query("relevance", description="排序: relevance/date，其他值按 relevance"),
    app_state: AppState = Depends(get_app_state),
) -> SearchResponse:
    """
    模拟分页与排序

    filter 非 all 时所有结果的 type 均为该值
    """
    await app_state.simulate_latency(180)

    results = build_search_hits(q, page, limit, filter)

    if sort == "date":
        results.sort(key=lambda r: datetime.fromisoformat(r.timestamp.replace("Z", "+00:00")), reverse=True)
    else:
        results.sort(key=lambda r: r.relevance, reverse=True)

    return SearchResponse(
        results=results,
        total=SEARCH_ENDPOINT_TOTAL,
        page=page,
        limit=limit,
        pages=math.ceil(SEARCH_ENDPOINT_TOTAL / limit),
    )


@router.get("/suggestions", response_model=List[str], summary="搜索建议（模拟）")
async def search_suggestions(
    q: str = Query("", description="搜索关键词"),
    app_state: AppState = Depends(get_app_state),
) -> List[str]:
    await app_state.simulate_latency(20)
    return [f"{q} 教程", f"{q} 案例", f"{q} 新闻", f"{q} 最佳实践", f"如何学习 {q}"]


@router.get("/trending", response_model=List[HotSearchItem], summary="热门搜索（模拟）")
async def search_trending(app_state: AppState = Depends(get_app_state)) -> List[HotSearchItem]:
    await app_state.simulate_latency(50)
    return HOT_SEARCHES


@router.get("/autocomplete", summary="自动补全", description="查询 MeiliSearch suggestions 索引")
async def autocomplete(
    q: str = Query("", description="搜索关键词"),
    meili: MeiliSearchAsync = Depends(get_meili_async),
):
    if not q:
        return JSONResponse(status_code=400, content={"error": 'Query parameter "q" is required'})

    try:
        result = await meili.search(q, AUTOCOMPLETE_INDEX, limit=AUTOCOMPLETE_LIMIT)
    except MeilisearchError as e:
        logger.error(f"Meilisearch error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch suggestions"})

    return result.get("hits", [])
