"""
关键字 API 路由

搜索建议与热门关键字，响应包裹在 {code, data} 信封中
"""

from fastapi import APIRouter, Depends, Query

from tg_search_web.api.deps import get_app_state
from tg_search_web.api.models import Envelope, SuggestionsData, TrendingData
from tg_search_web.api.state import AppState
from tg_search_web.services.mock_data import generate_suggestions, generate_trending

router = APIRouter()

SUGGESTION_WORDS = ("news", "sports", "music", "tech", "movie", "Svelte", "Kit", "Telegram", "AI")
SUGGESTION_LIMIT = 8


@router.get("/suggestions", response_model=Envelope[SuggestionsData], summary="搜索建议")
async def get_suggestions(
    q: str = Query("", description="搜索关键词"),
    app_state: AppState = Depends(get_app_state),
) -> Envelope[SuggestionsData]:
    await app_state.simulate_latency(120)
    suggestions = generate_suggestions(q, SUGGESTION_WORDS, limit=SUGGESTION_LIMIT)
    return Envelope(data=SuggestionsData(suggestions=suggestions))


@router.get("/trending", response_model=Envelope[TrendingData], summary="热门关键字")
async def get_trending(app_state: AppState = Depends(get_app_state)) -> Envelope[TrendingData]:
    await app_state.simulate_latency(150)
    return Envelope(data=TrendingData(trending=generate_trending()))
