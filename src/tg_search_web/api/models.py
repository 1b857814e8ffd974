"""
Pydantic 模型定义

定义 Mock API 的请求/响应模型
"""

from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from tg_search_web.services.contracts import TrendingEntry

T = TypeVar("T")


# ============ 通用响应模型 ============


class Envelope(BaseModel, Generic[T]):
    """后端信封 {code, data}"""

    code: int = 200
    data: T


class ErrorResponse(BaseModel):
    """错误响应"""

    success: bool = False
    error_code: str
    message: str
    details: Optional[Any] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)


# ============ 搜索相关 ============


class SearchHit(BaseModel):
    """/api/search 单条结果"""

    id: str
    content: str
    sender: str
    source: str
    type: str
    timestamp: str
    relevance: float = Field(ge=0.0, le=1.0)


class SearchResponse(BaseModel):
    """GET /api/search 响应"""

    results: List[SearchHit]
    total: int
    page: int
    limit: int
    pages: int


class SuggestionsData(BaseModel):
    suggestions: List[str]


class TrendingData(BaseModel):
    trending: List[TrendingEntry]


class HotSearchItem(BaseModel):
    """GET /api/search/trending 条目"""

    keyword: str
    trend: str
    count: int
    rank: int
    category: str


# ============ 机器人相关 ============


class BotSummary(BaseModel):
    """GET /api/bot/status 中的机器人"""

    id: str
    name: str
    status: str
    lastActive: str


class BotStatusData(BaseModel):
    bots: List[BotSummary]


class BotDetail(BaseModel):
    """GET /api/bots/status 中的机器人详情"""

    id: int
    name: str
    status: str  # 'online' | 'offline' | 'starting'
    uptime: str
    messages: int
    responseTime: str
    errors: int
    lastActivity: str
    createdAt: str
    description: str


class BotsStatusResponse(BaseModel):
    success: bool = True
    bots: List[BotDetail]
    error: Optional[str] = None


class BotLoginRequest(BaseModel):
    code: Optional[str] = None


class BotLoginGenerateResponse(BaseModel):
    loginCode: str
    token: str


# ============ 用户相关 ============


class LoginRequest(BaseModel):
    """两步登录请求：无 code 时发送验证码"""

    phone_number: Optional[str] = None
    code: Optional[str] = None


class UserProfile(BaseModel):
    id: str
    name: str
    email: str
    avatar: str


class CollectRequest(BaseModel):
    chat_ids: Optional[List[Any]] = None
