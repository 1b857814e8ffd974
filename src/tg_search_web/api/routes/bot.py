"""
机器人 API 路由

机器人状态与扫码登录（登录码）流程的模拟接口
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from tg_search_web.api.deps import get_app_state, get_bot_login_registry
from tg_search_web.api.models import (
    BotDetail,
    BotLoginGenerateResponse,
    BotLoginRequest,
    BotStatusData,
    BotsStatusResponse,
    BotSummary,
    Envelope,
)
from tg_search_web.api.state import AppState, BotLoginRegistry
from tg_search_web.core.logger import setup_logger

logger = setup_logger()

router = APIRouter()
bots_router = APIRouter()

# 示例验证码
MOCK_BOT_LOGIN_CODE = "123456"

BOT_DETAILS = [
    BotDetail(
        id=1,
        name="搜索机器人 #1",
        status="online",
        uptime="2天5小时",
        messages=1500,
        responseTime="120ms",
        errors=2,
        lastActivity="2分钟前",
        createdAt="2025-01-20",
        description="主要搜索服务机器人",
    ),
    BotDetail(
        id=2,
        name="搜索机器人 #2",
        status="online",
        uptime="1天12小时",
        messages=890,
        responseTime="95ms",
        errors=0,
        lastActivity="1分钟前",
        createdAt="2025-01-19",
        description="备用搜索服务机器人",
    ),
    BotDetail(
        id=3,
        name="搜索机器人 #3",
        status="starting",
        uptime="3小时",
        messages=45,
        responseTime="150ms",
        errors=1,
        lastActivity="5分钟前",
        createdAt="2025-01-22",
        description="新部署的测试机器人",
    ),
]


@router.get("/status", response_model=Envelope[BotStatusData], summary="机器人状态")
async def get_bot_status(app_state: AppState = Depends(get_app_state)) -> Envelope[BotStatusData]:
    await app_state.simulate_latency(200)
    bot = BotSummary(
        id="bot-1",
        name="tg_search_bot",
        status="online",
        lastActive=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
    return Envelope(data=BotStatusData(bots=[bot]))


@bots_router.get("/status", response_model=BotsStatusResponse, summary="我的机器人状态")
async def get_bots_status() -> BotsStatusResponse:
    """返回机器人详细状态信息，包含运行时间、消息处理量等统计数据"""
    return BotsStatusResponse(bots=BOT_DETAILS)


@router.post("/login", summary="登录码校验")
async def bot_login(request_data: BotLoginRequest):
    if request_data.code == MOCK_BOT_LOGIN_CODE:
        return {"status": "success"}
    return JSONResponse(status_code=401, content={"status": "error", "error": "无效的验证码"})


@router.post("/login/generate", response_model=BotLoginGenerateResponse, summary="生成登录码")
async def generate_login_code(
    registry: BotLoginRegistry = Depends(get_bot_login_registry),
) -> BotLoginGenerateResponse:
    code, token = registry.generate()
    logger.info(f"Bot login code issued, pending codes: {len(registry)}")
    return BotLoginGenerateResponse(loginCode=code, token=token)


@router.get("/login/status", summary="登录码状态")
async def get_login_status(
    token: Optional[str] = Query(None, description="generate 返回的 token"),
    registry: BotLoginRegistry = Depends(get_bot_login_registry),
):
    if not token:
        return JSONResponse(status_code=400, content={"error": "Token is required"})

    entry = registry.find_by_token(token)
    if entry is None:
        return JSONResponse(status_code=404, content={"status": "expired"})
    return {"status": entry.status}
