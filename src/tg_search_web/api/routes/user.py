"""
用户与采集配置路由
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tg_search_web.api.deps import get_app_state
from tg_search_web.api.models import CollectRequest, UserProfile
from tg_search_web.api.state import AppState
from tg_search_web.core.logger import setup_logger

logger = setup_logger()

router = APIRouter()

MOCK_PROFILE = UserProfile(
    id="u007",
    name="Trae AI",
    email="trae@example.com",
    avatar="https://avatars.githubusercontent.com/u/106141222?s=200&v=4",
)


@router.get("/user/profile", response_model=UserProfile, summary="用户信息")
async def get_profile(app_state: AppState = Depends(get_app_state)) -> UserProfile:
    await app_state.simulate_latency(80)
    return MOCK_PROFILE


@router.post("/collect", summary="采集配置")
async def collect(
    request_data: CollectRequest,
    app_state: AppState = Depends(get_app_state),
):
    await app_state.simulate_latency(150)
    chat_ids = request_data.chat_ids
    if not chat_ids:
        return JSONResponse(status_code=400, content={"status": "error", "message": "群组 ID 列表不能为空"})

    logger.info(f"Mock: 收到配置请求，群组ID: {', '.join(str(cid) for cid in chat_ids)}")
    return {"status": "success", "message": f"已成功配置 {len(chat_ids)} 个群组。"}
