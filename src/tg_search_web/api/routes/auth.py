"""
认证路由模块

两步登录模拟：先发送验证码，再校验验证码
"""

import re
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tg_search_web.api.deps import get_app_state
from tg_search_web.api.models import LoginRequest
from tg_search_web.api.state import AppState
from tg_search_web.core.logger import setup_logger

logger = setup_logger()

router = APIRouter()

MOCK_LOGIN_CODE = "12345"


def mask_phone_number(phone: str) -> str:
    """
    脱敏手机号

    例如: +8613800138000 -> +86***8000
    """
    if len(phone) < 8:
        return phone[:2] + "***" + phone[-2:]
    return phone[:3] + "***" + phone[-4:]


def validate_phone_number(phone: str) -> bool:
    """验证手机号格式（国际格式: +国家代码+号码）"""
    return bool(re.match(r"^\+\d{7,15}$", phone))


@router.post("/login", summary="登录（模拟）")
async def login(
    request_data: LoginRequest,
    app_state: AppState = Depends(get_app_state),
):
    await app_state.simulate_latency(260)
    phone = request_data.phone_number

    # 没有 code：模拟发送验证码
    if not request_data.code:
        if not phone:
            return JSONResponse(status_code=400, content={"status": "error", "message": "电话号码不能为空"})
        if not validate_phone_number(phone):
            logger.info(f"Login requested with non-international phone format: {mask_phone_number(phone)}")
        return {"status": "success", "message": f"验证码已发送到 {phone}，请查收。"}

    if request_data.code == MOCK_LOGIN_CODE:
        return {
            "status": "success",
            "message": "登录成功",
            "token": f"mock-token-{int(time.time() * 1000)}",
            "user": {"name": "Mock User", "phone": phone},
        }
    return JSONResponse(status_code=401, content={"status": "error", "message": "验证码错误"})
