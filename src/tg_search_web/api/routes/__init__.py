"""
API 路由模块

包含所有 Mock 端点定义
"""

from fastapi import APIRouter

from tg_search_web.api.routes import auth, bot, keywords, search, user

# 创建主路由器
api_router = APIRouter(prefix="/api")

# 搜索建议 / 热门关键字（信封格式）
api_router.include_router(keywords.router, tags=["Keywords"])

# 搜索端点（裸 JSON）
api_router.include_router(search.router, prefix="/search", tags=["Search"])

# 机器人状态与登录码
api_router.include_router(bot.router, prefix="/bot", tags=["Bot"])
api_router.include_router(bot.bots_router, prefix="/bots", tags=["Bot"])

# 登录
api_router.include_router(auth.router, tags=["Auth"])

# 用户信息与采集配置
api_router.include_router(user.router, tags=["User"])

__all__ = ["api_router"]
