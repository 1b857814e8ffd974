"""
API 模块

提供 Mock 后端（FastAPI），支持：
- 模拟搜索、搜索建议、热门关键字
- 机器人状态与登录码流程
- 两步登录、用户信息、采集配置
"""

from tg_search_web.api.app import build_app

__all__ = ["build_app"]
