"""
FastAPI 应用构建模块

提供 Mock 后端应用实例的创建和配置
"""

import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator

import meilisearch
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tg_search_web.api.models import ErrorResponse
from tg_search_web.api.routes import api_router
from tg_search_web.api.state import AppState
from tg_search_web.core.logger import setup_logger
from tg_search_web.services.contracts import DomainError

logger = setup_logger()

APP_VERSION = "1.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    应用生命周期管理

    在启动时初始化共享资源
    """
    from tg_search_web.config.settings import MEILI_HOST, MEILI_PASS

    app_state = AppState()
    app_state.start_time = datetime.utcnow()

    # meilisearch.Client 构造时不会建立连接，失败只会出现在 autocomplete 请求中
    app_state.meili_client = meilisearch.Client(MEILI_HOST, MEILI_PASS)
    logger.info("MeiliSearch client initialized (host=%s)", MEILI_HOST)

    app.state.app_state = app_state

    logger.info("Mock API server started (latency_scale=%.2f)", app_state.latency_scale)
    yield

    logger.info("Mock API server shutdown")


def build_app() -> FastAPI:
    """
    构建 FastAPI 应用实例

    Returns:
        配置好的 FastAPI 应用
    """
    app = FastAPI(
        title="Telegram Search Mock API",
        description="Mock JSON backend for the Telegram search web front-end",
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    from tg_search_web.config.settings import CORS_ORIGINS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 注册路由
    app.include_router(api_router)

    # 健康检查端点
    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}

    # 根端点
    @app.get("/", tags=["Root"])
    async def root():
        return {
            "name": "Telegram Search Mock API",
            "version": APP_VERSION,
            "docs": "/docs",
        }

    # 异常处理器
    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(
                error_code=exc.code.upper(),
                message=exc.message,
                details=exc.detail,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error_code="INTERNAL_ERROR",
                message="Internal server error",
                details=str(exc) if os.getenv("DEBUG", "false").lower() == "true" else None,
            ).model_dump(mode="json"),
        )

    return app


# 用于 uvicorn 直接运行
app = build_app()
