"""
统一 API 请求封装

ApiClient.api_fetch 负责：
- 基础地址解析（显式配置 → 当前 origin → DEFAULT_API_BASE）
- query 拼接（跳过 None 值）
- JSON Content-Type 与 Bearer 鉴权头
- 响应归一化为 ApiResult，永不抛出异常
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field

from tg_search_web.config import settings
from tg_search_web.core.logger import setup_logger

logger = setup_logger()

QueryValue = Union[str, int, float, bool, None]

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)

# 后端信封中表示成功的 code
BACKEND_SUCCESS_CODE = 200
FALLBACK_ERROR = "Request Error"


class ClientConfig(BaseModel):
    """请求客户端配置"""

    model_config = ConfigDict(frozen=True)

    api_base: Optional[str] = Field(default=None, description="显式配置的基础地址")
    auth_token: str = Field(default="", description="Bearer Token，空字符串表示不鉴权")
    origin: Optional[str] = Field(default=None, description="浏览器类上下文中的当前 origin")
    timeout: float = Field(default=settings.REQUEST_TIMEOUT_SEC, gt=0)

    @classmethod
    def from_settings(cls, *, origin: Optional[str] = None) -> "ClientConfig":
        """从 Dynaconf 配置构建"""
        return cls(
            api_base=settings.API_BASE,
            auth_token=settings.AUTH_TOKEN,
            origin=origin,
            timeout=settings.REQUEST_TIMEOUT_SEC,
        )

    def resolve_base(self) -> str:
        base = self.api_base or self.origin or settings.DEFAULT_API_BASE
        return base[:-1] if base.endswith("/") else base


class RequestOptions(BaseModel):
    """单次请求选项"""

    method: str = "GET"
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    query: Optional[Dict[str, QueryValue]] = None


class ApiResult(BaseModel):
    """统一请求结果"""

    ok: bool
    status: int
    data: Any = None
    error: Optional[str] = None


def _stringify(value: QueryValue) -> str:
    # 与浏览器 String(v) 保持一致
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _backend_ok(data: Any) -> bool:
    """
    信封检查

    带 code 字段的对象视为后端信封，必须 code == 200；
    其他对象/数组仅以 HTTP 状态为准；缺失或标量 body 视为失败。
    """
    if isinstance(data, dict):
        if "code" in data:
            return data["code"] == BACKEND_SUCCESS_CODE
        return True
    return isinstance(data, list)


def _error_message(data: Any, response: httpx.Response) -> str:
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.reason_phrase or FALLBACK_ERROR


class ApiClient:
    """
    统一 API 客户端

    可传入自定义 httpx.AsyncClient（测试中配合 MockTransport / ASGITransport）。
    未传入时自行创建并在 aclose() 中关闭。
    """

    def __init__(self, config: ClientConfig, *, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def build_url(self, path: str, query: Optional[Dict[str, QueryValue]] = None) -> httpx.URL:
        """path 以 http(s):// 开头时直接使用，否则基于 base 解析"""
        if _ABSOLUTE_URL.match(path):
            url = httpx.URL(path)
        else:
            url = httpx.URL(self.config.resolve_base() + "/").join(path)
        if query:
            for key, value in query.items():
                if value is not None:
                    url = url.copy_set_param(key, _stringify(value))
        return url

    def build_headers(self, extra: Optional[Dict[str, str]] = None) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": "application/json"})
        if self.config.auth_token:
            headers["Authorization"] = f"Bearer {self.config.auth_token}"
        for key, value in (extra or {}).items():
            headers[key] = value
        return headers

    async def api_fetch(self, path: str, options: Optional[RequestOptions] = None) -> ApiResult:
        """
        执行请求并归一化结果

        Args:
            path: 绝对地址或相对 base 的路径，例如 "/api/search"
            options: 请求选项

        Returns:
            ApiResult，传输失败时 status 为 0
        """
        opts = options or RequestOptions()
        method = opts.method.upper()
        try:
            url = self.build_url(path, opts.query)
            content = None
            if method != "GET" and opts.body is not None:
                content = json.dumps(opts.body, ensure_ascii=False).encode("utf-8")

            response = await self._client.request(
                method,
                url,
                headers=self.build_headers(opts.headers),
                content=content,
            )
            status = response.status_code
            data = _parse_json(response)

            if not response.is_success or not _backend_ok(data):
                error = _error_message(data, response)
                logger.warning(f"API request failed: {method} {url} status={status} error={error}")
                return ApiResult(ok=False, status=status, data=data, error=error)

            return ApiResult(ok=True, status=status, data=data)
        except Exception as e:
            error = str(e) or type(e).__name__
            logger.warning(f"API request error: {method} {path}: {type(e).__name__}: {error}")
            return ApiResult(ok=False, status=0, error=error)


async def api_fetch(
    path: str,
    options: Optional[RequestOptions] = None,
    *,
    config: Optional[ClientConfig] = None,
) -> ApiResult:
    """一次性调用：使用给定配置（默认读取 settings）执行单个请求"""
    async with ApiClient(config or ClientConfig.from_settings()) as client:
        return await client.api_fetch(path, options)
