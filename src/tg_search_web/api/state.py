"""
状态管理模块

提供应用状态容器与机器人扫码登录的内存登记表
"""

import asyncio
import random
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from tg_search_web.config.settings import BOT_LOGIN_CODE_TTL_SEC, BOT_LOGIN_MAX_CODES, MOCK_LATENCY_SCALE


@dataclass
class BotLoginEntry:
    """登录码登记信息"""

    token: str
    status: str  # 'pending' | 'success'，过期条目直接移除
    issued_at: float = 0.0


class BotLoginRegistry:
    """
    机器人登录码登记表

    仅保存在内存中，进程重启即丢失。超过 ttl_seconds 的登录码在下一次
    generate/find_by_token 时清除（查询结果即为 expired），条目数不超过 max_entries
    """

    def __init__(
        self,
        ttl_seconds: float = BOT_LOGIN_CODE_TTL_SEC,
        max_entries: int = BOT_LOGIN_MAX_CODES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._codes: Dict[str, BotLoginEntry] = {}
        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock

    def _purge(self) -> None:
        deadline = self._clock() - self._ttl_seconds
        for code in [c for c, entry in self._codes.items() if entry.issued_at <= deadline]:
            del self._codes[code]
        # dict 保持插入顺序，超出上限时淘汰最早的登录码
        while len(self._codes) > self._max_entries:
            del self._codes[next(iter(self._codes))]

    def generate(self) -> tuple[str, str]:
        """生成 6 位登录码与对应 token，返回 (code, token)"""
        code = str(random.randint(100000, 999999))
        token = f"token-{int(time.time() * 1000)}"
        # 重复的登录码重新计入插入顺序
        self._codes.pop(code, None)
        self._codes[code] = BotLoginEntry(token=token, status="pending", issued_at=self._clock())
        self._purge()
        return code, token

    def find_by_token(self, token: str) -> Optional[BotLoginEntry]:
        self._purge()
        for entry in self._codes.values():
            if entry.token == token:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._codes)


class AppState:
    """
    应用状态容器

    在 FastAPI lifespan 中初始化，通过 app.state 访问
    """

    def __init__(self, latency_scale: float = MOCK_LATENCY_SCALE):
        self.start_time: Optional[datetime] = None
        # 模拟延迟倍率（测试中置 0）
        self.latency_scale: float = latency_scale
        self.bot_login_registry: BotLoginRegistry = BotLoginRegistry()
        # MeiliSearch 客户端（在 lifespan 中初始化，仅 autocomplete 使用）
        self.meili_client: Optional[Any] = None

    @property
    def uptime_seconds(self) -> float:
        if self.start_time is None:
            return 0.0
        return (datetime.utcnow() - self.start_time).total_seconds()

    async def simulate_latency(self, ms: int) -> None:
        """模拟网络延迟"""
        delay = ms * self.latency_scale / 1000
        if delay > 0:
            await asyncio.sleep(delay)
