"""Mock data generators used by the mock backend routes.

Shapes are deterministic for a given input, while relevance, timestamps and trending
counts are randomized. Pass a seeded ``random.Random`` to make them reproducible.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from tg_search_web.services.contracts import DomainError, MockSearchPage, MockSearchRecord, TrendingEntry

MOCK_SEARCH_TOTAL = 100
# ~11.6 days
MOCK_TIMESTAMP_SPREAD_MS = 1_000_000_000
RESULT_TYPES = ("group", "channel", "private", "media", "link")

DEFAULT_SUGGESTIONS = (
    "Vue.js开发技巧",
    "React组件设计",
    "JavaScript异步编程",
    "CSS布局方案",
    "Node.js后端开发",
    "TypeScript类型系统",
    "Webpack配置优化",
    "Git版本控制",
    "Docker容器化",
    "API接口设计",
)

TRENDING_CATEGORIES: dict[str, tuple[tuple[str, int, str], ...]] = {
    "technology": (
        ("Vue3 Composition API", 2340, "up"),
        ("React Server Components", 1980, "hot"),
        ("TypeScript 5.0新特性", 1756, "up"),
        ("Vite 4.0构建优化", 1542, "stable"),
        ("Next.js 13 App Router", 1423, "up"),
    ),
    "blockchain": (
        ("以太坊2.0升级", 1890, "hot"),
        ("Web3开发入门", 1654, "up"),
        ("NFT智能合约", 1234, "stable"),
        ("DeFi协议分析", 987, "down"),
    ),
    "ai": (
        ("机器学习算法", 2156, "hot"),
        ("深度学习框架", 1876, "up"),
        ("自然语言处理", 1543, "stable"),
        ("计算机视觉", 1321, "up"),
    ),
    "mobile": (
        ("Flutter跨平台开发", 1678, "up"),
        ("React Native性能优化", 1456, "stable"),
        ("iOS SwiftUI", 1234, "up"),
        ("Android Jetpack Compose", 1123, "hot"),
    ),
    "devops": (
        ("Docker容器化部署", 1789, "stable"),
        ("Kubernetes集群管理", 1567, "up"),
        ("CI/CD自动化流程", 1345, "stable"),
        ("微服务架构设计", 1234, "up"),
    ),
}
TRENDING_TOP_N = 20
TRENDING_JITTER = 50

_default_rng = random.Random()


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else _default_rng


def generate_search_results(
    query: str,
    page: int,
    size: int,
    *,
    total: int = MOCK_SEARCH_TOTAL,
    rng: random.Random | None = None,
) -> MockSearchPage:
    """Fabricate the ``page`` window (1-based) of a ``total``-sized result set."""
    if page < 1:
        raise DomainError("mock_invalid_page", "page must be >= 1")
    if size < 1:
        raise DomainError("mock_invalid_page", "size must be >= 1")

    r = _rng(rng)
    now = datetime.now(timezone.utc)
    start = (page - 1) * size
    end = min(start + size, total)

    results: list[MockSearchRecord] = []
    for i in range(start, end):
        n = i + 1
        age = timedelta(milliseconds=r.random() * MOCK_TIMESTAMP_SPREAD_MS)
        results.append(
            MockSearchRecord(
                id=n,
                title=f"关于“{query}”的模拟结果 {n}",
                content=f"这是关于“{query}”的第 {n} 条模拟搜索结果的详细内容。此内容由模拟数据生成器提供，用于在API不可用时提供前端页面测试和展示。",
                sender=f"user_{n}",
                source=f"模拟来源 {i % 5 + 1}",
                type=RESULT_TYPES[i % len(RESULT_TYPES)],
                timestamp=(now - age).isoformat().replace("+00:00", "Z"),
                relevance=r.random(),
                interactions=r.randrange(1000),
            )
        )

    return MockSearchPage(results=results, total=total)


def generate_suggestions(
    query: str,
    candidates: Sequence[str] = DEFAULT_SUGGESTIONS,
    limit: int = 5,
) -> list[str]:
    """Case-insensitive substring match over ``candidates``, order preserved."""
    needle = query.lower()
    return [word for word in candidates if needle in word.lower()][:limit]


def generate_trending(*, top_n: int = TRENDING_TOP_N, rng: random.Random | None = None) -> list[TrendingEntry]:
    """
    Merge all categories, jitter each count, then rank by the jittered count.

    Jitter is applied before sorting so the returned order always matches the returned counts.
    """
    r = _rng(rng)
    jittered: list[tuple[str, int, str, str]] = []
    for category, items in TRENDING_CATEGORIES.items():
        for keyword, count, trend in items:
            jittered.append((keyword, count + r.randrange(-TRENDING_JITTER, TRENDING_JITTER), trend, category))

    jittered.sort(key=lambda item: item[1], reverse=True)

    return [
        TrendingEntry(keyword=keyword, count=count, trend=trend, category=category, rank=rank)
        for rank, (keyword, count, trend, category) in enumerate(jittered[:top_n], start=1)
    ]
