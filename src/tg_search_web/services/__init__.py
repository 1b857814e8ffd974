"""Service-layer exports."""

from tg_search_web.services.contracts import (
    DomainError,
    MockSearchPage,
    MockSearchRecord,
    TrendingEntry,
)
from tg_search_web.services.mock_data import (
    generate_search_results,
    generate_suggestions,
    generate_trending,
)
from tg_search_web.services.toast_queue import MessageItem, ToastQueue

__all__ = [
    "DomainError",
    "MessageItem",
    "MockSearchPage",
    "MockSearchRecord",
    "ToastQueue",
    "TrendingEntry",
    "generate_search_results",
    "generate_suggestions",
    "generate_trending",
]
