"""Service-layer contracts for mock search data and toast messages."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class DomainError(Exception):
    """Structured domain error used by service layer."""

    def __init__(self, code: str, message: str, detail: str | None = None) -> None:
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message}: {detail}")


ToastType = Literal["info", "success", "error"]
TrendDirection = Literal["up", "down", "stable", "hot"]


class MockSearchRecord(BaseModel):
    """Fabricated search hit served by the mock backend."""

    id: int
    title: str
    content: str
    sender: str
    source: str
    type: str
    timestamp: str
    relevance: float = Field(ge=0.0, le=1.0)
    interactions: int = 0


class MockSearchPage(BaseModel):
    """One page window over a fixed-size mock result set."""

    results: list[MockSearchRecord] = Field(default_factory=list)
    total: int


class TrendingEntry(BaseModel):
    """Ranked trending keyword."""

    keyword: str
    count: int
    trend: TrendDirection
    category: str
    rank: int
