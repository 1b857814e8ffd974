"""Insertion-ordered toast message queue with cancellable TTL timers."""

from __future__ import annotations

import asyncio
import itertools
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass

from tg_search_web.config.settings import TOAST_DEFAULT_TTL_MS
from tg_search_web.core.logger import setup_logger
from tg_search_web.services.contracts import DomainError, ToastType

logger = setup_logger()

TOAST_TYPES = ("info", "success", "error")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


@dataclass(frozen=True, slots=True)
class MessageItem:
    id: str
    type: ToastType
    text: str
    ttl: int


ToastSubscriber = Callable[[tuple[MessageItem, ...]], None]


class ToastQueue:
    """
    Global message (toast) queue.

    Every pushed item is removed automatically after ``ttl`` milliseconds. Removing an item
    explicitly also cancels its pending timer. Mutations must happen on the event loop thread.
    """

    def __init__(self, *, default_ttl_ms: int = TOAST_DEFAULT_TTL_MS) -> None:
        self._default_ttl_ms = default_ttl_ms
        self._items: dict[str, MessageItem] = {}
        self._timers: dict[str, asyncio.TimerHandle] = {}
        self._subscribers: set[ToastSubscriber] = set()
        self._seq = itertools.count()

    @property
    def items(self) -> tuple[MessageItem, ...]:
        return tuple(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def _new_id(self) -> str:
        # random + ms timestamp + per-queue sequence keeps ids unique over the queue lifetime
        rand = _base36(secrets.randbits(40))
        stamp = _base36(time.time_ns() // 1_000_000)
        return f"{rand}{stamp}{_base36(next(self._seq))}"

    def subscribe(self, subscriber: ToastSubscriber) -> Callable[[], None]:
        """Register a callback invoked with the current snapshot after every change."""
        self._subscribers.add(subscriber)

        def _unsubscribe() -> None:
            self._subscribers.discard(subscriber)

        return _unsubscribe

    def _notify(self) -> None:
        snapshot = self.items
        for subscriber in tuple(self._subscribers):
            try:
                subscriber(snapshot)
            except Exception as exc:
                logger.warning(
                    "[ToastQueue] subscriber raised: %s: %s",
                    type(exc).__name__,
                    exc,
                )

    def push(self, type: ToastType, text: str, ttl: int | None = None) -> str:
        """Append a message and schedule its removal. Returns the message id."""
        if type not in TOAST_TYPES:
            raise DomainError("toast_invalid_type", f"unknown toast type: {type!r}")
        ttl_ms = self._default_ttl_ms if ttl is None else int(ttl)

        loop = asyncio.get_running_loop()
        item = MessageItem(id=self._new_id(), type=type, text=text, ttl=ttl_ms)
        self._items[item.id] = item
        self._timers[item.id] = loop.call_later(max(ttl_ms, 0) / 1000, self._expire, item.id)
        logger.debug("[ToastQueue] push id=%s type=%s ttl_ms=%d", item.id, type, ttl_ms)
        self._notify()
        return item.id

    def _expire(self, message_id: str) -> None:
        self._timers.pop(message_id, None)
        if self._items.pop(message_id, None) is not None:
            self._notify()

    def remove(self, message_id: str) -> None:
        """Remove a message by id; unknown ids are ignored."""
        timer = self._timers.pop(message_id, None)
        if timer is not None:
            timer.cancel()
        if self._items.pop(message_id, None) is not None:
            self._notify()

    def clear(self) -> None:
        """Drop every message and cancel all pending timers."""
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        had_items = bool(self._items)
        self._items.clear()
        if had_items:
            self._notify()

    def info(self, text: str, ttl: int | None = None) -> str:
        return self.push("info", text, ttl)

    def success(self, text: str, ttl: int | None = None) -> str:
        return self.push("success", text, ttl)

    def error(self, text: str, ttl: int | None = None) -> str:
        return self.push("error", text, ttl)
