"""Failure notification collaborators."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Protocol

from asciimoji.logging import logger


class Notifier(Protocol):
    def notify_failure(self, title: str, message: str) -> Awaitable[None] | None: ...


class LogNotifier:
    """Default collaborator: failures end up in the structured log only."""

    def notify_failure(self, title: str, message: str) -> None:
        logger.error("failure_notification", title=title, message=message)


class CallbackNotifier:
    """Adapts a plain ``(title, message)`` callable, sync or async."""

    def __init__(self, callback: Callable[[str, str], Any]) -> None:
        self._callback = callback

    async def notify_failure(self, title: str, message: str) -> None:
        result = self._callback(title, message)
        if inspect.isawaitable(result):
            await result


async def deliver_failure(notifier: Notifier, title: str, message: str) -> None:
    """Send a notification without letting collaborator errors escape."""

    try:
        result = notifier.notify_failure(title, message)
        if inspect.isawaitable(result):
            await result
    except Exception as exc:
        logger.warning("failure_notification_failed", title=title, error=str(exc))


__all__ = ["CallbackNotifier", "LogNotifier", "Notifier", "deliver_failure"]
