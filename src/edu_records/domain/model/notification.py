"""Outgoing notifications and their delivery sinks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    recipient: str
    message: str
    address: str | None = None

    @property
    def is_addressed(self) -> bool:
        return bool(self.address)

    def __str__(self) -> str:
        target = self.address if self.is_addressed else "no email on file"
        return f"Notification for {self.recipient} ({target}): {self.message}"


NotificationSink = Callable[[Notification], None]


def log_notification(notification: Notification) -> None:
    """Default sink: hand the rendered notification to the logger."""
    logger.info("%s", notification)
