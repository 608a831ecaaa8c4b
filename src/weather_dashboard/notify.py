"""User-visible notifications (the browser ``alert`` of the dashboard)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Notifier:
    """Queues messages for the user; each is shown once by the page, then dropped."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        logger.info("Notify: %s", message)
        self.messages.append(message)

    def drain(self) -> list[str]:
        """Pending messages, emptying the queue."""
        pending, self.messages = self.messages, []
        return pending
