from __future__ import annotations

import logging

from storefront_catalog.ports.notifier import NotificationKind, Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Delivers notifications as structured log records."""

    def notify(self, kind: NotificationKind, title: str, message: str) -> None:
        level = logging.WARNING if kind is NotificationKind.ERROR else logging.INFO
        logger.log(
            level,
            "Shopper notification",
            extra={
                "notification_kind": kind.value,
                "title": title,
                "notification_message": message,
            },
        )
