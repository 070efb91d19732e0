from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notifier(ABC):
    """
    Port for transient shopper notifications (toasts).

    Fire-and-forget: implementations must not raise and callers never
    consume a result.
    """

    @abstractmethod
    def notify(self, kind: NotificationKind, title: str, message: str) -> None: ...
