from __future__ import annotations

from abc import ABC, abstractmethod

from vehicle_sms.domain.notification import Notice, Severity


class Notifier(ABC):
    """
    Port for transient user-facing messages.

    Passed explicitly into the use cases so they run headless in tests.
    """

    @abstractmethod
    def notify(self, severity: Severity, message: str) -> Notice: ...

    def success(self, message: str) -> Notice:
        return self.notify(Severity.SUCCESS, message)

    def warning(self, message: str) -> Notice:
        return self.notify(Severity.WARNING, message)

    def error(self, message: str) -> Notice:
        return self.notify(Severity.ERROR, message)
