from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from vehicle_sms.domain.errors import NotFoundError
from vehicle_sms.domain.notification import Notice, Severity
from vehicle_sms.ports.notifier import Notifier

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3.0


class NotificationCenter(Notifier):
    """
    In-memory toast stack.

    - Notices are numbered sequentially from 1
    - `active()` lists unexpired notices oldest first
    - Expired notices are dropped lazily on read
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._notices: list[Notice] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def notify(self, severity: Severity, message: str) -> Notice:
        with self._lock:
            notice = Notice(
                id=self._next_id,
                severity=severity,
                message=message,
                created_at=self._clock(),
            )
            self._next_id += 1
            self._notices.append(notice)

        logger.info(
            "Notification raised",
            extra={"notice_id": notice.id, "severity": severity.value, "notice": message},
        )
        return notice

    def active(self) -> list[Notice]:
        with self._lock:
            self._prune()
            return list(self._notices)

    def dismiss(self, notice_id: int) -> None:
        """
        Raises:
            NotFoundError: If the notice expired or was already dismissed
        """
        with self._lock:
            self._prune()
            for index, notice in enumerate(self._notices):
                if notice.id == notice_id:
                    del self._notices[index]
                    return
        raise NotFoundError(resource="Notification", identifier=str(notice_id))

    def _prune(self) -> None:
        now = self._clock()
        self._notices = [n for n in self._notices if not n.expired(now, self._ttl_seconds)]
