from __future__ import annotations

import logging
import threading

from vehicle_sms.domain.scroll import NEAR_BOTTOM_MARGIN, ScrollPosition
from vehicle_sms.ports.viewport import NearBottomListener, ViewportSignal

logger = logging.getLogger(__name__)


class ScrollViewport(ViewportSignal):
    """
    Turns raw scroll positions into near-bottom signals.

    Edge-triggered: listeners fire when a report enters the near-bottom zone
    and not again until a later report has left it or the latch is re-armed.
    A burst of reports at the bottom of the page therefore fires once.
    Subscribing, unsubscribing and `rearm()` all reset the latch.
    """

    def __init__(self, margin: float = NEAR_BOTTOM_MARGIN) -> None:
        self._margin = margin
        self._listeners: list[NearBottomListener] = []
        self._near_bottom = False
        self._lock = threading.Lock()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: NearBottomListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)
            self._near_bottom = False

    def unsubscribe(self, listener: NearBottomListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
            self._near_bottom = False

    def rearm(self) -> None:
        with self._lock:
            self._near_bottom = False

    def report(self, position: ScrollPosition) -> bool:
        """
        Record a scroll position and notify listeners on a crossing.

        Returns:
            True if listeners were notified

        Raises:
            ValidationError: If the position has negative metrics
        """
        position.validate()

        with self._lock:
            near_bottom = position.is_near_bottom(self._margin)
            crossed = near_bottom and not self._near_bottom
            self._near_bottom = near_bottom
            listeners = list(self._listeners) if crossed else []

        # Listeners run outside the lock; they may subscribe/unsubscribe
        for listener in listeners:
            listener()

        if crossed:
            logger.debug("Near-bottom signal", extra={"listeners": len(listeners)})
        return crossed
