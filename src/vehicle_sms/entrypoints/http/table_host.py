"""Holds the single vehicle table mounted in this process."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from vehicle_sms.adapters.notification_center import NotificationCenter
from vehicle_sms.adapters.scroll_viewport import ScrollViewport
from vehicle_sms.domain.errors import NotFoundError
from vehicle_sms.use_cases.vehicle_table import VehicleTable

logger = logging.getLogger(__name__)

TableFactory = Callable[[ScrollViewport, NotificationCenter], VehicleTable]


class TableHost:
    """
    Mount point for one VehicleTable.

    The viewport and notification center outlive individual tables, the way
    the window and the toast container outlive a component. Mounting again
    tears the current table down first, which is also how a failed catalog
    fetch is retried.
    """

    def __init__(
        self,
        table_factory: TableFactory,
        viewport: ScrollViewport,
        notifications: NotificationCenter,
    ) -> None:
        self._table_factory = table_factory
        self.viewport = viewport
        self.notifications = notifications
        self._table: VehicleTable | None = None
        self._lock = threading.Lock()

    def mount(self) -> VehicleTable:
        with self._lock:
            previous, self._table = self._table, None
        if previous is not None:
            previous.unmount()

        table = self._table_factory(self.viewport, self.notifications)
        with self._lock:
            self._table = table
        table.mount()

        logger.info("Vehicle table mounted")
        return table

    def current(self) -> VehicleTable:
        """
        Raises:
            NotFoundError: If no table is mounted
        """
        with self._lock:
            table = self._table
        if table is None:
            raise NotFoundError(resource="Vehicle table")
        return table

    def unmount(self) -> None:
        """
        Raises:
            NotFoundError: If no table is mounted
        """
        with self._lock:
            table, self._table = self._table, None
        if table is None:
            raise NotFoundError(resource="Vehicle table")

        table.unmount()
        logger.info("Vehicle table unmounted")
