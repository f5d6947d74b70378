"""Vehicle table component.

Owns the state of one mounted table and applies UI events to it one at a
time. Outbound calls (catalog fetch, SMS send) run outside the state lock so
other events can be applied while they are in flight; their results are then
applied in a single locked step.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from vehicle_sms.domain.phone import apply_phone_edit
from vehicle_sms.domain.selection import Selection
from vehicle_sms.domain.view_state import INITIAL_REVEAL_COUNT, REVEAL_INCREMENT, TableView
from vehicle_sms.ports.viewport import ViewportSignal
from vehicle_sms.use_cases.load_vehicle_catalog import (
    LoadVehicleCatalog,
    LoadVehicleCatalogResponse,
)
from vehicle_sms.use_cases.send_vehicle_sms import (
    SendVehicleSms,
    SendVehicleSmsRequest,
    SendVehicleSmsResponse,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TableSnapshot:
    """Consistent copy of the table state at one point in time."""

    view: TableView
    selection: Selection
    phone_number: str
    loading: bool
    mounted: bool


@dataclass(frozen=True, slots=True)
class PhoneEdit:
    accepted: bool
    phone_number: str


class VehicleTable:
    """
    Searchable, incrementally revealed vehicle table with SMS dispatch.

    Lifecycle:
    - mount(): subscribe to the viewport once, then fetch the catalog once
    - unmount(): unsubscribe and drop all state, including the selection
    """

    def __init__(
        self,
        load_vehicle_catalog: LoadVehicleCatalog,
        send_vehicle_sms: SendVehicleSms,
        viewport: ViewportSignal,
        initial_reveal_count: int = INITIAL_REVEAL_COUNT,
        reveal_increment: int = REVEAL_INCREMENT,
    ) -> None:
        self._load_vehicle_catalog = load_vehicle_catalog
        self._send_vehicle_sms = send_vehicle_sms
        self._viewport = viewport
        self._initial_reveal_count = initial_reveal_count
        self._reveal_increment = reveal_increment

        self._lock = threading.Lock()
        self._mounted = False
        self._reset_state()

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    def mount(self) -> TableSnapshot:
        """Attach to the viewport and load the catalog. Mounting twice is a no-op."""
        with self._lock:
            if self._mounted:
                return self._snapshot()
            self._mounted = True

        self._viewport.subscribe(self._on_near_bottom)
        self.refresh()
        return self.snapshot()

    def unmount(self) -> None:
        self._viewport.unsubscribe(self._on_near_bottom)
        with self._lock:
            self._mounted = False
            self._reset_state()

    def refresh(self) -> TableSnapshot:
        """Fetch the catalog and replace the full vehicle set (mounted tables only)."""
        with self._lock:
            self._loading = True

        response: LoadVehicleCatalogResponse | None = None
        try:
            response = self._load_vehicle_catalog.execute()
        finally:
            with self._lock:
                # Results arriving after unmount are dropped
                if response is not None and self._mounted:
                    self._view = self._view.with_vehicles(response.vehicles)
                self._loading = False
            self._viewport.rearm()

        return self.snapshot()

    # ==========================================================================
    # UI events
    # ==========================================================================

    def search(self, query: str) -> TableSnapshot:
        with self._lock:
            before = self._view
            self._view = self._view.with_query(query)
            snapshot = self._snapshot()

        if snapshot.view is not before:
            self._viewport.rearm()
        return snapshot

    def reveal_more(self) -> TableSnapshot:
        """
        Extend the visible slice unless a fetch is running or nothing is left.

        A request that reveals nothing re-arms the viewport, so the next
        near-bottom report is not lost to the edge latch.
        """
        with self._lock:
            before = self._view.reveal_count
            if not self._loading and self._view.load_more:
                self._view = self._view.reveal_more()
            snapshot = self._snapshot()

        if snapshot.view.reveal_count == before:
            self._viewport.rearm()
        else:
            logger.debug(
                "Revealed more vehicles",
                extra={"from_count": before, "to_count": snapshot.view.reveal_count},
            )
        return snapshot

    def toggle(self, vehicle_id: str) -> TableSnapshot:
        with self._lock:
            self._selection = self._selection.toggle(vehicle_id)
            return self._snapshot()

    def edit_phone(self, value: str) -> PhoneEdit:
        with self._lock:
            self._phone_number = apply_phone_edit(self._phone_number, value)
            return PhoneEdit(
                accepted=self._phone_number == value,
                phone_number=self._phone_number,
            )

    def send_sms(self) -> SendVehicleSmsResponse:
        with self._lock:
            request = SendVehicleSmsRequest(
                phone_number=self._phone_number,
                selection=self._selection,
                vehicles=self._view.vehicles,
            )

        return self._send_vehicle_sms.execute(request)

    def snapshot(self) -> TableSnapshot:
        with self._lock:
            return self._snapshot()

    # ==========================================================================
    # Internals
    # ==========================================================================

    def _on_near_bottom(self) -> None:
        self.reveal_more()

    def _reset_state(self) -> None:
        self._view = TableView(
            initial_count=self._initial_reveal_count,
            increment=self._reveal_increment,
        )
        self._selection = Selection()
        self._phone_number = ""
        self._loading = False

    def _snapshot(self) -> TableSnapshot:
        return TableSnapshot(
            view=self._view,
            selection=self._selection,
            phone_number=self._phone_number,
            loading=self._loading,
            mounted=self._mounted,
        )
