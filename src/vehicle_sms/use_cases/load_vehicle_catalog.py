"""Load vehicle catalog use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vehicle_sms.domain.errors import ExternalServiceError
from vehicle_sms.domain.vehicle import Vehicle
from vehicle_sms.ports.notifier import Notifier
from vehicle_sms.ports.vehicle_catalog import VehicleCatalog

logger = logging.getLogger(__name__)

CATALOG_PAGE_SIZE = 100
FETCH_FAILED_MESSAGE = "Error fetching vehicle data."


@dataclass(frozen=True, slots=True)
class LoadVehicleCatalogResponse:
    vehicles: tuple[Vehicle, ...]
    succeeded: bool


class LoadVehicleCatalog:
    """
    Fetch one fixed-size page of the catalog.

    Responsibilities:
    - Issue exactly one read against the catalog port
    - Convert raw records to Vehicle entities
    - On transport or format failure: log, raise one error notification
      and answer with an empty vehicle set (never re-raise, never retry)
    """

    def __init__(
        self,
        vehicle_catalog: VehicleCatalog,
        notifier: Notifier,
        page_size: int = CATALOG_PAGE_SIZE,
    ) -> None:
        self._catalog = vehicle_catalog
        self._notifier = notifier
        self._page_size = page_size

    def execute(self) -> LoadVehicleCatalogResponse:
        try:
            records = self._catalog.fetch(limit=self._page_size)
        except ExternalServiceError as exc:
            logger.error(
                "Error fetching vehicle data",
                exc_info=exc,
                extra={"error_code": exc.error_code, "context": exc.context},
            )
            self._notifier.error(FETCH_FAILED_MESSAGE)
            return LoadVehicleCatalogResponse(vehicles=(), succeeded=False)

        vehicles = tuple(Vehicle.from_record(record) for record in records)
        logger.info("Vehicle catalog loaded", extra={"count": len(vehicles)})
        return LoadVehicleCatalogResponse(vehicles=vehicles, succeeded=True)
