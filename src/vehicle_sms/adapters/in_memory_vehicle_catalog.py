from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vehicle_sms.ports.vehicle_catalog import VehicleCatalog


class InMemoryVehicleCatalog(VehicleCatalog):
    """
    Canonical contract implementation for tests.

    - Returns records in insertion order
    - Applies `limit` as a prefix, like the remote endpoint
    - Counts calls so tests can assert "exactly one fetch"
    """

    def __init__(self, records: list[Mapping[str, Any]]) -> None:
        self._records = records
        self.fetch_count = 0

    def fetch(self, limit: int) -> list[Mapping[str, Any]]:
        self.fetch_count += 1
        return [dict(record) for record in self._records[:limit]]
