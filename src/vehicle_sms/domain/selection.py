from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from vehicle_sms.domain.vehicle import Vehicle


@dataclass(frozen=True, slots=True)
class Selection:
    """Selected vehicle identifiers, tracked independently of what is visible."""

    ids: frozenset[str] = frozenset()

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def toggle(self, vehicle_id: str) -> Selection:
        if vehicle_id in self.ids:
            return Selection(self.ids - {vehicle_id})
        return Selection(self.ids | {vehicle_id})

    def pick(self, vehicles: Iterable[Vehicle]) -> list[Vehicle]:
        """Selected vehicles in the order they appear in `vehicles`."""
        return [vehicle for vehicle in vehicles if vehicle.id is not None and vehicle.id in self.ids]
