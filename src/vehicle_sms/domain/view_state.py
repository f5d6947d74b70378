from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from vehicle_sms.domain.vehicle import Vehicle

INITIAL_REVEAL_COUNT = 10
REVEAL_INCREMENT = 10


def filter_vehicles(vehicles: Iterable[Vehicle], query: str) -> tuple[Vehicle, ...]:
    """Subsequence of `vehicles` whose model contains `query`, order preserved."""
    return tuple(vehicle for vehicle in vehicles if vehicle.matches(query))


@dataclass(frozen=True, slots=True)
class TableView:
    """
    Derived view of the vehicle table.

    Every transition returns a new TableView. The visible slice is always the
    first `reveal_count` entries of `filtered`.

    Invariants:
        - 0 <= reveal_count <= len(filtered)
        - reveal_count only grows between recomputations
        - load_more is False once the slice has reached len(filtered)
    """

    vehicles: tuple[Vehicle, ...] = ()
    query: str = ""
    filtered: tuple[Vehicle, ...] = ()
    reveal_count: int = 0
    load_more: bool = True
    initial_count: int = INITIAL_REVEAL_COUNT
    increment: int = REVEAL_INCREMENT

    @property
    def visible(self) -> tuple[Vehicle, ...]:
        return self.filtered[: self.reveal_count]

    @property
    def is_empty(self) -> bool:
        return not self.filtered

    def with_vehicles(self, vehicles: Iterable[Vehicle]) -> TableView:
        """Replace the full set and recompute."""
        return self._recompute(tuple(vehicles), self.query)

    def with_query(self, query: str) -> TableView:
        """Apply a new filter query. Re-applying the current query changes nothing."""
        if query == self.query:
            return self
        return self._recompute(self.vehicles, query)

    def reveal_more(self) -> TableView:
        """Grow the visible slice by one increment, capped at the filtered size."""
        if not self.load_more:
            return self

        target = self.reveal_count + self.increment
        total = len(self.filtered)
        if target >= total:
            return replace(self, reveal_count=total, load_more=False)
        return replace(self, reveal_count=target)

    def _recompute(self, vehicles: tuple[Vehicle, ...], query: str) -> TableView:
        filtered = filter_vehicles(vehicles, query)
        return replace(
            self,
            vehicles=vehicles,
            query=query,
            filtered=filtered,
            reveal_count=min(self.initial_count, len(filtered)),
            load_more=True,
        )
