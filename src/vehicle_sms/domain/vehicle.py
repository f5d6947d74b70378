from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

PLACEHOLDER = "N/A"


@dataclass(frozen=True, slots=True)
class Vehicle:
    """
    One catalog record.

    The catalog owns the record shape, so only the fields the table needs
    for identity and filtering are lifted out. The untouched record is kept
    in `attributes` and is what gets forwarded on dispatch.
    """

    id: str | None
    model: str
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Vehicle:
        raw_id = record.get("id")
        raw_model = record.get("model")
        return cls(
            id=str(raw_id) if raw_id is not None else None,
            model=str(raw_model) if raw_model is not None else "",
            attributes=MappingProxyType(dict(record)),
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on the model name."""
        return query.lower() in self.model.lower()

    def to_record(self) -> dict[str, Any]:
        return dict(self.attributes)


@dataclass(frozen=True, slots=True)
class VehicleRow:
    """Display values for one table row; every cell is already a string."""

    id: str | None
    model: str
    make: str
    cylinders: str
    engine_description: str
    fuel_cost: str
    year: str
    co2_tailpipe_gpm: str
    vehicle_class: str
    you_save_spend: str
    ev_motor: str


def _display(value: Any) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


def to_display_row(vehicle: Vehicle) -> VehicleRow:
    """
    Map a record to its display row.

    Fuel cost reads `fuelcost08`, falling back to `fuelcosta08` when the first
    is falsy. Any absent cell renders as PLACEHOLDER.
    """
    attrs = vehicle.attributes
    return VehicleRow(
        id=vehicle.id,
        model=_display(attrs.get("model")),
        make=_display(attrs.get("make")),
        cylinders=_display(attrs.get("cylinders")),
        engine_description=_display(attrs.get("eng_dscr")),
        fuel_cost=_display(attrs.get("fuelcost08") or attrs.get("fuelcosta08")),
        year=_display(attrs.get("year")),
        co2_tailpipe_gpm=_display(attrs.get("co2tailpipegpm")),
        vehicle_class=_display(attrs.get("vclass")),
        you_save_spend=_display(attrs.get("yousavespend")),
        ev_motor=_display(attrs.get("Evmotor") or None),
    )
