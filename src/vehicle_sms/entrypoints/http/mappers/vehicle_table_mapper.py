from __future__ import annotations

from vehicle_sms.domain.scroll import ScrollPosition
from vehicle_sms.domain.vehicle import Vehicle, to_display_row
from vehicle_sms.entrypoints.http.dtos.vehicle_table import (
    PhoneEditResponseDTO,
    ScrollRequestDTO,
    SmsDispatchResponseDTO,
    TableStateDTO,
    VehicleRowDTO,
)
from vehicle_sms.use_cases.send_vehicle_sms import SendVehicleSmsResponse
from vehicle_sms.use_cases.vehicle_table import PhoneEdit, TableSnapshot

EMPTY_MESSAGE = "No matching vehicles found"


class VehicleTableMapper:
    """Maps between REST DTOs and the vehicle table component."""

    @staticmethod
    def to_scroll_position(dto: ScrollRequestDTO) -> ScrollPosition:
        return ScrollPosition(
            scroll_top=dto.scroll_top,
            scroll_height=dto.scroll_height,
            client_height=dto.client_height,
        )

    @staticmethod
    def to_row(vehicle: Vehicle, selected: bool) -> VehicleRowDTO:
        """
        Converts a vehicle to its table row.

        Args:
            vehicle: Domain vehicle
            selected: Whether the row's checkbox is ticked

        Returns:
            VehicleRowDTO: Display strings with placeholders for absent cells
        """
        row = to_display_row(vehicle)
        return VehicleRowDTO(
            id=row.id,
            selected=selected,
            model=row.model,
            make=row.make,
            cylinders=row.cylinders,
            engine_description=row.engine_description,
            fuel_cost=row.fuel_cost,
            year=row.year,
            co2_tailpipe_gpm=row.co2_tailpipe_gpm,
            vehicle_class=row.vehicle_class,
            you_save_spend=row.you_save_spend,
            ev_motor=row.ev_motor,
        )

    @staticmethod
    def to_state(snapshot: TableSnapshot) -> TableStateDTO:
        """
        Converts a table snapshot to the render state.

        Only the visible slice becomes rows; selected ids are listed in full
        because the selection outlives the slice.
        """
        view = snapshot.view
        selection = snapshot.selection
        return TableStateDTO(
            loading=snapshot.loading,
            query=view.query,
            total=len(view.vehicles),
            matching=len(view.filtered),
            visible=view.reveal_count,
            load_more=view.load_more,
            rows=[
                VehicleTableMapper.to_row(vehicle, vehicle.id in selection)
                for vehicle in view.visible
            ],
            empty_message=EMPTY_MESSAGE if view.is_empty else None,
            selected_ids=sorted(selection.ids),
            phone_number=snapshot.phone_number,
        )

    @staticmethod
    def to_phone_edit(edit: PhoneEdit) -> PhoneEditResponseDTO:
        return PhoneEditResponseDTO(accepted=edit.accepted, phone_number=edit.phone_number)

    @staticmethod
    def to_dispatch(response: SendVehicleSmsResponse) -> SmsDispatchResponseDTO:
        return SmsDispatchResponseDTO(
            outcome=response.outcome.value,
            sent_count=response.sent_count,
        )
