from fastapi import APIRouter, Depends, Response, status

from vehicle_sms.adapters.scroll_viewport import ScrollViewport
from vehicle_sms.entrypoints.http.dependencies import (
    get_scroll_viewport,
    get_table_host,
    get_vehicle_table,
)
from vehicle_sms.entrypoints.http.dtos.vehicle_table import (
    PhoneEditRequestDTO,
    PhoneEditResponseDTO,
    ScrollRequestDTO,
    SearchRequestDTO,
    SmsDispatchResponseDTO,
    TableStateDTO,
)
from vehicle_sms.entrypoints.http.error_responses import ErrorResponse
from vehicle_sms.entrypoints.http.mappers.vehicle_table_mapper import VehicleTableMapper
from vehicle_sms.entrypoints.http.table_host import TableHost
from vehicle_sms.use_cases.vehicle_table import VehicleTable


router = APIRouter(tags=["Vehicle table"])

NOT_MOUNTED = {404: {"model": ErrorResponse, "description": "No vehicle table is mounted"}}


@router.post(
    "/table",
    response_model=TableStateDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Mount the vehicle table",
    description="""
    Mount a fresh vehicle table and load the catalog (one request, 100 records).

    Mounting while a table is already mounted tears the old one down first,
    dropping its selection and phone number. A failed catalog fetch leaves an
    empty table and raises an error notification; mount again to retry.
    """,
)
def mount_table(host: TableHost = Depends(get_table_host)) -> TableStateDTO:
    table = host.mount()
    return VehicleTableMapper.to_state(table.snapshot())


@router.get(
    "/table",
    response_model=TableStateDTO,
    summary="Get table state",
    responses=NOT_MOUNTED,
)
def get_table(table: VehicleTable = Depends(get_vehicle_table)) -> TableStateDTO:
    return VehicleTableMapper.to_state(table.snapshot())


@router.delete(
    "/table",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Unmount the vehicle table",
    responses=NOT_MOUNTED,
)
def unmount_table(host: TableHost = Depends(get_table_host)) -> Response:
    host.unmount()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/table/search",
    response_model=TableStateDTO,
    summary="Filter by model name",
    description="""
    Apply a case-insensitive substring filter on the model name.

    A new query resets the visible rows to the first 10 matches and re-enables
    scroll loading. Sending the current query again changes nothing.
    """,
    responses=NOT_MOUNTED,
)
def search_table(
    payload: SearchRequestDTO,
    table: VehicleTable = Depends(get_vehicle_table),
) -> TableStateDTO:
    return VehicleTableMapper.to_state(table.search(payload.query))


@router.post(
    "/table/scroll",
    response_model=TableStateDTO,
    summary="Report a scroll position",
    description="""
    Report the scrolling element's metrics.

    Entering the last 100 pixels of content reveals 10 more rows, unless the
    catalog is still loading or every matching row is already visible.
    Staying at the bottom does not reveal more; scroll away and back.
    """,
    responses={**NOT_MOUNTED, 422: {"model": ErrorResponse, "description": "Negative metrics"}},
)
def report_scroll(
    payload: ScrollRequestDTO,
    table: VehicleTable = Depends(get_vehicle_table),
    viewport: ScrollViewport = Depends(get_scroll_viewport),
) -> TableStateDTO:
    viewport.report(VehicleTableMapper.to_scroll_position(payload))
    return VehicleTableMapper.to_state(table.snapshot())


@router.post(
    "/table/selection/{vehicle_id}",
    response_model=TableStateDTO,
    summary="Toggle a row's selection",
    responses=NOT_MOUNTED,
)
def toggle_selection(
    vehicle_id: str,
    table: VehicleTable = Depends(get_vehicle_table),
) -> TableStateDTO:
    return VehicleTableMapper.to_state(table.toggle(vehicle_id))


@router.put(
    "/table/phone",
    response_model=PhoneEditResponseDTO,
    summary="Edit the phone number field",
    description="""
    Propose a new value for the phone field.

    Only 0-10 ASCII digits are accepted. Anything else is rejected and the
    field keeps its previous value (`accepted` is false).
    """,
    responses=NOT_MOUNTED,
)
def edit_phone(
    payload: PhoneEditRequestDTO,
    table: VehicleTable = Depends(get_vehicle_table),
) -> PhoneEditResponseDTO:
    return VehicleTableMapper.to_phone_edit(table.edit_phone(payload.value))


@router.post(
    "/table/sms",
    response_model=SmsDispatchResponseDTO,
    summary="Send the selected vehicles by SMS",
    description="""
    Send every selected vehicle to the phone number (prefixed with +91).

    The outcome is also reported through exactly one notification:
    - `sent`: success
    - `rejected`: webhook answered without `status: "success"`
    - `failed`: webhook unreachable
    - `no_selection`: nothing selected, no request made

    A phone number that is not 10 digits raises an additional warning.
    """,
    responses=NOT_MOUNTED,
)
def send_sms(table: VehicleTable = Depends(get_vehicle_table)) -> SmsDispatchResponseDTO:
    return VehicleTableMapper.to_dispatch(table.send_sms())
