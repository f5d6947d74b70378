from pydantic import BaseModel, ConfigDict, Field


class VehicleRowDTO(BaseModel):
    id: str | None
    selected: bool
    model: str
    make: str
    cylinders: str
    engine_description: str = Field(description="Engine displacement (eng_dscr)")
    fuel_cost: str = Field(description="fuelcost08, falling back to fuelcosta08")
    year: str
    co2_tailpipe_gpm: str = Field(description="CO2 tailpipe (co2tailpipegpm)")
    vehicle_class: str = Field(description="Vehicle class (vclass)")
    you_save_spend: str = Field(description="You save/spend (yousavespend)")
    ev_motor: str = Field(description="Electric vehicle motor (Evmotor)")


class TableStateDTO(BaseModel):
    """Everything needed to render the table after an event."""

    loading: bool = Field(description="A catalog fetch is in flight")
    query: str
    total: int = Field(description="Vehicles in the full set")
    matching: int = Field(description="Vehicles matching the query")
    visible: int = Field(description="Rows currently revealed")
    load_more: bool = Field(description="Scrolling can still reveal more rows")
    rows: list[VehicleRowDTO]
    empty_message: str | None = Field(
        default=None,
        description="Set when no vehicle matches the query",
    )
    selected_ids: list[str]
    phone_number: str


class SearchRequestDTO(BaseModel):
    query: str = Field(
        default="",
        description="Case-insensitive substring of the model name",
        examples=["civic"],
    )


class ScrollRequestDTO(BaseModel):
    """Scroll metrics of the scrolling element, in pixels."""

    scroll_top: float = Field(examples=[1800])
    scroll_height: float = Field(examples=[2400])
    client_height: float = Field(examples=[550])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"scroll_top": 1800, "scroll_height": 2400, "client_height": 550}
        }
    )


class PhoneEditRequestDTO(BaseModel):
    value: str = Field(
        description="Proposed content of the phone field",
        examples=["9876543210"],
    )


class PhoneEditResponseDTO(BaseModel):
    accepted: bool
    phone_number: str


class SmsDispatchResponseDTO(BaseModel):
    outcome: str = Field(examples=["sent", "rejected", "no_selection", "failed"])
    sent_count: int
