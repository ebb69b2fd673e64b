from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from box_office.service.ticketing.driving_adapter.schema.ticket_schema import TicketDetailResponse


class InitializeTicketsRequest(BaseModel):
    # seat_id -> category_id; seats not listed get the show's first category
    seat_categories: Dict[int, int] = Field(default_factory=dict)

    model_config = ConfigDict(json_schema_extra={'example': {'seat_categories': {'101': 2}}})


class InitializeTicketsResponse(BaseModel):
    message: str
    count: int


class CategoryCreateRequest(BaseModel):
    name: str
    price: Decimal
    color: Optional[str] = None
    text_color: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {'name': 'VIP', 'price': '750.00', 'color': '#FFD700', 'text_color': '#000'}
        }
    )


class CategoryUpdateRequest(BaseModel):
    name: Optional[str] = None
    price: Optional[Decimal] = None
    color: Optional[str] = None
    text_color: Optional[str] = None
    description: Optional[str] = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    show_id: int
    name: str
    price: Decimal
    color: Optional[str] = None
    text_color: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None


# ---- Seat map render model ----


class SeatVisualResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    status: str
    css_classes: List[str]
    background_color: Optional[str] = None
    text_color: Optional[str] = None


class SeatInputResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    row: str
    number: int
    status: Optional[str] = None
    category_color: Optional[str] = None
    category_text_color: Optional[str] = None


class SeatCellResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    seat: SeatInputResponse
    selected: bool
    visual: SeatVisualResponse
    override: Optional[Any] = None


class LayoutTokenResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: str
    cell: Optional[SeatCellResponse] = None
    label: Optional[str] = None


class StandardRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    seats: List[SeatCellResponse]


class SectionLayoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    type: str
    type_label: str
    seat_count: int
    rows: List[StandardRowResponse]


class TheaterRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    left_wing: List[SeatCellResponse]
    center_evens: List[SeatCellResponse]
    center_odds: List[SeatCellResponse]
    right_wing: List[SeatCellResponse]
    tokens: List[LayoutTokenResponse]


class TheaterBlockResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    left_wing_name: str
    center_name: str
    right_wing_name: str
    rows: List[TheaterRowResponse]


class SeatLayoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    mode: str
    theater: Optional[TheaterBlockResponse] = None
    sections: List[SectionLayoutResponse]


class FloorSeatMapResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    floor_id: int
    floor_name: str
    level: int
    layout: SeatLayoutResponse


class ShowSeatMapResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    show_id: int
    floors: List[FloorSeatMapResponse]


# ---- Summary ----


class StatusCountsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    available: int
    reserved: int
    sold: int
    cancelled: int
    checked_in: int
    revenue: Decimal


class CategorySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category_id: int
    name: str
    price: Decimal
    color: Optional[str] = None
    counts: StatusCountsResponse


class ShowSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    show_id: int
    show_name: str
    counts: StatusCountsResponse
    by_category: List[CategorySummaryResponse]
    occupancy_rate: float


# ---- Attendance ----


class ShowAttendanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    show_id: int
    total_sold: int
    checked_in_count: int
    not_checked_in_count: int
    attendance_rate: float
    checked_in: List[TicketDetailResponse]
    not_checked_in: List[TicketDetailResponse]
