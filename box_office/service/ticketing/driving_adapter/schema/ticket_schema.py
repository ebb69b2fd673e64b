from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from box_office.service.ticketing.domain.value_object.holder_info import HolderInfo


class HolderFields(BaseModel):
    holder_name: Optional[str] = Field(default=None, max_length=255)
    holder_phone: Optional[str] = Field(default=None, max_length=50)
    holder_email: Optional[str] = Field(default=None, max_length=255)

    def to_holder(self) -> HolderInfo:
        return HolderInfo(name=self.holder_name, phone=self.holder_phone, email=self.holder_email)


class ReserveTicketRequest(HolderFields):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'holder_name': 'Ada Lovelace',
                'holder_phone': '+44 20 7946 0018',
                'holder_email': 'ada@example.com',
            }
        }
    )


class SellTicketRequest(HolderFields):
    """Blank holder fields keep whatever the reservation recorded."""


class BulkTicketRequest(HolderFields):
    ticket_ids: List[int] = Field(min_length=1)

    model_config = ConfigDict(
        json_schema_extra={'example': {'ticket_ids': [11, 12, 13], 'holder_name': 'Ada Lovelace'}}
    )


class ChangeCategoryRequest(BaseModel):
    category_id: int


class CheckinRequest(BaseModel):
    barcode: str = Field(min_length=1, max_length=64)

    model_config = ConfigDict(json_schema_extra={'example': {'barcode': 'SB-3F9A0C11D2E4'}})


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    show_id: int
    seat_id: int
    category_id: int
    status: str
    holder_name: Optional[str] = None
    holder_phone: Optional[str] = None
    holder_email: Optional[str] = None
    barcode: Optional[str] = None
    reserved_by_id: Optional[int] = None
    sold_by_id: Optional[int] = None
    reserved_at: Optional[datetime] = None
    sold_at: Optional[datetime] = None
    checked_in_at: Optional[datetime] = None


class TicketDetailResponse(BaseModel):
    ticket: TicketResponse
    row: str
    seat_number: int
    section_id: int
    section_name: str
    section_type: str
    floor_id: int
    floor_name: str
    floor_level: int
    category_name: str
    category_price: Decimal
    category_color: Optional[str] = None
    category_text_color: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class BulkResultResponse(BaseModel):
    message: str
    count: int
    ticket_ids: List[int]


class CheckinResponse(BaseModel):
    message: str
    ticket: TicketResponse
