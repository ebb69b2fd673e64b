"""Ticket joined with its seat, section, floor and category, for listings."""

from decimal import Decimal
from typing import Optional

import attrs

from box_office.service.ticketing.domain.entity.ticket_entity import Ticket


@attrs.define(frozen=True)
class TicketDetail:
    ticket: Ticket
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
