from typing import Optional

import attrs

from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus


@attrs.define(frozen=True)
class SeatMapRow:
    """One ticket of a show, flattened with where its seat sits."""

    ticket_id: int
    status: TicketStatus
    row: str
    number: int
    section_id: int
    section_name: str
    section_type: str
    floor_id: int
    floor_name: str
    floor_level: int
    category_id: int
    category_color: Optional[str] = None
    category_text_color: Optional[str] = None
