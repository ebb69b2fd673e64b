"""Application layer DTOs"""

from box_office.service.ticketing.app.dto.bulk_result import BulkResult
from box_office.service.ticketing.app.dto.seat_map import FloorSeatMap, ShowSeatMap
from box_office.service.ticketing.app.dto.seat_map_row import SeatMapRow
from box_office.service.ticketing.app.dto.show_attendance import ShowAttendance
from box_office.service.ticketing.app.dto.show_summary import (
    CategorySummary,
    ShowSummary,
    StatusCounts,
)
from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail

__all__ = [
    'BulkResult',
    'CategorySummary',
    'FloorSeatMap',
    'SeatMapRow',
    'ShowSeatMap',
    'ShowAttendance',
    'ShowSummary',
    'StatusCounts',
    'TicketDetail',
]
