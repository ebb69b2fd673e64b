"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from box_office.service.ticketing.app.command import (
    bulk_reserve_tickets_use_case,
    bulk_sell_tickets_use_case,
    cancel_ticket_use_case,
    change_ticket_category_use_case,
    checkin_ticket_use_case,
    create_ticket_category_use_case,
    initialize_show_tickets_use_case,
    release_ticket_use_case,
    reserve_ticket_use_case,
    reset_ticket_use_case,
    sell_ticket_use_case,
    update_ticket_category_use_case,
)
from box_office.service.ticketing.app.query import (
    get_show_attendance_use_case,
    get_show_seat_map_use_case,
    get_show_summary_use_case,
    list_show_audience_use_case,
    list_show_tickets_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    reserve_ticket_use_case,
    sell_ticket_use_case,
    release_ticket_use_case,
    cancel_ticket_use_case,
    reset_ticket_use_case,
    change_ticket_category_use_case,
    checkin_ticket_use_case,
    bulk_reserve_tickets_use_case,
    bulk_sell_tickets_use_case,
    initialize_show_tickets_use_case,
    create_ticket_category_use_case,
    update_ticket_category_use_case,
    list_show_tickets_use_case,
    get_show_seat_map_use_case,
    get_show_summary_use_case,
    get_show_attendance_use_case,
    list_show_audience_use_case,
]
