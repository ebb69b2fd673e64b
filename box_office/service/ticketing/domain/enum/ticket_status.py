from enum import StrEnum


class TicketStatus(StrEnum):
    AVAILABLE = 'available'
    RESERVED = 'reserved'
    SOLD = 'sold'
    CANCELLED = 'cancelled'
