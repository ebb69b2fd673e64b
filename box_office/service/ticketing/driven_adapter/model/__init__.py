"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from box_office.service.ticketing.driven_adapter.model.seat_model import SeatModel, SectionModel
from box_office.service.ticketing.driven_adapter.model.show_model import (
    ShowModel,
    TicketCategoryModel,
)
from box_office.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from box_office.service.ticketing.driven_adapter.model.user_model import UserModel
from box_office.service.ticketing.driven_adapter.model.venue_model import FloorModel, VenueModel

__all__ = [
    'FloorModel',
    'SeatModel',
    'SectionModel',
    'ShowModel',
    'TicketCategoryModel',
    'TicketModel',
    'UserModel',
    'VenueModel',
]
