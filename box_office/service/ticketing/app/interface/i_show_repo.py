from abc import ABC, abstractmethod
from typing import List, Optional

from box_office.service.ticketing.app.dto.seat_map_row import SeatMapRow
from box_office.service.ticketing.domain.entity.show_entity import Show
from box_office.service.ticketing.domain.entity.ticket_category_entity import TicketCategory


class IShowRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        """Show with its categories, oldest category first."""
        pass

    @abstractmethod
    async def list_active_seat_ids(self, *, venue_id: int) -> List[int]:
        pass

    @abstractmethod
    async def get_category(self, *, category_id: int) -> Optional[TicketCategory]:
        pass

    @abstractmethod
    async def add_category(self, *, category: TicketCategory) -> TicketCategory:
        pass

    @abstractmethod
    async def update_category(self, *, category: TicketCategory) -> TicketCategory:
        pass

    @abstractmethod
    async def get_seat_map_rows(self, *, show_id: int) -> List[SeatMapRow]:
        """Every ticket of the show flattened with its seat, section, floor and category."""
        pass
