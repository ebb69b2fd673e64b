from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail
from box_office.service.ticketing.domain.entity.ticket_entity import Ticket


class ITicketRepo(ABC):
    """
    Ticket persistence port. Bound to the unit of work's transaction.

    `for_update=True` locks the returned rows until the unit of work ends, so
    a precondition check and the write that follows see the same snapshot.
    """

    @abstractmethod
    async def get_by_id(self, *, ticket_id: int, for_update: bool = False) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def get_by_barcode(self, *, barcode: str, for_update: bool = False) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def get_by_ids(self, *, ticket_ids: Iterable[int], for_update: bool = False) -> List[Ticket]:
        """Returns only the tickets that exist; callers compare counts."""
        pass

    @abstractmethod
    async def update(self, *, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    async def update_many(self, *, tickets: List[Ticket]) -> None:
        pass

    @abstractmethod
    async def create_if_absent(self, *, show_id: int, seat_categories: dict[int, int]) -> int:
        """
        Insert an available ticket for every seat_id -> category_id pair that has
        no ticket for this show yet.

        Returns:
            Number of tickets actually created
        """
        pass

    @abstractmethod
    async def list_by_show(self, *, show_id: int) -> List[TicketDetail]:
        pass
