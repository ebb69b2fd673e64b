from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.seat_layout.domain.row_order import row_sort_key
from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail


def ticket_display_order(detail: TicketDetail) -> tuple:
    return (detail.floor_level, row_sort_key(detail.row), detail.seat_number, detail.ticket.id or 0)


class ListShowTicketsUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, show_id: int) -> List[TicketDetail]:
        """Tickets by floor level, then row (stage-front rows first), then seat number."""
        async with self.uow:
            if not await self.uow.shows.get_by_id(show_id=show_id):
                raise NotFoundError('show not found', context={'show_id': show_id})
            details = await self.uow.tickets.list_by_show(show_id=show_id)
        return sorted(details, key=ticket_display_order)
