from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail
from box_office.service.ticketing.app.query.list_show_tickets_use_case import (
    ticket_display_order,
)
from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus


AUDIENCE_STATUSES = frozenset({TicketStatus.RESERVED, TicketStatus.SOLD})


class ListShowAudienceUseCase:
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
        """Reserved and sold tickets with their holders, in seat display order."""
        async with self.uow:
            if not await self.uow.shows.get_by_id(show_id=show_id):
                raise NotFoundError('show not found', context={'show_id': show_id})
            details = await self.uow.tickets.list_by_show(show_id=show_id)
        return sorted(
            (d for d in details if d.ticket.status in AUDIENCE_STATUSES), key=ticket_display_order
        )
