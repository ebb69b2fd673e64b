from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.command.ticket_lookup import load_ticket_for_update
from box_office.service.ticketing.domain.entity.ticket_entity import Ticket


class ChangeTicketCategoryUseCase:
    """Reassigns the price category only; status and holder are untouched."""

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
    async def execute(self, *, ticket_id: int, category_id: int) -> Ticket:
        async with self.uow:
            ticket = await load_ticket_for_update(self.uow, ticket_id=ticket_id)
            category = await self.uow.shows.get_category(category_id=category_id)
            if not category or category.show_id != ticket.show_id:
                raise NotFoundError(
                    'category not found for this show',
                    context={'show_id': ticket.show_id, 'category_id': category_id},
                )
            updated = await self.uow.tickets.update(
                ticket=ticket.change_category(category_id=category_id)
            )
            await self.uow.commit()
        return updated
