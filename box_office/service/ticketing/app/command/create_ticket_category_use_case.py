from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.domain.entity.ticket_category_entity import TicketCategory


class CreateTicketCategoryUseCase:
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
    async def execute(
        self,
        *,
        show_id: int,
        name: str,
        price: Decimal,
        color: Optional[str] = None,
        text_color: Optional[str] = None,
        description: Optional[str] = None,
    ) -> TicketCategory:
        # Validates name / price / colors before touching storage
        category = TicketCategory(
            show_id=show_id,
            name=name,
            price=price,
            color=color,
            text_color=text_color,
            description=description,
        )
        async with self.uow:
            if not await self.uow.shows.get_by_id(show_id=show_id):
                raise NotFoundError('show not found', context={'show_id': show_id})
            created = await self.uow.shows.add_category(category=category)
            await self.uow.commit()
        return created
