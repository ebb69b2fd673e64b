from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.domain.entity.ticket_category_entity import TicketCategory


class UpdateTicketCategoryUseCase:
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
        category_id: int,
        name: Optional[str] = None,
        price: Optional[Decimal] = None,
        color: Optional[str] = None,
        text_color: Optional[str] = None,
        description: Optional[str] = None,
    ) -> TicketCategory:
        async with self.uow:
            category = await self.uow.shows.get_category(category_id=category_id)
            if not category or category.show_id != show_id:
                raise NotFoundError(
                    'category not found for this show',
                    context={'show_id': show_id, 'category_id': category_id},
                )
            updated = await self.uow.shows.update_category(
                category=category.update(
                    name=name,
                    price=price,
                    color=color,
                    text_color=text_color,
                    description=description,
                )
            )
            await self.uow.commit()
        return updated
