from collections import Counter
from decimal import Decimal
from typing import Iterable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.dto.show_summary import (
    CategorySummary,
    ShowSummary,
    StatusCounts,
)
from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail
from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus


def count_tickets(details: Iterable[TicketDetail]) -> StatusCounts:
    details = list(details)
    by_status = Counter(detail.ticket.status for detail in details)
    return StatusCounts(
        total=len(details),
        available=by_status[TicketStatus.AVAILABLE],
        reserved=by_status[TicketStatus.RESERVED],
        sold=by_status[TicketStatus.SOLD],
        cancelled=by_status[TicketStatus.CANCELLED],
        checked_in=sum(1 for detail in details if detail.ticket.is_checked_in),
        revenue=sum(
            (
                detail.category_price
                for detail in details
                if detail.ticket.status == TicketStatus.SOLD
            ),
            Decimal('0'),
        ),
    )


def occupancy_rate(counts: StatusCounts) -> float:
    if not counts.total:
        return 0.0
    return round((counts.sold + counts.reserved) / counts.total * 100, 2)


class GetShowSummaryUseCase:
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
    async def execute(self, *, show_id: int) -> ShowSummary:
        async with self.uow:
            show = await self.uow.shows.get_by_id(show_id=show_id)
            if not show:
                raise NotFoundError('show not found', context={'show_id': show_id})
            details = await self.uow.tickets.list_by_show(show_id=show_id)

        counts = count_tickets(details)
        by_category = tuple(
            CategorySummary(
                category_id=category.id or 0,
                name=category.name,
                price=category.price,
                color=category.color,
                counts=count_tickets(d for d in details if d.ticket.category_id == category.id),
            )
            for category in show.categories
        )
        return ShowSummary(
            show_id=show.id,
            show_name=show.name,
            counts=counts,
            by_category=by_category,
            occupancy_rate=occupancy_rate(counts),
        )
