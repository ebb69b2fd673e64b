from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.dto.show_attendance import ShowAttendance
from box_office.service.ticketing.app.query.list_show_tickets_use_case import (
    ticket_display_order,
)
from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus


def attendance_rate(*, checked_in: int, total_sold: int) -> float:
    if not total_sold:
        return 0.0
    return round(checked_in / total_sold * 100, 2)


class GetShowAttendanceUseCase:
    """Sold tickets of a show split by whether the holder has checked in."""

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
    async def execute(self, *, show_id: int) -> ShowAttendance:
        async with self.uow:
            if not await self.uow.shows.get_by_id(show_id=show_id):
                raise NotFoundError('show not found', context={'show_id': show_id})
            details = await self.uow.tickets.list_by_show(show_id=show_id)

        sold = sorted(
            (d for d in details if d.ticket.status == TicketStatus.SOLD), key=ticket_display_order
        )
        checked_in = tuple(d for d in sold if d.ticket.is_checked_in)
        not_checked_in = tuple(d for d in sold if not d.ticket.is_checked_in)
        return ShowAttendance(
            show_id=show_id,
            checked_in=checked_in,
            not_checked_in=not_checked_in,
            attendance_rate=attendance_rate(checked_in=len(checked_in), total_sold=len(sold)),
        )
