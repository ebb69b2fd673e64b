from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.platform.metrics.box_office_metrics import metrics
from box_office.service.ticketing.domain.entity.ticket_entity import Ticket
from box_office.service.ticketing.domain.value_object.actor import Actor


class CheckinTicketUseCase:
    """
    Admit a ticket holder by barcode.

    Succeeds once per sold ticket. Later scans raise AlreadyCheckedInError
    carrying the original checked_in_at, which is never overwritten.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, barcode: str, actor: Actor) -> Ticket:
        with self.tracer.start_as_current_span(
            'use_case.checkin_ticket',
            attributes={'ticket.barcode': barcode, 'actor.id': actor.id},
        ):
            async with self.uow:
                ticket = await self.uow.tickets.get_by_barcode(barcode=barcode, for_update=True)
                if not ticket:
                    raise NotFoundError('invalid barcode', context={'barcode': barcode})
                checked_in = await self.uow.tickets.update(ticket=ticket.check_in())
                await self.uow.commit()

            Logger.base.info(f'[CHECKIN] ticket {checked_in.id} admitted by actor {actor.id}')
            metrics.record_ticket_transition(operation='checkin')
            return checked_in
