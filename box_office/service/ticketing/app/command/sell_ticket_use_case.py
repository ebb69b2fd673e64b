from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.logging.loguru_io import Logger
from box_office.platform.metrics.box_office_metrics import metrics
from box_office.service.ticketing.app.command.ticket_lookup import load_ticket_for_update
from box_office.service.ticketing.domain.entity.ticket_entity import Ticket
from box_office.service.ticketing.domain.value_object.actor import Actor
from box_office.service.ticketing.domain.value_object.holder_info import HolderInfo


class SellTicketUseCase:
    """
    available/reserved -> sold.

    A barcode is generated only when the ticket has none. A barcode collision
    surfaces as ConstraintViolationError from commit; it is not retried here.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, barcode_generator: Callable[[], str]) -> None:
        self.uow = uow
        self.barcode_generator = barcode_generator
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        barcode_generator: Callable[[], str] = Depends(Provide[Container.barcode_generator]),
    ) -> Self:
        return cls(uow=uow, barcode_generator=barcode_generator)

    @Logger.io
    async def execute(self, *, ticket_id: int, holder: HolderInfo, actor: Actor) -> Ticket:
        with self.tracer.start_as_current_span(
            'use_case.sell_ticket',
            attributes={'ticket.id': ticket_id, 'actor.id': actor.id},
        ):
            async with self.uow:
                ticket = await load_ticket_for_update(self.uow, ticket_id=ticket_id)
                sold = await self.uow.tickets.update(
                    ticket=ticket.sell(
                        holder=holder, actor=actor, barcode_factory=self.barcode_generator
                    )
                )
                await self.uow.commit()

            Logger.base.info(f'[SELL] ticket {ticket_id} sold by actor {actor.id}')
            metrics.record_ticket_transition(operation='sell')
            return sold
