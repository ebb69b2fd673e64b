from typing import Self

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


class ReleaseTicketUseCase:
    """reserved -> available, clearing the holder and reservation fields."""

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
    async def execute(self, *, ticket_id: int, actor: Actor) -> Ticket:
        with self.tracer.start_as_current_span(
            'use_case.release_ticket',
            attributes={'ticket.id': ticket_id, 'actor.id': actor.id},
        ):
            async with self.uow:
                ticket = await load_ticket_for_update(self.uow, ticket_id=ticket_id)
                updated = await self.uow.tickets.update(ticket=ticket.release())
                await self.uow.commit()

            Logger.base.info(f'[RELEASE] ticket {ticket_id} released by actor {actor.id}')
            metrics.record_ticket_transition(operation='release')
            return updated
