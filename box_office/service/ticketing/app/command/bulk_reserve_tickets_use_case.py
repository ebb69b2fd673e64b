from datetime import datetime, timezone
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import PreconditionBatchMismatchError
from box_office.platform.logging.loguru_io import Logger
from box_office.platform.metrics.box_office_metrics import metrics
from box_office.service.ticketing.app.command.ticket_lookup import validate_ticket_ids
from box_office.service.ticketing.app.dto.bulk_result import BulkResult
from box_office.service.ticketing.domain.value_object.actor import Actor
from box_office.service.ticketing.domain.value_object.holder_info import HolderInfo


class BulkReserveTicketsUseCase:
    """
    Reserve a set of tickets for one holder, all or nothing.

    Every targeted row is locked and checked before anything is written; if
    any ticket is missing or not available the whole batch is rejected.
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
    async def execute(
        self, *, ticket_ids: List[int], holder: HolderInfo, actor: Actor
    ) -> BulkResult:
        validate_ticket_ids(ticket_ids)
        with self.tracer.start_as_current_span(
            'use_case.bulk_reserve_tickets',
            attributes={'ticket.count': len(ticket_ids), 'actor.id': actor.id},
        ):
            async with self.uow:
                tickets = await self.uow.tickets.get_by_ids(ticket_ids=ticket_ids, for_update=True)
                eligible = [ticket for ticket in tickets if ticket.can_reserve()]
                if len(eligible) != len(ticket_ids):
                    eligible_ids = {ticket.id for ticket in eligible}
                    raise PreconditionBatchMismatchError(
                        'some seats are not available',
                        context={
                            'requested': len(ticket_ids),
                            'eligible': len(eligible),
                            'rejected_ticket_ids': [
                                ticket_id for ticket_id in ticket_ids if ticket_id not in eligible_ids
                            ],
                        },
                    )

                now = datetime.now(timezone.utc)
                reserved = [ticket.reserve(holder=holder, actor=actor, now=now) for ticket in eligible]
                await self.uow.tickets.update_many(tickets=reserved)
                await self.uow.commit()

            Logger.base.info(f'[BULK_RESERVE] {len(reserved)} tickets reserved by actor {actor.id}')
            metrics.record_ticket_transition(operation='reserve', count=len(reserved))
            return BulkResult(
                count=len(reserved), ticket_ids=tuple(ticket.id for ticket in reserved if ticket.id)
            )
