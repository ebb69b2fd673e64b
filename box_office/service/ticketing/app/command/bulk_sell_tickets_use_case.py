from datetime import datetime, timezone
from typing import Callable, List, Self

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


class BulkSellTicketsUseCase:
    """
    Sell a set of available/reserved tickets, all or nothing.

    Each ticket without a barcode gets its own freshly generated one.
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
    async def execute(
        self, *, ticket_ids: List[int], holder: HolderInfo, actor: Actor
    ) -> BulkResult:
        validate_ticket_ids(ticket_ids)
        with self.tracer.start_as_current_span(
            'use_case.bulk_sell_tickets',
            attributes={'ticket.count': len(ticket_ids), 'actor.id': actor.id},
        ):
            async with self.uow:
                tickets = await self.uow.tickets.get_by_ids(ticket_ids=ticket_ids, for_update=True)
                eligible = [ticket for ticket in tickets if ticket.can_sell()]
                if len(eligible) != len(ticket_ids):
                    eligible_ids = {ticket.id for ticket in eligible}
                    raise PreconditionBatchMismatchError(
                        'some tickets cannot be sold',
                        context={
                            'requested': len(ticket_ids),
                            'eligible': len(eligible),
                            'rejected_ticket_ids': [
                                ticket_id for ticket_id in ticket_ids if ticket_id not in eligible_ids
                            ],
                        },
                    )

                now = datetime.now(timezone.utc)
                sold = [
                    ticket.sell(
                        holder=holder,
                        actor=actor,
                        barcode_factory=self.barcode_generator,
                        now=now,
                    )
                    for ticket in eligible
                ]
                await self.uow.tickets.update_many(tickets=sold)
                await self.uow.commit()

            Logger.base.info(f'[BULK_SELL] {len(sold)} tickets sold by actor {actor.id}')
            metrics.record_ticket_transition(operation='sell', count=len(sold))
            return BulkResult(
                count=len(sold), ticket_ids=tuple(ticket.id for ticket in sold if ticket.id)
            )
