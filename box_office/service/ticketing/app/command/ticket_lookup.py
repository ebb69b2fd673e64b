"""Shared loading helpers for ticket commands."""

from typing import Sequence

from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import InputValidationError, NotFoundError
from box_office.service.ticketing.domain.entity.ticket_entity import Ticket


async def load_ticket_for_update(uow: AbstractUnitOfWork, *, ticket_id: int) -> Ticket:
    ticket = await uow.tickets.get_by_id(ticket_id=ticket_id, for_update=True)
    if not ticket:
        raise NotFoundError('ticket not found', context={'ticket_id': ticket_id})
    return ticket


def validate_ticket_ids(ticket_ids: Sequence[int]) -> None:
    if not ticket_ids:
        raise InputValidationError('ticket_ids must not be empty', context={'field': 'ticket_ids'})
    if len(set(ticket_ids)) != len(ticket_ids):
        raise InputValidationError(
            'ticket_ids must not contain duplicates', context={'field': 'ticket_ids'}
        )
