"""
Unit of Work Pattern

- UoW owns the session lifecycle and the commit/rollback decision
- Repositories share the UoW's session
- Use cases coordinate repositories through the UoW

Usage:
    async with uow:
        ticket = await uow.tickets.get_by_id(ticket_id=1, for_update=True)
        await uow.tickets.update(ticket=ticket.cancel())
        await uow.commit()
"""

from __future__ import annotations

import abc
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from box_office.platform.exception.exceptions import ConstraintViolationError
from box_office.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from box_office.service.ticketing.app.interface.i_show_repo import IShowRepo
    from box_office.service.ticketing.app.interface.i_ticket_repo import ITicketRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the box office

    Leaving the context without commit() rolls back.
    """

    tickets: ITicketRepo
    shows: IShowRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """One AsyncSession per `async with` block."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from box_office.service.ticketing.driven_adapter.repo.show_repo_impl import ShowRepoImpl
        from box_office.service.ticketing.driven_adapter.repo.ticket_repo_impl import (
            TicketRepoImpl,
        )

        self.session = self.session_factory()
        self.tickets = TicketRepoImpl(session=self.session)
        self.shows = ShowRepoImpl(session=self.session)
        await super().__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'commit() called outside of `async with uow`'
        with constraint_guard():
            await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()


@contextmanager
def constraint_guard() -> Iterator[None]:
    """Translate storage IntegrityError into ConstraintViolationError. Never retries."""
    try:
        yield
    except IntegrityError as e:
        Logger.base.warning(f'[UOW] Constraint violation: {e.orig}')
        raise ConstraintViolationError(
            'Write rejected by a storage constraint, retry the operation',
            context={'constraint': _constraint_name(e)},
        ) from e


def _constraint_name(error: IntegrityError) -> str | None:
    orig = getattr(error, 'orig', None)
    name = getattr(orig, 'constraint_name', None)
    if name is None:
        # asyncpg errors are wrapped by the SQLAlchemy dialect
        name = getattr(getattr(orig, '__cause__', None), 'constraint_name', None)
    return name
