"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application import (log dir, debug)
- An in-memory unit of work that stages writes until commit(), so rollback
  and no-partial-write behavior can be asserted without PostgreSQL
- A seeded venue/show builder
- A FastAPI TestClient whose DI container is overridden with the in-memory doubles

Architecture:
- Unit tests (`*_unit_test.py`): call entities / use cases directly
- API tests (`*_api_test.py`): go through the HTTP surface with the in-memory store
- Integration tests (`integration/`): real PostgreSQL, skipped when unreachable
"""

# =============================================================================
# Environment setup MUST happen before any application import
# (settings and the loguru sinks are configured at import time)
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('POSTGRES_DB', 'box_office_test_db')
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import AsyncIterator, Callable, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from datetime import datetime, timezone  # noqa: E402
from decimal import Decimal  # noqa: E402
from itertools import count  # noqa: E402
from typing import Any, Iterable, List, Optional  # noqa: E402

import attrs  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from box_office.platform.app_factory import create_app  # noqa: E402
from box_office.platform.config.di import container  # noqa: E402
from box_office.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from box_office.platform.database.unit_of_work import AbstractUnitOfWork  # noqa: E402
from box_office.platform.exception.exceptions import ConstraintViolationError  # noqa: E402
from box_office.platform.logging.loguru_io import Logger  # noqa: E402
from box_office.service.ticketing.app.dto.seat_map_row import SeatMapRow  # noqa: E402
from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail  # noqa: E402
from box_office.service.ticketing.app.interface.i_show_repo import IShowRepo  # noqa: E402
from box_office.service.ticketing.app.interface.i_ticket_repo import ITicketRepo  # noqa: E402
from box_office.service.ticketing.domain.entity.show_entity import Show  # noqa: E402
from box_office.service.ticketing.domain.entity.ticket_category_entity import (  # noqa: E402
    TicketCategory,
)
from box_office.service.ticketing.domain.entity.ticket_entity import Ticket  # noqa: E402
from box_office.service.ticketing.domain.enum.actor_role import ActorRole  # noqa: E402
from box_office.service.ticketing.domain.value_object.actor import Actor  # noqa: E402


# =============================================================================
# In-memory storage doubles
# =============================================================================
@attrs.define(frozen=True)
class SeatPlacement:
    seat_id: int
    venue_id: int
    row: str
    number: int
    section_id: int
    section_name: str
    section_type: str
    floor_id: int
    floor_name: str
    floor_level: int
    is_active: bool = True


class InMemoryStore:
    """Committed state shared by every unit of work of one test."""

    def __init__(self) -> None:
        self.shows: dict[int, Show] = {}
        self.categories: dict[int, TicketCategory] = {}
        self.seats: dict[int, SeatPlacement] = {}
        self.tickets: dict[int, Ticket] = {}
        self.commits = 0
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)


class InMemoryTicketRepo(ITicketRepo):
    def __init__(self, *, store: InMemoryStore, tickets: dict[int, Ticket]) -> None:
        self.store = store
        self.tickets = tickets

    async def get_by_id(self, *, ticket_id: int, for_update: bool = False) -> Optional[Ticket]:
        return self.tickets.get(ticket_id)

    async def get_by_barcode(self, *, barcode: str, for_update: bool = False) -> Optional[Ticket]:
        return next((t for t in self.tickets.values() if t.barcode == barcode), None)

    async def get_by_ids(self, *, ticket_ids: Iterable[int], for_update: bool = False) -> List[Ticket]:
        return [self.tickets[i] for i in ticket_ids if i in self.tickets]

    async def update(self, *, ticket: Ticket) -> Ticket:
        assert ticket.id is not None
        self.tickets[ticket.id] = ticket
        return ticket

    async def update_many(self, *, tickets: List[Ticket]) -> None:
        for ticket in tickets:
            await self.update(ticket=ticket)

    async def create_if_absent(self, *, show_id: int, seat_categories: dict[int, int]) -> int:
        existing = {t.seat_id for t in self.tickets.values() if t.show_id == show_id}
        created = 0
        for seat_id, category_id in seat_categories.items():
            if seat_id in existing:
                continue
            ticket_id = self.store.next_id()
            self.tickets[ticket_id] = Ticket(
                id=ticket_id, show_id=show_id, seat_id=seat_id, category_id=category_id
            )
            created += 1
        return created

    async def list_by_show(self, *, show_id: int) -> List[TicketDetail]:
        details = []
        for ticket in self.tickets.values():
            if ticket.show_id != show_id:
                continue
            seat = self.store.seats[ticket.seat_id]
            category = self.store.categories[ticket.category_id]
            details.append(
                TicketDetail(
                    ticket=ticket,
                    row=seat.row,
                    seat_number=seat.number,
                    section_id=seat.section_id,
                    section_name=seat.section_name,
                    section_type=seat.section_type,
                    floor_id=seat.floor_id,
                    floor_name=seat.floor_name,
                    floor_level=seat.floor_level,
                    category_name=category.name,
                    category_price=category.price,
                    category_color=category.color,
                    category_text_color=category.text_color,
                )
            )
        return details


class InMemoryShowRepo(IShowRepo):
    def __init__(
        self,
        *,
        store: InMemoryStore,
        categories: dict[int, TicketCategory],
        tickets: dict[int, Ticket],
    ) -> None:
        self.store = store
        self.categories = categories
        self.tickets = tickets

    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        show = self.store.shows.get(show_id)
        if show is None:
            return None
        categories = sorted(
            (c for c in self.categories.values() if c.show_id == show_id), key=lambda c: c.id or 0
        )
        return attrs.evolve(show, categories=categories)

    async def list_active_seat_ids(self, *, venue_id: int) -> List[int]:
        return sorted(
            seat.seat_id
            for seat in self.store.seats.values()
            if seat.venue_id == venue_id and seat.is_active
        )

    async def get_category(self, *, category_id: int) -> Optional[TicketCategory]:
        return self.categories.get(category_id)

    async def add_category(self, *, category: TicketCategory) -> TicketCategory:
        created = attrs.evolve(
            category, id=self.store.next_id(), created_at=datetime.now(timezone.utc)
        )
        self.categories[created.id] = created
        return created

    async def update_category(self, *, category: TicketCategory) -> TicketCategory:
        assert category.id is not None
        self.categories[category.id] = category
        return category

    async def get_seat_map_rows(self, *, show_id: int) -> List[SeatMapRow]:
        rows = []
        for ticket in self.tickets.values():
            if ticket.show_id != show_id or ticket.id is None:
                continue
            seat = self.store.seats[ticket.seat_id]
            category = self.categories[ticket.category_id]
            rows.append(
                SeatMapRow(
                    ticket_id=ticket.id,
                    status=ticket.status,
                    row=seat.row,
                    number=seat.number,
                    section_id=seat.section_id,
                    section_name=seat.section_name,
                    section_type=seat.section_type,
                    floor_id=seat.floor_id,
                    floor_name=seat.floor_name,
                    floor_level=seat.floor_level,
                    category_id=ticket.category_id,
                    category_color=category.color,
                    category_text_color=category.text_color,
                )
            )
        return rows


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Repos write to working copies; commit() publishes them to the store."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def __aenter__(self) -> 'InMemoryUnitOfWork':
        self._tickets = dict(self.store.tickets)
        self._categories = dict(self.store.categories)
        self.tickets = InMemoryTicketRepo(store=self.store, tickets=self._tickets)
        self.shows = InMemoryShowRepo(
            store=self.store, categories=self._categories, tickets=self._tickets
        )
        await super().__aenter__()
        return self

    async def _commit(self) -> None:
        barcodes = [t.barcode for t in self._tickets.values() if t.barcode is not None]
        if len(barcodes) != len(set(barcodes)):
            raise ConstraintViolationError(
                'Write rejected by a storage constraint, retry the operation',
                context={'constraint': 'ticket_barcode_key'},
            )
        self.store.tickets = dict(self._tickets)
        self.store.categories = dict(self._categories)
        self.store.commits += 1

    async def rollback(self) -> None:
        # Uncommitted working copies are simply dropped
        pass


# =============================================================================
# Seed data
# =============================================================================
class VenueBuilder:
    """Adds floors/sections/seats and shows to an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.venue_id = store.next_id()

    def add_section(
        self,
        *,
        name: str,
        type: str = 'orchestra',
        rows: Iterable[str] = ('A',),
        seats_per_row: int = 4,
        floor_id: int = 1,
        floor_name: str = 'Ground Floor',
        floor_level: int = 0,
        inactive: Iterable[tuple[str, int]] = (),
    ) -> List[int]:
        inactive = set(inactive)
        section_id = self.store.next_id()
        seat_ids = []
        for row in rows:
            for number in range(1, seats_per_row + 1):
                seat_id = self.store.next_id()
                self.store.seats[seat_id] = SeatPlacement(
                    seat_id=seat_id,
                    venue_id=self.venue_id,
                    row=row,
                    number=number,
                    section_id=section_id,
                    section_name=name,
                    section_type=type,
                    floor_id=floor_id,
                    floor_name=floor_name,
                    floor_level=floor_level,
                    is_active=(row, number) not in inactive,
                )
                seat_ids.append(seat_id)
        return seat_ids

    def add_show(self, *, name: str = 'Hamlet') -> Show:
        show = Show(
            id=self.store.next_id(),
            venue_id=self.venue_id,
            name=name,
            date=datetime(2026, 12, 24, 19, 30, tzinfo=timezone.utc),
        )
        self.store.shows[show.id] = show
        return show

    def add_category(
        self,
        *,
        show_id: int,
        name: str = 'Standard',
        price: str = '500.00',
        color: Optional[str] = '#3366FF',
        text_color: Optional[str] = '#FFFFFF',
    ) -> TicketCategory:
        category = TicketCategory(
            id=self.store.next_id(),
            show_id=show_id,
            name=name,
            price=Decimal(price),
            color=color,
            text_color=text_color,
            created_at=datetime.now(timezone.utc),
        )
        self.store.categories[category.id] = category
        return category

    def issue_tickets(self, *, show_id: int, category_id: int) -> List[Ticket]:
        tickets = []
        for seat in self.store.seats.values():
            if seat.venue_id != self.venue_id or not seat.is_active:
                continue
            ticket = Ticket(
                id=self.store.next_id(),
                show_id=show_id,
                seat_id=seat.seat_id,
                category_id=category_id,
            )
            self.store.tickets[ticket.id] = ticket
            tickets.append(ticket)
        return tickets


class SequentialBarcodes:
    def __init__(self, prefix: str = 'SB-TEST') -> None:
        self.prefix = prefix
        self._counter = count(1)

    def __call__(self) -> str:
        return f'{self.prefix}{next(self._counter):06d}'


# =============================================================================
# Fixtures
# =============================================================================
@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def uow(store: InMemoryStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture
def venue(store: InMemoryStore) -> VenueBuilder:
    return VenueBuilder(store)


@pytest.fixture
def barcodes() -> SequentialBarcodes:
    return SequentialBarcodes()


@pytest.fixture
def agent() -> Actor:
    return Actor(id=7, role=ActorRole.AGENT)


@pytest.fixture
def admin() -> Actor:
    return Actor(id=1, role=ActorRole.ADMIN)


@pytest.fixture
def seeded_show(venue: VenueBuilder) -> dict[str, Any]:
    """One orchestra section, rows A-B with 4 seats each, one category, tickets issued."""
    venue.add_section(name='Orchestra', rows=('A', 'B'), seats_per_row=4)
    show = venue.add_show()
    category = venue.add_category(show_id=show.id)
    tickets = venue.issue_tickets(show_id=show.id, category_id=category.id)
    return {'show': show, 'category': category, 'tickets': tickets}


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """Wires DI only; no database."""
    Logger.base.info('🧪 [Test App] Starting up...')
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


@pytest.fixture
def client(
    store: InMemoryStore, barcodes: SequentialBarcodes
) -> Generator[TestClient, None, None]:
    container.unit_of_work.override(providers.Factory(InMemoryUnitOfWork, store))
    container.barcode_generator.override(providers.Object(barcodes))
    app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.unit_of_work.reset_override()
        container.barcode_generator.reset_override()


def actor_headers(actor_id: int = 7, role: str = 'agent') -> dict[str, str]:
    return {'X-Actor-Id': str(actor_id), 'X-Actor-Role': role}


@pytest.fixture
def agent_headers() -> dict[str, str]:
    return actor_headers(7, 'agent')


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return actor_headers(1, 'admin')


@pytest.fixture
def usher_headers() -> dict[str, str]:
    return actor_headers(9, 'usher')


@pytest.fixture
def make_headers() -> Callable[..., dict[str, str]]:
    return actor_headers
