from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from box_office.platform.database.unit_of_work import constraint_guard
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail
from box_office.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from box_office.service.ticketing.domain.entity.ticket_entity import Ticket
from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus
from box_office.service.ticketing.driven_adapter.model.seat_model import SeatModel, SectionModel
from box_office.service.ticketing.driven_adapter.model.show_model import TicketCategoryModel
from box_office.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from box_office.service.ticketing.driven_adapter.model.venue_model import FloorModel


# asyncpg caps a statement at 32767 bind parameters; 4 per ticket row
INSERT_CHUNK_SIZE = 2000


class TicketRepoImpl(ITicketRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _model_to_entity(model: TicketModel) -> Ticket:
        return Ticket(
            id=model.id,
            show_id=model.show_id,
            seat_id=model.seat_id,
            category_id=model.category_id,
            status=TicketStatus(model.status),
            holder_name=model.holder_name,
            holder_phone=model.holder_phone,
            holder_email=model.holder_email,
            barcode=model.barcode,
            reserved_by_id=model.reserved_by_id,
            sold_by_id=model.sold_by_id,
            reserved_at=model.reserved_at,
            sold_at=model.sold_at,
            checked_in_at=model.checked_in_at,
        )

    @staticmethod
    def _apply(model: TicketModel, ticket: Ticket) -> None:
        model.category_id = ticket.category_id
        model.status = ticket.status.value
        model.holder_name = ticket.holder_name
        model.holder_phone = ticket.holder_phone
        model.holder_email = ticket.holder_email
        model.barcode = ticket.barcode
        model.reserved_by_id = ticket.reserved_by_id
        model.sold_by_id = ticket.sold_by_id
        model.reserved_at = ticket.reserved_at
        model.sold_at = ticket.sold_at
        model.checked_in_at = ticket.checked_in_at

    async def _load_models(self, ticket_ids: Iterable[int], *, for_update: bool) -> List[TicketModel]:
        stmt = select(TicketModel).where(TicketModel.id.in_(list(ticket_ids))).order_by(TicketModel.id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @Logger.io
    async def get_by_id(self, *, ticket_id: int, for_update: bool = False) -> Optional[Ticket]:
        models = await self._load_models([ticket_id], for_update=for_update)
        return self._model_to_entity(models[0]) if models else None

    @Logger.io
    async def get_by_barcode(self, *, barcode: str, for_update: bool = False) -> Optional[Ticket]:
        stmt = select(TicketModel).where(TicketModel.barcode == barcode)
        if for_update:
            stmt = stmt.with_for_update()
        model = (await self.session.execute(stmt)).scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    @Logger.io
    async def get_by_ids(self, *, ticket_ids: Iterable[int], for_update: bool = False) -> List[Ticket]:
        models = await self._load_models(ticket_ids, for_update=for_update)
        return [self._model_to_entity(model) for model in models]

    @Logger.io
    async def update(self, *, ticket: Ticket) -> Ticket:
        model = await self.session.get(TicketModel, ticket.id)
        if model is None:
            raise NotFoundError('ticket not found', context={'ticket_id': ticket.id})
        self._apply(model, ticket)
        with constraint_guard():
            await self.session.flush()
        return self._model_to_entity(model)

    @Logger.io
    async def update_many(self, *, tickets: List[Ticket]) -> None:
        by_id = {ticket.id: ticket for ticket in tickets}
        # Already in the identity map when the caller locked them with get_by_ids
        models = await self._load_models(by_id, for_update=False)
        if len(models) != len(by_id):
            missing = sorted(set(by_id) - {model.id for model in models})
            raise NotFoundError('ticket not found', context={'ticket_ids': missing})
        for model in models:
            self._apply(model, by_id[model.id])
        with constraint_guard():
            await self.session.flush()

    @Logger.io
    async def create_if_absent(self, *, show_id: int, seat_categories: dict[int, int]) -> int:
        rows = [
            {
                'show_id': show_id,
                'seat_id': seat_id,
                'category_id': category_id,
                'status': TicketStatus.AVAILABLE.value,
            }
            for seat_id, category_id in seat_categories.items()
        ]
        created = 0
        for start in range(0, len(rows), INSERT_CHUNK_SIZE):
            stmt = (
                insert(TicketModel)
                .values(rows[start : start + INSERT_CHUNK_SIZE])
                .on_conflict_do_nothing(index_elements=['show_id', 'seat_id'])
                .returning(TicketModel.id)
            )
            with constraint_guard():
                result = await self.session.execute(stmt)
            created += len(result.scalars().all())
        return created

    @Logger.io
    async def list_by_show(self, *, show_id: int) -> List[TicketDetail]:
        stmt = (
            select(TicketModel, SeatModel, SectionModel, FloorModel, TicketCategoryModel)
            .join(SeatModel, SeatModel.id == TicketModel.seat_id)
            .join(SectionModel, SectionModel.id == SeatModel.section_id)
            .join(FloorModel, FloorModel.id == SectionModel.floor_id)
            .join(TicketCategoryModel, TicketCategoryModel.id == TicketModel.category_id)
            .where(TicketModel.show_id == show_id)
            .order_by(FloorModel.level, SeatModel.row, SeatModel.number)
        )
        result = await self.session.execute(stmt)
        return [
            TicketDetail(
                ticket=self._model_to_entity(ticket),
                row=seat.row,
                seat_number=seat.number,
                section_id=section.id,
                section_name=section.name,
                section_type=section.type,
                floor_id=floor.id,
                floor_name=floor.name,
                floor_level=floor.level,
                category_name=category.name,
                category_price=category.price,
                category_color=category.color,
                category_text_color=category.text_color,
            )
            for ticket, seat, section, floor, category in result.all()
        ]
