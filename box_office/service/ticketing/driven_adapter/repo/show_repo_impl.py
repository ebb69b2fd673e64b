from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from box_office.platform.database.unit_of_work import constraint_guard
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.dto.seat_map_row import SeatMapRow
from box_office.service.ticketing.app.interface.i_show_repo import IShowRepo
from box_office.service.ticketing.domain.entity.show_entity import Show
from box_office.service.ticketing.domain.entity.ticket_category_entity import TicketCategory
from box_office.service.ticketing.domain.enum.show_status import ShowStatus
from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus
from box_office.service.ticketing.driven_adapter.model.seat_model import SeatModel, SectionModel
from box_office.service.ticketing.driven_adapter.model.show_model import (
    ShowModel,
    TicketCategoryModel,
)
from box_office.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from box_office.service.ticketing.driven_adapter.model.venue_model import FloorModel


class ShowRepoImpl(IShowRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _category_to_entity(model: TicketCategoryModel) -> TicketCategory:
        return TicketCategory(
            id=model.id,
            show_id=model.show_id,
            name=model.name,
            price=model.price,
            color=model.color,
            text_color=model.text_color,
            description=model.description,
            created_at=model.created_at,
        )

    @Logger.io
    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        show = await self.session.get(ShowModel, show_id)
        if show is None:
            return None
        categories = await self.session.execute(
            select(TicketCategoryModel)
            .where(TicketCategoryModel.show_id == show_id)
            .order_by(TicketCategoryModel.created_at, TicketCategoryModel.id)
        )
        return Show(
            id=show.id,
            venue_id=show.venue_id,
            name=show.name,
            date=show.date,
            status=ShowStatus(show.status),
            description=show.description,
            categories=[self._category_to_entity(model) for model in categories.scalars().all()],
        )

    @Logger.io
    async def list_active_seat_ids(self, *, venue_id: int) -> List[int]:
        result = await self.session.execute(
            select(SeatModel.id)
            .join(SectionModel, SectionModel.id == SeatModel.section_id)
            .join(FloorModel, FloorModel.id == SectionModel.floor_id)
            .where(FloorModel.venue_id == venue_id, SeatModel.is_active.is_(True))
            .order_by(SeatModel.id)
        )
        return list(result.scalars().all())

    @Logger.io
    async def get_category(self, *, category_id: int) -> Optional[TicketCategory]:
        model = await self.session.get(TicketCategoryModel, category_id)
        return self._category_to_entity(model) if model else None

    @Logger.io
    async def add_category(self, *, category: TicketCategory) -> TicketCategory:
        model = TicketCategoryModel(
            show_id=category.show_id,
            name=category.name,
            price=category.price,
            color=category.color,
            text_color=category.text_color,
            description=category.description,
        )
        self.session.add(model)
        with constraint_guard():
            await self.session.flush()
        await self.session.refresh(model)
        return self._category_to_entity(model)

    @Logger.io
    async def update_category(self, *, category: TicketCategory) -> TicketCategory:
        model = await self.session.get(TicketCategoryModel, category.id)
        if model is None:
            raise NotFoundError('category not found', context={'category_id': category.id})
        model.name = category.name
        model.price = category.price
        model.color = category.color
        model.text_color = category.text_color
        model.description = category.description
        with constraint_guard():
            await self.session.flush()
        return self._category_to_entity(model)

    @Logger.io
    async def get_seat_map_rows(self, *, show_id: int) -> List[SeatMapRow]:
        result = await self.session.execute(
            select(
                TicketModel.id,
                TicketModel.status,
                TicketModel.category_id,
                SeatModel.row,
                SeatModel.number,
                SectionModel.id,
                SectionModel.name,
                SectionModel.type,
                FloorModel.id,
                FloorModel.name,
                FloorModel.level,
                TicketCategoryModel.color,
                TicketCategoryModel.text_color,
            )
            .join(SeatModel, SeatModel.id == TicketModel.seat_id)
            .join(SectionModel, SectionModel.id == SeatModel.section_id)
            .join(FloorModel, FloorModel.id == SectionModel.floor_id)
            .join(TicketCategoryModel, TicketCategoryModel.id == TicketModel.category_id)
            .where(TicketModel.show_id == show_id)
            .order_by(FloorModel.level, FloorModel.id, SectionModel.id)
        )
        return [
            SeatMapRow(
                ticket_id=ticket_id,
                status=TicketStatus(status),
                category_id=category_id,
                row=row,
                number=number,
                section_id=section_id,
                section_name=section_name,
                section_type=section_type,
                floor_id=floor_id,
                floor_name=floor_name,
                floor_level=floor_level,
                category_color=color,
                category_text_color=text_color,
            )
            for (
                ticket_id,
                status,
                category_id,
                row,
                number,
                section_id,
                section_name,
                section_type,
                floor_id,
                floor_name,
                floor_level,
                color,
                text_color,
            ) in result.all()
        ]
