from itertools import groupby
from typing import Iterable, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.seat_layout.domain.layout_engine import compute_layout
from box_office.service.seat_layout.domain.seat_input import SeatInput, SectionInput
from box_office.service.ticketing.app.dto.seat_map import FloorSeatMap, ShowSeatMap
from box_office.service.ticketing.app.dto.seat_map_row import SeatMapRow


def build_sections(rows: Iterable[SeatMapRow]) -> List[SectionInput]:
    """Group one floor's rows into layout-engine sections; seats are keyed by ticket id."""
    sections: dict[int, tuple[SeatMapRow, list[SeatInput]]] = {}
    for row in rows:
        _, seats = sections.setdefault(row.section_id, (row, []))
        seats.append(
            SeatInput(
                row=row.row,
                number=row.number,
                id=row.ticket_id,
                status=row.status.value,
                category_color=row.category_color,
                category_text_color=row.category_text_color,
            )
        )
    return [
        SectionInput(name=first.section_name, type=first.section_type, seats=seats)
        for _, (first, seats) in sorted(sections.items())
    ]


class GetShowSeatMapUseCase:
    """Layout-engine render model of every floor of a show, lowest level first."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, show_id: int, selected_ticket_ids: Iterable[int] = ()) -> ShowSeatMap:
        async with self.uow:
            if not await self.uow.shows.get_by_id(show_id=show_id):
                raise NotFoundError('show not found', context={'show_id': show_id})
            rows = await self.uow.shows.get_seat_map_rows(show_id=show_id)

        selected = frozenset(selected_ticket_ids)
        rows = sorted(rows, key=lambda r: (r.floor_level, r.floor_id))
        floors = []
        for (level, floor_id), floor_rows in groupby(rows, key=lambda r: (r.floor_level, r.floor_id)):
            floor_rows = list(floor_rows)
            floors.append(
                FloorSeatMap(
                    floor_id=floor_id,
                    floor_name=floor_rows[0].floor_name,
                    level=level,
                    layout=compute_layout(build_sections(floor_rows), selected=selected),
                )
            )
        return ShowSeatMap(show_id=show_id, floors=tuple(floors))
