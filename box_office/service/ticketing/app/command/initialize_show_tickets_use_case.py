from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from box_office.platform.config.di import Container
from box_office.platform.database.unit_of_work import AbstractUnitOfWork
from box_office.platform.exception.exceptions import InputValidationError, NotFoundError
from box_office.platform.logging.loguru_io import Logger
from box_office.platform.metrics.box_office_metrics import metrics


class InitializeShowTicketsUseCase:
    """
    Create one available ticket per active venue seat for a show.

    Idempotent: seats that already have a ticket for the show are skipped, so
    a second run creates nothing and returns 0. Seats missing from the
    `seat_categories` override map get the show's first-created category.
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
        self, *, show_id: int, seat_categories: Optional[dict[int, int]] = None
    ) -> int:
        seat_categories = seat_categories or {}
        with self.tracer.start_as_current_span(
            'use_case.initialize_show_tickets',
            attributes={'show.id': show_id, 'override.count': len(seat_categories)},
        ):
            async with self.uow:
                show = await self.uow.shows.get_by_id(show_id=show_id)
                if not show:
                    raise NotFoundError('show not found', context={'show_id': show_id})

                default_category = show.default_category
                show_category_ids = {category.id for category in show.categories}
                unknown = sorted(set(seat_categories.values()) - show_category_ids)
                if unknown:
                    raise InputValidationError(
                        'seat_categories refers to categories of another show',
                        context={'show_id': show_id, 'category_ids': unknown},
                    )

                seat_ids = await self.uow.shows.list_active_seat_ids(venue_id=show.venue_id)
                assignments = {
                    seat_id: seat_categories.get(seat_id, default_category.id)
                    for seat_id in seat_ids
                }
                created = await self.uow.tickets.create_if_absent(
                    show_id=show_id, seat_categories=assignments
                )
                await self.uow.commit()

            Logger.base.info(
                f'[INIT_TICKETS] show {show_id}: {created} created, {len(seat_ids) - created} already existed'
            )
            metrics.record_tickets_initialized(count=created)
            return created
