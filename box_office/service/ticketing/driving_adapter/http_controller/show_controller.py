from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from box_office.platform.exception.exceptions import InputValidationError
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.command.create_ticket_category_use_case import (
    CreateTicketCategoryUseCase,
)
from box_office.service.ticketing.app.command.initialize_show_tickets_use_case import (
    InitializeShowTicketsUseCase,
)
from box_office.service.ticketing.app.command.update_ticket_category_use_case import (
    UpdateTicketCategoryUseCase,
)
from box_office.service.ticketing.app.query.get_show_attendance_use_case import (
    GetShowAttendanceUseCase,
)
from box_office.service.ticketing.app.query.get_show_seat_map_use_case import (
    GetShowSeatMapUseCase,
)
from box_office.service.ticketing.app.query.get_show_summary_use_case import (
    GetShowSummaryUseCase,
)
from box_office.service.ticketing.app.query.list_show_audience_use_case import (
    ListShowAudienceUseCase,
)
from box_office.service.ticketing.domain.value_object.actor import Actor
from box_office.service.ticketing.driving_adapter.http_controller.auth.actor_auth import (
    get_current_actor,
    require_admin,
)
from box_office.service.ticketing.driving_adapter.schema.show_schema import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    InitializeTicketsRequest,
    InitializeTicketsResponse,
    ShowAttendanceResponse,
    ShowSeatMapResponse,
    ShowSummaryResponse,
)
from box_office.service.ticketing.driving_adapter.schema.ticket_schema import TicketDetailResponse


router = APIRouter()


def parse_selected_ids(selected: Optional[str]) -> list[int]:
    """`?selected=1,2,3` -> [1, 2, 3]"""
    if not selected:
        return []
    try:
        return [int(part) for part in selected.split(',') if part.strip()]
    except ValueError:
        raise InputValidationError(
            'selected must be a comma-separated list of ticket ids',
            context={'field': 'selected', 'value': selected},
        )


@router.post('/{show_id}/initialize-tickets', status_code=status.HTTP_201_CREATED)
@Logger.io
async def initialize_show_tickets(
    show_id: int,
    response: Response,
    request: InitializeTicketsRequest | None = None,
    actor: Actor = Depends(require_admin),
    use_case: InitializeShowTicketsUseCase = Depends(InitializeShowTicketsUseCase.depends),
) -> InitializeTicketsResponse:
    count = await use_case.execute(
        show_id=show_id, seat_categories=request.seat_categories if request else None
    )
    if count == 0:
        response.status_code = status.HTTP_200_OK
        return InitializeTicketsResponse(message='all tickets already exist', count=0)
    return InitializeTicketsResponse(message=f'{count} tickets created', count=count)


@router.post('/{show_id}/categories', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket_category(
    show_id: int,
    request: CategoryCreateRequest,
    actor: Actor = Depends(require_admin),
    use_case: CreateTicketCategoryUseCase = Depends(CreateTicketCategoryUseCase.depends),
) -> CategoryResponse:
    category = await use_case.execute(show_id=show_id, **request.model_dump())
    return CategoryResponse.model_validate(category)


@router.put('/{show_id}/categories/{category_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_ticket_category(
    show_id: int,
    category_id: int,
    request: CategoryUpdateRequest,
    actor: Actor = Depends(require_admin),
    use_case: UpdateTicketCategoryUseCase = Depends(UpdateTicketCategoryUseCase.depends),
) -> CategoryResponse:
    category = await use_case.execute(
        show_id=show_id, category_id=category_id, **request.model_dump(exclude_none=True)
    )
    return CategoryResponse.model_validate(category)


@router.get('/{show_id}/seat-map', status_code=status.HTTP_200_OK)
@Logger.io
async def get_show_seat_map(
    show_id: int,
    selected: Optional[str] = Query(default=None, description='Comma-separated ticket ids'),
    actor: Actor = Depends(get_current_actor),
    use_case: GetShowSeatMapUseCase = Depends(GetShowSeatMapUseCase.depends),
) -> ShowSeatMapResponse:
    seat_map = await use_case.execute(
        show_id=show_id, selected_ticket_ids=parse_selected_ids(selected)
    )
    return ShowSeatMapResponse.model_validate(seat_map)


@router.get('/{show_id}/summary', status_code=status.HTTP_200_OK)
@Logger.io
async def get_show_summary(
    show_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: GetShowSummaryUseCase = Depends(GetShowSummaryUseCase.depends),
) -> ShowSummaryResponse:
    summary = await use_case.execute(show_id=show_id)
    return ShowSummaryResponse.model_validate(summary)


@router.get('/{show_id}/attendance', status_code=status.HTTP_200_OK)
@Logger.io
async def get_show_attendance(
    show_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: GetShowAttendanceUseCase = Depends(GetShowAttendanceUseCase.depends),
) -> ShowAttendanceResponse:
    attendance = await use_case.execute(show_id=show_id)
    return ShowAttendanceResponse.model_validate(attendance)


@router.get('/{show_id}/audience', status_code=status.HTTP_200_OK)
@Logger.io
async def list_show_audience(
    show_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: ListShowAudienceUseCase = Depends(ListShowAudienceUseCase.depends),
) -> List[TicketDetailResponse]:
    details = await use_case.execute(show_id=show_id)
    return [TicketDetailResponse.model_validate(detail) for detail in details]
