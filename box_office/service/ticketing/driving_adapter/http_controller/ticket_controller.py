from typing import List

from fastapi import APIRouter, Depends, status

from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.app.command.bulk_reserve_tickets_use_case import (
    BulkReserveTicketsUseCase,
)
from box_office.service.ticketing.app.command.bulk_sell_tickets_use_case import (
    BulkSellTicketsUseCase,
)
from box_office.service.ticketing.app.command.cancel_ticket_use_case import CancelTicketUseCase
from box_office.service.ticketing.app.command.change_ticket_category_use_case import (
    ChangeTicketCategoryUseCase,
)
from box_office.service.ticketing.app.command.checkin_ticket_use_case import (
    CheckinTicketUseCase,
)
from box_office.service.ticketing.app.command.release_ticket_use_case import (
    ReleaseTicketUseCase,
)
from box_office.service.ticketing.app.command.reserve_ticket_use_case import (
    ReserveTicketUseCase,
)
from box_office.service.ticketing.app.command.reset_ticket_use_case import ResetTicketUseCase
from box_office.service.ticketing.app.command.sell_ticket_use_case import SellTicketUseCase
from box_office.service.ticketing.app.query.list_show_tickets_use_case import (
    ListShowTicketsUseCase,
)
from box_office.service.ticketing.domain.value_object.actor import Actor
from box_office.service.ticketing.driving_adapter.http_controller.auth.actor_auth import (
    get_current_actor,
)
from box_office.service.ticketing.driving_adapter.schema.ticket_schema import (
    BulkResultResponse,
    BulkTicketRequest,
    ChangeCategoryRequest,
    CheckinRequest,
    CheckinResponse,
    ReserveTicketRequest,
    SellTicketRequest,
    TicketDetailResponse,
    TicketResponse,
)


router = APIRouter()


@router.get('/show/{show_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_show_tickets(
    show_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: ListShowTicketsUseCase = Depends(ListShowTicketsUseCase.depends),
) -> List[TicketDetailResponse]:
    details = await use_case.execute(show_id=show_id)
    return [TicketDetailResponse.model_validate(detail) for detail in details]


# ============================ Bulk Endpoints ============================


@router.put('/bulk-reserve', status_code=status.HTTP_200_OK)
@Logger.io
async def bulk_reserve_tickets(
    request: BulkTicketRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: BulkReserveTicketsUseCase = Depends(BulkReserveTicketsUseCase.depends),
) -> BulkResultResponse:
    result = await use_case.execute(
        ticket_ids=request.ticket_ids, holder=request.to_holder(), actor=actor
    )
    return BulkResultResponse(
        message=f'{result.count} tickets reserved',
        count=result.count,
        ticket_ids=list(result.ticket_ids),
    )


@router.put('/bulk-sell', status_code=status.HTTP_200_OK)
@Logger.io
async def bulk_sell_tickets(
    request: BulkTicketRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: BulkSellTicketsUseCase = Depends(BulkSellTicketsUseCase.depends),
) -> BulkResultResponse:
    result = await use_case.execute(
        ticket_ids=request.ticket_ids, holder=request.to_holder(), actor=actor
    )
    return BulkResultResponse(
        message=f'{result.count} tickets sold',
        count=result.count,
        ticket_ids=list(result.ticket_ids),
    )


@router.post('/checkin', status_code=status.HTTP_200_OK)
@Logger.io
async def checkin_ticket(
    request: CheckinRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: CheckinTicketUseCase = Depends(CheckinTicketUseCase.depends),
) -> CheckinResponse:
    ticket = await use_case.execute(barcode=request.barcode, actor=actor)
    return CheckinResponse(message='checked in', ticket=TicketResponse.model_validate(ticket))


# ============================ Single Ticket Endpoints ============================


@router.put('/{ticket_id}/reserve', status_code=status.HTTP_200_OK)
@Logger.io
async def reserve_ticket(
    ticket_id: int,
    request: ReserveTicketRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: ReserveTicketUseCase = Depends(ReserveTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, holder=request.to_holder(), actor=actor)
    return TicketResponse.model_validate(ticket)


@router.put('/{ticket_id}/sell', status_code=status.HTTP_200_OK)
@Logger.io
async def sell_ticket(
    ticket_id: int,
    request: SellTicketRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: SellTicketUseCase = Depends(SellTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, holder=request.to_holder(), actor=actor)
    return TicketResponse.model_validate(ticket)


@router.put('/{ticket_id}/release', status_code=status.HTTP_200_OK)
@Logger.io
async def release_ticket(
    ticket_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: ReleaseTicketUseCase = Depends(ReleaseTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, actor=actor)
    return TicketResponse.model_validate(ticket)


@router.put('/{ticket_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_ticket(
    ticket_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: CancelTicketUseCase = Depends(CancelTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, actor=actor)
    return TicketResponse.model_validate(ticket)


@router.put('/{ticket_id}/reset', status_code=status.HTTP_200_OK)
@Logger.io
async def reset_ticket(
    ticket_id: int,
    actor: Actor = Depends(get_current_actor),
    use_case: ResetTicketUseCase = Depends(ResetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, actor=actor)
    return TicketResponse.model_validate(ticket)


@router.put('/{ticket_id}/category', status_code=status.HTTP_200_OK)
@Logger.io
async def change_ticket_category(
    ticket_id: int,
    request: ChangeCategoryRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: ChangeTicketCategoryUseCase = Depends(ChangeTicketCategoryUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, category_id=request.category_id)
    return TicketResponse.model_validate(ticket)
