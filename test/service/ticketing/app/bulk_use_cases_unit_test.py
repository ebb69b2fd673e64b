"""
Unit tests for bulk reserve / bulk sell

A batch is checked in full before any write: one ineligible ticket aborts
the whole batch and nothing is committed.
"""

import pytest

from box_office.platform.exception.exceptions import (
    InputValidationError,
    PreconditionBatchMismatchError,
)
from box_office.service.ticketing.app.command.bulk_reserve_tickets_use_case import (
    BulkReserveTicketsUseCase,
)
from box_office.service.ticketing.app.command.bulk_sell_tickets_use_case import (
    BulkSellTicketsUseCase,
)
from box_office.service.ticketing.app.command.reserve_ticket_use_case import (
    ReserveTicketUseCase,
)
from box_office.service.ticketing.app.command.sell_ticket_use_case import SellTicketUseCase
from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus
from box_office.service.ticketing.domain.value_object.holder_info import HolderInfo


HOLDER = HolderInfo(name='School Group', phone='0223456789')


@pytest.fixture
def ids(seeded_show) -> list[int]:
    return [ticket.id for ticket in seeded_show['tickets']]


class TestBulkReserve:
    @pytest.mark.asyncio
    async def test_all_available_tickets_reserved(self, uow, store, ids, agent):
        result = await BulkReserveTicketsUseCase(uow=uow).execute(
            ticket_ids=ids[:3], holder=HOLDER, actor=agent
        )

        assert result.count == 3
        assert list(result.ticket_ids) == ids[:3]
        assert all(store.tickets[i].status == TicketStatus.RESERVED for i in ids[:3])
        assert len({store.tickets[i].reserved_at for i in ids[:3]}) == 1

    @pytest.mark.asyncio
    async def test_one_reserved_ticket_aborts_the_whole_batch(self, uow, store, ids, agent):
        t1, t2, t3 = ids[:3]
        await ReserveTicketUseCase(uow=uow).execute(ticket_id=t2, holder=HOLDER, actor=agent)
        commits_before = store.commits

        with pytest.raises(PreconditionBatchMismatchError) as exc_info:
            await BulkReserveTicketsUseCase(uow=uow).execute(
                ticket_ids=[t1, t2, t3], holder=HOLDER, actor=agent
            )

        assert exc_info.value.context == {
            'requested': 3,
            'eligible': 2,
            'rejected_ticket_ids': [t2],
        }
        assert store.tickets[t1].status == TicketStatus.AVAILABLE
        assert store.tickets[t3].status == TicketStatus.AVAILABLE
        assert store.commits == commits_before

    @pytest.mark.asyncio
    async def test_missing_ticket_counts_as_ineligible(self, uow, store, ids, agent):
        with pytest.raises(PreconditionBatchMismatchError) as exc_info:
            await BulkReserveTicketsUseCase(uow=uow).execute(
                ticket_ids=[ids[0], 987654], holder=HOLDER, actor=agent
            )

        assert exc_info.value.context['rejected_ticket_ids'] == [987654]
        assert store.tickets[ids[0]].status == TicketStatus.AVAILABLE

    @pytest.mark.asyncio
    @pytest.mark.parametrize('ticket_ids', [[], [1, 1]])
    async def test_empty_or_duplicate_ids_rejected(self, uow, agent, ticket_ids):
        with pytest.raises(InputValidationError):
            await BulkReserveTicketsUseCase(uow=uow).execute(
                ticket_ids=ticket_ids, holder=HOLDER, actor=agent
            )


class TestBulkSell:
    @pytest.mark.asyncio
    async def test_available_and_reserved_sold_with_own_barcodes(
        self, uow, store, ids, agent, barcodes
    ):
        await ReserveTicketUseCase(uow=uow).execute(ticket_id=ids[1], holder=HOLDER, actor=agent)

        result = await BulkSellTicketsUseCase(uow=uow, barcode_generator=barcodes).execute(
            ticket_ids=ids[:3], holder=HolderInfo(), actor=agent
        )

        assert result.count == 3
        sold = [store.tickets[i] for i in ids[:3]]
        assert all(ticket.status == TicketStatus.SOLD for ticket in sold)
        assert len({ticket.barcode for ticket in sold}) == 3
        assert store.tickets[ids[1]].holder_name == 'School Group'

    @pytest.mark.asyncio
    async def test_one_sold_ticket_aborts_before_any_write(
        self, uow, store, ids, agent, barcodes
    ):
        await SellTicketUseCase(uow=uow, barcode_generator=barcodes).execute(
            ticket_id=ids[2], holder=HOLDER, actor=agent
        )

        with pytest.raises(PreconditionBatchMismatchError) as exc_info:
            await BulkSellTicketsUseCase(uow=uow, barcode_generator=barcodes).execute(
                ticket_ids=ids[:3], holder=HOLDER, actor=agent
            )

        assert exc_info.value.context['rejected_ticket_ids'] == [ids[2]]
        assert [store.tickets[i].status for i in ids[:2]] == [TicketStatus.AVAILABLE] * 2
        assert store.tickets[ids[0]].barcode is None
