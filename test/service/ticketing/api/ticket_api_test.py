"""
HTTP tests for /api/ticket

The DI container is overridden with the in-memory unit of work (see conftest).
"""

from datetime import datetime

from fastapi import status

from box_office.platform.constant.route_constant import (
    TICKET_BULK_RESERVE,
    TICKET_BULK_SELL,
    TICKET_CANCEL,
    TICKET_CHANGE_CATEGORY,
    TICKET_CHECKIN,
    TICKET_LIST_BY_SHOW,
    TICKET_RELEASE,
    TICKET_RESERVE,
    TICKET_RESET,
    TICKET_SELL,
)


HOLDER_BODY = {
    'holder_name': 'Ada Lovelace',
    'holder_phone': '0912345678',
    'holder_email': 'ada@example.com',
}


class TestAuthentication:
    def test_missing_actor_headers_rejected(self, client, seeded_show):
        ticket_id = seeded_show['tickets'][0].id

        response = client.put(TICKET_RESERVE.format(ticket_id=ticket_id), json=HOLDER_BODY)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()['kind'] == 'authentication_error'

    def test_unknown_role_rejected(self, client, seeded_show, make_headers):
        ticket_id = seeded_show['tickets'][0].id

        response = client.put(
            TICKET_RESERVE.format(ticket_id=ticket_id),
            json=HOLDER_BODY,
            headers=make_headers(3, 'guest'),
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestSingleTicketRoutes:
    def test_reserve_then_release(self, client, seeded_show, agent_headers):
        ticket_id = seeded_show['tickets'][0].id

        reserved = client.put(
            TICKET_RESERVE.format(ticket_id=ticket_id), json=HOLDER_BODY, headers=agent_headers
        )
        released = client.put(TICKET_RELEASE.format(ticket_id=ticket_id), headers=agent_headers)

        assert reserved.status_code == status.HTTP_200_OK
        assert reserved.json()['status'] == 'reserved'
        assert reserved.json()['reserved_by_id'] == 7
        assert released.json()['status'] == 'available'
        assert released.json()['holder_name'] is None

    def test_reserve_twice_is_invalid_transition(self, client, seeded_show, agent_headers):
        ticket_id = seeded_show['tickets'][0].id
        client.put(
            TICKET_RESERVE.format(ticket_id=ticket_id), json=HOLDER_BODY, headers=agent_headers
        )

        response = client.put(
            TICKET_RESERVE.format(ticket_id=ticket_id), json=HOLDER_BODY, headers=agent_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            'detail': 'seat not available',
            'kind': 'invalid_transition',
            'ticket_id': ticket_id,
            'status': 'reserved',
            'operation': 'reserve',
        }

    def test_sell_without_body_holder_assigns_barcode(self, client, seeded_show, agent_headers):
        ticket_id = seeded_show['tickets'][0].id

        response = client.put(
            TICKET_SELL.format(ticket_id=ticket_id), json={}, headers=agent_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['status'] == 'sold'
        assert response.json()['barcode'] == 'SB-TEST000001'

    def test_cancel_and_reset(self, client, seeded_show, agent_headers):
        ticket_id = seeded_show['tickets'][0].id
        client.put(TICKET_SELL.format(ticket_id=ticket_id), json=HOLDER_BODY, headers=agent_headers)

        cancelled = client.put(TICKET_CANCEL.format(ticket_id=ticket_id), headers=agent_headers)
        reset = client.put(TICKET_RESET.format(ticket_id=ticket_id), headers=agent_headers)

        assert cancelled.json()['status'] == 'cancelled'
        assert cancelled.json()['barcode'] == 'SB-TEST000001'
        assert reset.json()['status'] == 'available'
        assert reset.json()['barcode'] is None

    def test_unknown_ticket_is_404(self, client, agent_headers):
        response = client.put(TICKET_CANCEL.format(ticket_id=999999), headers=agent_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['kind'] == 'not_found'

    def test_change_category(self, client, venue, seeded_show, agent_headers):
        ticket_id = seeded_show['tickets'][0].id
        vip = venue.add_category(show_id=seeded_show['show'].id, name='VIP', price='900')

        response = client.put(
            TICKET_CHANGE_CATEGORY.format(ticket_id=ticket_id),
            json={'category_id': vip.id},
            headers=agent_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['category_id'] == vip.id

    def test_malformed_body_is_400(self, client, seeded_show, agent_headers):
        ticket_id = seeded_show['tickets'][0].id

        response = client.put(
            TICKET_CHANGE_CATEGORY.format(ticket_id=ticket_id),
            json={'category_id': 'x'},
            headers=agent_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['kind'] == 'validation_error'


class TestBulkRoutes:
    def test_bulk_reserve(self, client, seeded_show, agent_headers):
        ids = [t.id for t in seeded_show['tickets'][:3]]

        response = client.put(
            TICKET_BULK_RESERVE, json={'ticket_ids': ids, **HOLDER_BODY}, headers=agent_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'message': '3 tickets reserved', 'count': 3, 'ticket_ids': ids}

    def test_bulk_sell_mismatch_is_409_without_writes(
        self, client, store, seeded_show, agent_headers
    ):
        ids = [t.id for t in seeded_show['tickets'][:3]]
        client.put(TICKET_SELL.format(ticket_id=ids[1]), json=HOLDER_BODY, headers=agent_headers)

        response = client.put(
            TICKET_BULK_SELL, json={'ticket_ids': ids}, headers=agent_headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        body = response.json()
        assert body['kind'] == 'precondition_batch_mismatch'
        assert body['rejected_ticket_ids'] == [ids[1]]
        assert store.tickets[ids[0]].status == 'available'
        assert store.tickets[ids[2]].status == 'available'

    def test_bulk_with_empty_ids_is_400(self, client, agent_headers):
        response = client.put(
            TICKET_BULK_RESERVE, json={'ticket_ids': []}, headers=agent_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestCheckinRoute:
    def test_checkin_once_then_already_checked_in(self, client, seeded_show, usher_headers):
        ticket_id = seeded_show['tickets'][0].id
        sold = client.put(
            TICKET_SELL.format(ticket_id=ticket_id), json=HOLDER_BODY, headers=usher_headers
        )
        barcode = sold.json()['barcode']

        first = client.post(TICKET_CHECKIN, json={'barcode': barcode}, headers=usher_headers)
        second = client.post(TICKET_CHECKIN, json={'barcode': barcode}, headers=usher_headers)

        assert first.status_code == status.HTTP_200_OK
        assert first.json()['message'] == 'checked in'
        checked_in_at = datetime.fromisoformat(first.json()['ticket']['checked_in_at'])
        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json()['kind'] == 'already_checked_in'
        assert datetime.fromisoformat(second.json()['checked_in_at']) == checked_in_at

    def test_unknown_barcode_is_404(self, client, usher_headers):
        response = client.post(
            TICKET_CHECKIN, json={'barcode': 'SB-UNKNOWN'}, headers=usher_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['detail'] == 'invalid barcode'


def test_list_show_tickets(client, seeded_show, agent_headers):
    response = client.get(
        TICKET_LIST_BY_SHOW.format(show_id=seeded_show['show'].id), headers=agent_headers
    )

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert len(body) == 8
    assert [(t['row'], t['seat_number']) for t in body[:2]] == [('A', 1), ('A', 2)]
    assert body[0]['category_price'] == '500.00'
    assert body[0]['ticket']['status'] == 'available'
