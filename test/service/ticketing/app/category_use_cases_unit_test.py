"""Unit tests for ticket category create / update"""

from decimal import Decimal

import pytest

from box_office.platform.exception.exceptions import InputValidationError, NotFoundError
from box_office.service.ticketing.app.command.create_ticket_category_use_case import (
    CreateTicketCategoryUseCase,
)
from box_office.service.ticketing.app.command.update_ticket_category_use_case import (
    UpdateTicketCategoryUseCase,
)


class TestCreateTicketCategory:
    @pytest.mark.asyncio
    async def test_created_and_stored(self, uow, store, venue):
        show = venue.add_show()

        category = await CreateTicketCategoryUseCase(uow=uow).execute(
            show_id=show.id, name='Balcony', price=Decimal('350'), color='#0A0'
        )

        assert category.id in store.categories
        assert store.categories[category.id].price == Decimal('350')
        assert category.created_at is not None

    @pytest.mark.asyncio
    async def test_invalid_input_never_reaches_storage(self, uow, store, venue):
        show = venue.add_show()

        with pytest.raises(InputValidationError):
            await CreateTicketCategoryUseCase(uow=uow).execute(
                show_id=show.id, name='Balcony', price=Decimal('-1')
            )

        assert store.categories == {}

    @pytest.mark.asyncio
    async def test_unknown_show(self, uow):
        with pytest.raises(NotFoundError):
            await CreateTicketCategoryUseCase(uow=uow).execute(
                show_id=404, name='Balcony', price=Decimal('1')
            )


class TestUpdateTicketCategory:
    @pytest.mark.asyncio
    async def test_partial_update(self, uow, store, seeded_show):
        category = seeded_show['category']

        updated = await UpdateTicketCategoryUseCase(uow=uow).execute(
            show_id=seeded_show['show'].id, category_id=category.id, price=Decimal('650')
        )

        assert updated.price == Decimal('650')
        assert updated.name == category.name
        assert store.categories[category.id].price == Decimal('650')

    @pytest.mark.asyncio
    async def test_invalid_color_rejected_and_not_stored(self, uow, store, seeded_show):
        category = seeded_show['category']

        with pytest.raises(InputValidationError):
            await UpdateTicketCategoryUseCase(uow=uow).execute(
                show_id=seeded_show['show'].id, category_id=category.id, color='blue'
            )

        assert store.categories[category.id].color == category.color

    @pytest.mark.asyncio
    async def test_category_must_belong_to_show(self, uow, venue, seeded_show):
        other = venue.add_show(name='Macbeth')

        with pytest.raises(NotFoundError):
            await UpdateTicketCategoryUseCase(uow=uow).execute(
                show_id=other.id, category_id=seeded_show['category'].id, name='VIP'
            )
