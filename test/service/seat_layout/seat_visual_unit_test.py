"""Unit tests for default seat visual state"""

import pytest

from box_office.service.seat_layout.domain.seat_input import SeatInput
from box_office.service.seat_layout.domain.seat_visual import derive_seat_visual


@pytest.mark.unit
class TestDeriveSeatVisual:
    def test_missing_status_defaults_to_available_with_category_colors(self):
        seat = SeatInput(row='A', number=1, category_color='#FF0000', category_text_color='#FFF')

        visual = derive_seat_visual(seat)

        assert visual.status == 'available'
        assert visual.css_classes == ('seat', 'available')
        assert visual.background_color == '#FF0000'
        assert visual.text_color == '#FFF'

    @pytest.mark.parametrize('status', ['reserved', 'sold', 'cancelled'])
    def test_non_available_status_ignores_category_colors(self, status: str):
        seat = SeatInput(row='A', number=1, status=status, category_color='#FF0000')

        visual = derive_seat_visual(seat)

        assert visual.status == status
        assert visual.css_classes == ('seat', status)
        assert visual.background_color is None
        assert visual.text_color is None

    def test_selected_adds_css_class(self):
        visual = derive_seat_visual(SeatInput(row='A', number=1, status='sold'), selected=True)

        assert visual.css_classes == ('seat', 'sold', 'selected')
