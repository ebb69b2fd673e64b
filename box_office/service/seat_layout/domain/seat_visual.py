from typing import Optional

import attrs

from box_office.service.seat_layout.domain.seat_input import SeatInput


DEFAULT_STATUS = 'available'


@attrs.frozen
class SeatVisual:
    status: str
    css_classes: tuple[str, ...]
    background_color: Optional[str] = None
    text_color: Optional[str] = None


def derive_seat_visual(seat: SeatInput, *, selected: bool = False) -> SeatVisual:
    """
    Seats without a status are available. Only available seats take the
    category colors; every other status is styled by its css class alone.
    """
    status = seat.status or DEFAULT_STATUS
    css_classes = ('seat', status, 'selected') if selected else ('seat', status)
    if status != DEFAULT_STATUS:
        return SeatVisual(status=status, css_classes=css_classes)
    return SeatVisual(
        status=status,
        css_classes=css_classes,
        background_color=seat.category_color,
        text_color=seat.category_text_color,
    )
