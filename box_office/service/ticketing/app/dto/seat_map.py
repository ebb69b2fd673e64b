import attrs

from box_office.service.seat_layout.domain.seat_layout import SeatLayout


@attrs.define(frozen=True)
class FloorSeatMap:
    floor_id: int
    floor_name: str
    level: int
    layout: SeatLayout


@attrs.define(frozen=True)
class ShowSeatMap:
    show_id: int
    floors: tuple[FloorSeatMap, ...]
