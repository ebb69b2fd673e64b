"""
Seat Layout Engine

Turns flat section/seat data into an ordered render model. Pure and
deterministic: the input is never mutated and the same input + selection
always yields an equal SeatLayout.

A floor is laid out in theater mode only when its sections include a
left wing, a center and a right wing; every other section is laid out
row by row in standard mode.
"""

from collections.abc import Callable, Iterable
from typing import Any, Optional

from box_office.platform.exception.exceptions import InputValidationError
from box_office.service.seat_layout.domain.row_order import sort_row_labels
from box_office.service.seat_layout.domain.seat_input import SeatInput, SectionInput
from box_office.service.seat_layout.domain.seat_layout import (
    LayoutMode,
    SeatCell,
    SeatLayout,
    SectionLayout,
    StandardRow,
    TheaterBlock,
    TheaterRow,
)
from box_office.service.seat_layout.domain.seat_visual import derive_seat_visual
from box_office.service.seat_layout.domain.section_type import (
    THEATER_ROLES,
    SectionType,
    section_type_label,
)


RenderSeat = Callable[[SeatCell], Any]


class DuplicateTheaterRoleError(InputValidationError):
    def __init__(self, role: str, section_names: list[str]) -> None:
        super().__init__(
            f'Only one {role} section is allowed on a theater floor',
            context={'role': role, 'sections': section_names},
        )


def is_theater_layout(sections: Iterable[SectionInput]) -> bool:
    types = {section.type for section in sections}
    return all(role in types for role in THEATER_ROLES)


def group_seats_by_row(seats: Iterable[SeatInput]) -> dict[str, list[SeatInput]]:
    rows: dict[str, list[SeatInput]] = {}
    for seat in seats:
        rows.setdefault(seat.row, []).append(seat)
    return rows


class _CellBuilder:
    def __init__(self, selected: frozenset[int], render_seat: Optional[RenderSeat]) -> None:
        self.selected = selected
        self.render_seat = render_seat

    def __call__(self, seat: SeatInput) -> SeatCell:
        is_selected = seat.id is not None and seat.id in self.selected
        cell = SeatCell(
            seat=seat,
            selected=is_selected,
            visual=derive_seat_visual(seat, selected=is_selected),
        )
        if self.render_seat is None:
            return cell
        return SeatCell(
            seat=cell.seat,
            selected=cell.selected,
            visual=cell.visual,
            override=self.render_seat(cell),
        )

    def many(self, seats: Iterable[SeatInput]) -> tuple[SeatCell, ...]:
        return tuple(self(seat) for seat in seats)


def _by_number(seats: Iterable[SeatInput], *, reverse: bool = False) -> list[SeatInput]:
    return sorted(seats, key=lambda seat: seat.number, reverse=reverse)


def _layout_standard_section(section: SectionInput, build: _CellBuilder) -> SectionLayout:
    rows = group_seats_by_row(section.seats)
    return SectionLayout(
        name=section.name,
        type=section.type,
        type_label=section_type_label(section.type),
        seat_count=len(section.seats),
        rows=tuple(
            StandardRow(label=label, seats=build.many(_by_number(rows[label])))
            for label in sort_row_labels(rows)
        ),
    )


def _pick_role_section(sections: list[SectionInput], role: str) -> SectionInput:
    matches = [section for section in sections if section.type == role]
    if len(matches) > 1:
        raise DuplicateTheaterRoleError(role, [section.name for section in matches])
    return matches[0]


def _layout_theater_row(
    label: str,
    *,
    left: list[SeatInput],
    center: list[SeatInput],
    right: list[SeatInput],
    build: _CellBuilder,
) -> TheaterRow:
    # Numbering diverges outward from the center aisle: evens to the left, odds to the right
    evens = [seat for seat in center if seat.number % 2 == 0]
    odds = [seat for seat in center if seat.number % 2 == 1]
    return TheaterRow(
        label=label,
        left_wing=build.many(_by_number(left, reverse=True)),
        center_evens=build.many(_by_number(evens, reverse=True)),
        center_odds=build.many(_by_number(odds)),
        right_wing=build.many(_by_number(right)),
    )


def _layout_theater_block(sections: list[SectionInput], build: _CellBuilder) -> TheaterBlock:
    left_wing = _pick_role_section(sections, SectionType.LEFT_WING)
    center = _pick_role_section(sections, SectionType.CENTER)
    right_wing = _pick_role_section(sections, SectionType.RIGHT_WING)

    left_rows = group_seats_by_row(left_wing.seats)
    center_rows = group_seats_by_row(center.seats)
    right_rows = group_seats_by_row(right_wing.seats)
    labels = sort_row_labels([*left_rows, *center_rows, *right_rows])

    return TheaterBlock(
        left_wing_name=left_wing.name,
        center_name=center.name,
        right_wing_name=right_wing.name,
        rows=tuple(
            _layout_theater_row(
                label,
                left=left_rows.get(label, []),
                center=center_rows.get(label, []),
                right=right_rows.get(label, []),
                build=build,
            )
            for label in labels
        ),
    )


def compute_layout(
    sections: Iterable[SectionInput],
    *,
    selected: Iterable[int] = (),
    render_seat: Optional[RenderSeat] = None,
) -> SeatLayout:
    """
    Lay out one floor.

    Args:
        sections: sections of the floor, in any order, seats in any order
        selected: seat ids to flag as selected
        render_seat: optional hook called once per seat cell; its return value
            is stored on the cell as `override`

    Raises:
        DuplicateTheaterRoleError: a theater floor has two sections with the same wing/center role
    """
    sections = list(sections)
    build = _CellBuilder(frozenset(selected), render_seat)

    if not is_theater_layout(sections):
        return SeatLayout(
            mode=LayoutMode.STANDARD,
            sections=tuple(_layout_standard_section(section, build) for section in sections),
        )

    leftovers = [section for section in sections if section.type not in THEATER_ROLES]
    return SeatLayout(
        mode=LayoutMode.THEATER,
        theater=_layout_theater_block(sections, build),
        sections=tuple(_layout_standard_section(section, build) for section in leftovers),
    )
