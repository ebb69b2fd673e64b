"""Render model produced by the layout engine. Every node is immutable."""

from enum import StrEnum
from typing import Any, Optional

import attrs

from box_office.service.seat_layout.domain.seat_input import SeatInput
from box_office.service.seat_layout.domain.seat_visual import SeatVisual


class LayoutMode(StrEnum):
    STANDARD = 'standard'
    THEATER = 'theater'


class TokenKind(StrEnum):
    SEAT = 'seat'
    ROW_LABEL = 'row_label'
    AISLE = 'aisle'


@attrs.frozen
class SeatCell:
    seat: SeatInput
    selected: bool
    visual: SeatVisual
    # Whatever the caller's render_seat hook returned for this seat
    override: Optional[Any] = None


@attrs.frozen
class LayoutToken:
    kind: TokenKind
    cell: Optional[SeatCell] = None
    label: Optional[str] = None


@attrs.frozen
class StandardRow:
    label: str
    seats: tuple[SeatCell, ...]


@attrs.frozen
class SectionLayout:
    name: str
    type: str
    type_label: str
    seat_count: int
    rows: tuple[StandardRow, ...]


@attrs.frozen
class TheaterRow:
    label: str
    left_wing: tuple[SeatCell, ...]
    center_evens: tuple[SeatCell, ...]
    center_odds: tuple[SeatCell, ...]
    right_wing: tuple[SeatCell, ...]

    @property
    def tokens(self) -> tuple[LayoutToken, ...]:
        """
        Left-to-right display sequence: left wing, label, center evens, aisle,
        center odds, label again, right wing.
        """
        row_label = LayoutToken(kind=TokenKind.ROW_LABEL, label=self.label)
        return (
            *(LayoutToken(kind=TokenKind.SEAT, cell=cell) for cell in self.left_wing),
            row_label,
            *(LayoutToken(kind=TokenKind.SEAT, cell=cell) for cell in self.center_evens),
            LayoutToken(kind=TokenKind.AISLE),
            *(LayoutToken(kind=TokenKind.SEAT, cell=cell) for cell in self.center_odds),
            row_label,
            *(LayoutToken(kind=TokenKind.SEAT, cell=cell) for cell in self.right_wing),
        )


@attrs.frozen
class TheaterBlock:
    left_wing_name: str
    center_name: str
    right_wing_name: str
    rows: tuple[TheaterRow, ...]


@attrs.frozen
class SeatLayout:
    mode: LayoutMode
    # Standard-mode sections: every section of a standard floor, or the leftovers of a theater floor
    sections: tuple[SectionLayout, ...]
    theater: Optional[TheaterBlock] = None
