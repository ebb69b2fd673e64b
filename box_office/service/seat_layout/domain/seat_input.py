from typing import Optional

import attrs


def _positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError(f'{attribute.name} must be a positive integer, got {value}')


@attrs.frozen
class SeatInput:
    """One seat as handed to the layout engine. `status` is None for plain venue seats."""

    row: str
    number: int = attrs.field(validator=_positive)
    id: Optional[int] = None
    status: Optional[str] = None
    category_color: Optional[str] = None
    category_text_color: Optional[str] = None


@attrs.frozen
class SectionInput:
    name: str
    type: str
    seats: tuple[SeatInput, ...] = attrs.field(converter=tuple, factory=tuple)
