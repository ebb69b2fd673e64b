from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from box_office.service.ticketing.domain.validators import (
    ColorValidators,
    NumericValidators,
    StringValidators,
)


def _to_decimal(value: object) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _strip(value: str) -> str:
    return value.strip() if isinstance(value, str) else value


@attrs.define
class TicketCategory:
    show_id: int
    name: str = attrs.field(converter=_strip, validator=StringValidators.validate_category_name)
    price: Decimal = attrs.field(
        converter=_to_decimal, validator=NumericValidators.validate_non_negative_price
    )
    color: Optional[str] = attrs.field(
        default=None, validator=ColorValidators.validate_optional_hex_color
    )
    text_color: Optional[str] = attrs.field(
        default=None, validator=ColorValidators.validate_optional_hex_color
    )
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def update(
        self,
        *,
        name: Optional[str] = None,
        price: Optional[Decimal] = None,
        color: Optional[str] = None,
        text_color: Optional[str] = None,
        description: Optional[str] = None,
    ) -> 'TicketCategory':
        """Apply the given fields; None means unchanged. evolve re-runs the validators."""
        changes = {
            key: value
            for key, value in {
                'name': name,
                'price': price,
                'color': color,
                'text_color': text_color,
                'description': description,
            }.items()
            if value is not None
        }
        return attrs.evolve(self, **changes)
