from decimal import Decimal
from typing import Optional

import attrs


@attrs.define(frozen=True)
class StatusCounts:
    total: int = 0
    available: int = 0
    reserved: int = 0
    sold: int = 0
    cancelled: int = 0
    checked_in: int = 0
    revenue: Decimal = Decimal('0')


@attrs.define(frozen=True)
class CategorySummary:
    category_id: int
    name: str
    price: Decimal
    color: Optional[str]
    counts: StatusCounts


@attrs.define(frozen=True)
class ShowSummary:
    show_id: int
    show_name: str
    counts: StatusCounts
    by_category: tuple[CategorySummary, ...]
    # Percentage of tickets that are sold or reserved
    occupancy_rate: float
