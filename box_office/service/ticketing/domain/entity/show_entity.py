from datetime import datetime
from typing import List, Optional

import attrs

from box_office.platform.exception.exceptions import InputValidationError
from box_office.service.ticketing.domain.entity.ticket_category_entity import TicketCategory
from box_office.service.ticketing.domain.enum.show_status import ShowStatus


@attrs.define
class Show:
    id: int
    venue_id: int
    name: str
    date: datetime
    status: ShowStatus = ShowStatus.UPCOMING
    description: Optional[str] = None
    # Ordered by creation, oldest first
    categories: List[TicketCategory] = attrs.field(factory=list)

    @property
    def default_category(self) -> TicketCategory:
        if not self.categories:
            raise InputValidationError(
                'create a ticket category first', context={'show_id': self.id}
            )
        return self.categories[0]
