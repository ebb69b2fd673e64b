from datetime import datetime, timezone
from typing import Any, Callable, Optional

import attrs

from box_office.platform.exception.exceptions import (
    AlreadyCheckedInError,
    InvalidTransitionError,
)
from box_office.platform.logging.loguru_io import Logger
from box_office.service.ticketing.domain.enum.ticket_status import TicketStatus
from box_office.service.ticketing.domain.value_object.actor import Actor
from box_office.service.ticketing.domain.value_object.holder_info import HolderInfo


def _now() -> datetime:
    return datetime.now(timezone.utc)


@attrs.define
class Ticket:
    """
    A seat's sellable unit for one show.

    Transitions never mutate the instance; each returns an evolved copy or raises.

        available --reserve--> reserved --sell--> sold --checkin--> sold (checked in)
        available --sell-----> sold
        reserved  --release--> available
        reserved/sold --cancel--> cancelled
        any --reset--> available
    """

    show_id: int
    seat_id: int
    category_id: int
    status: TicketStatus = TicketStatus.AVAILABLE
    id: Optional[int] = None
    holder_name: Optional[str] = None
    holder_phone: Optional[str] = attrs.field(default=None, repr=False)
    holder_email: Optional[str] = attrs.field(default=None, repr=False)
    barcode: Optional[str] = None
    reserved_by_id: Optional[int] = None
    sold_by_id: Optional[int] = None
    reserved_at: Optional[datetime] = None
    sold_at: Optional[datetime] = None
    checked_in_at: Optional[datetime] = None

    @property
    def holder(self) -> HolderInfo:
        return HolderInfo(name=self.holder_name, phone=self.holder_phone, email=self.holder_email)

    @property
    def is_checked_in(self) -> bool:
        return self.checked_in_at is not None

    def snapshot(self) -> dict[str, Any]:
        return attrs.asdict(self)

    def _reject(self, operation: str, message: str) -> InvalidTransitionError:
        return InvalidTransitionError(
            message,
            context={'ticket_id': self.id, 'status': self.status.value, 'operation': operation},
        )

    def can_reserve(self) -> bool:
        return self.status == TicketStatus.AVAILABLE

    def can_sell(self) -> bool:
        return self.status in (TicketStatus.AVAILABLE, TicketStatus.RESERVED)

    @Logger.io
    def reserve(self, *, holder: HolderInfo, actor: Actor, now: Optional[datetime] = None) -> 'Ticket':
        if not self.can_reserve():
            raise self._reject('reserve', 'seat not available')
        return attrs.evolve(
            self,
            status=TicketStatus.RESERVED,
            holder_name=holder.name,
            holder_phone=holder.phone,
            holder_email=holder.email,
            reserved_by_id=actor.id,
            reserved_at=now or _now(),
        )

    @Logger.io
    def sell(
        self,
        *,
        holder: HolderInfo,
        actor: Actor,
        barcode_factory: Callable[[], str],
        now: Optional[datetime] = None,
    ) -> 'Ticket':
        """Blank holder fields keep what the reservation recorded; an existing barcode is kept."""
        if not self.can_sell():
            raise self._reject('sell', 'ticket cannot be sold')
        merged = holder.or_else(self.holder)
        return attrs.evolve(
            self,
            status=TicketStatus.SOLD,
            holder_name=merged.name,
            holder_phone=merged.phone,
            holder_email=merged.email,
            barcode=self.barcode or barcode_factory(),
            sold_by_id=actor.id,
            sold_at=now or _now(),
        )

    @Logger.io
    def release(self) -> 'Ticket':
        if self.status != TicketStatus.RESERVED:
            raise self._reject('release', 'ticket is not reserved')
        return attrs.evolve(
            self,
            status=TicketStatus.AVAILABLE,
            holder_name=None,
            holder_phone=None,
            holder_email=None,
            reserved_by_id=None,
            reserved_at=None,
        )

    @Logger.io
    def cancel(self) -> 'Ticket':
        # Holder, barcode and actor fields stay for audit
        if self.status not in (TicketStatus.RESERVED, TicketStatus.SOLD):
            raise self._reject('cancel', 'ticket cannot be cancelled')
        return attrs.evolve(self, status=TicketStatus.CANCELLED)

    @Logger.io
    def reset(self) -> 'Ticket':
        return attrs.evolve(
            self,
            status=TicketStatus.AVAILABLE,
            holder_name=None,
            holder_phone=None,
            holder_email=None,
            barcode=None,
            reserved_by_id=None,
            sold_by_id=None,
            reserved_at=None,
            sold_at=None,
            checked_in_at=None,
        )

    @Logger.io
    def check_in(self, *, now: Optional[datetime] = None) -> 'Ticket':
        if self.status != TicketStatus.SOLD:
            raise InvalidTransitionError(
                'ticket not sold',
                context={
                    'ticket_id': self.id,
                    'status': self.status.value,
                    'operation': 'checkin',
                    'ticket': self.snapshot(),
                },
            )
        if self.checked_in_at is not None:
            raise AlreadyCheckedInError(
                'ticket already checked in',
                context={'checked_in_at': self.checked_in_at, 'ticket': self.snapshot()},
            )
        return attrs.evolve(self, checked_in_at=now or _now())

    def change_category(self, *, category_id: int) -> 'Ticket':
        return attrs.evolve(self, category_id=category_id)
