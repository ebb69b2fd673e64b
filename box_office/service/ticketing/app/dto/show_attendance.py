import attrs

from box_office.service.ticketing.app.dto.ticket_detail import TicketDetail


@attrs.define(frozen=True)
class ShowAttendance:
    show_id: int
    checked_in: tuple[TicketDetail, ...]
    not_checked_in: tuple[TicketDetail, ...]
    # Percentage of sold tickets that were checked in
    attendance_rate: float

    @property
    def total_sold(self) -> int:
        return len(self.checked_in) + len(self.not_checked_in)

    @property
    def checked_in_count(self) -> int:
        return len(self.checked_in)

    @property
    def not_checked_in_count(self) -> int:
        return len(self.not_checked_in)
