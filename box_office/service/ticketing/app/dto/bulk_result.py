import attrs


@attrs.define(frozen=True)
class BulkResult:
    count: int
    ticket_ids: tuple[int, ...]
