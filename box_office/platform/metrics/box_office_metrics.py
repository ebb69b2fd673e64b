from prometheus_client import Counter


class BoxOfficeMetrics:
    """
    Box office business metrics

    Exposed on /metrics; tracks ticket transitions, bulk batches and check-ins
    """

    def __init__(self):
        self.ticket_transitions = Counter(
            'box_office_ticket_transitions_total',
            'Tickets moved to a new status',
            ['operation'],  # reserve/sell/release/cancel/reset/checkin
        )

        self.tickets_initialized = Counter(
            'box_office_tickets_initialized_total',
            'Tickets created by show initialization',
        )

    # ========== Helper Methods ==========

    def record_ticket_transition(self, *, operation: str, count: int = 1):
        self.ticket_transitions.labels(operation=operation).inc(count)

    def record_tickets_initialized(self, *, count: int):
        self.tickets_initialized.inc(count)


# Global metrics instance
metrics = BoxOfficeMetrics()
