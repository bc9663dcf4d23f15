"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Event metrics
events_written = Counter(
    'events_written_total',
    'Event write operations that reached the store',
    ['operation']  # create, update, delete
)

# Ticket metrics
tickets_issued = Counter(
    'tickets_issued_total',
    'Tickets issued for upcoming events'
)

ticket_usage = Counter(
    'ticket_usage_total',
    'Ticket usage attempts',
    ['result']  # used, rejected
)

# Error metrics
domain_errors = Counter(
    'domain_errors_total',
    'Requests rejected by a validation or business rule',
    ['code']
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )

# Convenience functions for instrumentation
def record_event_write(operation: str):
    """Record event write. Operation: create, update, delete"""
    events_written.labels(operation=operation).inc()

def record_ticket_issued():
    tickets_issued.inc()

def record_ticket_usage(used: bool):
    """Record ticket usage attempt."""
    result = "used" if used else "rejected"
    ticket_usage.labels(result=result).inc()

def record_domain_error(code: str):
    domain_errors.labels(code=code).inc()
