"""
Audit Logger

Every user action on the expense list is logged.
This provides:
1. Traceability of additions, dismissals and undos
2. Debugging capability for rejected submissions
3. A short in-memory history the UI can show

The audit logger:
- Is synchronous, like everything else in a single UI callback
- Gracefully handles sink failures (doesn't break the user flow)
- Supports correlation IDs to trace related events
"""

from collections import deque
from typing import Callable, Optional
from uuid import UUID, uuid4

import structlog

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from expense_tracker.models.expense import Expense


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


AuditSink = Callable[[AuditEvent], None]


class AuditLogger:
    """
    Central audit logging service.

    Logs events to:
    1. Structured local log (for debugging)
    2. An in-memory history of the most recent events
    3. An optional sink callable (e.g. a UI activity feed)
    """

    def __init__(
        self,
        history_size: int = 100,
        sink: Optional[AuditSink] = None,
    ):
        """
        Initialize audit logger.

        Args:
            history_size: How many recent events to keep in memory.
            sink: Called with every event. Failures are logged, not raised.
        """
        self._history: deque[AuditEvent] = deque(maxlen=history_size)
        self._sink = sink
        self._logger = structlog.get_logger(__name__)

    @property
    def recent_events(self) -> list[AuditEvent]:
        """Recent events, oldest first."""
        return list(self._history)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Returns False if the sink failed.
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._history.append(event)

        if self._sink:
            try:
                self._sink(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_sink_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_expense_added(
        self,
        expense: Expense,
        correlation_id: UUID,
    ) -> None:
        """Log an accepted submission."""
        self.log(AuditEventBuilder.expense_added(
            expense=expense,
            correlation_id=correlation_id,
        ))

    def log_expense_removed(
        self,
        expense: Expense,
        index: int,
        correlation_id: UUID,
    ) -> None:
        """Log a dismissal."""
        self.log(AuditEventBuilder.expense_removed(
            expense=expense,
            index=index,
            correlation_id=correlation_id,
        ))

    def log_expense_restored(
        self,
        expense: Expense,
        index: int,
        correlation_id: UUID,
    ) -> None:
        """Log an undo."""
        self.log(AuditEventBuilder.expense_restored(
            expense=expense,
            index=index,
            correlation_id=correlation_id,
        ))

    def log_validation_failed(
        self,
        failures: list[str],
        correlation_id: UUID,
    ) -> None:
        """Log a rejected submission."""
        self.log(AuditEventBuilder.validation_failed(
            failures=failures,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a user action (submit, dismiss) and pass it
    to every event that action produces.
    """
    return uuid4()
