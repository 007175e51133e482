"""
Audit Models for Expense Tracker

Every user action on the expense list is recorded as an event.
This provides:
1. Traceability of what was added, dismissed and restored
2. Debugging information when a submission is rejected
3. Ability to reconstruct the session's history

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from expense_tracker.models.expense import Expense


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    EXPENSE_ADDED = "expense_added"
    EXPENSE_REMOVED = "expense_removed"
    EXPENSE_RESTORED = "expense_restored"
    VALIDATION_FAILED = "validation_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which expense is this about?
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the expense this event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., a dismiss and its undo)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(expense, correlation_id)
        event = AuditEventBuilder.validation_failed(["empty_title"], correlation_id)
    """

    @staticmethod
    def expense_added(
        expense: Expense,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            entity_id=expense.id,
            correlation_id=correlation_id,
            description=f"Expense added: {expense.title}",
            details=expense.to_log_dict(),
        )

    @staticmethod
    def expense_removed(
        expense: Expense,
        index: int,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_REMOVED,
            entity_id=expense.id,
            correlation_id=correlation_id,
            description=f"Expense removed: {expense.title}",
            details={**expense.to_log_dict(), "index": index},
        )

    @staticmethod
    def expense_restored(
        expense: Expense,
        index: int,
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_RESTORED,
            entity_id=expense.id,
            correlation_id=correlation_id,
            description=f"Expense restored: {expense.title}",
            details={**expense.to_log_dict(), "index": index},
        )

    @staticmethod
    def validation_failed(
        failures: list[str],
        correlation_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Submission rejected with {len(failures)} issues",
            details={"failures": failures},
        )
