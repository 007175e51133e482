"""
Data Models Package

This package contains all Pydantic models used in the Expense Tracker.
All data flowing through the system must conform to these schemas.
"""

from expense_tracker.models.expense import (
    Category,
    Expense,
    ExpenseBucket,
    ExpenseTrackerError,
    InvalidExpenseError,
    parse_category,
)
from expense_tracker.models.validation import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "Category",
    "Expense",
    "ExpenseBucket",
    "ExpenseTrackerError",
    "InvalidExpenseError",
    "parse_category",
    # Validation models
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
