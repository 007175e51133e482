"""
Main Orchestrator for Expense Tracker

This module ties together the validator, the collection and the audit
log, and defines the user actions of the expenses screen:
1. Submit (form values -> validate -> add, or reject with a message)
2. Dismiss (swipe a row away, immediately and without confirmation)
3. Undo (put the last dismissed row back where it was)

DESIGN DECISION: The orchestrator enforces the boundaries:
- Nothing enters the collection without passing validation
- A rejected submission is returned, never raised
- Every action is audited
"""

import datetime as dt
from typing import NamedTuple, Optional, Union
from uuid import UUID

from expense_tracker.audit import AuditLogger, create_correlation_id
from expense_tracker.collection import ExpenseCollection
from expense_tracker.config import Settings, get_settings
from expense_tracker.models.expense import Category, Expense
from expense_tracker.models.validation import ValidationResult
from expense_tracker.ui.theme import ThemeConfig
from expense_tracker.validation import ExpenseValidator


class SubmitOutcome(NamedTuple):
    """Result of a form submission."""
    result: ValidationResult
    message: str
    correlation_id: UUID

    @property
    def accepted(self) -> bool:
        return self.result.is_valid


class RemovedExpense(NamedTuple):
    """A dismissed expense and where it used to be, for undo."""
    expense: Expense
    index: int
    correlation_id: UUID


class ExpenseFlow:
    """
    Orchestrates the expenses screen.

    All methods are synchronous and run to completion within a single
    UI callback.
    """

    def __init__(
        self,
        collection: Optional[ExpenseCollection] = None,
        validator: Optional[ExpenseValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._collection = collection if collection is not None else ExpenseCollection()
        self._validator = validator or ExpenseValidator()
        self._audit_logger = audit_logger

    @property
    def collection(self) -> ExpenseCollection:
        return self._collection

    @property
    def validator(self) -> ExpenseValidator:
        return self._validator

    def submit(
        self,
        title: Optional[str],
        amount_text: Optional[str],
        expense_date: Optional[dt.date],
        category: Union[Category, str, None] = None,
    ) -> SubmitOutcome:
        """
        Validate a form submission and add it if it passes.

        Returns:
            SubmitOutcome; message is empty on success and holds the text
            for the blocking notification on failure.
        """
        correlation_id = create_correlation_id()

        result = self._validator.validate(title, amount_text, expense_date, category)

        if not result.is_valid:
            if self._audit_logger:
                self._audit_logger.log_validation_failed(
                    failures=[issue.failure.value for issue in result.issues],
                    correlation_id=correlation_id,
                )
            return SubmitOutcome(
                result=result,
                message=self._validator.get_user_friendly_summary(result),
                correlation_id=correlation_id,
            )

        self._collection.add(result.expense)

        if self._audit_logger:
            self._audit_logger.log_expense_added(
                expense=result.expense,
                correlation_id=correlation_id,
            )

        return SubmitOutcome(result=result, message="", correlation_id=correlation_id)

    def dismiss(self, expense_id: UUID) -> Optional[RemovedExpense]:
        """
        Remove an expense immediately.

        Returns None if the id is not (or no longer) in the collection.
        """
        index = self._collection.index_of(expense_id)
        if index is None:
            return None

        expense = self._collection.remove(expense_id)
        correlation_id = create_correlation_id()

        if self._audit_logger:
            self._audit_logger.log_expense_removed(
                expense=expense,
                index=index,
                correlation_id=correlation_id,
            )

        return RemovedExpense(expense=expense, index=index, correlation_id=correlation_id)

    def undo(self, removed: RemovedExpense) -> int:
        """
        Put a dismissed expense back.

        Returns the index it was restored at. Restoring an expense that
        is already back in the list does nothing and returns its index.
        """
        existing = self._collection.index_of(removed.expense.id)
        if existing is not None:
            return existing

        index = self._collection.restore(removed.expense, removed.index)

        if self._audit_logger:
            self._audit_logger.log_expense_restored(
                expense=removed.expense,
                index=index,
                correlation_id=removed.correlation_id,
            )

        return index


def create_app_components(
    settings: Optional[Settings] = None,
) -> tuple[ExpenseFlow, ThemeConfig, AuditLogger]:
    """
    Create all application components.

    Returns:
        (expense_flow, theme, audit_logger)
    """
    settings = settings or get_settings()
    app_settings = settings.app

    audit_logger = AuditLogger(history_size=app_settings.audit_history_size)
    validator = ExpenseValidator.from_settings(settings)
    flow = ExpenseFlow(
        collection=ExpenseCollection(),
        validator=validator,
        audit_logger=audit_logger,
    )
    theme = ThemeConfig.from_settings(settings.theme)

    return flow, theme, audit_logger
