"""Validation package."""

from expense_tracker.validation.validator import (
    INVALID_INPUT_MESSAGE,
    INVALID_INPUT_TITLE,
    ExpenseValidator,
    parse_amount,
    validate_expense,
)

__all__ = [
    "INVALID_INPUT_MESSAGE",
    "INVALID_INPUT_TITLE",
    "ExpenseValidator",
    "parse_amount",
    "validate_expense",
]
