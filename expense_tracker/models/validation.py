"""
Validation Result Models

A rejected submission is an expected outcome, not an error. The validator
returns one of these results and the caller decides how to show it.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from expense_tracker.models.expense import Expense


class ValidationFailure(str, Enum):
    """
    Reasons a submission can be rejected.

    Several can occur at once.
    """
    EMPTY_TITLE = "empty_title"
    INVALID_AMOUNT = "invalid_amount"  # Unparseable, or not > 0
    MISSING_DATE = "missing_date"


class ValidationIssue(BaseModel):
    """A single validation issue found."""

    failure: ValidationFailure = Field(
        ...,
        description="Which condition failed"
    )
    field: str = Field(
        ...,
        description="Form field with the issue"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ValidationResult(BaseModel):
    """
    Outcome of validating one form submission.

    Exactly one of the two shapes:
    - success: expense is set, issues is empty
    - failure: expense is None, issues lists every failed condition
    """

    expense: Optional[Expense] = None
    issues: list[ValidationIssue] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_shape(self) -> 'ValidationResult':
        if self.expense is not None and self.issues:
            raise ValueError("A successful result cannot carry issues")
        if self.expense is None and not self.issues:
            raise ValueError("A failed result must list at least one issue")
        return self

    @property
    def is_valid(self) -> bool:
        return self.expense is not None

    @property
    def failures(self) -> set[ValidationFailure]:
        return {issue.failure for issue in self.issues}

    @classmethod
    def success(cls, expense: Expense) -> 'ValidationResult':
        return cls(expense=expense)

    @classmethod
    def failure(cls, issues: list[ValidationIssue]) -> 'ValidationResult':
        return cls(issues=issues)
