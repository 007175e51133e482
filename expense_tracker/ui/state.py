"""
Screen State

What the expenses screen shows is a pure function of the current
expenses and the last submission's outcome. The front end matches on
ViewState.kind and never inspects the collection itself.
"""

from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from expense_tracker.models.expense import Expense
from expense_tracker.models.validation import ValidationResult


EMPTY_MESSAGE = "No expenses found. Start adding some!"


class ViewKind(str, Enum):
    EMPTY = "empty"
    LIST = "list"
    VALIDATION_ERROR = "validation_error"


class ViewState(BaseModel):
    kind: ViewKind
    expenses: list[Expense] = Field(default_factory=list)
    failure: Optional[ValidationResult] = None
    message: Optional[str] = None


def resolve_view(
    expenses: Iterable[Expense],
    failure: Optional[ValidationResult] = None,
) -> ViewState:
    """
    Map the current state to the view to render.

    A pending rejected submission takes precedence, so the user sees the
    problem before anything else.
    """
    expenses = list(expenses)

    if failure is not None and not failure.is_valid:
        return ViewState(
            kind=ViewKind.VALIDATION_ERROR,
            expenses=expenses,
            failure=failure,
        )

    if not expenses:
        return ViewState(kind=ViewKind.EMPTY, message=EMPTY_MESSAGE)

    return ViewState(kind=ViewKind.LIST, expenses=expenses)
