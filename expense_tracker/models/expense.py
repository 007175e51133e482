"""
Core Data Models for Expense Tracker

These models define the strict schemas for the expenses kept in a session.
They are designed to:
1. Enforce the expense invariants at runtime
2. Provide clear validation error messages
3. Be serializable for logging and the audit trail

DESIGN DECISION: An Expense is frozen once created. The only way to
"edit" one is to remove it and add a corrected one.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
)


DEFAULT_DATE_FORMAT = "%d/%m/%Y"

# Amounts must stay summable and printable with the default decimal context
MAX_AMOUNT = Decimal("1e12")


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class Category(str, Enum):
    """
    Supported expense categories.

    Explicit categories rather than free text keep the per-category
    buckets (and their totals) reliable.
    """
    FOOD = "food"
    TRAVEL = "travel"
    LEISURE = "leisure"
    WORK = "work"

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]

    @property
    def label(self) -> str:
        return self.value.title()


CATEGORY_ICONS = {
    Category.FOOD: "🍔",
    Category.TRAVEL: "✈️",
    Category.LEISURE: "🎬",
    Category.WORK: "💼",
}


# =============================================================================
# CORE EXPENSE MODEL
# =============================================================================

class Expense(BaseModel):
    """
    A single accepted expense.

    CRITICAL: Expenses should be produced by the validator, which reports
    bad input as a normal result. Constructing one directly with bad
    fields raises pydantic's ValidationError; use Expense.create() to get
    an InvalidExpenseError instead.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    # Identity
    id: UUID = Field(
        default_factory=uuid4,
        description="Unique expense ID (used as the row key for dismissal)"
    )

    title: str = Field(
        ...,
        min_length=1,
        description="What the money was spent on"
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        lt=MAX_AMOUNT,
        allow_inf_nan=False,
        description="Amount spent, strictly positive"
    )
    date: dt.date = Field(
        ...,
        description="Day the expense happened"
    )
    category: Category = Field(
        default=Category.LEISURE,
        description="Expense category"
    )

    @classmethod
    def create(
        cls,
        title: str,
        amount: Decimal,
        date: dt.date,
        category: Category = Category.LEISURE,
    ) -> "Expense":
        """Build an expense, raising InvalidExpenseError on bad fields."""
        try:
            return cls(title=title, amount=amount, date=date, category=category)
        except ValidationError as e:
            raise InvalidExpenseError(str(e)) from e

    @property
    def formatted_date(self) -> str:
        return self.format_date()

    def format_date(self, fmt: str = DEFAULT_DATE_FORMAT) -> str:
        """Render the date for display."""
        return self.date.strftime(fmt)

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "id": str(self.id),
            "title": self.title,
            "amount": str(self.amount),
            "date": self.date.isoformat(),
            "category": self.category.value,
        }


# =============================================================================
# GROUPING
# =============================================================================

class ExpenseBucket(BaseModel):
    """
    All expenses of one category.

    Used for the per-category totals shown above the list.
    """

    category: Category
    expenses: list[Expense] = Field(default_factory=list)

    @classmethod
    def for_category(
        cls,
        expenses: Iterable[Expense],
        category: Category,
    ) -> "ExpenseBucket":
        """Build a bucket holding only the given category's expenses."""
        return cls(
            category=category,
            expenses=[e for e in expenses if e.category == category],
        )

    @property
    def total_expenses(self) -> Decimal:
        return sum((e.amount for e in self.expenses), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return not self.expenses


def parse_category(value: Optional[str]) -> Optional[Category]:
    """Look up a category by value, ignoring case; None if unknown."""
    if value is None:
        return None
    try:
        return Category(value.strip().lower())
    except ValueError:
        return None


# =============================================================================
# EXCEPTIONS
# =============================================================================

class ExpenseTrackerError(Exception):
    """Base exception for the expense tracker."""
    pass


class InvalidExpenseError(ExpenseTrackerError, ValueError):
    """An Expense was constructed directly from invalid fields."""
    pass
