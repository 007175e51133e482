"""
Expense Form Validation

Turns the raw values of the expense form into either an Expense or a
list of everything that is wrong with them.

Checks (all of them run, problems are reported together):
- Title must not be empty after trimming whitespace
- Amount text must be a plain decimal number, and that number must be > 0
  (and within the range the totals can add up and display)
- Date must be present

IMPORTANT: Validation NEVER raises for bad input and NEVER silently
fixes it. A rejected submission is returned to the caller, who shows it
to the user.
"""

import datetime as dt
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from expense_tracker.config import Settings
from expense_tracker.models.expense import (
    MAX_AMOUNT,
    Category,
    Expense,
    parse_category,
)
from expense_tracker.models.validation import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
)


INVALID_INPUT_TITLE = "Invalid input"
INVALID_INPUT_MESSAGE = (
    "Please make sure a valid title, amount, date and category was entered."
)

# ASCII digits only: no digit-group underscores, no non-Latin numerals
_AMOUNT_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

MIN_AMOUNT = Decimal("1e-12")


def parse_amount(amount_text: Optional[str]) -> Optional[Decimal]:
    """
    Parse user-entered amount text.

    Returns None when the text is not a plain decimal number.
    """
    if amount_text is None:
        return None
    text = str(amount_text).strip()
    if not _AMOUNT_PATTERN.match(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


class ExpenseValidator:
    """
    Validates expense form submissions.

    Stateless; the default category is the only configuration.
    """

    def __init__(self, default_category: Category = Category.LEISURE):
        self._default_category = default_category

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExpenseValidator":
        """Build a validator using the configured default category."""
        return cls(default_category=Category(settings.app.default_category))

    def validate(
        self,
        title: Optional[str],
        amount_text: Optional[str],
        expense_date: Optional[dt.date],
        category: Union[Category, str, None] = None,
    ) -> ValidationResult:
        """
        Validate one submission.

        Args:
            title: Raw title text
            amount_text: Raw, unparsed amount text
            expense_date: Selected date, or None if none was picked
            category: Selected category; defaults to the configured one

        Returns:
            ValidationResult carrying either the new Expense or the issues
        """
        issues = []

        trimmed_title = (title or "").strip()
        if not trimmed_title:
            issues.append(ValidationIssue(
                failure=ValidationFailure.EMPTY_TITLE,
                field="title",
                message="Title is required",
                suggested_fix="Enter a short description of the expense",
            ))

        amount = parse_amount(amount_text)
        if amount is None:
            issues.append(ValidationIssue(
                failure=ValidationFailure.INVALID_AMOUNT,
                field="amount",
                message=f"Amount {amount_text!r} is not a number",
                suggested_fix="Enter the amount using digits, e.g. 12.50",
            ))
        elif amount <= 0:
            issues.append(ValidationIssue(
                failure=ValidationFailure.INVALID_AMOUNT,
                field="amount",
                message="Amount must be greater than zero",
                suggested_fix="Enter a positive amount",
            ))
        elif amount >= MAX_AMOUNT:
            issues.append(ValidationIssue(
                failure=ValidationFailure.INVALID_AMOUNT,
                field="amount",
                message="Amount is too large",
                suggested_fix=f"Enter an amount below {MAX_AMOUNT:,.0f}",
            ))
        elif amount < MIN_AMOUNT:
            issues.append(ValidationIssue(
                failure=ValidationFailure.INVALID_AMOUNT,
                field="amount",
                message="Amount is too small to record",
                suggested_fix="Enter a larger amount, e.g. 0.01",
            ))

        # datetime is a date subclass; keep only the calendar day
        if isinstance(expense_date, dt.datetime):
            expense_date = expense_date.date()
        if expense_date is None:
            issues.append(ValidationIssue(
                failure=ValidationFailure.MISSING_DATE,
                field="date",
                message="No date selected",
                suggested_fix="Pick the day the expense happened",
            ))

        if issues:
            return ValidationResult.failure(issues)

        if isinstance(category, Category):
            resolved_category = category
        else:
            resolved_category = parse_category(category) or self._default_category

        return ValidationResult.success(Expense(
            title=trimmed_title,
            amount=amount,
            date=expense_date,
            category=resolved_category,
        ))

    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """
        Message for the blocking notification shown after a rejection.
        """
        if result.is_valid:
            return ""

        lines = [INVALID_INPUT_MESSAGE]
        for issue in result.issues:
            lines.append(f"   • {issue.message}")
            if issue.suggested_fix:
                lines.append(f"     💡 {issue.suggested_fix}")

        return "\n".join(lines)


def validate_expense(
    title: Optional[str],
    amount_text: Optional[str],
    expense_date: Optional[dt.date],
    category: Union[Category, str, None] = None,
    settings: Optional[Settings] = None,
) -> ValidationResult:
    """
    Validate a submission.

    Uses the default category from settings when given, LEISURE otherwise.
    """
    if settings is None:
        validator = ExpenseValidator()
    else:
        validator = ExpenseValidator.from_settings(settings)
    return validator.validate(title, amount_text, expense_date, category)
