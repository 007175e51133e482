"""
Tests for Expense Tracker

Test strategy:
1. Unit tests for individual components (models, validator, collection)
2. Flow tests for the orchestrator with a real in-memory collection
3. No network, no files
"""

import pytest
from datetime import date
from decimal import Decimal
from uuid import uuid4

from expense_tracker.models.expense import (
    Category,
    Expense,
    ExpenseBucket,
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


def make_expense(title="Coffee", amount="3.50", category=Category.FOOD, day=1):
    return Expense(
        title=title,
        amount=Decimal(amount),
        date=date(2024, 1, day),
        category=category,
    )


class TestExpenseModel:
    """Tests for the Expense model."""

    def test_expense_creation(self):
        """Test Expense model creation."""
        expense = make_expense()
        assert expense.title == "Coffee"
        assert expense.amount == Decimal("3.50")
        assert expense.date == date(2024, 1, 1)
        assert expense.category == Category.FOOD

    def test_expense_default_category(self):
        """Test category defaults to leisure."""
        expense = Expense(title="Cinema", amount=Decimal("12"), date=date(2024, 1, 1))
        assert expense.category == Category.LEISURE

    def test_expense_ids_are_unique(self):
        """Test each expense gets its own id."""
        assert make_expense().id != make_expense().id

    def test_expense_strips_whitespace(self):
        """Test that whitespace is stripped from the title."""
        expense = make_expense(title="  Coffee  ")
        assert expense.title == "Coffee"

    def test_expense_rejects_blank_title(self):
        """Test that a whitespace-only title is rejected."""
        with pytest.raises(ValueError):
            make_expense(title="   ")

    @pytest.mark.parametrize("amount", ["0", "-5", "NaN"])
    def test_expense_rejects_non_positive_amount(self, amount):
        """Test that zero, negative and NaN amounts are rejected."""
        with pytest.raises(ValueError):
            make_expense(amount=amount)

    @pytest.mark.parametrize("amount", ["1e12", "1e1000000"])
    def test_expense_rejects_unsummable_amount(self, amount):
        """Test that amounts too large to total are rejected."""
        with pytest.raises(ValueError):
            make_expense(amount=amount)

    def test_expense_is_frozen(self):
        """Test that expenses cannot be edited in place."""
        expense = make_expense()
        with pytest.raises(ValueError):
            expense.title = "Tea"

    def test_create_wraps_validation_error(self):
        """Test Expense.create raises the package error type."""
        with pytest.raises(InvalidExpenseError):
            Expense.create(title="Coffee", amount=Decimal("0"), date=date(2024, 1, 1))

    def test_formatted_date(self):
        """Test default and custom date formatting."""
        expense = make_expense(day=5)
        assert expense.formatted_date == "05/01/2024"
        assert expense.format_date("%Y-%m-%d") == "2024-01-05"

    def test_to_log_dict(self):
        """Test conversion to log dictionary."""
        expense = make_expense()
        log_dict = expense.to_log_dict()
        assert log_dict["id"] == str(expense.id)
        assert log_dict["amount"] == "3.50"
        assert log_dict["category"] == "food"


class TestCategories:
    """Tests for the category enum."""

    def test_all_categories_exist(self):
        """Test that expected categories exist."""
        for cat in ["food", "travel", "leisure", "work"]:
            assert Category(cat) is not None

    def test_every_category_has_an_icon(self):
        """Test icons and labels."""
        for category in Category:
            assert category.icon
        assert Category.WORK.label == "Work"

    def test_parse_category(self):
        """Test lenient lookup."""
        assert parse_category(" Travel ") == Category.TRAVEL
        assert parse_category("groceries") is None
        assert parse_category(None) is None


class TestExpenseBucket:
    """Tests for per-category grouping."""

    def test_for_category_filters(self):
        """Test that a bucket only holds its own category."""
        expenses = [
            make_expense(category=Category.FOOD, amount="3.50"),
            make_expense(category=Category.WORK, amount="100"),
            make_expense(category=Category.FOOD, amount="6.50"),
        ]
        bucket = ExpenseBucket.for_category(expenses, Category.FOOD)
        assert len(bucket.expenses) == 2
        assert bucket.total_expenses == Decimal("10.00")

    def test_empty_bucket_total_is_zero(self):
        """Test an empty bucket sums to zero."""
        bucket = ExpenseBucket.for_category([], Category.TRAVEL)
        assert bucket.is_empty
        assert bucket.total_expenses == Decimal("0")


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_success_shape(self):
        """Test a successful result."""
        result = ValidationResult.success(make_expense())
        assert result.is_valid is True
        assert result.failures == set()

    def test_failure_shape(self):
        """Test a failed result lists its failures."""
        result = ValidationResult.failure([
            ValidationIssue(
                failure=ValidationFailure.EMPTY_TITLE,
                field="title",
                message="Title is required",
            ),
        ])
        assert result.is_valid is False
        assert result.expense is None
        assert result.failures == {ValidationFailure.EMPTY_TITLE}

    def test_result_must_be_one_or_the_other(self):
        """Test that empty and mixed results are rejected."""
        with pytest.raises(ValueError):
            ValidationResult()
        with pytest.raises(ValueError):
            ValidationResult(
                expense=make_expense(),
                issues=[ValidationIssue(
                    failure=ValidationFailure.MISSING_DATE,
                    field="date",
                    message="No date selected",
                )],
            )


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            description="Test expense added",
        )
        assert event.event_type == AuditEventType.EXPENSE_ADDED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        expense = make_expense()
        event = AuditEventBuilder.expense_added(expense, correlation_id=uuid4())
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "expense_added"
        assert log_dict["entity_id"] == str(expense.id)
        assert log_dict["details"]["title"] == "Coffee"

    def test_audit_event_builder_expense_removed(self):
        """Test AuditEventBuilder.expense_removed records the index."""
        correlation_id = uuid4()
        expense = make_expense()

        event = AuditEventBuilder.expense_removed(
            expense=expense,
            index=3,
            correlation_id=correlation_id,
        )

        assert event.event_type == AuditEventType.EXPENSE_REMOVED
        assert event.entity_id == expense.id
        assert event.correlation_id == correlation_id
        assert event.details["index"] == 3

    def test_audit_event_builder_validation_failed(self):
        """Test validation failures are warnings."""
        event = AuditEventBuilder.validation_failed(
            failures=["empty_title", "missing_date"],
            correlation_id=uuid4(),
        )
        assert event.severity == AuditSeverity.WARNING
        assert event.entity_id is None
        assert event.details["failures"] == ["empty_title", "missing_date"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
