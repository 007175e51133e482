"""Expense collection package."""

from expense_tracker.collection.manager import ExpenseCollection

__all__ = ["ExpenseCollection"]
