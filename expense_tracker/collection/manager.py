"""
In-Memory Expense Collection

Owns the ordered list of accepted expenses for the current session.

DESIGN DECISION: Insertion order is display order. Nothing is sorted,
nothing is de-duplicated, nothing outlives the process.

Single-threaded by contract: every mutation runs to completion inside
one UI callback, so there is no locking here.
"""

from decimal import Decimal
from typing import Iterator, Optional, Union
from uuid import UUID

from expense_tracker.models.expense import Category, Expense, ExpenseBucket


class ExpenseCollection:
    """
    Session-scoped, insertion-ordered expense list.

    Removal by id is idempotent: removing an id that is not present is a
    no-op that returns None.
    """

    def __init__(self, expenses: Optional[list[Expense]] = None):
        self._expenses: list[Expense] = []
        for expense in expenses or []:
            self.add(expense)

    def add(self, expense: Expense) -> None:
        """Append an already validated expense to the end."""
        if not isinstance(expense, Expense):
            raise TypeError(
                f"Only Expense instances can be added, got {type(expense).__name__}"
            )
        self._expenses.append(expense)

    def remove(self, expense_id: UUID) -> Optional[Expense]:
        """
        Remove the expense with the given id.

        Returns:
            The removed expense, or None if no expense had that id
        """
        index = self.index_of(expense_id)
        if index is None:
            return None
        return self._expenses.pop(index)

    def restore(self, expense: Expense, index: int) -> int:
        """
        Put a previously removed expense back at its old position.

        The index is clamped to the current bounds. Returns the index
        actually used.
        """
        if not isinstance(expense, Expense):
            raise TypeError(
                f"Only Expense instances can be restored, got {type(expense).__name__}"
            )
        index = max(0, min(index, len(self._expenses)))
        self._expenses.insert(index, expense)
        return index

    def all(self) -> tuple[Expense, ...]:
        """Snapshot of the current contents, in insertion order."""
        return tuple(self._expenses)

    def index_of(self, expense_id: UUID) -> Optional[int]:
        for index, expense in enumerate(self._expenses):
            if expense.id == expense_id:
                return index
        return None

    def get(self, expense_id: UUID) -> Optional[Expense]:
        index = self.index_of(expense_id)
        return None if index is None else self._expenses[index]

    def buckets(self) -> list[ExpenseBucket]:
        """One bucket per category, in category order."""
        snapshot = self.all()
        return [ExpenseBucket.for_category(snapshot, category) for category in Category]

    def total(self) -> Decimal:
        return sum((e.amount for e in self._expenses), Decimal("0"))

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self.all())

    def __contains__(self, item: Union[Expense, UUID]) -> bool:
        expense_id = item.id if isinstance(item, Expense) else item
        return self.index_of(expense_id) is not None

    def __repr__(self) -> str:
        return f"ExpenseCollection({len(self)} expenses)"
