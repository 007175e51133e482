"""
Expense Tracker - Source Package

A small, single-user expense list editor: enter a title, an amount,
a date and a category, keep the accepted entries for the session,
swipe (dismiss) them away again.

DESIGN PRINCIPLES:
1. Validate before accepting, report every problem at once
2. Validation failure is a normal result, not an exception
3. Collection is in-memory and insertion-ordered
4. Theme and settings are passed in, never read from globals
5. Every user action is auditable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
