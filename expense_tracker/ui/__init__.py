"""Presentation helpers that do not depend on any UI framework."""

from expense_tracker.ui.state import EMPTY_MESSAGE, ViewKind, ViewState, resolve_view
from expense_tracker.ui.theme import ColorScheme, ThemeConfig

__all__ = [
    "EMPTY_MESSAGE",
    "ColorScheme",
    "ThemeConfig",
    "ViewKind",
    "ViewState",
    "resolve_view",
]
