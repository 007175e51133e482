"""
Streamlit Frontend for Expense Tracker

One screen: a form to add an expense, the list of expenses with a
dismiss button per row, and per-category totals.

DESIGN PRINCIPLES:
1. Nothing is added without passing validation
2. Rejected input is shown immediately and blocks the rest of the page
3. Dismissal is immediate; undo is offered right after
4. The theme is built once and passed to the render functions
"""

import html
from datetime import date

import streamlit as st

from expense_tracker.config import get_settings
from expense_tracker.models.expense import Category
from expense_tracker.orchestrator import ExpenseFlow, create_app_components
from expense_tracker.ui import ViewKind, ViewState, resolve_view
from expense_tracker.validation import INVALID_INPUT_TITLE


# Page configuration
st.set_page_config(
    page_title="Expense Tracker",
    page_icon="💸",
    layout="centered",
)


def get_components():
    """Get or create this session's components."""
    if "components" not in st.session_state:
        st.session_state.components = create_app_components()
    return st.session_state.components


def main():
    """Main application entry point."""
    flow, theme, audit_logger = get_components()
    app_settings = get_settings().app

    if "last_failure" not in st.session_state:
        st.session_state.last_failure = None
    if "last_removed" not in st.session_state:
        st.session_state.last_removed = None

    st.markdown(theme.to_css(), unsafe_allow_html=True)
    st.markdown(
        '<div class="app-bar"><h2>💸 Expense Tracker</h2></div>',
        unsafe_allow_html=True,
    )

    render_form(flow, app_settings)

    view = resolve_view(flow.collection.all(), st.session_state.last_failure)
    render_view(view, flow, app_settings)

    if app_settings.debug_mode:
        with st.expander("🧾 Activity"):
            for event in reversed(audit_logger.recent_events):
                st.markdown(f"`{event.timestamp:%H:%M:%S}` {event.description}")


def render_form(flow: ExpenseFlow, app_settings):
    """Render the add-expense form."""
    with st.form("new_expense", clear_on_submit=True):
        title = st.text_input(
            "Title",
            max_chars=app_settings.max_title_length,
        )

        col1, col2 = st.columns(2)
        with col1:
            amount_text = st.text_input(
                "Amount",
                placeholder=f"{app_settings.currency_symbol} 0.00",
            )
        with col2:
            expense_date = st.date_input(
                "Date",
                value=None,
                max_value=date.today(),
                format="DD/MM/YYYY",
            )

        categories = list(Category)
        category = st.selectbox(
            "Category",
            options=categories,
            index=categories.index(Category(app_settings.default_category)),
            format_func=lambda c: f"{c.icon} {c.label}",
        )

        if st.form_submit_button("Save Expense", type="primary"):
            outcome = flow.submit(title, amount_text, expense_date, category)
            st.session_state.last_failure = None if outcome.accepted else outcome.result
            st.session_state.last_message = outcome.message
            st.session_state.last_removed = None


def render_view(view: ViewState, flow: ExpenseFlow, app_settings):
    """Render the part of the screen below the form."""
    if view.kind == ViewKind.VALIDATION_ERROR:
        st.error(f"**{INVALID_INPUT_TITLE}**\n\n{st.session_state.last_message}")
        if st.button("Okay"):
            st.session_state.last_failure = None
            st.rerun()
        st.stop()

    render_undo(flow)

    if view.kind == ViewKind.EMPTY:
        st.info(view.message)
        return

    render_totals(flow, app_settings)

    for expense in view.expenses:
        col1, col2 = st.columns([6, 1])
        with col1:
            st.markdown(f"""
            <div class="expense-card">
                <div class="expense-title">{html.escape(expense.title)}</div>
                <div>{app_settings.currency_symbol}{expense.amount:,.2f}
                &nbsp;&nbsp; {expense.category.icon}
                {expense.format_date(app_settings.date_format)}</div>
            </div>
            """, unsafe_allow_html=True)
        with col2:
            if st.button("🗑️", key=f"dismiss-{expense.id}", help="Remove this expense"):
                st.session_state.last_removed = flow.dismiss(expense.id)
                st.rerun()


def render_undo(flow: ExpenseFlow):
    """Offer to undo the most recent dismissal."""
    removed = st.session_state.last_removed
    if removed is None:
        return

    col1, col2 = st.columns([6, 1])
    with col1:
        st.info(f"Expense deleted: {removed.expense.title}")
    with col2:
        if st.button("Undo"):
            flow.undo(removed)
            st.session_state.last_removed = None
            st.rerun()


def render_totals(flow: ExpenseFlow, app_settings):
    """Per-category totals."""
    buckets = flow.collection.buckets()
    columns = st.columns(len(buckets))
    for column, bucket in zip(columns, buckets):
        with column:
            st.metric(
                f"{bucket.category.icon} {bucket.category.label}",
                f"{app_settings.currency_symbol}{bucket.total_expenses:,.2f}",
            )


if __name__ == "__main__":
    main()
