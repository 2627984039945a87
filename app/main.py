"""
Streamlit Frontend for the Household Ledger

This is the interactive layer that collects raw input and shows summaries.

DESIGN PRINCIPLES:
1. Every field goes through the validator before anything is saved
2. Errors are shown in the page; the app never exits on bad input
3. Summaries are always recomputed from the stored file
"""

from datetime import date

import streamlit as st

from household_ledger.models import RegisterType
from household_ledger.orchestrator import RegisterFlow, SummaryFlow, create_app_components
from household_ledger.services.storage import EmptyDataset, FileUnreadable, StorageError
from household_ledger.validation import InputValidationError


st.set_page_config(
    page_title="Household Ledger",
    page_icon="📒",
    layout="centered",
)


@st.cache_resource
def get_components() -> tuple[RegisterFlow, SummaryFlow]:
    """Get or create application components (cached)."""
    return create_app_components()


def main():
    """Main application entry point."""
    register_flow, summary_flow = get_components()

    st.sidebar.title("📒 Household Ledger")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["✍️ Register", "📊 Summary"],
        index=0,
    )

    if register_flow.storage.path:
        st.sidebar.caption(f"Data file: `{register_flow.storage.path}`")

    if page == "✍️ Register":
        render_register_page(register_flow)
    else:
        render_summary_page(summary_flow)


def render_register_page(register_flow: RegisterFlow):
    """Render the income/expense registration form."""
    st.title("✍️ Register Income or Expense")

    register_type = st.radio(
        "Register type",
        options=list(RegisterType),
        format_func=lambda r: "Income" if r is RegisterType.INCOME else "Expense",
        horizontal=True,
    )
    choices = register_flow.category_choices(register_type.value)

    with st.form("register_form", clear_on_submit=True):
        name = st.text_input("Item name *")
        category_type = st.selectbox(
            "Category *",
            options=[code for code, _ in choices],
            format_func=lambda code: dict(choices)[code],
        )
        price = st.text_input("Amount *", help="Whole number in the smallest currency unit")
        entry_date = st.date_input("Date *", value=date.today())
        submitted = st.form_submit_button("✅ Register", type="primary")

    if not submitted:
        return

    try:
        item = register_flow.register(
            register_type=str(register_type.value),
            name=name,
            category_type=str(category_type),
            price=price,
            date=entry_date.isoformat(),
        )
    except InputValidationError as e:
        st.error(f"❌ {e}")
        return
    except StorageError as e:
        st.error(f"❌ Could not update the ledger: {e}")
        return

    st.success(
        f"Registered **{item.name}** ({item.category}) "
        f"{item.price:,} on {item.date.isoformat()}"
    )


def render_summary_page(summary_flow: SummaryFlow):
    """Render monthly and yearly net balances."""
    st.title("📊 Summary")

    try:
        monthly = summary_flow.monthly_report()
        yearly = summary_flow.yearly_report()
    except FileUnreadable as e:
        if e.missing:
            st.info("📋 No entries yet. Use the 'Register' page to add your first one.")
        else:
            st.error(f"❌ Could not open the ledger: {e}")
        return
    except EmptyDataset:
        st.info("📋 No entries yet. Use the 'Register' page to add your first one.")
        return
    except StorageError as e:
        st.error(f"❌ Could not read the ledger: {e}")
        return

    st.subheader("By month")
    st.table([
        {
            "Month": s.month_label,
            "Income": s.income_total,
            "Expense": s.expense_total,
            "Net": s.net,
            "Entries": s.item_count,
        }
        for s in monthly
    ])

    st.subheader("By year")
    st.table([
        {
            "Year": s.year_label,
            "Income": s.income_total,
            "Expense": s.expense_total,
            "Net": s.net,
            "Entries": s.item_count,
        }
        for s in yearly
    ])


if __name__ == "__main__":
    main()
