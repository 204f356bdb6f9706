import streamlit as st
from core.calculators import calculate_mortgage_payment, update_mortgage_field
from core.models import MortgageParameters
from core.presets import LOAN_TERMS
from ui.components import get_mortgage, notify_error

FIELDS = [
    ("purchase_price", "Purchase Price ($)", 1000.0),
    ("down_payment", "Down Payment ($)", 1000.0),
    ("interest_rate", "Interest Rate (%)", 0.125),
    ("property_tax", "Property Tax (monthly $)", 10.0),
    ("home_insurance", "Home Insurance (monthly $)", 10.0),
    ("hoa", "HOA (monthly $)", 10.0),
    ("pmi", "PMI (monthly $)", 10.0),
]


def _widget_value(params: MortgageParameters, field: str):
    if field == "loan_term":
        term = int(params.loan_term)
        return term if term in LOAN_TERMS else 30
    return float(getattr(params, field) or 0.0)


def _on_edit(field: str) -> None:
    """Apply one edit; a rejected value is put back in the widget."""
    params = get_mortgage()
    key = f"mortgage_{field}"
    updated, err = update_mortgage_field(params, field, st.session_state[key])
    if err:
        st.session_state[key] = _widget_value(params, field)
        st.session_state["mortgage_error"] = err
        return
    st.session_state["mortgage"] = updated.model_dump()


def render_mortgage_tab():
    """Mortgage inputs, validated field by field, and the payment breakdown."""
    st.header("Mortgage Calculator")
    params = get_mortgage()
    for field in [f for f, _, _ in FIELDS] + ["loan_term"]:
        st.session_state.setdefault(f"mortgage_{field}", _widget_value(params, field))
    err = st.session_state.pop("mortgage_error", None)
    if err:
        notify_error(err)

    with st.expander("Loan & Escrow", expanded=True):
        cols = st.columns(2)
        for idx, (field, label, step) in enumerate(FIELDS):
            cols[idx % 2].number_input(
                label, step=step, key=f"mortgage_{field}", on_change=_on_edit, args=(field,)
            )
        st.selectbox(
            "Loan Term (years)", LOAN_TERMS, key="mortgage_loan_term", on_change=_on_edit, args=("loan_term",)
        )

    result = calculate_mortgage_payment(params)
    st.caption(f"Loan Amount: ${params.loan_amount:,.0f}")
    if result.error:
        st.error(result.error)
        return result
    st.caption(f"Monthly P&I: ${result.monthly_principal_and_interest:,.2f}")
    c1, c2, c3 = st.columns(3)
    c1.metric("Principal & Interest", f"${result.monthly_principal_and_interest:,.2f}")
    c2.metric("Total Monthly Payment", f"${result.total_monthly_payment:,.2f}")
    c3.metric("Total Interest (life of loan)", f"${result.total_interest:,.0f}")
    return result
