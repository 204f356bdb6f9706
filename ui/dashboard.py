import streamlit as st
from core.calculators import calculate_mortgage_payment, calculate_property_metrics, calculate_repair_roi
from ui.components import get_categories, get_comparables, get_mortgage, get_property, money


def render_overview():
    """Headline numbers for the subject property."""
    prop = get_property()
    mortgage = get_mortgage()
    st.header("Property Overview")
    st.subheader(prop.address or "No address on file")
    st.caption(
        f"{prop.property_type} • {prop.bedrooms:g} bd / {prop.bathrooms:g} ba • "
        f"{prop.sqft:,.0f} sq ft • built {prop.year_built} • {prop.condition} condition"
    )

    metrics = calculate_property_metrics(prop, get_comparables(), mortgage.loan_amount)
    if metrics.error:
        st.warning(metrics.error)
    cols = st.columns(4)
    cols[0].metric("List Price", money(prop.list_price))
    cols[1].metric("Estimated Value", money(metrics.estimated_value))
    cols[2].metric("Avg $/Sq Ft", money(metrics.avg_price_per_sqft))
    cols[3].metric("Equity", money(metrics.equity), delta=f"{metrics.appreciation_percent:.1f}%")

    roi = calculate_repair_roi(
        st.session_state.get("repair_budgets", {}), get_categories(), prop.current_value
    )
    payment = calculate_mortgage_payment(mortgage)
    cols = st.columns(4)
    if roi.error:
        cols[0].metric("Repair Investment", "n/a")
        st.error(roi.error)
    else:
        cols[0].metric("Repair Investment", money(roi.total_investment))
        cols[1].metric("Value Added", money(roi.value_added), delta=f"{roi.roi_percent}%")
        cols[2].metric("Days Saved", f"{roi.time_reduction_days}")
    if payment.error:
        cols[3].metric("Monthly Payment", "n/a")
    else:
        cols[3].metric("Monthly Payment", f"${payment.total_monthly_payment:,.2f}")

    st.markdown(
        f"**MLS #** {prop.mls_number or '-'} • **Days on market** {prop.days_on_market} • "
        f"**HOA** {money(prop.hoa_fees)}/mo • **Taxes** {money(prop.annual_taxes)}/yr"
    )
    return metrics
