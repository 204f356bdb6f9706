import logging
import streamlit as st
from core.calculators import calculate_property_metrics
from core.integrations import load_comparables, merge_comparables
from export.report import comparables_csv, comparables_frame
from ui.components import get_comparables, get_mortgage, get_property, money, notify_error, notify_success

logger = logging.getLogger(__name__)


def refresh_comparables(address: str) -> bool:
    """Run the MLS search for ``address`` and merge the results behind the subject."""
    try:
        with st.spinner("Loading MLS data..."):
            fetched = load_comparables(address)
    except (ValueError, TimeoutError) as exc:
        logger.error("Failed to fetch MLS data: %s", exc)
        notify_error(f"MLS data fetch failed: {exc}")
        return False
    merged = merge_comparables(get_comparables(), fetched)
    st.session_state["comparables"] = [c.model_dump() for c in merged]
    st.session_state["comparables_address"] = address
    notify_success(f"Found {len(fetched)} new comparable properties")
    return True


def render_comparables_tab():
    """Comparable listings table, MLS refresh and CSV export."""
    st.header("Market Comparables")
    prop = get_property()
    # search again whenever the subject address has changed since the last fetch
    if st.session_state.get("comparables_address") != prop.address:
        refresh_comparables(prop.address)

    comps = get_comparables()
    c1, c2 = st.columns(2)
    if c1.button("Refresh MLS Data", key="refresh_mls"):
        refresh_comparables(prop.address)
        comps = get_comparables()
    c2.download_button(
        "Export CSV",
        data=comparables_csv(comps),
        file_name="comparables_export.csv",
        mime="text/csv",
    )
    st.dataframe(comparables_frame(comps), use_container_width=True)

    metrics = calculate_property_metrics(prop, comps, get_mortgage().loan_amount)
    if metrics.error:
        st.warning(f"{metrics.error}; showing list price {money(metrics.estimated_value)}")
        return metrics
    cols = st.columns(4)
    cols[0].metric("Avg $/Sq Ft", money(metrics.avg_price_per_sqft))
    cols[1].metric("Estimated Value", money(metrics.estimated_value))
    cols[2].metric("Equity", money(metrics.equity))
    cols[3].metric("Appreciation", f"{metrics.appreciation_percent:.1f}%")
    return metrics
