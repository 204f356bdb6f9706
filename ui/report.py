import io
import logging
import streamlit as st
from core.calculators import calculate_property_metrics, calculate_repair_roi
from export.pdf_export import build_cma_pdf
from export.report import build_report_bundle, comparables_frame, report_json
from ui.components import get_categories, get_comparables, get_mortgage, get_property, money

logger = logging.getLogger(__name__)


def current_bundle() -> dict:
    prop = get_property()
    comps = get_comparables()
    metrics = calculate_property_metrics(prop, comps, get_mortgage().loan_amount)
    roi = calculate_repair_roi(st.session_state.get("repair_budgets", {}), get_categories(), prop.current_value)
    return build_report_bundle(prop, metrics, roi, comps)


def render_report_tab():
    """CMA report preview with JSON and PDF downloads."""
    st.header("CMA Report")
    bundle = current_bundle()
    prop, m, r = bundle["property"], bundle["metrics"], bundle["repairs"]
    st.subheader(prop["address"])
    cols = st.columns(3)
    cols[0].metric("List Price", money(prop["list_price"]))
    cols[1].metric("Estimated Value", money(m["estimated_value"]))
    cols[2].metric("Appreciation", f"{m['appreciation']}%")
    cols = st.columns(3)
    cols[0].metric("Repair Investment", money(r["total_investment"]))
    cols[1].metric("Value Added", money(r["total_value_added"]))
    cols[2].metric("Days on Market Reduction", f"{r['time_reduction']} days")
    st.dataframe(comparables_frame([c for c in get_comparables() if c.status != "Subject"]), hide_index=True)
    st.caption(bundle["recommendations"])

    c1, c2 = st.columns(2)
    c1.download_button("Export JSON", data=report_json(bundle), file_name="cma_report.json", mime="application/json")
    buf = io.BytesIO()
    try:
        build_cma_pdf(buf, bundle)
    except ValueError as exc:
        logger.error("PDF export failed: %s", exc)
        st.error(f"PDF export failed: {exc}")
    else:
        c2.download_button("Export PDF", data=buf.getvalue(), file_name="cma_report.pdf", mime="application/pdf")
    return bundle
