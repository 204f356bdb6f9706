import streamlit as st
from core.calculators import (
    calculate_repair_roi,
    high_roi_budgets,
    recommended_budgets,
    reset_budgets,
    round_half_up,
    update_repair_budget,
)
from core.summary import run_market_analysis
from ui.components import get_categories, get_property, money, notify_error, notify_success


def _set_budgets(budgets: dict) -> None:
    st.session_state["repair_budgets"] = budgets
    for key, val in budgets.items():
        st.session_state[f"budget_{key}"] = float(val)


def render_repair_budgets():
    """Per-category budget inputs with quick presets and the ROI summary."""
    categories = get_categories()
    st.session_state.setdefault("repair_budgets", reset_budgets(categories))
    st.header("Repair Investment Analysis")

    c1, c2, c3, c4 = st.columns(4)
    if c1.button("Reset All", key="budgets_reset"):
        _set_budgets(reset_budgets(categories))
        notify_success("All budgets reset to zero")
    if c2.button("Use Recommended", key="budgets_recommended"):
        _set_budgets(recommended_budgets(categories))
        notify_success("Applied recommended budgets")
    if c3.button("High ROI Only", key="budgets_high_roi"):
        _set_budgets(high_roi_budgets(categories))
        notify_success("Applied high-ROI strategy")
    if c4.button("Run Market Analysis", key="run_analysis"):
        report = run_market_analysis(get_property(), st.session_state["repair_budgets"], categories)
        if report.error:
            notify_error(f"Analysis failed: {report.error}")
        else:
            _set_budgets(report.budgets)
            st.session_state["executive_summary"] = report.summary
            notify_success("Market analysis completed successfully")

    budgets = st.session_state["repair_budgets"]
    items = list(categories.items())
    for i in range(0, len(items), 2):
        cols = st.columns(2)
        for col_idx, (key, cat) in enumerate(items[i : i + 2]):
            with cols[col_idx]:
                st.markdown(f"**{cat.name}**")
                st.caption(f"ROI {cat.roi:.0%} • -{cat.time_reduction} days • max {money(cat.max_budget)}")
                st.session_state.setdefault(f"budget_{key}", float(budgets.get(key, 0)))
                value = st.number_input("Budget ($)", min_value=0.0, step=500.0, key=f"budget_{key}")
                if value != budgets.get(key, 0):
                    budgets, msg = update_repair_budget(budgets, categories, key, value)
                    if msg:
                        notify_error(msg)
                if budgets.get(key, 0) > 0:
                    st.caption(f"Estimated value added: {money(round_half_up(budgets[key] * cat.roi))}")
    st.session_state["repair_budgets"] = budgets

    roi = calculate_repair_roi(budgets, categories, get_property().current_value)
    if roi.error:
        st.error(roi.error)
        return roi
    cols = st.columns(3)
    cols[0].metric("Total Investment", money(roi.total_investment))
    cols[1].metric("Value Added", money(roi.value_added))
    cols[2].metric("Net ROI", money(roi.net_roi), delta=f"{roi.roi_percent}%")
    cols = st.columns(2)
    cols[0].metric("Days on Market Reduction", f"{roi.time_reduction_days} days")
    cols[1].metric("New Estimated Value", money(roi.new_estimated_value))
    return roi
