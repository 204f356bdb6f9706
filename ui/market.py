import pandas as pd
import streamlit as st
from core.presets import (
    DAYS_ON_MARKET_BY_CONDITION,
    MARKET_CONDITIONS,
    MARKET_TREND_DATA,
    PRICING_STRATEGY,
    SEASONAL_DATA,
    SEASONAL_FACTORS,
    STAGING_IMPACT,
)


def render_market_factors():
    """Static market tables for the subject's area."""
    st.header("Market Factors")
    st.info(f"Current market: {MARKET_CONDITIONS}. {SEASONAL_FACTORS}.")

    trend = pd.DataFrame(MARKET_TREND_DATA).set_index("month")
    st.subheader("Price Trend")
    st.line_chart(trend[["avg_price"]])
    st.subheader("Inventory vs. Sales")
    st.bar_chart(trend[["inventory", "sold_count"]])

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Days on Market by Condition")
        st.dataframe(pd.DataFrame(DAYS_ON_MARKET_BY_CONDITION), hide_index=True)
        st.subheader("Pricing Strategy")
        st.dataframe(pd.DataFrame(PRICING_STRATEGY), hide_index=True)
    with c2:
        st.subheader("Staging Impact")
        st.dataframe(pd.DataFrame(STAGING_IMPACT), hide_index=True)
        st.subheader("Seasonal Timing")
        st.dataframe(pd.DataFrame(SEASONAL_DATA), hide_index=True)
