import streamlit as st

TABS = {
    "overview": "Overview",
    "analysis": "Analysis",
    "comparables": "Comparables",
    "market": "Market Factors",
    "report": "CMA Report",
    "mortgage": "Mortgage",
    "data_entry": "Data Entry",
    "findings": "Findings",
}
LABEL_TO_TAB = {label: key for key, label in TABS.items()}


def render_nav_sidebar() -> str:
    """Tab navigation; every tab is reachable from every other."""
    st.sidebar.header("Navigation")
    # the selection lives under the widget key only
    label = st.sidebar.radio("Go to", list(TABS.values()), key="nav_tab")
    tab = LABEL_TO_TAB[label]
    clients = st.session_state.get("clients", [])
    current = next((c for c in clients if c.get("id") == st.session_state.get("current_client_id")), None)
    if current:
        st.sidebar.caption(f"Client: {current.get('client_name', '')}")
    else:
        demo = st.session_state.get("current_client", {})
        st.sidebar.caption(f"Client: {demo.get('name', '-')} • {demo.get('property_address', '')}")
    return tab
