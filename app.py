import copy
import logging
import streamlit as st
from core.auth import authenticate
from core.models import default_budgets
from core.presets import (
    DEFAULT_CLIENT,
    DEFAULT_COMPARABLES,
    DEFAULT_MORTGAGE,
    DEFAULT_PROPERTY,
    DISCLAIMER,
)
from core.state import load_state, safe_set, save_state
from ui.comparables import render_comparables_tab
from ui.components import notify_error, notify_success
from ui.dashboard import render_overview
from ui.findings import render_findings_tab
from ui.forms import render_data_entry_tab
from ui.market import render_market_factors
from ui.mortgage import render_mortgage_tab
from ui.repairs import render_repair_budgets
from ui.report import render_report_tab
from ui.sidebar import render_nav_sidebar
from ui.topbar import render_topbar

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="CLUES S.M.A.R.T. DASHBOARD", layout="wide")


def init_state():
    ss = st.session_state
    ss.setdefault("property", copy.deepcopy(DEFAULT_PROPERTY))
    ss.setdefault("comparables", copy.deepcopy(DEFAULT_COMPARABLES))
    ss.setdefault("mortgage", dict(DEFAULT_MORTGAGE))
    ss.setdefault("repair_budgets", default_budgets())
    ss.setdefault("current_client", dict(DEFAULT_CLIENT))
    ss.setdefault("current_client_id", None)
    # persisted keys; load_state() has already filled in whatever was stored
    ss.setdefault("clients", [])
    ss.setdefault("versions", [])
    ss.setdefault("property_photos", [])
    ss.setdefault("authenticated", False)
    ss.setdefault("user_email", "")
    ss.setdefault("findings", "")
    ss.setdefault("executive_summary", "")


def render_login():
    st.title("CLUES S.M.A.R.T. Dashboard")
    st.caption("Comparative Market Analysis • Repair ROI • Market Factors")
    with st.form("login_form"):
        email = st.text_input("Email", key="login_email")
        password = st.text_input("Password", type="password", key="login_password")
        submitted = st.form_submit_button("Sign In")
    st.caption("Demo account: demo@clues.com / demo123")
    if not submitted:
        return
    ok, msg = authenticate(email, password)
    if not ok:
        st.error(msg)
        return
    st.session_state["authenticated"] = True
    st.session_state["user_email"] = email
    safe_set("auth", True, on_error=notify_error)
    safe_set("userEmail", email, on_error=notify_error)
    notify_success(msg)
    st.rerun()


def render_analysis_tab():
    render_repair_budgets()
    summary = st.session_state.get("executive_summary")
    if summary:
        with st.expander("Executive Summary", expanded=False):
            st.text(summary)


TAB_RENDERERS = {
    "overview": render_overview,
    "analysis": render_analysis_tab,
    "comparables": render_comparables_tab,
    "market": render_market_factors,
    "report": render_report_tab,
    "mortgage": render_mortgage_tab,
    "data_entry": render_data_entry_tab,
    "findings": render_findings_tab,
}


load_state()
init_state()

if not st.session_state["authenticated"]:
    render_login()
    st.stop()

render_topbar()
tab = render_nav_sidebar()
try:
    TAB_RENDERERS[tab]()
except Exception as exc:
    logger.exception("Error rendering %s tab", tab)
    st.error(f"Something went wrong on this tab: {exc}")
    if st.button("Reload", key="reload_app"):
        st.rerun()

st.caption(DISCLAIMER)
save_state(on_error=notify_error)
