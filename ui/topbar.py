import streamlit as st
from core.clients import send_report
from core.state import remove
from core.versions import VersionHistory
from core.version import __version__
from export.report import report_json
from ui.components import get_property, notify_error, notify_success
from ui.report import current_bundle


def save_version():
    history = VersionHistory.from_dicts(st.session_state.get("versions", []))
    _, evicted = history.save(
        get_property(),
        st.session_state.get("repair_budgets", {}),
        client_id=st.session_state.get("current_client_id"),
    )
    st.session_state["versions"] = history.as_dict()
    if evicted:
        notify_success("Version saved (oldest version removed due to limit)")
    else:
        notify_success("Version saved successfully")
    return evicted


def current_client_email() -> str:
    """Email of the loaded client, else of the demo client."""
    clients = st.session_state.get("clients", [])
    current = next((c for c in clients if c.get("id") == st.session_state.get("current_client_id")), None)
    if current:
        return current.get("client_email", "")
    return st.session_state.get("current_client", {}).get("email", "")


def email_report() -> bool:
    ok, msg = send_report(current_client_email())
    if ok:
        notify_success(msg)
    else:
        notify_error(msg)
    return ok


def logout():
    st.session_state["authenticated"] = False
    st.session_state["user_email"] = ""
    remove("auth")
    remove("userEmail")
    notify_success("Logged out successfully")


def render_topbar():
    """Render the sticky header: title, user, export, save version and logout."""
    st.markdown(
        """
        <style>
        .clues-topbar {position:sticky; top:0; background-color:white; z-index:100; padding:4px 8px; border-bottom:1px solid #ddd;}
        .clues-topbar div[data-testid="stHorizontalBlock"] {align-items:center;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    with st.container():
        st.markdown('<div class="clues-topbar">', unsafe_allow_html=True)
        left, center, right = st.columns([2, 1, 3])
        with left:
            st.markdown(f"**CLUES S.M.A.R.T. Dashboard v{__version__}**")
        with center:
            st.caption(f"Signed in as {st.session_state.get('user_email', '')}")
        with right:
            c1, c2, c3, c4 = st.columns(4)
            c1.download_button(
                "Export Report",
                data=report_json(current_bundle()),
                file_name="cma_report.json",
                mime="application/json",
                key="export_report",
            )
            if c2.button("Email Report", key="email_report"):
                email_report()
            if c3.button("Save Version", key="save_version"):
                save_version()
            if c4.button("Logout", key="logout"):
                logout()
                st.rerun()
        st.markdown("</div>", unsafe_allow_html=True)
