"""Findings notes, saved versions and property photos."""
from __future__ import annotations
import streamlit as st
from core.photos import delete_photo, make_photo, validate_photo
from core.presets import RECENT_DISPLAY_LIMIT
from core.versions import VersionHistory
from ui.components import notify_error, notify_success
from ui.forms import sync_property_widgets


def _history() -> VersionHistory:
    return VersionHistory.from_dicts(st.session_state.get("versions", []))


def load_version(version_id: int) -> bool:
    snapshot = _history().get(version_id)
    if snapshot is None:
        notify_error("Version not found")
        return False
    st.session_state["property"] = snapshot.property_data.model_dump()
    sync_property_widgets(snapshot.property_data)
    st.session_state["repair_budgets"] = dict(snapshot.repair_budgets)
    # the editor and budget inputs are keyed widgets on other tabs
    for key, val in snapshot.repair_budgets.items():
        st.session_state[f"budget_{key}"] = float(val)
    notify_success(f"Loaded version from {snapshot.timestamp.strftime('%m/%d/%Y, %I:%M:%S %p')}")
    return True


def render_versions():
    history = _history()
    st.subheader(f"Saved Versions ({len(history)})")
    if not len(history):
        st.caption("No versions saved yet. Use Save Version in the header.")
        return
    total = len(history)
    for idx, snap in enumerate(history.recent(RECENT_DISPLAY_LIMIT)):
        c1, c2, c3 = st.columns([4, 1, 1])
        c1.markdown(f"**Version {total - idx}** • {snap.timestamp.strftime('%m/%d/%Y %I:%M %p')}")
        if snap.user_note:
            c1.caption(snap.user_note)
        if c2.button("Load", key=f"load_version_{snap.id}"):
            load_version(snap.id)
        if c3.button("Delete", key=f"delete_version_{snap.id}"):
            history.delete(snap.id)
            st.session_state["versions"] = history.as_dict()
            notify_success("Version deleted")
            st.rerun()


def render_photos():
    photos = st.session_state.setdefault("property_photos", [])
    st.subheader(f"Property Photos ({len(photos)})")
    upload = st.file_uploader("Upload photo", type=["jpg", "jpeg", "png", "webp"], key="photo_upload")
    if upload is not None and upload.file_id != st.session_state.get("last_photo_upload"):
        st.session_state["last_photo_upload"] = upload.file_id
        err = validate_photo(upload.type, upload.size, len(photos))
        if err:
            notify_error(err)
        else:
            photos.append(make_photo(upload.name, upload.type, upload.getvalue()).model_dump())
            st.session_state["property_photos"] = photos
            notify_success("Photo uploaded successfully")

    cols = st.columns(4)
    for idx, photo in enumerate(list(photos)):
        with cols[idx % 4]:
            st.image(photo["src"], caption=photo["name"], use_container_width=True)
            if st.button("Remove", key=f"delete_photo_{photo['id']}"):
                st.session_state["property_photos"] = delete_photo(photos, photo["id"])
                notify_success("Photo deleted")
                st.rerun()


def render_findings_tab():
    st.header("Findings")
    summary = st.session_state.get("executive_summary", "")
    if summary:
        with st.expander("Executive Summary", expanded=True):
            st.text(summary)
    else:
        st.caption("Run Market Analysis on the Analysis tab to generate an executive summary.")
    st.session_state.setdefault("findings_notes", st.session_state.get("findings", ""))
    st.session_state["findings"] = st.text_area("Inspection findings and notes", height=200, key="findings_notes")
    render_versions()
    render_photos()
