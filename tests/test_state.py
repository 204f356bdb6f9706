import json
import streamlit as st
from core import state


def _use_file(tmp_path, monkeypatch):
    file = tmp_path / "storage.json"
    monkeypatch.setattr(state, "STORAGE_FILE", str(file))
    return file


def test_save_state_ignores_widget_keys(tmp_path, monkeypatch):
    file = _use_file(tmp_path, monkeypatch)
    st.session_state.clear()
    st.session_state["clients"] = [{"id": 1}]
    st.session_state["authenticated"] = True
    st.session_state["budget_kitchen"] = 500.0
    assert state.save_state()
    data = json.loads(file.read_text())
    assert data["clients"] == [{"id": 1}]
    assert data["auth"] is True
    assert "budget_kitchen" not in data


def test_load_state_ignores_unknown_keys(tmp_path, monkeypatch):
    file = _use_file(tmp_path, monkeypatch)
    file.write_text(json.dumps({"versions": [], "userEmail": "demo@clues.com", "nav_tab": "overview"}))
    st.session_state.clear()
    state.load_state()
    assert st.session_state["versions"] == []
    assert st.session_state["user_email"] == "demo@clues.com"
    assert "nav_tab" not in st.session_state


def test_load_state_drops_malformed_values(tmp_path, monkeypatch):
    file = _use_file(tmp_path, monkeypatch)
    file.write_text(json.dumps({"clients": "oops", "propertyPhotos": {"a": 1}, "auth": "yes"}))
    st.session_state.clear()
    state.load_state()
    assert "clients" not in st.session_state
    assert "property_photos" not in st.session_state
    assert st.session_state["authenticated"] is False


def test_corrupt_file_falls_back_to_defaults(tmp_path, monkeypatch):
    file = _use_file(tmp_path, monkeypatch)
    file.write_text("{not json")
    assert state.safe_get("clients", []) == []
    st.session_state.clear()
    state.load_state()
    assert "clients" not in st.session_state


def test_oversize_payload_is_rejected(tmp_path, monkeypatch):
    _use_file(tmp_path, monkeypatch)
    errors = []
    ok = state.safe_set("propertyPhotos", ["x" * (5 * 1024 * 1024 + 1)], on_error=errors.append)
    assert not ok
    assert errors == ["Data too large to save locally"]
    assert state.safe_get("propertyPhotos") is None


def test_set_get_remove(tmp_path, monkeypatch):
    _use_file(tmp_path, monkeypatch)
    assert state.safe_set("userEmail", "a@b.co")
    assert state.safe_get("userEmail") == "a@b.co"
    state.remove("userEmail")
    assert state.safe_get("userEmail", "gone") == "gone"


def test_unserializable_value_fails_cleanly(tmp_path, monkeypatch):
    _use_file(tmp_path, monkeypatch)
    assert not state.safe_set("clients", [object()])
