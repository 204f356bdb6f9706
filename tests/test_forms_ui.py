import copy
from streamlit.testing.v1 import AppTest
from core.presets import DEFAULT_PROPERTY

CLIENT = {
    "id": 1,
    "client_name": "Pat Doe",
    "client_email": "pat@example.com",
    "address": "99 New St",
    "city": "Tampa",
    "list_price": "450000",
    "sqft": "2000",
    "condition": "Good",
}


def data_entry_app():
    from ui.forms import render_data_entry_tab

    render_data_entry_tab()


def _app():
    at = AppTest.from_function(data_entry_app)
    at.session_state["property"] = copy.deepcopy(DEFAULT_PROPERTY)
    at.session_state["clients"] = [dict(CLIENT)]
    at.run(timeout=30)
    return at


def test_loaded_client_survives_next_rerun():
    at = _app()
    at.button(key="load_client_1").click().run(timeout=30)
    assert at.session_state["property"]["address"] == "99 New St"
    assert at.text_input(key="prop_address").value == "99 New St"
    assert at.number_input(key="prop_sqft").value == 2000.0
    assert at.selectbox(key="prop_condition").value == "Good"
    assert at.session_state["current_client_id"] == 1

    at.run(timeout=30)
    prop = at.session_state["property"]
    assert prop["address"] == "99 New St"
    assert prop["sqft"] == 2000.0
    assert prop["list_price"] == 450000.0


def test_editor_writes_condition_changes():
    at = _app()
    at.selectbox(key="cond_kitchen").set_value("Poor").run(timeout=30)
    at.checkbox(key="cond_painting").check().run(timeout=30)
    conditions = at.session_state["property"]["conditions"]
    assert conditions["kitchen"] == "Poor"
    assert conditions["painting"] is True
