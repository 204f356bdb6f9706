import streamlit as st
from core.clients import apply_client_to_property, build_client_record, recent_clients
from core.models import ClientRecord, PropertyConditions, PropertyRecord
from core.presets import COMPONENT_CONDITIONS, CONDITION_LEVELS, PROPERTY_TYPES, STAGING_LEVELS
from ui.components import get_property, notify_error, notify_success

CONTACT_FIELDS = [
    ("client_name", "Client Name *"),
    ("client_email", "Email *"),
    ("client_phone", "Phone *"),
]
ADDRESS_FIELDS = [
    ("address", "Property Address *"),
    ("city", "City *"),
    ("state", "State"),
    ("zip", "ZIP *"),
    ("subdivision", "Subdivision"),
]
LISTING_FIELDS = [
    ("list_price", "List Price ($)"),
    ("purchase_price", "Purchase Price ($)"),
    ("purchase_date", "Purchase Date"),
    ("sqft", "Square Feet"),
    ("bedrooms", "Bedrooms"),
    ("bathrooms", "Bathrooms"),
    ("lot_size", "Lot Size"),
    ("year_built", "Year Built"),
    ("garage", "Garage Spaces"),
    ("mls_number", "MLS #"),
    ("current_mortgage_balance", "Current Mortgage Balance ($)"),
    ("monthly_payment", "Monthly Payment ($)"),
    ("tax_assessment", "Tax Assessment ($)"),
]
FEATURE_FIELDS = [
    ("has_deck", "Deck"),
    ("has_dock", "Dock"),
    ("has_porch", "Porch"),
    ("has_spa", "Spa"),
    ("has_master_suite", "Master Suite"),
    ("has_solar_heating", "Solar Heating"),
    ("has_vaulted_ceilings", "Vaulted Ceilings"),
    ("pool", "Pool"),
]
COMPONENT_FIELDS = [
    ("roof_condition", "Roof"),
    ("windows_condition", "Windows"),
    ("electric_panel_condition", "Electric Panel"),
    ("water_heater_condition", "Water Heater"),
    ("doors_condition", "Doors"),
    ("paint_condition", "Paint"),
]


def _text_fields(fields, defaults, columns=2):
    values = {}
    cols = st.columns(columns)
    for idx, (field, label) in enumerate(fields):
        values[field] = cols[idx % columns].text_input(label, value=str(defaults.get(field, "")), key=f"client_{field}")
    return values


def render_client_form():
    """New-client intake; errors are listed per field under the form."""
    defaults = ClientRecord().model_dump()
    with st.form("client_form", clear_on_submit=False):
        st.subheader("Client Information")
        form = _text_fields(CONTACT_FIELDS, defaults, columns=3)
        st.subheader("Property Address")
        form.update(_text_fields(ADDRESS_FIELDS, defaults))
        st.subheader("Listing Details")
        form.update(_text_fields(LISTING_FIELDS, defaults, columns=3))
        c1, c2 = st.columns(2)
        form["property_type"] = c1.selectbox("Property Type", PROPERTY_TYPES, key="client_property_type")
        form["condition"] = c2.selectbox(
            "Overall Condition", CONDITION_LEVELS, index=CONDITION_LEVELS.index("Fair"), key="client_condition"
        )
        st.subheader("Features")
        cols = st.columns(4)
        for idx, (field, label) in enumerate(FEATURE_FIELDS):
            form[field] = cols[idx % 4].checkbox(label, key=f"client_{field}")
        st.subheader("Component Condition")
        cols = st.columns(3)
        for idx, (field, label) in enumerate(COMPONENT_FIELDS):
            form[field] = cols[idx % 3].selectbox(label, COMPONENT_CONDITIONS, key=f"client_{field}")
        form["repairs_needed"] = st.text_area("Repairs Needed", key="client_repairs_needed")
        submitted = st.form_submit_button("Save Client")

    if not submitted:
        return None
    record, errors = build_client_record(form)
    if errors:
        notify_error("Please correct the errors in the form")
        for msg in errors.values():
            st.error(msg)
        return None
    st.session_state["clients"] = st.session_state.get("clients", []) + [record.model_dump()]
    st.session_state["current_client_id"] = record.id
    notify_success(f"Client {record.client_name} saved successfully!")
    return record


CONDITION_FIELDS = ["kitchen", "bathroom", "flooring", "roofing", "hvac", "landscaping"]


def property_widget_values(prop: PropertyRecord) -> dict:
    """Editor widget key -> value for ``prop``."""
    cond = prop.conditions
    values = {
        "prop_address": prop.address,
        "prop_list_price": float(prop.list_price),
        "prop_current_value": float(prop.current_value),
        "prop_sqft": float(prop.sqft),
        "prop_condition": prop.condition,
        "prop_property_type": prop.property_type if prop.property_type in PROPERTY_TYPES else PROPERTY_TYPES[0],
        "cond_staging": cond.staging if cond.staging in STAGING_LEVELS else "Medium",
        "cond_painting": bool(cond.painting),
        "cond_defects": "\n".join(cond.defects),
    }
    for field in CONDITION_FIELDS:
        current = getattr(cond, field)
        values[f"cond_{field}"] = current if current in CONDITION_LEVELS else "Fair"
    return values


def sync_property_widgets(prop: PropertyRecord) -> None:
    """Point the editor widgets at ``prop``; call before the editor is drawn."""
    for key, val in property_widget_values(prop).items():
        st.session_state[key] = val


def render_property_editor():
    """Edit the subject property and the conditions that drive the repair plan."""
    prop = get_property()
    for key, val in property_widget_values(prop).items():
        st.session_state.setdefault(key, val)
    with st.expander("Subject Property", expanded=False):
        c1, c2 = st.columns(2)
        prop.address = c1.text_input("Address", key="prop_address")
        prop.list_price = c2.number_input("List Price ($)", min_value=0.0, step=1000.0, key="prop_list_price")
        prop.current_value = c1.number_input("Current Value ($)", min_value=0.0, step=1000.0, key="prop_current_value")
        prop.sqft = c2.number_input("Square Feet", min_value=0.0, step=10.0, key="prop_sqft")
        prop.condition = c1.selectbox("Overall Condition", CONDITION_LEVELS, key="prop_condition")
        prop.property_type = c2.selectbox("Property Type", PROPERTY_TYPES, key="prop_property_type")

    with st.expander("Condition Assessment", expanded=True):
        cols = st.columns(3)
        updated = {}
        for idx, field in enumerate(CONDITION_FIELDS):
            updated[field] = cols[idx % 3].selectbox(field.capitalize(), CONDITION_LEVELS, key=f"cond_{field}")
        updated["staging"] = cols[0].selectbox("Staging", STAGING_LEVELS, key="cond_staging")
        updated["painting"] = cols[1].checkbox("Needs Painting", key="cond_painting")
        defects = st.text_area("Defects (one per line)", key="cond_defects")
        updated["defects"] = [d.strip() for d in defects.splitlines() if d.strip()]
    prop.conditions = PropertyConditions(**updated)
    st.session_state["property"] = prop.model_dump()
    return prop


def load_client(client: dict) -> None:
    """Button callback: runs before the editor widgets of the next run exist."""
    prop = apply_client_to_property(get_property(), client)
    st.session_state["property"] = prop.model_dump()
    st.session_state["current_client_id"] = client["id"]
    sync_property_widgets(prop)
    notify_success(f"Loaded {client.get('client_name', 'client')} into the property record")


def render_recent_clients():
    clients = st.session_state.get("clients", [])
    st.subheader(f"Recent Clients ({len(clients)})")
    if not clients:
        st.caption("No clients saved yet.")
        return
    for client in recent_clients(clients):
        c1, c2 = st.columns([4, 1])
        c1.markdown(
            f"**{client.get('client_name', '')}** • {client.get('address', '')}, {client.get('city', '')} • "
            f"{client.get('client_email', '')}"
        )
        c2.button("Load", key=f"load_client_{client['id']}", on_click=load_client, args=(client,))


def render_data_entry_tab():
    st.header("Data Entry")
    render_property_editor()
    render_client_form()
    render_recent_clients()
