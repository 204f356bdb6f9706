from datetime import datetime
from core.clients import apply_client_to_property, build_client_record, recent_clients, send_report
from core.models import PropertyRecord
from core.presets import DEFAULT_PROPERTY

FORM = {
    "client_name": "Pat Doe",
    "client_email": "pat@example.com",
    "client_phone": "(727) 555-0100",
    "address": "100 Main St",
    "city": "Clearwater",
    "zip": "33763",
    "list_price": "350000",
    "sqft": "1500",
    "bedrooms": "3",
    "bathrooms": "2.5",
    "year_built": "1990",
    "condition": "Good",
    "pool": True,
}


def test_build_client_record_stamps_id():
    now = datetime(2025, 4, 1, 10, 0, 0)
    record, errors = build_client_record(dict(FORM, id=5, created_at="x", unknown="y"), now=now)
    assert errors == {}
    assert record.id == int(now.timestamp() * 1000)
    assert record.created_at == now.isoformat()
    assert record.state == "FL"


def test_build_client_record_returns_errors():
    record, errors = build_client_record(dict(FORM, client_email="bad"))
    assert record is None
    assert errors == {"client_email": "Please enter a valid email address"}


def test_recent_clients_newest_first():
    clients = [{"id": i} for i in range(15)]
    shown = recent_clients(clients)
    assert [c["id"] for c in shown] == list(range(14, 4, -1))
    assert len(clients) == 15


def test_apply_client_to_property():
    prop = PropertyRecord(**DEFAULT_PROPERTY)
    updated = apply_client_to_property(prop, FORM)
    assert updated.address == "100 Main St"
    assert updated.list_price == 350000
    assert updated.bathrooms == 2.5
    assert updated.year_built == 1990
    assert updated.condition == "Good"
    assert updated.pool is True
    assert prop.address == DEFAULT_PROPERTY["address"]


def test_apply_client_keeps_blank_fields():
    prop = PropertyRecord(**DEFAULT_PROPERTY)
    updated = apply_client_to_property(prop, {"address": "", "sqft": "abc", "condition": "Great"})
    assert updated == prop


def test_send_report():
    assert send_report("pat@example.com") == (True, "Report sent to pat@example.com")
    assert send_report("") == (False, "Invalid client email address")
    assert send_report("pat@") == (False, "Invalid client email address")
