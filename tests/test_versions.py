from datetime import datetime, timedelta
from core.models import PropertyRecord, default_budgets
from core.presets import DEFAULT_PROPERTY
from core.versions import VersionHistory

T0 = datetime(2025, 1, 1, 12, 0, 0)


def _prop():
    return PropertyRecord(**DEFAULT_PROPERTY)


def test_save_is_a_deep_copy():
    history = VersionHistory()
    prop = _prop()
    budgets = default_budgets()
    snap, evicted = history.save(prop, budgets, client_id=7, now=T0)
    prop.conditions.defects.append("Leaky faucet")
    budgets["kitchen"] = 5000
    assert not evicted
    assert snap.property_data.conditions.defects == []
    assert snap.repair_budgets["kitchen"] == 0
    assert snap.client_id == 7
    assert snap.user_note.startswith("Version saved at 01/01/2025")


def test_fifty_first_save_evicts_oldest():
    history = VersionHistory()
    first_id = None
    for i in range(50):
        snap, evicted = history.save(_prop(), default_budgets(), now=T0 + timedelta(seconds=i))
        assert not evicted
        first_id = first_id or snap.id
    last, evicted = history.save(_prop(), default_budgets(), now=T0 + timedelta(seconds=50))
    assert evicted
    assert len(history) == 50
    assert history.get(first_id) is None
    assert history.entries[-1].id == last.id


def test_ids_stay_unique_within_same_millisecond():
    history = VersionHistory()
    a, _ = history.save(_prop(), {}, now=T0)
    b, _ = history.save(_prop(), {}, now=T0)
    assert b.id == a.id + 1


def test_recent_delete_and_round_trip():
    history = VersionHistory()
    ids = [history.save(_prop(), {}, now=T0 + timedelta(minutes=i))[0].id for i in range(5)]
    assert [s.id for s in history.recent(3)] == ids[:-4:-1]
    assert history.delete(ids[0])
    assert not history.delete(12345)
    restored = VersionHistory.from_dicts(history.as_dict())
    assert [s.id for s in restored.entries] == ids[1:]


def test_from_dicts_drops_malformed_rows():
    history = VersionHistory()
    history.save(_prop(), {}, now=T0)
    rows = history.as_dict() + [{"id": "nope"}]
    assert len(VersionHistory.from_dicts(rows)) == 1
