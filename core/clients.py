"""Client intake records."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Mapping, Optional, Tuple

from core.models import ClientRecord, PropertyRecord
from core.presets import CONDITION_LEVELS, RECENT_DISPLAY_LIMIT
from core.validation import validate_client_form, validate_email

logger = logging.getLogger(__name__)


def build_client_record(form: Mapping, now: Optional[datetime] = None) -> Tuple[Optional[ClientRecord], dict]:
    """Validate the intake form and stamp a new client record.

    Returns ``(record, {})`` on success or ``(None, errors)``.
    """
    errors = validate_client_form(form)
    if errors:
        return None, errors
    now = now or datetime.now()
    fields = {
        k: v
        for k, v in form.items()
        if k in ClientRecord.model_fields and k not in ("id", "created_at")
    }
    record = ClientRecord(
        **fields,
        id=int(now.timestamp() * 1000),
        created_at=now.isoformat(),
    )
    return record, {}


def recent_clients(clients: List[dict], limit: int = RECENT_DISPLAY_LIMIT) -> List[dict]:
    """The list itself is never truncated; only the display is."""
    return list(reversed(clients[-limit:]))


def _parse(value, cast):
    try:
        return cast(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None


def apply_client_to_property(property_data: PropertyRecord, client: Mapping) -> PropertyRecord:
    """Copy the client's listing details onto the property record.

    Blank or unparseable client fields keep the property's current value.
    """
    updates = {
        "address": client.get("address") or None,
        "list_price": _parse(client.get("list_price"), float),
        "sqft": _parse(client.get("sqft"), float),
        "bedrooms": _parse(client.get("bedrooms"), float),
        "bathrooms": _parse(client.get("bathrooms"), float),
        "year_built": _parse(client.get("year_built"), int),
        "condition": client.get("condition") or None,
        "pool": client.get("pool") or None,
    }
    if updates["condition"] not in CONDITION_LEVELS:
        updates["condition"] = None
    return property_data.model_copy(update={k: v for k, v in updates.items() if v})


def send_report(client_email: str) -> Tuple[bool, str]:
    """Simulated delivery of the CMA report; nothing leaves the machine."""
    if not client_email or not validate_email(client_email):
        return False, "Invalid client email address"
    logger.info("Report sent to %s", client_email)
    return True, f"Report sent to {client_email}"
