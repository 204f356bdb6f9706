"""Input validation helpers for the data entry forms."""
from __future__ import annotations

import math
import re
from datetime import date
from typing import Dict, Mapping

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\(\d{3}\)\d{3}-\d{4}$|^\d{3}-\d{3}-\d{4}$|^\d{10}$")


def validate_email(email) -> bool:
    return bool(EMAIL_RE.match(str(email or "")))


def validate_phone(phone) -> bool:
    """Accept ``(727) 555-0100``, ``727-555-0100`` or ``7275550100``.

    Whitespace is ignored, so ``(727)555-0100`` is accepted as well.
    """
    return bool(PHONE_RE.match(re.sub(r"\s+", "", str(phone or ""))))


def validate_number(value, min_value: float = 0.0, max_value: float = math.inf) -> bool:
    """Return ``True`` when ``value`` parses to a number inside the bounds."""
    if isinstance(value, bool):
        return False
    try:
        num = float(value)
    except (TypeError, ValueError):
        return False
    return not math.isnan(num) and min_value <= num <= max_value


def validate_year(year) -> bool:
    try:
        num = int(str(year).strip())
    except (TypeError, ValueError):
        return False
    return 1800 <= num <= date.today().year + 5


def validate_client_form(data: Mapping) -> Dict[str, str]:
    """Validate the client intake form and return field errors by name."""
    errors: Dict[str, str] = {}

    if not str(data.get("client_name", "")).strip():
        errors["client_name"] = "Client name is required"
    email = str(data.get("client_email", "")).strip()
    if not email:
        errors["client_email"] = "Email is required"
    elif not validate_email(email):
        errors["client_email"] = "Please enter a valid email address"
    phone = str(data.get("client_phone", "")).strip()
    if not phone:
        errors["client_phone"] = "Phone number is required"
    elif not validate_phone(phone):
        errors["client_phone"] = "Please enter a valid phone number"

    if not str(data.get("address", "")).strip():
        errors["address"] = "Property address is required"
    if not str(data.get("city", "")).strip():
        errors["city"] = "City is required"
    if not str(data.get("zip", "")).strip():
        errors["zip"] = "ZIP code is required"

    # optional numeric fields are only checked when filled in
    if data.get("list_price") and not validate_number(data["list_price"], 1000, 100_000_000):
        errors["list_price"] = "List price must be between $1,000 and $100,000,000"
    if data.get("sqft") and not validate_number(data["sqft"], 100, 50_000):
        errors["sqft"] = "Square footage must be between 100 and 50,000"
    if data.get("year_built") and not validate_year(data["year_built"]):
        errors["year_built"] = "Please enter a valid year"
    return errors
