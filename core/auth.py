"""Simulated sign-in against the demo accounts."""
from __future__ import annotations

import logging
from typing import Tuple

from core.presets import DEMO_ACCOUNTS
from core.validation import validate_email

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def authenticate(email: str, password: str) -> Tuple[bool, str]:
    """Return ``(ok, message)`` for a login attempt."""
    if not email or not password:
        return False, "Please enter both email and password"
    if not validate_email(email):
        return False, "Please enter a valid email address"
    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if any(a["email"] == email and a["password"] == password for a in DEMO_ACCOUNTS):
        logger.info("User signed in: %s", email)
        return True, f"Welcome back, {email}!"
    return False, "Invalid email or password. Try demo@clues.com / demo123"
