"""Property photo upload helpers."""
from __future__ import annotations

import base64
from datetime import datetime
from typing import List, Optional

from core.models import PropertyPhoto
from core.presets import ALLOWED_PHOTO_TYPES, MAX_PHOTO_BYTES, MAX_PHOTOS


def validate_photo(mime_type: str, size: int, existing_count: int) -> Optional[str]:
    """Return a user-facing error message, or ``None`` when the upload is fine."""
    if size > MAX_PHOTO_BYTES:
        return "Image must be smaller than 5MB"
    if mime_type not in ALLOWED_PHOTO_TYPES:
        return "Please upload only JPEG, PNG, or WebP images"
    if existing_count >= MAX_PHOTOS:
        return f"Maximum {MAX_PHOTOS} photos allowed"
    return None


def make_photo(name: str, mime_type: str, data: bytes, now: Optional[datetime] = None) -> PropertyPhoto:
    """Embed the image as a data URL, the way it is kept in local storage."""
    now = now or datetime.now()
    encoded = base64.b64encode(data).decode("ascii")
    return PropertyPhoto(
        id=int(now.timestamp() * 1000),
        src=f"data:{mime_type};base64,{encoded}",
        name=name,
        size=len(data),
        uploaded_at=now.isoformat(),
    )


def delete_photo(photos: List[dict], photo_id: int) -> List[dict]:
    return [p for p in photos if p.get("id") != photo_id]
