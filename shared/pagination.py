"""
Opaque cursors for newest-first listings.

Listings are ordered by ``created_at desc, id desc``. A cursor encodes
the ``(created_at, id)`` key of the last row on a page, and the next page
starts strictly after that key, so rows sharing a timestamp are neither
skipped nor repeated across a page boundary.
"""

import base64
import json
from datetime import datetime, timezone
from typing import NamedTuple, Optional


class PageCursor(NamedTuple):
    """Sort key of the last row on a page."""

    created_at: str
    id: str

    def after_filter(self) -> str:
        """PostgREST ``or`` filter for rows that sort after this key."""
        ts = f'"{self.created_at}"'
        return f'created_at.lt.{ts},and(created_at.eq.{ts},id.lt."{self.id}")'


def encode_cursor(created_at: datetime, row_id: str) -> str:
    """Opaque page cursor for the row with this creation time and id."""
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    payload = json.dumps({"created_at": created_at.isoformat(), "id": row_id})
    return base64.urlsafe_b64encode(payload.encode()).decode()


def decode_cursor(cursor: Optional[str]) -> Optional[PageCursor]:
    """
    Decode a page cursor back to its sort key.

    Returns None for an empty cursor (first page).

    Raises:
        ValueError: If the cursor is malformed
    """
    if not cursor:
        return None
    try:
        data = json.loads(base64.urlsafe_b64decode(cursor.encode()).decode())
        key = PageCursor(str(data["created_at"]), str(data["id"]))
        datetime.fromisoformat(key.created_at)
    except (ValueError, UnicodeDecodeError, TypeError, KeyError) as e:
        raise ValueError(f"Malformed cursor: {cursor}") from e
    return key
