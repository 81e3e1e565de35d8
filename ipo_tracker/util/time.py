from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def utcnow_iso() -> str:
    """Current UTC time as ISO-8601 string with Z."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def parse_iso_date(s: Optional[str]) -> Optional[date]:
    """Parse YYYY-MM-DD (a trailing time part is ignored). None if blank or invalid."""
    if not s:
        return None
    try:
        return date.fromisoformat(str(s).strip()[:10])
    except ValueError:
        return None
