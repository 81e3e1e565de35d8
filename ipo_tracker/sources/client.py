from __future__ import annotations

from typing import Any, List

import requests

from ipo_tracker.models import AngelRecord, IpoRecord
from ipo_tracker.util.normalization import parse_angel_records, parse_ipo_records


IPO_CALENDAR_PATH = "/api/ipo-calendar"
ANGEL_INVESTMENTS_PATH = "/api/angel-investments"


class RecordSourceError(RuntimeError):
    """Raised when the Record Source cannot supply a complete list."""


def _debug(msg: str) -> None:
    print(f"[client] {msg}")


def _get_list(base_url: str, path: str, *, timeout: float, label: str) -> List[Any]:
    url = f"{base_url.rstrip('/')}{path}"
    _debug(f"Fetching {label}: {url}")
    try:
        r = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
    except requests.RequestException as e:
        raise RecordSourceError(f"{label} request failed: {e}") from e

    if r.status_code != 200:
        raise RecordSourceError(f"{label} error {r.status_code}: {r.text[:500]}")

    try:
        data = r.json() if r.text else []
    except ValueError as e:
        raise RecordSourceError(f"{label} returned invalid JSON") from e

    if not isinstance(data, list):
        raise RecordSourceError(f"{label} returned unexpected payload: {str(data)[:500]}")
    return data


def fetch_ipo_records(base_url: str, *, timeout: float = 30) -> List[IpoRecord]:
    """Fetch upcoming IPOs.

    Endpoint: GET {base_url}/api/ipo-calendar -> JSON list of IPO rows.
    Malformed rows are dropped by the parser; transport/HTTP/payload errors raise.
    """
    rows = _get_list(base_url, IPO_CALENDAR_PATH, timeout=timeout, label="IPO calendar")
    records = parse_ipo_records(rows)
    _debug(f"IPO calendar rows={len(rows)} parsed={len(records)}")
    return records


def fetch_angel_records(base_url: str, *, timeout: float = 30) -> List[AngelRecord]:
    """Fetch angel-investment opportunities.

    Endpoint: GET {base_url}/api/angel-investments -> JSON list of angel rows.
    """
    rows = _get_list(base_url, ANGEL_INVESTMENTS_PATH, timeout=timeout, label="Angel investments")
    records = parse_angel_records(rows)
    _debug(f"Angel investments rows={len(rows)} parsed={len(records)}")
    return records
