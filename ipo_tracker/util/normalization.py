from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ipo_tracker.models import AngelRecord, IpoRecord, KeyMetrics, NewsEntry, RevenuePoint


UNKNOWN_SECTOR = "Unknown"


def _debug(msg: str) -> None:
    print(f"[records] {msg}")


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _opt_float(v: Any) -> Optional[float]:
    if v is None or isinstance(v, bool):
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def _opt_int(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    if not f.is_integer():
        return None
    return int(f)


def parse_news(raw: Any) -> Tuple[NewsEntry, ...]:
    """Parse a record's `news` array.

    Absent or non-list `news` is an empty tuple. Entries without a date or
    title are skipped; a missing url becomes "".
    """
    if not isinstance(raw, list):
        return ()
    out: List[NewsEntry] = []
    for it in raw:
        if not isinstance(it, dict):
            continue
        d = _opt_str(it.get("date"))
        title = _opt_str(it.get("title"))
        if not d or not title:
            continue
        out.append(NewsEntry(date=d, title=title, url=_opt_str(it.get("url")) or ""))
    return tuple(out)


def _parse_revenue_growth(raw: Any) -> Tuple[RevenuePoint, ...]:
    if not isinstance(raw, list):
        return ()
    out: List[RevenuePoint] = []
    for it in raw:
        if not isinstance(it, dict):
            continue
        year = _opt_str(it.get("year"))
        value = _opt_float(it.get("value"))
        if year is None or value is None:
            continue
        out.append(RevenuePoint(year=year, value=value))
    return tuple(out)


def _parse_key_metrics(raw: Any) -> Optional[KeyMetrics]:
    if not isinstance(raw, dict):
        return None
    return KeyMetrics(
        cac=_opt_str(raw.get("cac")),
        ltv=_opt_str(raw.get("ltv")),
        margins=_opt_str(raw.get("margins")),
        burn_rate=_opt_str(raw.get("burnRate") or raw.get("burn_rate")),
    )


def _common_fields(obj: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Fields shared by both record shapes, or None if the row is unusable."""
    rid = _opt_int(obj.get("id"))
    name = _opt_str(obj.get("name"))
    if rid is None or name is None:
        return None

    # Sector is open vocabulary: keep whatever string arrives, as-is.
    sector = obj.get("sector")
    if sector is None or (isinstance(sector, str) and not sector.strip()):
        sector = UNKNOWN_SECTOR

    return {
        "id": rid,
        "name": name,
        "sector": str(sector),
        "stage": _opt_str(obj.get("stage")),
        "risk": _opt_str(obj.get("risk")),
        "growth": _opt_float(obj.get("growth")),
        "website": _opt_str(obj.get("website")),
        "revenue_growth": _parse_revenue_growth(obj.get("revenueGrowth")),
        "key_metrics": _parse_key_metrics(obj.get("keyMetrics")),
        "news": parse_news(obj.get("news")),
    }


def parse_ipo_record(obj: Any) -> Optional[IpoRecord]:
    """Build an IpoRecord from one payload row; None if the row has no id/name."""
    if not isinstance(obj, dict):
        return None
    base = _common_fields(obj)
    if base is None:
        return None
    return IpoRecord(
        **base,
        target_valuation=_opt_float(obj.get("targetValuation")),
        filing_date=_opt_str(obj.get("filingDate")),
        expected_debut_date=_opt_str(obj.get("expectedDebutDate")),
        roadshow_status=_opt_str(obj.get("roadshowStatus")),
        funding_raised=_opt_float(obj.get("fundingRaised")),
        last_valuation=_opt_float(obj.get("lastValuation")),
        symbol=_opt_str(obj.get("symbol")),
        exchange=_opt_str(obj.get("exchange")),
    )


def parse_angel_record(obj: Any) -> Optional[AngelRecord]:
    """Build an AngelRecord from one payload row; None if the row has no id/name."""
    if not isinstance(obj, dict):
        return None
    base = _common_fields(obj)
    if base is None:
        return None
    return AngelRecord(
        **base,
        target_raise=_opt_float(obj.get("targetRaise")),
        valuation=_opt_float(obj.get("valuation")),
        traction=_opt_str(obj.get("traction")),
        team=_opt_str(obj.get("team")),
        investors=_opt_str(obj.get("investors")),
    )


def parse_ipo_records(rows: Iterable[Any]) -> List[IpoRecord]:
    out: List[IpoRecord] = []
    for i, row in enumerate(rows):
        rec = parse_ipo_record(row)
        if rec is None:
            _debug(f"Skipping IPO row {i}: not an object or missing id/name")
            continue
        out.append(rec)
    return out


def parse_angel_records(rows: Iterable[Any]) -> List[AngelRecord]:
    out: List[AngelRecord] = []
    for i, row in enumerate(rows):
        rec = parse_angel_record(row)
        if rec is None:
            _debug(f"Skipping angel row {i}: not an object or missing id/name")
            continue
        out.append(rec)
    return out
