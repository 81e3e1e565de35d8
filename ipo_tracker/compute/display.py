from __future__ import annotations

from typing import Any, Dict, Optional

from ipo_tracker.models import CompanyRecord
from ipo_tracker.util.time import parse_iso_date


RISK_COLORS: Dict[str, str] = {
    "Low": "#4CAF50",
    "Medium": "#FFC107",
    "Medium-High": "#FF9800",
    "High": "#F44336",
    "Very High": "#B71C1C",
}
UNKNOWN_RISK_COLOR = "#9E9E9E"

# IPO lifecycle, in order. Angel stages (Seed+, Series A, ...) are not on it.
IPO_STAGES = ("Rumored", "Preparing", "Filed", "Roadshow", "Pricing", "Listed")

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def risk_color(risk: Optional[str]) -> str:
    """Hex color for a risk label. Unrecognized labels get the neutral grey."""
    return RISK_COLORS.get(risk or "", UNKNOWN_RISK_COLOR)


def stage_progress(stage: Optional[str]) -> float:
    """Percent progress along IPO_STAGES; 0.0 for stages not on the list."""
    try:
        idx = IPO_STAGES.index(stage or "")
    except ValueError:
        return 0.0
    return (idx + 1) / len(IPO_STAGES) * 100


def format_date(value: Optional[str]) -> str:
    """YYYY-MM-DD -> "Jul 20, 2025". Blank -> "TBD"; unparseable input is returned as-is."""
    if not value:
        return "TBD"
    d = parse_iso_date(value)
    if d is None:
        return str(value)
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"


def company_view(record: CompanyRecord) -> Dict[str, Any]:
    """Record payload plus the display fields a card or detail view needs."""
    d = record.to_dict()
    d["kind"] = record.kind
    d["riskColor"] = risk_color(record.risk)
    d["stageProgress"] = stage_progress(record.stage)
    d["news"] = [dict(n, displayDate=format_date(n["date"])) for n in d["news"]]
    if record.kind == "ipo":
        d["filingDateDisplay"] = format_date(d.get("filingDate"))
        d["expectedDebutDateDisplay"] = format_date(d.get("expectedDebutDate"))
    return d
