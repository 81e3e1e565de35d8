from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class NewsEntry:
    date: str
    title: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "title": self.title, "url": self.url}


@dataclass(frozen=True)
class RevenuePoint:
    year: str
    value: float


@dataclass(frozen=True)
class KeyMetrics:
    cac: Optional[str] = None
    ltv: Optional[str] = None
    margins: Optional[str] = None
    burn_rate: Optional[str] = None


@dataclass(frozen=True)
class CompanyRecord:
    """Fields shared by IPO and angel records.

    `sector` is an open vocabulary and `stage`/`risk` are display labels;
    none of them are validated here.
    """

    id: int
    name: str
    sector: str
    stage: Optional[str] = None
    risk: Optional[str] = None
    growth: Optional[float] = None
    website: Optional[str] = None
    revenue_growth: Tuple[RevenuePoint, ...] = ()
    key_metrics: Optional[KeyMetrics] = None
    news: Tuple[NewsEntry, ...] = ()

    kind = "company"

    def _base_dict(self) -> Dict[str, Any]:
        km = self.key_metrics
        return {
            "id": self.id,
            "name": self.name,
            "sector": self.sector,
            "stage": self.stage,
            "risk": self.risk,
            "growth": self.growth,
            "website": self.website,
            "revenueGrowth": [{"year": p.year, "value": p.value} for p in self.revenue_growth],
            "keyMetrics": (
                {"cac": km.cac, "ltv": km.ltv, "margins": km.margins, "burnRate": km.burn_rate}
                if km is not None
                else None
            ),
            "news": [n.to_dict() for n in self.news],
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase payload shape served by the Record Source."""
        return self._base_dict()


@dataclass(frozen=True)
class IpoRecord(CompanyRecord):
    target_valuation: Optional[float] = None  # $B
    filing_date: Optional[str] = None
    expected_debut_date: Optional[str] = None
    roadshow_status: Optional[str] = None
    funding_raised: Optional[float] = None  # $M
    last_valuation: Optional[float] = None  # $B
    symbol: Optional[str] = None
    exchange: Optional[str] = None

    kind = "ipo"

    def to_dict(self) -> Dict[str, Any]:
        d = self._base_dict()
        d.update(
            {
                "targetValuation": self.target_valuation,
                "filingDate": self.filing_date,
                "expectedDebutDate": self.expected_debut_date,
                "roadshowStatus": self.roadshow_status,
                "fundingRaised": self.funding_raised,
                "lastValuation": self.last_valuation,
                "symbol": self.symbol,
                "exchange": self.exchange,
            }
        )
        return d


@dataclass(frozen=True)
class AngelRecord(CompanyRecord):
    target_raise: Optional[float] = None  # $M
    valuation: Optional[float] = None  # $M
    traction: Optional[str] = None
    team: Optional[str] = None
    investors: Optional[str] = None

    kind = "angel"

    def to_dict(self) -> Dict[str, Any]:
        d = self._base_dict()
        d.update(
            {
                "targetRaise": self.target_raise,
                "valuation": self.valuation,
                "traction": self.traction,
                "team": self.team,
                "investors": self.investors,
            }
        )
        return d


@dataclass(frozen=True)
class NewsItem:
    """A news entry tagged with its owning company's name and sector."""

    date: str
    title: str
    url: str
    company: str
    sector: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "title": self.title,
            "url": self.url,
            "company": self.company,
            "sector": self.sector,
        }


@dataclass(frozen=True)
class Snapshot:
    """One successful fetch of both lists. Replaced wholesale on refresh."""

    ipos: Tuple[IpoRecord, ...]
    angels: Tuple[AngelRecord, ...]
    fetched_at: str


@dataclass(frozen=True)
class DashboardState:
    """What the dashboard can show: the latest snapshot, or an error with a retry."""

    snapshot: Optional[Snapshot] = None
    error: Optional[str] = None
    last_updated: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.snapshot is not None and self.error is None
