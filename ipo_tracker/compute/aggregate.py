from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from ipo_tracker.models import CompanyRecord, NewsItem


# Company filters use "All"; the news filter uses lowercase "all".
ALL_SECTORS = "All"
ALL_NEWS = "all"

R = TypeVar("R", bound=CompanyRecord)


def _distinct(values: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


def vocabulary(ipos: Sequence[CompanyRecord], angels: Sequence[CompanyRecord]) -> List[str]:
    """Sector filter options: "All" then every distinct sector, in discovery order (IPOs first)."""
    sectors = [r.sector for r in ipos] + [r.sector for r in angels]
    return [ALL_SECTORS] + _distinct(sectors)


def filter_by_sector(records: Sequence[R], sector: str) -> List[R]:
    """Records whose sector equals `sector` exactly; "All" keeps every record in order."""
    if sector == ALL_SECTORS:
        return list(records)
    return [r for r in records if r.sector == sector]


def flatten_news(ipos: Sequence[CompanyRecord], angels: Sequence[CompanyRecord]) -> List[NewsItem]:
    """Merge every record's news into one feed, newest first.

    Items are collected IPOs first, then angels, each in record order then
    news order. ISO dates sort correctly as strings, and the sort is stable
    (also with reverse=True), so equal dates keep that collection order.
    """
    items: List[NewsItem] = []
    for company in list(ipos) + list(angels):
        for n in company.news or ():
            items.append(
                NewsItem(
                    date=n.date,
                    title=n.title,
                    url=n.url,
                    company=company.name,
                    sector=company.sector,
                )
            )
    items.sort(key=lambda it: it.date, reverse=True)
    return items


def filter_news_by_sector(news: Sequence[NewsItem], sector: str) -> List[NewsItem]:
    """News items for one sector; "all" keeps the whole feed in order."""
    if sector == ALL_NEWS:
        return list(news)
    return [it for it in news if it.sector == sector]


def news_vocabulary(news: Sequence[NewsItem]) -> List[str]:
    """News filter options: "all" then every distinct sector present in the feed."""
    return [ALL_NEWS] + _distinct(it.sector for it in news)
