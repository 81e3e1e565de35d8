from __future__ import annotations

from typing import Any, Dict

from ipo_tracker.compute.aggregate import (
    ALL_NEWS,
    ALL_SECTORS,
    filter_by_sector,
    filter_news_by_sector,
    flatten_news,
    news_vocabulary,
    vocabulary,
)
from ipo_tracker.compute.display import company_view, format_date
from ipo_tracker.models import Snapshot


TABS = ("upcoming", "angel", "news")


class InvalidTabError(ValueError):
    """Raised for a tab name outside TABS."""


def build_dashboard(
    snapshot: Snapshot,
    *,
    tab: str = "upcoming",
    sector: str = ALL_SECTORS,
    news_sector: str = ALL_NEWS,
) -> Dict[str, Any]:
    """Dashboard view model for one snapshot and the selected filters.

    Both company lists are filtered by `sector` and the news feed by
    `news_sector`, whichever tab is active, so switching tabs is a client-side
    concern. An unknown sector is not an error; it just matches nothing.
    """
    if tab not in TABS:
        raise InvalidTabError(f"invalid_tab: {tab}")

    ipos = filter_by_sector(snapshot.ipos, sector)
    angels = filter_by_sector(snapshot.angels, sector)
    news = flatten_news(snapshot.ipos, snapshot.angels)
    news_filtered = filter_news_by_sector(news, news_sector)

    return {
        "tab": tab,
        "sector": sector,
        "news_sector": news_sector,
        "sectors": vocabulary(snapshot.ipos, snapshot.angels),
        "news_sectors": news_vocabulary(news),
        "ipos": [company_view(r) for r in ipos],
        "angels": [company_view(r) for r in angels],
        "news": [dict(it.to_dict(), displayDate=format_date(it.date)) for it in news_filtered],
        "counts": {
            "ipos": len(ipos),
            "angels": len(angels),
            "news": len(news_filtered),
            "news_total": len(news),
        },
        "fetched_at": snapshot.fetched_at,
    }
