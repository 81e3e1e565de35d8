from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ipo_tracker import __version__
from ipo_tracker.compute.aggregate import (
    ALL_NEWS,
    ALL_SECTORS,
    filter_by_sector,
    filter_news_by_sector,
    flatten_news,
    news_vocabulary,
    vocabulary,
)
from ipo_tracker.compute.dashboard import InvalidTabError, build_dashboard
from ipo_tracker.compute.display import company_view
from ipo_tracker.compute.refresh import refresh_state
from ipo_tracker.config import Config, load_config
from ipo_tracker.models import DashboardState, Snapshot
from ipo_tracker.sources.sample_data import sample_angel_payload, sample_ipo_payload


def _debug(msg: str) -> None:
    print(f"[api] {msg}")


app = FastAPI(title="IPO & Angel Investment Tracker", version=__version__)
cfg: Config = load_config()

_cors_origins = [o.strip() for o in (cfg.CORS_ALLOW_ORIGINS or "").split(",") if o.strip()]
if _cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins,
        allow_credentials=cfg.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )


# Latest result of a fetch cycle. None until the first dashboard request loads it.
_STATE: Optional[DashboardState] = None
_STATE_LOCK = threading.Lock()


def _run_refresh() -> DashboardState:
    global _STATE
    with _STATE_LOCK:
        _STATE = refresh_state(_STATE, cfg)
        return _STATE


def _current_snapshot() -> Snapshot:
    """Snapshot for read endpoints; loads on first use, 503 while in an error state."""
    global _STATE
    with _STATE_LOCK:
        if _STATE is None:
            _debug("Initial load")
            _STATE = refresh_state(None, cfg)
        state = _STATE

    if state.snapshot is None:
        raise HTTPException(
            status_code=503,
            detail={
                "error": state.error,
                "last_updated": state.last_updated,
                "retry": "/api/refresh",
            },
        )
    return state.snapshot


# -----------------------------
# Health
# -----------------------------


@app.get("/health")
def health() -> Dict[str, Any]:
    return {"status": "ok"}


# -----------------------------
# Record Source (sample data)
# -----------------------------


@app.get("/api/ipo-calendar")
def ipo_calendar() -> Any:
    try:
        return sample_ipo_payload()
    except Exception as e:
        _debug(f"Error in IPO calendar: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch IPO data", "details": str(e)})


@app.get("/api/angel-investments")
def angel_investments() -> Any:
    try:
        return sample_angel_payload()
    except Exception as e:
        _debug(f"Error generating angel investment data: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to generate angel investment data"})


# -----------------------------
# Dashboard (aggregated views)
# -----------------------------


@app.post("/api/refresh")
def refresh() -> Dict[str, Any]:
    """Re-run the double fetch. Both lists are replaced together or not at all."""
    state = _run_refresh()
    if state.snapshot is None:
        raise HTTPException(
            status_code=503,
            detail={"error": state.error, "last_updated": state.last_updated, "retry": "/api/refresh"},
        )
    return {
        "status": "ok",
        "last_updated": state.last_updated,
        "ipos": len(state.snapshot.ipos),
        "angels": len(state.snapshot.angels),
    }


@app.get("/api/dashboard")
def dashboard(
    tab: str = Query("upcoming", description="upcoming|angel|news"),
    sector: str = Query(ALL_SECTORS, description='Company sector filter; "All" for no filter'),
    news_sector: str = Query(ALL_NEWS, description='News sector filter; "all" for no filter'),
) -> Dict[str, Any]:
    snap = _current_snapshot()
    try:
        return build_dashboard(snap, tab=tab, sector=sector, news_sector=news_sector)
    except InvalidTabError:
        raise HTTPException(status_code=400, detail="invalid_tab")


@app.get("/api/sectors")
def sectors() -> Dict[str, Any]:
    snap = _current_snapshot()
    news = flatten_news(snap.ipos, snap.angels)
    return {
        "sectors": vocabulary(snap.ipos, snap.angels),
        "news_sectors": news_vocabulary(news),
    }


@app.get("/api/ipos")
def list_ipos(sector: str = Query(ALL_SECTORS)) -> Dict[str, Any]:
    snap = _current_snapshot()
    rows = filter_by_sector(snap.ipos, sector)
    return {"sector": sector, "count": len(rows), "companies": [company_view(r) for r in rows]}


@app.get("/api/angels")
def list_angels(sector: str = Query(ALL_SECTORS)) -> Dict[str, Any]:
    snap = _current_snapshot()
    rows = filter_by_sector(snap.angels, sector)
    return {"sector": sector, "count": len(rows), "companies": [company_view(r) for r in rows]}


@app.get("/api/news")
def list_news(sector: str = Query(ALL_NEWS)) -> Dict[str, Any]:
    snap = _current_snapshot()
    items = filter_news_by_sector(flatten_news(snap.ipos, snap.angels), sector)
    return {"sector": sector, "count": len(items), "news": [it.to_dict() for it in items]}
