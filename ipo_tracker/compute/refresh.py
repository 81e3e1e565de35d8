from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence, Tuple

from ipo_tracker.config import Config
from ipo_tracker.models import AngelRecord, DashboardState, IpoRecord, Snapshot
from ipo_tracker.sources.client import RecordSourceError, fetch_angel_records, fetch_ipo_records
from ipo_tracker.sources.sample_data import sample_angel_payload, sample_ipo_payload
from ipo_tracker.util.normalization import parse_angel_records, parse_ipo_records
from ipo_tracker.util.time import utcnow_iso


LOAD_ERROR_MESSAGE = "Failed to load data. Please try again later."
REFRESH_ERROR_MESSAGE = "Failed to refresh data. Please try again."

IpoFetcher = Callable[[], Sequence[IpoRecord]]
AngelFetcher = Callable[[], Sequence[AngelRecord]]


def _debug(msg: str) -> None:
    print(f"[refresh] {msg}")


def default_fetchers(cfg: Config) -> Tuple[IpoFetcher, AngelFetcher]:
    """Record Source functions for cfg.RECORD_SOURCE_MODE ("local" or "http")."""
    mode = cfg.RECORD_SOURCE_MODE
    if mode == "local":
        return (
            lambda: parse_ipo_records(sample_ipo_payload()),
            lambda: parse_angel_records(sample_angel_payload()),
        )
    if mode == "http":
        base_url = cfg.RECORD_SOURCE_BASE_URL
        timeout = cfg.RECORD_SOURCE_TIMEOUT_SECONDS
        return (
            lambda: fetch_ipo_records(base_url, timeout=timeout),
            lambda: fetch_angel_records(base_url, timeout=timeout),
        )
    raise ValueError(f"Unknown RECORD_SOURCE_MODE: {mode!r} (expected local|http)")


def fetch_snapshot(
    cfg: Config,
    *,
    fetch_ipos: Optional[IpoFetcher] = None,
    fetch_angels: Optional[AngelFetcher] = None,
) -> Snapshot:
    """Fetch both lists concurrently and return them as one Snapshot.

    Both requests are issued before either is awaited, and both are waited
    on. If either fails, RecordSourceError is raised and no Snapshot exists.
    """
    default_ipos, default_angels = default_fetchers(cfg)
    ipo_fn = fetch_ipos or default_ipos
    angel_fn = fetch_angels or default_angels

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="record-source") as pool:
        ipo_future = pool.submit(ipo_fn)
        angel_future = pool.submit(angel_fn)
        ipo_error = ipo_future.exception()
        angel_error = angel_future.exception()

    err = ipo_error or angel_error
    if err is not None:
        if isinstance(err, RecordSourceError):
            raise err
        raise RecordSourceError(f"Record Source fetch failed: {err}") from err

    ipos = tuple(ipo_future.result())
    angels = tuple(angel_future.result())
    _debug(f"Fetched snapshot ipos={len(ipos)} angels={len(angels)}")
    return Snapshot(ipos=ipos, angels=angels, fetched_at=utcnow_iso())


def refresh_state(
    prev: Optional[DashboardState],
    cfg: Config,
    *,
    fetch_ipos: Optional[IpoFetcher] = None,
    fetch_angels: Optional[AngelFetcher] = None,
) -> DashboardState:
    """Run one fetch-then-aggregate cycle and return the state that replaces `prev`.

    `prev` None means the initial load. On failure the previous snapshot is
    dropped and the state carries a user-visible error; retrying is the
    caller's decision.
    """
    try:
        snap = fetch_snapshot(cfg, fetch_ipos=fetch_ipos, fetch_angels=fetch_angels)
    except RecordSourceError as e:
        _debug(f"Refresh failed: {e}")
        return DashboardState(
            snapshot=None,
            error=LOAD_ERROR_MESSAGE if prev is None else REFRESH_ERROR_MESSAGE,
            last_updated=prev.last_updated if prev is not None else None,
        )

    return DashboardState(snapshot=snap, error=None, last_updated=snap.fetched_at)
