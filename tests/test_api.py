import pytest
from fastapi.testclient import TestClient

from ipo_tracker.api import server
from ipo_tracker.compute import refresh
from ipo_tracker.config import Config
from ipo_tracker.sources.client import RecordSourceError


@pytest.fixture()
def api(monkeypatch):
    monkeypatch.setattr(server, "cfg", Config(RECORD_SOURCE_MODE="local"))
    monkeypatch.setattr(server, "_STATE", None)
    with TestClient(server.app) as c:
        yield c


@pytest.fixture()
def source_switch(monkeypatch):
    """Wrap the local Record Source so a test can take it down and bring it back."""
    switch = {"down": False}
    real = refresh.default_fetchers

    def fetchers(cfg):
        ipos, angels = real(cfg)

        def guarded(fn):
            def call():
                if switch["down"]:
                    raise RecordSourceError("down")
                return fn()

            return call

        return guarded(ipos), guarded(angels)

    monkeypatch.setattr(refresh, "default_fetchers", fetchers)
    return switch


def test_health(api):
    assert api.get("/health").json() == {"status": "ok"}


def test_sample_endpoints(api):
    ipos = api.get("/api/ipo-calendar")
    angels = api.get("/api/angel-investments")
    assert ipos.status_code == 200 and angels.status_code == 200
    assert [r["symbol"] for r in ipos.json()] == ["TFLW", "HLAI"]
    assert [r["id"] for r in angels.json()] == [101, 102, 103, 104]


def test_sample_endpoint_error_shape(api, monkeypatch):
    def broken():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(server, "sample_ipo_payload", broken)
    r = api.get("/api/ipo-calendar")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch IPO data", "details": "disk on fire"}


def test_dashboard_loads_lazily(api):
    r = api.get("/api/dashboard")
    assert r.status_code == 200
    body = r.json()
    assert body["sectors"][0] == "All"
    assert body["counts"]["ipos"] == 2
    assert server._STATE is not None and server._STATE.ok


def test_dashboard_query_filters(api):
    body = api.get("/api/dashboard", params={"tab": "news", "news_sector": "BioTech"}).json()
    assert {n["sector"] for n in body["news"]} == {"BioTech"}


def test_dashboard_invalid_tab(api):
    r = api.get("/api/dashboard", params={"tab": "charts"})
    assert r.status_code == 400
    assert r.json()["detail"] == "invalid_tab"


def test_sectors_endpoint(api):
    body = api.get("/api/sectors").json()
    assert body["sectors"][0] == "All"
    assert body["news_sectors"][0] == "all"
    assert len(body["sectors"]) == 7


def test_company_endpoints(api):
    ipos = api.get("/api/ipos", params={"sector": "Tech"}).json()
    assert ipos["count"] == 1
    assert ipos["companies"][0]["name"] == "TechFlow Solutions"

    angels = api.get("/api/angels").json()
    assert angels["sector"] == "All"
    assert angels["count"] == 4


def test_news_endpoint(api):
    body = api.get("/api/news").json()
    assert body["sector"] == "all"
    assert body["count"] == 12
    dates = [n["date"] for n in body["news"]]
    assert dates == sorted(dates, reverse=True)


def test_refresh_endpoint(api):
    r = api.post("/api/refresh")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["ipos"] == 2 and body["angels"] == 4


def test_error_state_then_retry(api, source_switch):
    source_switch["down"] = True
    r = api.get("/api/dashboard")
    assert r.status_code == 503
    detail = r.json()["detail"]
    assert detail["error"] == "Failed to load data. Please try again later."
    assert detail["retry"] == "/api/refresh"

    r = api.post("/api/refresh")
    assert r.status_code == 503
    assert r.json()["detail"]["error"] == "Failed to refresh data. Please try again."

    source_switch["down"] = False
    assert api.post("/api/refresh").status_code == 200
    assert api.get("/api/news").json()["count"] == 12


def test_failed_refresh_hides_previous_data(api, source_switch):
    assert api.get("/api/news").status_code == 200

    source_switch["down"] = True
    assert api.post("/api/refresh").status_code == 503
    assert api.get("/api/news").status_code == 503
