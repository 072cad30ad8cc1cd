"""End-to-end runs of the pipeline with fake remote sources."""

import logging

import pytest
import requests
from fastapi.testclient import TestClient

import main
from dashboard.core.config import Settings
from dashboard.data_collection.collectors import JsonApiFetcher
from dashboard.database.manager import InitError

SOURCES = [f"https://jsonplaceholder.test/posts/{i}" for i in (1, 2, 3)]


def _post(i: int) -> dict:
    return {"userId": 1, "id": i, "title": f"title {i}", "body": f"body {i}"}


def _pipeline(settings, routes, fake_http, sources=SOURCES):
    settings = settings.model_copy(update={"data_sources": list(sources)})
    http = fake_http(routes)
    pipeline = main.DashboardPipeline(settings, fetcher=JsonApiFetcher(timeout=1.0, session_factory=http))
    return pipeline, http


def test_all_sources_succeed(settings, fake_http):
    pipeline, http = _pipeline(settings, {url: _post(i) for i, url in enumerate(SOURCES, 1)}, fake_http)
    pipeline.initialize()
    try:
        results = pipeline.run_collection()
        with TestClient(pipeline.fastapi_app) as client:
            body = client.get("/data").json()
    finally:
        pipeline.cleanup()

    assert sorted(http.calls) == sorted(SOURCES)
    assert len(results) == 3
    assert len(body) == 3
    assert len({item["id"] for item in body}) == 3
    assert all(item["source"].startswith("Data from API: ") for item in body)
    assert all(item["created_at"] for item in body)


def test_one_source_times_out(settings, fake_http, caplog):
    routes = {
        SOURCES[0]: _post(1),
        SOURCES[1]: requests.Timeout("read timed out"),
        SOURCES[2]: _post(3),
    }
    pipeline, _ = _pipeline(settings, routes, fake_http)
    pipeline.initialize()
    try:
        with caplog.at_level(logging.ERROR):
            pipeline.run_collection()
        with TestClient(pipeline.fastapi_app) as client:
            r = client.get("/data")
    finally:
        pipeline.cleanup()

    assert r.status_code == 200
    assert len(r.json()) == 2
    assert any(SOURCES[1] in rec.getMessage() for rec in caplog.records if rec.levelno == logging.ERROR)


def test_no_sources_configured(settings, fake_http):
    pipeline, http = _pipeline(settings, {}, fake_http, sources=[])
    pipeline.initialize()
    try:
        assert pipeline.run_collection() == []
        with TestClient(pipeline.fastapi_app) as client:
            r = client.get("/data")
    finally:
        pipeline.cleanup()

    assert http.calls == []
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.asyncio
async def test_collection_runs_once_before_server(settings, fake_http, monkeypatch):
    pipeline, http = _pipeline(settings, {url: _post(i) for i, url in enumerate(SOURCES, 1)}, fake_http)
    seen = {}

    async def fake_serve():
        seen["records_at_start"] = len(pipeline.db_manager.list_summaries())
        seen["calls_at_start"] = len(http.calls)

    monkeypatch.setattr(pipeline, "run_api_server", fake_serve)
    await pipeline.run()

    assert seen == {"records_at_start": 3, "calls_at_start": 3}
    assert len(http.calls) == 3
    # cleanup released the store
    assert pipeline.db_manager.engine is None


@pytest.mark.asyncio
async def test_store_init_failure_aborts_before_serving(tmp_path, fake_http, monkeypatch):
    settings = Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'nope' / 'dashboard.db'}",
        data_sources=[],
    )
    pipeline, http = _pipeline(settings, {url: _post(1) for url in SOURCES}, fake_http)
    started = []

    async def fake_serve():
        started.append(True)

    monkeypatch.setattr(pipeline, "run_api_server", fake_serve)

    with pytest.raises(InitError):
        await pipeline.run()

    assert started == []
    assert http.calls == []


@pytest.mark.asyncio
async def test_main_exits_on_init_failure(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'nope' / 'dashboard.db'}")
    monkeypatch.setenv("DATA_SOURCES", "[]")
    monkeypatch.setattr(main, "configure_logging", lambda *args, **kwargs: None)

    def _no_server(*args, **kwargs):
        raise AssertionError("server must not be created")

    monkeypatch.setattr(main.uvicorn, "Server", _no_server)

    with pytest.raises(SystemExit) as excinfo:
        await main.main()
    assert excinfo.value.code == 1


def test_busy_metrics_port_does_not_abort_startup(settings, fake_http, monkeypatch, caplog):
    settings = settings.model_copy(update={"enable_metrics": True})
    pipeline, _ = _pipeline(settings, {url: _post(i) for i, url in enumerate(SOURCES, 1)}, fake_http)

    def _port_in_use(self, port):
        raise OSError(98, "Address already in use")

    monkeypatch.setattr(main.PrometheusMetrics, "start_metrics_server", _port_in_use)

    with caplog.at_level(logging.ERROR):
        pipeline.initialize()
    try:
        assert pipeline.fastapi_app is not None
        assert len(pipeline.run_collection()) == 3
        with TestClient(pipeline.fastapi_app) as client:
            assert client.get("/data").status_code == 200
    finally:
        pipeline.cleanup()

    assert any("Metrics server unavailable" in r.getMessage() for r in caplog.records)
