"""Tests for the metrics fetcher and the SWR data hook.

HTTP is served by httpx.MockTransport; nothing leaves the process.
"""

import asyncio

import httpx
import pytest

from src.dashboard.fetcher import MetricsFetcher, SWRCache
from src.dashboard.models import FetchState


def metrics_api(request: httpx.Request) -> httpx.Response:
    routes = {
        "/api/views": httpx.Response(200, json={"total": 1234}),
        "/api/github": httpx.Response(200, json={"stars": 321}),
        "/api/broken": httpx.Response(500, json={"error": "boom"}),
        "/api/html": httpx.Response(200, text="<html>not json</html>"),
    }
    if request.url.path == "/api/down":
        raise httpx.ConnectError("Connection refused", request=request)
    return routes.get(request.url.path, httpx.Response(404))


def make_fetcher(handler=metrics_api) -> MetricsFetcher:
    return MetricsFetcher(
        base_url="https://metrics.test/",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


async def _fetch(key):
    async with make_fetcher() as fetcher:
        return await fetcher.fetch(key)


async def _revalidate(keys):
    async with make_fetcher() as fetcher:
        cache = SWRCache(fetcher)
        states = await cache.revalidate_all(keys)
        return cache, states


class TestFetchState:
    def test_pending(self):
        state = FetchState()
        assert state.is_pending
        assert not state.has_error

    def test_resolved(self):
        assert not FetchState(data={"total": 1}).is_pending

    def test_failed(self):
        state = FetchState(error=RuntimeError("x"))
        assert state.has_error
        assert not state.is_pending


class TestMetricsFetcher:
    def test_base_url_normalized(self):
        assert make_fetcher().base_url == "https://metrics.test"

    def test_fetch_json(self):
        assert asyncio.run(_fetch("/api/views")) == {"total": 1234}

    def test_http_error_raises(self):
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(_fetch("/api/broken"))

    def test_connect_error_raises(self):
        with pytest.raises(httpx.ConnectError):
            asyncio.run(_fetch("/api/down"))

    def test_invalid_json_raises_value_error(self):
        with pytest.raises(ValueError):
            asyncio.run(_fetch("/api/html"))

    def test_defaults_from_settings(self):
        from src.common.config import MetricsSettings

        fetcher = MetricsFetcher(config=MetricsSettings(api_base_url="https://cfg.test", request_timeout_seconds=3))
        assert fetcher.base_url == "https://cfg.test"
        assert fetcher.timeout == 3


class TestSWRCache:
    def test_use_before_revalidate_is_pending(self, data_cache, fake_fetcher):
        assert data_cache.use("/api/views").is_pending
        assert fake_fetcher.calls == []

    def test_revalidate_success(self):
        cache, states = asyncio.run(_revalidate(["/api/views"]))
        assert states["/api/views"].data == {"total": 1234}
        assert cache.use("/api/views").data == {"total": 1234}

    @pytest.mark.parametrize("key,error_type", [
        ("/api/broken", httpx.HTTPStatusError),
        ("/api/down", httpx.ConnectError),
        ("/api/html", ValueError),
        ("/api/missing", httpx.HTTPStatusError),
    ])
    def test_revalidate_failure_captured(self, key, error_type):
        cache, states = asyncio.run(_revalidate([key]))
        state = cache.use(key)
        assert state.data is None
        assert isinstance(state.error, error_type)
        assert states[key] is state

    def test_failures_do_not_affect_other_keys(self):
        cache, states = asyncio.run(_revalidate(["/api/views", "/api/down", "/api/github"]))
        assert cache.use("/api/views").data == {"total": 1234}
        assert cache.use("/api/github").data == {"stars": 321}
        assert cache.use("/api/down").has_error

    def test_failure_keeps_stale_data(self, fake_fetcher):
        cache = SWRCache(fake_fetcher)
        cache.mutate("/api/views", {"total": 1})
        fake_fetcher.responses["/api/views"] = httpx.ConnectError("refused")

        state = asyncio.run(cache.revalidate("/api/views"))

        assert state.data == {"total": 1}
        assert state.has_error

    def test_invalid_url_captured(self, fake_fetcher):
        fake_fetcher.responses["/api/views"] = httpx.InvalidURL("bad")
        fake_fetcher.responses["/api/github"] = httpx.InvalidURL("bad")
        cache = SWRCache(fake_fetcher)

        states = asyncio.run(cache.revalidate_all(["/api/views", "/api/github"]))

        assert all(isinstance(s.error, httpx.InvalidURL) for s in states.values())
        assert cache.use("/api/views").has_error

    def test_revalidate_all_dedupes_keys(self, data_cache, fake_fetcher):
        states = asyncio.run(data_cache.revalidate_all(["/api/views", "/api/views", "/api/github"]))
        assert sorted(fake_fetcher.calls) == ["/api/github", "/api/views"]
        assert list(states) == ["/api/views", "/api/github"]

    def test_requests_run_concurrently(self):
        started = []

        class SlowFetcher:
            def __init__(self, gate):
                self.gate = gate

            async def fetch(self, key):
                started.append(key)
                if len(started) == 2:
                    self.gate.set()
                # Only resolves if both requests are in flight at once
                await asyncio.wait_for(self.gate.wait(), timeout=1)
                return {"total": len(key)}

        async def run():
            cache = SWRCache(SlowFetcher(asyncio.Event()))
            return await cache.revalidate_all(["/api/a", "/api/bb"])

        states = asyncio.run(run())
        assert states["/api/a"].data == {"total": 6}
        assert states["/api/bb"].data == {"total": 7}

    def test_mutate(self, data_cache):
        data_cache.mutate("/api/views", {"total": 5})
        assert data_cache.use("/api/views") == FetchState(data={"total": 5})
