"""
Tests for infrastructure/http/fetcher.py.

Covers: query-string building, forced format=json, error mapping, rate
spacing between request starts.
"""

import asyncio
import json
import time

import httpx
import pytest

from worldbank_docs.infrastructure.http.fetcher import (
    DEFAULT_MIN_INTERVAL,
    WORLDBANK_API_URL,
    RateLimitedFetcher,
    build_query_params,
)
from worldbank_docs.shared.exceptions import NetworkError, ParseError


def _fetcher(handler, min_interval: float = 0.0) -> RateLimitedFetcher:
    return RateLimitedFetcher(
        base_url="https://example.test/api/v3/wds",
        min_interval=min_interval,
        transport=httpx.MockTransport(handler),
    )


# ============================================================
# build_query_params
# ============================================================


class TestBuildQueryParams:
    def test_drops_empty_values(self):
        params = build_query_params({"qterm": "energy", "count_exact": None, "docty_exact": ""})
        assert params == {"qterm": "energy", "format": "json"}

    def test_joins_lists(self):
        params = build_query_params({"fl": ["docdt", "abstracts"], "fct": ("count_exact", "lang_exact")})
        assert params["fl"] == "docdt,abstracts"
        assert params["fct"] == "count_exact,lang_exact"

    def test_stringifies_numbers_and_keeps_zero(self):
        params = build_query_params({"rows": 0, "os": 40})
        assert params["rows"] == "0"
        assert params["os"] == "40"

    def test_format_is_forced(self):
        params = build_query_params({"format": "xml"})
        assert params == {"format": "json"}


# ============================================================
# fetch
# ============================================================


class TestFetch:
    async def test_success_returns_json(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"total": 1, "documents": {}})

        async with _fetcher(handler) as fetcher:
            payload = await fetcher.fetch({"count_exact": "Mexico", "rows": 20, "format": "xml"})

        assert payload == {"total": 1, "documents": {}}
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert seen[0].url.params["format"] == "json"
        assert "count_exact=Mexico&rows=20&format=json" in str(seen[0].url)

    async def test_http_error_raises_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with _fetcher(handler) as fetcher:
            with pytest.raises(NetworkError) as exc_info:
                await fetcher.fetch({"qterm": "x"})

        assert exc_info.value.status_code == 503
        assert exc_info.value.reason == "Service Unavailable"
        assert "503" in str(exc_info.value)

    async def test_not_found_status_is_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        async with _fetcher(handler) as fetcher:
            with pytest.raises(NetworkError) as exc_info:
                await fetcher.fetch({})
        assert exc_info.value.status_code == 404

    async def test_transport_error_raises_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _fetcher(handler) as fetcher:
            with pytest.raises(NetworkError) as exc_info:
                await fetcher.fetch({})
        assert exc_info.value.status_code is None
        assert "Connection failed" in str(exc_info.value)

    async def test_invalid_json_raises_parse_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>not json</html>")

        async with _fetcher(handler) as fetcher:
            with pytest.raises(ParseError):
                await fetcher.fetch({})

    async def test_no_retry_on_failure(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        async with _fetcher(handler) as fetcher:
            with pytest.raises(NetworkError):
                await fetcher.fetch({})
        assert len(calls) == 1


# ============================================================
# Rate limiting
# ============================================================


class TestRateLimiting:
    def test_defaults(self):
        fetcher = RateLimitedFetcher()
        assert fetcher.base_url == WORLDBANK_API_URL
        assert fetcher.min_interval == DEFAULT_MIN_INTERVAL == 0.3

    async def test_consecutive_calls_spaced_by_min_interval(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        starts = []
        async with _fetcher(handler, min_interval=DEFAULT_MIN_INTERVAL) as fetcher:
            for _ in range(3):
                await fetcher.fetch({})
                starts.append(fetcher._last_request_time)

        gaps = [b - a for a, b in zip(starts, starts[1:])]
        # allow for event-loop clock resolution
        assert all(gap >= DEFAULT_MIN_INTERVAL - 0.005 for gap in gaps)

    async def test_concurrent_calls_are_serialized(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=json.dumps({}).encode())

        handler_times = []

        def timed_handler(request: httpx.Request) -> httpx.Response:
            handler_times.append(time.monotonic())
            return handler(request)

        async with _fetcher(timed_handler, min_interval=0.1) as fetcher:
            began = time.monotonic()
            await asyncio.gather(*(fetcher.fetch({}) for _ in range(3)))
            elapsed = time.monotonic() - began

        assert len(handler_times) == 3
        # first call is immediate, the next two wait one interval each
        assert elapsed >= 0.19

    async def test_first_call_not_delayed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        async with _fetcher(handler, min_interval=5.0) as fetcher:
            began = time.monotonic()
            await fetcher.fetch({})
            assert time.monotonic() - began < 1.0

    async def test_reset_clears_last_request_time(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        async with _fetcher(handler, min_interval=5.0) as fetcher:
            await fetcher.fetch({})
            assert fetcher._last_request_time > 0
            fetcher.reset()
            began = time.monotonic()
            await fetcher.fetch({})
            assert time.monotonic() - began < 1.0
