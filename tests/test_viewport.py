"""
Tests for map viewport coordination: the debouncer, the generation counter
and the viewport client that combines them.
"""

import asyncio

import httpx
import pytest

from app.clients import MapViewportClient, Viewport
from app.main import app as fastapi_app
from app.utils.viewport import Debouncer, RequestGenerationCounter
from tests.conftest import API_PREFIX
from tests.factories import PropertyFactory

OTTAWA = Viewport(north=45.5, south=45.3, east=-75.6, west=-75.8)
TORONTO = Viewport(north=43.8, south=43.5, east=-79.2, west=-79.6)


class TestRequestGenerationCounter:
    """Test generation tokens."""

    def test_tokens_increase(self):
        counter = RequestGenerationCounter()
        assert counter.current == 0
        assert counter.next() == 1
        assert counter.next() == 2

    def test_only_latest_token_is_current(self):
        counter = RequestGenerationCounter()
        first = counter.next()
        second = counter.next()

        assert not counter.is_current(first)
        assert counter.is_current(second)


class TestDebouncer:
    """Test call debouncing."""

    @pytest.mark.asyncio
    async def test_burst_runs_once_with_last_arguments(self):
        calls = []

        async def record(value):
            calls.append(value)
            return value

        debouncer = Debouncer(record, delay=0.02)
        for value in range(5):
            debouncer.trigger(value)

        result = await debouncer.flush()

        assert calls == [4]
        assert result == 4
        assert not debouncer.pending

    @pytest.mark.asyncio
    async def test_separate_bursts_each_run(self):
        calls = []

        async def record(value):
            calls.append(value)

        debouncer = Debouncer(record, delay=0.01)
        debouncer.trigger("a")
        await debouncer.flush()
        debouncer.trigger("b")
        await debouncer.flush()

        assert calls == ["a", "b"]

    @pytest.mark.asyncio
    async def test_cancel(self):
        calls = []

        async def record(value):
            calls.append(value)

        debouncer = Debouncer(record, delay=0.01)
        debouncer.trigger("x")
        assert debouncer.pending
        debouncer.cancel()

        assert await debouncer.flush() is None
        await asyncio.sleep(0.03)
        assert calls == []

    @pytest.mark.asyncio
    async def test_flush_without_trigger(self):
        async def noop():
            return None

        assert await Debouncer(noop).flush() is None

    def test_negative_delay_rejected(self):
        async def noop():
            return None

        with pytest.raises(ValueError):
            Debouncer(noop, delay=-1)


class TestMapViewportClient:
    """Test the viewport client against a stubbed transport."""

    @pytest.mark.asyncio
    async def test_debounced_changes_fetch_once(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(dict(request.url.params))
            return httpx.Response(200, json={"data": [], "total": 0})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api") as http:
            viewport_client = MapViewportClient(http, debounce_seconds=0.02, filters={"listing_type": "rent"})
            viewport_client.viewport_changed(TORONTO)
            viewport_client.viewport_changed(OTTAWA)
            await viewport_client.settle()

        assert len(requests) == 1
        assert requests[0]["north"] == "45.5"
        assert requests[0]["listing_type"] == "rent"
        assert viewport_client.viewport == OTTAWA

    @pytest.mark.asyncio
    async def test_stale_response_is_discarded(self):
        """A slow response for an older viewport never replaces a newer result."""
        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["north"] == str(TORONTO.north):
                await asyncio.sleep(0.05)
            north = float(request.url.params["north"])
            return httpx.Response(200, json={"data": [{"id": str(north)}], "total": 1})

        applied = []
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api") as http:
            viewport_client = MapViewportClient(
                http, on_results=lambda listings, total: applied.append(listings), debounce_seconds=0
            )
            old_result, new_result = await asyncio.gather(
                viewport_client.fetch_now(TORONTO),
                viewport_client.fetch_now(OTTAWA),
            )

        assert old_result is False
        assert new_result is True
        assert viewport_client.listings == [{"id": str(OTTAWA.north)}]
        assert viewport_client.viewport == OTTAWA
        assert applied == [[{"id": str(OTTAWA.north)}]]

    @pytest.mark.asyncio
    async def test_http_error_keeps_previous_results(self):
        responses = iter([
            httpx.Response(200, json={"data": [{"id": "kept"}], "total": 1}),
            httpx.Response(500, json={"error": {"code": "UPSTREAM_ERROR"}}),
        ])

        def handler(request: httpx.Request) -> httpx.Response:
            return next(responses)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api") as http:
            viewport_client = MapViewportClient(http, debounce_seconds=0)
            assert await viewport_client.fetch_now(OTTAWA) is True
            assert await viewport_client.fetch_now(TORONTO) is False

        assert viewport_client.listings == [{"id": "kept"}]
        assert viewport_client.viewport == OTTAWA

    @pytest.mark.asyncio
    async def test_malformed_body_keeps_previous_results(self):
        responses = iter([
            httpx.Response(200, json={"data": [{"id": "kept"}], "total": 1}),
            httpx.Response(200, content=b"not json", headers={"content-type": "application/json"}),
        ])

        def handler(request: httpx.Request) -> httpx.Response:
            return next(responses)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api") as http:
            viewport_client = MapViewportClient(http, debounce_seconds=0)
            assert await viewport_client.fetch_now(OTTAWA) is True
            assert await viewport_client.fetch_now(TORONTO) is False

        assert viewport_client.listings == [{"id": "kept"}]
        assert viewport_client.total == 1
        assert viewport_client.viewport == OTTAWA

    @pytest.mark.asyncio
    async def test_against_the_api(self, db_session, client, property_repository, test_owner):
        await PropertyFactory.create_property(
            property_repository, test_owner.id, title="Glebe", latitude=45.40, longitude=-75.69
        )
        await PropertyFactory.create_property(
            property_repository, test_owner.id, title="Annex", latitude=43.67, longitude=-79.40
        )

        transport = httpx.ASGITransport(app=fastapi_app)
        async with httpx.AsyncClient(transport=transport, base_url=f"http://test{API_PREFIX}") as http:
            viewport_client = MapViewportClient(http, debounce_seconds=0.01)
            viewport_client.viewport_changed(OTTAWA)
            await viewport_client.settle()

        assert [listing["title"] for listing in viewport_client.listings] == ["Glebe"]
        assert viewport_client.total == 1
