"""Tests for the Router client and the network summary fallbacks."""

import asyncio
import json

import httpx

from app.schemas.catalog import CatalogEntry
from app.schemas.network import NetworkStatusSummary
from app.services.cortensor import (
    CortensorClient,
    build_recommendation_prompt,
    get_mock_network_stats,
    should_use_demo,
)


DEMO = {"isOnline": True, "minerCount": 45, "sessionCount": 12, "status": "demo"}


def _client(handler):
    return CortensorClient(
        base_url="http://router.test",
        api_key="secret-token",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


def _router(status=None, miners=None, sessions=None, fail=()):
    """Build a handler serving the three read endpoints.

    Paths listed in ``fail`` answer with HTTP 503.
    """
    bodies = {
        "/api/v1/status": status,
        "/api/v1/miners": miners,
        "/api/v1/sessions": sessions,
    }

    def handler(request):
        path = request.url.path
        if path in fail or path not in bodies:
            return httpx.Response(503)
        return httpx.Response(200, json=bodies[path])

    return handler


def _miners(n):
    return [{"id": f"m{i}", "address": f"0x{i}", "status": "active"} for i in range(n)]


def _as_wire(summary):
    return summary.model_dump(by_alias=True)


def test_requests_are_bearer_authenticated():
    seen = []

    def handler(request):
        seen.append(request.headers.get("authorization"))
        return httpx.Response(200, json={"status": "ok", "health": "healthy"})

    status = asyncio.run(_client(handler).get_network_status())
    assert status.status == "ok"
    assert seen == ["Bearer secret-token"]


def test_status_read_failure_is_none():
    client = _client(_router(fail=("/api/v1/status",)))
    assert asyncio.run(client.get_network_status()) is None


def test_list_reads_fail_to_empty():
    client = _client(_router(fail=("/api/v1/miners", "/api/v1/sessions")))
    assert asyncio.run(client.get_miners()) == []
    assert asyncio.run(client.get_sessions()) == []


def test_transport_error_is_absorbed():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)
    assert asyncio.run(client.get_network_status()) is None
    assert asyncio.run(client.get_miners()) == []
    assert asyncio.run(client.get_sessions()) == []


def test_malformed_bodies_are_absorbed():
    def handler(request):
        if request.url.path == "/api/v1/status":
            return httpx.Response(200, content=b"<html>oops</html>")
        return httpx.Response(200, json={"unexpected": "object"})

    client = _client(handler)
    assert asyncio.run(client.get_network_status()) is None
    assert asyncio.run(client.get_miners()) == []


def test_stats_live_network():
    client = _client(_router(
        status={"status": "ok"},
        miners=_miners(3),
        sessions=[{"id": 1, "status": "active", "tasks": 4}],
    ))
    summary = asyncio.run(client.get_network_stats())
    expected = {"isOnline": True, "minerCount": 3, "sessionCount": 1, "status": "ok"}
    assert _as_wire(summary) == expected
    assert _as_wire(asyncio.run(client.resolve_network_stats())) == expected


def test_stats_healthy_without_status_field():
    client = _client(_router(status={"health": "healthy"}, miners=[], sessions=[]))
    raw = asyncio.run(client.get_network_stats())
    assert _as_wire(raw) == {"isOnline": True, "minerCount": 0, "sessionCount": 0, "status": "unknown"}
    # No miners, so the displayed summary is the demo one
    assert _as_wire(asyncio.run(client.resolve_network_stats())) == DEMO


def test_stats_offline_status():
    client = _client(_router(status={"status": "degraded", "health": "down"}, miners=_miners(2), sessions=[]))
    summary = asyncio.run(client.resolve_network_stats())
    assert summary.is_online is False
    assert summary.miner_count == 2
    assert summary.status == "degraded"


def test_partial_failure():
    client = _client(_router(status={"status": "ok"}, miners=_miners(5), fail=("/api/v1/sessions",)))
    summary = asyncio.run(client.resolve_network_stats())
    assert _as_wire(summary) == {"isOnline": True, "minerCount": 5, "sessionCount": 0, "status": "ok"}


def test_total_failure_uses_demo():
    client = _client(_router(fail=("/api/v1/status", "/api/v1/miners", "/api/v1/sessions")))
    raw = asyncio.run(client.get_network_stats())
    assert _as_wire(raw) == {"isOnline": False, "minerCount": 0, "sessionCount": 0, "status": "unknown"}
    assert _as_wire(asyncio.run(client.resolve_network_stats())) == DEMO


def test_aggregation_exception_uses_demo(monkeypatch):
    client = _client(_router())

    async def boom():
        raise RuntimeError("network layer exploded")

    monkeypatch.setattr(client, "get_network_stats", boom)
    assert _as_wire(asyncio.run(client.resolve_network_stats())) == DEMO


def test_reads_run_concurrently():
    in_flight = 0
    peak = 0

    class SlowTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            if request.url.path == "/api/v1/status":
                return httpx.Response(200, json={"status": "ok"})
            return httpx.Response(200, json=_miners(1))

    client = CortensorClient(base_url="http://router.test", api_key="k", timeout=5, transport=SlowTransport())
    asyncio.run(client.get_network_stats())
    assert peak == 3


def test_should_use_demo():
    assert should_use_demo(NetworkStatusSummary(is_online=True, miner_count=0, session_count=9, status="ok"))
    assert not should_use_demo(NetworkStatusSummary(is_online=False, miner_count=1, session_count=0, status="unknown"))


def test_mock_stats():
    assert _as_wire(get_mock_network_stats()) == DEMO


def _catalog_entry(name, category):
    return CatalogEntry(
        id=name.lower(),
        name=name,
        author="a",
        description=f"{name} description",
        category=category,
        status="live",
    )


def test_recommendation_prompt_lists_apps():
    prompt = build_recommendation_prompt("find an oracle", [_catalog_entry("Truth", "oracle")])
    assert "- Truth: Truth description (oracle)" in prompt
    assert 'User query: "find an oracle"' in prompt


def test_recommendation_request():
    captured = {}

    def handler(request):
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"response": "Try Truth.", "taskId": 7, "minerId": "m1"})

    result = asyncio.run(_client(handler).get_app_recommendation("oracle", [_catalog_entry("Truth", "oracle")], session_id=3))
    assert captured["path"] == "/api/v1/completions/3"
    assert captured["body"]["stream"] is False
    assert captured["body"]["timeout"] == 60
    assert result.response == "Try Truth."
    assert result.task_id == 7
    assert result.miner_id == "m1"


def test_recommendation_failure_is_none():
    def handler(request):
        return httpx.Response(500)

    assert asyncio.run(_client(handler).get_app_recommendation("x", [])) is None


def test_mixed_shape_items_still_counted():
    client = _client(_router(
        status={"status": "ok"},
        miners=[{"id": "m1"}, {"id": "m2"}, {"id": 3, "address": ["not", "a", "string"]}, "m4"],
        sessions=[{"id": 1, "status": "active", "tasks": 2}, {"id": "s2", "tasks": "n/a"}],
    ))
    raw = asyncio.run(client.get_network_stats())
    assert raw.miner_count == 4
    assert raw.session_count == 2
    # Live counts are kept rather than replaced by demo data
    assert _as_wire(asyncio.run(client.resolve_network_stats())) == {
        "isOnline": True,
        "minerCount": 4,
        "sessionCount": 2,
        "status": "ok",
    }
