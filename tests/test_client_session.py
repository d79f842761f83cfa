import asyncio
import json

import httpx

from geovaluate.client.base import DEFAULT_CENTER, FOCUSED_ZOOM, GeoPoint, Place
from geovaluate.client.session import FETCH_ERROR, NO_PLACE_WARNING, AnalysisSession
from geovaluate.schemas import ListingsResponse, ValuationReport

LISTINGS = {"listings": [{"project_name": "X", "developer": "Y", "details": "Z", "source_url": "http://a"}]}
REPORT = {
    "address": "Erode, Tamil Nadu",
    "fair_value_estimate": "₹45 - ₹52 Lakhs",
    "hedonic_analysis": [{"factor": "Location", "score": 4, "justification": "Central."}],
    "growth_trends": "Steady.",
    "projected_appreciation": "5% annually",
    "sources": ["https://example.org/a"],
}
ERODE = Place("Erode, Tamil Nadu, India", lat=11.341, lng=77.7172)

def make_session(handler, alerts=None):
    return AnalysisSession(
        "http://backend.test/",
        alert=(alerts.append if alerts is not None else print),
        transport=httpx.MockTransport(handler),
    )

def test_analyze_without_place_alerts_and_sends_nothing():
    calls, alerts = [], []
    session = make_session(lambda req: calls.append(req) or httpx.Response(200, json=LISTINGS), alerts)
    assert session.can_submit is False
    assert asyncio.run(session.find_listings()) is None
    assert alerts == [NO_PLACE_WARNING]
    assert calls == []
    assert session.error is None

def test_select_place_recenters_map_and_clears_state():
    session = make_session(lambda req: httpx.Response(200, json=LISTINGS))
    assert session.map.center == DEFAULT_CENTER
    session.error = "old error"
    session.select_place(ERODE)
    assert session.selected_address == "Erode, Tamil Nadu, India"
    assert session.map.center == GeoPoint(11.341, 77.7172)
    assert session.map.zoom == FOCUSED_ZOOM
    assert session.error is None
    assert session.can_submit is True

def test_place_without_geometry_is_ignored():
    session = make_session(lambda req: httpx.Response(200, json=LISTINGS))
    session.select_place(Place("Somewhere"))
    assert session.selected_place is None
    assert session.map.center == DEFAULT_CENTER

def test_find_listings_posts_once_and_stores_result():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=LISTINGS)

    session = make_session(handler)
    session.select_place(ERODE)
    result = asyncio.run(session.find_listings())

    assert result == ListingsResponse.model_validate(LISTINGS)
    assert session.result == result
    assert session.is_busy is False
    assert len(calls) == 1
    assert calls[0].url.path == "/api/find-rera-listings"
    assert json.loads(calls[0].content) == {"address": "Erode, Tamil Nadu, India", "lat": 11.341, "lng": 77.7172}

def test_analyze_returns_valuation_report():
    session = make_session(lambda req: httpx.Response(200, json=REPORT))
    session.select_place(ERODE)
    result = asyncio.run(session.analyze())
    assert isinstance(result, ValuationReport)
    assert result.hedonic_analysis[0].factor == "Location"

def test_busy_flag_is_set_while_request_is_in_flight():
    seen = []
    session = None

    def handler(request):
        seen.append((session.is_busy, session.can_submit))
        return httpx.Response(200, json=LISTINGS)

    session = make_session(handler)
    session.select_place(ERODE)
    asyncio.run(session.find_listings())
    assert seen == [(True, False)]
    assert session.is_busy is False

def test_server_error_collapses_to_fixed_message():
    session = make_session(lambda req: httpx.Response(500, json={"detail": "boom"}))
    session.select_place(ERODE)
    assert asyncio.run(session.find_listings()) is None
    assert session.error == FETCH_ERROR
    assert session.result is None
    assert session.is_busy is False

def test_network_failure_collapses_to_fixed_message():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    session = make_session(handler)
    session.select_place(ERODE)
    assert asyncio.run(session.analyze()) is None
    assert session.error == FETCH_ERROR
    assert session.is_busy is False

def test_malformed_body_collapses_to_fixed_message():
    session = make_session(lambda req: httpx.Response(200, text="<html>starting up</html>"))
    session.select_place(ERODE)
    assert asyncio.run(session.analyze()) is None
    assert session.error == FETCH_ERROR

def test_new_request_clears_previous_error():
    responses = iter([httpx.Response(500), httpx.Response(200, json=LISTINGS)])
    session = make_session(lambda req: next(responses))
    session.select_place(ERODE)
    asyncio.run(session.find_listings())
    assert session.error == FETCH_ERROR
    asyncio.run(session.find_listings())
    assert session.error is None
    assert session.result is not None

def test_malformed_base_url_collapses_to_fixed_message():
    session = AnalysisSession(
        "http://backend.test:notaport",
        transport=httpx.MockTransport(lambda req: httpx.Response(200, json=LISTINGS)),
    )
    session.select_place(ERODE)
    assert asyncio.run(session.find_listings()) is None
    assert session.error == FETCH_ERROR
    assert session.is_busy is False
