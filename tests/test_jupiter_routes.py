import pytest

from mattylol.proxy import Failure, Fault, ProxyRequest
from mattylol.sources import PositionsRoute, PriceRoute
from mattylol.utils.config import DEFAULT_WALLET
from tests.conftest import FakeFetcher, ok

PRICES = {"So11111111111111111111111111111111111111112": {"usdPrice": 151.2}}


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("JUP_PORTFOLIO_API_KEY", "secret")


def get(query=None):
    return ProxyRequest(method="GET", query=query or {})


@pytest.mark.parametrize("route_cls", [PriceRoute, PositionsRoute])
@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH", "HEAD"])
def test_non_get_is_rejected_before_upstream(api_key, route_cls, method):
    fetcher = FakeFetcher()
    response = route_cls(fetcher=fetcher).handle(ProxyRequest(method=method, query={"ids": ["x"]}))

    assert response.status == 405
    assert response.body == {"error": "Method not allowed"}
    assert fetcher.calls == []


def test_missing_method_is_treated_as_get(api_key):
    fetcher = FakeFetcher(ok(PRICES))
    response = PriceRoute(fetcher=fetcher).handle(ProxyRequest(method="", query={"ids": ["SOL"]}))
    assert response.status == 200


def test_price_passes_upstream_json_through(api_key):
    fetcher = FakeFetcher(ok(PRICES))
    response = PriceRoute(fetcher=fetcher).handle(get({"ids": ["SOL,JUP"]}))

    assert response.status == 200
    assert response.body == PRICES
    assert response.headers["Cache-Control"] == "s-maxage=30, stale-while-revalidate=300"

    endpoint, parse = fetcher.calls[0]
    assert endpoint.url == "https://api.jup.ag/price/v3"
    assert endpoint.params == {"ids": "SOL,JUP"}
    assert endpoint.headers == {"x-api-key": "secret"}
    assert parse == "json"


@pytest.mark.parametrize("query", [{}, {"ids": [""]}, {"ids": ["a", "b"]}])
def test_price_requires_single_ids(api_key, query):
    fetcher = FakeFetcher()
    response = PriceRoute(fetcher=fetcher).handle(get(query))

    assert response.status == 400
    assert response.body == {"error": "Missing or invalid 'ids' parameter"}
    assert fetcher.calls == []


def test_price_without_api_key_is_server_error():
    fetcher = FakeFetcher()
    response = PriceRoute(fetcher=fetcher).handle(get({"ids": ["SOL"]}))

    assert response.status == 500
    assert response.body == {"error": "Missing JUP_PORTFOLIO_API_KEY"}
    assert "Cache-Control" not in response.headers
    assert fetcher.calls == []


def test_price_checks_api_key_before_ids():
    response = PriceRoute(fetcher=FakeFetcher()).handle(get())
    assert response.status == 500


def test_positions_without_api_key_is_server_error():
    response = PositionsRoute(fetcher=FakeFetcher()).handle(get())
    assert response.status == 500
    assert response.body == {"error": "Missing JUP_PORTFOLIO_API_KEY"}


def test_positions_upstream_error_keeps_status(api_key):
    fetcher = FakeFetcher(Failure(status=503, body="maintenance"))
    response = PositionsRoute(fetcher=fetcher).handle(get())

    assert response.status == 503
    assert response.body == {"error": "Upstream error", "status": 503, "body": "maintenance"}
    assert "Cache-Control" not in response.headers


def test_positions_uses_default_wallet(api_key):
    fetcher = FakeFetcher(ok({"elements": []}))
    response = PositionsRoute(fetcher=fetcher).handle(get())

    assert response.status == 200
    assert response.body == {"elements": []}
    endpoint, _ = fetcher.calls[0]
    assert endpoint.url == f"https://api.jup.ag/portfolio/v1/positions/{DEFAULT_WALLET}"


def test_positions_wallet_from_env(api_key, monkeypatch):
    monkeypatch.setenv("JUP_WALLET_ADDRESS", "Wallet111")
    fetcher = FakeFetcher(ok({}))
    PositionsRoute(fetcher=fetcher).handle(get())
    assert fetcher.calls[0][0].url.endswith("/positions/Wallet111")


def test_transport_fault_is_500(api_key):
    response = PositionsRoute(fetcher=FakeFetcher(Fault("connection reset"))).handle(get())
    assert response.status == 500
    assert response.body == {"error": "connection reset"}


def test_fault_without_message_falls_back(api_key):
    response = PositionsRoute(fetcher=FakeFetcher(Fault(""))).handle(get())
    assert response.body == {"error": "Unknown error"}


def test_same_request_twice_is_byte_identical(api_key):
    route = PriceRoute(fetcher=FakeFetcher(ok(PRICES), ok(PRICES)))
    first = route.handle(get({"ids": ["SOL"]}))
    second = route.handle(get({"ids": ["SOL"]}))
    assert first.payload() == second.payload()
    assert first.headers == second.headers
