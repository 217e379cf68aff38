"""Jupiter price and portfolio proxies."""
from typing import Any

from ..proxy import CachePolicy, Endpoint, InvalidRequest, ProxyRequest, ProxyResponse, ProxyRoute, Unconfigured

JUPITER_API = "https://api.jup.ag"
API_KEY_VARIABLE = "JUP_PORTFOLIO_API_KEY"


class JupiterRoute(ProxyRoute):
    """Required integration: passes Jupiter JSON through unchanged."""

    optional = False
    success_cache = CachePolicy(30, 300)

    def resolve_config(self) -> str:
        api_key = self.settings.jupiter_api_key
        if not api_key:
            raise Unconfigured(self.name, API_KEY_VARIABLE)
        return api_key

    def headers(self, api_key: str) -> dict:
        return {"x-api-key": api_key}

    def normalize(self, settings: Any, body: Any) -> ProxyResponse:
        return ProxyResponse(200, body)


class PriceRoute(JupiterRoute):
    """GET /api/jupiter-price?ids=<mint>[,<mint>...]"""

    name = "jupiter-price"
    path = "/api/jupiter-price"

    def endpoint(self, api_key: str, request: ProxyRequest) -> Endpoint:
        ids = request.param("ids")
        if ids is None:
            raise InvalidRequest("Missing or invalid 'ids' parameter")

        return Endpoint(
            url=f"{JUPITER_API}/price/v3",
            headers=self.headers(api_key),
            params={"ids": ids},
        )


class PositionsRoute(JupiterRoute):
    """GET /api/jupiter-positions for the configured wallet."""

    name = "jupiter-positions"
    path = "/api/jupiter-positions"

    def endpoint(self, api_key: str, request: ProxyRequest) -> Endpoint:
        wallet = self.settings.wallet_address
        self.logger.debug(f"Fetching positions for {wallet}")
        return Endpoint(
            url=f"{JUPITER_API}/portfolio/v1/positions/{wallet}",
            headers=self.headers(api_key),
        )

    def normalize(self, settings: Any, body: Any) -> ProxyResponse:
        if isinstance(body, dict):
            self.logger.info(f"Positions payload keys: {list(body.keys())}")
        return super().normalize(settings, body)
