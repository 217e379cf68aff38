"""Base route implementing the request lifecycle shared by every proxy."""
from typing import Any, Optional

from ..utils import config as default_config, get_logger
from .errors import InvalidRequest, MethodNotAllowed, Unconfigured
from .fetcher import UNKNOWN_ERROR, UpstreamFetcher
from .results import (
    CachePolicy,
    Endpoint,
    Failure,
    Fault,
    ProxyRequest,
    ProxyResponse,
    Success,
)

FALLBACK_CACHE = CachePolicy(60, 600)


class ProxyRoute:
    """
    One proxied endpoint.

    Lifecycle per request: method check, config check, params check, one
    upstream call, then either normalize or translate the failure. Every
    path returns exactly one ProxyResponse.

    Subclasses implement ``resolve_config``, ``endpoint`` and ``normalize``.
    Routes with ``optional = True`` degrade to a 200 "not configured"
    envelope when their settings are missing; required routes answer 500.
    """

    name: str = "proxy"
    path: str = "/"
    optional: bool = False
    parse: str = "json"
    success_cache: Optional[CachePolicy] = None
    fallback_cache: CachePolicy = FALLBACK_CACHE

    def __init__(self, fetcher: Optional[UpstreamFetcher] = None, settings=None):
        self.settings = settings or default_config
        self.fetcher = fetcher or UpstreamFetcher(source=self.name)
        self.logger = get_logger(f"route.{self.name}")

    # Hooks

    def resolve_config(self) -> Any:
        """Return route settings or raise Unconfigured."""
        return None

    def endpoint(self, settings: Any, request: ProxyRequest) -> Endpoint:
        raise NotImplementedError

    def normalize(self, settings: Any, body: Any) -> ProxyResponse:
        raise NotImplementedError

    # Lifecycle

    def handle(self, request: ProxyRequest) -> ProxyResponse:
        if not request.is_get:
            return self.method_not_allowed(MethodNotAllowed(request.method))

        try:
            settings = self.resolve_config()
        except Unconfigured as e:
            return self.unconfigured(e)

        try:
            endpoint = self.endpoint(settings, request)
        except InvalidRequest as e:
            self.logger.warning(f"Rejected request: {e.message}")
            return ProxyResponse(e.status, {"error": e.message})

        return self.call(settings, endpoint)

    def call(self, settings: Any, endpoint: Endpoint) -> ProxyResponse:
        result = self.fetcher.fetch(endpoint, parse=self.parse)

        if isinstance(result, Failure):
            return self.upstream_error(result)
        if isinstance(result, Fault):
            return self.fault(result.message)

        try:
            return self.normalize(settings, result.body).with_cache(self.success_cache)
        except Exception as e:
            self.logger.exception(f"Could not normalize {self.name} response")
            return self.fault(str(e) or UNKNOWN_ERROR)

    # Failure translation

    def method_not_allowed(self, error: MethodNotAllowed) -> ProxyResponse:
        self.logger.info(f"Method not allowed: {error.method}")
        return ProxyResponse(error.status, {"error": error.message})

    def unconfigured(self, error: Unconfigured) -> ProxyResponse:
        if self.optional:
            self.logger.info(f"{error.source}: not configured ({error.variable} unset)")
            return ProxyResponse(
                200, {"ok": False, "message": f"{error.source}: not configured"}
            ).with_cache(self.fallback_cache)

        self.logger.error(f"{self.name}: {error.message}")
        return ProxyResponse(error.status, {"error": error.message})

    def upstream_error(self, failure: Failure) -> ProxyResponse:
        body = {"error": "Upstream error", "status": failure.status, "body": failure.body}
        if self.optional:
            return ProxyResponse(failure.status, {"ok": False, **body}).with_cache(
                self.fallback_cache
            )
        return ProxyResponse(failure.status, body)

    def fault(self, message: str) -> ProxyResponse:
        message = message or UNKNOWN_ERROR
        if self.optional:
            return ProxyResponse(500, {"ok": False, "error": message}).with_cache(
                self.fallback_cache
            )
        return ProxyResponse(500, {"error": message})
