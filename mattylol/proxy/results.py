"""Per-request value types for the upstream proxy."""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class CachePolicy:
    """CDN caching hint rendered into a Cache-Control header."""
    s_maxage: int
    stale_while_revalidate: int

    @property
    def header(self) -> str:
        return f"s-maxage={self.s_maxage}, stale-while-revalidate={self.stale_while_revalidate}"


@dataclass
class ProxyRequest:
    """Inbound request as seen by a route."""
    method: str = "GET"
    path: str = "/"
    query: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_get(self) -> bool:
        # Platforms that omit the method are treated as GET
        return not self.method or self.method.upper() == "GET"

    def param(self, name: str) -> Optional[str]:
        """Return a query parameter given exactly once with a non-empty value."""
        values = self.query.get(name) or []
        if len(values) != 1 or not values[0]:
            return None
        return values[0]


@dataclass(frozen=True)
class Endpoint:
    """A fully formed outbound request."""
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Success:
    status: int
    body: Any


@dataclass(frozen=True)
class Failure:
    """Upstream answered with a non-2xx status."""
    status: int
    body: str


@dataclass(frozen=True)
class Fault:
    """Transport or parse fault; no usable upstream status."""
    message: str


UpstreamResult = Union[Success, Failure, Fault]


@dataclass
class ProxyResponse:
    """Outbound response emitted exactly once per request."""
    status: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)

    def with_cache(self, policy: Optional[CachePolicy]) -> "ProxyResponse":
        if policy is not None:
            self.headers["Cache-Control"] = policy.header
        return self

    def payload(self) -> bytes:
        return json.dumps(self.body, ensure_ascii=False).encode("utf-8")
