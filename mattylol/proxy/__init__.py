from .errors import InvalidRequest, MethodNotAllowed, ProxyError, Unconfigured
from .feeds import FeedItem, first_item, split_subreddit
from .fetcher import UpstreamFetcher
from .results import (
    CachePolicy,
    Endpoint,
    Failure,
    Fault,
    ProxyRequest,
    ProxyResponse,
    Success,
    UpstreamResult,
)
from .routes import FALLBACK_CACHE, ProxyRoute

__all__ = [
    "InvalidRequest",
    "MethodNotAllowed",
    "ProxyError",
    "Unconfigured",
    "FeedItem",
    "first_item",
    "split_subreddit",
    "UpstreamFetcher",
    "CachePolicy",
    "Endpoint",
    "Failure",
    "Fault",
    "ProxyRequest",
    "ProxyResponse",
    "Success",
    "UpstreamResult",
    "FALLBACK_CACHE",
    "ProxyRoute",
]
