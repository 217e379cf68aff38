"""Single-shot HTTP fetcher for upstream services."""
from typing import Optional

import requests

from ..utils import config, get_logger, log_upstream
from .results import Endpoint, Failure, Fault, Success, UpstreamResult

logger = get_logger(__name__)

UNKNOWN_ERROR = "Unknown error"


def _reject_constant(name: str):
    """NaN and Infinity are not JSON; the browser could not parse them."""
    raise ValueError(f"Invalid JSON constant: {name}")


class UpstreamFetcher:
    """
    Issue one GET per call and report the outcome as a result value.

    Non-2xx responses come back as ``Failure`` and transport or decode
    problems as ``Fault``; nothing is raised and nothing is retried.

    One session is kept per fetcher. Sessions are not guaranteed to be
    thread safe, so the local dev server runs single-threaded; on Vercel
    each invocation handles one request at a time.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        source: str = "upstream",
    ):
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.upstream_timeout
        self.source = source

    def fetch(self, endpoint: Endpoint, parse: str = "json") -> UpstreamResult:
        """
        Fetch an endpoint.

        Args:
            endpoint: URL, headers and query params
            parse: "json" to decode the body, "text" to keep it raw

        Returns:
            Success, Failure or Fault
        """
        logger.debug(f"Fetching {endpoint.url}")

        try:
            response = self.session.get(
                endpoint.url,
                headers=endpoint.headers,
                params=endpoint.params or None,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log_upstream(self.source, endpoint.url, "fault")
            logger.error(f"{self.source} request failed: {e}")
            return Fault(str(e) or UNKNOWN_ERROR)

        log_upstream(self.source, endpoint.url, str(response.status_code))

        if not response.ok:
            logger.warning(f"{self.source} returned {response.status_code}")
            return Failure(status=response.status_code, body=response.text)

        if parse == "text":
            return Success(status=response.status_code, body=response.text)

        try:
            body = response.json(parse_constant=_reject_constant)
        except ValueError as e:
            logger.error(f"{self.source} returned malformed JSON: {e}")
            return Fault(str(e) or UNKNOWN_ERROR)

        return Success(status=response.status_code, body=body)
