"""Request-level errors raised by route pre-checks.

Upstream failures are not exceptions; see ``results.Failure`` and
``results.Fault``.
"""


class ProxyError(Exception):
    """Base class for errors caught at the route boundary."""

    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MethodNotAllowed(ProxyError):
    status = 405

    def __init__(self, method: str):
        super().__init__("Method not allowed")
        self.method = method


class Unconfigured(ProxyError):
    """A required environment value is missing."""

    status = 500

    def __init__(self, source: str, variable: str):
        super().__init__(f"Missing {variable}")
        self.source = source
        self.variable = variable


class InvalidRequest(ProxyError):
    status = 400
