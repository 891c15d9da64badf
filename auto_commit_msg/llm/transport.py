"""HTTP Transport with Request Decorators

A request decorator takes a urllib Request and returns it with whatever
changes it needs (headers, mostly). HttpTransport runs every decorator on
every request before sending it.
"""

import urllib.request
from typing import Callable

RequestDecorator = Callable[[urllib.request.Request], urllib.request.Request]


def bearer_auth(token: str) -> RequestDecorator:
    """Add an 'Authorization: Bearer <token>' header."""
    def decorate(request: urllib.request.Request) -> urllib.request.Request:
        request.add_header("Authorization", f"Bearer {token}")
        return request
    return decorate


def json_content() -> RequestDecorator:
    """Mark the request body as JSON."""
    def decorate(request: urllib.request.Request) -> urllib.request.Request:
        request.add_header("Content-Type", "application/json")
        return request
    return decorate


class HttpTransport:
    """Sends requests through urllib after applying decorators in order."""

    def __init__(self, decorators: list[RequestDecorator] | None = None, timeout: float | None = None, opener=None):
        self.decorators = list(decorators or [])
        self.timeout = timeout
        self._opener = opener or urllib.request.urlopen

    def with_decorator(self, decorator: RequestDecorator) -> 'HttpTransport':
        """Return a copy of this transport with one more decorator."""
        return HttpTransport([*self.decorators, decorator], timeout=self.timeout, opener=self._opener)

    def prepare(self, request: urllib.request.Request) -> urllib.request.Request:
        for decorator in self.decorators:
            request = decorator(request)
        return request

    def send(self, request: urllib.request.Request):
        """Send the request. Returns the open response; caller closes it."""
        request = self.prepare(request)
        if self.timeout is None:
            return self._opener(request)
        return self._opener(request, timeout=self.timeout)
