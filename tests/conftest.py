"""Shared helpers: an httpx client wired to an in-process fake web server."""

import httpx
import pytest


class FakeWeb:
    """Routes (method, url) pairs to canned responses or exceptions and records calls."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, url, response=None, exc=None):
        self.routes[(method, url)] = (response, exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append((request.method, url))
        response, exc = self.routes.get((request.method, url), (None, None))
        if exc is not None:
            raise exc
        if response is None:
            return httpx.Response(404)
        return response

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler), follow_redirects=True)

    def methods_for(self, url):
        return [m for m, u in self.calls if u == url]


@pytest.fixture
def web():
    return FakeWeb()
