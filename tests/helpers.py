import json

import httpx


def respond(status_code=200, body=None):
    """Build a fresh response; str bodies are sent verbatim, anything else as JSON."""
    if body is None:
        return httpx.Response(status_code)
    if isinstance(body, str):
        return httpx.Response(status_code, text=body)
    return httpx.Response(status_code, json=body)


class RecordingTransport:
    """Serves canned responses per URL and records every request."""

    def __init__(self, routes=None):
        # url -> (status_code, body) or a callable(request) -> httpx.Response
        self.routes = routes or {}
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append((str(request.url), body, request.headers))
        route = self.routes.get(str(request.url), (200, {}))
        if callable(route):
            return route(request)
        return respond(*route)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def bodies_for(self, url):
        return [body for u, body, _ in self.requests if u == url]

    def urls(self):
        return [u for u, _, _ in self.requests]
