import json
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from meiliclient import MeiliSearch

Handler = Callable[[Dict[str, str], Any], httpx.Response]


class Router:
    """Routes requests like ``GET /indexes/{uid}`` to handlers.

    Handlers receive the query and path parameters plus the decoded JSON body
    and return an httpx.Response. Every request is recorded.
    """

    def __init__(self, routes: Dict[str, Handler]) -> None:
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def _pattern(self, route: str) -> "re.Pattern[str]":
        return re.compile(re.sub(r"\\\{([a-z]+)\\\}", r"(?P<\1>[^/]+)", re.escape(route)))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = f"{request.method} {request.url.path}"
        params = dict(request.url.params)
        body = json.loads(request.content) if request.content else None

        if route in self.routes:
            return self.routes[route](params, body)
        for candidate, handler in self.routes.items():
            match = self._pattern(candidate).fullmatch(route)
            if match:
                return handler({**params, **match.groupdict()}, body)
        return httpx.Response(404, text=f"No such route {route}")

    def count(self, route: str) -> int:
        return sum(1 for r in self.requests if f"{r.method} {r.url.path}" == route)

    def bodies(self, route: str) -> List[Any]:
        return [
            json.loads(r.content) if r.content else None
            for r in self.requests
            if f"{r.method} {r.url.path}" == route
        ]


@pytest.fixture
def connect() -> Callable[..., Tuple[MeiliSearch, Router]]:
    """Returns a factory creating a client wired to a Router over the given routes."""

    def _connect(routes: Dict[str, Handler], uri: Optional[str] = None) -> Tuple[MeiliSearch, Router]:
        router = Router(routes)
        search = MeiliSearch(uri or "http://localhost:7700", transport=httpx.MockTransport(router))
        return search, router

    return _connect
