"""Minimal REST layer for talking to the search service.

Uses httpx with a short-lived client per request. Resources are addressed by
path templates with positional placeholders, e.g. ``indexes/{0}/documents``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, Mapping, Optional
from urllib.parse import quote

import httpx

from meiliclient.exceptions import UnexpectedStatus

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


class Response:
    """A received response with status-dependent accessors."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def content_type(self) -> Optional[str]:
        return self._response.headers.get("Content-Type")

    @property
    def body(self) -> str:
        return self._response.text

    def _unexpected(self) -> UnexpectedStatus:
        request = self._response.request
        logger.warning("Unexpected status %d for %s %s", self.status, request.method, request.url)
        return UnexpectedStatus(self.status, self.body, method=request.method, url=str(request.url))

    def value(self) -> Any:
        """Return the parsed JSON body, raising for any non-2xx status."""
        if not self._response.is_success:
            raise self._unexpected()
        if not self._response.content:
            return None
        return self._response.json()

    def optional(self) -> Any:
        """Like `value()`, but maps a 404 to None."""
        if self.status == 404:
            return None
        return self.value()

    def match(self, handlers: Mapping[int, Any]) -> Any:
        """Dispatch on the exact status code.

        A handler is either a callable receiving this response or a plain value
        which is returned as is.
        """
        if self.status not in handlers:
            raise self._unexpected()
        handler = handlers[self.status]
        return handler(self) if callable(handler) else handler


class Resource:
    """A single addressable path on an endpoint."""

    def __init__(self, endpoint: "Endpoint", path: str) -> None:
        self._endpoint = endpoint
        self.path = path

    def get(self, params: Optional[Mapping[str, Any]] = None) -> Response:
        return self._endpoint.send("GET", self.path, params=dict(params or {}))

    def post(self, payload: Any) -> Response:
        return self._endpoint.send("POST", self.path, json=payload)

    def put(self, payload: Any) -> Response:
        return self._endpoint.send("PUT", self.path, json=payload)

    def delete(self) -> Response:
        return self._endpoint.send("DELETE", self.path)


class Endpoint:
    """Base URL plus static headers, e.g. the API key, used for every request."""

    def __init__(
        self,
        base_url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.transport = transport
        self._headers: Dict[str, str] = dict(headers or {})

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def with_headers(self, headers: Mapping[str, str]) -> "Endpoint":
        self._headers.update(headers)
        return self

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            verify=self.verify_ssl,
            transport=self.transport,
            headers={"Accept": "application/json", **self._headers},
        )

    def resource(self, path: str, segments: Iterable[Any] = ()) -> Resource:
        """Return a resource for a path template, substituting `{N}` placeholders."""
        values = [quote(str(segment), safe="") for segment in segments]

        def substitute(match: "re.Match[str]") -> str:
            return values[int(match.group(1))]

        return Resource(self, "/" + _PLACEHOLDER.sub(substitute, path).lstrip("/"))

    def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Response:
        kwargs: Dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if json is not None:
            kwargs["json"] = json
        with self._client() as client:
            resp = client.request(method, path, **kwargs)
        logger.debug("%s %s -> %d", method, resp.request.url, resp.status_code)
        return Response(resp)

    def __repr__(self) -> str:
        return f"Endpoint<{self.base_url}>"

