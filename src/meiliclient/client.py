"""Search service client.

Entry point wrapping the REST endpoint: index lookup and creation plus the
service-wide stats, version and health routes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import httpx

from meiliclient.config import Settings, load_settings
from meiliclient.exceptions import ConfigError
from meiliclient.index import Index
from meiliclient.indexes import Indexes
from meiliclient.rest import Endpoint

logger = logging.getLogger(__name__)


class MeiliSearch:
    """Client for a MeiliSearch service.

    Parameters
    ----------
    uri:
        Service URI in the form ``http[s]://[api-key@]host[:port]``. If the
        port is omitted, the scheme's default port is used.
    timeout:
        Request timeout in seconds.
    verify_ssl:
        Whether to verify SSL certificates.
    transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    API_KEY = "X-Meili-API-Key"

    def __init__(
        self,
        uri: str,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        parts = urlsplit(str(uri))
        try:
            port = parts.port
        except ValueError as e:
            raise ConfigError(f"Invalid port in {uri!r}") from e
        if not parts.scheme or not parts.hostname:
            raise ConfigError("URI must consist at least of scheme and host")

        # IPv6 literals lose their brackets in hostname
        host = f"[{parts.hostname}]" if ":" in parts.hostname else parts.hostname
        base_url = f"{parts.scheme}://{host}" + (f":{port}" if port else "")
        self._endpoint = Endpoint(base_url, timeout=timeout, verify_ssl=verify_ssl, transport=transport)
        if parts.username:
            self._endpoint.with_headers({self.API_KEY: parts.username})
        logger.debug("Using search service at %s", base_url)

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, *, transport: Optional[httpx.BaseTransport] = None
    ) -> "MeiliSearch":
        """Create a client from configuration, loading it from the environment if omitted."""
        cfg = (settings or load_settings()).client
        return cls(cfg.uri, timeout=cfg.timeout, verify_ssl=cfg.verify_ssl, transport=transport)

    def endpoint(self) -> Endpoint:
        """Returns the endpoint, usable for executing raw REST requests."""
        return self._endpoint

    def locate(self, uid: str) -> Index:
        """Locates an index by uid without performing any requests.

        Always returns an index; use its `exists()` method to check whether it
        exists. Indexes are created implicitly when adding documents or settings.
        """
        return Index(self._endpoint, uid)

    def index(self, uid: str) -> Index:
        """Returns an index by uid, raising UnexpectedStatus if it does not exist."""
        return Index(self._endpoint, self._endpoint.resource("indexes/{0}", [uid]).get().value())

    def create(self, uid: str, primary_key: Optional[str] = None) -> Index:
        """Creates an index, raising UnexpectedStatus if it already exists."""
        meta = (
            self._endpoint.resource("indexes")
            .post({"uid": uid, "primaryKey": primary_key})
            .match({201: lambda r: r.value()})
        )
        return Index(self._endpoint, meta)

    def indexes(self) -> Indexes:
        return Indexes(self._endpoint, self._endpoint.resource("indexes").get().value())

    def stats(self) -> Dict[str, Any]:
        """Returns stats for all indexes."""
        return self._endpoint.resource("stats").get().value()

    def version(self) -> Dict[str, Any]:
        return self._endpoint.resource("version").get().value()

    def health(self) -> Dict[str, Any]:
        return self._endpoint.resource("health").get().value()
