"""A single index on the search service.

Metadata (name, primary key, dates) is fetched on first use and memoized;
locating an index by uid performs no network activity until then.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Union

from meiliclient.documents import Documents
from meiliclient.exceptions import IndexNotFoundError, NoSuchFieldError
from meiliclient.rest import Endpoint, Resource
from meiliclient.search import Search

_FRACTION = re.compile(r"\.(\d+)")


def as_date(value: str) -> datetime:
    """Parse a service timestamp, truncating nanosecond precision to microseconds."""
    value = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _returned(response: Any) -> Any:
    return response.value()


class Index:
    def __init__(self, endpoint: Endpoint, arg: Union[Mapping[str, Any], str]) -> None:
        self._endpoint = endpoint
        if isinstance(arg, Mapping):
            self._uid = str(arg["uid"])
            self._meta: Optional[Dict[str, Any]] = dict(arg)
        else:
            self._uid = str(arg)
            self._meta = None

    @property
    def uid(self) -> str:
        """Index uid, always accessible."""
        return self._uid

    def _fetch_meta(self) -> Optional[Dict[str, Any]]:
        if self._meta is None:
            self._meta = self._endpoint.resource("indexes/{0}", [self._uid]).get().optional()
        return self._meta

    def resource(self, path: str = "") -> Resource:
        """Returns a resource below this index, e.g. ``documents``."""
        return self._endpoint.resource(("indexes/{0}/" + path).rstrip("/"), [self._uid])

    def field(self, name: str) -> Any:
        """Returns a given metadata field.

        Raises IndexNotFoundError if the index does not exist and
        NoSuchFieldError if the service did not return the field.
        """
        meta = self._fetch_meta()
        if meta is None:
            raise IndexNotFoundError(f"Index {self._uid} does not exist")
        try:
            return meta[name]
        except KeyError:
            raise NoSuchFieldError(f"Index {self._uid} has no field {name!r}") from None

    def exists(self) -> bool:
        return self._fetch_meta() is not None

    def name(self) -> str:
        return self.field("name")

    def primary_key(self) -> Optional[str]:
        return self.field("primaryKey")

    def created_at(self) -> datetime:
        return as_date(self.field("createdAt"))

    def updated_at(self) -> datetime:
        return as_date(self.field("updatedAt"))

    def search(self, query: Optional[str] = None, parameters: Optional[Mapping[str, Any]] = None) -> Search:
        """Runs a search query.

        The returned instance provides methods for iterating over all hits or
        setting offset and limit to fetch a given view into the results.
        """
        return Search(self, {**(parameters or {}), "q": query or ""})

    def documents(self) -> Documents:
        """Gets documents in this index."""
        return Documents(self)

    def document(self, id: Union[str, int]) -> Optional[Dict[str, Any]]:
        """Fetches a document, returning None if it cannot be found."""
        return self._endpoint.resource("indexes/{0}/documents/{1}", [self._uid, id]).get().optional()

    def add(self, *documents: Mapping[str, Any]) -> Dict[str, Any]:
        """Adds or replaces documents."""
        return self.resource("documents").post(list(documents)).match({202: _returned})

    def update(self, *documents: Mapping[str, Any]) -> Dict[str, Any]:
        """Adds or partially updates documents."""
        return self.resource("documents").put(list(documents)).match({202: _returned})

    def remove(self, *ids: Union[str, int]) -> Dict[str, Any]:
        """Removes documents by their ids."""
        return self.resource("documents/delete-batch").post(list(ids)).match({202: _returned})

    def clear(self) -> Dict[str, Any]:
        """Deletes all documents."""
        return self.resource("documents").delete().match({202: _returned})

    def delete(self) -> None:
        """Deletes this index."""
        self.resource().delete().match({204: True})
        self._meta = None

    def modify(self, meta: Mapping[str, Any]) -> None:
        """Modifies this index; `meta` may contain primaryKey and/or name."""
        self._meta = self.resource().put(dict(meta)).value()

    def settings(self) -> Dict[str, Any]:
        return self.resource("settings").get().value()

    def configure(self, settings: Mapping[str, Any]) -> Dict[str, Any]:
        """Updates settings for this index."""
        return self.resource("settings").post(dict(settings)).match({202: _returned})

    def reset(self) -> Dict[str, Any]:
        """Resets settings for this index."""
        return self.resource("settings").delete().match({202: _returned})

    def stats(self) -> Dict[str, Any]:
        return self.resource("stats").get().value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self._uid == other._uid

    def __hash__(self) -> int:
        return hash(("Index", self._uid))

    def __repr__(self) -> str:
        return f"Index<{self._uid}>@{self._meta!r}"
