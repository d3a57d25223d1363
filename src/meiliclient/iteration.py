"""Bounded-slice traversal shared by document listing and search.

A traversal turns an offset/limit paged API into a lazy sequence of records.
It is parameterized by how to fetch a page, how to extract the records from
it, and how to compute the offset of the following page. Every call to
``iter()`` starts over at offset 0 with its own cursor; pages are fetched one
at a time, only when the consumer asks for more records.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from meiliclient.exceptions import MeiliError, NoSuchFieldError

logger = logging.getLogger(__name__)

DEFAULT_SLICE = 20

P = TypeVar("P")
Record = Dict[str, Any]


class Traversal(Generic[P]):
    """Lazy, restartable iteration over a paged backend.

    Parameters
    ----------
    fetch:
        Called with ``(offset, limit)``, returns one page.
    items:
        Extracts the records of a page, in backend order.
    following:
        Called with ``(page, offset, limit)`` after the page's records were
        yielded. Returns the next offset, or None to stop.
    size:
        Page size requested per fetch, at least 1.
    """

    def __init__(
        self,
        fetch: Callable[[int, int], P],
        items: Callable[[P], Iterable[Record]],
        following: Callable[[P, int, int], Optional[int]],
        size: int = DEFAULT_SLICE,
    ) -> None:
        if size < 1:
            raise ValueError(f"Slice size must be at least 1, have {size}")
        self._fetch = fetch
        self._items = items
        self._following = following
        self.size = size

    def __iter__(self) -> Iterator[Record]:
        offset: Optional[int] = 0
        while offset is not None:
            logger.debug("Fetching page offset=%d limit=%d", offset, self.size)
            page = self._fetch(offset, self.size)
            yield from self._items(page)
            offset = self._following(page, offset, self.size)


def short_page(page: List[Record], offset: int, limit: int) -> Optional[int]:
    """Continue while pages come back full; a short (or empty) page is the last."""
    return offset + limit if len(page) == limit else None


def remaining_hits(result: Any, offset: int, limit: int) -> Optional[int]:
    """Continue while hits remain, trusting the offset and limit the service echoed."""
    following = result.offset + result.limit
    if following >= result.total_hits:
        return None
    if following <= result.offset:
        raise MeiliError(
            f"Search page at offset {result.offset} does not advance (limit {result.limit}, {result.total_hits} hits)"
        )
    return following


class Accumulator:
    """Collects a restartable record source into a list or a map.

    `source` must return a fresh iterable on each call, `primary_key` resolves
    the default field used by `to_map()`.
    """

    def __init__(
        self,
        source: Callable[[], Iterable[Record]],
        primary_key: Callable[[], Optional[str]],
    ) -> None:
        self._source = source
        self._primary_key = primary_key

    def to_list(self) -> List[Record]:
        return list(self._source())

    def to_map(self, field: Optional[str] = None) -> Dict[Any, Record]:
        # Later records overwrite earlier ones sharing the same key
        if field is None:
            field = self._primary_key()
            if field is None:
                raise NoSuchFieldError("No field given and no primary key defined")
        mapped: Dict[Any, Record] = {}
        for record in self._source():
            if field not in record:
                raise NoSuchFieldError(f"Record has no field {field!r}")
            mapped[record[field]] = record
        return mapped
