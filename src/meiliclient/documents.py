"""Documents stored in an index."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from meiliclient.iteration import DEFAULT_SLICE, Accumulator, Record, Traversal, short_page

if TYPE_CHECKING:
    from meiliclient.index import Index


class Documents:
    """A view into the documents of an index.

    Iterating yields a single page selected by `from_()` and `maximum()`,
    starting at offset 0 with the service's default limit. Use `iterator()`
    to walk over all documents.
    """

    def __init__(self, index: "Index") -> None:
        self._index = index
        self._parameters: Dict[str, Any] = {}
        self._accumulator = Accumulator(self.iterator, index.primary_key)

    def from_(self, offset: int) -> "Documents":
        """Starts from a given offset."""
        self._parameters["offset"] = offset
        return self

    def maximum(self, limit: int) -> "Documents":
        """Limits to a given maximum number."""
        self._parameters["limit"] = limit
        return self

    def __iter__(self) -> Iterator[Record]:
        yield from self._index.resource("documents").get(self._parameters).value()

    def _page(self, offset: int, limit: int) -> List[Record]:
        return self._index.resource("documents").get({"offset": offset, "limit": limit}).value()

    def iterator(self, size: int = DEFAULT_SLICE) -> Traversal[List[Record]]:
        """Returns an iterator over all documents, fetching `size` documents at a time."""
        return Traversal(self._page, lambda page: page, short_page, size)

    def to_list(self) -> List[Record]:
        """Returns all documents in a list."""
        return self._accumulator.to_list()

    def to_map(self, field: Optional[str] = None) -> Dict[Any, Record]:
        """Returns all documents keyed by a given field or, if omitted, the primary key."""
        return self._accumulator.to_map(field)
