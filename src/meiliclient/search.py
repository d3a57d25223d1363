"""Search queries against an index."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from meiliclient.iteration import DEFAULT_SLICE, Accumulator, Record, Traversal, remaining_hits
from meiliclient.models import SearchResult

if TYPE_CHECKING:
    from meiliclient.index import Index


class Search:
    """A search query, performed lazily.

    Metadata accessors and plain iteration share one memoized request, made
    on first access with the parameters set via `from_()` and `maximum()`.
    `iterator()` runs its own sequence of requests and never touches it.
    """

    def __init__(self, index: "Index", parameters: Dict[str, Any]) -> None:
        self._index = index
        self._parameters = dict(parameters)
        self._result: Optional[SearchResult] = None
        self._accumulator = Accumulator(self.iterator, index.primary_key)

    def from_(self, offset: int) -> "Search":
        """Starts from a given offset."""
        self._parameters["offset"] = offset
        return self

    def maximum(self, limit: int) -> "Search":
        """Limits to a given maximum number."""
        self._parameters["limit"] = limit
        return self

    def _perform(self, parameters: Dict[str, Any]) -> SearchResult:
        return SearchResult.model_validate(self._index.resource("search").post(parameters).value())

    def result(self) -> SearchResult:
        """Performs the search once and returns the result."""
        if self._result is None:
            self._result = self._perform(self._parameters)
        return self._result

    def query(self) -> str:
        return self.result().query

    def hits(self) -> int:
        """Returns the total number of hits."""
        return self.result().total_hits

    def offset(self) -> int:
        return self.result().offset

    def limit(self) -> int:
        return self.result().limit

    def elapsed_time(self) -> float:
        """Returns the elapsed time in seconds."""
        return self.result().processing_time_ms / 1000

    def previous(self) -> Optional[int]:
        """Returns the offset of the previous page, or None on the first."""
        result = self.result()
        if result.offset == 0:
            return None
        return max(0, result.offset - result.limit)

    def next(self) -> Optional[int]:
        """Returns the offset of the next page, or None on the last."""
        result = self.result()
        following = result.offset + result.limit
        return None if following >= result.total_hits else following

    def __iter__(self) -> Iterator[Record]:
        yield from self.result().hits

    def _page(self, offset: int, limit: int) -> SearchResult:
        return self._perform({**self._parameters, "offset": offset, "limit": limit})

    def iterator(self, size: int = DEFAULT_SLICE) -> Traversal[SearchResult]:
        """Returns an iterator over all hits, fetching `size` hits at a time."""
        return Traversal(self._page, lambda result: result.hits, remaining_hits, size)

    def to_list(self) -> List[Record]:
        """Returns all hits in a list."""
        return self._accumulator.to_list()

    def to_map(self, field: Optional[str] = None) -> Dict[Any, Record]:
        """Returns all hits keyed by a given field or, if omitted, the primary key."""
        return self._accumulator.to_map(field)
