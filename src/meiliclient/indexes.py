from __future__ import annotations

from typing import Any, Dict, Iterator, List

from meiliclient.index import Index
from meiliclient.rest import Endpoint


class Indexes:
    """The indexes returned by listing all indexes."""

    def __init__(self, endpoint: Endpoint, result: Any) -> None:
        self._endpoint = endpoint
        # Newer service versions wrap the list in a paginated object
        if isinstance(result, dict):
            result = result.get("results", [])
        self._result: List[Dict[str, Any]] = list(result or [])

    def empty(self) -> bool:
        return not self._result

    def all(self) -> Dict[str, Index]:
        return {meta["uid"]: Index(self._endpoint, meta) for meta in self._result}

    def __iter__(self) -> Iterator[Index]:
        for meta in self._result:
            yield Index(self._endpoint, meta)

    def __len__(self) -> int:
        return len(self._result)
