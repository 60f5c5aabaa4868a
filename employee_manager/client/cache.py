import json
from typing import Any, Callable, Hashable


def query_key(procedure: str, payload: Any = None) -> tuple[str, Hashable]:
    return procedure, json.dumps(payload, sort_keys=True)


class QueryCache:
    """Results of query procedures, keyed by procedure name and input."""

    def __init__(self):
        self._entries: dict[tuple[str, Hashable], Any] = {}

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key, default=None):
        return self._entries.get(key, default)

    def fetch(self, key, loader: Callable[[], Any]) -> Any:
        if key not in self._entries:
            self._entries[key] = loader()
        return self._entries[key]

    def invalidate(self, prefix: str = "") -> int:
        """Drop entries whose procedure starts with ``prefix``; returns how many."""
        stale = [k for k in self._entries if k[0].startswith(prefix)]
        for k in stale:
            del self._entries[k]
        return len(stale)
