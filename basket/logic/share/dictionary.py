"""Dictionary compactor: deduplicates repeated strings into an index-addressed table."""
from typing import Dict, List


class DictionaryCompactor:
    """Builds the string table for one encode call.

    Index 0 is always the empty string. Each new value is appended and keeps
    the index it was first given; nothing is ever removed.
    """

    def __init__(self):
        self.entries: List[str] = [""]
        self._index_by_value: Dict[str, int] = {"": 0}

    def index_of(self, value: str) -> int:
        existing = self._index_by_value.get(value)
        if existing is not None:
            return existing
        index = len(self.entries)
        self.entries.append(value)
        self._index_by_value[value] = index
        return index

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["DictionaryCompactor"]
