"""Bounded top-K selection over a stream of file records."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Optional

from ..models import FileRecord


class TopKSelector:
    """Keeps the ``limit`` largest records offered so far.

    With ``limit=None`` every record is kept. Otherwise the records sit in a
    min-heap keyed on size, so an offer costs O(log K) and memory stays O(K).
    Records of equal size drain in the order they were offered.
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative or None")
        self.limit = limit
        self._heap: list[tuple[int, int, FileRecord]] = []
        self._seq = count()

    def __len__(self) -> int:
        return len(self._heap)

    def offer(self, record: FileRecord) -> bool:
        """Offer a record; return True if it was kept."""
        item = (record.size, next(self._seq), record)
        if self.limit is None:
            self._heap.append(item)
            return True
        if self.limit == 0:
            return False
        if len(self._heap) < self.limit:
            heapq.heappush(self._heap, item)
            return True
        if record.size > self._heap[0][0]:
            heapq.heapreplace(self._heap, item)
            return True
        return False

    def drain_sorted_descending(self) -> list[FileRecord]:
        """Remove and return every held record, largest first."""
        items = sorted(self._heap, key=lambda item: (-item[0], item[1]))
        self._heap = []
        return [record for _, _, record in items]
