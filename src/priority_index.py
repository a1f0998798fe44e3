import heapq
from typing import Iterable, List, Tuple

from models import CaseRecord

PriorityEntry = Tuple[int, int]


class PriorityIndex:
    """
    Min-heap of (priority, case_id) pairs.

    The heap is never patched in place: callers rebuild it from the full
    record set after each change, so it cannot drift from the store.
    """

    def __init__(self) -> None:
        self._heap: List[PriorityEntry] = []

    def __len__(self) -> int:
        return len(self._heap)

    def rebuild(self, records: Iterable[CaseRecord]) -> None:
        heap = [(r.priority, r.id) for r in records]
        heapq.heapify(heap)
        self._heap = heap

    def snapshot_ordered(self) -> List[PriorityEntry]:
        temp = list(self._heap)
        ordered = []
        while temp:
            ordered.append(heapq.heappop(temp))
        return ordered
