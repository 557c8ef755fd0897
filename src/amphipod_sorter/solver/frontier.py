import heapq
from typing import Dict, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class FrontierQueue(Generic[T]):
    """Min-priority queue for payloads that have no ordering of their own.

    The heap only ever compares ``(priority, sequence)`` pairs; payloads wait
    in a side table. Equal priorities pop in push order.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int]] = []
        self._values: Dict[int, T] = {}
        self._next_index = 0

    def push(self, item: T, priority: int) -> None:
        heapq.heappush(self._heap, (priority, self._next_index))
        self._values[self._next_index] = item
        self._next_index += 1

    def pop(self) -> Tuple[T, int]:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        priority, index = heapq.heappop(self._heap)
        return self._values.pop(index), priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
