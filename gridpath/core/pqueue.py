# gridpath/core/pqueue.py
#!/usr/bin/env python3
"""
Binary min-heap keyed by a numeric priority.

No uniqueness: the same payload may sit in the heap several times with
different priorities. Searches skip the stale copies when they pop a cell
that is already visited.
"""

from typing import Any, List, Optional, Tuple

Entry = Tuple[Any, float]  # (payload, priority)


class PriorityQueue:
    def __init__(self):
        self.values: List[Entry] = []

    def __len__(self) -> int:
        return len(self.values)

    def is_empty(self) -> bool:
        return not self.values

    def peek(self) -> Optional[Entry]:
        return self.values[0] if self.values else None

    def enqueue(self, payload: Any, priority: float) -> None:
        self.values.append((payload, priority))
        self._sift_up()

    def dequeue(self) -> Optional[Entry]:
        """Remove and return the minimum-priority entry, None when empty."""
        if not self.values:
            return None
        top = self.values[0]
        last = self.values.pop()
        if self.values:
            self.values[0] = last
            self._sift_down()
        return top

    def _sift_up(self) -> None:
        idx = len(self.values) - 1
        entry = self.values[idx]
        while idx > 0:
            parent_idx = (idx - 1) // 2
            parent = self.values[parent_idx]
            if entry[1] >= parent[1]:
                break
            self.values[parent_idx] = entry
            self.values[idx] = parent
            idx = parent_idx

    def _sift_down(self) -> None:
        idx = 0
        length = len(self.values)
        entry = self.values[0]
        while True:
            left_idx = 2 * idx + 1
            right_idx = 2 * idx + 2
            swap = None

            if left_idx < length and self.values[left_idx][1] < entry[1]:
                swap = left_idx
            if right_idx < length:
                right = self.values[right_idx]
                if (swap is None and right[1] < entry[1]) or \
                   (swap is not None and right[1] < self.values[left_idx][1]):
                    swap = right_idx

            if swap is None:
                break
            self.values[idx] = self.values[swap]
            self.values[swap] = entry
            idx = swap
