"""Bounded queue, stack, min-priority queue and disjoint-set structures."""

from __future__ import annotations

from collections import deque


class Queue:
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[int] = deque()

    def push(self, item: int) -> None:
        """Add ``item`` at the back; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("Queue Full")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Queue Empty")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("Queue Empty")
        return self._items[0]

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    def push(self, item: int) -> None:
        """Put ``item`` on top; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("Stack Full")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack Empty")
        return self._items.pop()

    def top(self) -> int:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("Stack Empty")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


class PriorityQueue:
    """A bounded binary min-heap of items keyed by integer priority."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        # Each entry is [priority, item].
        self._heap: list[list[int]] = []

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index][0] < heap[parent][0]:
                heap[index], heap[parent] = heap[parent], heap[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < size and heap[left][0] < heap[smallest][0]:
                smallest = left
            if right < size and heap[right][0] < heap[smallest][0]:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def insert(self, item: int, priority: int) -> None:
        """Add ``item`` with ``priority``; raise OverflowError when full."""
        if len(self._heap) == self._capacity:
            raise OverflowError("PriorityQueue Full")
        self._heap.append([priority, item])
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> int:
        """Remove and return the item with the lowest priority."""
        if not self._heap:
            raise IndexError("PriorityQueue Empty")
        min_item = self._heap[0][1]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return min_item

    def decrease_priority(self, item: int, new_priority: int) -> None:
        """Lower the priority of the first entry for ``item`` it would reduce."""
        for index, entry in enumerate(self._heap):
            if entry[1] == item and new_priority < entry[0]:
                entry[0] = new_priority
                self._sift_up(index)
                break

    def __len__(self) -> int:
        return len(self._heap)


class UnionFind:
    """Disjoint sets over ``0..n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1