"""Breadth-first search over undirected graphs held as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any


class Queue:
    """A FIFO queue."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the back of the queue."""
        self._items.append(element)

    def dequeue(self) -> Any:
        """Remove and return the front element, or None when the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return whether the queue holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class Graph:
    """An undirected graph stored as an adjacency map."""

    vertices: int = 0
    adj_list: dict[int, list[int]] = field(default_factory=dict)

    def add_edge(self, v1: int, v2: int) -> None:
        """Add an undirected edge between ``v1`` and ``v2``."""
        self.adj_list.setdefault(v1, []).append(v2)
        self.adj_list.setdefault(v2, []).append(v1)

    def _neighbors(self, vertex: int) -> list[int]:
        return self.adj_list.get(vertex, [])

    def simple_bfs(self, start: int) -> list[int]:
        """Return vertices in the order BFS from ``start`` visits them."""
        visited = {start}
        order: list[int] = []
        queue = Queue([start])
        while not queue.is_empty():
            vertex = queue.dequeue()
            order.append(vertex)
            for neighbor in self._neighbors(vertex):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.enqueue(neighbor)
        return order

    def bfs_with_distance(self, start: int) -> dict[int, int]:
        """Return the edge distance from ``start`` to every reachable vertex."""
        return self.bfs_multi_source([start])

    def bfs_shortest_path(self, start: int, end: int) -> list[int] | None:
        """Return a shortest path from ``start`` to ``end``, or None if unreachable."""
        if start == end:
            return [start]
        visited = {start}
        parent: dict[int, int] = {}
        queue = Queue([start])
        while not queue.is_empty():
            vertex = queue.dequeue()
            for neighbor in self._neighbors(vertex):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                parent[neighbor] = vertex
                if neighbor == end:
                    path = [end]
                    while path[-1] != start:
                        path.append(parent[path[-1]])
                    path.reverse()
                    return path
                queue.enqueue(neighbor)
        return None

    def bfs_level_order(self, start: int) -> list[list[int]]:
        """Return the vertices reachable from ``start`` grouped by distance."""
        visited = {start}
        levels: list[list[int]] = []
        current = [start]
        while current:
            levels.append(current)
            following: list[int] = []
            for vertex in current:
                for neighbor in self._neighbors(vertex):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        following.append(neighbor)
            current = following
        return levels

    def bfs_multi_source(self, sources: Iterable[int]) -> dict[int, int]:
        """Return each reachable vertex's distance to the nearest source."""
        distances: dict[int, int] = {}
        queue = Queue()
        for source in sources:
            queue.enqueue(source)
            distances[source] = 0
        while not queue.is_empty():
            vertex = queue.dequeue()
            for neighbor in self._neighbors(vertex):
                if neighbor not in distances:
                    distances[neighbor] = distances[vertex] + 1
                    queue.enqueue(neighbor)
        return distances


def _print_distances(distances: dict[int, int]) -> None:
    for node, dist in sorted(distances.items()):
        print(f"Node {node}: {dist} steps")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of breadth-first search."""
    print("=== Breadth-First Search Demonstrations ===\n")

    g = Graph(7)
    for v1, v2 in [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (3, 7)]:
        g.add_edge(v1, v2)

    print("Graph Structure:")
    print("     1")
    print("   /   \\")
    print("  2     3")
    print(" / \\   / \\")
    print("4   5 6   7\n")

    print("1. Simple BFS Traversal from node 1:")
    print(f"Visited nodes in order: {g.simple_bfs(1)}\n")

    print("2. BFS with Distance from node 1:")
    print("Distances from node 1:")
    _print_distances(g.bfs_with_distance(1))
    print()

    print("3. Shortest Path Examples:")
    for start, end in [(1, 4), (1, 7), (4, 7)]:
        print(f"Shortest path from {start} to {end}: {g.bfs_shortest_path(start, end)}")
    print()

    print("4. Level Order Traversal from node 1:")
    for index, level in enumerate(g.bfs_level_order(1)):
        print(f"Level {index}: {level}")
    print()

    print("5. Multi-Source BFS from nodes 1 and 7:")
    print("Distances from nearest source:")
    _print_distances(g.bfs_multi_source([1, 7]))
    print()

    print("6. BFS on a Cyclic Graph:")
    cyclic = Graph(4)
    for v1, v2 in [(1, 2), (2, 3), (3, 4), (4, 1)]:
        cyclic.add_edge(v1, v2)
    print("\nCyclic Graph Structure:")
    print("1 --- 2")
    print("|     |")
    print("4 --- 3")
    print(f"BFS traversal order: {cyclic.simple_bfs(1)}")

    print("\n7. BFS on a Disconnected Graph:")
    disconnected = Graph(6)
    for v1, v2 in [(1, 2), (2, 3), (4, 5), (5, 6)]:
        disconnected.add_edge(v1, v2)
    print("\nDisconnected Graph Structure:")
    print("1 --- 2 --- 3   4 --- 5 --- 6")
    print(f"BFS traversal from node 1: {disconnected.simple_bfs(1)}")
    print(f"BFS traversal from node 4: {disconnected.simple_bfs(4)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())