"""Topological ordering of directed graphs with cycle detection."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


class Graph:
    """A directed graph on the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.adj: list[list[int]] = [[] for _ in range(vertices)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise IndexError(f"vertex {v} is out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from ``v`` to ``w``."""
        self._check_vertex(v)
        self._check_vertex(w)
        self.adj[v].append(w)

    def _reverse_postorder(self) -> list[int]:
        """Return vertices in reverse DFS finishing order; raise CycleError on a cycle."""
        visited: set[int] = set()
        on_stack: set[int] = set()
        finished: list[int] = []
        for root in range(self.vertices):
            if root in visited:
                continue
            visited.add(root)
            on_stack.add(root)
            frames: list[tuple[int, Iterator[int]]] = [(root, iter(self.adj[root]))]
            while frames:
                node, neighbors = frames[-1]
                for w in neighbors:
                    if w not in visited:
                        visited.add(w)
                        on_stack.add(w)
                        frames.append((w, iter(self.adj[w])))
                        break
                    if w in on_stack:
                        raise CycleError(f"cycle through vertex {w}")
                else:
                    frames.pop()
                    on_stack.discard(node)
                    finished.append(node)
        finished.reverse()
        return finished

    def topological_sort(self) -> list[int]:
        """Return the vertices so that every edge points forward.

        Raises CycleError when the graph has a cycle.
        """
        return self._reverse_postorder()

    def has_cycle(self) -> bool:
        """Return whether the graph contains a directed cycle."""
        try:
            self._reverse_postorder()
        except CycleError:
            return True
        return False


def _show_order(graph: Graph, title: str, names: Sequence[str], error: str) -> None:
    try:
        order = graph.topological_sort()
    except CycleError:
        print(error)
        return
    print(f"{title} order:", order)
    for position, vertex in enumerate(order, start=1):
        print(f"{position}. {names[vertex]}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of topological sorting."""
    print("=== Topological Sort Algorithm Demonstrations ===\n")

    print("Example 1: Course Prerequisites")
    print(
        "Graph represents course dependencies where edge u->v means "
        "course u must be taken before course v"
    )
    courses = Graph(4)
    for v, w in [(0, 2), (1, 2), (2, 3), (0, 1)]:
        courses.add_edge(v, w)
    try:
        order = courses.topological_sort()
    except CycleError:
        print("Error: Course dependencies contain a cycle!")
    else:
        print("Course order:", order)
        print("Recommended course sequence:")
        names = ["Intro to Programming", "Discrete Math", "Data Structures", "Algorithms"]
        for position, vertex in enumerate(order, start=1):
            print(f"{position}. {names[vertex]}")

    print("\nExample 2: Build Dependencies")
    print(
        "Graph represents software build dependencies where edge u->v means "
        "package u must be built before package v"
    )
    build = Graph(4)
    for v, w in [(0, 1), (2, 1), (1, 3)]:
        build.add_edge(v, w)
    try:
        order = build.topological_sort()
    except CycleError:
        print("Error: Build dependencies contain a cycle!")
    else:
        print("Build order:", order)
        print("Build sequence:")
        packages = ["Core", "UI", "Utils", "Tests"]
        for position, vertex in enumerate(order, start=1):
            print(f"{position}. {packages[vertex]}")

    print("\nExample 3: Cyclic Dependencies")
    print("Graph contains a cycle to demonstrate error handling")
    cyclic = Graph(3)
    for v, w in [(0, 1), (1, 2), (2, 0)]:
        cyclic.add_edge(v, w)
    try:
        order = cyclic.topological_sort()
    except CycleError:
        print("Detected cyclic dependencies!")
        print("Cannot establish a valid order.")
    else:
        print("Order:", order)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())