"""Depth-first search over adjacency-map graphs and binary trees."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableSet, Sequence
from dataclasses import dataclass, field
from typing import Optional

Graph = Mapping[int, Sequence[int]]


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass
class Stack:
    """A LIFO stack of integers."""

    items: list[int] = field(default_factory=list)

    def push(self, item: int) -> None:
        """Put ``item`` on top of the stack."""
        self.items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; raise IndexError when empty."""
        if not self.items:
            raise IndexError("pop from empty stack")
        return self.items.pop()

    def peek(self) -> int:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self.items:
            raise IndexError("peek at empty stack")
        return self.items[-1]

    def is_empty(self) -> bool:
        """Return whether the stack holds no items."""
        return not self.items

    def __len__(self) -> int:
        return len(self.items)


def _neighbors(graph: Graph, node: int) -> Iterator[int]:
    return iter(graph.get(node, ()))


def _preorder_walk(graph: Graph, start: int, visited: MutableSet[int]) -> list[int]:
    """Visit nodes reachable from ``start`` in recursive-DFS order."""
    visited.add(start)
    order = [start]
    frames = [_neighbors(graph, start)]
    while frames:
        for neighbor in frames[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                frames.append(_neighbors(graph, neighbor))
                break
        else:
            frames.pop()
    return order


# --- Basic traversals -------------------------------------------------------


def dfs_recursive(
    graph: Graph, start: int, visited: MutableSet[int] | None = None
) -> list[int]:
    """Return nodes in the order a recursive DFS from ``start`` visits them.

    ``visited`` is updated in place when given.
    """
    if visited is None:
        visited = set()
    return _preorder_walk(graph, start, visited)


def dfs_iterative(graph: Graph, start: int) -> list[int]:
    """Return the visit order of an explicit-stack DFS from ``start``."""
    visited: set[int] = set()
    order: list[int] = []
    stack = [start]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        stack.extend(n for n in reversed(graph.get(current, ())) if n not in visited)
    return order


def dfs_with_custom_stack(graph: Graph, start: int) -> list[int]:
    """Return the visit order of a DFS driven by a :class:`Stack`."""
    visited: set[int] = set()
    order: list[int] = []
    stack = Stack()
    stack.push(start)
    while not stack.is_empty():
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        for neighbor in reversed(graph.get(current, ())):
            if neighbor not in visited:
                stack.push(neighbor)
    return order


# --- Tree traversals --------------------------------------------------------


def pre_order(root: TreeNode | None) -> list[int]:
    """Root, left subtree, right subtree."""
    if root is None:
        return []
    return [root.val, *pre_order(root.left), *pre_order(root.right)]


def in_order(root: TreeNode | None) -> list[int]:
    """Left subtree, root, right subtree."""
    if root is None:
        return []
    return [*in_order(root.left), root.val, *in_order(root.right)]


def post_order(root: TreeNode | None) -> list[int]:
    """Left subtree, right subtree, root."""
    if root is None:
        return []
    return [*post_order(root.left), *post_order(root.right), root.val]


def pre_order_iterative(root: TreeNode | None) -> list[int]:
    """Pre-order traversal using an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def max_depth(root: TreeNode | None) -> int:
    """Return the height of the tree, 0 for an empty tree."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


# --- Path finding -----------------------------------------------------------


def find_path(graph: Graph, start: int, target: int) -> list[int] | None:
    """Return the first path DFS finds from ``start`` to ``target``, or None."""
    visited = {start}
    path = [start]
    if start == target:
        return path
    frames = [_neighbors(graph, start)]
    while frames:
        for neighbor in frames[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                path.append(neighbor)
                if neighbor == target:
                    return path
                frames.append(_neighbors(graph, neighbor))
                break
        else:
            frames.pop()
            path.pop()
    return None


def find_all_paths(graph: Graph, start: int, target: int) -> list[list[int]]:
    """Return every simple path from ``start`` to ``target``."""
    all_paths: list[list[int]] = []
    on_path: set[int] = set()
    path: list[int] = []

    def explore(current: int) -> None:
        on_path.add(current)
        path.append(current)
        if current == target:
            all_paths.append(list(path))
        else:
            for neighbor in graph.get(current, ()):
                if neighbor not in on_path:
                    explore(neighbor)
        path.pop()
        on_path.discard(current)

    explore(start)
    return all_paths


# --- Cycle detection --------------------------------------------------------


def has_cycle_undirected(graph: Graph) -> bool:
    """Return whether the graph, treated as undirected, contains a cycle."""
    undirected = make_undirected(graph)
    visited: set[int] = set()
    for root in undirected:
        if root in visited:
            continue
        visited.add(root)
        frames: list[tuple[int, Iterator[int]]] = [(-1, iter(undirected[root]))]
        parents = [root]
        while frames:
            parent, neighbors = frames[-1]
            current = parents[-1]
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    frames.append((current, iter(undirected.get(neighbor, ()))))
                    parents.append(neighbor)
                    break
                if neighbor != parent:
                    return True
            else:
                frames.pop()
                parents.pop()
    return False


def has_cycle_directed(graph: Graph) -> bool:
    """Return whether the directed graph contains a cycle."""
    visited: set[int] = set()
    for root in graph:
        if root in visited:
            continue
        visited.add(root)
        on_stack = {root}
        nodes = [root]
        frames = [_neighbors(graph, root)]
        while frames:
            for neighbor in frames[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_stack.add(neighbor)
                    nodes.append(neighbor)
                    frames.append(_neighbors(graph, neighbor))
                    break
                if neighbor in on_stack:
                    return True
            else:
                frames.pop()
                on_stack.discard(nodes.pop())
    return False


# --- Connected components ---------------------------------------------------


def get_connected_components(graph: Graph) -> list[list[int]]:
    """Return the components of the graph, treated as undirected."""
    undirected = make_undirected(graph)
    visited: set[int] = set()
    return [
        _preorder_walk(undirected, node, visited)
        for node in undirected
        if node not in visited
    ]


def count_components(graph: Graph) -> int:
    """Return the number of components of the graph, treated as undirected."""
    return len(get_connected_components(graph))


def is_connected(graph: Graph) -> bool:
    """Return whether every node of ``graph`` is reachable, ignoring direction."""
    if not graph:
        return True
    undirected = make_undirected(graph)
    start = next(iter(undirected))
    visited: set[int] = set()
    _preorder_walk(undirected, start, visited)
    return len(visited) == len(graph)


# --- Topological sort -------------------------------------------------------


def topological_sort(graph: Graph) -> list[int]:
    """Return the nodes of a DAG so that every edge points forward."""
    visited: set[int] = set()
    finished: list[int] = []
    for root in graph:
        if root in visited:
            continue
        visited.add(root)
        nodes = [root]
        frames = [_neighbors(graph, root)]
        while frames:
            for neighbor in frames[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    nodes.append(neighbor)
                    frames.append(_neighbors(graph, neighbor))
                    break
            else:
                frames.pop()
                finished.append(nodes.pop())
    finished.reverse()
    return finished


# --- Utilities --------------------------------------------------------------


def make_undirected(graph: Graph) -> dict[int, list[int]]:
    """Return a copy of ``graph`` with every edge present in both directions."""
    undirected: dict[int, list[int]] = {node: [] for node in graph}
    for node, neighbors in graph.items():
        for neighbor in neighbors:
            if neighbor not in undirected[node]:
                undirected[node].append(neighbor)
            back = undirected.setdefault(neighbor, [])
            if node not in back:
                back.append(node)
    return undirected


def dfs_debug(graph: Graph, start: int, max_depth: int) -> list[str]:
    """Return a trace of a depth-limited DFS, one indented line per event."""
    visited: set[int] = set()
    lines: list[str] = []

    def visit(node: int, depth: int) -> None:
        indent = "  " * depth
        lines.append(f"{indent}Visiting node {node} at depth {depth}")
        visited.add(node)
        if depth >= max_depth:
            lines.append(f"{indent}Max depth reached")
            return
        for neighbor in graph.get(node, ()):
            if neighbor not in visited:
                visit(neighbor, depth + 1)

    visit(start, 0)
    return lines


def _print_visits(order: list[int]) -> None:
    for node in order:
        print(f"Visited: {node}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of the depth-first search routines."""
    print("=== Depth-First Search Demonstrations ===")
    graph = {1: [2, 3], 2: [4, 5], 3: [6], 4: [], 5: [], 6: []}
    print("Graph:", graph)
    print()

    print("1. Recursive DFS from node 1:")
    _print_visits(dfs_recursive(graph, 1))
    print()

    print("2. Iterative DFS from node 1:")
    _print_visits(dfs_iterative(graph, 1))
    print()

    print("3. DFS with Custom Stack from node 1:")
    _print_visits(dfs_with_custom_stack(graph, 1))
    print()

    print("4. Tree Traversals:")
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    print(f"Pre-order:  {pre_order(root)}")
    print(f"In-order:   {in_order(root)}")
    print(f"Post-order: {post_order(root)}")
    print(f"Pre-order (Iterative): {pre_order_iterative(root)}")
    print(f"Max Depth: {max_depth(root)}")
    print()

    print("5. Path Finding:")
    print(f"Path from 1 to 6: {find_path(graph, 1, 6)}")
    print(f"All paths from 1 to 6: {find_all_paths(graph, 1, 6)}")
    print()

    print("6. Cycle Detection:")
    cyclic = {1: [2, 3], 2: [1, 3], 3: [1, 2]}
    print(f"Has cycle (undirected): {str(has_cycle_undirected(cyclic)).lower()}")
    directed_cyclic = {1: [2], 2: [3], 3: [1]}
    print(f"Has cycle (directed): {str(has_cycle_directed(directed_cyclic)).lower()}")
    print()

    print("7. Connected Components:")
    disconnected = {1: [2], 2: [1], 3: [4], 4: [3], 5: []}
    print(f"Number of components: {count_components(disconnected)}")
    print(f"Components: {get_connected_components(disconnected)}")
    print(f"Is connected: {str(is_connected(graph)).lower()}")
    print()

    print("8. Topological Sort:")
    dag = {5: [2, 0], 4: [0, 1], 2: [3], 3: [1], 0: [], 1: []}
    print(f"Topological order: {topological_sort(dag)}")
    print()

    print("9. Debug DFS (with depth limit):")
    for line in dfs_debug(graph, 1, 3):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())