"""Disjoint-set forests with path compression and union by rank."""

from __future__ import annotations

from collections.abc import Hashable, MutableMapping, MutableSequence, Sequence
from typing import Any, Union

_Table = Union[MutableSequence[Any], MutableMapping[Any, Any]]


def _find_root(parent: _Table, x: Any) -> Any:
    """Return the root of ``x`` in ``parent``, compressing the path to it."""
    root = x
    while parent[root] != root:
        root = parent[root]
    while parent[x] != root:
        parent[x], x = root, parent[x]
    return root


def _link(rank: _Table, parent: _Table, size: _Table, root_x: Any, root_y: Any) -> None:
    """Join two distinct roots by rank, keeping ``size`` up to date."""
    if rank[root_x] < rank[root_y]:
        root_x, root_y = root_y, root_x
    elif rank[root_x] == rank[root_y]:
        rank[root_x] += 1
    parent[root_y] = root_x
    size[root_x] += size[root_y]


class ArrayUnionFind:
    """Union-find over the integers ``0 .. n - 1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._parent: list[int] = list(range(n))
        self._rank: list[int] = [0] * n
        self._size: list[int] = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")
        return _find_root(self._parent, x)

    def union(self, x: int, y: int) -> None:
        """Merge the sets containing ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x != root_y:
            _link(self._rank, self._parent, self._size, root_x, root_y)

    def connected(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` belong to the same set."""
        return self.find(x) == self.find(y)

    def size_of(self, x: int) -> int:
        """Return the number of elements in the set containing ``x``."""
        return self._size[self.find(x)]

    def sets(self) -> list[list[int]]:
        """Return the disjoint sets, each in ascending order, ordered by least element."""
        groups: dict[int, list[int]] = {}
        for element in range(len(self._parent)):
            groups.setdefault(self.find(element), []).append(element)
        return list(groups.values())


class MapUnionFind:
    """Union-find over arbitrary hashable elements, added on first use."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}
        self._size: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, x: object) -> bool:
        return x in self._parent

    def make_set(self, x: Hashable) -> None:
        """Add ``x`` as a singleton set unless it is already known."""
        if x not in self._parent:
            self._parent[x] = x
            self._rank[x] = 0
            self._size[x] = 1

    def find(self, x: Hashable) -> Hashable:
        """Return the representative of the set containing ``x``, adding ``x`` if new."""
        self.make_set(x)
        return _find_root(self._parent, x)

    def union(self, x: Hashable, y: Hashable) -> None:
        """Merge the sets containing ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x != root_y:
            _link(self._rank, self._parent, self._size, root_x, root_y)

    def connected(self, x: Hashable, y: Hashable) -> bool:
        """Return whether ``x`` and ``y`` belong to the same set."""
        return self.find(x) == self.find(y)

    def size_of(self, x: Hashable) -> int:
        """Return the number of elements in the set containing ``x``."""
        return self._size[self.find(x)]

    def sets(self) -> dict[Hashable, list[Hashable]]:
        """Return the disjoint sets keyed by their representative."""
        groups: dict[Hashable, list[Hashable]] = {}
        for element in list(self._parent):
            groups.setdefault(self.find(element), []).append(element)
        return groups


def _yes(flag: bool) -> str:
    return str(flag).lower()


def _print_components(uf: MapUnionFind) -> None:
    for root, members in uf.sets().items():
        print(f"Component with root {root}: {members}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of union-find."""
    print("=== Union-Find Algorithm Demonstrations ===\n")

    print("Example 1: Friend Circles (Array-based)")
    print("Representing friend relationships in a social network")
    uf = ArrayUnionFind(6)
    print("\nAdding friendships:")
    print("0 and 1 become friends")
    uf.union(0, 1)
    print("1 and 2 become friends")
    uf.union(1, 2)
    print("3 and 4 become friends")
    uf.union(3, 4)

    print("\nChecking relationships:")
    print(f"Are 0 and 2 in the same friend circle? {_yes(uf.connected(0, 2))}")
    print(f"Are 0 and 4 in the same friend circle? {_yes(uf.connected(0, 4))}")
    print(f"Size of 0's friend circle: {uf.size_of(0)}")

    print("\nAll friend circles:")
    for index, circle in enumerate(uf.sets(), start=1):
        print(f"Circle {index}: {circle}")

    print("\nExample 2: Network Components (Map-based)")
    print("Representing connected components in a computer network")
    network = MapUnionFind()
    print("\nAdding network connections:")
    print("Connecting 'serverA' to 'serverB'")
    network.union("serverA", "serverB")
    print("Connecting 'serverB' to 'serverC'")
    network.union("serverB", "serverC")
    print("Connecting 'serverD' to 'serverE'")
    network.union("serverD", "serverE")
    print("Adding 'serverF' to network")
    network.make_set("serverF")

    print("\nChecking network connectivity:")
    print(f"Are serverA and serverC connected? {_yes(network.connected('serverA', 'serverC'))}")
    print(f"Are serverA and serverD connected? {_yes(network.connected('serverA', 'serverD'))}")
    print(f"Size of serverA's network: {network.size_of('serverA')}")

    print("\nAll network components:")
    _print_components(network)

    print("\nExample 3: Dynamic Component Growth")
    print("Demonstrating how components merge and grow")
    growth = MapUnionFind()

    print("\nStep 1: Creating initial components")
    growth.union("A", "B")
    growth.union("C", "D")
    _print_components(growth)

    print("\nStep 2: Merging components")
    growth.union("B", "C")
    _print_components(growth)

    print("\nStep 3: Adding new node to existing component")
    growth.union("A", "E")
    _print_components(growth)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())