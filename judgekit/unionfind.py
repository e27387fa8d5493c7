"""Disjoint-set structures and the problems solved with them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class UnionFind:
    """Disjoint sets with union by rank, path compression and set sizes."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._count = n

    def find_set(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            following = self._parent[i]
            self._parent[i] = root
            i = following
        return root

    def is_same_set(self, i: int, j: int) -> bool:
        """Tell whether ``i`` and ``j`` share a set."""
        return self.find_set(i) == self.find_set(j)

    def union_set(self, i: int, j: int) -> None:
        """Merge the sets holding ``i`` and ``j``."""
        x, y = self.find_set(i), self.find_set(j)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._count -= 1

    def num_disjoint_sets(self) -> int:
        """Return how many disjoint sets remain."""
        return self._count

    def size_of_set(self, i: int) -> int:
        """Return the size of the set holding ``i``."""
        return self._size[self.find_set(i)]


class CableNetwork:
    """Servers linked towards centres; each link's length is ``|i - j| % 1000``."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._length = [0] * n

    def connect(self, i: int, j: int) -> None:
        """Link server ``i`` to ``j``, making ``j`` its next hop."""
        self._parent[i] = j
        self._length[i] += abs(i - j) % 1000

    def length_to_center(self, i: int) -> int:
        """Return the cable length from server ``i`` to its centre."""
        total = 0
        while self._parent[i] != i:
            total += self._length[i]
            i = self._parent[i]
        return total


def answer_queries(n: int, queries: Iterable[tuple[str, int, int]]) -> list[bool]:
    """Apply ``('=', a, b)`` unions; answer every other query with whether a and b share a set."""
    sets = UnionFind(n)
    answers: list[bool] = []
    for op, a, b in queries:
        if op == "=":
            sets.union_set(a, b)
        else:
            answers.append(sets.is_same_set(a, b))
    return answers


def count_suspects(n: int, groups: Iterable[Sequence[int]]) -> int:
    """Return how many students end up grouped with student 0."""
    sets = UnionFind(n)
    for group in groups:
        if not group:
            continue
        first, *rest = group
        for member in rest:
            sets.union_set(first, member)
    return sets.size_of_set(0)


def run_network(n: int, commands: Iterable[Sequence]) -> list[int]:
    """Run 1-based ``('E', i)`` queries and ``('I', i, j)`` links until ``('O',)``."""
    network = CableNetwork(n)
    lengths: list[int] = []
    for command in commands:
        kind = command[0]
        if kind == "O":
            break
        if kind == "E":
            lengths.append(network.length_to_center(command[1] - 1))
        else:
            network.connect(command[1] - 1, command[2] - 1)
    return lengths