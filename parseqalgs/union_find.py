"""Union-find over integer vertices with rank union and parent links."""

from __future__ import annotations

from typing import List


class UnionFind:
    """Disjoint sets over ``0 .. n-1``.

    ``parents[u]`` is negative for a root (its magnitude is the rank used by
    :meth:`union_roots`) and otherwise the parent vertex.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements cannot be negative")
        self.parents: List[int] = [-1] * n

    def __len__(self) -> int:
        return len(self.parents)

    def is_root(self, u: int) -> bool:
        """True if ``u`` is the root of its set."""
        return self.parents[u] < 0

    def find(self, i: int) -> int:
        """Root of the set holding ``i``; shortens the path on the way."""
        parents = self.parents
        if parents[i] < 0:
            return i
        p = parents[i]
        if parents[p] < 0:
            return p
        while True:
            gp = parents[p]
            parents[i] = gp
            i = p
            p = gp
            if parents[p] < 0:
                return p

    def union_roots(self, u: int, v: int) -> None:
        """Join the sets of roots ``u`` and ``v`` by rank."""
        parents = self.parents
        if parents[v] < parents[u]:
            u, v = v, u
        parents[u] += parents[v]
        parents[v] = u

    def link(self, u: int, v: int) -> None:
        """Make ``v`` the parent of ``u`` (no ranks)."""
        self.parents[u] = v

    def try_link(self, u: int, v: int) -> bool:
        """Link ``u`` to ``v`` if ``u`` is a fresh root; True on success."""
        if self.parents[u] == -1:
            self.parents[u] = v
            return True
        return False