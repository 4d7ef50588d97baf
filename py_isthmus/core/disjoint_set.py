"""
Weighted union-find with path halving.

This module implements:
- Weighted union (smaller tree is attached under the larger one)
- Path halving during find (every node on the path skips to its grandparent)
- Connectivity queries and a running count of disjoint classes

Elements are the integers 0..n-1. Classes only ever merge, never split.
"""

import numpy as np


class WeightedUnionFind:
    """Disjoint-set structure over n integer-labelled elements."""

    def __init__(self, n: int):
        """
        Create n singleton classes.

        Args:
            n: Number of elements, must be a non-negative integer

        Raises:
            ValueError: If n is negative or not an integer
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise ValueError(f"Element count must be an integer, got {n!r}")
        if n < 0:
            raise ValueError(f"Element count must be non-negative, got {n}")

        self._n = int(n)
        self._parent = np.arange(self._n, dtype=np.int64)
        self._size = np.ones(self._n, dtype=np.int64)
        self._count = self._n

    @property
    def n(self) -> int:
        """Number of elements the structure was created with."""
        return self._n

    @property
    def count(self) -> int:
        """Number of distinct classes."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"WeightedUnionFind(n={self._n}, count={self._count})"

    def _validate(self, p) -> int:
        """Reject anything outside [0, n); numpy would wrap negative indices."""
        if isinstance(p, bool) or not isinstance(p, (int, np.integer)):
            raise IndexError(f"Element must be an integer, got {p!r}")
        if p < 0 or p >= self._n:
            raise IndexError(f"Element {p} is not in [0, {self._n})")
        return int(p)

    def find(self, p: int) -> int:
        """
        Find the root of the class containing p.

        Args:
            p: Element to look up

        Returns:
            Root element of p's class

        Raises:
            IndexError: If p is not in [0, n)
        """
        p = self._validate(p)
        parent = self._parent

        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = int(parent[p])

        return p

    def union(self, p: int, q: int) -> None:
        """
        Merge the classes containing p and q.

        Ties on size attach p's root under q's root. Merging two elements
        that already share a class changes nothing.
        """
        a = self.find(p)
        b = self.find(q)

        if a == b:
            return

        if self._size[b] >= self._size[a]:
            self._parent[a] = b
            self._size[b] += self._size[a]
        else:
            self._parent[b] = a
            self._size[a] += self._size[b]

        self._count -= 1

    def size_of(self, p: int) -> int:
        """Number of elements in the class containing p."""
        return int(self._size[self.find(p)])

    def connected(self, p: int, q: int) -> bool:
        """Check whether p and q belong to the same class."""
        return self.find(p) == self.find(q)
