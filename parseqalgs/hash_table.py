"""History-independent hash table with prioritised linear probing.

At any point the layout of the table depends only on the keys it holds, not
on the order in which they were inserted or deleted. Probe sequences keep
keys in decreasing priority (as given by the hasher's ``cmp``), so searches
can stop early.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from itertools import accumulate
from typing import Any, Callable, List, Optional, Sequence

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class IntHasher:
    """Hasher for non-negative integers; ``-1`` marks an empty cell.

    By default an equal key is never replaced and updates keep the stored
    value. ``replace_equal`` and ``combine`` change that policy.
    """

    replace_equal: bool = False
    combine: Optional[Callable[[int, int], int]] = None
    empty = -1

    def hash(self, key: int) -> int:
        """Multiplicative hash, truncated to 64 bits."""
        return (key * 999029) & _MASK64

    def get_key(self, value: int) -> int:
        """An integer is its own key; negative values are rejected."""
        key = operator.index(value)
        if key < 0:
            raise ValueError("IntHasher only stores non-negative integers")
        return key

    def cmp(self, a: int, b: int) -> int:
        """1 if ``a > b``, 0 if equal, -1 otherwise."""
        return (a > b) - (a < b)

    def replace(self, new: int, old: int) -> bool:
        """Whether ``new`` may replace the equal stored ``old``."""
        return self.replace_equal and self.cmp(new, old) == 0

    def update(self, old: int, new: int) -> int:
        """The value to store when ``new`` meets the equal ``old``."""
        return old if self.combine is None else self.combine(old, new)


class HashTable:
    """Fixed-capacity hash table.

    ``hasher`` supplies ``empty`` (the marker for an unused cell), ``hash``,
    ``get_key``, ``cmp``, ``replace`` and ``update``. ``size`` is the largest
    number of values the table is meant to hold; the table has
    ``100 + load * size`` cells.
    """

    def __init__(self, size: int, hasher: Any = None, load: float = 1.5) -> None:
        if size < 0:
            raise ValueError("table size cannot be negative")
        self._h = hasher if hasher is not None else IntHasher()
        self._empty = self._h.empty
        self._m = int(100.0 + load * size)
        self._cells: List[Any] = [self._empty] * self._m

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: Any) -> bool:
        return self.find_index(key) is not None

    # index arithmetic on the circular table

    def _is_empty(self, value: Any) -> bool:
        return value == self._empty

    def _first_index(self, key: Any) -> int:
        return (self._h.hash(key) & _MASK32) % self._m

    def _inc(self, i: int) -> int:
        return 0 if i + 1 == self._m else i + 1

    def _dec(self, i: int) -> int:
        return self._m - 1 if i == 0 else i - 1

    def _less_index(self, a: int, b: int) -> bool:
        if a < b:
            return 2 * (b - a) < self._m
        return 2 * (a - b) > self._m

    def _cmp_cell(self, key: Any, cell: Any) -> int:
        return 1 if self._is_empty(cell) else self._h.cmp(key, self._h.get_key(cell))

    def _place(self, value: Any, combine: bool) -> bool:
        if self._is_empty(value):
            raise ValueError("cannot insert the empty marker")
        h = self._h
        i = self._first_index(h.get_key(value))
        while True:
            c = self._cells[i]
            if self._is_empty(c):
                self._cells[i] = value
                return True
            order = h.cmp(h.get_key(value), h.get_key(c))
            if order == 0:
                if not h.replace(value, c):
                    return False
                self._cells[i] = h.update(c, value) if combine else value
                return True
            if order > 0:
                # the new value has higher priority: it takes the cell and
                # the displaced value continues probing
                self._cells[i] = value
                value = c
            i = self._inc(i)

    def insert(self, value: Any) -> bool:
        """Insert ``value``.

        An equal key is replaced when the hasher's ``replace(new, old)`` says
        so. Returns False when an equal key was kept, True otherwise.
        """
        return self._place(value, combine=False)

    def update(self, value: Any) -> bool:
        """Like :meth:`insert`, but an equal key is combined with
        ``hasher.update(old, new)`` instead of being overwritten."""
        return self._place(value, combine=True)

    def delete(self, key: Any) -> None:
        """Remove the value with ``key``, if present."""
        cells = self._cells
        h = self._h
        i = self._first_index(key)
        j = i
        c = cells[j]
        if self._is_empty(c):
            return
        order = self._cmp_cell(key, c)
        # find the first cell whose priority is not above the key's
        while order < 0:
            j = self._inc(j)
            c = cells[j]
            order = self._cmp_cell(key, c)
        while True:
            if order != 0:
                if j == i:
                    return
                j = self._dec(j)
                c = cells[j]
                order = self._cmp_cell(key, c)
                continue
            # found the key at j: pick the value that should fill the hole,
            # skipping values whose home lies after j
            jj = self._inc(j)
            x = cells[jj]
            while not self._is_empty(x) and self._less_index(
                j, self._first_index(h.get_key(x))
            ):
                jj = self._inc(jj)
                x = cells[jj]
            jjj = self._dec(jj)
            while jjj != j:
                y = cells[jjj]
                if self._is_empty(y) or not self._less_index(
                    j, self._first_index(h.get_key(y))
                ):
                    x = y
                    jj = jjj
                jjj = self._dec(jjj)
            cells[j] = x
            if self._is_empty(x):
                return
            # the moved value now appears twice; delete the later copy
            key = h.get_key(x)
            j = jj
            i = self._first_index(key)
            c = cells[j]
            order = self._cmp_cell(key, c)

    def find_index(self, key: Any) -> Optional[int]:
        """Cell index holding ``key``, or None if absent."""
        h = self._h
        i = self._first_index(key)
        while True:
            c = self._cells[i]
            if self._is_empty(c):
                return None
            order = h.cmp(key, h.get_key(c))
            if order > 0:
                return None
            if order == 0:
                return i
            i = self._inc(i)

    def find(self, key: Any) -> Optional[Any]:
        """The stored value with ``key``, or None if absent."""
        i = self.find_index(key)
        return None if i is None else self._cells[i]

    def count(self) -> int:
        """Number of stored values."""
        return sum(1 for c in self._cells if not self._is_empty(c))

    def entries(self) -> List[Any]:
        """Stored values in table order."""
        return [c for c in self._cells if not self._is_empty(c)]

    def index_prefix(self) -> List[int]:
        """For each cell, the number of occupied cells before it."""
        full = (0 if self._is_empty(c) else 1 for c in self._cells)
        return list(accumulate(full, initial=0))[:-1]

    def __repr__(self) -> str:
        shown = ", ".join(
            f"{i}: {c!r}" for i, c in enumerate(self._cells) if not self._is_empty(c)
        )
        return f"HashTable({{{shown}}})"


def remove_duplicates(items: Sequence, hasher: Any = None, m: int = 0) -> List[Any]:
    """Distinct values of ``items`` (by hasher key), in table order.

    ``m`` bounds the number of distinct values; it defaults to ``len(items)``.
    The default hasher handles non-negative integers.
    """
    data = list(items)
    table = HashTable(m or len(data), hasher, 1.3)
    for x in data:
        table.insert(x)
    return table.entries()