"""Index-range views, lazily computed sequences and list builders."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, Iterable, Iterator, List, MutableSequence, Optional


class Range(Sequence):
    """Writable view onto a stretch of an underlying list.

    The view does not own its elements: reads and writes go straight to the
    underlying list. Views may run backwards (see :meth:`rslice`).
    """

    __slots__ = ("_data", "_indices")

    def __init__(
        self, data: MutableSequence, start: Optional[int] = 0, end: Optional[int] = None
    ) -> None:
        self._data = data
        self._indices = range(len(data))[start:end]

    @classmethod
    def _view(cls, data: MutableSequence, indices: range) -> "Range":
        obj = cls.__new__(cls)
        obj._data = data
        obj._indices = indices
        return obj

    @property
    def base(self) -> MutableSequence:
        """The underlying list."""
        return self._data

    @property
    def begin(self) -> int:
        """Index in the underlying list where this view starts."""
        return self._indices.start

    def __len__(self) -> int:
        return len(self._indices)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return self._view(self._data, self._indices[i])
        return self._data[self._indices[i]]

    def __setitem__(self, i, value) -> None:
        if isinstance(i, slice):
            targets = self._indices[i]
            values = list(value)
            if len(values) != len(targets):
                raise ValueError(
                    f"cannot assign {len(values)} values to a slice of length {len(targets)}"
                )
            for k, v in zip(targets, values):
                self._data[k] = v
        else:
            self._data[self._indices[i]] = value

    def __iter__(self) -> Iterator[Any]:
        return (self._data[k] for k in self._indices)

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> "Range":
        """Sub-view of positions ``start`` to ``end`` of this view."""
        return self._view(self._data, self._indices[start:end])

    def rslice(self, start: Optional[int] = None, end: Optional[int] = None) -> "Range":
        """Sub-view of positions ``start`` to ``end`` of this view read backwards."""
        return self._view(self._data, self._indices[::-1][start:end])

    def __repr__(self) -> str:
        return f"Range({list(self)!r})"


class DelayedSequence(Sequence):
    """Read-only sequence whose element ``i`` is ``f(offset + i)``, computed on access."""

    __slots__ = ("_f", "_indices")

    def __init__(self, n: int, f: Callable[[int], Any], offset: int = 0) -> None:
        if n < 0:
            raise ValueError("length of a delayed sequence cannot be negative")
        self._f = f
        self._indices = range(offset, offset + n)

    @classmethod
    def constant(cls, n: int, value: Any) -> "DelayedSequence":
        """Delayed sequence of length ``n`` where every element is ``value``."""
        return cls(n, lambda _i: value)

    @classmethod
    def _view(cls, f: Callable[[int], Any], indices: range) -> "DelayedSequence":
        obj = cls.__new__(cls)
        obj._f = f
        obj._indices = indices
        return obj

    def __len__(self) -> int:
        return len(self._indices)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return self._view(self._f, self._indices[i])
        return self._f(self._indices[i])

    def __iter__(self) -> Iterator[Any]:
        return map(self._f, self._indices)

    def slice(
        self, start: Optional[int] = None, end: Optional[int] = None
    ) -> "DelayedSequence":
        """Delayed sub-sequence of positions ``start`` to ``end``."""
        return self._view(self._f, self._indices[start:end])

    def __repr__(self) -> str:
        return f"DelayedSequence(n={len(self)})"


def delayed_seq(n: int, f: Callable[[int], Any]) -> DelayedSequence:
    """Lazy sequence of ``f(0), ..., f(n-1)``."""
    return DelayedSequence(n, f)


def tabulate(n: int, f: Callable[[int], Any]) -> List[Any]:
    """List of ``f(0), ..., f(n-1)``."""
    return [f(i) for i in range(n)]


def to_sequence(seq: Iterable[Any]) -> List[Any]:
    """Materialise any sequence (including views and delayed ones) as a new list."""
    return list(seq)


def slice_eq(a: object, b: object) -> bool:
    """True when ``a`` and ``b`` are views starting at the same place of the same list."""
    return (
        isinstance(a, Range)
        and isinstance(b, Range)
        and a._data is b._data
        and a._indices.start == b._indices.start
        and a._indices.step == b._indices.step
    )