"""Sparse matrix (compressed rows) times vector."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, Callable, List, Sequence


def mat_vec_mult(
    starts: Sequence[int],
    columns: Sequence[int],
    values: Sequence[Any],
    vector: Sequence[Any],
    mult: Callable[[Any, Any], Any] = operator.mul,
    add: Callable[[Any, Any], Any] = operator.add,
) -> List[Any]:
    """Multiply a square compressed-sparse-row matrix by ``vector``.

    Row ``i`` holds the entries ``starts[i]`` to ``starts[i+1]`` of
    ``columns`` and ``values``; ``starts`` has ``len(vector) + 1`` entries.
    Each product is ``mult(vector[col], value)``, summed with ``add``. Rows
    with no entries give 0.
    """
    n = len(vector)
    if len(starts) < n + 1:
        raise ValueError("starts must have one more entry than the vector")
    out: List[Any] = []
    for s, e in zip(starts[:n], starts[1 : n + 1]):
        if e > s:
            out.append(
                reduce(add, (mult(vector[columns[j]], values[j]) for j in range(s, e)))
            )
        else:
            out.append(0)
    return out