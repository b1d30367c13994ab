import operator
import random

from hypothesis import given
from hypothesis import strategies as st

from parseqalgs.merge import merge, seq_merge

lt = operator.lt
by_key = lambda x, y: x[0] < y[0]  # noqa: E731


def _sorted_ints(n, top, seed):
    rng = random.Random(seed)
    return sorted(rng.randrange(top) for _ in range(n))


@given(
    st.lists(st.integers(-100, 100), max_size=100),
    st.lists(st.integers(-100, 100), max_size=100),
)
def test_seq_merge_matches_sorted(a, b):
    a.sort()
    b.sort()
    assert seq_merge(a, b, lt) == sorted(a + b)


@given(
    st.lists(st.integers(-100, 100), max_size=100),
    st.lists(st.integers(-100, 100), max_size=100),
)
def test_merge_matches_sorted(a, b):
    a.sort()
    b.sort()
    assert merge(a, b, lt) == sorted(a + b)


def test_seq_merge_ties_take_a_first():
    a = [(k, "a") for k in _sorted_ints(50, 5, 1)]
    b = [(k, "b") for k in _sorted_ints(50, 5, 2)]
    assert seq_merge(a, b, by_key) == sorted(a + b, key=lambda p: p[0])


def test_merge_large_is_stable():
    a = [(k, "a", i) for i, k in enumerate(_sorted_ints(3000, 40, 3))]
    b = [(k, "b", i) for i, k in enumerate(_sorted_ints(3500, 40, 4))]
    assert merge(a, b, by_key) == sorted(a + b, key=lambda p: p[0])


def test_merge_large_with_empty_side():
    a = _sorted_ints(5000, 1000, 5)
    assert merge(a, [], lt) == a
    assert merge([], a, lt) == a


def test_merge_does_not_modify_inputs():
    a = _sorted_ints(2500, 100, 6)
    b = _sorted_ints(2500, 100, 7)
    a_before, b_before = list(a), list(b)
    result = merge(a, b, lt)
    assert len(result) == len(a) + len(b)
    assert a == a_before and b == b_before