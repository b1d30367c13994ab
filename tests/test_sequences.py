import pytest
from hypothesis import given, strategies as st

from parseqalgs.sequences import (
    DelayedSequence,
    Range,
    delayed_seq,
    slice_eq,
    tabulate,
    to_sequence,
)


def test_range_reads_underlying_stretch():
    data = list(range(10))
    r = Range(data, 2, 7)
    assert list(r) == data[2:7]
    assert len(r) == len(data[2:7])
    assert r[0] == data[2]
    assert r[-1] == data[6]


def test_range_writes_through():
    data = list(range(10))
    s = Range(data).slice(2, 5)
    s[0] = 99
    assert data[2] == 99
    s[1:3] = ["a", "b"]
    assert data[3:5] == ["a", "b"]


def test_range_slice_assignment_length_mismatch():
    data = list(range(6))
    r = Range(data)
    with pytest.raises(ValueError):
        r[0:3] = [1, 2]
    assert list(r) == [0, 1, 2, 3, 4, 5]


def test_range_index_out_of_bounds():
    r = Range(list(range(4)), 1, 3)
    assert r[1] == 2
    with pytest.raises(IndexError):
        r[2]


def test_rslice_reads_backwards():
    data = list(range(10))
    assert list(Range(data).rslice()) == data[::-1]
    assert list(Range(data).rslice(1, 4)) == data[::-1][1:4]
    assert list(Range(data, 2, 7).rslice(1, 3)) == data[2:7][::-1][1:3]


def test_rslice_writes_through():
    data = list(range(5))
    r = Range(data).rslice()
    r[0] = "last"
    assert data[-1] == "last"


def test_slice_eq():
    data = list(range(8))
    r = Range(data)
    assert slice_eq(r.slice(2, 5), r.slice(2, 6))
    assert not slice_eq(r.slice(2, 5), r.slice(3, 5))
    assert not slice_eq(r, Range(list(range(8))))
    assert not slice_eq(r, data)


def test_delayed_seq_is_lazy():
    calls = []

    def f(i):
        calls.append(i)
        return i * 10

    ds = delayed_seq(6, f)
    assert calls == []
    value = ds[4]
    assert calls == [4]
    assert value == f(4)


def test_delayed_slice_uses_offset():
    calls = []

    def f(i):
        calls.append(i)
        return -i

    ds = delayed_seq(8, f).slice(2, 5)
    assert len(ds) == len(range(2, 5))
    ds[0]
    assert calls == [2]
    assert list(ds) == list(delayed_seq(8, f))[2:5]


def test_delayed_index_errors_and_negative():
    ds = delayed_seq(6, lambda i: i + 1)
    assert ds[-1] == ds[5]
    with pytest.raises(IndexError):
        ds[6]
    with pytest.raises(ValueError):
        DelayedSequence(-1, lambda i: i)


def test_delayed_constant():
    ds = DelayedSequence.constant(4, "x")
    assert list(ds) == ["x"] * 4


def test_tabulate_call_order_and_values():
    calls = []

    def f(i):
        calls.append(i)
        return i * i

    result = tabulate(5, f)
    assert calls == list(range(5))
    assert result == list(delayed_seq(5, f))


def test_to_sequence_copies():
    data = [3, 1, 2]
    view = Range(data, 0, 2)
    copy = to_sequence(view)
    data[0] = 100
    assert copy == [3, 1]


@given(st.lists(st.integers()), st.integers(-20, 20), st.integers(-20, 20))
def test_range_slice_matches_list_slicing(data, start, end):
    assert list(Range(data).slice(start, end)) == data[start:end]
    assert list(Range(data).rslice(start, end)) == data[::-1][start:end]