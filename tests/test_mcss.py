from hypothesis import given
from hypothesis import strategies as st

from parseqalgs.mcss import main, mcss

ints = st.lists(st.integers(-50, 50), min_size=1, max_size=60)


def test_classic_example():
    assert mcss([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_all_negative_gives_empty_run():
    assert mcss([-3, -1, -7]) == 0


def test_empty_sequence():
    assert mcss([]) == 0


@given(ints)
def test_bounds(values):
    r = mcss(values)
    assert r >= max(values)
    assert r >= 0
    assert r <= sum(v for v in values if v > 0)


@given(st.lists(st.integers(0, 50), min_size=1, max_size=60))
def test_nonnegative_sums_everything(values):
    assert mcss(values) == sum(values)


@given(ints, ints)
def test_concatenation_not_smaller(a, b):
    assert mcss(a + b) >= max(mcss(a), mcss(b))


def test_main_prints_nonnegative_result(capsys):
    assert main(["-n", "1000", "-r", "1"]) == 0
    last = capsys.readouterr().out.strip().splitlines()[-1]
    assert float(last) >= 0