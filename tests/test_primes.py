from hypothesis import given
from hypothesis import strategies as st

from parseqalgs.primes import main, prime_sieve


def test_small_primes():
    assert prime_sieve(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_below_two_is_empty():
    assert prime_sieve(1) == []
    assert prime_sieve(0) == []


def test_two_is_included():
    assert prime_sieve(2) == [2]


@given(st.integers(2, 3000))
def test_results_are_prime_and_bounded(n):
    primes = prime_sieve(n)
    assert primes == sorted(set(primes))
    assert primes[-1] <= n
    for p in primes:
        assert all(p % q for q in primes if q * q <= p)


@given(st.integers(2, 2000))
def test_no_prime_missed(n):
    primes = set(prime_sieve(n))
    for k in range(2, n + 1):
        if k not in primes:
            assert any(k % p == 0 for p in primes if p < k)


def test_main_reports_count(capsys):
    assert main(["100"]) == 0
    last = capsys.readouterr().out.strip().splitlines()[-1]
    assert last == f"number of primes = {len(prime_sieve(100))}"


def test_main_writes_file(tmp_path):
    out = tmp_path / "primes.txt"
    assert main(["-o", str(out), "50"]) == 0
    assert [int(x) for x in out.read_text().split()] == prime_sieve(50)