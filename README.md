# parseqalgs

A small library of sequence algorithms in plain Python, with no dependencies,
plus three command-line tools.

## What is included

- `parseqalgs.merge`: `seq_merge` and `merge`, which merge two sorted
  sequences under a `less(a, b)` comparison. Both are stable: on ties the
  element of the first sequence comes first.
- `parseqalgs.counting_sort`: `seq_count`, `seq_count_sort` and `count_sort`,
  which stably reorder items by small integer keys and return the items with
  the bucket offsets. `count_sort` pads the number of buckets to at least 16.
  A key outside the bucket range raises `ValueError`.
- `parseqalgs.hash_table`: `HashTable`, a fixed-capacity, history-independent
  hash table with prioritised linear probing (`insert`, `update`, `delete`,
  `find`, `find_index`, `count`, `entries`, `index_prefix`), the `IntHasher`
  for non-negative integers, and `remove_duplicates`.
- `parseqalgs.union_find`: `UnionFind` with `find`, `union_roots` (by rank),
  `link` and `try_link`.
- `parseqalgs.speculative_for`: `speculative_for`, which runs loop iterations
  in rounds of reserve and commit, retrying the ones whose commit fails, and
  `Reservation`.
- `parseqalgs.sparse`: `mat_vec_mult`, compressed-sparse-row matrix times
  vector.
- `parseqalgs.suffix_array`: `suffix_array` by prefix doubling, and
  `split_segment`.
- `parseqalgs.transpose`: `transpose`, `block_transpose` and
  `transpose_buckets`.
- `parseqalgs.sequences`: `Range` (a writable view onto part of a list, also
  backwards with `rslice`), `DelayedSequence` and `delayed_seq` (elements
  computed on access), `tabulate`, `to_sequence` and `slice_eq`.
- `parseqalgs.timer`: `Timer`, an accumulating stopwatch that prints
  `name: label: seconds` lines.
- `parseqalgs.wc.word_count`, `parseqalgs.mcss.mcss` and
  `parseqalgs.primes.prime_sieve`, the functions behind the commands.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from parseqalgs.merge import merge
from parseqalgs.counting_sort import seq_count_sort
from parseqalgs.suffix_array import suffix_array
from parseqalgs.union_find import UnionFind

less = lambda a, b: a < b
print(merge([1, 4, 7], [2, 3, 9], less))                    # [1, 2, 3, 4, 7, 9]
print(seq_count_sort(["a", "b", "c", "d"], [1, 0, 1, 0], 2))
# (['b', 'd', 'a', 'c'], [0, 2, 4])
print(suffix_array(b"banana"))                              # [5, 3, 1, 0, 4, 2]

uf = UnionFind(4)
uf.union_roots(0, 1)
print(uf.find(1) == uf.find(0))                             # True
```

## Commands

```
parseqalgs-wc FILE          # print lines, words and bytes of FILE
parseqalgs-primes N         # print how many primes there are up to N
parseqalgs-primes -o OUT N  # write the primes up to N to OUT, one per line
parseqalgs-mcss -n 1000     # maximum contiguous subsequence sum of 1000 random values
```

Each command takes `-r ROUNDS` to repeat the work; a timing line is printed
for each step and round.

## What it does not do

The package has no general comparison sort, no key-value collect-reduce or
grouping, and no text-search command. Sorting by an arbitrary comparison is
left to Python's `sorted`; the only sorts here are the counting sorts on
integer keys and the merge of already sorted sequences.