from hypothesis import given
from hypothesis import strategies as st

from parseqalgs.wc import main, word_count


def test_word_count_simple_line():
    assert word_count("hello world\n") == (1, 2, 12)


def test_word_count_empty():
    assert word_count("") == (0, 0, 0)


@given(st.text(alphabet="ab \t\n", max_size=100))
def test_word_count_invariants(text):
    lines, words, chars = word_count(text)
    assert lines == text.count("\n")
    assert words == len(text.split())
    assert chars == len(text)


@given(st.text(alphabet="xy \n", max_size=60))
def test_bytes_and_str_agree(text):
    assert word_count(text.encode("ascii")) == word_count(text)


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "in.txt"
    content = "one two\nthree\n"
    path.write_text(content)
    assert main([str(path)]) == 0
    last = capsys.readouterr().out.strip().splitlines()[-1]
    lines, words, chars = word_count(content)
    assert last.split() == [str(lines), str(words), str(chars), str(path)]