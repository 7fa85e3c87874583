import pytest

from coursealgo.matching import (
    boyer_moore_match,
    failure_function,
    kmp_match,
    last_occurrence,
)

CASES = [
    ("abacaabaccabacabaabb", "abacab"),
    ("abacaabadcabacabaabb", "abacab"),
    ("aaaaaaaaab", "aaab"),
    ("hello world", "world"),
    ("hello world", "hello"),
    ("hello world", "xyz"),
    ("abcabcabd", "abcabd"),
    ("ababababca", "abababca"),
    ("a", "a"),
    ("ab", "b"),
    ("mississippi", "issip"),
    ("mississippi", "ssippix"),
]


def test_kmp_sample_input():
    assert kmp_match("abacaabaccabacabaabb", "abacab") == 10


def test_boyer_moore_sample_input():
    assert boyer_moore_match("abacaabadcabacabaabb", "abacab") == 10


@pytest.mark.parametrize("text, pattern", CASES)
def test_kmp_agrees_with_find(text, pattern):
    assert kmp_match(text, pattern) == text.find(pattern)


@pytest.mark.parametrize("text, pattern", CASES)
def test_boyer_moore_agrees_with_find(text, pattern):
    assert boyer_moore_match(text, pattern) == text.find(pattern)


def test_failure_function_textbook_pattern():
    assert failure_function("abacab") == [0, 0, 1, 0, 1, 2]


@pytest.mark.parametrize("pattern", ["abacab", "aaaa", "abcabcab", "aabaaab", "x"])
def test_failure_function_is_prefix_suffix(pattern):
    failure = failure_function(pattern)
    assert len(failure) == len(pattern)
    for index, length in enumerate(failure):
        assert length <= index
        assert pattern[:length] == pattern[index + 1 - length : index + 1]


def test_failure_function_empty():
    assert failure_function("") == []


def test_kmp_empty_pattern_raises():
    with pytest.raises(ValueError):
        kmp_match("abc", "")


@pytest.mark.parametrize("pattern", ["abacab", "mississippi", "z"])
def test_last_occurrence_is_last_index(pattern):
    table = last_occurrence(pattern)
    assert set(table) == set(pattern)
    for char, index in table.items():
        assert pattern[index] == char
        assert char not in pattern[index + 1 :]


@pytest.mark.parametrize(
    "text, pattern",
    [("", "a"), ("abc", ""), ("ab", "abc")],
)
def test_boyer_moore_degenerate_inputs(text, pattern):
    assert boyer_moore_match(text, pattern) == -1


def test_kmp_pattern_longer_than_text():
    assert kmp_match("ab", "abc") == -1