import pytest

from cpkit.strings import all_prefixes_cnt, kmp, prefix_function


def _occurrences(text, pattern):
    return sum(1 for i in range(len(text)) if text.startswith(pattern, i))


def test_prefix_function_example():
    assert prefix_function("abcabcd") == [0, 0, 0, 1, 2, 3, 0]


@pytest.mark.parametrize("s", ["aabaaab", "abababab", "xyz", "a", ""])
def test_prefix_function_borders(s):
    pi = prefix_function(s)
    assert len(pi) == len(s)
    for i, k in enumerate(pi):
        assert 0 <= k <= i
        assert s[:k] == s[i + 1 - k : i + 1]


def test_prefix_function_on_lists():
    assert prefix_function([1, 2, 1, 2]) == prefix_function("abab")


def test_kmp_counts_overlaps():
    assert kmp("aaaa", "aa") == 3


@pytest.mark.parametrize(
    "text,pattern",
    [("abracadabra", "abra"), ("ababababa", "aba"), ("hello", "xyz"), ("ab", "abc")],
)
def test_kmp_matches_occurrences(text, pattern):
    assert kmp(text, pattern) == _occurrences(text, pattern)


def test_kmp_empty_pattern():
    with pytest.raises(ValueError):
        kmp("abc", "")


def test_all_prefixes_cnt_example():
    assert all_prefixes_cnt("aaa") == [3, 2, 1]


@pytest.mark.parametrize("s", ["abacaba", "aabaab", "abcd"])
def test_all_prefixes_cnt_counts(s):
    counts = all_prefixes_cnt(s)
    assert len(counts) == len(s)
    for j, count in enumerate(counts, start=1):
        assert count == _occurrences(s, s[:j])


def test_all_prefixes_cnt_empty():
    assert all_prefixes_cnt("") == []