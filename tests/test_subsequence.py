import pytest

from algokit.subsequence import (
    longest_common_subsequence,
    longest_palindromic_subsequence,
)

SAMPLES = ["abcde", "ace", "bbbab", "cbbd", "character", "racecar", "a", "xyzzy"]


def test_lcs_known_example():
    assert longest_common_subsequence("abcde", "ace") == 3


def test_lcs_of_string_with_itself_is_its_length():
    for text in SAMPLES:
        assert longest_common_subsequence(text, text) == len(text)


def test_lcs_disjoint_alphabets():
    assert longest_common_subsequence("abc", "xyz") == 0


def test_lcs_empty_input():
    assert longest_common_subsequence("", "abc") == 0
    assert longest_common_subsequence("abc", "") == 0


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_lcs_symmetric_and_bounded(a, b):
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert 0 <= result <= min(len(a), len(b))


def test_lcs_works_on_lists():
    assert longest_common_subsequence([1, 2, 3, 4], [1, 2, 3, 4]) == 4


def test_lps_known_examples():
    assert longest_palindromic_subsequence("bbbab") == 4
    assert longest_palindromic_subsequence("cbbd") == 2


def test_lps_empty_and_single():
    assert longest_palindromic_subsequence("") == 0
    assert longest_palindromic_subsequence("q") == 1


def test_lps_of_palindrome_is_its_length():
    assert longest_palindromic_subsequence("racecar") == len("racecar")


@pytest.mark.parametrize("text", SAMPLES)
def test_lps_equals_lcs_with_reverse(text):
    assert longest_palindromic_subsequence(text) == longest_common_subsequence(
        text, text[::-1]
    )


@pytest.mark.parametrize("text", SAMPLES)
def test_lps_bounds(text):
    result = longest_palindromic_subsequence(text)
    assert 1 <= result <= len(text)