"""Longest common subsequence and longest palindromic subsequence."""

from __future__ import annotations

from collections.abc import Sequence


def longest_common_subsequence(text1: Sequence, text2: Sequence) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    if not text1 or not text2:
        return 0
    previous = [0] * (len(text2) + 1)
    for left in text1:
        current = [0]
        for j, right in enumerate(text2, start=1):
            if left == right:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindromic_subsequence(s: Sequence) -> int:
    """Return the length of the longest subsequence of ``s`` that reads the same reversed."""
    n = len(s)
    if n == 0:
        return 0
    if n == 1:
        return 1
    # previous[j] holds the answer for s[i + 1 : j + 1]; current for s[i : j + 1].
    previous = [0] * n
    for i in reversed(range(n)):
        current = [0] * n
        current[i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                current[j] = previous[j - 1] + 2
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current
    return previous[n - 1]