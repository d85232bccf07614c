"""Three ways to find the longest palindromic substring.

Each returns the leftmost of the longest palindromes, or an empty string
for empty input.
"""

from __future__ import annotations


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right - left - 1


def longest_palindrome_expand(s: str) -> str:
    """Grow a palindrome around every odd and even centre; O(n^2) time, O(1) space."""
    if not s:
        return s
    best_start, best_len = 0, 0
    centres = [(i, i) for i in range(len(s))] + [(i, i + 1) for i in range(len(s))]
    for left, right in centres:
        start, length = _expand(s, left, right)
        if length > best_len:
            best_start, best_len = start, length
    return s[best_start : best_start + best_len]


def longest_palindrome_dp(s: str) -> str:
    """Fill a table of palindromic ranges by increasing length; O(n^2) time and space."""
    if not s:
        return s
    n = len(s)
    table = [[False] * n for _ in range(n)]
    for i in range(n):
        table[i][i] = True
        if i and s[i] == s[i - 1]:
            table[i - 1][i] = True
    for length in range(3, n + 1):
        for start in range(n - length + 1):
            end = start + length - 1
            if s[start] == s[end] and table[start + 1][end - 1]:
                table[start][end] = True

    best_start, best_len = 0, 0
    for start, row in enumerate(table):
        for end in range(start, n):
            if row[end] and end - start + 1 > best_len:
                best_start, best_len = start, end - start + 1
    return s[best_start : best_start + best_len]


def longest_palindrome_manacher(s: str) -> str:
    """Manacher's algorithm; O(n) time and space."""
    if not s:
        return s
    positions = 2 * len(s) + 1
    lps = [0] * positions
    lps[1] = 1
    centre, centre_right = 1, 2
    best_len, best_centre = 1, 1

    for i in range(2, positions):
        mirror = 2 * centre - i
        diff = centre_right - i
        expand = False
        if diff >= 0:
            if lps[mirror] < diff:
                lps[i] = lps[mirror]
            elif lps[mirror] == diff and centre_right == positions - 1:
                lps[i] = lps[mirror]
            elif lps[mirror] == diff:
                lps[i] = lps[mirror]
                expand = True
            else:
                lps[i] = diff
                expand = True
        else:
            lps[i] = 0
            expand = True

        if expand:
            # Even positions are gaps between characters and always match.
            while i + lps[i] < positions and i - lps[i] > 0:
                right = i + lps[i] + 1
                if right % 2 != 0:
                    right_char = right // 2
                    left_char = (i - lps[i] - 1) // 2
                    if right_char >= len(s) or s[right_char] != s[left_char]:
                        break
                lps[i] += 1

        if lps[i] > best_len:
            best_len, best_centre = lps[i], i
        if i + lps[i] > centre_right:
            centre, centre_right = i, i + lps[i]

    start = (best_centre - best_len) // 2
    return s[start : start + best_len]