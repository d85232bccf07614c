"""Word ladders and word breaks."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _adjacent(a: str, b: str) -> bool:
    return len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1


def ladder_length(begin_word: str, end_word: str, word_list: Sequence[str]) -> int:
    """Return the number of words in the shortest ladder from ``begin_word`` to ``end_word``.

    Each step changes exactly one letter and must land on a word of
    ``word_list``. The count includes both ends; 0 means there is no ladder.
    """
    words = list(dict.fromkeys(word_list))
    if end_word not in words:
        return 0
    remaining = set(words)
    frontier = [w for w in words if _adjacent(w, begin_word)]
    remaining.difference_update(frontier)
    length = 2
    while frontier:
        if end_word in frontier:
            return length
        following = []
        for word in frontier:
            found = [w for w in remaining if _adjacent(w, word)]
            remaining.difference_update(found)
            following.extend(found)
        frontier = following
        length += 1
    return 0


def word_break(s: str, word_dict: Sequence[str]) -> list[str]:
    """Return every way to split ``s`` into words of ``word_dict``, space separated.

    Sentences come in the order found by trying dictionary words in turn.
    """
    words = list(dict.fromkeys(word_dict))
    if any(not word for word in words):
        raise ValueError("dictionary words must not be empty")

    @lru_cache(maxsize=None)
    def split_from(index: int) -> tuple[tuple[str, ...], ...]:
        if index == len(s):
            return ((),)
        return tuple(
            (word, *rest)
            for word in words
            if s.startswith(word, index)
            for rest in split_from(index + len(word))
        )

    return [" ".join(sentence) for sentence in split_from(0)]