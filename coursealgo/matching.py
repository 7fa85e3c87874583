"""Exact string matching with Knuth-Morris-Pratt and Boyer-Moore."""

from __future__ import annotations

from typing import Dict, List


def failure_function(pattern: str) -> List[int]:
    """Length of the longest proper prefix that is also a suffix, per position."""
    failure = [0] * len(pattern)
    i, j = 1, 0
    while i < len(pattern):
        if pattern[i] == pattern[j]:
            failure[i] = j + 1
            i += 1
            j += 1
        elif j > 0:
            j = failure[j - 1]
        else:
            failure[i] = 0
            i += 1
    return failure


def kmp_match(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    failure = failure_function(pattern)
    i = j = 0
    last = len(pattern) - 1
    while i < len(text):
        if text[i] == pattern[j]:
            if j == last:
                return i - j
            i += 1
            j += 1
        elif j > 0:
            j = failure[j - 1]
        else:
            i += 1
    return -1


def last_occurrence(pattern: str) -> Dict[str, int]:
    """Last index of each character of ``pattern``; absent characters map nowhere."""
    return {char: index for index, char in enumerate(pattern)}


def boyer_moore_match(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1.

    Empty inputs and patterns longer than the text give -1.
    """
    if not pattern or not text or len(pattern) > len(text):
        return -1

    last = last_occurrence(pattern)
    n, m = len(text), len(pattern)
    i = j = m - 1
    while i < n:
        if text[i] == pattern[j]:
            if j == 0:
                return i
            i -= 1
            j -= 1
        else:
            shift = last.get(text[i], -1)
            i += m - min(j, 1 + shift)
            j = m - 1
    return -1