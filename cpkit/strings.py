"""Prefix function and Knuth–Morris–Pratt matching."""

from __future__ import annotations

from typing import Sequence


def prefix_function(s: Sequence) -> list[int]:
    """Return the prefix function of ``s``: longest proper border of each prefix."""
    pi = [0] * len(s)
    k = 0
    for i in range(1, len(s)):
        while k > 0 and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k
    return pi


def kmp(s: Sequence, p: Sequence) -> int:
    """Return the number of possibly overlapping occurrences of ``p`` in ``s``."""
    if not p:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(p)
    count = 0
    k = 0
    for ch in s:
        while k > 0 and ch != p[k]:
            k = pi[k - 1]
        if ch == p[k]:
            k += 1
        if k == len(p):
            count += 1
            k = pi[k - 1]
    return count


def all_prefixes_cnt(s: Sequence) -> list[int]:
    """Return, for each length ``j`` from 1, how often ``s[:j]`` occurs in ``s``."""
    n = len(s)
    pi = prefix_function(s)
    freq = [0] * (n + 1)
    for value in pi:
        freq[value] += 1
    for i in range(n, 0, -1):
        freq[pi[i - 1]] += freq[i]
    return [f + 1 for f in freq[1:]]