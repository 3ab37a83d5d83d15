"""Substring search with a rolling Horner hash and by brute force."""

from __future__ import annotations

RADIX = 26
PRIME = 997


def _digit(char: str) -> int:
    return ord(char) - ord("a")


def horner_hash(pattern: str) -> int:
    """Hash of ``pattern`` in base 26 modulo 997, letters counted from 'a'."""
    value = 0
    for char in pattern:
        value = (value * RADIX + _digit(char)) % PRIME
    return value


def rabin_karp(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text`` by rolling hash, or -1."""
    n, m = len(text), len(pattern)
    if m == 0:
        return 0
    if m > n:
        return -1
    target = horner_hash(pattern)
    window = horner_hash(text[:m])
    leading = pow(RADIX, m - 1, PRIME)
    for start in range(n - m + 1):
        if start:
            dropped = _digit(text[start - 1]) * leading
            window = ((window - dropped) * RADIX + _digit(text[start + m - 1])) % PRIME
        if window == target and text[start : start + m] == pattern:
            return start
    return -1


def brute_search(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text`` by checking every offset, or -1."""
    m = len(pattern)
    for start in range(len(text) - m + 1):
        if all(text[start + j] == char for j, char in enumerate(pattern)):
            return start
    return -1