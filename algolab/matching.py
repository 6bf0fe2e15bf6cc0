"""Rabin-Karp substring search with a rolling hash."""

from __future__ import annotations

from itertools import zip_longest

BASE = 256
DEFAULT_MODULUS = 101


def _hash(chunk: str, modulus: int) -> int:
    value = 0
    for char in chunk:
        value = (BASE * value + ord(char)) % modulus
    return value


def rabin_karp(text: str, pattern: str, modulus: int = DEFAULT_MODULUS) -> list[int]:
    """Return every index at which the pattern occurs in the text, overlaps included."""
    if modulus <= 0:
        raise ValueError("modulus must be a positive integer")
    m, n = len(pattern), len(text)
    if m == 0:
        return list(range(n + 1))
    if m > n:
        return []

    leading = pow(BASE, m - 1, modulus)
    pattern_hash = _hash(pattern, modulus)
    window = _hash(text[:m], modulus)
    matches = []
    windows = zip_longest(text[: n - m + 1], text[m:])
    for start, (outgoing, incoming) in enumerate(windows):
        if window == pattern_hash and text.startswith(pattern, start):
            matches.append(start)
        if incoming is not None:
            window = (BASE * (window - ord(outgoing) * leading) + ord(incoming)) % modulus
    return matches