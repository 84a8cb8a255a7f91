"""Fuzzy similarity score between a typed abbreviation and a dictionary key."""

from __future__ import annotations

# Only an exact match may reach 1.0; partial matches are capped below it.
MAX_PARTIAL_SCORE = 0.999


def _triangular(n: int) -> int:
    return n * (n + 1) // 2


def score(pattern: str, candidate: str) -> float:
    """Score how well ``pattern`` abbreviates ``candidate``, in ``[0, 1]``.

    Comparison is case-insensitive. Equal strings score 1.0. An empty string
    on either side, or a first character that differs, scores 0. Otherwise
    pattern characters are aligned greedily left to right; the result is the
    product of the consumed share of ``pattern``, how early the matches sit in
    ``candidate`` (a character right after a skipped ``-`` counts double), and
    how contiguous the matched run is.
    """
    pattern = pattern.lower()
    candidate = candidate.lower()
    if pattern == candidate:
        return 1.0
    if not pattern or not candidate or pattern[0] != candidate[0]:
        return 0.0

    length = len(candidate)
    weight = length
    matched = 1
    adjacent = 0
    last = 0
    j = 1
    for char in pattern[1:]:
        found = False
        acronym = False
        while j < length:
            current = candidate[j]
            if current == char:
                found = True
                weight += (length - j) * (2 if acronym else 1)
                if j == last + 1:
                    adjacent += 1
                last = j
                j += 1
                break
            acronym = current == "-"
            j += 1
        if not found:
            break
        matched += 1

    consumed = matched / len(pattern)
    position = min(weight / _triangular(length), 1.0)
    contiguity = 0.5 + 0.5 * (adjacent / (matched - 1) if matched > 1 else 1.0)
    return min(consumed * position * contiguity, MAX_PARTIAL_SCORE)


__all__ = ["score", "MAX_PARTIAL_SCORE"]
