"""
Canonical-form filters for positive braid words.

Both filters reject a word whenever an equivalent braid word is
lexicographically smaller, so that each conjugacy class is listed
through few representatives. They are applied to partial words during
the search: once a prefix is rejected, every extension of it is too.
"""

from typing import Sequence


def is_cyclic_minimal(word: Sequence[int]) -> bool:
    """
    Return True if no cyclic conjugate of the word is lexicographically
    smaller.

    For each rotation point k the rotated word word[k:] + word[:k] is
    compared with the word over its leading len(word) - k letters, which
    are already fixed for every extension of the word.
    """
    n = len(word)
    for k in range(1, n):
        if list(word[k:]) < list(word[:n - k]):
            return False
    return True


def passes_reidemeister_guard(word: Sequence[int]) -> bool:
    """
    Reject words ending in s, s-1, s up to far commutations.

    Letters differing from the last letter s by more than one commute
    with it and are skipped. If the two nearest letters that do not
    commute with s are s-1 and then s, a braid-like Reidemeister-III move
    turns the tail into the smaller s-1, s, s-1.
    """
    if not word:
        return True
    s = word[-1]
    i = len(word) - 2

    while i >= 0 and abs(word[i] - s) > 1:
        i -= 1
    if i < 0 or word[i] == s or word[i] == s + 1:
        return True

    i -= 1
    while i >= 0 and abs(word[i] - s) > 1:
        i -= 1
    if i < 0 or word[i] == s - 1 or word[i] == s + 1:
        return True
    return False
