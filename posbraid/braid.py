"""
Positive braid words for posbraid.

A positive braid word is a plain list of generator indices, where the
integer i >= 1 stands for the Artin generator σ_i (strand i crossing
over strand i+1). No inverse generators exist in this model.

The search keeps a single list as its DFS stack, so everything here is
a pure function over a sequence of ints rather than a wrapper class.
"""

from typing import Dict, List, Sequence

LETTER_BASE = ord('a')


def max_generator(word: Sequence[int]) -> int:
    """
    Return the largest generator index of the word.

    By convention the result is never smaller than 1, so the empty word
    and words made only of σ_1 both live on two strands.
    """
    result = 1
    for letter in word:
        if letter > result:
            result = letter
    return result


def strand_count(word: Sequence[int]) -> int:
    """Number of strands of the braid (max generator + 1)."""
    return max_generator(word) + 1


def first_betti_number(word: Sequence[int]) -> int:
    """
    First Betti number b1 = 1 + crossings - strands of the closure's
    canonical Seifert surface. For a knot, b1 = 2 * genus.
    """
    return 1 + len(word) - strand_count(word)


def closure_permutation(word: Sequence[int]) -> List[int]:
    """
    Compose the word's adjacent transpositions left to right.

    Returns a list perm with perm[start] = end, both 0-indexed strand
    positions: the strand entering at the top in position start leaves
    the bottom in position end.
    """
    positions = list(range(strand_count(word)))
    for letter in word:
        i = letter - 1
        positions[i], positions[i + 1] = positions[i + 1], positions[i]
    perm = [0] * len(positions)
    for end, start in enumerate(positions):
        perm[start] = end
    return perm


def component_count(word: Sequence[int]) -> int:
    """
    Number of components of the braid closure.

    This is the number of cycles of the closure permutation; a knot has
    exactly one.
    """
    if not word:
        return 0
    perm = closure_permutation(word)
    visited = [False] * len(perm)
    components = 0
    for start in range(len(perm)):
        if visited[start]:
            continue
        components += 1
        current = start
        while not visited[current]:
            visited[current] = True
            current = perm[current]
    return components


def last_letter_too_high(word: Sequence[int]) -> bool:
    """
    Check whether the final letter adds a strand nothing else justifies.

    True iff the last letter exceeds one more than the largest of the
    other letters. Words shorter than two letters never trigger this.
    """
    if len(word) < 2:
        return False
    return word[-1] > 1 + max(word[:-1])


def generator_multiplicities(word: Sequence[int]) -> Dict[int, int]:
    """Occurrences of each generator 1..max_generator(word)."""
    counts = {g: 0 for g in range(1, max_generator(word) + 1)}
    for letter in word:
        counts[letter] += 1
    return counts


def every_generator_repeated(word: Sequence[int]) -> bool:
    """True if each generator up to the maximum occurs at least twice."""
    return all(n >= 2 for n in generator_multiplicities(word).values())


def word_to_string(word: Sequence[int]) -> str:
    """Render a word one character per letter: σ_1 -> 'b', σ_2 -> 'c', ..."""
    return ''.join(chr(LETTER_BASE + letter) for letter in word)


def word_from_string(text: str) -> List[int]:
    """Parse the output of word_to_string back into a list of generators."""
    word = []
    for char in text:
        letter = ord(char) - LETTER_BASE
        if letter < 1:
            raise ValueError(f"Character {char!r} does not encode a positive generator")
        word.append(letter)
    return word
