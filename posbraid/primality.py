"""
Primality lower bound for positive braid closures.

A positive braid closure is a connected sum as soon as some pair of
neighbouring generators σ_i, σ_{i+1} alternates too rarely. Counting the
twist regions of each column therefore gives a lower bound on the number
of crossings that still have to be added before the closure can be prime.
"""

from typing import Sequence

import numpy as np

from .braid import max_generator
from .errors import InvariantViolation


def twist_region_count(word: Sequence[int], column: int) -> int:
    """
    Count the maximal runs of the subsequence of letters equal to
    column or column + 1.

    Example: for [1, 1, 2, 1, 3, 2] and column 1 the subsequence is
    1 1 2 1 2, which has four runs.
    """
    last = None
    regions = 0
    for letter in word:
        if (letter == column or letter == column + 1) and letter != last:
            last = letter
            regions += 1
    return regions


def missing_crossings_for_primality(word: Sequence[int]) -> int:
    """
    Lower bound on the crossings still required for a prime closure.

    For each column i in 1..max_generator - 1: two twist regions mark
    strand pair i - 1 as deficient, fewer than four mark pair i. Marks
    saturate at one per pair and the marked pairs are summed.

    Raises:
        InvariantViolation: if a column has fewer than two twist regions,
            i.e. some generator below the maximum is missing.
    """
    columns = max_generator(word)
    deficient = np.zeros(columns, dtype=bool)
    for i in range(1, columns):
        regions = twist_region_count(word, i)
        if regions < 2:
            raise InvariantViolation(
                f"Column {i} of {list(word)} has {regions} twist region(s); "
                f"every generator below the maximum must occur"
            )
        if regions == 2:
            deficient[i - 1] = True
        if regions < 4:
            deficient[i] = True
    return int(deficient.sum())
