"""
DT codes of positive braid closures.

The Dowker-Thistlethwaite code of a knot diagram labels the crossings
met along a walk around the knot with 1, 2, ..., 2n. Each crossing gets
one odd and one even label; listing the even labels in the order of
their odd partners (signed by over/under information) gives the code.

For a braid closure the walk is a sequence of passes through the braid,
starting on the strand at position 0, until the walk is back at
position 0. A knot needs exactly one pass per strand.
"""

from typing import List, Sequence, Tuple

import numpy as np

from .braid import strand_count
from .errors import DTEncodingError


def trace_closure(word: Sequence[int]) -> Tuple[List[int], List[int], List[bool], int]:
    """
    Walk the closure of the braid from strand position 0.

    Returns (odd, even, positive, passes): the odd and even label and
    the sign of every crossing, indexed by word position (0 marks a
    missing label), and the number of passes through the braid.
    """
    n = len(word)
    odd = [0] * n
    even = [0] * n
    positive = [False] * n

    position = 0
    counter = 1
    passes = 0
    while True:
        for k, letter in enumerate(word):
            if letter != position and letter != position + 1:
                continue
            moves_right = letter == position + 1
            label_is_even = counter % 2 == 0
            if label_is_even:
                if even[k]:
                    raise DTEncodingError(f"Crossing {k} of {list(word)} has two even labels")
                even[k] = counter
            else:
                if odd[k]:
                    raise DTEncodingError(f"Crossing {k} of {list(word)} has two odd labels")
                odd[k] = counter
            positive[k] = label_is_even == (not moves_right)
            counter += 1
            position += 1 if moves_right else -1
        passes += 1
        if position == 0:
            break

    return odd, even, positive, passes


def dt_code(word: Sequence[int]) -> List[int]:
    """
    Compute the DT code of the closure of a positive braid word.

    The word must close to a knot. The result has one signed even entry
    per crossing; for the trefoil [1, 1, 1] it is [4, 6, 2].

    Raises:
        DTEncodingError: if the closure is not a knot, i.e. the walk does
            not take one pass per strand or leaves a crossing unlabelled.
    """
    if not word:
        raise DTEncodingError("Cannot encode the empty word")

    odd, even, positive, passes = trace_closure(word)
    strands = strand_count(word)
    if passes != strands:
        raise DTEncodingError(
            f"Closure of {list(word)} returned to its start after {passes} "
            f"pass(es), expected {strands}"
        )
    if 0 in odd or 0 in even:
        raise DTEncodingError(f"Closure of {list(word)} leaves crossings unlabelled")

    order = np.argsort(np.asarray(odd), kind='stable')
    signs = np.where(np.asarray(positive), 1, -1)
    code = np.asarray(even)[order] * signs[order]
    return [int(v) for v in code]
