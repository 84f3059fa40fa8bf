"""
Depth-first enumeration of positive braid knots of a given genus.

The search walks braid words in increasing order, using the current
word itself as the DFS stack:

- the last letter is too high: pop it and advance the parent letter;
- the word cannot be completed: advance the last letter;
- b1 is still below the target: push the smallest connecting letter;
- otherwise the word is a result: emit it and advance the last letter.

Every emitted word is minimal among its cyclic conjugates, cannot be
made smaller by far commutations or a braid-like Reidemeister-III move,
passes the primality bound, closes to a knot and has b1 = 2 * genus.
The output may still contain composite knots and several words per knot.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, TextIO
import sys

from .braid import (
    component_count,
    first_betti_number,
    last_letter_too_high,
    word_to_string,
)
from .canonical import is_cyclic_minimal, passes_reidemeister_guard
from .dt_code import dt_code
from .errors import ConfigurationError
from .primality import missing_crossings_for_primality


@dataclass(frozen=True)
class Completability:
    """
    Outcome of the four pruning checks on a partial word.

    Attributes:
        can_close_to_knot: the remaining budget can still merge all
            closure components into one
        can_become_prime: the primality bound fits into the remaining budget
        cyclic_minimal: no cyclic conjugate is smaller
        reidemeister_minimal: no Reidemeister-III rewrite is smaller
    """
    can_close_to_knot: bool
    can_become_prime: bool
    cyclic_minimal: bool
    reidemeister_minimal: bool

    @property
    def admissible(self) -> bool:
        return (self.can_close_to_knot and self.can_become_prime
                and self.cyclic_minimal and self.reidemeister_minimal)

    def failed_checks(self) -> List[str]:
        return [name for name, ok in (
            ('components', self.can_close_to_knot),
            ('primality', self.can_become_prime),
            ('cyclic', self.cyclic_minimal),
            ('reidemeister', self.reidemeister_minimal),
        ) if not ok]


def check_completable(word: Sequence[int], target_b1: int) -> Completability:
    """
    Check whether a partial word can still be completed to a result of
    first Betti number target_b1 by appending letters.
    """
    remaining = target_b1 - first_betti_number(word)
    return Completability(
        can_close_to_knot=component_count(word) - remaining <= 1,
        can_become_prime=missing_crossings_for_primality(word) <= remaining,
        cyclic_minimal=is_cyclic_minimal(word),
        reidemeister_minimal=passes_reidemeister_guard(word),
    )


@dataclass
class BraidResult:
    """
    One accepted braid word.

    Attributes:
        index: 1-based position in discovery order
        word: the braid word (a copy, safe to keep)
        dt_code: signed DT code of the closure, one entry per crossing
    """
    index: int
    word: List[int]
    dt_code: List[int]

    @property
    def crossings(self) -> int:
        return len(self.word)

    def __str__(self) -> str:
        return format_result(self)


def format_result(result: BraidResult) -> str:
    """
    Render a result as its two output lines (without trailing newline):
    the word string, then ': <crossings> <index> <dt code ...>'.
    """
    code = ''.join(f" {v}" for v in result.dt_code)
    return f"{word_to_string(result.word)}\n: {result.crossings} {result.index}{code}"


class BraidSearch:
    """
    Enumerates candidate positive braid words for prime knots of one genus.

    The search is a single deterministic run: every call to run() starts
    from the seed word with its own word and counter, so iterators taken
    from one instance are independent and yield the same results.
    """

    SEED = (1, 1)

    def __init__(self, genus: int, verbose: bool = False, stream: Optional[TextIO] = None):
        """
        Initialize the search.

        Args:
            genus: Target knot genus (>= 0; genus 0 yields nothing)
            verbose: Narrate every search step on the diagnostic stream
            stream: Diagnostic stream, defaults to sys.stderr
        """
        if isinstance(genus, bool) or not isinstance(genus, int):
            raise ConfigurationError(f"Genus must be an integer, got {genus!r}")
        if genus < 0:
            raise ConfigurationError(f"Genus must be non-negative, got {genus}")
        self.genus = genus
        self.target_b1 = 2 * genus
        self.verbose = verbose
        self.stream = stream

    def _log(self, message: str, end: str = "\n") -> None:
        print(message, end=end, file=self.stream if self.stream is not None else sys.stderr)

    def run(self) -> Iterator[BraidResult]:
        """Yield the accepted words in discovery order."""
        word = list(self.SEED)
        counter = 0
        verbose = self.verbose

        while len(word) > 1:
            if verbose:
                self._log(f'Working on "{word_to_string(word)}". ', end="")

            if last_letter_too_high(word):
                if verbose:
                    self._log("Last letter too high, popping back.")
                word.pop()
                word[-1] += 1
                continue
            if verbose:
                self._log("Last letter good. ", end="")

            completability = check_completable(word, self.target_b1)
            if not completability.admissible:
                if verbose:
                    failed = ', '.join(completability.failed_checks())
                    self._log(f"Not completable ({failed}), increasing.")
                word[-1] += 1
                continue
            if verbose:
                self._log("Is completable. ", end="")

            if first_betti_number(word) < self.target_b1:
                if verbose:
                    self._log("Too short, appending.")
                word.append(1 if word[-1] == 1 else word[-1] - 1)
                continue

            if verbose:
                self._log("Is good!")
            counter += 1
            yield BraidResult(index=counter, word=list(word), dt_code=dt_code(word))
            word[-1] += 1


def list_braids(genus: int, verbose: bool = False) -> List[BraidResult]:
    """Run a full search and collect all results."""
    return list(BraidSearch(genus, verbose=verbose).run())
