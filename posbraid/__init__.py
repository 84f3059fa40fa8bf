"""
posbraid: enumeration of prime positive braid knots by genus.

For a fixed genus g, a depth-first search lists positive braid words
whose closures include every prime positive braid knot of genus g,
together with the DT code of each closure. The list is a superset:
composite knots and several words per knot may occur and have to be
removed by other means (e.g. knotscape).

PRUNING:
- Lexicographic minimality among cyclic conjugates
- No smaller word via far commutations or a braid-like Reidemeister-III move
- Primality lower bound from twist regions per generator column
- Component/genus budget: the closure must still be able to become a knot

Usage:
    from posbraid import BraidSearch, format_result

    for result in BraidSearch(2).run():
        print(format_result(result))
"""

from .braid import (
    max_generator,
    strand_count,
    first_betti_number,
    closure_permutation,
    component_count,
    last_letter_too_high,
    every_generator_repeated,
    word_to_string,
    word_from_string,
)
from .canonical import is_cyclic_minimal, passes_reidemeister_guard
from .primality import twist_region_count, missing_crossings_for_primality
from .dt_code import dt_code
from .search import (
    BraidSearch,
    BraidResult,
    Completability,
    check_completable,
    format_result,
    list_braids,
)
from .errors import (
    PosbraidError,
    ConfigurationError,
    InvariantViolation,
    DTEncodingError,
)

__version__ = "1.0.0"
__all__ = [
    # Structural queries
    "max_generator",
    "strand_count",
    "first_betti_number",
    "closure_permutation",
    "component_count",
    "last_letter_too_high",
    "every_generator_repeated",
    "word_to_string",
    "word_from_string",
    # Filters
    "is_cyclic_minimal",
    "passes_reidemeister_guard",
    "twist_region_count",
    "missing_crossings_for_primality",
    # Encoder
    "dt_code",
    # Search
    "BraidSearch",
    "BraidResult",
    "Completability",
    "check_completable",
    "format_result",
    "list_braids",
    # Errors
    "PosbraidError",
    "ConfigurationError",
    "InvariantViolation",
    "DTEncodingError",
]
