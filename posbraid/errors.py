"""
Exceptions raised by posbraid.

Two kinds of failure exist: bad input handed to the enumeration
(ConfigurationError) and internal invariants of the search or the DT
encoder that did not hold (InvariantViolation). The latter point at a
defect in the algorithm and are never retried or swallowed.
"""


class PosbraidError(Exception):
    """Base class for all posbraid errors."""


class ConfigurationError(PosbraidError, ValueError):
    """Invalid search parameters, e.g. a negative genus."""


class InvariantViolation(PosbraidError, RuntimeError):
    """An internal invariant of the search or encoder was broken."""


class DTEncodingError(InvariantViolation):
    """The closure trace of a word did not produce a valid DT code."""
