"""Exceptions raised by dayperiod.

All errors derive from PeriodError, which is a ValueError, so callers that
already guard date handling with ``except ValueError`` keep working.

Absence is not an error: an empty intersection, a union of disjoint periods,
or a chunk request that yields nothing are reported as ``None`` or ``[]``.
"""


class PeriodError(ValueError):
    """Base class for all dayperiod errors."""


class InvalidRangeError(PeriodError):
    """A period's first date is later than its last date."""


class InvalidInputError(PeriodError):
    """An argument cannot be converted to a date, or a spec is unintelligible."""


class InvalidChunkKindError(PeriodError):
    """Unknown chunk kind, or a bounds/ordering query on the irregular kind."""


class ChunkTooLargeError(PeriodError):
    """The requested chunk is longer than the period and no partial chunk is allowed."""


__all__ = [
    "PeriodError",
    "InvalidRangeError",
    "InvalidInputError",
    "InvalidChunkKindError",
    "ChunkTooLargeError",
]
