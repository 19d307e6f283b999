"""Chunk Kinds
-----------

The closed set of calendar units a period can be divided into, plus
IRREGULAR for spans that match none of them.

Every lookup table below is keyed by ChunkKind and covers every member it
applies to. Adding a kind means adding a row to each table.

Examples:
  >>> ChunkKind.from_name("Semi-month")
  <ChunkKind.SEMIMONTH: 'semimonth'>

  >>> ChunkKind.QUARTER.min_days, ChunkKind.QUARTER.max_days
  (90, 92)

  >>> ChunkKind.YEAR > ChunkKind.HALF
  True
"""

from __future__ import annotations

import re
from enum import Enum
from functools import total_ordering
from typing import Optional, Union

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from dayperiod.errors import InvalidChunkKindError


@total_ordering
class ChunkKind(Enum):
    """Calendar chunk kinds, declared finest to coarsest."""

    DAY = "day"
    WEEK = "week"
    BIWEEK = "biweek"
    SEMIMONTH = "semimonth"
    MONTH = "month"
    BIMONTH = "bimonth"
    QUARTER = "quarter"
    HALF = "half"
    YEAR = "year"
    IRREGULAR = "irregular"

    @classmethod
    def from_name(cls, value: Union[str, "ChunkKind"]) -> "ChunkKind":
        """
        Resolve a chunk kind from its name.

        Matching ignores case, spaces, hyphens and underscores, so
        "Semi-month", "semi_month" and "SEMIMONTH" all resolve.

        Raises:
            InvalidChunkKindError: If the name matches no kind
        """
        if isinstance(value, ChunkKind):
            return value
        if not isinstance(value, str):
            raise InvalidChunkKindError(
                f"chunk kind must be a name, got {type(value).__name__}"
            )

        key = re.sub(r"[\s_\-]+", "", value.strip().lower())
        kind = _BY_NAME.get(key)
        if kind is None:
            message = f"unknown chunk size '{value}'"
            suggestion = suggest_chunk_name(value)
            if suggestion:
                message += f"; did you mean '{suggestion}'?"
            raise InvalidChunkKindError(message)
        return kind

    @property
    def min_days(self) -> int:
        """Fewest days a chunk of this kind can have."""
        return self._bounds()[0]

    @property
    def max_days(self) -> int:
        """Most days a chunk of this kind can have."""
        return self._bounds()[1]

    @property
    def nominal_days(self) -> int:
        """Conventional length in days (30 for IRREGULAR)."""
        return _NOMINAL_DAYS[self]

    @property
    def label(self) -> str:
        """Display label ("Quarter", "Semi-month"); IRREGULAR is "Period"."""
        return _LABELS[self]

    @property
    def rank(self) -> int:
        """Position from DAY (0) to YEAR (8)."""
        if self is ChunkKind.IRREGULAR:
            raise InvalidChunkKindError("irregular chunk has no rank")
        return CHUNKS.index(self)

    @property
    def is_tolerant(self) -> bool:
        """Whether length-based naming allows a tolerance for this kind."""
        return self in TOLERANT_KINDS

    def _bounds(self) -> tuple[int, int]:
        if self is ChunkKind.IRREGULAR:
            raise InvalidChunkKindError("no minimum or maximum period for irregular chunk")
        return _BOUNDS[self]

    def __lt__(self, other):
        if not isinstance(other, ChunkKind):
            return NotImplemented
        return self.rank < other.rank


# Finest to coarsest; IRREGULAR is not part of the order
CHUNKS = (
    ChunkKind.DAY,
    ChunkKind.WEEK,
    ChunkKind.BIWEEK,
    ChunkKind.SEMIMONTH,
    ChunkKind.MONTH,
    ChunkKind.BIMONTH,
    ChunkKind.QUARTER,
    ChunkKind.HALF,
    ChunkKind.YEAR,
)

_BOUNDS = {
    ChunkKind.DAY: (1, 1),
    ChunkKind.WEEK: (7, 7),
    ChunkKind.BIWEEK: (14, 14),
    ChunkKind.SEMIMONTH: (13, 16),   # Feb 16-28 is 13 days
    ChunkKind.MONTH: (28, 31),
    ChunkKind.BIMONTH: (59, 62),
    ChunkKind.QUARTER: (90, 92),
    ChunkKind.HALF: (181, 184),
    ChunkKind.YEAR: (365, 366),
}

_NOMINAL_DAYS = {
    ChunkKind.DAY: 1,
    ChunkKind.WEEK: 7,
    ChunkKind.BIWEEK: 14,
    ChunkKind.SEMIMONTH: 15,
    ChunkKind.MONTH: 30,
    ChunkKind.BIMONTH: 60,
    ChunkKind.QUARTER: 90,
    ChunkKind.HALF: 180,
    ChunkKind.YEAR: 365,
    ChunkKind.IRREGULAR: 30,
}

_LABELS = {
    ChunkKind.DAY: "Day",
    ChunkKind.WEEK: "Week",
    ChunkKind.BIWEEK: "Bi-week",
    ChunkKind.SEMIMONTH: "Semi-month",
    ChunkKind.MONTH: "Month",
    ChunkKind.BIMONTH: "Bi-month",
    ChunkKind.QUARTER: "Quarter",
    ChunkKind.HALF: "Half",
    ChunkKind.YEAR: "Year",
    ChunkKind.IRREGULAR: "Period",
}

# Kinds whose length-based naming is exact; the rest allow a tolerance
STRICT_KINDS = frozenset({
    ChunkKind.DAY,
    ChunkKind.WEEK,
    ChunkKind.BIWEEK,
    ChunkKind.SEMIMONTH,
})
TOLERANT_KINDS = frozenset(CHUNKS) - STRICT_KINDS

_BY_NAME = {kind.value: kind for kind in ChunkKind}


def suggest_chunk_name(name: str, score_cutoff: float = 75.0) -> Optional[str]:
    """
    Return the closest chunk name to a misspelled one, if any is close enough.

    Uses RapidFuzz WRatio against the names of the calendar chunks.

    Examples:
        >>> suggest_chunk_name("quater")
        'quarter'

        >>> suggest_chunk_name("wally") is None
        True
    """
    if not name or not name.strip():
        return None
    match = process.extractOne(
        name.strip().lower(),
        [kind.value for kind in CHUNKS],
        scorer=fuzz.WRatio,
        score_cutoff=score_cutoff,
    )
    return match[0] if match else None


def chunk_cmp(a: Union[str, ChunkKind], b: Union[str, ChunkKind]) -> int:
    """
    Compare two chunk kinds by coarseness.

    Returns:
        1 if a is coarser than b, -1 if finer, 0 if the same

    Examples:
        >>> chunk_cmp("year", "half")
        1
        >>> chunk_cmp(ChunkKind.DAY, ChunkKind.WEEK)
        -1
    """
    a_rank = ChunkKind.from_name(a).rank
    b_rank = ChunkKind.from_name(b).rank
    return (a_rank > b_rank) - (a_rank < b_rank)


__all__ = [
    "ChunkKind",
    "CHUNKS",
    "STRICT_KINDS",
    "TOLERANT_KINDS",
    "suggest_chunk_name",
    "chunk_cmp",
]
