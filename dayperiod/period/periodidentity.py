"""Period Value Type
-----------------

Period is an immutable, inclusive span of whole calendar days.

  - Construction validates first <= last; endpoints may be dates,
    datetimes or ISO strings
  - Equality, hashing and ordering use (first, last), so periods sort by
    start and then shortest to longest
  - Set operations go through the range algebra on DayRange and come back
    as Periods
  - Calendar classification and chunking delegate to periodchunks

Examples:
  >>> q2 = Period("2015-04-01", "2015-06-30")
  >>> str(q2)
  '2015-2Q'

  >>> Period("2015-01-01", "2015-12-31") & q2 == q2
  True

  >>> [str(p) for p in q2.chunks("month")]
  ['2015-04', '2015-05', '2015-06']
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional, Union

from dayperiod.config import DAYS_PER_MONTH, DAYS_PER_YEAR, DEFAULT_TOLERANCE_PCT
from dayperiod.dates.chunkkind import ChunkKind
from dayperiod.dates.dateunits import (
    BOT,
    EOT,
    DateLike,
    add_days,
    days_between,
    half_of,
    is_beginning_of,
    is_end_of,
    quarter_of,
    to_date,
    unit_bounds,
)
from dayperiod.dates.tradingcalendar import is_trading_day
from dayperiod.errors import InvalidRangeError
from dayperiod.period.periodchunks import chunk_spans, classify_span, days_to_chunk
from dayperiod.ranges import rangealgebra
from dayperiod.ranges.rangealgebra import DayRange


@dataclass(frozen=True, order=True, repr=False)
class Period:
    """Inclusive span of days from first to last."""

    first: date
    last: date

    def __post_init__(self):
        first = to_date(self.first)
        last = to_date(self.last)
        if first > last:
            raise InvalidRangeError(
                f"Period's first date is later than its last date: {first} > {last}"
            )
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "last", last)

    @classmethod
    def from_day_range(cls, r: DayRange) -> "Period":
        return cls(r.first, r.last)

    @classmethod
    def chunk_containing(cls, d: DateLike, kind: Union[str, ChunkKind]) -> "Period":
        """
        Return the calendar chunk of the given kind that contains d.

        Examples:
            >>> Period.chunk_containing("2015-06-13", "semimonth")
            Period(2015-06-01..2015-06-15)
        """
        return cls(*unit_bounds(kind, d))

    # ---- Conversion ----

    def to_day_range(self) -> DayRange:
        return DayRange(self.first, self.last)

    def __str__(self) -> str:
        first, last = self.first, self.last
        same_year = first.year == last.year
        if same_year and is_beginning_of(ChunkKind.YEAR, first) and is_end_of(ChunkKind.YEAR, last):
            return str(first.year)
        if (
            same_year
            and half_of(first) == half_of(last)
            and is_beginning_of(ChunkKind.HALF, first)
            and is_end_of(ChunkKind.HALF, last)
        ):
            return f"{first.year}-{half_of(first)}H"
        if (
            same_year
            and quarter_of(first) == quarter_of(last)
            and is_beginning_of(ChunkKind.QUARTER, first)
            and is_end_of(ChunkKind.QUARTER, last)
        ):
            return f"{first.year}-{quarter_of(first)}Q"
        if (
            same_year
            and first.month == last.month
            and is_beginning_of(ChunkKind.MONTH, first)
            and is_end_of(ChunkKind.MONTH, last)
        ):
            return f"{first.year}-{first.month:02d}"
        return f"{first.isoformat()} to {last.isoformat()}"

    def __repr__(self) -> str:
        return f"Period({self.first.isoformat()}..{self.last.isoformat()})"

    def tex_quote(self) -> str:
        """Endpoints joined by an en-dash for LaTeX, e.g. "2015-04-01--2015-06-30"."""
        return f"{self.first.isoformat()}--{self.last.isoformat()}"

    # ---- Comparison ----

    def compare(self, other) -> Optional[int]:
        """
        Compare by first date, then last date.

        Returns:
            -1, 0 or 1; None if other is not a Period
        """
        if not isinstance(other, Period):
            return None
        mine = (self.first, self.last)
        theirs = (other.first, other.last)
        return (mine > theirs) - (mine < theirs)

    # ---- Size and enumeration ----

    def size(self) -> int:
        """Number of days, counting both endpoints."""
        return days_between(self.first, self.last) + 1

    days = size

    def __len__(self) -> int:
        return self.size()

    def months(self, days_in_month: float = DAYS_PER_MONTH) -> float:
        """Length in months of days_in_month days (average month by default)."""
        return self.size() / days_in_month

    def years(self, days_in_year: float = DAYS_PER_YEAR) -> float:
        """Length in years of days_in_year days (average year by default)."""
        return self.size() / days_in_year

    def __iter__(self) -> Iterator[date]:
        d = self.first
        yield d
        while d < self.last:
            d = add_days(d, 1)
            yield d

    def trading_days(self) -> list[date]:
        """Days in the period on which the NYSE is open."""
        return [d for d in self if is_trading_day(d)]

    # ---- Set algebra ----

    def contains(self, d: DateLike) -> bool:
        """Whether the date falls within the period.

        Raises:
            InvalidInputError: If d is not date-like
        """
        return rangealgebra.covers(self.to_day_range(), to_date(d))

    def __contains__(self, d) -> bool:
        return self.contains(d)

    def overlaps(self, other: "Period") -> bool:
        return rangealgebra.overlaps(self.to_day_range(), other.to_day_range())

    def is_contiguous_with(self, other: "Period") -> bool:
        return rangealgebra.contiguous(self.to_day_range(), other.to_day_range())

    def subset_of(self, other: "Period") -> bool:
        return rangealgebra.subset_of(self.to_day_range(), other.to_day_range())

    def proper_subset_of(self, other: "Period") -> bool:
        return rangealgebra.proper_subset_of(self.to_day_range(), other.to_day_range())

    def superset_of(self, other: "Period") -> bool:
        return rangealgebra.superset_of(self.to_day_range(), other.to_day_range())

    def proper_superset_of(self, other: "Period") -> bool:
        return rangealgebra.proper_superset_of(self.to_day_range(), other.to_day_range())

    def intersection(self, other: "Period") -> Optional["Period"]:
        """Days common to both periods, or None if they do not overlap."""
        result = rangealgebra.intersection(self.to_day_range(), other.to_day_range())
        if result is None:
            return None
        return Period.from_day_range(result)

    narrow_to = intersection

    def __and__(self, other):
        if not isinstance(other, Period):
            return NotImplemented
        return self.intersection(other)

    def union(self, other: "Period") -> Optional["Period"]:
        """Period covering both, or None if a gap separates them."""
        result = rangealgebra.union(self.to_day_range(), other.to_day_range())
        if result is None:
            return None
        return Period.from_day_range(result)

    def __or__(self, other):
        if not isinstance(other, Period):
            return NotImplemented
        return self.union(other)

    def difference(self, other: "Period") -> list["Period"]:
        """Parts of this period not covered by other, in order."""
        return [
            Period.from_day_range(r)
            for r in rangealgebra.difference(self.to_day_range(), other.to_day_range())
        ]

    def __sub__(self, other):
        if not isinstance(other, Period):
            return NotImplemented
        return self.difference(other)

    def overlaps_among(self, periods: Iterable["Period"]) -> bool:
        """Whether any two of the periods overlap within this period."""
        return rangealgebra.overlaps_among(
            [p.to_day_range() for p in periods], within=self.to_day_range()
        )

    def spanned_by(self, periods: Iterable["Period"]) -> bool:
        """Whether the periods together cover every day of this period."""
        return rangealgebra.spanned_by(self.to_day_range(), [p.to_day_range() for p in periods])

    def gaps(self, periods: Iterable["Period"]) -> list["Period"]:
        """Maximal sub-periods of this period that none of the periods cover."""
        return [
            Period.from_day_range(r)
            for r in rangealgebra.gaps(self.to_day_range(), [p.to_day_range() for p in periods])
        ]

    # ---- Chunking ----

    def chunk_sym(self) -> ChunkKind:
        """Calendar chunk kind this period exactly is, or IRREGULAR."""
        return classify_span(self.first, self.last)

    def chunk_name(self, tolerance_pct: float = DEFAULT_TOLERANCE_PCT) -> str:
        """
        Name for the period judged by length alone.

        A statement period from Feb 11 to Mar 10 is a "Month" even though it
        is not a calendar month.
        """
        return days_to_chunk(self.size(), tolerance_pct).label

    def chunks(
        self,
        size: Union[str, ChunkKind] = ChunkKind.MONTH,
        *,
        partial_first: bool = False,
        partial_last: bool = False,
        round_up_last: bool = False,
        strict: bool = False,
    ) -> list["Period"]:
        """Consecutive calendar chunks of this period; see periodchunks.chunk_spans."""
        spans = chunk_spans(
            self.first,
            self.last,
            size,
            partial_first=partial_first,
            partial_last=partial_last,
            round_up_last=round_up_last,
            strict=strict,
        )
        return [Period(first, last) for first, last in spans]


def periods_overlap(periods: Iterable[Period]) -> bool:
    """Whether any two periods in the collection overlap."""
    return rangealgebra.overlaps_among([p.to_day_range() for p in periods])


# Commercial beginning of time to commercial end of time
FOREVER = Period(BOT, EOT)


__all__ = [
    "Period",
    "FOREVER",
    "periods_overlap",
]
