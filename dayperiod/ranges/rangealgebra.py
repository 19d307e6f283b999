"""Range Algebra
-------------

Set operations on inclusive day ranges, represented as DayRange pairs of
dates. Two ranges are contiguous when one ends the day before the other
begins; contiguous ranges do not overlap.

Operations that may have no result return None (single range) or an empty
list (several ranges).

Examples:
  >>> a = DayRange(date(2015, 1, 1), date(2015, 6, 30))
  >>> b = DayRange(date(2015, 4, 1), date(2015, 12, 31))
  >>> intersection(a, b)
  DayRange(first=datetime.date(2015, 4, 1), last=datetime.date(2015, 6, 30))

  >>> difference(a, b)
  [DayRange(first=datetime.date(2015, 1, 1), last=datetime.date(2015, 3, 31))]
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, NamedTuple, Optional

ONE_DAY = timedelta(days=1)


class DayRange(NamedTuple):
    """Inclusive range of days from first to last."""

    first: date
    last: date


def covers(r: DayRange, d: date) -> bool:
    """Whether day d falls within r."""
    return r.first <= d <= r.last


def overlaps(a: DayRange, b: DayRange) -> bool:
    """Whether a and b share at least one day."""
    return a.first <= b.last and b.first <= a.last


def contiguous(a: DayRange, b: DayRange) -> bool:
    """Whether a and b abut with neither a shared day nor a gap."""
    # last + 1 day overflows at date.max
    return (b.first - a.last).days == 1 or (a.first - b.last).days == 1


def subset_of(a: DayRange, b: DayRange) -> bool:
    """Whether every day of a is in b."""
    return b.first <= a.first and a.last <= b.last


def proper_subset_of(a: DayRange, b: DayRange) -> bool:
    """Whether a is a subset of b and not equal to it."""
    return subset_of(a, b) and a != b


def superset_of(a: DayRange, b: DayRange) -> bool:
    """Whether every day of b is in a."""
    return subset_of(b, a)


def proper_superset_of(a: DayRange, b: DayRange) -> bool:
    """Whether a is a superset of b and not equal to it."""
    return proper_subset_of(b, a)


def intersection(a: DayRange, b: DayRange) -> Optional[DayRange]:
    """Days common to a and b, or None if they do not overlap."""
    if not overlaps(a, b):
        return None
    return DayRange(max(a.first, b.first), min(a.last, b.last))


def union(a: DayRange, b: DayRange) -> Optional[DayRange]:
    """
    The single range covering a and b.

    Returns None when a gap separates them, since no single range can
    represent two disjoint spans.
    """
    if not (overlaps(a, b) or contiguous(a, b)):
        return None
    return DayRange(min(a.first, b.first), max(a.last, b.last))


def difference(a: DayRange, b: DayRange) -> list[DayRange]:
    """
    Parts of a not in b, in order.

    Returns:
        [] if b covers a, one range if b trims one end of a, two ranges if b
        lies strictly inside a, [a] if they do not overlap
    """
    if not overlaps(a, b):
        return [a]
    result = []
    if a.first < b.first:
        result.append(DayRange(a.first, b.first - ONE_DAY))
    if b.last < a.last:
        result.append(DayRange(b.last + ONE_DAY, a.last))
    return result


def _clipped(r: DayRange, ranges: Iterable[DayRange]) -> list[DayRange]:
    """Ranges clipped to r, dropping those outside it, sorted."""
    clipped = []
    for other in ranges:
        part = intersection(r, other)
        if part is not None:
            clipped.append(part)
    return sorted(clipped)


def _any_adjacent_overlap(ranges: list[DayRange]) -> bool:
    # For ranges sorted by first, an overlapping pair implies an
    # overlapping adjacent pair.
    return any(overlaps(a, b) for a, b in zip(ranges, ranges[1:]))


def overlaps_among(ranges: Iterable[DayRange], within: Optional[DayRange] = None) -> bool:
    """
    Whether any two of the ranges overlap each other.

    Args:
        ranges: Ranges to test pairwise
        within: If given, only overlaps occurring inside this range count
    """
    if within is None:
        return _any_adjacent_overlap(sorted(ranges))
    return _any_adjacent_overlap(_clipped(within, ranges))


def gaps(r: DayRange, ranges: Iterable[DayRange]) -> list[DayRange]:
    """
    Maximal sub-ranges of r covered by none of the ranges, in order.

    Overlaps among the ranges are irrelevant; parts outside r are ignored.
    """
    result = []
    cursor = r.first
    for part in _clipped(r, ranges):
        if part.first > cursor:
            result.append(DayRange(cursor, part.first - ONE_DAY))
        if part.last >= r.last:
            return result
        if part.last >= cursor:
            cursor = part.last + ONE_DAY
    result.append(DayRange(cursor, r.last))
    return result


def spanned_by(r: DayRange, ranges: Iterable[DayRange]) -> bool:
    """Whether the ranges together cover every day of r."""
    return not gaps(r, ranges)


__all__ = [
    "DayRange",
    "covers",
    "overlaps",
    "contiguous",
    "subset_of",
    "proper_subset_of",
    "superset_of",
    "proper_superset_of",
    "intersection",
    "union",
    "difference",
    "overlaps_among",
    "gaps",
    "spanned_by",
]
