"""Period Chunking
---------------

Calendar classification and subdivision of day spans.

  - classify_span: strict, boundary-exact chunk kind of a span
  - days_to_chunk: tolerant chunk kind from a day count alone
  - chunk_spans: divide a span into consecutive calendar chunks

These work on (first, last) date pairs; Period wraps them as methods.

Key Behaviors:
  1. classify_span checks YEAR down to WEEK and the first match wins
  2. days_to_chunk checks DAY up to YEAR; MONTH and longer allow a
     percentage tolerance, shorter kinds must match exactly
  3. chunk_spans drops partial chunks unless asked to keep them
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Union

from dayperiod.config import DEFAULT_TOLERANCE_PCT
from dayperiod.dates.chunkkind import CHUNKS, ChunkKind
from dayperiod.dates.dateunits import (
    add_days,
    days_between,
    is_beginning_of,
    is_end_of,
    unit_bounds,
)
from dayperiod.errors import ChunkTooLargeError, InvalidChunkKindError

logger = logging.getLogger(__name__)

Span = tuple[date, date]


# ---- Classification ----

def classify_span(first: date, last: date) -> ChunkKind:
    """
    Return the chunk kind a span is exactly, by calendar boundaries.

    Both endpoints must fall on the kind's boundaries and the length must be
    within the kind's bounds. Kinds are checked coarsest first.

    Examples:
        >>> classify_span(date(2013, 1, 1), date(2013, 12, 31))
        <ChunkKind.YEAR: 'year'>

        >>> classify_span(date(2013, 1, 1), date(2013, 12, 30))
        <ChunkKind.IRREGULAR: 'irregular'>
    """
    days = days_between(first, last) + 1
    if days == 1:
        return ChunkKind.DAY

    for kind in reversed(CHUNKS):
        if kind is ChunkKind.DAY:
            continue
        if (
            kind.min_days <= days <= kind.max_days
            and is_beginning_of(kind, first)
            and is_end_of(kind, last)
        ):
            return kind

    return ChunkKind.IRREGULAR


def days_to_chunk(days: int, tolerance_pct: float = DEFAULT_TOLERANCE_PCT) -> ChunkKind:
    """
    Return the chunk kind matching a number of days.

    Financial statements meant to cover a calendar unit are often a few days
    short or long, so MONTH and longer kinds accept lengths widened by
    tolerance_pct percent on each side. DAY, WEEK, BIWEEK and SEMIMONTH must
    match exactly. Set tolerance_pct to 0 for exact matching throughout.

    Args:
        days: Number of days in the period
        tolerance_pct: Allowed deviation, e.g. 10 for +/-10%

    Returns:
        First kind, finest to coarsest, whose range covers days; IRREGULAR if none

    Raises:
        ValueError: If tolerance_pct is negative

    Examples:
        >>> days_to_chunk(360)
        <ChunkKind.YEAR: 'year'>
        >>> days_to_chunk(360, 0)
        <ChunkKind.IRREGULAR: 'irregular'>
    """
    if tolerance_pct < 0:
        raise ValueError(f"tolerance_pct must not be negative, got {tolerance_pct}")

    for kind in CHUNKS:
        low, high = kind.min_days, kind.max_days
        if kind.is_tolerant:
            low = math.floor(low * (100.0 - tolerance_pct) / 100.0)
            high = math.floor(high * (100.0 + tolerance_pct) / 100.0)
        if low <= days <= high:
            return kind

    return ChunkKind.IRREGULAR


# ---- Subdivision ----

def chunk_spans(
    first: date,
    last: date,
    size: Union[str, ChunkKind] = ChunkKind.MONTH,
    *,
    partial_first: bool = False,
    partial_last: bool = False,
    round_up_last: bool = False,
    strict: bool = False,
) -> list[Span]:
    """
    Divide the span first..last into consecutive chunks of a calendar kind.

    Policy:
      - partial_first: keep the fragment before the first chunk boundary
      - partial_last: keep the fragment after the last whole chunk
      - round_up_last: extend the trailing fragment to a whole chunk, even
        past last; takes precedence over partial_last
      - strict: raise instead of returning [] when the span is shorter than
        any chunk of this kind and no partial chunk is allowed

    A span lying strictly inside one chunk yields [] without partial flags,
    otherwise [span] (or [whole chunk] with round_up_last).
    A span shorter than any chunk that straddles a chunk boundary yields
    [span] when either partial flag is set.

    Raises:
        InvalidChunkKindError: For unknown sizes or IRREGULAR
        ChunkTooLargeError: Only when strict is set

    Examples:
        >>> chunk_spans(date(2012, 1, 13), date(2012, 3, 31), "month")
        [(datetime.date(2012, 2, 1), datetime.date(2012, 2, 29)),
         (datetime.date(2012, 3, 1), datetime.date(2012, 3, 31))]
    """
    kind = ChunkKind.from_name(size)
    if kind is ChunkKind.IRREGULAR:
        raise InvalidChunkKindError("cannot chunk a period into irregular chunks")

    days = days_between(first, last) + 1
    allow_partial = partial_first or partial_last
    if strict and not allow_partial and days < kind.min_days:
        raise ChunkTooLargeError(
            f"any {kind.value} is longer than this period's {days} days"
        )

    # Span strictly inside the chunk containing first
    enclosing = unit_bounds(kind, first)
    if last <= enclosing[1] and (first, last) != enclosing:
        if not allow_partial:
            logger.debug(f"{first}..{last} lies inside one {kind.value}; no chunks")
            return []
        if round_up_last:
            return [enclosing]
        return [(first, last)]

    # Shorter than any chunk but straddling a boundary
    if allow_partial and days < kind.min_days:
        logger.debug(f"{first}..{last} is shorter than any {kind.value}; keeping it whole")
        return [(first, last)]

    spans: list[Span] = []
    chunk_start = first
    if not partial_first and not is_beginning_of(kind, first):
        chunk_start = add_days(enclosing[1], 1)

    while chunk_start <= last:
        chunk_end = unit_bounds(kind, chunk_start)[1]
        if chunk_end <= last or round_up_last:
            spans.append((chunk_start, chunk_end))
        elif partial_last:
            spans.append((chunk_start, last))
        else:
            logger.debug(f"Dropping partial {kind.value} {chunk_start}..{last}")
            break
        chunk_start = add_days(spans[-1][1], 1)

    return spans


__all__ = [
    "classify_span",
    "days_to_chunk",
    "chunk_spans",
]
