"""Period API.

Public API for building periods from specs and phrases, and for the
as-of-date helpers. Resolves text such as "2015-3Q", "last_month" or
"from 2012-W5 to 2013-14W per month" to Period objects.
"""

import logging
from typing import Optional, Union

from dayperiod.config import asof_date
from dayperiod.dates.chunkkind import ChunkKind, chunk_cmp
from dayperiod.dates.dateunits import BOT, DateLike
from dayperiod.errors import InvalidInputError, PeriodError
from dayperiod.period.periodchunks import days_to_chunk
from dayperiod.period.periodidentity import FOREVER, Period, periods_overlap
from dayperiod.period.periodnormalize import split_phrase
from dayperiod.period.periodspec import resolve_spec

logger = logging.getLogger(__name__)


def parse(
    from_spec: Optional[str],
    to_spec: Optional[str] = None,
    *,
    asof: Optional[DateLike] = None,
) -> Optional[Period]:
    """
    Build a period from the start of one spec to the end of another.

    Args:
        from_spec: Spec whose first day starts the period
        to_spec: Spec whose last day ends the period (default: from_spec)
        asof: Reference date for relative and year-less specs

    Returns:
        Period, or None if either spec is "never"

    Raises:
        InvalidInputError: If from_spec is missing or a spec is unintelligible
        InvalidRangeError: If to_spec ends before from_spec starts

    Examples:
        >>> parse("2014-11")
        Period(2014-11-01..2014-11-30)

        >>> parse("2012-W5", "2013-14W")
        Period(2012-01-30..2013-04-07)

        >>> parse("last_quarter", asof=date(2025, 10, 2))
        Period(2025-07-01..2025-09-30)
    """
    if from_spec is None or not str(from_spec).strip():
        raise InvalidInputError("parse requires a from spec")
    if to_spec is None or not str(to_spec).strip():
        to_spec = from_spec

    first = resolve_spec(from_spec, "from", asof=asof)
    last = resolve_spec(to_spec, "to", asof=asof)
    if first is None or last is None:
        return None
    return Period(first, last)


def parse_phrase(phrase: str, *, asof: Optional[DateLike] = None) -> list[Period]:
    """
    Build periods from a phrase of the form "[from] X [to Y] [per <chunk>]".

    "to X" alone is treated like "from X". With "per", the period is divided
    into chunks of that size, keeping partial chunks at both ends.

    Args:
        phrase: Phrase to resolve
        asof: Reference date for relative and year-less specs

    Returns:
        List of periods; [] for "never"

    Raises:
        InvalidInputError: If the phrase or any spec in it is unintelligible

    Examples:
        >>> parse_phrase("from 2014-11 to 2015-01 per month")
        [Period(2014-11-01..2014-11-30), Period(2014-12-01..2014-12-31),
         Period(2015-01-01..2015-01-31)]

        >>> parse_phrase("2012")
        [Period(2012-01-01..2012-12-31)]
    """
    if phrase is None or not str(phrase).strip():
        raise InvalidInputError("unintelligible period phrase: empty")

    first_spec, second_spec, per = split_phrase(str(phrase))
    try:
        period = parse(first_spec, second_spec, asof=asof)
        if period is None:
            return []
        if per is None:
            return [period]
        logger.debug(f"Chunking {period!r} per {per}")
        return period.chunks(per, partial_first=True, partial_last=True)
    except PeriodError as e:
        raise InvalidInputError(f"unintelligible period phrase '{phrase}': {e}") from e


# ---- As-of helpers ----

def chunk_containing(d: DateLike, kind: Union[str, ChunkKind]) -> Period:
    """
    Return the calendar chunk of the given kind containing d.

    Examples:
        >>> chunk_containing("2015-06-13", "quarter")
        Period(2015-04-01..2015-06-30)
    """
    return Period.chunk_containing(d, kind)


def this_chunk(kind: Union[str, ChunkKind], *, asof: Optional[DateLike] = None) -> Period:
    """Return the chunk of the given kind containing the as-of date."""
    return Period.chunk_containing(asof_date(asof), kind)


def period_to_date(*, asof: Optional[DateLike] = None) -> Period:
    """Return the period from the beginning of time through the as-of date."""
    return Period(BOT, asof_date(asof))


__all__ = [
    "parse",
    "parse_phrase",
    "chunk_containing",
    "this_chunk",
    "period_to_date",
    "days_to_chunk",
    "chunk_cmp",
    "periods_overlap",
    "FOREVER",
    "Period",
]
