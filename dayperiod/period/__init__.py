"""Period module: day-span value type, set algebra, chunking and spec parsing.

Public API:
    Period(first, last)
        Immutable inclusive span of days

    parse(from_spec, to_spec=None, asof=None) -> Period | None
        Period from the start of one spec to the end of another

    parse_phrase(phrase, asof=None) -> list[Period]
        Periods from "[from] X [to Y] [per <chunk>]"

    chunk_containing(date, kind) / this_chunk(kind, asof=None) -> Period
        Calendar chunk around a date

Examples:
    >>> from dayperiod.period import Period, parse
    >>>
    >>> parse("2015") & parse("2015-2Q")
    Period(2015-04-01..2015-06-30)
    >>>
    >>> Period("2012-01-01", "2012-03-30").chunks("month", round_up_last=True)
    [Period(2012-01-01..2012-01-31), Period(2012-02-01..2012-02-29),
     Period(2012-03-01..2012-03-31)]
"""

from dayperiod.period.periodidentity import (
    Period,
    FOREVER,
    periods_overlap,
)
from dayperiod.period.periodchunks import (
    classify_span,
    days_to_chunk,
    chunk_spans,
)
from dayperiod.period.periodspec import (
    resolve_spec,
    resolve_spec_span,
)
from dayperiod.period.periodapi import (
    parse,
    parse_phrase,
    chunk_containing,
    this_chunk,
    period_to_date,
)

__all__ = [
    "Period",
    "FOREVER",
    "periods_overlap",
    "classify_span",
    "days_to_chunk",
    "chunk_spans",
    "resolve_spec",
    "resolve_spec_span",
    "parse",
    "parse_phrase",
    "chunk_containing",
    "this_chunk",
    "period_to_date",
]
