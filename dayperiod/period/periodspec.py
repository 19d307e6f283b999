"""Period Spec Resolution
----------------------

Core resolver for converting period specs to the span of days they denote.

Supports:
  - Keywords: "today", "yesterday", "tomorrow", "forever", "never"
  - Relative: "this_month", "last quarter", "next_biweek" (any chunk kind)
  - Days: "2014-11-05", "20141105"
  - Semimonths: "2010-05-I", "2010-05-II"
  - ISO weeks: "2012-W5", "2013-14W", "W02 2025" (Monday start)
  - Quarters: "2015-3Q", "3Q", "Q3 2015", "2015Q3"
  - Halves: "2015-1H", "1H", "H2 2015", "2015H2"
  - Months: "2014-11", "Nov 2014"
  - Years: "2014", "FY 2014"

Day keywords, relative specs and year-less quarters or halves are resolved
against the as-of date (see dayperiod.config.asof_date). Other specs never
consult it, so a bad DAYPERIOD_ASOF only affects specs that need it.

Key Design Principles:
  1. A spec resolves to a whole span; callers pick its start ("from" role)
     or end ("to" role)
  2. "never" resolves to None, which is not an error
  3. Anything else that is not a recognized spec raises InvalidInputError
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from dayperiod.config import asof_date
from dayperiod.dates.chunkkind import ChunkKind
from dayperiod.dates.dateunits import BOT, EOT, DateLike, add_days, to_date, unit_bounds
from dayperiod.errors import InvalidChunkKindError, InvalidInputError, PeriodError
from dayperiod.period.periodnormalize import (
    normalize_spec_text,
    extract_year,
    extract_quarter_half,
    extract_month,
    extract_semimonth,
    extract_iso_week,
    extract_relative,
    is_relative_spec,
)

logger = logging.getLogger(__name__)

Span = tuple[date, date]

ROLES = ("from", "to")

_DAY_KEYWORDS = {"yesterday": -1, "today": 0, "tomorrow": 1}


# ---- Calendar unit resolution ----

def _resolve_year(year: int) -> Span:
    return unit_bounds(ChunkKind.YEAR, date(year, 1, 1))


def _resolve_half(year: int, half: int) -> Span:
    """H1 = Jan-Jun, H2 = Jul-Dec."""
    return unit_bounds(ChunkKind.HALF, date(year, 6 * half - 5, 1))


def _resolve_quarter(year: int, quarter: int) -> Span:
    """Q1 = Jan-Mar, Q2 = Apr-Jun, Q3 = Jul-Sep, Q4 = Oct-Dec."""
    return unit_bounds(ChunkKind.QUARTER, date(year, 3 * quarter - 2, 1))


def _resolve_month(year: int, month: int) -> Span:
    return unit_bounds(ChunkKind.MONTH, date(year, month, 1))


def _resolve_semimonth(year: int, month: int, part: int) -> Span:
    """Part 1 = 1st-15th, part 2 = 16th-end of month."""
    return unit_bounds(ChunkKind.SEMIMONTH, date(year, month, 1 if part == 1 else 16))


def _resolve_week(year: int, week: int) -> Span:
    """
    Resolve an ISO week, Monday to Sunday.

    Example:
        >>> _resolve_week(2012, 5)
        (datetime.date(2012, 1, 30), datetime.date(2012, 2, 5))
    """
    last_week = Week.last_week_of_year(year).week
    if not 1 <= week <= last_week:
        raise InvalidInputError(f"{year} has ISO weeks 1 to {last_week}, not {week}")
    iso_week = Week(year, week)
    return iso_week.monday(), iso_week.sunday()


def _resolve_relative(offset: int, unit: str, today: date) -> Span:
    """
    Resolve "last"/"this"/"next" chunk relative to today.

    Example:
        >>> _resolve_relative(-1, "quarter", date(2025, 10, 2))
        (datetime.date(2025, 7, 1), datetime.date(2025, 9, 30))
    """
    try:
        kind = ChunkKind.from_name(unit)
        first, last = unit_bounds(kind, today)
    except InvalidChunkKindError as e:
        raise InvalidInputError(f"unintelligible relative spec: {e}") from e

    if offset < 0:
        return unit_bounds(kind, add_days(first, -1))
    if offset > 0:
        return unit_bounds(kind, add_days(last, 1))
    return first, last


def _resolve_absolute(spec: str, asof: Optional[DateLike]) -> Optional[Span]:
    """Resolve a normalized, non-keyword, non-relative spec; None if no form matches."""
    # 1. Full date
    if spec[:1].isdigit() and len(spec) in (8, 10) and spec.replace("-", "").isdigit():
        d = to_date(spec)
        return d, d

    # 2. Semimonth
    year, month, part = extract_semimonth(spec)
    if year:
        return _resolve_semimonth(year, month, part)

    # 3. ISO week
    iso_year, iso_week = extract_iso_week(spec)
    if iso_year:
        return _resolve_week(iso_year, iso_week)

    # 4. Quarter or half, defaulting to the as-of year
    period_type, period_num, year = extract_quarter_half(spec)
    if period_type is not None:
        year = year or asof_date(asof).year
    if period_type == "quarter":
        return _resolve_quarter(year, period_num)
    if period_type == "half":
        return _resolve_half(year, period_num)

    # 5. Month
    year, month = extract_month(spec)
    if year:
        return _resolve_month(year, month)

    # 6. Year only
    year = extract_year(spec)
    if year:
        return _resolve_year(year)

    return None


# ---- Main resolution functions ----

def resolve_spec_span(text: str, *, asof: Optional[DateLike] = None) -> Optional[Span]:
    """
    Resolve a spec to the (first, last) span of days it denotes.

    Resolution Strategy:
      1. Normalize text (lowercase, normalize dashes, etc.)
      2. Keywords: never, forever, today, yesterday, tomorrow
      3. Relative chunk against the as-of date
      4. Absolute forms: date, semimonth, week, quarter/half, month, year

    Args:
        text: Spec to resolve
        asof: Reference date for relative and year-less specs

    Returns:
        (first, last) dates, or None for "never"

    Raises:
        InvalidInputError: If the spec is empty or unintelligible

    Examples:
        >>> resolve_spec_span("2014-3Q")
        (datetime.date(2014, 7, 1), datetime.date(2014, 9, 30))

        >>> resolve_spec_span("last_month", asof=date(2014, 12, 10))
        (datetime.date(2014, 11, 1), datetime.date(2014, 11, 30))
    """
    if text is None or not str(text).strip():
        raise InvalidInputError("missing period spec")

    spec = normalize_spec_text(str(text))

    if spec == "never":
        return None
    if spec == "forever":
        return BOT, EOT
    if spec in _DAY_KEYWORDS:
        d = add_days(asof_date(asof), _DAY_KEYWORDS[spec])
        return d, d

    if is_relative_spec(spec):
        offset, unit = extract_relative(spec)
        today = asof_date(asof)
        span = _resolve_relative(offset, unit, today)
        logger.debug(f"Resolved relative spec '{text}' as of {today} to {span[0]}..{span[1]}")
        return span

    try:
        span = _resolve_absolute(spec, asof)
    except PeriodError:
        raise
    except ValueError as e:
        raise InvalidInputError(f"invalid date in spec '{text}': {e}") from e

    if span is None:
        raise InvalidInputError(f"unintelligible period spec '{text}'")
    return span


def resolve_spec(text: str, role: str = "from", *, asof: Optional[DateLike] = None) -> Optional[date]:
    """
    Resolve a spec to a single date.

    Args:
        text: Spec to resolve
        role: "from" for the first day of the spec's span, "to" for the last
        asof: Reference date for relative and year-less specs

    Returns:
        The date, or None for "never"

    Examples:
        >>> resolve_spec("2014-11", "to")
        datetime.date(2014, 11, 30)
    """
    if role not in ROLES:
        raise InvalidInputError(f"spec role must be 'from' or 'to', got '{role}'")

    span = resolve_spec_span(text, asof=asof)
    if span is None:
        return None
    return span[0] if role == "from" else span[1]


__all__ = [
    "resolve_spec_span",
    "resolve_spec",
]
