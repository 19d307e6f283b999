"""Calendar Unit Arithmetic
------------------------

Beginning and end dates of the calendar unit (chunk) containing a date,
boundary predicates, day arithmetic and date coercion.

Unit definitions:
  - week: ISO week, Monday to Sunday (isoweek library)
  - biweek: Monday of an odd ISO week to Sunday of the following week;
    an odd final week of an ISO year (week 53) is a biweek on its own
  - semimonth: 1st-15th and 16th-end of month
  - bimonth: Jan-Feb, Mar-Apr, May-Jun, Jul-Aug, Sep-Oct, Nov-Dec
  - quarter, half, year: calendar quarters, halves and years

Examples:
  >>> beginning_of("quarter", date(2015, 6, 13))
  datetime.date(2015, 4, 1)

  >>> end_of(ChunkKind.SEMIMONTH, date(2015, 2, 20))
  datetime.date(2015, 2, 28)

  >>> is_beginning_of("week", date(2015, 6, 8))   # a Monday
  True
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Callable, Union

try:
    from dateutil.parser import isoparse
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from dayperiod.dates.chunkkind import ChunkKind
from dayperiod.errors import InvalidChunkKindError, InvalidInputError

DateLike = Union[date, datetime, str]

# Commercial beginning and end of time
BOT = date(1900, 1, 1)
EOT = date(3000, 12, 31)

_DATE_STRING = re.compile(r"^\d{4}-?\d{2}-?\d{2}(?:[T ].*)?$")


# ---- Coercion and day arithmetic ----

def to_date(value: DateLike) -> date:
    """
    Convert a date-like value to a date.

    Accepts dates, datetimes (including pandas Timestamps, truncated to the
    day) and ISO strings ('YYYY-MM-DD', 'YYYYMMDD', optionally with a time).

    Raises:
        InvalidInputError: If the value cannot be converted

    Examples:
        >>> to_date("2013-12-31")
        datetime.date(2013, 12, 31)

        >>> to_date(datetime(2013, 1, 1, 4, 13, 8))
        datetime.date(2013, 1, 1)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _DATE_STRING.match(text):
            raise InvalidInputError(f"cannot convert '{value}' to a date")
        try:
            return isoparse(text).date()
        except (ValueError, OverflowError) as e:
            raise InvalidInputError(f"cannot convert '{value}' to a date: {e}") from e
    raise InvalidInputError(f"cannot convert {type(value).__name__} {value!r} to a date")


def add_days(d: date, n: int) -> date:
    """Return the date n days after d (before, if n is negative)."""
    return d + timedelta(days=n)


def days_between(a: date, b: date) -> int:
    """Return b - a in days."""
    return (b - a).days


# ---- Unit helpers ----

def quarter_of(d: date) -> int:
    """Calendar quarter (1-4) containing d."""
    return (d.month - 1) // 3 + 1


def half_of(d: date) -> int:
    """Calendar half (1-2) containing d."""
    return 1 if d.month <= 6 else 2


def bimonth_of(d: date) -> int:
    """Bimonth (1-6) containing d."""
    return (d.month - 1) // 2 + 1


def semimonth_of(d: date) -> int:
    """Semimonth within the month (1 or 2) containing d."""
    return 1 if d.day <= 15 else 2


def _end_of_month(d: date) -> date:
    return d + relativedelta(day=31)


def _month_span(year: int, start_month: int, months: int) -> tuple[date, date]:
    start = date(year, start_month, 1)
    end = _end_of_month(date(year, start_month + months - 1, 1))
    return start, end


def _week_bounds(d: date) -> tuple[date, date]:
    week = Week.withdate(d)
    return week.monday(), week.sunday()


def _biweek_bounds(d: date) -> tuple[date, date]:
    week = Week.withdate(d)
    if week.week % 2 == 0:
        return (week - 1).monday(), week.sunday()
    following = week + 1
    if following.year != week.year:
        return week.monday(), week.sunday()
    return week.monday(), following.sunday()


def _semimonth_bounds(d: date) -> tuple[date, date]:
    if d.day <= 15:
        return d.replace(day=1), d.replace(day=15)
    return d.replace(day=16), _end_of_month(d)


def _month_bounds(d: date) -> tuple[date, date]:
    return d.replace(day=1), _end_of_month(d)


def _bimonth_bounds(d: date) -> tuple[date, date]:
    return _month_span(d.year, 2 * bimonth_of(d) - 1, 2)


def _quarter_bounds(d: date) -> tuple[date, date]:
    return _month_span(d.year, 3 * quarter_of(d) - 2, 3)


def _half_bounds(d: date) -> tuple[date, date]:
    return _month_span(d.year, 6 * half_of(d) - 5, 6)


def _year_bounds(d: date) -> tuple[date, date]:
    return date(d.year, 1, 1), date(d.year, 12, 31)


_UNIT_BOUNDS: dict[ChunkKind, Callable[[date], tuple[date, date]]] = {
    ChunkKind.DAY: lambda d: (d, d),
    ChunkKind.WEEK: _week_bounds,
    ChunkKind.BIWEEK: _biweek_bounds,
    ChunkKind.SEMIMONTH: _semimonth_bounds,
    ChunkKind.MONTH: _month_bounds,
    ChunkKind.BIMONTH: _bimonth_bounds,
    ChunkKind.QUARTER: _quarter_bounds,
    ChunkKind.HALF: _half_bounds,
    ChunkKind.YEAR: _year_bounds,
}


# ---- Public boundary API ----

def unit_bounds(kind: Union[str, ChunkKind], d: DateLike) -> tuple[date, date]:
    """
    Return (beginning, end) of the chunk of the given kind containing d.

    Raises:
        InvalidChunkKindError: For unknown kinds or IRREGULAR
        InvalidInputError: If d is not date-like
    """
    kind = ChunkKind.from_name(kind)
    if kind is ChunkKind.IRREGULAR:
        raise InvalidChunkKindError("irregular chunk has no calendar boundaries")
    return _UNIT_BOUNDS[kind](to_date(d))


def beginning_of(kind: Union[str, ChunkKind], d: DateLike) -> date:
    """First day of the chunk of the given kind containing d."""
    return unit_bounds(kind, d)[0]


def end_of(kind: Union[str, ChunkKind], d: DateLike) -> date:
    """Last day of the chunk of the given kind containing d."""
    return unit_bounds(kind, d)[1]


def is_beginning_of(kind: Union[str, ChunkKind], d: DateLike) -> bool:
    """Whether d is the first day of its chunk of the given kind."""
    return beginning_of(kind, d) == to_date(d)


def is_end_of(kind: Union[str, ChunkKind], d: DateLike) -> bool:
    """Whether d is the last day of its chunk of the given kind."""
    return end_of(kind, d) == to_date(d)


__all__ = [
    "DateLike",
    "BOT",
    "EOT",
    "to_date",
    "add_days",
    "days_between",
    "quarter_of",
    "half_of",
    "bimonth_of",
    "semimonth_of",
    "unit_bounds",
    "beginning_of",
    "end_of",
    "is_beginning_of",
    "is_end_of",
]
