"""NYSE trading-day calendar.

Holiday rules are expressed with pandas' holiday machinery. Holiday sets
are computed per calendar year and cached.
"""

import logging
from datetime import date
from functools import lru_cache

try:
    import pandas as pd
    from pandas.tseries.holiday import (
        AbstractHolidayCalendar,
        GoodFriday,
        Holiday,
        USLaborDay,
        USMemorialDay,
        USPresidentsDay,
        USThanksgivingDay,
        nearest_workday,
        sunday_to_monday,
    )
    from pandas.tseries.offsets import DateOffset
except ImportError as e:
    raise ImportError("pandas not installed. pip install pandas") from e

from dateutil.relativedelta import MO

logger = logging.getLogger(__name__)


class NYSEHolidayCalendar(AbstractHolidayCalendar):
    """Full-day closures of the New York Stock Exchange.

    New Year's Day falling on a Saturday is not observed on the prior Friday.
    """

    rules = [
        Holiday("New Year's Day", month=1, day=1, observance=sunday_to_monday),
        Holiday(
            "Martin Luther King Jr. Day",
            start_date=pd.Timestamp("1998-01-01"),
            month=1,
            day=1,
            offset=DateOffset(weekday=MO(3)),
        ),
        USPresidentsDay,
        GoodFriday,
        USMemorialDay,
        Holiday(
            "Juneteenth",
            start_date=pd.Timestamp("2022-01-01"),
            month=6,
            day=19,
            observance=nearest_workday,
        ),
        Holiday("Independence Day", month=7, day=4, observance=nearest_workday),
        USLaborDay,
        USThanksgivingDay,
        Holiday("Christmas Day", month=12, day=25, observance=nearest_workday),
    ]


_CALENDAR = NYSEHolidayCalendar()


@lru_cache(maxsize=256)
def holidays_in_year(year: int) -> frozenset:
    """Return the NYSE holidays observed in a calendar year."""
    if not pd.Timestamp.min.year < year < pd.Timestamp.max.year:
        logger.debug(f"Year {year} is outside the pandas timestamp range; no holidays")
        return frozenset()
    index = _CALENDAR.holidays(
        start=pd.Timestamp(year, 1, 1),
        end=pd.Timestamp(year, 12, 31),
    )
    logger.debug(f"Built NYSE holiday set for {year}: {len(index)} holidays")
    return frozenset(ts.date() for ts in index)


def is_trading_day(d: date) -> bool:
    """Whether d is a weekday on which the NYSE is open.

    Examples:
        >>> is_trading_day(date(2014, 12, 25))
        False
        >>> is_trading_day(date(2014, 12, 26))
        True
    """
    return d.weekday() < 5 and d not in holidays_in_year(d.year)


__all__ = [
    "NYSEHolidayCalendar",
    "holidays_in_year",
    "is_trading_day",
]
