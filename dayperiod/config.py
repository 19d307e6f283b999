"""Package-wide settings.

The as-of date anchors every relative spec ("this_month", "last_quarter")
and the to-date period. Resolution order:

  1. Explicit ``asof`` argument
  2. DAYPERIOD_ASOF environment variable (any ISO date)
  3. Today's local date
"""

import logging
import os
from datetime import date
from typing import Optional

from dayperiod.dates.dateunits import DateLike, to_date

logger = logging.getLogger(__name__)

ASOF_ENV_VAR = "DAYPERIOD_ASOF"

# Tolerance for naming periods by length (see days_to_chunk)
DEFAULT_TOLERANCE_PCT = 10

# Average Gregorian month and year lengths
DAYS_PER_MONTH = 30.436875
DAYS_PER_YEAR = 365.2425


def asof_date(asof: Optional[DateLike] = None) -> date:
    """Return the reference date for relative specs.

    Args:
        asof: Explicit reference date (date, datetime or ISO string)

    Returns:
        The resolved as-of date

    Raises:
        InvalidInputError: If the argument or environment value is not a date
    """
    if asof is not None:
        return to_date(asof)

    env_value = os.getenv(ASOF_ENV_VAR)
    if env_value:
        logger.debug(f"Using as-of date from {ASOF_ENV_VAR}: {env_value}")
        return to_date(env_value)

    return date.today()


__all__ = [
    "ASOF_ENV_VAR",
    "DEFAULT_TOLERANCE_PCT",
    "DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "asof_date",
]
