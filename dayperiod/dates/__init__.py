"""Calendar date collaborator: chunk kinds, unit boundaries, trading days."""

from dayperiod.dates.chunkkind import (
    ChunkKind,
    CHUNKS,
    chunk_cmp,
    suggest_chunk_name,
)
from dayperiod.dates.dateunits import (
    BOT,
    EOT,
    DateLike,
    to_date,
    add_days,
    days_between,
    quarter_of,
    half_of,
    unit_bounds,
    beginning_of,
    end_of,
    is_beginning_of,
    is_end_of,
)
from dayperiod.dates.tradingcalendar import (
    is_trading_day,
    holidays_in_year,
)

__all__ = [
    # Chunk kinds
    "ChunkKind",
    "CHUNKS",
    "chunk_cmp",
    "suggest_chunk_name",
    # Date arithmetic
    "BOT",
    "EOT",
    "DateLike",
    "to_date",
    "add_days",
    "days_between",
    "quarter_of",
    "half_of",
    "unit_bounds",
    "beginning_of",
    "end_of",
    "is_beginning_of",
    "is_end_of",
    # Trading calendar
    "is_trading_day",
    "holidays_in_year",
]
