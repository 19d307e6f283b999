"""dayperiod - Calendar Day Periods

Public API for inclusive spans of calendar days: construction, set algebra,
classification and subdivision into calendar chunks.

Usage:
    from dayperiod import Period, parse, parse_phrase

    # Build a period from specs
    q2 = parse("2015-2Q")                     # Period(2015-04-01..2015-06-30)

    # Set algebra
    parse("2015") & q2 == q2                  # True
    parse("2015") - q2                        # [2015-1Q, 2015-07-01 to 2015-12-31]

    # Calendar chunks
    q2.chunks("month")                        # three months
    parse_phrase("from 2014-11 to 2015-3Q per quarter")

    # Classification
    q2.chunk_sym()                            # ChunkKind.QUARTER
    Period("2011-02-11", "2011-03-10").chunk_name()   # 'Month'
"""

__version__ = "0.0.1"

# ============================================================================
# Period value type and algebra
# ============================================================================

from .period.periodidentity import (
    Period,           # Inclusive span of days
    FOREVER,          # BOT through EOT
    periods_overlap,  # Whether any two periods in a collection overlap
)

# ============================================================================
# Spec parsing and as-of helpers
# ============================================================================

from .period.periodapi import (
    parse,            # Period from from/to specs
    parse_phrase,     # Periods from "from X to Y per Z"
    chunk_containing, # Calendar chunk containing a date
    this_chunk,       # Calendar chunk containing the as-of date
    period_to_date,   # BOT through the as-of date
)
from .period.periodspec import resolve_spec
from .period.periodchunks import days_to_chunk

# ============================================================================
# Calendar units
# ============================================================================

from .dates.chunkkind import (
    ChunkKind,   # Enumeration of calendar chunk kinds
    CHUNKS,      # Chunk kinds, finest to coarsest
    chunk_cmp,   # Compare chunk kinds by coarseness
)
from .dates.dateunits import BOT, EOT, to_date
from .dates.tradingcalendar import is_trading_day

# ============================================================================
# Errors and configuration
# ============================================================================

from .errors import (
    PeriodError,
    InvalidRangeError,
    InvalidInputError,
    InvalidChunkKindError,
    ChunkTooLargeError,
)
from .config import asof_date

__all__ = [
    # Period
    "Period",
    "FOREVER",
    "periods_overlap",
    # Parsing
    "parse",
    "parse_phrase",
    "resolve_spec",
    "chunk_containing",
    "this_chunk",
    "period_to_date",
    # Calendar units
    "ChunkKind",
    "CHUNKS",
    "chunk_cmp",
    "days_to_chunk",
    "BOT",
    "EOT",
    "to_date",
    "is_trading_day",
    # Errors
    "PeriodError",
    "InvalidRangeError",
    "InvalidInputError",
    "InvalidChunkKindError",
    "ChunkTooLargeError",
    # Config
    "asof_date",
]
