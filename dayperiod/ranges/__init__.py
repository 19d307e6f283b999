"""Range algebra over inclusive day ranges."""

from dayperiod.ranges.rangealgebra import (
    DayRange,
    covers,
    overlaps,
    contiguous,
    subset_of,
    proper_subset_of,
    superset_of,
    proper_superset_of,
    intersection,
    union,
    difference,
    overlaps_among,
    gaps,
    spanned_by,
)

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
