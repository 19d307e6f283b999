"""Comprehensive tests for the Period value type.

These tests verify Period behaviour across:
- Construction: coercion of endpoints, invalid ranges
- Ordering, equality, hashing and rendering
- Enumeration and trading days
- Set algebra: containment, overlap, intersection, union, difference, gaps

Run with: pytest tests/test_period.py -v
Coverage: pytest tests/test_period.py --cov=dayperiod.period
"""

import dataclasses
import pytest
from datetime import date, datetime

import pandas as pd

from dayperiod.dates.chunkkind import ChunkKind
from dayperiod.dates.dateunits import BOT, EOT
from dayperiod.errors import InvalidChunkKindError, InvalidInputError, InvalidRangeError
from dayperiod.period.periodidentity import FOREVER, Period, periods_overlap
from dayperiod.ranges.rangealgebra import DayRange


# ============================================================================
# Construction
# ============================================================================

class TestConstruction:
    """Test Period construction and endpoint coercion"""

    def test_dates(self):
        p = Period(date(2014, 1, 1), date(2014, 1, 31))
        assert p.first == date(2014, 1, 1)
        assert p.last == date(2014, 1, 31)

    def test_strings(self):
        assert Period("2014-01-01", "20140131") == Period(date(2014, 1, 1), date(2014, 1, 31))

    def test_datetimes_truncated(self):
        p = Period(datetime(2013, 1, 1, 4, 13, 8), pd.Timestamp("2013-12-31 23:59"))
        assert p == Period(date(2013, 1, 1), date(2013, 12, 31))
        assert type(p.first) is date

    def test_single_day(self):
        p = Period("2014-06-30", "2014-06-30")
        assert p.size() == 1

    def test_first_after_last_raises(self):
        with pytest.raises(InvalidRangeError, match="later than its last date"):
            Period("2014-02-01", "2014-01-31")

    @pytest.mark.parametrize("first", ["2014-02-30", "bogus", 2014, None])
    def test_bad_endpoint_raises(self, first):
        with pytest.raises(InvalidInputError):
            Period(first, "2014-12-31")

    def test_immutable(self):
        p = Period("2014-01-01", "2014-01-31")
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.first = date(2014, 1, 2)

    def test_round_trip(self):
        p = Period("2014-01-13", "2014-03-02")
        assert Period(p.first, p.last) == p
        assert Period.from_day_range(p.to_day_range()) == p

    def test_to_day_range(self):
        p = Period("2014-01-13", "2014-03-02")
        assert p.to_day_range() == DayRange(date(2014, 1, 13), date(2014, 3, 2))

    def test_chunk_containing(self):
        assert Period.chunk_containing("2015-06-13", "semimonth") == Period("2015-06-01", "2015-06-15")
        assert Period.chunk_containing(date(2015, 6, 13), ChunkKind.HALF) == Period("2015-01-01", "2015-06-30")

    def test_chunk_containing_irregular_raises(self):
        with pytest.raises(InvalidChunkKindError):
            Period.chunk_containing("2015-06-13", "irregular")

    def test_forever(self):
        assert FOREVER == Period(BOT, EOT)
        assert BOT in FOREVER
        assert EOT in FOREVER


# ============================================================================
# Ordering and rendering
# ============================================================================

class TestOrdering:
    """Test equality, hashing and ordering"""

    def test_equality_and_hash(self):
        a = Period("2014-01-01", "2014-01-31")
        b = Period(date(2014, 1, 1), date(2014, 1, 31))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_sort_by_first_then_last(self):
        jan = Period("2014-01-01", "2014-01-31")
        jan_10 = Period("2014-01-01", "2014-01-10")
        dec = Period("2013-12-01", "2013-12-31")
        assert sorted([jan, jan_10, dec]) == [dec, jan_10, jan]

    def test_compare(self):
        jan = Period("2014-01-01", "2014-01-31")
        feb = Period("2014-02-01", "2014-02-28")
        assert jan.compare(feb) == -1
        assert feb.compare(jan) == 1
        assert jan.compare(Period("2014-01-01", "2014-01-31")) == 0

    def test_compare_non_period_is_none(self):
        jan = Period("2014-01-01", "2014-01-31")
        assert jan.compare("2014-01") is None
        assert jan.compare(date(2014, 1, 1)) is None

    def test_ordering_non_period_raises(self):
        with pytest.raises(TypeError):
            Period("2014-01-01", "2014-01-31") < date(2014, 1, 1)

    def test_not_equal_to_other_types(self):
        assert Period("2014-01-01", "2014-01-31") != "2014-01"


class TestRendering:
    """Test str, repr and tex_quote"""

    @pytest.mark.parametrize("first,last,expected", [
        ("2013-01-01", "2013-12-31", "2013"),
        ("2015-07-01", "2015-12-31", "2015-2H"),
        ("2015-01-01", "2015-06-30", "2015-1H"),
        ("2015-04-01", "2015-06-30", "2015-2Q"),
        ("2012-02-01", "2012-02-29", "2012-02"),
        ("2015-01-05", "2015-02-10", "2015-01-05 to 2015-02-10"),
        ("2013-01-01", "2014-12-31", "2013-01-01 to 2014-12-31"),
        ("2015-02-01", "2015-03-31", "2015-02-01 to 2015-03-31"),
        ("2015-06-13", "2015-06-13", "2015-06-13 to 2015-06-13"),
    ])
    def test_str(self, first, last, expected):
        assert str(Period(first, last)) == expected

    def test_repr(self):
        assert repr(Period("2015-04-01", "2015-06-30")) == "Period(2015-04-01..2015-06-30)"

    def test_tex_quote(self):
        assert Period("2015-04-01", "2015-06-30").tex_quote() == "2015-04-01--2015-06-30"
        assert Period("2015-06-13", "2015-06-13").tex_quote() == "2015-06-13--2015-06-13"


# ============================================================================
# Size and enumeration
# ============================================================================

class TestSize:
    """Test size, days, months and years"""

    def test_size(self):
        p = Period("2012-01-01", "2012-12-31")
        assert p.size() == 366
        assert p.days() == 366
        assert len(p) == 366

    def test_months_and_years(self):
        p = Period("2013-01-01", "2013-12-31")
        assert p.months() == pytest.approx(365 / 30.436875)
        assert p.years() == pytest.approx(365 / 365.2425)
        assert p.months(30) == pytest.approx(365 / 30)
        assert p.years(365) == pytest.approx(1.0)

    def test_iteration(self):
        p = Period("2014-02-27", "2014-03-02")
        assert list(p) == [date(2014, 2, 27), date(2014, 2, 28), date(2014, 3, 1), date(2014, 3, 2)]

    def test_iteration_restarts(self):
        p = Period("2014-02-27", "2014-03-02")
        assert list(p) == list(p)

    def test_trading_days(self):
        days = Period("2014-12-01", "2014-12-31").trading_days()
        assert len(days) == 22
        assert date(2014, 12, 25) not in days
        assert days[0] == date(2014, 12, 1)
        assert days[-1] == date(2014, 12, 31)


# ============================================================================
# Set algebra
# ============================================================================

class TestContainment:
    """Test contains, overlaps and subset relations"""

    def test_contains(self):
        p = Period("2014-12-01", "2014-12-31")
        assert p.contains(date(2014, 12, 25))
        assert "2014-12-31" in p
        assert date(2015, 1, 1) not in p

    def test_contains_bad_date_raises(self):
        with pytest.raises(InvalidInputError):
            Period("2014-12-01", "2014-12-31").contains("Christmas")

    def test_overlaps(self):
        jan = Period("2014-01-01", "2014-01-31")
        assert jan.overlaps(Period("2014-01-31", "2014-02-15"))
        assert not jan.overlaps(Period("2014-02-01", "2014-02-15"))

    def test_is_contiguous_with(self):
        jan = Period("2014-01-01", "2014-01-31")
        assert jan.is_contiguous_with(Period("2014-02-01", "2014-02-28"))
        assert Period("2014-02-01", "2014-02-28").is_contiguous_with(jan)
        assert not jan.is_contiguous_with(Period("2014-02-02", "2014-02-28"))
        assert not jan.is_contiguous_with(Period("2014-01-31", "2014-02-28"))

    def test_subsets(self, q2_2015):
        year = Period("2015-01-01", "2015-12-31")
        assert q2_2015.subset_of(year)
        assert q2_2015.proper_subset_of(year)
        assert year.superset_of(q2_2015)
        assert year.proper_superset_of(q2_2015)
        assert year.subset_of(year)
        assert not year.proper_subset_of(year)


class TestIntersection:
    """Test intersection and its aliases"""

    def test_intersection(self, q2_2015):
        year = Period("2015-01-01", "2015-12-31")
        assert year & q2_2015 == q2_2015
        assert year.intersection(q2_2015) == q2_2015
        assert year.narrow_to(q2_2015) == q2_2015

    def test_commutes(self):
        a = Period("2015-01-01", "2015-06-30")
        b = Period("2015-04-01", "2015-12-31")
        assert a & b == b & a == Period("2015-04-01", "2015-06-30")

    def test_disjoint_is_none(self, q2_2015):
        assert q2_2015 & Period("2015-07-01", "2015-09-30") is None

    def test_non_period_operand_raises(self, q2_2015):
        with pytest.raises(TypeError):
            q2_2015 & date(2015, 5, 1)


class TestUnion:
    """Test union"""

    def test_overlapping(self):
        a = Period("2015-01-01", "2015-06-30")
        b = Period("2015-04-01", "2015-12-31")
        assert a | b == Period("2015-01-01", "2015-12-31")

    def test_contiguous(self, q2_2015):
        q1 = Period("2015-01-01", "2015-03-31")
        assert q1.union(q2_2015) == Period("2015-01-01", "2015-06-30")

    def test_gap_is_none(self, q2_2015):
        assert q2_2015 | Period("2015-07-02", "2015-09-30") is None

    def test_defined_iff_overlap_or_contiguous(self, q2_2015):
        others = [
            Period("2015-01-01", "2015-03-30"),
            Period("2015-01-01", "2015-03-31"),
            Period("2015-05-01", "2015-05-31"),
            Period("2015-06-30", "2015-08-01"),
            Period("2015-07-01", "2015-07-31"),
            Period("2015-07-02", "2015-07-31"),
        ]
        for other in others:
            defined = q2_2015.overlaps(other) or q2_2015.is_contiguous_with(other)
            assert (q2_2015 | other is not None) == defined


class TestDifference:
    """Test difference"""

    def test_inner_split(self, q2_2015):
        year = Period("2015-01-01", "2015-12-31")
        assert year - q2_2015 == [Period("2015-01-01", "2015-03-31"), Period("2015-07-01", "2015-12-31")]

    def test_covered_is_empty(self, q2_2015):
        assert q2_2015.difference(Period("2015-01-01", "2015-12-31")) == []

    def test_disjoint_is_self(self, q2_2015):
        assert q2_2015 - Period("2016-01-01", "2016-12-31") == [q2_2015]

    def test_days_are_in_a_and_not_in_b(self):
        a = Period("2015-01-10", "2015-03-20")
        b = Period("2015-02-01", "2015-04-30")
        remaining = {d for part in a - b for d in part}
        assert remaining == {d for d in a if d not in b}


class TestCollections:
    """Test overlaps_among, periods_overlap, spanned_by and gaps"""

    def test_overlaps_among_restricted_to_self(self):
        march = Period("2015-03-01", "2015-03-31")
        periods = [
            Period("2015-01-01", "2015-02-20"),
            Period("2015-02-10", "2015-03-05"),
            Period("2015-03-06", "2015-03-31"),
        ]
        assert not march.overlaps_among(periods)
        assert periods_overlap(periods)

    def test_overlaps_among_inside(self):
        march = Period("2015-03-01", "2015-03-31")
        periods = [Period("2015-03-01", "2015-03-10"), Period("2015-03-10", "2015-03-31")]
        assert march.overlaps_among(periods)

    def test_periods_overlap_disjoint(self):
        assert not periods_overlap([
            Period("2015-03-01", "2015-03-10"),
            Period("2015-01-01", "2015-02-28"),
            Period("2015-03-11", "2015-03-31"),
        ])

    def test_gaps(self):
        q2 = Period("2014-04-01", "2014-06-30")
        periods = [
            Period("2014-03-01", "2014-04-20"),
            Period("2014-05-01", "2014-05-11"),
            Period("2014-05-25", "2014-07-15"),
        ]
        assert q2.gaps(periods) == [Period("2014-04-21", "2014-04-30"), Period("2014-05-12", "2014-05-24")]
        assert not q2.spanned_by(periods)

    def test_gaps_and_clipped_inputs_cover_self(self):
        q2 = Period("2014-04-01", "2014-06-30")
        periods = [Period("2014-04-05", "2014-04-07"), Period("2014-06-01", "2014-07-04")]
        covered = {d for p in periods for d in p if d in q2}
        uncovered = {d for g in q2.gaps(periods) for d in g}
        assert covered | uncovered == set(q2)
        assert not covered & uncovered

    def test_spanned_by_with_overlaps_and_excess(self):
        q2 = Period("2014-04-01", "2014-06-30")
        periods = [Period("2014-01-01", "2014-05-15"), Period("2014-05-01", "2014-12-31")]
        assert q2.spanned_by(periods)
        assert q2.gaps(periods) == []


class TestCalendarLimits:
    """Test periods ending on the last representable date"""

    def test_union_with_distant_period_is_none(self):
        end = Period(date(9999, 12, 30), date.max)
        assert end | Period("2000-01-01", "2000-01-02") is None
        assert not end.is_contiguous_with(Period("2000-01-01", "2000-01-02"))

    def test_union_with_contiguous_period(self):
        end = Period(date(9999, 12, 30), date.max)
        assert Period("9999-12-01", "9999-12-29") | end == Period(date(9999, 12, 1), date.max)

    def test_gaps_and_spanned_by(self):
        end = Period(date(9999, 12, 1), date.max)
        assert end.gaps([end]) == []
        assert end.spanned_by([end])
        assert end.gaps([Period("9999-12-01", "9999-12-30")]) == [Period(date.max, date.max)]

    def test_iteration(self):
        assert list(Period(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date.max]
