"""Tests for resolving period specs to spans and dates.

All relative and year-less specs are resolved against the asof fixture,
Wednesday 2012-07-18, unless a test says otherwise.
"""

import pytest
from datetime import date

from dayperiod.config import ASOF_ENV_VAR
from dayperiod.dates.dateunits import BOT, EOT
from dayperiod.errors import InvalidInputError
from dayperiod.period.periodspec import resolve_spec, resolve_spec_span


def span(first, last):
    return (date.fromisoformat(first), date.fromisoformat(last))


class TestKeywords:
    """Test keyword specs"""

    def test_never(self, asof):
        assert resolve_spec_span("never", asof=asof) is None
        assert resolve_spec("Never", "to", asof=asof) is None

    def test_forever(self, asof):
        assert resolve_spec_span("forever", asof=asof) == (BOT, EOT)

    @pytest.mark.parametrize("text,expected", [
        ("today", "2012-07-18"),
        ("Yesterday", "2012-07-17"),
        ("TOMORROW", "2012-07-19"),
    ])
    def test_days(self, asof, text, expected):
        assert resolve_spec_span(text, asof=asof) == span(expected, expected)


class TestRelative:
    """Test this/last/next chunk specs"""

    @pytest.mark.parametrize("text,expected", [
        ("this_month", span("2012-07-01", "2012-07-31")),
        ("last_month", span("2012-06-01", "2012-06-30")),
        ("next_month", span("2012-08-01", "2012-08-31")),
        ("last quarter", span("2012-04-01", "2012-06-30")),
        ("current_quarter", span("2012-07-01", "2012-09-30")),
        ("next_year", span("2013-01-01", "2013-12-31")),
        ("prior_year", span("2011-01-01", "2011-12-31")),
        ("this_week", span("2012-07-16", "2012-07-22")),
        ("last_week", span("2012-07-09", "2012-07-15")),
        ("this_biweek", span("2012-07-16", "2012-07-29")),
        ("last_biweek", span("2012-07-02", "2012-07-15")),
        ("this_semimonth", span("2012-07-16", "2012-07-31")),
        ("last semi-month", span("2012-07-01", "2012-07-15")),
        ("this_bimonth", span("2012-07-01", "2012-08-31")),
        ("previous_bimonth", span("2012-05-01", "2012-06-30")),
        ("this_half", span("2012-07-01", "2012-12-31")),
        ("last_half", span("2012-01-01", "2012-06-30")),
        ("previous_day", span("2012-07-17", "2012-07-17")),
    ])
    def test_relative(self, asof, text, expected):
        assert resolve_spec_span(text, asof=asof) == expected

    def test_last_month_across_year_end(self):
        assert resolve_spec_span("last_month", asof=date(2013, 1, 10)) == span("2012-12-01", "2012-12-31")

    @pytest.mark.parametrize("text", ["last_fortnight", "this_irregular"])
    def test_unknown_unit_raises(self, asof, text):
        with pytest.raises(InvalidInputError, match="unintelligible"):
            resolve_spec_span(text, asof=asof)


class TestAbsolute:
    """Test absolute date, week, month, quarter, half and year specs"""

    @pytest.mark.parametrize("text,expected", [
        ("2014-11-05", span("2014-11-05", "2014-11-05")),
        ("20141105", span("2014-11-05", "2014-11-05")),
        ("2010-05-I", span("2010-05-01", "2010-05-15")),
        ("2010-05-II", span("2010-05-16", "2010-05-31")),
        ("2012-W5", span("2012-01-30", "2012-02-05")),
        ("2013-14W", span("2013-04-01", "2013-04-07")),
        ("W02 2025", span("2025-01-06", "2025-01-12")),
        ("2015-W53", span("2015-12-28", "2016-01-03")),
        ("2015-3Q", span("2015-07-01", "2015-09-30")),
        ("Q3 2015", span("2015-07-01", "2015-09-30")),
        ("2015Q3", span("2015-07-01", "2015-09-30")),
        ("2015-1H", span("2015-01-01", "2015-06-30")),
        ("H2 2015", span("2015-07-01", "2015-12-31")),
        ("2014-11", span("2014-11-01", "2014-11-30")),
        ("2012-2", span("2012-02-01", "2012-02-29")),
        ("Nov 2014", span("2014-11-01", "2014-11-30")),
        ("2014", span("2014-01-01", "2014-12-31")),
        ("FY 2014", span("2014-01-01", "2014-12-31")),
    ])
    def test_absolute(self, asof, text, expected):
        assert resolve_spec_span(text, asof=asof) == expected

    def test_year_less_quarter_and_half_use_asof_year(self, asof):
        assert resolve_spec_span("3Q", asof=asof) == span("2012-07-01", "2012-09-30")
        assert resolve_spec_span("H1", asof=asof) == span("2012-01-01", "2012-06-30")

    def test_absolute_specs_ignore_asof(self):
        assert resolve_spec_span("2015-3Q", asof=date(1999, 1, 1)) == resolve_spec_span(
            "2015-3Q", asof=date(2030, 6, 1)
        )


class TestInvalid:
    """Test unintelligible and invalid specs"""

    @pytest.mark.parametrize("text", ["bogus", "2014-13", "2015-5Q", "sometime soon", "0000"])
    def test_unintelligible(self, asof, text):
        with pytest.raises(InvalidInputError, match="unintelligible"):
            resolve_spec_span(text, asof=asof)

    def test_impossible_date(self, asof):
        with pytest.raises(InvalidInputError):
            resolve_spec_span("2014-02-30", asof=asof)

    def test_week_out_of_range(self, asof):
        with pytest.raises(InvalidInputError, match="ISO weeks 1 to 52"):
            resolve_spec_span("2014-W53", asof=asof)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_missing(self, asof, text):
        with pytest.raises(InvalidInputError, match="missing"):
            resolve_spec_span(text, asof=asof)


class TestResolveSpec:
    """Test resolving a spec to its start or end date"""

    def test_roles(self, asof):
        assert resolve_spec("2014-11", "from", asof=asof) == date(2014, 11, 1)
        assert resolve_spec("2014-11", "to", asof=asof) == date(2014, 11, 30)
        assert resolve_spec("2014-11", asof=asof) == date(2014, 11, 1)

    def test_bad_role_raises(self, asof):
        with pytest.raises(InvalidInputError, match="role"):
            resolve_spec("2014-11", "during", asof=asof)

    def test_environment_asof(self, asof_env):
        assert resolve_spec("today", "from") == asof_env
        assert resolve_spec("this_month", "to") == date(2014, 12, 31)

    def test_explicit_asof_beats_environment(self, asof_env, asof):
        assert resolve_spec("today", "from", asof=asof) == asof


class TestBadEnvironmentAsOf:
    """Test that an unparseable DAYPERIOD_ASOF only breaks specs needing an as-of date"""

    @pytest.fixture(autouse=True)
    def bad_asof_env(self, monkeypatch):
        monkeypatch.setenv(ASOF_ENV_VAR, "garbage")

    @pytest.mark.parametrize("text,expected", [
        ("2014", span("2014-01-01", "2014-12-31")),
        ("2014-11-05", span("2014-11-05", "2014-11-05")),
        ("2015-3Q", span("2015-07-01", "2015-09-30")),
        ("2012-W5", span("2012-01-30", "2012-02-05")),
        ("forever", (BOT, EOT)),
    ])
    def test_absolute_specs_resolve(self, text, expected):
        assert resolve_spec_span(text) == expected

    def test_never_resolves(self):
        assert resolve_spec_span("never") is None

    @pytest.mark.parametrize("text", ["today", "last_month", "3Q"])
    def test_as_of_specs_raise(self, text):
        with pytest.raises(InvalidInputError):
            resolve_spec_span(text)

    def test_explicit_asof_still_works(self, asof):
        assert resolve_spec_span("today", asof=asof) == span("2012-07-18", "2012-07-18")
