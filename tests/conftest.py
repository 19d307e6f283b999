"""Shared test fixtures and utilities for dayperiod tests."""

import pytest
from datetime import date

from dayperiod.config import ASOF_ENV_VAR
from dayperiod.period.periodidentity import Period


@pytest.fixture(autouse=True)
def no_asof_env(monkeypatch):
    """Keep a DAYPERIOD_ASOF set in the developer's shell out of every test."""
    monkeypatch.delenv(ASOF_ENV_VAR, raising=False)


@pytest.fixture
def asof():
    """Fixed reference date for relative specs: Wednesday 2012-07-18."""
    return date(2012, 7, 18)


@pytest.fixture
def asof_env(monkeypatch):
    """Fixture that sets DAYPERIOD_ASOF and returns the date it denotes.

    Example:
        def test_env_asof(asof_env):
            assert asof_date() == asof_env
    """
    monkeypatch.setenv(ASOF_ENV_VAR, "2014-12-10")
    return date(2014, 12, 10)


@pytest.fixture
def q2_2015():
    """Second calendar quarter of 2015."""
    return Period(date(2015, 4, 1), date(2015, 6, 30))


@pytest.fixture
def sample_periods():
    """Fixture providing periods of each calendar kind, keyed by kind name.

    Returns a dict of kind name to a Period that is exactly one chunk of
    that kind.
    """
    return {
        "day": Period(date(2013, 11, 5), date(2013, 11, 5)),
        "week": Period(date(2013, 11, 4), date(2013, 11, 10)),
        "biweek": Period(date(2013, 11, 4), date(2013, 11, 17)),
        "semimonth": Period(date(2013, 11, 16), date(2013, 11, 30)),
        "month": Period(date(2013, 11, 1), date(2013, 11, 30)),
        "bimonth": Period(date(2013, 11, 1), date(2013, 12, 31)),
        "quarter": Period(date(2013, 10, 1), date(2013, 12, 31)),
        "half": Period(date(2013, 7, 1), date(2013, 12, 31)),
        "year": Period(date(2013, 1, 1), date(2013, 12, 31)),
    }
