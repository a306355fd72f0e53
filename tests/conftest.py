"""Pytest fixtures and configuration."""

import logging
from datetime import date

import pytest


# Reference "today" used by the issue and expiry calculations in the tests
REFERENCE_TODAY = date(2026, 1, 30)


@pytest.fixture
def fixed_clock():
    """Clock pinned to the reference date."""
    return lambda: REFERENCE_TODAY


@pytest.fixture
def make_clock():
    """Factory for clocks pinned to an arbitrary date."""

    def _make(year: int, month: int, day: int):
        today = date(year, month, day)
        return lambda: today

    return _make


@pytest.fixture
def valid_national_ids():
    """Structurally valid National IDs (checksum not considered)."""
    return {
        "cairo_2001": "30101010123456",        # 2001-01-01, Cairo, serial 2345, male
        "dakahlia_2001": "30101011234567",     # 2001-01-01, Dakahlia, serial 3456, female
        "cairo_1990": "29001010123452",        # 1990-01-01, Cairo
        "cairo_2005": "30501010123459",        # 2005-01-01, issued 2021
        "south_sinai_2015": "31506283500098",  # 2015-06-28, South Sinai
        "foreign_2001": "30101018812345",      # 2001-01-01, born abroad
        "leap_day_2004": "30402290123456",     # 2004-02-29
    }


@pytest.fixture
def invalid_national_ids():
    """Rejected National IDs keyed by the reason they fail."""
    return {
        "too_short": "123",
        "letters": "3010101012345A",
        "unknown_governorate": "30101019999999",
        "february_31": "30102310123456",
        "month_13": "30113010123456",
        "century_1": "10101010123456",
        "non_leap_february_29": "30102290123456",
    }


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
