"""
Calendar arithmetic for National ID derived dates.

All functions are pure and take "today" explicitly. Callers that want the
real current date pass ``system_today()``; tests inject a fixed date.

Anniversaries of February 29 fall on March 1 in common years. This applies
to birthdays as well as to issue and expiry dates projected from a leap-day
birth.
"""

from datetime import date
from typing import Callable

# A callable returning the current date, truncated to the day.
Clock = Callable[[], date]

FIRST_ISSUE_AGE = 16
ADULT_AGE = 18

# Cards issued before this year were valid for 5 years, later ones for 7.
VALIDITY_PERIOD_CHANGE_YEAR = 2021
LEGACY_VALIDITY_YEARS = 5
VALIDITY_YEARS = 7


def system_today() -> date:
    """Get today's local date."""
    return date.today()


def project_to_year(anchor: date, year: int) -> date:
    """Move a date to another year, keeping month and day.

    Examples:
        >>> project_to_year(date(2001, 6, 1), 2026)
        datetime.date(2026, 6, 1)
        >>> project_to_year(date(2004, 2, 29), 2025)
        datetime.date(2025, 3, 1)
    """
    try:
        return anchor.replace(year=year)
    except ValueError:
        # February 29 in a common year
        return date(year, 3, 1)


def add_years(start: date, years: int) -> date:
    """Add whole years to a date."""
    return project_to_year(start, start.year + years)


def full_years_between(start: date, end: date) -> int:
    """Count complete years from ``start`` to ``end``.

    The difference in calendar years is reduced by one when the anniversary
    of ``start`` has not yet been reached in ``end``'s year. The result is
    negative when ``end`` is more than a year before ``start``.
    """
    years = end.year - start.year
    if project_to_year(start, end.year) > end:
        years -= 1
    return years


def calculate_age(birth_date: date, today: date) -> int:
    """Age in full years on ``today``."""
    return full_years_between(birth_date, today)


def estimate_issue_date(birth_date: date) -> date:
    """First card issue date, assumed to be the 16th birthday."""
    return add_years(birth_date, FIRST_ISSUE_AGE)


def validity_years_for(issue_date: date) -> int:
    """Validity window for a card issued on ``issue_date``.

    The policy branch depends on the issue year only.
    """
    if issue_date.year < VALIDITY_PERIOD_CHANGE_YEAR:
        return LEGACY_VALIDITY_YEARS
    return VALIDITY_YEARS


def estimate_expiry_date(birth_date: date) -> date:
    """Expiry of the first card: issue date plus its validity window."""
    issue_date = estimate_issue_date(birth_date)
    return add_years(issue_date, validity_years_for(issue_date))


def years_since(start: date, today: date) -> int:
    """Full years elapsed since ``start``, never negative."""
    return max(0, full_years_between(start, today))


def years_until(target: date, today: date) -> int:
    """Signed full years between ``today`` and ``target``.

    Returns the full years remaining while ``target`` has not passed (0 on
    the target date itself), and minus the full years elapsed once it has.

    Examples:
        >>> years_until(date(2028, 1, 1), date(2026, 1, 30))
        1
        >>> years_until(date(2011, 1, 1), date(2026, 1, 30))
        -15
    """
    if today > target:
        return -full_years_between(target, today)

    years = target.year - today.year
    if project_to_year(today, target.year) > target:
        years -= 1
    return years


def is_past(target: date, today: date) -> bool:
    """Strict date comparison: True only after ``target``."""
    return today > target
