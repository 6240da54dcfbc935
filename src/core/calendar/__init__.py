"""
Calendar primitives: поиск дней недели и фискальный календарь 4-4-5.
"""

# Weekdays
from src.core.calendar.weekdays import (
    DAYS_PER_WEEK,
    Direction,
    closest_weekday,
    next_weekday,
    nth_weekday,
    previous_weekday,
)

# Fiscal 4-4-5
from src.core.calendar.fiscal_445 import (
    DAYS_BEFORE_MONTH,
    LEAP_MONTH,
    LEAP_MONTH_DAYS,
    LONG_MONTH_DAYS,
    SHORT_MONTH_DAYS,
    WEEK_TO_MONTH,
    fiscal_bounds,
    fiscal_month,
    fiscal_period,
    fiscal_quarter,
    fiscal_year_periods,
    iso_year_start,
    month_bounds,
    month_length_days,
    weeks_in_iso_year,
)

__all__ = [
    # Weekdays — Constants
    "DAYS_PER_WEEK",
    # Weekdays — Types
    "Direction",
    # Weekdays — Functions
    "nth_weekday",
    "next_weekday",
    "previous_weekday",
    "closest_weekday",
    # Fiscal 4-4-5 — Constants
    "DAYS_BEFORE_MONTH",
    "LEAP_MONTH",
    "LEAP_MONTH_DAYS",
    "LONG_MONTH_DAYS",
    "SHORT_MONTH_DAYS",
    "WEEK_TO_MONTH",
    # Fiscal 4-4-5 — Functions
    "fiscal_month",
    "fiscal_quarter",
    "fiscal_bounds",
    "fiscal_period",
    "fiscal_year_periods",
    "iso_year_start",
    "month_bounds",
    "month_length_days",
    "weeks_in_iso_year",
]
