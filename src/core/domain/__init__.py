"""
Domain models and value objects.

Contains the FiscalPeriod value model of the 4-4-5 calendar.
"""

from src.core.domain.fiscal_period import (
    PERIOD_LENGTHS_DAYS,
    FiscalPeriod,
    quarter_for_month,
)

__all__ = [
    "PERIOD_LENGTHS_DAYS",
    "FiscalPeriod",
    "quarter_for_month",
]
