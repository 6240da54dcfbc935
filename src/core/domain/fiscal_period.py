"""
FiscalPeriod — фискальный месяц календаря 4-4-5

Immutable Pydantic модель: год ISO, номер месяца, квартал и включительные
границы [start, end]. Сериализуется в контракт fiscal_period.
"""

from datetime import date, timedelta
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

# Допустимые длины фискального месяца (дни): 4, 5 и 6 недель
PERIOD_LENGTHS_DAYS: Final[frozenset[int]] = frozenset({28, 35, 42})


class FiscalPeriod(BaseModel):
    """
    Фискальный месяц.

    Immutable модель (frozen=True):
    - fiscal_year: год ISO, к которому относится месяц
    - month: 1..12, либо 13 — 6-недельный декабрь 53-недельного года
    - quarter: 1..4, согласован с month
    - start / end: первый и последний день месяца (включительно)
    """

    fiscal_year: int = Field(..., ge=1, le=9999, description="Год ISO")
    month: int = Field(..., ge=1, le=13, description="Фискальный месяц")
    quarter: int = Field(..., ge=1, le=4, description="Фискальный квартал")
    start: date = Field(..., description="Первый день месяца (понедельник)")
    end: date = Field(..., description="Последний день месяца (включительно)")

    model_config = {"frozen": True}

    @field_validator("start")
    @classmethod
    def validate_start_is_monday(cls, v: date) -> date:
        """Фискальный месяц всегда начинается с понедельника"""
        if v.weekday() != 0:
            raise ValueError(f"start {v.isoformat()} must be a Monday")
        return v

    @field_validator("end")
    @classmethod
    def validate_end_matches_length(cls, v: date, info) -> date:
        """Проверка, что [start, end] — 4, 5 или 6 полных недель"""
        if "start" in info.data:
            start = info.data["start"]
            length = (v - start).days + 1
            if length not in PERIOD_LENGTHS_DAYS:
                raise ValueError(
                    f"period [{start.isoformat()}, {v.isoformat()}] spans "
                    f"{length} days, expected one of {sorted(PERIOD_LENGTHS_DAYS)}"
                )
        return v

    @field_validator("quarter")
    @classmethod
    def validate_quarter_matches_month(cls, v: int, info) -> int:
        if "month" in info.data:
            expected = quarter_for_month(info.data["month"])
            if v != expected:
                raise ValueError(
                    f"quarter {v} does not match month {info.data['month']} "
                    f"(expected {expected})"
                )
        return v

    @classmethod
    def from_bounds(cls, fiscal_year: int, month: int, start: date, end: date) -> "FiscalPeriod":
        """Построение периода из границ; квартал выводится из месяца."""
        return cls(
            fiscal_year=fiscal_year,
            month=month,
            quarter=quarter_for_month(month),
            start=_as_date(start),
            end=_as_date(end),
        )

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    @property
    def weeks(self) -> int:
        return self.days // 7

    def contains(self, d: date) -> bool:
        """Попадает ли d в [start, end]"""
        return self.start <= _as_date(d) <= self.end

    def dates(self) -> list[date]:
        """Все дни периода по порядку."""
        return [self.start + timedelta(days=i) for i in range(self.days)]

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в контракт fiscal_period.

        Returns:
            dict с датами в формате ISO (YYYY-MM-DD)
        """
        return {
            "fiscal_year": self.fiscal_year,
            "month": self.month,
            "quarter": self.quarter,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "days": self.days,
        }


def quarter_for_month(month: int) -> int:
    """Квартал фискального месяца; месяц 13 относится к Q4."""
    return min((month - 1) // 3 + 1, 4)


def _as_date(d: date) -> date:
    # datetime — подкласс date; для сравнения и сериализации нужна чистая дата
    if type(d) is date:
        return d
    return date(d.year, d.month, d.day)
