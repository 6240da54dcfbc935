"""
Fiscal 4-4-5 — бухгалтерский календарь поверх недель ISO 8601

Год ISO делится на 4 квартала по 13 недель, каждый квартал — на три
фискальных месяца по 4, 4 и 5 недель. В годах ISO с 53 неделями последний
месяц заменяется синтетическим 13-м месяцем длиной 6 недель.

Модуль предоставляет:
- fiscal_month: номер фискального месяца (1..13) по неделе ISO
- fiscal_quarter: номер квартала по неделе ISO
- fiscal_bounds: границы фискального месяца [start, end] (включительно)
- fiscal_period / fiscal_year_periods: те же данные в виде FiscalPeriod

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблицы WEEK_TO_MONTH и DAYS_BEFORE_MONTH — константы, не изменяются
2. Месяцы 1..12 идут встык: end(m) + 1 день == start(m + 1)
3. Месяц с month % 3 == 0 длится 35 дней, месяц 13 — 42 дня, остальные — 28
"""

from calendar import MONDAY
from datetime import date, datetime, timedelta
from typing import Final

from src.core.calendar.weekdays import DAYS_PER_WEEK, DateT, Direction, nth_weekday
from src.core.domain.fiscal_period import FiscalPeriod

# =============================================================================
# ПАРАМЕТРЫ СХЕМЫ 4-4-5
# =============================================================================

WEEKS_PER_QUARTER: Final[int] = 13
MONTHS_PER_QUARTER: Final[int] = 3

# 9 из 12 месяцев — 4 недели
SHORT_MONTH_DAYS: Final[int] = 4 * DAYS_PER_WEEK
# Каждый третий месяц квартала — 5 недель
LONG_MONTH_DAYS: Final[int] = 5 * DAYS_PER_WEEK
# В годах с 53 неделями декабрь — 6 недель
LEAP_MONTH_DAYS: Final[int] = 6 * DAYS_PER_WEEK

# Синтетический декабрь для недели 53
LEAP_MONTH: Final[int] = 13
LEAP_WEEK: Final[int] = 53


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

# WEEK_TO_MONTH[iso_week] → фискальный месяц; индекс 0 не используется
WEEK_TO_MONTH: Final[tuple[int, ...]] = (
    0,
    # Q1
    1, 1, 1, 1,  # январь
    2, 2, 2, 2,  # февраль
    3, 3, 3, 3, 3,  # март
    # Q2
    4, 4, 4, 4,  # апрель
    5, 5, 5, 5,  # май
    6, 6, 6, 6, 6,  # июнь
    # Q3
    7, 7, 7, 7,  # июль
    8, 8, 8, 8,  # август
    9, 9, 9, 9, 9,  # сентябрь
    # Q4
    10, 10, 10, 10,  # октябрь
    11, 11, 11, 11,  # ноябрь
    12, 12, 12, 12, 12,  # декабрь
    # Високосная неделя
    13,
)

# DAYS_BEFORE_MONTH[m] — дней от начала года ISO до первого дня месяца m.
# Месяц 13 замещает декабрь и начинается в тот же день.
DAYS_BEFORE_MONTH: Final[tuple[int, ...]] = (
    0,
    0,
    28,
    28 + 28,
    28 + 28 + 35,
    28 + 28 + 35 + 28,
    28 + 28 + 35 + 28 + 28,
    28 + 28 + 35 + 28 + 28 + 35,
    28 + 28 + 35 + 28 + 28 + 35 + 28,
    28 + 28 + 35 + 28 + 28 + 35 + 28 + 28,
    28 + 28 + 35 + 28 + 28 + 35 + 28 + 28 + 35,
    28 + 28 + 35 + 28 + 28 + 35 + 28 + 28 + 35 + 28,
    28 + 28 + 35 + 28 + 28 + 35 + 28 + 28 + 35 + 28 + 28,
    28 + 28 + 35 + 28 + 28 + 35 + 28 + 28 + 35 + 28 + 28,
)


# =============================================================================
# НЕДЕЛИ ISO
# =============================================================================


def weeks_in_iso_year(year: int) -> int:
    """
    Количество недель в году ISO (52 или 53).

    28 декабря всегда лежит в последней неделе года ISO.
    """
    return date(year, 12, 28).isocalendar()[1]


def iso_year_start(year: int, like: date | None = None) -> date:
    """
    Понедельник недели 1 года ISO.

    Неделя, содержащая 4 января, — первая неделя года ISO (формально —
    неделя с первым четвергом года). Её понедельник — ближайший
    понедельник не позже 4 января.

    Args:
        year: Год ISO
        like: Если передан datetime, результат — datetime в полночь
              в его tzinfo; иначе — date

    Returns:
        Первый день года ISO
    """
    if isinstance(like, datetime):
        jan4: date = datetime(year, 1, 4, tzinfo=like.tzinfo)
    else:
        jan4 = date(year, 1, 4)
    return nth_weekday(jan4, MONDAY, 0, Direction.BACKWARD)


# =============================================================================
# МЕСЯЦ / КВАРТАЛ / ГРАНИЦЫ
# =============================================================================


def fiscal_month(d: date) -> int:
    """
    Номер фискального месяца (1..13) по схеме 4-4-5.

    Например, в 2017 году 2 января (неделя 01) — месяц 1,
    27 февраля (неделя 09) — месяц 3. Неделя 53 — месяц 13.
    """
    _, week, _ = d.isocalendar()
    return WEEK_TO_MONTH[week]


def fiscal_quarter(d: date) -> int:
    """
    Квартал по схеме 4-4-5: iso_week // 13 + 1.

    Формула исходит из 13-недельных кварталов без поправки на нумерацию
    с единицы: недели 13, 26 и 39 попадают в следующий квартал, а недели
    52 и 53 дают квартал 5. Квартал, согласованный с месяцем, — в
    FiscalPeriod.quarter.
    """
    _, week, _ = d.isocalendar()
    return week // WEEKS_PER_QUARTER + 1


def month_length_days(month: int) -> int:
    """Длина фискального месяца в днях: 28, 35 (month % 3 == 0) или 42 (month 13)."""
    if month == LEAP_MONTH:
        return LEAP_MONTH_DAYS
    if month % MONTHS_PER_QUARTER == 0:
        return LONG_MONTH_DAYS
    return SHORT_MONTH_DAYS


def month_bounds(year: int, month: int, like: date | None = None) -> tuple[date, date]:
    """
    Границы фискального месяца month года ISO year.

    Raises:
        ValueError: Если month вне [1, 13]
    """
    if not 1 <= month <= LEAP_MONTH:
        raise ValueError(f"Fiscal month must be in [1, {LEAP_MONTH}], got {month}")

    start = iso_year_start(year, like) + timedelta(days=DAYS_BEFORE_MONTH[month])
    # Границы включительные: [start, end]
    end = start + timedelta(days=month_length_days(month) - 1)
    return start, end


def fiscal_bounds(d: DateT) -> tuple[DateT, DateT]:
    """
    Первый и последний день фискального месяца, содержащего d.

    Год берётся из isocalendar(): для дат 29-31 декабря, попавших в неделю 1
    следующего года, и для дат 1-3 января из недели 52/53 прошлого года
    границы относятся к году ISO.

    Returns:
        (start, end) — включительные границы того же типа, что и d;
        для datetime — полночь в tzinfo исходной даты
    """
    year, _, _ = d.isocalendar()
    return month_bounds(year, fiscal_month(d), like=d)


def fiscal_period(d: date) -> FiscalPeriod:
    """Фискальный месяц, содержащий d, в виде FiscalPeriod."""
    year, _, _ = d.isocalendar()
    month = fiscal_month(d)
    start, end = month_bounds(year, month)
    return FiscalPeriod.from_bounds(year, month, start, end)


def fiscal_year_periods(year: int) -> list[FiscalPeriod]:
    """
    Все фискальные месяцы года ISO year, по порядку.

    Для 52-недельного года — месяцы 1..12. Для 53-недельного — месяцы 1..11
    и 6-недельный месяц 13 вместо декабря. Периоды покрывают год ISO
    без пропусков и пересечений.
    """
    months = list(range(1, 12 + 1))
    if weeks_in_iso_year(year) == LEAP_WEEK:
        months[-1] = LEAP_MONTH

    periods = []
    for month in months:
        start, end = month_bounds(year, month)
        periods.append(FiscalPeriod.from_bounds(year, month, start, end))
    return periods
