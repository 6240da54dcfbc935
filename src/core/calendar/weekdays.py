"""
Weekdays — поиск n-го дня недели относительно опорной даты

Модуль вычисляет дату n-го вхождения заданного дня недели, двигаясь
вперёд, назад или к ближайшему вхождению:
- nth_weekday: базовая операция (смещение по модулю 7 + свёртка n в недели)
- next_weekday / previous_weekday / closest_weekday: тонкие обёртки

Дни недели нумеруются как в datetime.date.weekday(): MONDAY = 0 ... SUNDAY = 6
(константы calendar.MONDAY и т.д.).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. nth_weekday(d, w, n, *).weekday() == w для любых d, w и n >= 0
2. n == 0 и d.weekday() == w → возвращается d без изменений
3. FORWARD, n >= 1 → результат строго позже d
4. BACKWARD, n >= 1 → результат строго раньше d
5. n < 0 → d возвращается без изменений (не ошибка)

Арифметика по датам — календарная (wall-clock): для aware datetime
tzinfo сохраняется, переход на летнее время не сдвигает дату.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Final, TypeVar

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DAYS_PER_WEEK: Final[int] = 7

# Допустимый диапазон номеров дней недели (calendar.MONDAY .. calendar.SUNDAY)
WEEKDAY_MIN: Final[int] = 0
WEEKDAY_MAX: Final[int] = 6

# date или datetime; результат имеет тот же тип, что и вход
DateT = TypeVar("DateT", bound=date)


# =============================================================================
# ТИПЫ
# =============================================================================


class Direction(str, Enum):
    """Направление поиска дня недели"""

    # К концу года
    FORWARD = "forward"
    # К началу года
    BACKWARD = "backward"
    # К ближайшему вхождению (при равенстве — вперёд)
    EITHER = "either"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _rem(value: int, modulus: int) -> int:
    """
    Остаток со знаком делимого (усечённое деление).

    В отличие от оператора %, результат имеет знак value:
        _rem(-9, 7) == -2, тогда как -9 % 7 == 5
    """
    result = abs(value) % modulus
    return -result if value < 0 else result


def _validate_weekday(weekday: int) -> None:
    if not WEEKDAY_MIN <= weekday <= WEEKDAY_MAX:
        raise ValueError(
            f"weekday must be in [{WEEKDAY_MIN}, {WEEKDAY_MAX}], got {weekday}"
        )


# =============================================================================
# ПОИСК ДНЯ НЕДЕЛИ
# =============================================================================


def nth_weekday(
    d: DateT,
    weekday: int,
    n: int,
    direction: Direction = Direction.FORWARD,
) -> DateT:
    """
    n-е вхождение дня недели weekday, начиная с d.

    Если d уже приходится на weekday:
        - BACKWARD: d - 7*n дней
        - FORWARD / EITHER: d + 7*n дней (для EITHER осмысленного выбора нет,
          поэтому движемся вперёд)
        - n == 0: d без изменений

    Иначе сырое смещение incr = weekday - d.weekday() (от -6 до 6, не ноль):
        - FORWARD: incr + 7, остаток по модулю 7 (1..6), плюс (n-1) недель вперёд
        - BACKWARD: incr - 7, остаток со знаком делимого (-6..-1),
          плюс (n-1) недель назад
        - EITHER: из двух кандидатов выбирается меньший по модулю
          (при равенстве — вперёд), недели добавляются в сторону кандидата

    При n == 0 и n == 1 в общем случае результат совпадает: ближайшее
    вхождение в заданном направлении, но никогда не сама d.

    Args:
        d: Опорная дата (date или datetime, naive или aware)
        weekday: День недели, 0 (понедельник) .. 6 (воскресенье)
        n: Количество вхождений; n < 0 возвращает d без изменений
        direction: Направление поиска (default: FORWARD)

    Returns:
        Дата того же типа, что и d, с weekday() == weekday

    Raises:
        ValueError: Если weekday вне [0, 6] или direction не Direction

    Examples:
        >>> nth_weekday(date(2017, 1, 4), calendar.MONDAY, 1, Direction.FORWARD)
        datetime.date(2017, 1, 9)
        >>> nth_weekday(date(2017, 1, 4), calendar.MONDAY, 1, Direction.BACKWARD)
        datetime.date(2017, 1, 2)
        >>> nth_weekday(date(2017, 1, 2), calendar.MONDAY, 0, Direction.BACKWARD)
        datetime.date(2017, 1, 2)
    """
    _validate_weekday(weekday)
    if not isinstance(direction, Direction):
        raise ValueError(f"direction must be a Direction, got {direction!r}")

    if n < 0:
        return d

    current = d.weekday()
    if current == weekday:
        if direction == Direction.BACKWARD:
            return d + timedelta(days=-DAYS_PER_WEEK * n)
        return d + timedelta(days=DAYS_PER_WEEK * n)

    incr = weekday - current

    if direction == Direction.FORWARD:
        incr = _rem(incr + DAYS_PER_WEEK, DAYS_PER_WEEK)
        sign = 1
    elif direction == Direction.BACKWARD:
        incr = _rem(incr - DAYS_PER_WEEK, DAYS_PER_WEEK)
        sign = -1
    else:
        ahead = _rem(incr + DAYS_PER_WEEK, DAYS_PER_WEEK)
        behind = _rem(incr - DAYS_PER_WEEK, DAYS_PER_WEEK)
        if abs(ahead) <= abs(behind):
            incr, sign = ahead, 1
        else:
            incr, sign = behind, -1

    # Первое вхождение уже учтено в incr
    weeks = (n - 1) * DAYS_PER_WEEK * sign if n > 0 else 0

    return d + timedelta(days=incr + weeks)


def next_weekday(d: DateT, weekday: int) -> DateT:
    """Следующее вхождение weekday; сдвигается вперёд, даже если d.weekday() == weekday."""
    return nth_weekday(d, weekday, 1, Direction.FORWARD)


def previous_weekday(d: DateT, weekday: int) -> DateT:
    """
    Вхождение weekday через EITHER с n=1.

    ВНИМАНИЕ: несмотря на имя, функция не отступает назад, когда
    d.weekday() == weekday: в этом случае EITHER движется вперёд на неделю.
    В остальных случаях возвращается ближайшее вхождение (в любую сторону).
    Поведение идентично closest_weekday. Для строгого поиска назад:
    nth_weekday(d, weekday, 1, Direction.BACKWARD).
    """
    return nth_weekday(d, weekday, 1, Direction.EITHER)


def closest_weekday(d: DateT, weekday: int) -> DateT:
    """Ближайшее вхождение weekday; сдвигается на неделю вперёд, если d.weekday() == weekday."""
    return nth_weekday(d, weekday, 1, Direction.EITHER)
